# tests/test_miscnum.py
# =============================================================================
#
# This file is part of QuadElements.
# ----------------------------------
#
#  QuadElements is a software package for numerical integration of functions
#  of one variable. It requires Python 3.8 or later versions.
#
#  Copyright (C) 2010  Nils A. Kjellbert
#  E-mail: <info(at)ambinova(dot)se>
#
#  QuadElements is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  QuadElements is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <http://www.gnu.org/licenses/>.
#
# ------------------------------------------------------------------------------
"""
Tests of the compensated summation and the tolerance comparison in
numlib/miscnum.py.
"""
# ------------------------------------------------------------------------------

import math

import pytest

from numlib.miscnum  import sumkbn, is_approx, TOLERANCES
from machdep.machnum import MACHEPS, SQRTMACHEPS, SQRTSQRTME, HALFWAYEPS
from misclib.errwarn import Error

# ------------------------------------------------------------------------------

def test_sumkbn_empty_is_zero():
    assert sumkbn([]) == 0.0


def test_sumkbn_recovers_cancelled_terms():
    values = [1.0, 1.0e100, 1.0, -1.0e100]
    assert sum(values) == 0.0
    assert sumkbn(values) == 2.0


def test_sumkbn_tenths():
    assert sumkbn([0.1]*10) == 1.0


def test_sumkbn_accepts_generators():
    assert sumkbn(float(k) for k in range(101)) == 5050.0


def test_sumkbn_is_correctly_rounded():
    values = [math.sin(k) * 10.0**(k % 7) for k in range(1000)]
    assert sumkbn(values) == math.fsum(values)
    assert sumkbn([1.0e16, 1.0, 1.0]) == 1.0e16 + 2.0
    assert sum([1.0e16, 1.0, 1.0]) == 1.0e16

# ------------------------------------------------------------------------------

def test_epsilons_derive_from_machine_epsilon():
    assert MACHEPS == 2.0**-52
    assert SQRTMACHEPS == 2.0**-26
    assert SQRTSQRTME == 2.0**-13
    assert HALFWAYEPS == 2.0**-39
    assert SQRTMACHEPS*SQRTMACHEPS == MACHEPS


def test_tolerance_levels_are_ordered():
    strict   = TOLERANCES['strict']
    standard = TOLERANCES['standard']
    relaxed  = TOLERANCES['relaxed']
    assert strict[0] < standard[0] < relaxed[0]
    assert strict == (HALFWAYEPS, HALFWAYEPS)


def test_is_approx_fractional():
    assert is_approx(1.0 + 1.0e-13, 1.0)
    assert not is_approx(1.0 + 1.0e-9, 1.0)
    assert is_approx(1.0 + 1.0e-9, 1.0, 'standard')
    assert is_approx(1.0e6 + 1.0e-7, 1.0e6)


def test_is_approx_absolute_near_zero_reference():
    assert is_approx(1.0e-13, 0.0, maybezero=True)
    assert is_approx(-1.0e-13, 1.0e-14, maybezero=True)
    assert not is_approx(1.0e-3, 0.0, maybezero=True)
    assert is_approx(1.0e-5, 0.0, 'relaxed', maybezero=True)


def test_is_approx_large_reference_stays_fractional_with_maybezero():
    assert not is_approx(1.0001, 1.0, maybezero=True)


def test_is_approx_zero_reference_needs_maybezero():
    with pytest.raises(AssertionError):
        is_approx(0.0, 0.0)


def test_is_approx_nan_never_agrees():
    nan = float('nan')
    assert not is_approx(nan, 1.0)
    assert not is_approx(1.0, nan, maybezero=True)
    assert not is_approx(nan, nan, maybezero=True)


def test_is_approx_unknown_level():
    with pytest.raises(Error):
        is_approx(1.0, 1.0, 'sloppy')

# ------------------------------------------------------------------------------
