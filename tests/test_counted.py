# tests/test_counted.py
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
Tests of misclib/counted.py.
"""
# ------------------------------------------------------------------------------

import math

import pytest

from misclib.counted import CountedFunction

# ------------------------------------------------------------------------------

def test_counts_every_call():
    f = CountedFunction(math.sin)
    assert f.count == 0
    for k in range(5):
        assert f(0.1*k) == math.sin(0.1*k)
    assert f.count == 5


def test_count_is_per_instance():
    f = CountedFunction(abs)
    g = CountedFunction(abs)
    f(-1.0)
    f(-2.0)
    g(3.0)
    assert (f.count, g.count) == (2, 1)


def test_counts_when_passed_on_as_a_value():
    f = CountedFunction(lambda x: x*x)
    assert sum(map(f, [1.0, 2.0, 3.0])) == 14.0
    assert f.count == 3


def test_exceptions_from_the_wrapped_function_propagate():
    f = CountedFunction(lambda x: 1.0 / x)
    with pytest.raises(ZeroDivisionError):
        f(0.0)
    assert f.count == 1

# ------------------------------------------------------------------------------
