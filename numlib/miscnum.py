# numlib/miscnum.py
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
Module contains a set of simple functions for numerically related tasks:
compensated summation and comparison of floats within a tolerance.
"""
# ------------------------------------------------------------------------------

from math import fsum

from machdep.machnum import SQRTMACHEPS, SQRTSQRTME, HALFWAYEPS
from misclib.errwarn import Error

# ------------------------------------------------------------------------------

# Tolerance levels for is_approx: name -> (fractional, absolute)
TOLERANCES = { 'strict':   (HALFWAYEPS,  HALFWAYEPS),  \
               'standard': (SQRTMACHEPS, SQRTMACHEPS), \
               'relaxed':  (SQRTSQRTME,  SQRTSQRTME)   }

# ------------------------------------------------------------------------------

def sumkbn(values):
    """
    Sums the floats of an iterable with compensation for the rounding
    errors of the additions (the built-in fsum, which tracks the partial
    sums exactly and so returns the correctly rounded total).

        sumkbn([1.0, 1.0e100, 1.0, -1.0e100])   # 2.0 (sum() gives 0.0)

    Returns 0.0 for an empty input.
    """

    return fsum(values)

# end of sumkbn

# ------------------------------------------------------------------------------

def is_approx(value, reference, tolerance='strict', maybezero=False):
    """
    Logical function. Returns 'True' if 'value' agrees with 'reference'
    within the tolerance level given by name (a key of TOLERANCES),
    'False' otherwise.

    The comparison is fractional:
        abs(value-reference) <= reltol*abs(reference)
    except when 'maybezero' is True and abs(reference) <= abstol, in which
    case it is absolute:
        abs(value-reference) <= abstol
    A fractional comparison against a reference that is exactly zero can
    never succeed, so a zero reference is only accepted if 'maybezero' is
    True. NaN never agrees with anything.
    """

    try:
        reltol, abstol = TOLERANCES[tolerance]
    except KeyError:
        errtxt = "Unknown tolerance level '" + str(tolerance) + "' in is_approx"
        raise Error(errtxt)

    assert maybezero or reference != 0.0, \
                     "Reference must not be zero in is_approx unless maybezero!"

    adiff = abs(value - reference)
    aref  = abs(reference)
    if maybezero and aref <= abstol:
        return adiff <= abstol
    else:
        return adiff <= reltol*aref

# end of is_approx

# ------------------------------------------------------------------------------
