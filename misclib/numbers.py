# misclib/numbers.py
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
Module contains predicates for checking the integer arguments (iteration
counts and the like) handed to the functions of the package.
"""
# ------------------------------------------------------------------------------

def is_integer(x):
    """
    Logical function. Returns 'True' if argument is an integer number,
    'False' otherwise. Booleans are not accepted as integers here even
    though Python lets bool inherit from int.
    """

    return isinstance(x, int) and not isinstance(x, bool)

# end of is_integer

# ------------------------------------------------------------------------------

def is_posinteger(x):
    """
    Logical function. Returns 'True' if argument is a positive integer,
    'False' otherwise.
    """

    return is_integer(x) and x > 0

# end of is_posinteger

# ------------------------------------------------------------------------------
