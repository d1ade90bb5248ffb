# machdep/machnum.py
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
File contains the machine-specific epsilon constants that the tolerance
levels of the package are built from. The numbers assume IEEE 754 double
precision, which is what a Python float is on all current platforms.

All the constants below are exact powers of two, so tolerances formed from
them introduce no rounding of their own.
"""
# ------------------------------------------------------------------------------

from math import sqrt

# ------------------------------------------------------------------------------

_X          = 52           # Machine epsilon exponent - multiple of 4 preferred
MACHEPS     = 0.5**_X      # 2.220446049250313080847263336181640625e-016 exactly
SQRTMACHEPS = sqrt(MACHEPS)     # = 0.5**(_X/2) = 1.490116119384765625e-008 exactly
SQRTSQRTME  = sqrt(SQRTMACHEPS) # = 0.5**(_X/4) = 1.220703125e-004 exactly
HALFWAYEPS  = SQRTMACHEPS*SQRTSQRTME # 1.818989403545856475830078125e-12 exactly

# ------------------------------------------------------------------------------
