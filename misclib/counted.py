# misclib/counted.py
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

class CountedFunction:
    """
    Wraps a function of one variable and counts the number of times it has
    been called. An instance is called exactly like the function it wraps,
    so it can be handed on to any routine expecting the function itself:

        f = CountedFunction(math.sin)
        y = f(0.5)      # y == math.sin(0.5), f.count == 1

    The count is the number of calls made THROUGH THE WRAPPER since the
    instance was created - calls made directly to the wrapped function are
    of course not seen.
    """
# ------------------------------------------------------------------------------

    def __init__(self, func):
        """
        'func' is the function to be wrapped (one float argument).
        """

        self.func  = func
        self.count = 0

    # end of __init__

# ------------------------------------------------------------------------------

    def __call__(self, x):

        self.count += 1
        return self.func(x)

    # end of __call__

# ------------------------------------------------------------------------------

# end of CountedFunction

# ------------------------------------------------------------------------------
