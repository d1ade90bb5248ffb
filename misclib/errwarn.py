# misclib/errwarn.py
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
Module contains the diagnostics of the package: 'warn' for conditions that
are reported but not fatal (an integral that did not converge within its
budget, for instance) and 'Error' for conditions that are.
"""
# ------------------------------------------------------------------------------

WARNPREFIX = "\nUserWarning: "

# ------------------------------------------------------------------------------

def warn(string):     # Does not belong to the Error class!
    """
    Prints a warning to stdout made up of the user-provided input string
    preceded by the text "UserWarning: " and closed with a "!". The
    computation that issued the warning carries on and returns its result.

    Arguments:
    ----------
    string    text of the warning, normally naming the calling function

    Outputs:
    --------
    The full warning text as printed (a string)
    """

    warning  =  WARNPREFIX + string + "!"
    print(warning)

    return warning

# end of warn

# ------------------------------------------------------------------------------

class Error(Exception):
    """
    Raised for run-time conditions that make a computation meaningless but
    that are not violations of a function's preconditions (those are caught
    by assertions). Raise it by: raise Error(string)
    """
# ------------------------------------------------------------------------------

    def __init__(self, string):
        """
        'string' is a description of the error naming the function where
        it was detected.
        """

        Exception.__init__(self, string)
        self.string = string

    # end of __init__

# ------------------------------------------------------------------------------

    def __str__(self):

        return repr(self.string)

    # end of __str__

# ------------------------------------------------------------------------------

# end of Error

# ------------------------------------------------------------------------------
