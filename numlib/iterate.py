# numlib/iterate.py
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
Module contains a generic driver for iterative numerical procedures. The
procedure is written as a step function taking one state to the next, the
states are generated lazily by 'iterate' and 'until2' pulls them until two
consecutive states satisfy a success criterion or the iteration budget is
spent. The same driver may be used for Romberg integration, fixed-point
iteration, Newton's method etc.
"""
# ------------------------------------------------------------------------------

from itertools import repeat

from misclib.scan    import lazyscan
from misclib.numbers import is_posinteger

# ------------------------------------------------------------------------------

def iterate(first, step):
    """
    Returns an iterator over first, step(first), step(step(first)), ...
    The iterator stops - permanently - as soon as 'step' returns None,
    which is how a step function signals that it cannot proceed.
    """

    return lazyscan(first, lambda state, _: step(state))(repeat(None))

# end of iterate

# ------------------------------------------------------------------------------

class Termination:
    """
    The outcome of 'until2': how the iteration ended ('kind' is one of the
    class constants below), the state it ended with ('value') and the number
    of steps taken beyond the initial state ('niter').
    """

    EXHAUSTEDINPUT = 'exhaustedinput'   # No next state could be produced
    EXCEEDEDMAX    = 'exceededmax'      # Budget spent before success
    SUCCESS        = 'success'
# ------------------------------------------------------------------------------

    def __init__(self, kind, value, niter):

        assert kind in (self.EXHAUSTEDINPUT, self.EXCEEDEDMAX, self.SUCCESS), \
                                    "Unknown kind of termination in Termination!"

        self.kind  = kind
        self.value = value
        self.niter = niter

    # end of __init__

# ------------------------------------------------------------------------------

    def __repr__(self):

        return "Termination(" + repr(self.kind) + ", " + repr(self.value) + \
                                                ", " + str(self.niter) + ")"

    # end of __repr__

# ------------------------------------------------------------------------------

# end of Termination

# ------------------------------------------------------------------------------

def until2(states, success, minniter=1, maxniter=64):
    """
    Pulls states from an iterable until two consecutive states satisfy
    'success', the maximum number of iterations is reached or the iterable
    runs dry - whichever comes first.

    Arguments:
    ----------
    states      iterable of states, normally built using 'iterate'. The
                first state is the initial one and does not count as an
                iteration

    success     logical function success(previous, current)

    minniter    'success' is not called before this many iterations have
                been made, so that two early estimates which accidentally
                happen to be close are not accepted

    maxniter    no more than this number of states are pulled beyond
                the initial one

    Outputs:
    --------
    A Termination carrying the accepted state and the number of iterations
    taken, or None if 'states' did not even produce an initial state.
    """

    assert is_posinteger(minniter), \
        "Minimum number of iterations must be a positive integer in until2!"
    assert is_posinteger(maxniter), \
        "Maximum number of iterations must be a positive integer in until2!"

    states = iter(states)
    try:
        previous = next(states)
    except StopIteration:
        return None

    niter = 0
    for current in states:
        niter += 1
        if niter >= minniter and success(previous, current):
            return Termination(Termination.SUCCESS, current, niter)
        if niter >= maxniter:
            return Termination(Termination.EXCEEDEDMAX, current, niter)
        previous = current

    return Termination(Termination.EXHAUSTEDINPUT, previous, niter)

# end of until2

# ------------------------------------------------------------------------------
