# numlib/quadrature.py
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
Module contains Romberg integration of functions of one variable.
"""
# ------------------------------------------------------------------------------

from collections import namedtuple

from misclib.counted import CountedFunction
from misclib.scan    import scan
from misclib.numbers import is_posinteger
from misclib.errwarn import warn
from numlib.miscnum  import sumkbn, is_approx
from numlib.iterate  import iterate, until2, Termination

# ------------------------------------------------------------------------------

MINNITER = 3    # Splits made before the estimates may be compared

# One row of the T table: width of the subintervals, the Richardson
# extrapolates of the row (a tuple) and the number of subintervals
RombergState = namedtuple('RombergState', ['dx', 'r', 'n'])

# ------------------------------------------------------------------------------

class ConvergenceValue:
    """
    The result of an iterative computation that carries an estimate even when
    it failed to converge. 'status' is CONVERGED or DIDNOTCONVERGE, 'work'
    is the number of function evaluations made and 'estimate' the final
    value obtained.
    """

    CONVERGED      = 'converged'
    DIDNOTCONVERGE = 'didnotconverge'
# ------------------------------------------------------------------------------

    def __init__(self, status, work, estimate):

        assert status in (self.CONVERGED, self.DIDNOTCONVERGE), \
                            "Unknown status in ConvergenceValue!"

        self.status   = status
        self.work     = work
        self.estimate = estimate

    # end of __init__

# ------------------------------------------------------------------------------

    def converged(self):
        """
        Logical method. Returns 'True' if the computation converged.
        """

        return self.status == self.CONVERGED

    # end of converged

# ------------------------------------------------------------------------------

    def __eq__(self, other):

        if not isinstance(other, ConvergenceValue): return NotImplemented
        return (self.status, self.work, self.estimate) == \
               (other.status, other.work, other.estimate)

    # end of __eq__

# ------------------------------------------------------------------------------

    def __repr__(self):

        return "ConvergenceValue(" + repr(self.status) + ", work=" + \
               str(self.work) + ", estimate=" + repr(self.estimate) + ")"

    # end of __repr__

# ------------------------------------------------------------------------------

# end of ConvergenceValue

# ------------------------------------------------------------------------------

def romberg_start(func, a, b):
    """
    The first row of the T table: a single trapezoid over [a, b].
    """

    dx = b - a
    return RombergState(dx, (0.5 * dx * (func(a)+func(b)),), 1)

# end of romberg_start

# ------------------------------------------------------------------------------

def romberg_step(func, a):
    """
    Returns the function that takes one row of the T table to the next one
    for the integral of 'func' starting at 'a'. Each step halves the width
    of the subintervals and evaluates 'func' only at the new midpoints, the
    ordinates of earlier rows being carried along in the trapezoidal
    estimate r[0]. Row j has j+1 entries:

        r_j[0] = dx_j * sum(f(a + (2i-1)*dx_j), i = 1...n_(j-1)) + r_(j-1)[0]/2

        r_j[i] = (4^i * r_j[i-1] - r_(j-1)[i-1]) / (4^i - 1)

    (cf. Davis-Rabinowitz and Dahlquist-Bjorck-Anderson).
    """

    def step(state):
        dx, prevr, n = state

        dx = 0.5 * dx
        summ = sumkbn(func(a + (2*k - 1)*dx) for k in range(1, n+1))
        r0   = dx*summ + 0.5*prevr[0]

        # Interpolation Richardson style - the power of 4 rides along
        def extrapolate(accum, prevri):
            ri, p4 = accum
            p4 = 4.0 * p4
            return (p4*ri - prevri) / (p4 - 1.0), p4

        row = scan((r0, 1.0), prevr, extrapolate)

        return RombergState(dx, tuple(ri for ri, p4 in row), 2*n)

    return step

# end of romberg_step

# ------------------------------------------------------------------------------

def romberg(func, a, b, maxniter=10, tolerance='strict', caller='caller'):
    """
    Romberg integration of a function of one variable over the interval
    [a, b]: the trapezoidal rule with the subintervals split into halves
    over and over again, combined with Richardson extrapolation. The
    iteration stops when the last entries of two consecutive rows of the
    T table agree within 'tolerance' (a level from numlib.miscnum), but
    not before MINNITER splits have been made.

    NB. If the integral has not converged within 'maxniter' splits, the
    best estimate is returned anyway and a warning is printed to stdout.

    NB. Near a zero estimate the comparison is absolute, so an integral whose
    magnitude is below the absolute tolerance of the level is accepted after
    MINNITER splits whatever its accuracy. Scale such an integrand up (and
    the result down) or pick the tolerance level accordingly.

    Arguments:
    ----------
    func        function of one variable

    a, b        integration limits, a <= b (a == b yields 0.0)

    maxniter    maximum number of consecutive splits of the subintervals
                into halves - at most 2^maxniter + 1 function evaluations
                are made

    tolerance   'strict', 'standard' or 'relaxed'

    caller      name of the program, method or function calling romberg

    Outputs:
    --------
    A ConvergenceValue with the number of function evaluations and the
    integral, or None if the iteration could not be carried on at all
    """

    assert a <= b, "Integration limits must be in increasing order in romberg!"
    assert is_posinteger(maxniter), \
        "Max number of splits must be a positive integer in romberg!"

    func = CountedFunction(func)

    def success(prev, curr):
        return is_approx(curr.r[-1], prev.r[-1], tolerance, maybezero=True)

    states = iterate(romberg_start(func, a, b), romberg_step(func, a))
    quad   = until2(states, success, MINNITER, maxniter)

    if quad is None or quad.kind == Termination.EXHAUSTEDINPUT:
        return None

    estimate = quad.value.r[-1]

    if quad.kind == Termination.EXCEEDEDMAX:
        wtxt1 = "romberg called by " + caller + " failed to converge.\n"
        wtxt2 = "Estimate = " + repr(estimate) + " after " + str(func.count)
        wtxt3 = " function evaluations and " + str(maxniter) + " splits"
        warn(wtxt1+wtxt2+wtxt3)
        return ConvergenceValue(ConvergenceValue.DIDNOTCONVERGE, \
                                func.count, estimate)

    return ConvergenceValue(ConvergenceValue.CONVERGED, func.count, estimate)

# end of romberg

# ------------------------------------------------------------------------------
