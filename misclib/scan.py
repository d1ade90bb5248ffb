# misclib/scan.py
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
Module contains "scans", i. e. running folds: the results of

    functools.reduce(combine, p, seed)

for each prefix p of a sequence, in order from shortest to longest. For
example the scan of [1, 2, 3, 4, 5] with seed 0 and addition as the
combining function is [0, 1, 3, 6, 10, 15].

'scan' builds the whole list at once. 'lazyscan' produces one result per
element pulled from the source, which makes it possible to scan endless
sources and to chain the scan with other iterators.

The combining function must not depend on hidden mutable state since the
results may be reused by the caller.
"""
# ------------------------------------------------------------------------------

def scan(seed, sequence, combine):
    """
    Eager scan of a finite sequence.

    Arguments:
    ----------
    seed        the initial value of the fold (element 0 of the output)

    sequence    any finite iterable

    combine     function (accumulated, element) -> accumulated

    Outputs:
    --------
    A list of length len(sequence) + 1:
    [seed, combine(seed, e0), combine(combine(seed, e0), e1), ...]
    """

    result = [seed]
    for x in sequence:
        result.append(combine(result[-1], x))

    return result

# end of scan

# ------------------------------------------------------------------------------

def lazyscan(seed, combine):
    """
    Returns a factory which, given a base sequence, produces a LazyScan
    over it using 'seed' and 'combine':

        running = lazyscan(0, operator.add)
        list(running(range(1, 6)))       # [0, 1, 3, 6, 10, 15]

    The same factory may be applied to any number of sources.
    """

    def factory(base):
        return LazyScan(seed, base, combine)

    return factory

# end of lazyscan

# ------------------------------------------------------------------------------

class LazyScan:
    """
    Iterator producing the running fold of a source one element at a time.

    The first value produced is always the seed - pulling it costs nothing
    and leaves the source untouched. Each following pull takes exactly one
    element from the source and applies the combining function once.

    Production stops when the source is exhausted or when the combining
    function returns None, and it stops for good: a LazyScan cannot be
    restarted. A new traversal requires a new instance (use the factory
    returned by 'lazyscan').
    """
# ------------------------------------------------------------------------------

    def __init__(self, seed, base, combine):
        """
        'base' may be any iterable - an iterator is taken from it at once.
        """

        self.current = seed
        self.base    = iter(base)
        self.combine = combine
        self.first   = True     # The seed has not yet been passed through
        self.stopped = False

    # end of __init__

# ------------------------------------------------------------------------------

    def __iter__(self):

        return self

    # end of __iter__

# ------------------------------------------------------------------------------

    def __next__(self):
        """
        Produces the next accumulated value or raises StopIteration.
        """

        if self.stopped:
            raise StopIteration

        if self.first:
            self.first = False
            return self.current

        try:
            element = next(self.base)
        except StopIteration:
            self._stop()
            raise

        accumulated = self.combine(self.current, element)
        if accumulated is None:
            self._stop()
            raise StopIteration

        self.current = accumulated
        return accumulated

    # end of __next__

# ------------------------------------------------------------------------------

    def _stop(self):

        # Terminal state - the accumulated value is absent from now on
        self.stopped = True
        self.current = None
        self.base    = None

    # end of _stop

# ------------------------------------------------------------------------------

# end of LazyScan

# ------------------------------------------------------------------------------
