# ========================================
# Copyright 2021 22nd Solutions, LLC
# Copyright 2024 Martin TOUZOT
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR
# OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE
# USE OR OTHER DEALINGS IN THE SOFTWARE.
#
# ========================================
"""
Decompose cubie permutations into transpositions.

The number of transpositions gives the parity of a permutation, which is
how the legality of a CubieCube is checked.

Classes:
    PermutationCycles
Functions:
    perm_2cycles
    permutation_parity
"""
from __future__ import annotations
from typing import Iterator, Tuple

from .cubie import Cubicle, CubicleArray


class PermutationCycles:
    """
    Lazy sequence of the 2-cycles whose composition is a permutation.

    The decomposition repeatedly finds the first home cubicle whose cubie is
    not home, yields `(cubicle of that cubie, home)` and swaps those two
    slots of a private copy of the array. It stops once every cubie is home.

    The iterator consumes its copy, so it can only be walked once; build a
    new one from the original array to start over.
    """

    def __init__(self, cubies: CubicleArray) -> None:
        """
        PermutationCycles constructor.

        :param cubies: corner or edge array to decompose
        :type cubies: CubicleArray
        """
        assert cubies.is_bijective(), f"not a permutation: {cubies!r}"
        self.cubies = cubies.copy()

    def __iter__(self) -> PermutationCycles:
        return self

    def __next__(self) -> Tuple[Cubicle, Cubicle]:
        for home in self.cubies.homes():
            current = self.cubies[home].cubicle()
            if current != home:
                self.cubies.swap(current, home)
                return current, home
        raise StopIteration


def perm_2cycles(cubies: CubicleArray) -> Iterator[Tuple[Cubicle, Cubicle]]:
    """
    Return the transpositions of a corner or edge permutation.

    :param cubies: the array to decompose, left untouched
    :type cubies: CubicleArray
    :returns: a single-pass iterator of `(from, to)` cubicle pairs
    :rtype: Iterator[Tuple[Cubicle, Cubicle]]
    """
    return PermutationCycles(cubies)


def permutation_parity(cubies: CubicleArray) -> int:
    """Return 0 for an even permutation and 1 for an odd one."""
    return sum(1 for _ in PermutationCycles(cubies)) & 1
