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
Rank and unrank the positions of the four UD-slice edges.

The UD-slice edges are the middle layer pieces (homes BL, BR, FL and FR,
edge cubicles C4 to C7). Where they currently sit is a 12-bit mask with
exactly 4 bits set, bit `i` standing for edge cubicle `i`. There are
C(12, 4) = 495 such masks; the rank of a mask is its index among all of
them in ascending numeric order, once the two low nibbles are swapped so
that the middle layer cubicles become the low nibble. A solved cube
therefore ranks to 0.

Both lookup tables are built once, when the module is imported.
"""
from __future__ import annotations
from typing import Tuple
import operator

from .cubie import EdgeCubicle

# Homes of the four UD-slice edges
UDSLICE_HOMES: Tuple[EdgeCubicle, ...] = (
    EdgeCubicle.C4,
    EdgeCubicle.C5,
    EdgeCubicle.C6,
    EdgeCubicle.C7,
)

N_UDSLICE = 495

_MASK_BITS = 12


def _swap_low_nibbles(mask: int) -> int:
    # involution: applying it twice gives the mask back
    return ((mask & 0x00F) << 4) | ((mask >> 4) & 0x00F) | (mask & 0xF00)


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    rank = [-1] * (1 << _MASK_BITS)
    unrank = list()
    for value in range(1 << _MASK_BITS):
        if bin(value).count("1") == 4:
            mask = _swap_low_nibbles(value)
            rank[mask] = len(unrank)
            unrank.append(mask)
    assert len(unrank) == N_UDSLICE
    return tuple(rank), tuple(unrank)


_RANK, _UNRANK = _build_tables()


def udslice_rank(mask: int) -> int:
    """
    Return the coordinate of a UD-slice position mask.

    :param mask: 12-bit mask with exactly 4 bits set
    :type mask: int
    :returns: the rank, between 0 and 494
    :rtype: int
    :raises TypeError: if the mask is not an integer
    :raises ValueError: if the mask is out of range or has not 4 bits set
    """
    mask = operator.index(mask)
    if not 0 <= mask < (1 << _MASK_BITS) or _RANK[mask] < 0:
        raise ValueError(f"Not a UD-slice mask: {mask:#05x}")
    return _RANK[mask]


def udslice_unrank(coord: int) -> int:
    """
    Return the UD-slice position mask of a coordinate.

    :param coord: coordinate between 0 and 494
    :type coord: int
    :returns: a 12-bit mask with exactly 4 bits set
    :rtype: int
    :raises TypeError: if the coordinate is not an integer
    :raises ValueError: if the coordinate is out of range
    """
    coord = operator.index(coord)
    if not 0 <= coord < N_UDSLICE:
        raise ValueError(f"UD-slice coordinate {coord} not in 0..{N_UDSLICE}")
    return _UNRANK[coord]
