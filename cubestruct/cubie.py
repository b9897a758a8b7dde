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
Defines the cubies of a 3x3 cube and the arrays that hold them.

A cubicle is one of the 8 corner or 12 edge slots of the cube. A cubie
pairs the cubicle a piece currently sits in with its orientation, packed
into a single small integer.

Corner cubicle numbering (viewed from the top, back row first)::

    Top layer      Bottom layer
    C0 ULB  C1 URB   C4 DLB  C5 DRB
    C2 ULF  C3 URF   C6 DLF  C7 DRF

Edge cubicle numbering::

    Top layer   C0 UB   C1 UL   C2 UR   C3 UF
    Middle      C4 BL   C5 BR   C6 FL   C7 FR
    Bottom      C8 DB   C9 DL   C10 DR  C11 DF

Classes:
    Cubicle, CornerCubicle, EdgeCubicle
    Orientation, CornerOrientation, EdgeOrientation
    Cubie, CornerCubie, EdgeCubie
    PieceKind
    CubicleArray
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple, Type
import random


# -------------------------------------------------
# Cubicles
# -------------------------------------------------
class Cubicle(IntEnum):
    """Base of the cubicle enumerations."""

    @classmethod
    def all(cls) -> List[Cubicle]:
        """
        Enumerate every cubicle of this kind.

        :returns: the cubicles in numbering order
        :rtype: List[Cubicle]
        """
        return list(cls)

    def __repr__(self) -> str:
        return self.name


class CornerCubicle(Cubicle):
    """The 8 corner cubicles."""

    C0 = 0
    C1 = 1
    C2 = 2
    C3 = 3
    C4 = 4
    C5 = 5
    C6 = 6
    C7 = 7


class EdgeCubicle(Cubicle):
    """The 12 edge cubicles."""

    C0 = 0
    C1 = 1
    C2 = 2
    C3 = 3
    C4 = 4
    C5 = 5
    C6 = 6
    C7 = 7
    C8 = 8
    C9 = 9
    C10 = 10
    C11 = 11


# -------------------------------------------------
# Orientations
# -------------------------------------------------
class Orientation(IntEnum):
    """
    Base of the orientation enumerations.

    Orientations form a cyclic group: `add` is the modular sum, `inverse`
    returns the orientation that cancels this one and `zero()` is the
    identity (every cubie of a solved cube has orientation zero).
    """

    @classmethod
    def all(cls) -> List[Orientation]:
        """Enumerate every orientation of this kind."""
        return list(cls)

    @classmethod
    def zero(cls) -> Orientation:
        """Return the identity orientation."""
        return cls(0)

    @classmethod
    def count(cls) -> int:
        """Return the number of orientations (the modulus)."""
        return len(cls)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Orientation:
        """
        Draw a uniformly random orientation.

        :param rng: source of randomness, the `random` module if omitted
        :type rng: random.Random, optional
        :returns: a random orientation
        :rtype: Orientation
        """
        rng = rng or random
        return cls(rng.randrange(len(cls)))

    def add(self, other: Orientation) -> Orientation:
        """
        Combine two orientations.

        :param other: orientation applied on top of this one
        :type other: Orientation
        :returns: the modular sum
        :rtype: Orientation
        """
        cls = type(self)
        return cls((int(self) + int(other)) % len(cls))

    def inverse(self) -> Orientation:
        """
        Return the orientation that brings this one back to zero.

        :returns: the additive inverse
        :rtype: Orientation
        """
        cls = type(self)
        return cls(-int(self) % len(cls))

    def __repr__(self) -> str:
        return self.name


class CornerOrientation(Orientation):
    """Twist of a corner cubie."""

    # No twist
    O0 = 0
    # Clockwise twist
    O1 = 1
    # Counterclockwise twist
    O2 = 2


class EdgeOrientation(Orientation):
    """Flip of an edge cubie."""

    # Not flipped
    O0 = 0
    # Flipped
    O1 = 1


# -------------------------------------------------
# Packed cubies
# -------------------------------------------------
class Cubie:
    """
    Permutation and orientation of a single cubie, packed in an int.

    Subclasses define the bit layout in `_pack` and decode the fields with
    lookup tables that cover exactly the valid values, so a corrupted
    packed value can never come back out as a cubicle or orientation.
    """

    __slots__ = ("_state",)

    cubicle_type: Type[Cubicle]
    orientation_type: Type[Orientation]

    def __init__(self, cubicle: Cubicle | int, orientation: Orientation | int) -> None:
        """
        Cubie constructor.

        :param cubicle: cubicle the cubie currently sits in
        :type cubicle: Cubicle or int
        :param orientation: orientation of the cubie in that cubicle
        :type orientation: Orientation or int
        :raises ValueError: if either value is not a member of its enum
        """
        self._state = self._pack(
            self.cubicle_type(cubicle), self.orientation_type(orientation)
        )

    @classmethod
    def new(cls, cubicle: Cubicle | int, orientation: Orientation | int) -> Cubie:
        """Build a cubie from its cubicle and orientation."""
        return cls(cubicle, orientation)

    @staticmethod
    def _pack(cubicle: Cubicle, orientation: Orientation) -> int:
        raise NotImplementedError

    def cubicle(self) -> Cubicle:
        """Return the cubicle this cubie is in."""
        raise NotImplementedError

    def orientation(self) -> Orientation:
        """Return the orientation of this cubie."""
        raise NotImplementedError

    def with_orientation(self, orientation: Orientation | int) -> Cubie:
        """
        Return the same cubie with another orientation.

        :param orientation: the replacement orientation
        :type orientation: Orientation or int
        :returns: a cubie in the same cubicle
        :rtype: Cubie
        """
        return type(self)(self.cubicle(), orientation)

    @property
    def packed(self) -> int:
        """Return the packed integer value."""
        return self._state

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._state))

    def __repr__(self) -> str:
        return "{}({!r}, {!r})".format(
            type(self).__name__, self.cubicle(), self.orientation()
        )


_CORNER_CUBICLES: Tuple[CornerCubicle, ...] = tuple(CornerCubicle)
_CORNER_ORIENTATIONS: Tuple[CornerOrientation, ...] = tuple(CornerOrientation)
_EDGE_CUBICLES: Tuple[EdgeCubicle, ...] = tuple(EdgeCubicle)
_EDGE_ORIENTATIONS: Tuple[EdgeOrientation, ...] = tuple(EdgeOrientation)


class CornerCubie(Cubie):
    """Corner cubie, packed as `orientation << 3 | cubicle`."""

    __slots__ = ()

    cubicle_type = CornerCubicle
    orientation_type = CornerOrientation

    @staticmethod
    def _pack(cubicle: Cubicle, orientation: Orientation) -> int:
        return (int(orientation) << 3) | int(cubicle)

    def cubicle(self) -> CornerCubicle:
        # all 3-bit values are a corner cubicle
        return _CORNER_CUBICLES[self._state & 0b111]

    def orientation(self) -> CornerOrientation:
        return _CORNER_ORIENTATIONS[self._state >> 3]


class EdgeCubie(Cubie):
    """Edge cubie, packed as `cubicle << 1 | orientation`."""

    __slots__ = ()

    cubicle_type = EdgeCubicle
    orientation_type = EdgeOrientation

    @staticmethod
    def _pack(cubicle: Cubicle, orientation: Orientation) -> int:
        return (int(cubicle) << 1) | int(orientation)

    def cubicle(self) -> EdgeCubicle:
        return _EDGE_CUBICLES[self._state >> 1]

    def orientation(self) -> EdgeOrientation:
        # all 1-bit values are an edge orientation
        return _EDGE_ORIENTATIONS[self._state & 1]


# -------------------------------------------------
# Piece kinds and cubicle indexed arrays
# -------------------------------------------------
@dataclass(frozen=True)
class PieceKind:
    """
    Describe one kind of piece (corners or edges).

    Everything that differs between corners and edges for the group
    operations lives here, so the algorithms are written once.
    """

    name: str
    cubicle: Type[Cubicle]
    orientation: Type[Orientation]
    cubie: Type[Cubie]

    @property
    def size(self) -> int:
        """Number of cubicles of this kind."""
        return len(self.cubicle)

    @property
    def modulus(self) -> int:
        """Number of orientations of this kind."""
        return len(self.orientation)

    def solved(self) -> CubicleArray:
        """Return the array where every cubie is home with orientation zero."""
        zero = self.orientation.zero()
        return CubicleArray(self, (self.cubie(c, zero) for c in self.cubicle))

    def __repr__(self) -> str:
        return f"PieceKind({self.name})"


CORNERS = PieceKind("corner", CornerCubicle, CornerOrientation, CornerCubie)
EDGES = PieceKind("edge", EdgeCubicle, EdgeOrientation, EdgeCubie)


class CubicleArray:
    """
    Fixed size array of cubies indexed by home cubicle.

    `array[home]` is the cubie whose home is `home`: its cubicle tells
    where that piece currently is and its orientation how it is twisted.
    """

    __slots__ = ("kind", "_items")

    def __init__(self, kind: PieceKind, items: Iterable[Cubie]) -> None:
        """
        CubicleArray constructor.

        :param kind: the piece kind held by the array
        :type kind: PieceKind
        :param items: one cubie per home cubicle, in home order
        :type items: Iterable[Cubie]
        :raises ValueError: on a wrong length or a cubie of the wrong kind
        """
        items = list(items)
        if len(items) != kind.size:
            raise ValueError(
                f"A {kind.name} array holds {kind.size} cubies, got {len(items)}"
            )
        for item in items:
            if not isinstance(item, kind.cubie):
                raise ValueError(f"{item!r} is not a {kind.cubie.__name__}")
        self.kind = kind
        self._items = items

    def __getitem__(self, home: Cubicle | int) -> Cubie:
        return self._items[home]

    def __setitem__(self, home: Cubicle | int, cubie: Cubie) -> None:
        if not isinstance(cubie, self.kind.cubie):
            raise ValueError(f"{cubie!r} is not a {self.kind.cubie.__name__}")
        self._items[home] = cubie

    def __iter__(self) -> Iterator[Cubie]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubicleArray):
            return NotImplemented
        return self.kind == other.kind and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "CubicleArray({}, {!r})".format(self.kind.name, self._items)

    def copy(self) -> CubicleArray:
        """Return an independent copy of the array."""
        ret = object.__new__(CubicleArray)
        ret.kind = self.kind
        ret._items = list(self._items)
        return ret

    def homes(self) -> List[Cubicle]:
        """Enumerate the home cubicles, in index order."""
        return self.kind.cubicle.all()

    def swap(self, a: Cubicle | int, b: Cubicle | int) -> None:
        """
        Swap the cubies held at homes `a` and `b`.

        :param a: first home cubicle
        :type a: Cubicle or int
        :param b: second home cubicle
        :type b: Cubicle or int
        """
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Randomly permute the cubies between the homes."""
        (rng or random).shuffle(self._items)

    def set_orientation(self, home: Cubicle | int, orientation: Orientation | int) -> None:
        """
        Replace the orientation of the cubie at `home`.

        The cubicle of that cubie is left untouched.

        :param home: home cubicle of the cubie to update
        :type home: Cubicle or int
        :param orientation: the new orientation
        :type orientation: Orientation or int
        """
        self._items[home] = self._items[home].with_orientation(orientation)

    def cubicles(self) -> List[Cubicle]:
        """Return the current cubicle of each cubie, in home order."""
        return [item.cubicle() for item in self._items]

    def total_orientation(self) -> Orientation:
        """Return the sum of every cubie orientation."""
        total = self.kind.orientation.zero()
        for item in self._items:
            total = total.add(item.orientation())
        return total

    def is_bijective(self) -> bool:
        """Check every cubicle holds exactly one cubie."""
        return len(set(self.cubicles())) == self.kind.size
