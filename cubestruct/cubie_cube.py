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
Cube algebra over packed cubies.

A CubieCube is an element of the cube group: for every home cubicle it
records where that piece currently sits and how it is twisted. Cubes are
multiplied with `compose` ("apply self, then rhs"), inverted with
`inverse`, and turned with `apply_move`, which composes with one of the
18 move generators.

Classes:
    CubieCube
Functions:
    move_cube
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple, Union
import logging
import operator
import random

from .cubie import (
    CORNERS,
    EDGES,
    CornerCubicle,
    CornerCubie,
    CubicleArray,
    EdgeCubicle,
    EdgeCubie,
    PieceKind,
)
from .cycles import permutation_parity
from .errors import EmptyCubiclesError
from .moves import Face, Move, Moves
from .udslice import UDSLICE_HOMES, udslice_rank, udslice_unrank

if TYPE_CHECKING:
    from .facelet_cube import FaceletCube

logger = logging.getLogger("cubie_cube")


def _compose(lhs: CubicleArray, rhs: CubicleArray) -> CubicleArray:
    cubie = lhs.kind.cubie
    ret = list()
    for lhs_state in lhs:
        rhs_state = rhs[lhs_state.cubicle()]
        ret.append(
            cubie(
                rhs_state.cubicle(),
                lhs_state.orientation().add(rhs_state.orientation()),
            )
        )
    return CubicleArray(lhs.kind, ret)


def _invert(cubies: CubicleArray) -> CubicleArray:
    ret = cubies.copy()
    for home, current in zip(cubies.homes(), cubies):
        ret[current.cubicle()] = cubies.kind.cubie(home, current.orientation().inverse())
    return ret


class CubieCube:
    """
    State of a 3x3 cube as two arrays of packed cubies.

    `corners[home]` and `edges[home]` hold the cubicle where the piece whose
    home is `home` currently sits, and its orientation there.

    Build cubes with `try_new` or `from_pairs`, which check that the
    arrays are permutations; the constructor is for arrays produced by
    the cube operations themselves and only asserts it.
    """

    __slots__ = ("_corners", "_edges", "_frozen")

    SOLVED: CubieCube

    def __init__(self, corners: CubicleArray, edges: CubicleArray) -> None:
        """
        CubieCube constructor.

        :param corners: the 8 corner cubies, indexed by home cubicle
        :type corners: CubicleArray
        :param edges: the 12 edge cubies, indexed by home cubicle
        :type edges: CubicleArray
        """
        assert corners.kind is CORNERS and corners.is_bijective(), corners
        assert edges.kind is EDGES and edges.is_bijective(), edges
        self._corners = corners
        self._edges = edges
        self._frozen = False

    # -------------------------------------------------
    # Construction
    # -------------------------------------------------
    @classmethod
    def try_new(
        cls,
        corners: Union[CubicleArray, Iterable[CornerCubie]],
        edges: Union[CubicleArray, Iterable[EdgeCubie]],
    ) -> CubieCube:
        """
        Build a cube, checking that every cubicle holds exactly one cubie.

        :param corners: the 8 corner cubies, in home order
        :type corners: CubicleArray or Iterable[CornerCubie]
        :param edges: the 12 edge cubies, in home order
        :type edges: CubicleArray or Iterable[EdgeCubie]
        :returns: the new cube
        :rtype: CubieCube
        :raises EmptyCubiclesError: if a cubicle has no cubie in it
        :raises ValueError: on arrays of the wrong length or cubie type
        """
        corners = CubicleArray(CORNERS, corners)
        edges = CubicleArray(EDGES, edges)
        for cubies in (corners, edges):
            if not cubies.is_bijective():
                raise EmptyCubiclesError(cubies.kind.name)
        return cls(corners, edges)

    @classmethod
    def from_pairs(
        cls,
        corners: Iterable[Tuple[int, int]],
        edges: Iterable[Tuple[int, int]],
    ) -> CubieCube:
        """
        Build a cube from (cubicle, orientation) pairs in home order.

        :param corners: 8 corner pairs
        :type corners: Iterable[Tuple[int, int]]
        :param edges: 12 edge pairs
        :type edges: Iterable[Tuple[int, int]]
        :returns: the new cube
        :rtype: CubieCube
        :raises EmptyCubiclesError: if a cubicle has no cubie in it
        """
        return cls.try_new(
            [CornerCubie(c, o) for c, o in corners],
            [EdgeCubie(c, o) for c, o in edges],
        )

    @classmethod
    def random_possible(cls, rng: Optional[random.Random] = None) -> CubieCube:
        """
        Draw a random cube that can be reached from the solved state.

        Every piece but one of each kind gets a random orientation, the
        last one the orientation that brings the sum back to zero. Both
        kinds are then shuffled independently, and edges C0 and C1 are
        swapped when the corner and edge parities disagree.

        :param rng: source of randomness, the `random` module if omitted
        :type rng: random.Random, optional
        :returns: a possible cube
        :rtype: CubieCube
        """
        rng = rng or random
        corners = CORNERS.solved()
        edges = EDGES.solved()
        for cubies in (corners, edges):
            orientation = cubies.kind.orientation
            total = orientation.zero()
            homes = cubies.homes()
            for home in homes[1:]:
                twist = orientation.random(rng)
                total = total.add(twist)
                cubies.set_orientation(home, twist)
            cubies.set_orientation(homes[0], total.inverse())
            cubies.shuffle(rng)

        if permutation_parity(corners) != permutation_parity(edges):
            logger.debug("Random cube has odd parity, swapping edges C0 and C1")
            edges.swap(EdgeCubicle.C0, EdgeCubicle.C1)

        return cls(corners, edges)

    def copy(self) -> CubieCube:
        """Return a mutable copy of the cube."""
        return CubieCube(self._corners.copy(), self._edges.copy())

    def _freeze(self) -> CubieCube:
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("Shared cube constants are read-only, copy() them first")

    # -------------------------------------------------
    # Accessors
    # -------------------------------------------------
    @property
    def corners(self) -> CubicleArray:
        """Return a copy of the corner array."""
        return self._corners.copy()

    @property
    def edges(self) -> CubicleArray:
        """Return a copy of the edge array."""
        return self._edges.copy()

    def cubies(self, kind: PieceKind) -> CubicleArray:
        """
        Return a copy of the array of one piece kind.

        :param kind: CORNERS or EDGES
        :type kind: PieceKind
        :returns: the cubies indexed by home cubicle
        :rtype: CubicleArray
        """
        return self._array(kind).copy()

    def _array(self, kind: PieceKind) -> CubicleArray:
        if kind is CORNERS:
            return self._corners
        if kind is EDGES:
            return self._edges
        raise ValueError(f"Unknown piece kind {kind!r}")

    def get_corner(self, home: Union[CornerCubicle, int]) -> CornerCubie:
        """Return the corner cubie whose home is `home`."""
        return self._corners[home]

    def get_edge(self, home: Union[EdgeCubicle, int]) -> EdgeCubie:
        """Return the edge cubie whose home is `home`."""
        return self._edges[home]

    # -------------------------------------------------
    # State checks
    # -------------------------------------------------
    def is_constructible(self) -> bool:
        """Check that every cubicle holds exactly one cubie."""
        return self._corners.is_bijective() and self._edges.is_bijective()

    def corner_parity(self) -> int:
        """Return the parity of the corner permutation (0 even, 1 odd)."""
        return permutation_parity(self._corners)

    def edge_parity(self) -> int:
        """Return the parity of the edge permutation (0 even, 1 odd)."""
        return permutation_parity(self._edges)

    def is_possible_state(self) -> bool:
        """
        Check the cube can be reached from the solved state by turns.

        A constructible cube is possible when the corner twists sum to zero
        modulo 3, the edge flips sum to zero modulo 2 and the corner and
        edge permutations have the same parity.

        :returns: True if the cube is possible
        :rtype: bool
        """
        if not self.is_constructible():
            return False
        if self._corners.total_orientation() != 0:
            return False
        if self._edges.total_orientation() != 0:
            return False
        return self.corner_parity() == self.edge_parity()

    def is_solved(self) -> bool:
        """Check if the cube is solved."""
        return self == CubieCube.SOLVED

    # -------------------------------------------------
    # Group operations
    # -------------------------------------------------
    def compose(self, rhs: CubieCube) -> CubieCube:
        """
        Multiply two cubes: apply this one, then `rhs`.

        :param rhs: the cube applied second
        :type rhs: CubieCube
        :returns: the product
        :rtype: CubieCube
        """
        return CubieCube(
            _compose(self._corners, rhs._corners),
            _compose(self._edges, rhs._edges),
        )

    def __mul__(self, rhs: CubieCube) -> CubieCube:
        if not isinstance(rhs, CubieCube):
            return NotImplemented
        return self.compose(rhs)

    def inverse(self) -> CubieCube:
        """
        Return the cube that undoes this one.

        :returns: the inverse, `x.compose(x.inverse()) == SOLVED`
        :rtype: CubieCube
        """
        return CubieCube(_invert(self._corners), _invert(self._edges))

    def apply_move(self, move: Union[Move, str]) -> CubieCube:
        """
        Turn a face of the cube.

        :param move: the move, or its notation
        :type move: Move or str
        :returns: the turned cube
        :rtype: CubieCube
        """
        return self.compose(_MOVE_CUBES[Move.parse(move)])

    def apply_moves(self, moves: Union[Moves, str, Iterable[Move]]) -> CubieCube:
        """
        Apply a sequence of moves, left to right.

        :param moves: a Moves object, notation string or iterable of moves
        :type moves: Moves, str or Iterable[Move]
        :returns: the turned cube
        :rtype: CubieCube
        """
        if not isinstance(moves, Moves):
            moves = Moves(moves)
        cube = self
        for move in moves:
            cube = cube.apply_move(move)
        return cube

    # -------------------------------------------------
    # Orientation coordinates
    # -------------------------------------------------
    def get_ori_coord(self, kind: PieceKind) -> int:
        """
        Return the orientation coordinate of one piece kind.

        The coordinate is a mixed radix number with one digit per cubicle,
        base the orientation count, holding the orientation of the piece
        in that cubicle. The last cubicle is left out since the sum of
        the orientations fixes it.

        :param kind: CORNERS (0..2186) or EDGES (0..2047)
        :type kind: PieceKind
        :returns: the coordinate
        :rtype: int
        """
        last = kind.size - 1
        coord = 0
        for state in self._array(kind):
            cubicle = state.cubicle()
            if cubicle != last:
                coord += kind.modulus ** int(cubicle) * int(state.orientation())
        return coord

    def set_ori_coord(self, kind: PieceKind, coord: int) -> None:
        """
        Orient the pieces of one kind to match a coordinate.

        Pieces stay in their cubicles. The piece in the last cubicle gets
        the orientation that makes the sum zero.

        :param kind: CORNERS or EDGES
        :type kind: PieceKind
        :param coord: the coordinate to set
        :type coord: int
        :raises TypeError: if the coordinate is not an integer
        :raises ValueError: if the coordinate is out of range
        """
        self._check_mutable()
        coord = operator.index(coord)
        size = kind.modulus ** (kind.size - 1)
        if not 0 <= coord < size:
            raise ValueError(f"{kind.name} orientation {coord} not in 0..{size}")

        last = kind.size - 1
        total = kind.orientation.zero()
        twists: Dict[int, int] = dict()
        for cubicle in range(last):
            twist = kind.orientation((coord // kind.modulus ** cubicle) % kind.modulus)
            total = total.add(twist)
            twists[cubicle] = twist
        twists[last] = total.inverse()

        cubies = self._array(kind)
        ret = [state.with_orientation(twists[state.cubicle()]) for state in cubies]
        if kind is CORNERS:
            self._corners = CubicleArray(kind, ret)
        else:
            self._edges = CubicleArray(kind, ret)

    # -------------------------------------------------
    # UD-slice coordinate
    # -------------------------------------------------
    def get_udslice_coord(self) -> int:
        """
        Return which edge cubicles hold the four UD-slice edges.

        :returns: the coordinate, between 0 and 494
        :rtype: int
        """
        mask = 0
        for home in UDSLICE_HOMES:
            mask |= 1 << int(self._edges[home].cubicle())
        return udslice_rank(mask)

    def set_udslice_coord(self, coord: int) -> None:
        """
        Move the UD-slice edges to the cubicles named by a coordinate.

        The slice edges fill the chosen cubicles in home order and the
        other edges fill the rest, also in home order. Each cubicle keeps
        the orientation it had. If the edge parity then differs from the
        corner parity, edges C0 and C1 (neither in the slice) are swapped.

        :param coord: the coordinate to set, between 0 and 494
        :type coord: int
        :raises TypeError: if the coordinate is not an integer
        :raises ValueError: if the coordinate is out of range
        """
        self._check_mutable()
        mask = udslice_unrank(coord)

        twist_at = {state.cubicle(): state.orientation() for state in self._edges}
        in_slice = iter([c for c in EdgeCubicle if mask >> c & 1])
        off_slice = iter([c for c in EdgeCubicle if not mask >> c & 1])

        edges = list()
        for home in EdgeCubicle:
            cubicle = next(in_slice) if home in UDSLICE_HOMES else next(off_slice)
            edges.append(EdgeCubie(cubicle, twist_at[cubicle]))
        edges = CubicleArray(EDGES, edges)

        if permutation_parity(edges) != self.corner_parity():
            edges.swap(EdgeCubicle.C0, EdgeCubicle.C1)
        self._edges = edges

    # -------------------------------------------------
    # Facelets
    # -------------------------------------------------
    def to_facelet_cube(self) -> FaceletCube:
        """Return the stickers shown by this cube."""
        from .facelet_cube import FaceletCube

        return FaceletCube.from_cubie_cube(self)

    @classmethod
    def from_facelet_cube(cls, facelets: FaceletCube) -> CubieCube:
        """
        Decode a sticker array.

        :param facelets: the stickers to decode
        :type facelets: FaceletCube
        :returns: the matching cube
        :rtype: CubieCube
        :raises FaceletConversionError: if the stickers are not a cube
        """
        return facelets.to_cubie_cube()

    # -------------------------------------------------
    # Value semantics
    # -------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubieCube):
            return NotImplemented
        return self._corners == other._corners and self._edges == other._edges

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        corners = ", ".join(
            f"({int(s.cubicle())}, {int(s.orientation())})" for s in self._corners
        )
        edges = ", ".join(
            f"({int(s.cubicle())}, {int(s.orientation())})" for s in self._edges
        )
        return f"CubieCube(corners=[{corners}], edges=[{edges}])"

    def __str__(self) -> str:
        lines = list()
        for name, cubies in (("corners", self._corners), ("edges", self._edges)):
            cells = list()
            for home, state in zip(cubies.homes(), cubies):
                cells.append(f"{home.name}:{state.cubicle().name}/{int(state.orientation())}")
            lines.append(f"{name:8s}" + " ".join(cells))
        return "\n".join(lines)


CubieCube.SOLVED = CubieCube(CORNERS.solved(), EDGES.solved())._freeze()


# -------------------------------------------------
# Move generators
# -------------------------------------------------
# Clockwise quarter turn of each face, as (cubicle, orientation) in home order
_CLOCKWISE_TURNS: Dict[Face, Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]] = {
    Face.U: (
        [(1, 0), (3, 0), (0, 0), (2, 0), (4, 0), (5, 0), (6, 0), (7, 0)],
        [(2, 0), (0, 0), (3, 0), (1, 0), (4, 0), (5, 0),
         (6, 0), (7, 0), (8, 0), (9, 0), (10, 0), (11, 0)],
    ),
    Face.R: (
        [(0, 0), (5, 2), (2, 0), (1, 1), (4, 0), (7, 1), (6, 0), (3, 2)],
        [(0, 0), (1, 0), (5, 0), (3, 0), (4, 0), (10, 0),
         (6, 0), (2, 0), (8, 0), (9, 0), (7, 0), (11, 0)],
    ),
    Face.F: (
        [(0, 0), (1, 0), (3, 1), (7, 2), (4, 0), (5, 0), (2, 2), (6, 1)],
        [(0, 0), (1, 0), (2, 0), (7, 1), (4, 0), (5, 0),
         (3, 1), (11, 1), (8, 0), (9, 0), (10, 0), (6, 1)],
    ),
    Face.D: (
        [(0, 0), (1, 0), (2, 0), (3, 0), (6, 0), (4, 0), (7, 0), (5, 0)],
        [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0),
         (6, 0), (7, 0), (9, 0), (11, 0), (8, 0), (10, 0)],
    ),
    Face.L: (
        [(2, 1), (1, 0), (6, 2), (3, 0), (0, 2), (5, 0), (4, 1), (7, 0)],
        [(0, 0), (6, 0), (2, 0), (3, 0), (1, 0), (5, 0),
         (9, 0), (7, 0), (8, 0), (4, 0), (10, 0), (11, 0)],
    ),
    Face.B: (
        [(4, 2), (0, 1), (2, 0), (3, 0), (5, 1), (1, 2), (6, 0), (7, 0)],
        [(4, 1), (1, 0), (2, 0), (3, 0), (8, 1), (0, 1),
         (6, 0), (7, 0), (5, 1), (9, 0), (10, 0), (11, 0)],
    ),
}


def _init_move_cubes() -> Dict[Move, CubieCube]:
    move_cubes = dict()
    for face, (corners, edges) in _CLOCKWISE_TURNS.items():
        quarter = CubieCube.from_pairs(corners, edges)
        half = quarter.compose(quarter)
        move_cubes[Move.of(face, 1)] = quarter._freeze()
        move_cubes[Move.of(face, 2)] = half._freeze()
        move_cubes[Move.of(face, 3)] = half.compose(quarter)._freeze()
    return move_cubes


_MOVE_CUBES = _init_move_cubes()


def move_cube(move: Union[Move, str]) -> CubieCube:
    """
    Return the generator of a move, as the cube it turns SOLVED into.

    :param move: the move, or its notation
    :type move: Move or str
    :returns: a read-only cube
    :rtype: CubieCube
    """
    return _MOVE_CUBES[Move.parse(move)]
