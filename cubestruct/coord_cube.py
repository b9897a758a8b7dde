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
Coordinate form of the cube, for table driven move application.

Three coordinates each compress part of a CubieCube into a small integer:

    - CORNER_ORI: twist of the corners, 0..2186 (3^7 values)
    - EDGE_ORI: flip of the edges, 0..2047 (2^11 values)
    - UDSLICE: cubicles holding the middle layer edges, 0..494 (C(12,4))

For every coordinate and move a move table maps the value before the move
to the value after it. Tables are built on first use and then shared by
every CoordCube, which turns with three array lookups.

Classes:
    Coord
    MoveTableCache
    CoordCube
Functions:
    move_table
    build_move_tables
    udslice_rank, udslice_unrank
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterable, Optional, Tuple, Union
import logging
import operator
import threading
import time

import numpy as np

from .cubie import CORNERS, EDGES
from .cubie_cube import CubieCube, move_cube
from .moves import Move, Moves
from .udslice import N_UDSLICE, udslice_rank, udslice_unrank

__all__ = [
    "Coord",
    "CoordCube",
    "MoveTableCache",
    "build_move_tables",
    "move_table",
    "udslice_rank",
    "udslice_unrank",
]

logger = logging.getLogger("coord_cube")

N_CORNER_ORI = 2187
N_EDGE_ORI = 2048


# -----------------------------------------------
# Coordinates
# -----------------------------------------------
class Coord(Enum):
    """The three cube coordinates."""

    CORNER_ORI = "corner_ori"
    EDGE_ORI = "edge_ori"
    UDSLICE = "udslice"

    @property
    def size(self) -> int:
        """Return the number of values of the coordinate."""
        return _COORD_SIZES[self]

    def get(self, cube: CubieCube) -> int:
        """
        Read the coordinate of a cube.

        :param cube: the cube to read
        :type cube: CubieCube
        :returns: the coordinate value
        :rtype: int
        """
        if self is Coord.CORNER_ORI:
            return cube.get_ori_coord(CORNERS)
        if self is Coord.EDGE_ORI:
            return cube.get_ori_coord(EDGES)
        return cube.get_udslice_coord()

    def set(self, cube: CubieCube, value: int) -> None:
        """
        Change a cube in place so that it has a coordinate value.

        :param cube: the cube to update, not a shared constant
        :type cube: CubieCube
        :param value: the coordinate value
        :type value: int
        :raises ValueError: if the value is out of range
        """
        if self is Coord.CORNER_ORI:
            cube.set_ori_coord(CORNERS, value)
        elif self is Coord.EDGE_ORI:
            cube.set_ori_coord(EDGES, value)
        else:
            cube.set_udslice_coord(value)


_COORD_SIZES: Dict[Coord, int] = {
    Coord.CORNER_ORI: N_CORNER_ORI,
    Coord.EDGE_ORI: N_EDGE_ORI,
    Coord.UDSLICE: N_UDSLICE,
}


# -----------------------------------------------
# Move tables
# -----------------------------------------------
def _build_move_table(coord: Coord, move: Move) -> np.ndarray:
    generator = move_cube(move)
    table = np.empty(coord.size, dtype=np.uint16)
    cube = CubieCube.SOLVED.copy()
    for value in range(coord.size):
        coord.set(cube, value)
        table[value] = coord.get(cube.compose(generator))
    table.flags.writeable = False
    return table


class MoveTableCache:
    """
    Lazily built move tables, one per (coordinate, move) pair.

    A table is built the first time it is asked for and kept for the life
    of the cache. Building happens under a lock, so concurrent first
    requests for a table build it once and never see a partial table.
    Tables are read-only numpy arrays.
    """

    def __init__(self) -> None:
        self._tables: Dict[Tuple[Coord, Move], np.ndarray] = dict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, key: Tuple[Coord, Move]) -> bool:
        return key in self._tables

    def get(self, coord: Coord, move: Move) -> np.ndarray:
        """
        Return the move table of a coordinate.

        :param coord: the coordinate
        :type coord: Coord
        :param move: the move
        :type move: Move
        :returns: table mapping values before the move to values after it
        :rtype: numpy.ndarray
        """
        key = (coord, move)
        table = self._tables.get(key)
        if table is None:
            with self._lock:
                table = self._tables.get(key)
                if table is None:
                    start = time.perf_counter()
                    table = _build_move_table(coord, move)
                    self._tables[key] = table
                    logger.debug(
                        "Built %s table for %s in %.3fs",
                        coord.name,
                        move,
                        time.perf_counter() - start,
                    )
        return table

    def build_all(self, coords: Optional[Iterable[Coord]] = None) -> None:
        """
        Build every table up front.

        :param coords: coordinates to build, all of them if omitted
        :type coords: Iterable[Coord], optional
        """
        coords = list(Coord) if coords is None else list(coords)
        logger.info("Building move tables for %s", ", ".join(c.name for c in coords))
        for coord in coords:
            for move in Move:
                self.get(coord, move)
        logger.info("%d move tables ready", len(self))


_CACHE = MoveTableCache()


def move_table(coord: Coord, move: Union[Move, str]) -> np.ndarray:
    """
    Return the shared move table of a coordinate.

    :param coord: the coordinate
    :type coord: Coord
    :param move: the move, or its notation
    :type move: Move or str
    :returns: read-only table of `coord.size` values
    :rtype: numpy.ndarray
    """
    return _CACHE.get(coord, Move.parse(move))


def build_move_tables(coords: Optional[Iterable[Coord]] = None) -> None:
    """Build the shared move tables now instead of on first use."""
    _CACHE.build_all(coords)


# -----------------------------------------------
# Coordinate cube
# -----------------------------------------------
@dataclass(frozen=True)
class CoordCube:
    """
    A cube reduced to its three coordinates.

    Turning a CoordCube only looks values up in the move tables.
    """

    corner_ori: int = 0
    edge_ori: int = 0
    udslice: int = 0

    SOLVED: ClassVar[CoordCube]

    def __post_init__(self) -> None:
        for coord in Coord:
            value = operator.index(getattr(self, coord.value))
            object.__setattr__(self, coord.value, value)
            if not 0 <= value < coord.size:
                raise ValueError(f"{coord.name} {value} not in 0..{coord.size}")

    @classmethod
    def from_cubie_cube(cls, cube: CubieCube) -> CoordCube:
        """
        Read the coordinates of a cube.

        :param cube: the cube to read
        :type cube: CubieCube
        :returns: its coordinates
        :rtype: CoordCube
        """
        return cls(
            corner_ori=cube.get_ori_coord(CORNERS),
            edge_ori=cube.get_ori_coord(EDGES),
            udslice=cube.get_udslice_coord(),
        )

    def to_cubie_cube(self) -> CubieCube:
        """
        Build a possible cube with these coordinates.

        Many cubes share the same coordinates; the one returned keeps the
        corners home and places the edges as `set_udslice_coord` does.

        :returns: a possible cube
        :rtype: CubieCube
        """
        cube = CubieCube.SOLVED.copy()
        cube.set_udslice_coord(self.udslice)
        cube.set_ori_coord(CORNERS, self.corner_ori)
        cube.set_ori_coord(EDGES, self.edge_ori)
        return cube

    def get(self, coord: Coord) -> int:
        """Return the value of one coordinate."""
        return getattr(self, coord.value)

    def apply_move(self, move: Union[Move, str]) -> CoordCube:
        """
        Turn a face of the cube.

        :param move: the move, or its notation
        :type move: Move or str
        :returns: the coordinates after the move
        :rtype: CoordCube
        """
        move = Move.parse(move)
        return CoordCube(
            **{
                coord.value: int(move_table(coord, move)[self.get(coord)])
                for coord in Coord
            }
        )

    def apply_moves(self, moves: Union[Moves, str, Iterable[Move]]) -> CoordCube:
        """Apply a sequence of moves, left to right."""
        if not isinstance(moves, Moves):
            moves = Moves(moves)
        cube = self
        for move in moves:
            cube = cube.apply_move(move)
        return cube

    def is_solved(self) -> bool:
        """Check every coordinate is at its solved value."""
        return self == CoordCube.SOLVED


CoordCube.SOLVED = CoordCube()
