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
Cube state algebra and representation conversions for the 3x3 cube.

A cube state has three interchangeable forms:

    - CubieCube: where every piece sits and how it is twisted
    - FaceletCube: the 54 sticker colors
    - CoordCube: three small integers driving table based moves
"""
from .coord_cube import (
    Coord,
    CoordCube,
    MoveTableCache,
    build_move_tables,
    move_table,
    udslice_rank,
    udslice_unrank,
)
from .cubie import (
    CORNERS,
    EDGES,
    CornerCubicle,
    CornerCubie,
    CornerOrientation,
    CubicleArray,
    EdgeCubicle,
    EdgeCubie,
    EdgeOrientation,
    PieceKind,
)
from .cubie_cube import CubieCube, move_cube
from .cycles import PermutationCycles, perm_2cycles, permutation_parity
from .errors import (
    CornerCubieNotFoundError,
    CubeError,
    CubieCubeConstructionError,
    EdgeCubieNotFoundError,
    EmptyCubiclesError,
    FaceletConversionError,
    IncompleteFaceletCubeError,
    InvalidCenterError,
    InvalidMoveError,
)
from .facelet_cube import Color, FaceletCube, FaceletCubeBuilder
from .moves import Face, Move, Moves

__version__ = "0.1.0"

__all__ = [
    "CORNERS",
    "EDGES",
    "Color",
    "Coord",
    "CoordCube",
    "CornerCubicle",
    "CornerCubie",
    "CornerCubieNotFoundError",
    "CornerOrientation",
    "CubeError",
    "CubicleArray",
    "CubieCube",
    "CubieCubeConstructionError",
    "EdgeCubicle",
    "EdgeCubie",
    "EdgeCubieNotFoundError",
    "EdgeOrientation",
    "EmptyCubiclesError",
    "Face",
    "FaceletConversionError",
    "FaceletCube",
    "FaceletCubeBuilder",
    "IncompleteFaceletCubeError",
    "InvalidCenterError",
    "InvalidMoveError",
    "Move",
    "MoveTableCache",
    "Moves",
    "PermutationCycles",
    "PieceKind",
    "build_move_tables",
    "move_cube",
    "move_table",
    "perm_2cycles",
    "permutation_parity",
    "udslice_rank",
    "udslice_unrank",
]
