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
Sticker (facelet) form of the cube.

A FaceletCube holds the 54 sticker colors, 9 per face. Face `c` is the
face whose center has color `c`. The faces unfold into this net, with
each face read row by row so that index 4 is the center::

                 White
        Orange   Green   Red   Blue
                 Yellow

Encoding a CubieCube writes the colors of every piece into the stickers
of the cubicle it currently sits in. Decoding searches, for every piece,
the cubicle and orientation that show its colors.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union
import logging

from .cubie import CORNERS, EDGES, Cubicle, PieceKind
from .cubie_cube import CubieCube
from .errors import (
    CornerCubieNotFoundError,
    EdgeCubieNotFoundError,
    EmptyCubiclesError,
    FaceletConversionError,
    IncompleteFaceletCubeError,
    InvalidCenterError,
)

logger = logging.getLogger("facelet_cube")

N_FACES = 6
N_FACELETS = 9
CENTER = 4


# Defines Cube Faces and Colors
class Color(IntEnum):
    """
    Sticker colors, one per face.

    The value of a color is the index of the face it is the center of.
    """

    ORANGE = 0
    RED = 1
    YELLOW = 2
    WHITE = 3
    GREEN = 4
    BLUE = 5

    @property
    def letter(self) -> str:
        """Return the initial of the color."""
        return self.name[0]

    @property
    def face_letter(self) -> str:
        """Return the cube notation letter of the face with this center."""
        return _FACE_LETTERS[self]

    def __repr__(self) -> str:
        return self.name


_FACE_LETTERS: Dict[Color, str] = {
    Color.WHITE: "U",
    Color.RED: "R",
    Color.GREEN: "F",
    Color.YELLOW: "D",
    Color.ORANGE: "L",
    Color.BLUE: "B",
}

# Face order of the facelet string
STRING_FACE_ORDER: Tuple[Color, ...] = (
    Color.WHITE,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.ORANGE,
    Color.BLUE,
)

_W, _O, _G, _R, _B, _Y = (
    Color.WHITE,
    Color.ORANGE,
    Color.GREEN,
    Color.RED,
    Color.BLUE,
    Color.YELLOW,
)

# -------------------------------------------
# Colors and facelet indices of each cubicle,
# clockwise starting from the U or D sticker
# -------------------------------------------
CORNER_COLORS: Tuple[Tuple[Color, ...], ...] = (
    (_W, _O, _B),
    (_W, _B, _R),
    (_W, _G, _O),
    (_W, _R, _G),
    (_Y, _B, _O),
    (_Y, _R, _B),
    (_Y, _O, _G),
    (_Y, _G, _R),
)

CORNER_FACELETS: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 2),
    (2, 0, 2),
    (6, 0, 2),
    (8, 0, 2),
    (6, 8, 6),
    (8, 8, 6),
    (0, 8, 6),
    (2, 8, 6),
)

EDGE_COLORS: Tuple[Tuple[Color, ...], ...] = (
    (_W, _B),
    (_W, _O),
    (_W, _R),
    (_W, _G),
    (_B, _O),
    (_B, _R),
    (_G, _O),
    (_G, _R),
    (_Y, _B),
    (_Y, _O),
    (_Y, _R),
    (_Y, _G),
)

EDGE_FACELETS: Tuple[Tuple[int, ...], ...] = (
    (1, 1),
    (3, 1),
    (5, 1),
    (7, 1),
    (5, 3),
    (3, 5),
    (3, 5),
    (5, 3),
    (7, 7),
    (3, 7),
    (5, 7),
    (1, 7),
)

_PIECE_TABLES = {
    CORNERS.name: (CORNER_COLORS, CORNER_FACELETS),
    EDGES.name: (EDGE_COLORS, EDGE_FACELETS),
}


def _rotate(colors: Sequence[Color], turns: int) -> Tuple[Color, ...]:
    # rotate right: the last `turns` colors come first
    colors = tuple(colors)
    return colors[-turns:] + colors[:-turns] if turns else colors


def _to_color(value: Union[Color, int]) -> Color:
    try:
        return Color(value)
    except ValueError as err:
        raise FaceletConversionError(f"{value!r} is not a color") from err


# -------------------------------------------------
# Facelet cube
# -------------------------------------------------
class FaceletCube:
    """
    The 54 sticker colors of a cube, as 6 faces of 9 colors.

    Values are immutable; `faces` returns a fresh copy.
    """

    __slots__ = ("_faces",)

    SOLVED: FaceletCube

    def __init__(self, faces: Tuple[Tuple[Color, ...], ...]) -> None:
        self._faces = faces

    @classmethod
    def from_faces(
        cls,
        faces: Union[
            Sequence[Sequence[Union[Color, int]]],
            Mapping[Color, Sequence[Union[Color, int]]],
        ],
    ) -> FaceletCube:
        """
        Build a facelet cube from its faces.

        :param faces: 6 lists of 9 colors in face order, or a mapping from
            center color to the 9 colors of that face
        :type faces: Sequence or Mapping
        :returns: the facelet cube
        :rtype: FaceletCube
        :raises FaceletConversionError: if the shape or a color is invalid
        """
        if isinstance(faces, Mapping):
            missing = [c.name for c in Color if c not in faces]
            if missing:
                raise FaceletConversionError(f"Missing faces: {', '.join(missing)}")
            faces = [faces[c] for c in Color]

        faces = list(faces)
        if len(faces) != N_FACES:
            raise FaceletConversionError(f"Expected {N_FACES} faces, got {len(faces)}")
        ret = list()
        for face in faces:
            face = [_to_color(value) for value in face]
            if len(face) != N_FACELETS:
                raise FaceletConversionError(
                    f"Expected {N_FACELETS} facelets per face, got {len(face)}"
                )
            ret.append(tuple(face))
        return cls(tuple(ret))

    @classmethod
    def from_cubie_cube(cls, cube: CubieCube) -> FaceletCube:
        """
        Paint the stickers of a cube.

        :param cube: the cube to paint
        :type cube: CubieCube
        :returns: its stickers
        :rtype: FaceletCube
        """
        faces = [[Color(face)] * N_FACELETS for face in range(N_FACES)]
        for kind in (CORNERS, EDGES):
            colors, facelets = _PIECE_TABLES[kind.name]
            for home, state in zip(kind.cubicle, cube.cubies(kind)):
                current = state.cubicle()
                shown = _rotate(colors[home], int(state.orientation()))
                for face, index, color in zip(colors[current], facelets[current], shown):
                    faces[face][index] = color
        return cls(tuple(tuple(face) for face in faces))

    # -------------------------------------------------
    # Decoding
    # -------------------------------------------------
    def _shown(self, kind: PieceKind, cubicle: Cubicle) -> Tuple[Color, ...]:
        colors, facelets = _PIECE_TABLES[kind.name]
        return tuple(
            self._faces[face][index]
            for face, index in zip(colors[cubicle], facelets[cubicle])
        )

    def _find(self, kind: PieceKind, home: Cubicle) -> Tuple[Cubicle, int]:
        colors, _ = _PIECE_TABLES[kind.name]
        for orientation in kind.orientation:
            expected = _rotate(colors[home], int(orientation))
            for cubicle in kind.cubicle:
                if self._shown(kind, cubicle) == expected:
                    return cubicle, orientation
        logger.warning("No cubicle shows the %s whose home is %r", kind.name, home)
        if kind is CORNERS:
            raise CornerCubieNotFoundError(home)
        raise EdgeCubieNotFoundError(home)

    def to_cubie_cube(self) -> CubieCube:
        """
        Decode the stickers into a cube.

        Every piece is looked for among all cubicles and orientations;
        the first match is kept.

        :returns: the cube showing these stickers
        :rtype: CubieCube
        :raises InvalidCenterError: if a center does not match its face
        :raises CornerCubieNotFoundError: if a corner is not on the cube
        :raises EdgeCubieNotFoundError: if an edge is not on the cube
        :raises FaceletConversionError: if two pieces share a cubicle
        """
        for face in Color:
            found = self._faces[face][CENTER]
            if found != face:
                logger.warning("Center of face %r is %r", face, found)
                raise InvalidCenterError(face, found)

        pairs: Dict[str, List[Tuple[Cubicle, int]]] = dict()
        for kind in (CORNERS, EDGES):
            pairs[kind.name] = [self._find(kind, home) for home in kind.cubicle]

        try:
            return CubieCube.from_pairs(pairs[CORNERS.name], pairs[EDGES.name])
        except EmptyCubiclesError as err:
            logger.warning("Stickers decode to an impossible permutation")
            raise FaceletConversionError(str(err)) from err

    # -------------------------------------------------
    # Accessors
    # -------------------------------------------------
    @property
    def faces(self) -> List[List[Color]]:
        """Return the colors of every face, in face order."""
        return [list(face) for face in self._faces]

    def get_face(self, color: Union[Color, int]) -> List[Color]:
        """
        Return the 9 colors of the face whose center is `color`.

        :param color: center color of the face
        :type color: Color or int
        :returns: the colors, row by row
        :rtype: List[Color]
        """
        return list(self._faces[Color(color)])

    def get_facelet(self, color: Union[Color, int], index: int) -> Color:
        """Return the color of one sticker."""
        return self._faces[Color(color)][index]

    def count_colors(self) -> Dict[Color, int]:
        """Return how many stickers of each color the cube shows."""
        counts = {color: 0 for color in Color}
        for face in self._faces:
            for color in face:
                counts[color] += 1
        return counts

    # -------------------------------------------------
    # Facelet strings
    # -------------------------------------------------
    def to_string(self) -> str:
        """
        Return the 54 character facelet string, faces in URFDLB order.

        Each sticker is the letter of the face whose center has its color.

        :returns: the facelet string
        :rtype: str
        """
        return "".join(
            color.face_letter for face in STRING_FACE_ORDER for color in self._faces[face]
        )

    @classmethod
    def from_string(cls, text: str) -> FaceletCube:
        """
        Parse a facelet string, faces in URFDLB order.

        :param text: 54 letters among U, R, F, D, L and B
        :type text: str
        :returns: the facelet cube
        :rtype: FaceletCube
        :raises FaceletConversionError: if the string is malformed
        """
        text = text.strip()
        if len(text) != N_FACES * N_FACELETS:
            raise FaceletConversionError(
                f"A facelet string has {N_FACES * N_FACELETS} letters, got {len(text)}"
            )
        by_letter = {color.face_letter: color for color in Color}
        faces: Dict[Color, List[Color]] = dict()
        for ptr, face in enumerate(STRING_FACE_ORDER):
            chunk = text[ptr * N_FACELETS:(ptr + 1) * N_FACELETS]
            try:
                faces[face] = [by_letter[letter] for letter in chunk.upper()]
            except KeyError as err:
                raise FaceletConversionError(f"Unknown facelet letter {err}") from err
        return cls.from_faces(faces)

    # -------------------------------------------------
    # Value semantics and display
    # -------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FaceletCube):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self) -> int:
        return hash(self._faces)

    def __repr__(self) -> str:
        return f"FaceletCube.from_string({self.to_string()!r})"

    @staticmethod
    def print_piece_square(color: Color, ansi: bool = True) -> str:
        """
        Render one sticker for the console.

        :param color: the sticker color
        :type color: Color
        :param ansi: use the color as ANSI background, plain letter if False
        :type ansi: bool
        :returns: the rendered sticker
        :rtype: str
        """
        if not ansi:
            return f" {color.letter} "
        text = _ANSI_BACKGROUNDS[color]
        text += "\033[30m"
        text += f" {color.letter} "
        text += "\033[0m"
        return text

    def to_net(self, ansi: bool = False) -> str:
        """
        Render the unfolded cube.

        :param ansi: use ANSI colors
        :type ansi: bool
        :returns: the upper face, the middle band and the down face
        :rtype: str
        """
        indent = " " * (3 * len(self.print_piece_square(Color.WHITE, False)))
        lines = list()
        for row in range(3):
            lines.append(
                indent
                + "".join(
                    self.print_piece_square(self._faces[Color.WHITE][3 * row + col], ansi)
                    for col in range(3)
                )
            )
        for row in range(3):
            line = ""
            for face in (Color.ORANGE, Color.GREEN, Color.RED, Color.BLUE):
                for col in range(3):
                    line += self.print_piece_square(self._faces[face][3 * row + col], ansi)
            lines.append(line)
        for row in range(3):
            lines.append(
                indent
                + "".join(
                    self.print_piece_square(self._faces[Color.YELLOW][3 * row + col], ansi)
                    for col in range(3)
                )
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_net(ansi=False)


_ANSI_BACKGROUNDS: Dict[Color, str] = {
    Color.RED: "\033[48;5;124m",
    Color.WHITE: "\033[107m",
    Color.ORANGE: "\033[48;5;202m",
    Color.YELLOW: "\033[48;5;11m",
    Color.BLUE: "\033[48;5;27m",
    Color.GREEN: "\033[102m",
}

FaceletCube.SOLVED = FaceletCube(tuple((Color(face),) * N_FACELETS for face in range(N_FACES)))


# -------------------------------------------------
# Builder
# -------------------------------------------------
class FaceletCubeBuilder:
    """Fill a FaceletCube one sticker at a time."""

    def __init__(self) -> None:
        self._faces: List[List[Union[Color, None]]] = [
            [None] * N_FACELETS for _ in range(N_FACES)
        ]

    def set(self, face: Union[Color, int], index: int, color: Union[Color, int]) -> FaceletCubeBuilder:
        """
        Set one sticker.

        :param face: center color of the face
        :type face: Color or int
        :param index: sticker index on the face, 0 to 8
        :type index: int
        :param color: the sticker color
        :type color: Color or int
        :returns: the builder, so calls can be chained
        :rtype: FaceletCubeBuilder
        :raises ValueError: if the face, index or color is out of range
        """
        if not 0 <= index < N_FACELETS:
            raise ValueError(f"Facelet index {index} not in 0..{N_FACELETS}")
        self._faces[Color(face)][index] = Color(color)
        return self

    def set_face(self, face: Union[Color, int], colors: Iterable[Union[Color, int]]) -> FaceletCubeBuilder:
        """Set the 9 stickers of a face, row by row."""
        colors = list(colors)
        if len(colors) != N_FACELETS:
            raise ValueError(f"A face has {N_FACELETS} facelets, got {len(colors)}")
        for index, color in enumerate(colors):
            self.set(face, index, color)
        return self

    def is_complete(self) -> bool:
        """Check every sticker was set."""
        return all(color is not None for face in self._faces for color in face)

    def build(self) -> FaceletCube:
        """
        Return the facelet cube.

        :returns: the facelet cube
        :rtype: FaceletCube
        :raises IncompleteFaceletCubeError: if a sticker was not set
        """
        missing = [
            f"{Color(face).name}[{index}]"
            for face in range(N_FACES)
            for index in range(N_FACELETS)
            if self._faces[face][index] is None
        ]
        if missing:
            raise IncompleteFaceletCubeError(
                f"{len(missing)} facelet(s) not set: {', '.join(missing[:6])}"
            )
        return FaceletCube.from_faces(self._faces)
