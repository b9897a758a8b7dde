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
Exceptions raised by the cube representations.

Classes:
    CubeError
    CubieCubeConstructionError
    EmptyCubiclesError
    FaceletConversionError
    CornerCubieNotFoundError
    EdgeCubieNotFoundError
    InvalidCenterError
    IncompleteFaceletCubeError
    InvalidMoveError
"""
from __future__ import annotations
from typing import Any


class CubeError(Exception):
    """Base class of every error raised by cubestruct."""


# --------------------------------------------------------
# CubieCube construction
# --------------------------------------------------------
class CubieCubeConstructionError(CubeError):
    """The cubie arrays given to a CubieCube are not a valid permutation."""


class EmptyCubiclesError(CubieCubeConstructionError):
    """One or more cubicles did not have a cubie in them."""

    def __init__(self, kind: str = "") -> None:
        """
        EmptyCubiclesError constructor.

        :param kind: name of the piece kind that failed ("corner" or "edge")
        :type kind: str, optional
        """
        self.kind = kind
        message = "One or more cubicle(s) did not have a cubie in them"
        if kind:
            message += f" ({kind}s)"
        super().__init__(message)


# --------------------------------------------------------
# Facelet conversion
# --------------------------------------------------------
class FaceletConversionError(CubeError):
    """A facelet array does not correspond to any cubie assignment."""


class CornerCubieNotFoundError(FaceletConversionError):
    """The corner cubie that lives in `cubicle` is nowhere on the facelets."""

    def __init__(self, cubicle: Any) -> None:
        self.cubicle = cubicle
        super().__init__(
            f"The cubie that lives in {cubicle!r} was not found in the FaceletCube"
        )


class EdgeCubieNotFoundError(FaceletConversionError):
    """The edge cubie that lives in `cubicle` is nowhere on the facelets."""

    def __init__(self, cubicle: Any) -> None:
        self.cubicle = cubicle
        super().__init__(
            f"The cubie that lives in {cubicle!r} was not found in the FaceletCube"
        )


class InvalidCenterError(FaceletConversionError):
    """A face center does not carry the color of its face."""

    def __init__(self, face: Any, found: Any) -> None:
        self.face = face
        self.found = found
        super().__init__(f"Center of the {face!r} face is {found!r}")


class IncompleteFaceletCubeError(FaceletConversionError):
    """A FaceletCubeBuilder was built before every facelet was set."""


# --------------------------------------------------------
# Move notation
# --------------------------------------------------------
class InvalidMoveError(CubeError, ValueError):
    """A move token could not be parsed."""
