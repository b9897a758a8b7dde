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
Defines the face turns of a 3x3 cube and sequences of them.

Classes:
    Face
    Move
    Moves
"""
from __future__ import annotations
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union
import logging
import random

from .errors import InvalidMoveError

logger = logging.getLogger("moves")


class Face(Enum):
    """The six faces of the cube, in cube notation."""

    L = "L"
    R = "R"
    U = "U"
    D = "D"
    F = "F"
    B = "B"


# -----------------------------------------------
# Defines the 18 face turns
# ----------------------------------------------
class Move(Enum):
    """
    Enumerate the 18 face turns.

    Each face has a clockwise quarter turn (`R`), a counter-clockwise
    quarter turn (`R'`) and a half turn (`R2`). The value of a member is
    its cube notation, so `Move("R'")` looks a turn up from its text.
    """

    L = "L"
    L_PRIME = "L'"
    L2 = "L2"
    R = "R"
    R_PRIME = "R'"
    R2 = "R2"
    U = "U"
    U_PRIME = "U'"
    U2 = "U2"
    D = "D"
    D_PRIME = "D'"
    D2 = "D2"
    F = "F"
    F_PRIME = "F'"
    F2 = "F2"
    B = "B"
    B_PRIME = "B'"
    B2 = "B2"

    @classmethod
    def of(cls, face: Face, quarter_turns: int) -> Move:
        """
        Return the turn of `face` by a number of clockwise quarter turns.

        :param face: face to turn
        :type face: Face
        :param quarter_turns: clockwise quarter turns, taken modulo 4
        :type quarter_turns: int
        :returns: the matching move
        :rtype: Move
        :raises InvalidMoveError: if the turns cancel out (a multiple of 4)
        """
        suffix = {1: "", 2: "2", 3: "'"}.get(quarter_turns % 4)
        if suffix is None:
            raise InvalidMoveError(f"{face.value}{quarter_turns} is not a turn")
        return cls(face.value + suffix)

    @classmethod
    def parse(cls, move: Union[Move, str]) -> Move:
        """
        Look a single move up from its notation.

        :param move: a Move, or its notation such as "R'"
        :type move: Move or str
        :returns: the matching move
        :rtype: Move
        :raises InvalidMoveError: if the notation is not one of the 18 moves
        """
        if isinstance(move, Move):
            return move
        try:
            return cls(move)
        except ValueError as err:
            logger.error(f"Cannot process move {move!r}")
            raise InvalidMoveError(f"{move!r} is not a move") from err

    @property
    def face(self) -> Face:
        """Return the face being turned."""
        return Face(self.value[0])

    @property
    def quarter_turns(self) -> int:
        """Return the number of clockwise quarter turns (1, 2 or 3)."""
        return {"": 1, "2": 2, "'": 3}[self.value[1:]]

    @property
    def inverse(self) -> Move:
        """Return the move that undoes this one."""
        return Move.of(self.face, -self.quarter_turns)

    @property
    def index(self) -> int:
        """Return the position of the move in the enumeration (0 to 17)."""
        return _MOVE_INDEX[self]

    def __str__(self) -> str:
        return self.value


_MOVE_INDEX = {move: index for index, move in enumerate(Move)}


# -----------------------------------------------
# Sequences of moves, built from cube notation
# ----------------------------------------------
class Moves:
    """
    Define a sequence of face turns.

    Translate between the cubing notation (`R U R' U'`, `R2`, `(R U)2`)
    and a list of Move values.
    """

    def __init__(self, move_str: Union[str, Iterable[Move]] = "") -> None:
        """
        Moves class constructor.

        :param move_str: A string representing the sequence of moves, or
                         an iterable of Move, defaults to an empty string.
        :type move_str: str or Iterable[Move]
        :raises InvalidMoveError: if the string contains an unknown token
        """
        self.move_list: List[Move] = list()
        self.add_moves(move_str)

    def __repr__(self) -> str:
        return "Moves({!r})".format(self.__str__())

    def __iter__(self) -> Iterator[Move]:
        return iter(self.move_list)

    def __len__(self) -> int:
        return len(self.move_list)

    def __add__(self, other: Moves) -> Moves:
        """
        Combine two Moves objects.

        :param other: Another Moves object, applied after this one.
        :type other: Moves
        :returns: A new Moves object with the combined move lists.
        :rtype: Moves
        """
        return Moves(self.move_list + other.move_list)

    def __getitem__(self, index: int) -> Move:
        return self.move_list[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Moves):
            return NotImplemented
        return self.move_list == other.move_list

    def __str__(self) -> str:
        """
        Convert all the moves to a string, separated by spaces.

        :returns: A string representation of the move sequence.
        :rtype: str
        """
        return " ".join(move.value for move in self.move_list)

    def clear(self) -> None:
        """Clear the list of moves."""
        self.move_list = list()

    def add(self, move: Union[Move, str]) -> None:
        """
        Append a single move.

        :param move: the move, as a Move or its notation
        :type move: Move or str
        """
        if isinstance(move, Move):
            self.move_list.append(move)
        else:
            self.add_moves(move)

    def reverse(self) -> Moves:
        """
        Return the sequence that undoes this one.

        The moves are taken in reverse order and each one is inverted.

        :returns: A Moves object with the inverse sequence.
        :rtype: Moves
        """
        return Moves(move.inverse for move in reversed(self.move_list))

    def add_moves(self, move_str: Union[str, Iterable[Move]]) -> None:
        """
        Add moves to the list.

        Parse a string of moves in cube notation, or take an iterable of
        Move values as is. Each face letter can be followed by a repeat
        count (1 to 3) and a prime. Parenthesised groups can be followed
        by a repeat count, e.g. "(R U R' U')3".

        :param move_str: The move string or list of moves to process.
        :type move_str: str or Iterable[Move]
        :raises InvalidMoveError: on an unknown or unbalanced token
        """
        if isinstance(move_str, str):
            self.move_list.extend(self._parse(move_str))
        else:
            for move in move_str:
                if not isinstance(move, Move):
                    raise InvalidMoveError(f"{move!r} is not a Move")
                self.move_list.append(move)

    @classmethod
    def _parse(cls, move_str: str) -> List[Move]:
        parsed: List[Move] = list()
        str_index = 0
        while str_index < len(move_str):
            char = move_str[str_index]
            if char.isspace():
                str_index += 1

            # Deal with groupings
            elif char == "(":
                depth = 1
                group_end = str_index + 1
                while group_end < len(move_str) and depth:
                    if move_str[group_end] == "(":
                        depth += 1
                    elif move_str[group_end] == ")":
                        depth -= 1
                    group_end += 1
                if depth:
                    logger.error(f"Unbalanced group in {move_str!r}")
                    raise InvalidMoveError(f"Unbalanced group in {move_str!r}")
                group = cls._parse(move_str[str_index + 1 : group_end - 1])
                str_index = group_end

                num_repeat = 1
                if str_index < len(move_str) and move_str[str_index] in "123":
                    num_repeat = int(move_str[str_index])
                    str_index += 1
                parsed.extend(group * num_repeat)

            # Handle regular moves
            elif char in Face.__members__:
                str_index += 1
                num_moves = 1
                if str_index < len(move_str) and move_str[str_index] in "123":
                    num_moves = int(move_str[str_index])
                    str_index += 1
                if str_index < len(move_str) and move_str[str_index] == "'":
                    num_moves = -num_moves
                    str_index += 1
                parsed.append(Move.of(Face(char), num_moves))

            else:
                logger.error(f"Cannot process {char!r} in {move_str!r}")
                raise InvalidMoveError(f"Cannot process {char!r} in {move_str!r}")
        return parsed

    def randomize(self, num_rot: int, rng: Optional[random.Random] = None) -> None:
        """
        Generate a random scramble of moves.

        Replace the move list with `num_rot` random face turns, never
        turning the same face twice in a row.

        :param num_rot: The number of turns in the scramble.
        :type num_rot: int
        :param rng: source of randomness, the `random` module if omitted
        :type rng: random.Random, optional
        """
        rng = rng or random
        moves = list(Move)
        self.move_list = list()
        last_face = None
        for loop1 in range(num_rot):
            next_move = rng.choice(moves)
            while next_move.face == last_face:
                next_move = rng.choice(moves)
            last_face = next_move.face
            self.move_list.append(next_move)
        logger.info("Randomized moves: {}".format(self.__str__()))
