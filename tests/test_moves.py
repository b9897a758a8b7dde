import random

import pytest

from cubestruct.errors import InvalidMoveError
from cubestruct.moves import Face, Move, Moves


def test_move_notation() -> None:
    assert len(list(Move)) == 18
    assert Move("R'") is Move.R_PRIME
    assert str(Move.U2) == "U2"
    assert Move.F_PRIME.face is Face.F
    assert Move.F_PRIME.quarter_turns == 3
    assert sorted(move.index for move in Move) == list(range(18))


def test_move_of() -> None:
    assert Move.of(Face.L, 1) is Move.L
    assert Move.of(Face.L, 2) is Move.L2
    assert Move.of(Face.L, -1) is Move.L_PRIME
    assert Move.of(Face.L, 7) is Move.L_PRIME
    with pytest.raises(InvalidMoveError):
        Move.of(Face.L, 4)


def test_move_inverse() -> None:
    assert Move.R.inverse is Move.R_PRIME
    assert Move.R_PRIME.inverse is Move.R
    assert Move.B2.inverse is Move.B2
    for move in Move:
        assert move.inverse.inverse is move


def test_parse_sequence() -> None:
    moves = Moves("R U R' U'")
    assert list(moves) == [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME]
    assert str(moves) == "R U R' U'"
    assert len(moves) == 4
    assert moves[2] is Move.R_PRIME


def test_parse_counts() -> None:
    assert list(Moves("R2 R3 R2' D1 F'")) == [
        Move.R2,
        Move.R_PRIME,
        Move.R2,
        Move.D,
        Move.F_PRIME,
    ]
    assert list(Moves("RUR'U'")) == [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME]


def test_parse_groups() -> None:
    assert Moves("(R U)2") == Moves("R U R U")
    assert Moves("((R)2 U)2 F") == Moves("R R U R R U F")
    assert Moves("(L)") == Moves("L")


def test_parse_errors() -> None:
    with pytest.raises(InvalidMoveError):
        Moves("R X")
    with pytest.raises(InvalidMoveError):
        Moves("(R U")
    with pytest.raises(ValueError):
        Moves("R4")


def test_reverse() -> None:
    assert Moves("R U2 F'").reverse() == Moves("F U2 R'")
    assert Moves().reverse() == Moves()


def test_combine_and_edit() -> None:
    moves = Moves("R") + Moves("U")
    assert moves == Moves("R U")
    moves.add(Move.F)
    moves.add("D2")
    assert str(moves) == "R U F D2"
    moves.add_moves([Move.B])
    assert str(moves) == "R U F D2 B"
    moves.clear()
    assert len(moves) == 0
    with pytest.raises(InvalidMoveError):
        moves.add_moves(["R"])


def test_randomize() -> None:
    moves = Moves()
    moves.randomize(50, random.Random(11))
    assert len(moves) == 50
    for first, second in zip(list(moves), list(moves)[1:]):
        assert first.face != second.face

    again = Moves()
    again.randomize(50, random.Random(11))
    assert again == moves
