import logging
import random

from cubestruct.cli import CubeCli
from cubestruct.cubie_cube import CubieCube
from cubestruct.moves import Moves

SOLVED_STRING = "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9


def make_cli() -> CubeCli:
    return CubeCli(rng=random.Random(8))


def test_move_and_undo(capsys) -> None:
    cli = make_cli()
    cli.onecmd("move R U")
    assert cli.cube == CubieCube.SOLVED.apply_moves("R U")
    assert cli.history == Moves("R U")
    cli.onecmd("undo")
    cli.onecmd("undo")
    assert cli.cube == CubieCube.SOLVED
    cli.onecmd("undo")
    out = capsys.readouterr().out
    assert "Moves: R U" in out
    assert "Nothing to undo" in out


def test_bad_move_keeps_cube(capsys) -> None:
    cli = make_cli()
    cli.onecmd("move R Q")
    assert cli.cube == CubieCube.SOLVED
    assert "Error" in capsys.readouterr().out


def test_scramble_and_history(capsys) -> None:
    cli = make_cli()
    cli.onecmd("scramble 12")
    assert len(cli.history) == 12
    assert cli.cube == CubieCube.SOLVED.apply_moves(cli.history)
    capsys.readouterr()
    cli.onecmd("history")
    assert str(cli.history) in capsys.readouterr().out
    cli.onecmd("reset")
    assert cli.cube == CubieCube.SOLVED
    cli.onecmd("history")
    assert "History is empty" in capsys.readouterr().out


def test_facelets_and_load(capsys) -> None:
    cli = make_cli()
    cli.onecmd("move F")
    capsys.readouterr()
    cli.onecmd("facelets")
    text = capsys.readouterr().out.strip()
    assert len(text) == 54
    cli.onecmd("reset")
    cli.onecmd(f"load {text}")
    assert cli.cube == CubieCube.SOLVED.apply_move("F")
    cli.onecmd(f"load {SOLVED_STRING[:-1]}")
    assert "Error" in capsys.readouterr().out
    assert cli.cube == CubieCube.SOLVED.apply_move("F")


def test_random_inverse_check(capsys) -> None:
    cli = make_cli()
    cli.onecmd("random")
    cube = cli.cube
    assert cube.is_possible_state()
    cli.onecmd("inverse")
    assert cli.cube == cube.inverse()
    capsys.readouterr()
    cli.onecmd("reset")
    cli.onecmd("check")
    assert "Solved: True" in capsys.readouterr().out


def test_coords(capsys) -> None:
    cli = make_cli()
    cli.onecmd("coords")
    out = capsys.readouterr().out
    assert "Corner orientation: 0" in out
    assert "UD-slice:           0" in out


def test_print_cube(capsys) -> None:
    cli = make_cli()
    cli.onecmd("print_cube")
    assert len(capsys.readouterr().out.strip().splitlines()) == 9


def test_debug_level() -> None:
    cli = make_cli()
    cli.onecmd("debug_level error")
    assert logging.getLogger("cubie_cube").level == logging.ERROR
    cli.onecmd("debug_level warning")
    assert logging.getLogger("facelet_cube").level == logging.WARNING
    assert cli.complete_debug_level("in", "debug_level in", 12, 14) == ["info"]


def test_quit() -> None:
    assert make_cli().onecmd("quit") is True
