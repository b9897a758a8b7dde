import random

import pytest

from cubestruct import cubie_cube
from cubestruct.cubie_cube import CubieCube
from cubestruct.errors import (
    CornerCubieNotFoundError,
    EdgeCubieNotFoundError,
    EmptyCubiclesError,
    FaceletConversionError,
    IncompleteFaceletCubeError,
    InvalidCenterError,
)
from cubestruct.facelet_cube import Color, FaceletCube, FaceletCubeBuilder

O, R, Y, W, G, B = (
    Color.ORANGE,
    Color.RED,
    Color.YELLOW,
    Color.WHITE,
    Color.GREEN,
    Color.BLUE,
)

SOLVED_FACES = [[color] * 9 for color in Color]

# faces in color order: orange, red, yellow, white, green, blue
R_MOVE_FACES = [
    [O, O, O, O, O, O, O, O, O],
    [R, R, R, R, R, R, R, R, R],
    [Y, Y, B, Y, Y, B, Y, Y, B],
    [W, W, G, W, W, G, W, W, G],
    [G, G, Y, G, G, Y, G, G, Y],
    [W, B, B, W, B, B, W, B, B],
]

TPERM_FACES = [
    [O, R, O, O, O, O, O, O, O],
    [B, O, G, R, R, R, R, R, R],
    [Y, Y, Y, Y, Y, Y, Y, Y, Y],
    [W, W, W, W, W, W, W, W, W],
    [G, G, R, G, G, G, G, G, G],
    [R, B, B, B, B, B, B, B, B],
]

TPERM = "R U R' U' R' F R2 U' R' U' R U R' F'"


def test_solved_round_trip() -> None:
    facelets = CubieCube.SOLVED.to_facelet_cube()
    assert facelets == FaceletCube.SOLVED
    assert facelets.faces == SOLVED_FACES
    assert facelets.to_cubie_cube() == CubieCube.SOLVED
    assert CubieCube.from_facelet_cube(facelets) == CubieCube.SOLVED


def test_r_move_facelets() -> None:
    cube = CubieCube.SOLVED.apply_move("R")
    facelets = FaceletCube.from_cubie_cube(cube)
    assert facelets == FaceletCube.from_faces(R_MOVE_FACES)
    assert facelets.to_cubie_cube() == cube


def test_tperm_facelets() -> None:
    cube = CubieCube.SOLVED.apply_moves(TPERM)
    assert cube.to_facelet_cube() == FaceletCube.from_faces(TPERM_FACES)
    assert FaceletCube.from_faces(TPERM_FACES).to_cubie_cube() == cube


def test_random_round_trips() -> None:
    rng = random.Random(21)
    for _ in range(200):
        cube = CubieCube.random_possible(rng)
        facelets = cube.to_facelet_cube()
        assert facelets.to_cubie_cube() == cube
        assert facelets.to_cubie_cube().to_facelet_cube() == facelets
        assert facelets.count_colors() == {color: 9 for color in Color}


def test_impossible_cube_round_trip() -> None:
    twisted = CubieCube.from_pairs(
        [(0, 1)] + [(c, 0) for c in range(1, 8)],
        [(e, 0) for e in range(12)],
    )
    decoded = twisted.to_facelet_cube().to_cubie_cube()
    assert decoded == twisted
    assert not decoded.is_possible_state()


def test_single_sticker_changes_fail() -> None:
    for face in Color:
        for index in range(9):
            if index == 4:
                continue
            for color in Color:
                if color == face:
                    continue
                faces = [list(f) for f in SOLVED_FACES]
                faces[face][index] = color
                facelets = FaceletCube.from_faces(faces)
                with pytest.raises((CornerCubieNotFoundError, EdgeCubieNotFoundError)):
                    facelets.to_cubie_cube()


def test_not_found_errors_carry_home() -> None:
    # the UB edge shows blue on both stickers
    faces = [list(f) for f in SOLVED_FACES]
    faces[W][1] = B
    with pytest.raises(EdgeCubieNotFoundError) as excinfo:
        FaceletCube.from_faces(faces).to_cubie_cube()
    assert excinfo.value.cubicle == 0
    assert isinstance(excinfo.value, FaceletConversionError)

    # the ULB corner shows white twice
    faces = [list(f) for f in SOLVED_FACES]
    faces[O][0] = W
    with pytest.raises(CornerCubieNotFoundError) as excinfo:
        FaceletCube.from_faces(faces).to_cubie_cube()
    assert excinfo.value.cubicle == 0


def test_wrong_center() -> None:
    faces = [list(f) for f in SOLVED_FACES]
    faces[G][4] = B
    with pytest.raises(InvalidCenterError) as excinfo:
        FaceletCube.from_faces(faces).to_cubie_cube()
    assert excinfo.value.face == G
    assert excinfo.value.found == B


def test_construction_error_is_chained(monkeypatch) -> None:
    def failing(corners, edges):
        raise EmptyCubiclesError("edge")

    monkeypatch.setattr(cubie_cube.CubieCube, "from_pairs", failing)
    with pytest.raises(FaceletConversionError) as excinfo:
        FaceletCube.SOLVED.to_cubie_cube()
    assert isinstance(excinfo.value.__cause__, EmptyCubiclesError)


def test_from_faces_validation() -> None:
    with pytest.raises(FaceletConversionError):
        FaceletCube.from_faces(SOLVED_FACES[:5])
    with pytest.raises(FaceletConversionError):
        FaceletCube.from_faces([face[:8] for face in SOLVED_FACES])
    with pytest.raises(FaceletConversionError):
        FaceletCube.from_faces([[6] * 9] + SOLVED_FACES[1:])
    with pytest.raises(FaceletConversionError):
        FaceletCube.from_faces({W: [W] * 9})

    by_color = {color: [color] * 9 for color in Color}
    assert FaceletCube.from_faces(by_color) == FaceletCube.SOLVED
    ints = [[int(color)] * 9 for color in Color]
    assert FaceletCube.from_faces(ints) == FaceletCube.SOLVED


def test_accessors() -> None:
    facelets = FaceletCube.from_faces(R_MOVE_FACES)
    assert facelets.get_face(Color.BLUE) == [W, B, B, W, B, B, W, B, B]
    assert facelets.get_facelet(Color.YELLOW, 2) == B
    faces = facelets.faces
    faces[0][0] = R
    assert facelets.get_facelet(Color.ORANGE, 0) == O


def test_facelet_strings() -> None:
    solved = "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9
    assert FaceletCube.SOLVED.to_string() == solved
    assert FaceletCube.from_string(solved) == FaceletCube.SOLVED

    r_move = "UUFUUFUUFRRRRRRRRRFFDFFDFFDDDBDDBDDBLLLLLLLLLUBBUBBUBB"
    cube = CubieCube.SOLVED.apply_move("R")
    assert cube.to_facelet_cube().to_string() == r_move
    assert FaceletCube.from_string(r_move).to_cubie_cube() == cube

    rng = random.Random(4)
    for _ in range(20):
        facelets = CubieCube.random_possible(rng).to_facelet_cube()
        assert FaceletCube.from_string(facelets.to_string()) == facelets


def test_malformed_strings() -> None:
    with pytest.raises(FaceletConversionError):
        FaceletCube.from_string("U" * 53)
    with pytest.raises(FaceletConversionError):
        FaceletCube.from_string("X" * 54)


def test_builder() -> None:
    builder = FaceletCubeBuilder()
    assert not builder.is_complete()
    with pytest.raises(IncompleteFaceletCubeError):
        builder.build()

    for face, colors in zip(Color, TPERM_FACES):
        builder.set_face(face, colors)
    assert builder.is_complete()
    facelets = builder.build()
    assert facelets == FaceletCube.from_faces(TPERM_FACES)

    builder.set(Color.ORANGE, 1, Color.ORANGE).set(Color.RED, 1, Color.RED)
    builder.set(Color.RED, 0, Color.RED).set(Color.RED, 2, Color.RED)
    builder.set(Color.GREEN, 2, Color.GREEN).set(Color.BLUE, 0, Color.BLUE)
    assert builder.build() == FaceletCube.SOLVED

    with pytest.raises(ValueError):
        builder.set(Color.RED, 9, Color.RED)
    with pytest.raises(ValueError):
        builder.set_face(Color.RED, [Color.RED] * 8)


def test_display() -> None:
    facelets = CubieCube.SOLVED.apply_move("F").to_facelet_cube()
    lines = str(facelets).splitlines()
    assert len(lines) == 9
    assert lines[0].strip() == "W  W  W"
    assert lines[2].strip() == "O  O  O"
    assert "\033[" in facelets.to_net(ansi=True)
    assert "\033[" not in str(facelets)
    assert Color.WHITE.face_letter == "U"
    assert Color.BLUE.letter == "B"
