import random

import pytest

from cubestruct.cubie import (
    CORNERS,
    EDGES,
    CornerCubie,
    EdgeCubicle,
    EdgeCubie,
)
from cubestruct.cubie_cube import CubieCube, move_cube
from cubestruct.errors import (
    CubeError,
    CubieCubeConstructionError,
    EmptyCubiclesError,
    InvalidMoveError,
)
from cubestruct.moves import Move, Moves

SOLVED = CubieCube.SOLVED
TPERM = "R U R' U' R' F R2 U' R' U' R U R' F'"


def random_cubes(count, seed=0):
    rng = random.Random(seed)
    return [CubieCube.random_possible(rng) for _ in range(count)]


def test_solved() -> None:
    assert SOLVED.is_constructible()
    assert SOLVED.is_possible_state()
    assert SOLVED.is_solved()
    assert SOLVED.inverse() == SOLVED
    for home in range(8):
        assert SOLVED.get_corner(home) == CornerCubie(home, 0)
    for home in range(12):
        assert SOLVED.get_edge(home) == EdgeCubie(home, 0)


def test_group_laws() -> None:
    x, y, z = random_cubes(3, seed=1)
    for cube in (x, y, z):
        assert cube.compose(cube.inverse()) == SOLVED
        assert cube.inverse().compose(cube) == SOLVED
        assert cube.compose(SOLVED) == cube
        assert SOLVED.compose(cube) == cube
    assert x.compose(y).compose(z) == x.compose(y.compose(z))
    assert x * y == x.compose(y)


def test_group_laws_on_many_cubes() -> None:
    cubes = random_cubes(60, seed=2)
    for x, y, z in zip(cubes, cubes[1:], cubes[2:]):
        assert (x * y) * z == x * (y * z)
        assert x * x.inverse() == SOLVED


def test_compose_is_apply_then() -> None:
    r_then_u = SOLVED.apply_move("R").apply_move("U")
    assert move_cube("R").compose(move_cube("U")) == r_then_u
    assert r_then_u != move_cube("U").compose(move_cube("R"))


def test_random_cubes_are_possible() -> None:
    rng = random.Random(1234)
    for _ in range(1000):
        assert CubieCube.random_possible(rng).is_possible_state()


def test_generator_orders() -> None:
    for move in Move:
        cube = move_cube(move)
        assert cube.is_possible_state()
        assert cube != SOLVED
        order = 2 if move.quarter_turns == 2 else 4
        power = SOLVED
        for count in range(1, order + 1):
            power = power.apply_move(move)
            assert (power == SOLVED) == (count == order)


def test_derived_generators() -> None:
    for move in Move:
        clockwise = move_cube(Move.of(move.face, 1))
        expected = SOLVED
        for _ in range(move.quarter_turns):
            expected = expected * clockwise
        assert move_cube(move) == expected
        assert move_cube(move.inverse) == move_cube(move).inverse()


def test_r_move() -> None:
    cube = SOLVED.apply_move(Move.R)
    assert cube != SOLVED
    assert cube != cube.inverse()
    assert cube.apply_move(Move.R_PRIME) == SOLVED
    assert SOLVED.apply_moves("R R R R") == SOLVED
    assert cube.corners.cubicles() == [0, 5, 2, 1, 4, 7, 6, 3]
    assert cube.edges.cubicles() == [0, 1, 5, 3, 4, 10, 6, 2, 8, 9, 7, 11]


def test_tperm() -> None:
    cube = SOLVED.apply_moves(TPERM)
    expected_corners = [CornerCubie(c, 0) for c in (0, 3, 2, 1, 4, 5, 6, 7)]
    expected_edges = [EdgeCubie(c, 0) for c in (0, 2, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11)]
    assert cube == CubieCube.try_new(expected_corners, expected_edges)
    assert cube.apply_moves(TPERM) == SOLVED
    assert cube.inverse() == cube


def test_apply_moves_forms() -> None:
    by_string = SOLVED.apply_moves("F U' L2")
    by_moves = SOLVED.apply_moves(Moves("F U' L2"))
    by_list = SOLVED.apply_moves([Move.F, Move.U_PRIME, Move.L2])
    assert by_string == by_moves == by_list
    scramble = Moves("F U' L2 B D R'")
    assert SOLVED.apply_moves(scramble).apply_moves(scramble.reverse()) == SOLVED


def test_try_new() -> None:
    cube = CubieCube.try_new(CORNERS.solved(), EDGES.solved())
    assert cube == SOLVED

    corners = [CornerCubie(0, 0)] * 2 + [CornerCubie(c, 0) for c in range(2, 8)]
    with pytest.raises(EmptyCubiclesError) as excinfo:
        CubieCube.try_new(corners, EDGES.solved())
    assert excinfo.value.kind == "corner"
    assert isinstance(excinfo.value, CubieCubeConstructionError)
    assert isinstance(excinfo.value, CubeError)

    edges = [EdgeCubie(c, 0) for c in range(11)] + [EdgeCubie(10, 1)]
    with pytest.raises(EmptyCubiclesError):
        CubieCube.try_new(CORNERS.solved(), edges)

    with pytest.raises(ValueError):
        CubieCube.try_new(CORNERS.solved(), [EdgeCubie(0, 0)])


def test_impossible_states() -> None:
    twisted = CubieCube.from_pairs(
        [(0, 1)] + [(c, 0) for c in range(1, 8)],
        [(e, 0) for e in range(12)],
    )
    assert twisted.is_constructible()
    assert not twisted.is_possible_state()

    flipped = CubieCube.from_pairs(
        [(c, 0) for c in range(8)],
        [(0, 1)] + [(e, 0) for e in range(1, 12)],
    )
    assert not flipped.is_possible_state()

    swapped = CubieCube.from_pairs(
        [(c, 0) for c in range(8)],
        [(1, 0), (0, 0)] + [(e, 0) for e in range(2, 12)],
    )
    assert swapped.corner_parity() == 0
    assert swapped.edge_parity() == 1
    assert not swapped.is_possible_state()


def test_solved_coordinates() -> None:
    assert SOLVED.get_ori_coord(CORNERS) == 0
    assert SOLVED.get_ori_coord(EDGES) == 0
    assert SOLVED.get_udslice_coord() == 0


def test_corner_ori_coord_round_trip() -> None:
    cube = SOLVED.copy()
    for coord in range(2187):
        cube.set_ori_coord(CORNERS, coord)
        assert cube.get_ori_coord(CORNERS) == coord
        assert cube.is_possible_state()


def test_edge_ori_coord_round_trip() -> None:
    cube = SOLVED.copy()
    for coord in range(2048):
        cube.set_ori_coord(EDGES, coord)
        assert cube.get_ori_coord(EDGES) == coord
        assert cube.is_possible_state()


def test_udslice_coord_round_trip() -> None:
    for coord in range(495):
        cube = SOLVED.copy()
        cube.set_udslice_coord(coord)
        assert cube.get_udslice_coord() == coord
        assert cube.is_possible_state()


def test_coordinate_setters_on_scrambled_cube() -> None:
    cube = SOLVED.apply_moves("R U F' L D2 B")
    corners_before = cube.corners.cubicles()
    cube.set_ori_coord(CORNERS, 1000)
    assert cube.corners.cubicles() == corners_before
    assert cube.get_ori_coord(CORNERS) == 1000

    edge_ori = cube.get_ori_coord(EDGES)
    for coord in (0, 17, 494):
        cube.set_udslice_coord(coord)
        assert cube.get_udslice_coord() == coord
        assert cube.get_ori_coord(EDGES) == edge_ori
        assert cube.is_possible_state()


def test_coordinate_ranges() -> None:
    cube = SOLVED.copy()
    for bad in (-1, 2187):
        with pytest.raises(ValueError):
            cube.set_ori_coord(CORNERS, bad)
    with pytest.raises(ValueError):
        cube.set_ori_coord(EDGES, 2048)
    with pytest.raises(ValueError):
        cube.set_udslice_coord(495)
    assert cube == SOLVED


def test_shared_constants_are_read_only() -> None:
    with pytest.raises(TypeError):
        SOLVED.set_ori_coord(CORNERS, 1)
    with pytest.raises(TypeError):
        move_cube("R").set_udslice_coord(3)
    assert SOLVED.get_ori_coord(CORNERS) == 0


def test_accessors_return_copies() -> None:
    cube = SOLVED.copy()
    edges = cube.edges
    edges.swap(EdgeCubicle.C0, EdgeCubicle.C1)
    assert cube == SOLVED
    assert cube.cubies(EDGES) == EDGES.solved()


def test_coordinates_must_be_integers() -> None:
    cube = SOLVED.copy()
    with pytest.raises(TypeError):
        cube.set_ori_coord(CORNERS, 2.5)
    with pytest.raises(TypeError):
        cube.set_ori_coord(EDGES, "3")
    with pytest.raises(TypeError):
        cube.set_udslice_coord(2.5)
    assert cube == SOLVED


def test_bad_move_notation() -> None:
    with pytest.raises(InvalidMoveError):
        SOLVED.apply_move("X")
    with pytest.raises(InvalidMoveError):
        move_cube("R3")
    assert Move.parse("R'") is Move.R_PRIME
    assert Move.parse(Move.U2) is Move.U2


def test_constructor_asserts_permutation() -> None:
    corners = CORNERS.solved()
    corners[1] = CornerCubie(0, 0)
    with pytest.raises(AssertionError):
        CubieCube(corners, EDGES.solved())
    with pytest.raises(AssertionError):
        CubieCube(EDGES.solved(), CORNERS.solved())
