from __future__ import annotations

import logging
from itertools import combinations
from random import Random

import pytest

from dungeon.environment.generators import InvalidConfigError, RoomsAndCorridorsGenerator
from dungeon.environment.level import Algorithm
from dungeon.environment.tile_types import TileTypeID
from tests.helpers import all_rooms_connected


def test_derived_placement_limits() -> None:
    gen = RoomsAndCorridorsGenerator(48, 40, 4, 5)
    assert gen.max_room_width == 8
    assert gen.max_room_height == 10
    # Expected room is 6x7 = 42 tiles; 48 * 40 // (42 * 4) == 11.
    assert gen.target_rooms == 11
    assert gen.max_attempts == 110


def test_max_room_size_is_clamped_to_board() -> None:
    gen = RoomsAndCorridorsGenerator(10, 12, 6, 6)
    assert gen.max_room_width == 8
    assert gen.max_room_height == 10
    assert gen.target_rooms == 1


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
def test_rooms_fit_without_overlap(seed: int) -> None:
    gen = RoomsAndCorridorsGenerator(48, 40, 4, 5)
    level = gen.generate(Random(seed), seed=str(seed))

    assert level.algorithm is Algorithm.ROOMS
    assert 1 <= len(level.rooms) <= gen.target_rooms
    for room in level.rooms:
        assert room.x >= 1 and room.y >= 1
        assert room.x + room.width <= 47
        assert room.y + room.height <= 39
        assert 4 <= room.width <= 8
        assert 5 <= room.height <= 10
    for a, b in combinations(level.rooms, 2):
        assert not a.intersects(b, margin=1)
        assert not b.intersects(a, margin=1)


@pytest.mark.parametrize("seed", [0, 3, 99])
def test_rooms_are_carved_and_connected(seed: int) -> None:
    level = RoomsAndCorridorsGenerator(48, 40, 4, 5).generate(Random(seed))

    for room in level.rooms:
        carved = level.tiles[
            room.x : room.x + room.width, room.y : room.y + room.height
        ]
        assert (carved == TileTypeID.FLOOR).all()
    assert all_rooms_connected(level)
    assert level.is_connected()


def test_no_wall_border_without_walls_flag() -> None:
    level = RoomsAndCorridorsGenerator(48, 40, 4, 5).generate(Random(5))
    assert level.grid.count(TileTypeID.WALL_BORDER) == 0
    assert level.grid.count(TileTypeID.CORRIDOR) > 0 or len(level.rooms) == 1


def test_larger_margin_is_respected() -> None:
    gen = RoomsAndCorridorsGenerator(60, 60, 4, 4, room_margin=3)
    level = gen.generate(Random(11))
    for a, b in combinations(level.rooms, 2):
        assert not a.intersects(b, margin=3)


def test_generator_draws_only_from_supplied_rng() -> None:
    gen = RoomsAndCorridorsGenerator(48, 40, 4, 5)
    first = gen.generate(Random(8), seed="x")
    # Reusing the generator with an equally seeded source reproduces the level.
    second = gen.generate(Random(8), seed="x")
    assert first == second


def test_board_too_small_for_border_gives_no_rooms(
    caplog: pytest.LogCaptureFixture,
) -> None:
    gen = RoomsAndCorridorsGenerator(5, 5, 4, 4)
    assert not gen.fits_board

    rng = Random(3)
    state = rng.getstate()
    with caplog.at_level(logging.WARNING):
        level = gen.generate(rng)

    assert level.rooms == ()
    assert level.grid.count(TileTypeID.WALL) == 25
    assert rng.getstate() == state
    assert "does not fit" in caplog.text


def test_crowded_board_logs_shortfall(caplog: pytest.LogCaptureFixture) -> None:
    # A margin wider than the board leaves space for exactly one room.
    gen = RoomsAndCorridorsGenerator(48, 40, 4, 5, room_margin=100)
    with caplog.at_level(logging.INFO):
        level = gen.generate(Random(0))
    assert len(level.rooms) == 1
    assert gen.target_rooms > 1
    assert "Placed 1 of 11 targeted rooms after 110 attempts" in caplog.text


@pytest.mark.parametrize(
    ("width", "height", "min_w", "min_h"),
    [
        (0, 40, 4, 5),
        (48, -1, 4, 5),
        (48, 40, 0, 5),
        (48, 40, 4, -2),
        (10, 10, 20, 5),
        (10, 10, 4, 11),
    ],
)
def test_invalid_config(width: int, height: int, min_w: int, min_h: int) -> None:
    with pytest.raises(InvalidConfigError):
        RoomsAndCorridorsGenerator(width, height, min_w, min_h)
