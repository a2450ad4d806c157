from __future__ import annotations

import json

import pytest

from dungeon.environment.level import Level
from dungeon.export.serialize import level_from_json, level_to_csv, level_to_json


def test_json_schema_is_shared_by_algorithms(any_level: Level) -> None:
    data = json.loads(level_to_json(any_level))
    assert data["width"] == 48
    assert data["height"] == 40
    assert data["seed"] == any_level.seed
    assert data["algorithm"] == any_level.algorithm.value
    assert data["walls"] is False
    assert len(data["rooms"]) == len(any_level.rooms)
    assert set(data["rooms"][0]) == {"x", "y", "width", "height"}
    assert len(data["tiles"]) == 48 * 40


def test_json_round_trip(any_level: Level) -> None:
    assert level_from_json(level_to_json(any_level)) == any_level


def test_json_indent(rooms_level: Level) -> None:
    assert "\n" not in level_to_json(rooms_level)
    assert "\n  " in level_to_json(rooms_level, indent=2)


def test_json_rejects_mismatched_tiles(rooms_level: Level) -> None:
    data = rooms_level.to_dict()
    data["width"] = 47
    with pytest.raises(ValueError):
        level_from_json(json.dumps(data))


def test_json_rejects_unknown_tile_code(rooms_level: Level) -> None:
    data = rooms_level.to_dict()
    data["tiles"][0] = 7
    with pytest.raises(ValueError):
        level_from_json(json.dumps(data))


@pytest.mark.parametrize("code", [-1, 256, 1000])
def test_json_rejects_out_of_range_tile_code(rooms_level: Level, code: int) -> None:
    data = rooms_level.to_dict()
    data["tiles"][5] = code
    with pytest.raises(ValueError, match=f"Invalid tile code in level data: {code}"):
        level_from_json(json.dumps(data))


def test_csv_shape_and_codes(any_level: Level) -> None:
    text = level_to_csv(any_level)
    lines = text.splitlines()
    assert len(lines) == any_level.height
    rows = [[int(code) for code in line.split(",")] for line in lines]
    assert all(len(row) == any_level.width for row in rows)
    assert rows == any_level.board_to_csv()
    assert text.endswith("\n")
