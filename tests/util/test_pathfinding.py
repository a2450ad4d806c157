from __future__ import annotations

import numpy as np

from dungeon.environment.level import Room
from dungeon.util.pathfinding import find_path, find_unreachable_rooms, is_reachable


def _corridor_map() -> np.ndarray:
    """A 6x5 map with an L-shaped walkable corridor from (0, 0) to (5, 4)."""
    walkable = np.zeros((6, 5), dtype=bool, order="F")
    walkable[0:6, 0] = True
    walkable[5, 0:5] = True
    return walkable


def test_find_path_follows_corridor() -> None:
    path = find_path(_corridor_map(), (0, 0), (5, 4))
    assert path[-1] == (5, 4)
    assert (0, 0) not in path
    assert len(path) == 9
    # Every step is orthogonal.
    previous = (0, 0)
    for step in path:
        assert abs(step[0] - previous[0]) + abs(step[1] - previous[1]) == 1
        previous = step


def test_no_diagonal_shortcuts() -> None:
    walkable = np.zeros((2, 2), dtype=bool)
    walkable[0, 0] = True
    walkable[1, 1] = True
    assert find_path(walkable, (0, 0), (1, 1)) == []
    assert not is_reachable(walkable, (0, 0), (1, 1))


def test_blocked_target() -> None:
    walkable = _corridor_map()
    assert not is_reachable(walkable, (0, 0), (2, 3))


def test_same_tile() -> None:
    walkable = _corridor_map()
    assert is_reachable(walkable, (1, 0), (1, 0))
    assert not is_reachable(walkable, (1, 1), (1, 1))


def test_find_unreachable_rooms() -> None:
    walkable = np.zeros((12, 5), dtype=bool, order="F")
    walkable[1:3, 1:3] = True
    walkable[3, 1] = True
    walkable[4:6, 1:3] = True
    walkable[8:10, 1:3] = True
    rooms = [Room(1, 1, 2, 2), Room(4, 1, 2, 2), Room(8, 1, 2, 2)]

    assert find_unreachable_rooms(walkable, rooms) == [rooms[2]]
    assert find_unreachable_rooms(walkable, rooms[:2]) == []
    assert find_unreachable_rooms(walkable, []) == []
