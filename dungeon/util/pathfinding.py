from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
import tcod.path

from dungeon.types import WorldTilePos

if TYPE_CHECKING:
    from dungeon.environment.level import Room


def find_path(
    walkable: np.ndarray,
    start_pos: WorldTilePos,
    end_pos: WorldTilePos,
) -> list[WorldTilePos]:
    """
    Calculates a 4-directional path between two tiles using A*.

    Args:
        walkable: Boolean (width, height) map; True tiles can be entered.
        start_pos: The (x, y) starting coordinate for the path.
        end_pos: The (x, y) target coordinate for the path.

    Returns:
        A list of (x, y) tuples representing the path from start to end.
        The list does not include the start point. Returns an empty list
        if no path is found or if start and end are the same tile.
    """
    cost = np.array(walkable, dtype=np.int8)

    # Diagonal steps are disabled: rooms and corridors connect orthogonally.
    astar = tcod.path.AStar(cost=cost, diagonal=0)

    path: list[WorldTilePos] = astar.get_path(
        start_pos[0], start_pos[1], end_pos[0], end_pos[1]
    )
    return [(int(x), int(y)) for x, y in path]


def is_reachable(
    walkable: np.ndarray, start_pos: WorldTilePos, end_pos: WorldTilePos
) -> bool:
    """Return True if `end_pos` can be reached from `start_pos`."""
    if not walkable[start_pos] or not walkable[end_pos]:
        return False
    if tuple(start_pos) == tuple(end_pos):
        return True
    return bool(find_path(walkable, start_pos, end_pos))


def find_unreachable_rooms(walkable: np.ndarray, rooms: Sequence[Room]) -> list[Room]:
    """Return the rooms whose centers cannot be reached from the first room.

    Reachability is symmetric on a 4-connected grid, so an empty result means
    every pair of rooms is connected.
    """
    if not rooms:
        return []
    origin = rooms[0].center
    return [
        room for room in rooms[1:] if not is_reachable(walkable, origin, room.center)
    ]
