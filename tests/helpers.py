from __future__ import annotations

from collections import deque

import numpy as np

from dungeon.environment.generators import generate_level
from dungeon.environment.level import Algorithm, Level
from dungeon.types import WorldTilePos
from dungeon.util import rng

# Fixed seed shared by the scenario tests.
TEST_SEED = rng.seed_from_text("dungeon test level")


def make_level(
    algorithm: Algorithm | str = Algorithm.ROOMS,
    width: int = 48,
    height: int = 40,
    *,
    seed: str = TEST_SEED,
    walls: bool = False,
    min_room_width: int = 4,
    min_room_height: int = 5,
) -> Level:
    """Generate a level the same way the command line does."""
    return generate_level(
        algorithm,
        width,
        height,
        seed=seed,
        rng=rng.create(seed),
        walls=walls,
        min_room_width=min_room_width,
        min_room_height=min_room_height,
    )


def flood_fill(walkable: np.ndarray, start: WorldTilePos) -> set[WorldTilePos]:
    """Every tile reachable from `start` with 4-directional steps.

    Independent of the A* checks in `dungeon.util.pathfinding`, so tests can
    cross-check them.
    """
    width, height = walkable.shape
    if not walkable[start]:
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < width
                and 0 <= ny < height
                and walkable[nx, ny]
                and (nx, ny) not in seen
            ):
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen


def all_rooms_connected(level: Level) -> bool:
    if not level.rooms:
        return True
    reachable = flood_fill(level.walkable, level.rooms[0].center)
    return all(room.center in reachable for room in level.rooms)
