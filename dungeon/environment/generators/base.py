"""Base classes and shared carving for level generation."""

from __future__ import annotations

import abc
import logging
from typing import ClassVar

import numpy as np

from dungeon.environment.grid import TileGrid, add_wall_borders
from dungeon.environment.level import Algorithm, Level, Room
from dungeon.environment.tile_types import TileTypeID, get_tile_type_name_by_id
from dungeon.types import RandomSeed, TileCoord, WorldTilePos
from dungeon.util.rng import RNG

logger = logging.getLogger(__name__)


class InvalidConfigError(ValueError):
    """Raised when generation parameters cannot produce a level.

    Raised before any grid is created or any random number is drawn.
    """


def _require_positive_int(name: str, value: object) -> int:
    # Same integer rule as TileGrid: Python and NumPy ints, never bools.
    if isinstance(value, bool) or not isinstance(value, int | np.integer):
        raise InvalidConfigError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidConfigError(f"{name} must be positive, got {value}")
    return int(value)


class BaseLevelGenerator(abc.ABC):
    """Abstract base class for level generation algorithms.

    Subclasses only hold validated, immutable parameters. Everything mutable
    (the grid, the room list, the random source) lives inside a single
    `generate()` call, so one generator instance can be reused for any number
    of seeds.
    """

    algorithm: ClassVar[Algorithm]

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        min_room_width: int,
        min_room_height: int,
        walls: bool = False,
    ) -> None:
        map_width = _require_positive_int("map_width", map_width)
        map_height = _require_positive_int("map_height", map_height)
        min_room_width = _require_positive_int("min_room_width", min_room_width)
        min_room_height = _require_positive_int("min_room_height", min_room_height)
        if min_room_width > map_width:
            raise InvalidConfigError(
                f"min_room_width ({min_room_width}) exceeds map width ({map_width})"
            )
        if min_room_height > map_height:
            raise InvalidConfigError(
                f"min_room_height ({min_room_height}) exceeds map height "
                f"({map_height})"
            )

        self.map_width = map_width
        self.map_height = map_height
        self.min_room_width = min_room_width
        self.min_room_height = min_room_height
        self.walls = walls

    def generate(self, rng: RNG, seed: RandomSeed = "") -> Level:
        """Generate a level, consuming `rng` in this algorithm's draw order.

        Args:
            rng: Freshly seeded random source, owned by this call.
            seed: Opaque token recorded in the level for reproduction.
                It is never used to reseed `rng`.
        """
        grid = TileGrid(self.map_width, self.map_height, fill=TileTypeID.WALL)
        rooms = self._build(grid, rng)
        if self.walls:
            add_wall_borders(grid)
        grid.freeze()

        if logger.isEnabledFor(logging.DEBUG):
            census = ", ".join(
                f"{get_tile_type_name_by_id(tile)}={grid.count(tile)}"
                for tile in TileTypeID
            )
            logger.debug(
                f"{self.algorithm.value}: {len(rooms)} rooms on a "
                f"{self.map_width}x{self.map_height} board ({census})"
            )
        return Level(grid, rooms, seed=seed, algorithm=self.algorithm, walls=self.walls)

    @abc.abstractmethod
    def _build(self, grid: TileGrid, rng: RNG) -> list[Room]:
        """Carve rooms and corridors into `grid` and return the rooms."""
        raise NotImplementedError


# =============================================================================
# CARVING
# =============================================================================


def carve_room(grid: TileGrid, room: Room) -> None:
    grid.fill_rect(room.rect, TileTypeID.FLOOR)


def carve_h_tunnel(grid: TileGrid, x1: TileCoord, x2: TileCoord, y: TileCoord) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        if grid.get(x, y) == TileTypeID.WALL:
            grid.set(x, y, TileTypeID.CORRIDOR)


def carve_v_tunnel(grid: TileGrid, y1: TileCoord, y2: TileCoord, x: TileCoord) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        if grid.get(x, y) == TileTypeID.WALL:
            grid.set(x, y, TileTypeID.CORRIDOR)


def carve_corridor(grid: TileGrid, start: WorldTilePos, end: WorldTilePos) -> None:
    """Carve an L-shaped corridor between two tiles.

    The longer leg goes first: horizontal then vertical when |dx| >= |dy|
    (elbow at (end_x, start_y)), otherwise vertical then horizontal (elbow at
    (start_x, end_y)). Both elbows lie inside the bounding box of the two
    points, so a corridor between in-bounds points never leaves the board.

    Only WALL tiles are converted. Floor stays Floor and existing corridors are
    re-carved as no-ops.
    """
    x1, y1 = start
    x2, y2 = end
    if abs(x2 - x1) >= abs(y2 - y1):
        carve_h_tunnel(grid, x1, x2, y1)
        carve_v_tunnel(grid, y1, y2, x2)
    else:
        carve_v_tunnel(grid, y1, y2, x1)
        carve_h_tunnel(grid, x1, x2, y2)
