from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from dungeon.environment import tile_types
from dungeon.environment.grid import TileGrid
from dungeon.types import RandomSeed, TileCode, TileCoord, WorldTilePos
from dungeon.util.coordinates import Rect
from dungeon.util.pathfinding import find_unreachable_rooms


class Algorithm(Enum):
    """Procedural algorithm that produced a level."""

    ROOMS = "rooms"
    BSP = "bsp"


@dataclass(frozen=True, slots=True)
class Room:
    """An axis-aligned rectangle of Floor tiles."""

    x: TileCoord
    y: TileCoord
    width: TileCoord
    height: TileCoord

    @property
    def center(self) -> WorldTilePos:
        return (self.x + self.width // 2, self.y + self.height // 2)

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def intersects(self, other: Room, margin: int = 0) -> bool:
        """Return True if this room grown by `margin` tiles overlaps `other`."""
        return self.rect.intersects(other.rect, margin)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


class Level:
    """The finished map: grid, rooms and the metadata needed to reproduce it.

    A Level is read-only once built. The grid is frozen, the room list is a
    tuple and `tiles` is a non-writable view, so exporters can be handed the
    Level itself.
    """

    def __init__(
        self,
        grid: TileGrid,
        rooms: Sequence[Room],
        seed: RandomSeed,
        algorithm: Algorithm,
        walls: bool = False,
    ) -> None:
        if not grid.frozen:
            grid = grid.copy()
            grid.freeze()
        self._grid = grid
        self._rooms: tuple[Room, ...] = tuple(rooms)
        self._seed = seed
        self._algorithm = Algorithm(algorithm)
        self._walls = walls

    # ------------------------------------------------------------------
    # Read-only attributes
    # ------------------------------------------------------------------

    @property
    def width(self) -> TileCoord:
        return self._grid.width

    @property
    def height(self) -> TileCoord:
        return self._grid.height

    @property
    def seed(self) -> RandomSeed:
        return self._seed

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def walls(self) -> bool:
        return self._walls

    @property
    def grid(self) -> TileGrid:
        return self._grid

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self._rooms

    @property
    def tiles(self) -> np.ndarray:
        """Read-only (width, height) array of tile codes."""
        return self._grid.tiles

    @property
    def walkable(self) -> np.ndarray:
        """Boolean (width, height) map of Floor and Corridor tiles."""
        return tile_types.get_walkable_map(self._grid.tiles)

    # ------------------------------------------------------------------
    # Exports
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Text rendering: one line per row, one glyph per tile."""
        glyphs = tile_types.get_glyph_map(self._grid.tiles)
        return "\n".join("".join(glyphs[:, y]) for y in range(self.height))

    def __str__(self) -> str:
        return self.render()

    def board_to_csv(self) -> list[list[TileCode]]:
        """Rows of tile codes, top to bottom. `height` rows of `width` codes."""
        return self._grid.tiles.T.tolist()

    def to_dict(self) -> dict[str, Any]:
        """Structured export shared by both algorithms.

        `tiles` is the grid flattened row by row (index = y * width + x).
        """
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "algorithm": self.algorithm.value,
            "walls": self.walls,
            "rooms": [room.to_dict() for room in self.rooms],
            "tiles": self._grid.tiles.T.ravel().tolist(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Level:
        """Rebuild a Level from the structure produced by `to_dict`."""
        width = data["width"]
        height = data["height"]
        codes = data["tiles"]
        if len(codes) != width * height:
            raise ValueError(
                f"Expected {width * height} tiles for a {width}x{height} level, "
                f"got {len(codes)}"
            )
        # Validate before narrowing to uint8 so -1 or 256 cannot wrap or overflow.
        wide = np.asarray(codes, dtype=np.int64)
        invalid = ~tile_types.is_valid_tile_code(wide)
        if invalid.any():
            raise ValueError(f"Invalid tile code in level data: {wide[invalid][0]}")
        tiles = wide.astype(np.uint8).reshape((height, width)).T
        grid = TileGrid.from_array(np.asfortranarray(tiles))
        grid.freeze()
        rooms = [
            Room(r["x"], r["y"], r["width"], r["height"]) for r in data["rooms"]
        ]
        return cls(
            grid,
            rooms,
            seed=data["seed"],
            algorithm=Algorithm(data["algorithm"]),
            walls=bool(data.get("walls", False)),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def unreachable_rooms(self) -> list[Room]:
        """Rooms that cannot be reached from the first room on foot."""
        return find_unreachable_rooms(self.walkable, self.rooms)

    def is_connected(self) -> bool:
        """True if every room can be reached from every other room."""
        return not self.unreachable_rooms()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return (
            self.seed == other.seed
            and self.algorithm == other.algorithm
            and self.walls == other.walls
            and self.rooms == other.rooms
            and self._grid == other._grid
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Level(width={self.width}, height={self.height}, "
            f"algorithm={self.algorithm.value}, rooms={len(self.rooms)}, "
            f"seed={self.seed!r})"
        )
