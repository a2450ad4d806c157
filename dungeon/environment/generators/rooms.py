"""Rooms & Corridors: random non-overlapping rooms joined in placement order."""

from __future__ import annotations

import logging

from dungeon import config
from dungeon.environment.grid import TileGrid
from dungeon.environment.level import Algorithm, Room
from dungeon.types import TileCoord
from dungeon.util.rng import RNG

from .base import BaseLevelGenerator, carve_corridor, carve_room

logger = logging.getLogger(__name__)


class RoomsAndCorridorsGenerator(BaseLevelGenerator):
    """Generates a level with randomly placed rooms and connecting corridors.

    Random draws, in order, for every placement attempt:
        1. room width   randint(min_room_width, max_room_width)
        2. room height  randint(min_room_height, max_room_height)
        3. x            randint(border, map_width - width - border)
        4. y            randint(border, map_height - height - border)

    Attempts stop once `target_rooms` rooms are accepted or `max_attempts`
    attempts have been made, whichever comes first. Corridors draw nothing.
    """

    algorithm = Algorithm.ROOMS

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        min_room_width: int,
        min_room_height: int,
        walls: bool = False,
        *,
        room_margin: int = config.ROOM_MARGIN,
    ) -> None:
        super().__init__(map_width, map_height, min_room_width, min_room_height, walls)
        self.room_margin = room_margin
        self.border = config.BORDER_MARGIN

        self.max_room_width = max(
            self.min_room_width,
            min(
                self.min_room_width * config.ROOM_SIZE_MULTIPLIER,
                self.map_width - 2 * self.border,
            ),
        )
        self.max_room_height = max(
            self.min_room_height,
            min(
                self.min_room_height * config.ROOM_SIZE_MULTIPLIER,
                self.map_height - 2 * self.border,
            ),
        )

        expected_area = ((self.min_room_width + self.max_room_width) // 2) * (
            (self.min_room_height + self.max_room_height) // 2
        )
        board_area = self.map_width * self.map_height
        self.target_rooms = max(
            1, board_area // (expected_area * config.ROOM_AREA_FACTOR)
        )
        self.max_attempts = self.target_rooms * config.PLACEMENT_ATTEMPTS_PER_ROOM

    @property
    def fits_board(self) -> bool:
        """Whether a minimum-size room fits inside the border margin at all."""
        return (
            self.min_room_width <= self.map_width - 2 * self.border
            and self.min_room_height <= self.map_height - 2 * self.border
        )

    def _place_rooms(self, grid: TileGrid, rng: RNG) -> list[Room]:
        rooms: list[Room] = []
        if not self.fits_board:
            logger.warning(
                f"A {self.min_room_width}x{self.min_room_height} room does not fit "
                f"a {self.map_width}x{self.map_height} board with a "
                f"{self.border}-tile border; level has no rooms"
            )
            return rooms

        attempts = 0
        while len(rooms) < self.target_rooms and attempts < self.max_attempts:
            attempts += 1
            w = rng.randint(self.min_room_width, self.max_room_width)
            h = rng.randint(self.min_room_height, self.max_room_height)
            x = rng.randint(self.border, self.map_width - w - self.border)
            y = rng.randint(self.border, self.map_height - h - self.border)

            new_room = Room(x, y, w, h)
            if any(new_room.intersects(other, self.room_margin) for other in rooms):
                continue

            carve_room(grid, new_room)
            rooms.append(new_room)

        if len(rooms) < self.target_rooms:
            logger.info(
                f"Placed {len(rooms)} of {self.target_rooms} targeted rooms "
                f"after {attempts} attempts"
            )
        else:
            logger.debug(f"Placed {len(rooms)} rooms in {attempts} attempts")
        return rooms

    def _build(self, grid: TileGrid, rng: RNG) -> list[Room]:
        rooms = self._place_rooms(grid, rng)
        for prev, new in zip(rooms, rooms[1:], strict=False):
            carve_corridor(grid, prev.center, new.center)
        return rooms
