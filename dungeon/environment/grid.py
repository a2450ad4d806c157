"""Fixed-size tile grid that both generators carve into.

The grid is a thin, bounds-checked wrapper over a NumPy array of `TileTypeID`
values. Storage follows the rest of the package: shape `(width, height)`,
Fortran order, indexed `[x, y]`. Exporters never see the array directly; they
read rows through `rows()` or a read-only view through `tiles`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np

from dungeon.environment.tile_types import TileTypeID, is_valid_tile_code
from dungeon.types import TileCoord
from dungeon.util.coordinates import Rect, is_on_board

logger = logging.getLogger(__name__)


class InvalidDimensionError(ValueError):
    """Raised when a grid is created with a non-positive width or height."""


class OutOfBoundsError(IndexError):
    """Raised when a grid coordinate falls outside [0, width) x [0, height).

    Seeing this from a generator means the generator has a bug; the grid never
    clamps coordinates.
    """


class ReadOnlyGridError(RuntimeError):
    """Raised when a frozen grid is written to."""


class TileGrid:
    """A width x height array of tiles addressed by (x, y)."""

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        fill: TileTypeID = TileTypeID.WALL,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int | np.integer):
                raise InvalidDimensionError(
                    f"Grid {name} must be an integer, got {value!r}"
                )
            if value <= 0:
                raise InvalidDimensionError(f"Grid {name} must be positive, got {value}")

        self.width: TileCoord = int(width)
        self.height: TileCoord = int(height)
        self._tiles = np.full(
            (self.width, self.height),
            fill_value=TileTypeID(fill),
            dtype=np.uint8,
            order="F",
        )
        self._frozen = False

    @classmethod
    def from_array(cls, tiles: np.ndarray) -> TileGrid:
        """Build a grid from an existing (width, height) array of tile codes."""
        if tiles.ndim != 2:
            raise InvalidDimensionError(
                f"Tile array must be 2-dimensional, got shape {tiles.shape}"
            )
        width, height = tiles.shape
        grid = cls(width, height)
        valid = is_valid_tile_code(tiles)
        if not valid.all():
            bad = tiles[~valid].flat[0]
            raise ValueError(f"Invalid tile code in array: {bad}")
        grid._tiles[:, :] = tiles
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return is_on_board(x, y, self.width, self.height)

    def _check_bounds(self, x: TileCoord, y: TileCoord) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside the {self.width}x{self.height} grid"
            )

    def _check_writable(self) -> None:
        if self._frozen:
            raise ReadOnlyGridError("Grid is frozen and cannot be modified")

    def get(self, x: TileCoord, y: TileCoord) -> TileTypeID:
        self._check_bounds(x, y)
        return TileTypeID(int(self._tiles[x, y]))

    def set(self, x: TileCoord, y: TileCoord, tile: TileTypeID) -> None:
        self._check_writable()
        self._check_bounds(x, y)
        self._tiles[x, y] = TileTypeID(tile)

    def fill(self, tile: TileTypeID) -> None:
        """Set every cell to `tile`."""
        self._check_writable()
        self._tiles[:, :] = TileTypeID(tile)

    def fill_rect(self, rect: Rect, tile: TileTypeID) -> None:
        """Set every cell inside `rect` to `tile`.

        The whole rectangle must lie on the grid; partial rectangles are rejected
        rather than clipped.
        """
        self._check_writable()
        if rect.width <= 0 or rect.height <= 0:
            return
        self._check_bounds(rect.x1, rect.y1)
        self._check_bounds(rect.x2 - 1, rect.y2 - 1)
        self._tiles[rect.x1 : rect.x2, rect.y1 : rect.y2] = TileTypeID(tile)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def tiles(self) -> np.ndarray:
        """Read-only view of the underlying (width, height) array."""
        view = self._tiles.view()
        view.flags.writeable = False
        return view

    @property
    def frozen(self) -> bool:
        return self._frozen

    def rows(self) -> Iterator[tuple[TileTypeID, ...]]:
        """Yield rows top to bottom, each a tuple of tiles left to right.

        Every call returns a new iterator, so the sequence can be restarted.
        """
        for y in range(self.height):
            yield tuple(TileTypeID(int(code)) for code in self._tiles[:, y])

    def count(self, tile: TileTypeID) -> int:
        return int(np.count_nonzero(self._tiles == tile))

    def copy(self) -> TileGrid:
        """Return an unfrozen copy of this grid."""
        grid = TileGrid(self.width, self.height)
        grid._tiles[:, :] = self._tiles
        return grid

    def freeze(self) -> None:
        """Make the grid permanently read-only."""
        self._frozen = True
        self._tiles.flags.writeable = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return self._tiles.shape == other._tiles.shape and bool(
            np.array_equal(self._tiles, other._tiles)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TileGrid(width={self.width}, height={self.height})"


def add_wall_borders(grid: TileGrid) -> int:
    """Mark walls that touch walkable space as WALL_BORDER.

    A WALL tile is reclassified when one of its 4-neighbors is FLOOR or CORRIDOR.
    Walls that only touch open space diagonally, or not at all, stay WALL.

    Returns:
        The number of tiles reclassified.
    """
    grid._check_writable()
    tiles = grid._tiles
    open_space = (tiles == TileTypeID.FLOOR) | (tiles == TileTypeID.CORRIDOR)

    touches_open = np.zeros_like(open_space)
    touches_open[1:, :] |= open_space[:-1, :]
    touches_open[:-1, :] |= open_space[1:, :]
    touches_open[:, 1:] |= open_space[:, :-1]
    touches_open[:, :-1] |= open_space[:, 1:]

    border = (tiles == TileTypeID.WALL) & touches_open
    tiles[border] = TileTypeID.WALL_BORDER
    changed = int(np.count_nonzero(border))
    logger.debug(f"Wall border pass reclassified {changed} tiles")
    return changed
