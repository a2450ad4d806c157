from __future__ import annotations

from dungeon.types import TileCoord, WorldTilePos

"""Rectangle helpers for tile coordinates."""


class Rect:
    """Rectangle/bounding box in tile coordinates.

    `x2` and `y2` are exclusive: a Rect(0, 0, 3, 2) covers x in [0, 3) and
    y in [0, 2).
    """

    __slots__ = ("x1", "x2", "y1", "y2")

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, y1: TileCoord, x2: TileCoord, y2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        width = x2 - x1
        height = y2 - y1
        return cls(x1, y1, width, height)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def center(self) -> WorldTilePos:
        return (self.x1 + self.width // 2, self.y1 + self.height // 2)

    def expanded(self, margin: int) -> Rect:
        """Return a copy grown by `margin` tiles on every side."""
        return Rect.from_bounds(
            self.x1 - margin, self.y1 - margin, self.x2 + margin, self.y2 + margin
        )

    def intersects(self, other: Rect, margin: int = 0) -> bool:
        """Return True if the rectangles share a tile once self is grown by margin."""
        return (
            self.x1 - margin < other.x2
            and self.x2 + margin > other.x1
            and self.y1 - margin < other.y2
            and self.y2 + margin > other.y1
        )

    def contains(self, other: Rect) -> bool:
        """Return True if `other` lies entirely inside this rectangle."""
        return (
            self.x1 <= other.x1
            and self.y1 <= other.y1
            and other.x2 <= self.x2
            and other.y2 <= self.y2
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_on_board(
    x: TileCoord, y: TileCoord, board_width: TileCoord, board_height: TileCoord
) -> bool:
    """True if (x, y) lies in [0, board_width) x [0, board_height)."""
    return 0 <= x < board_width and 0 <= y < board_height
