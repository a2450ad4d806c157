"""
Tile Type system for generated levels using the flyweight pattern.

This module defines:
- `TileTypeID`: The integer identity of each tile state. A `TileGrid` stores a
  NumPy array of these IDs, and the integer value doubles as the stable tile code
  used by the CSV and JSON exporters.
- `TileTypeData`: The intrinsic properties of a *type* of tile (walkable, text
  glyph, image color, display name). These are the flyweight objects.
- A registration table holding one `TileTypeData` instance per `TileTypeID`.
- Helper functions to efficiently get maps of specific properties (e.g., a boolean
  map of all walkable tiles) from a `TileTypeID` map. These are used by the text
  renderer, the image exporter, and the connectivity checks.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from dungeon import colors


class TileTypeID(IntEnum):
    """Tile states a level cell can be in.

    WALL is registered first because it is the fill value of a fresh grid.
    WALL_BORDER only appears when wall decoration is enabled.
    """

    WALL = 0
    FLOOR = 1
    CORRIDOR = 2
    WALL_BORDER = 3


# Defines the intrinsic data for a *type* of tile (flyweight).
TileTypeData = np.dtype(
    [
        ("walkable", bool),
        ("glyph", "U1"),  # Character used by the text renderer
        ("color", "3B"),  # Image RGB: 3 unsigned bytes (0-255 each)
        ("display_name", "U32"),  # Human-readable name (Unicode string, max 32 chars)
    ]
)

# --- Tile Type Registration ---

# The index of a tile type in this list is its TileTypeID.
_registered_tile_type_data_list: list[np.ndarray] = []


def register_tile_type(tile_type_id: TileTypeID, tile_type_data: np.ndarray) -> None:
    """
    Registers the data for a tile type.

    Tile types must be registered in TileTypeID order so that the list index
    always matches the enum value.

    Raises:
        ValueError: If the tile type is registered out of order or twice.
    """
    expected_id = len(_registered_tile_type_data_list)
    if tile_type_id != expected_id:
        raise ValueError(
            f"Tile type {tile_type_id.name} registered out of order "
            f"(expected ID {expected_id}, got {int(tile_type_id)})."
        )
    _registered_tile_type_data_list.append(tile_type_data)


def make_tile_type_data(
    *,  # Forces keyword arguments - prevents bugs from wrong parameter order
    walkable: bool,
    glyph: str,
    color: colors.Color,
    display_name: str,
) -> np.ndarray:  # Returns an instance of TileTypeData
    """
    Helper function to create a TileTypeData instance.

    Args:
        walkable: Can the connectivity check move through this type of tile?
        glyph: Single character used in the text rendering.
        color: RGB color used in the image rendering.
        display_name: Human-readable name (e.g., "Wall", "Corridor").

    Returns:
        A numpy array structured with the TileTypeData dtype.
    """
    if len(glyph) != 1:
        raise ValueError(f"Tile glyph must be a single character, got {glyph!r}")
    return np.array((walkable, glyph, color, display_name), dtype=TileTypeData)


# --- Define and Register Core Tile Types ---

register_tile_type(
    TileTypeID.WALL,
    make_tile_type_data(
        walkable=False, glyph=" ", color=colors.WALL, display_name="Wall"
    ),
)
register_tile_type(
    TileTypeID.FLOOR,
    make_tile_type_data(
        walkable=True, glyph=".", color=colors.FLOOR, display_name="Floor"
    ),
)
register_tile_type(
    TileTypeID.CORRIDOR,
    make_tile_type_data(
        walkable=True, glyph=",", color=colors.CORRIDOR, display_name="Corridor"
    ),
)
register_tile_type(
    TileTypeID.WALL_BORDER,
    make_tile_type_data(
        walkable=False,
        glyph="#",
        color=colors.WALL_BORDER,
        display_name="Wall Border",
    ),
)


# --- Pre-calculated Property Arrays for Efficient Lookups ---
# Built after all tile types have been registered. They allow for fast,
# vectorized conversion from a map of TileTypeIDs to a map of one property.

_tile_type_properties_walkable = np.array(
    [t["walkable"] for t in _registered_tile_type_data_list], dtype=bool
)
_tile_type_properties_glyph = np.array(
    [t["glyph"] for t in _registered_tile_type_data_list], dtype="U1"
)
_tile_type_properties_color = np.array(
    [t["color"] for t in _registered_tile_type_data_list], dtype=np.uint8
)
_tile_type_properties_display_name = np.array(
    [t["display_name"] for t in _registered_tile_type_data_list], dtype="U32"
)

# --- Public Helper Functions for Accessing Tile Properties ---


def get_walkable_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """
    Converts a map of TileTypeIDs into a boolean map of walkability.
    True means the tile at that position is Floor or Corridor.
    """
    return _tile_type_properties_walkable[tile_type_ids_map]


def get_glyph_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Converts a map of TileTypeIDs into a map of single-character glyphs."""
    return _tile_type_properties_glyph[tile_type_ids_map]


def get_color_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """
    Converts a map of TileTypeIDs into an RGB map.
    The result has one extra trailing axis of length 3 (dtype uint8).
    """
    return _tile_type_properties_color[tile_type_ids_map]


def get_tile_type_name_by_id(tile_type_id: int) -> str:
    """
    Get the human-readable name of a tile type by its ID.

    Args:
        tile_type_id: The ID of the tile type

    Returns:
        The name of the tile type (e.g., "Wall", "Floor")
    """
    if 0 <= tile_type_id < len(_tile_type_properties_display_name):
        return str(_tile_type_properties_display_name[tile_type_id])
    return f"Unknown Tile (ID: {tile_type_id})"


def is_valid_tile_code(codes: int | np.ndarray) -> np.ndarray:
    """
    Element-wise check that codes are values of registered TileTypeIDs.
    Accepts a single code or an integer array of any shape; a single code
    gives a 0-d boolean array, which is usable directly in `if`.
    """
    codes = np.asarray(codes)
    return (codes >= 0) & (codes < len(_registered_tile_type_data_list))
