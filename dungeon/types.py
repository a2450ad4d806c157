from __future__ import annotations

from typing import TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# World coordinates - absolute positions on the level grid
WorldTileCoord: TypeAlias = TileCoord  # Example: x=5, y=3
WorldTilePos: TypeAlias = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on the level

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Opaque reproducibility token embedded in every Level. The command line
# produces 64-character SHA-256 hex strings; only the first 32 characters
# seed the random source.
RandomSeed: TypeAlias = str

# Tile codes as exported to CSV/JSON (one small integer per tile type).
TileCode: TypeAlias = int
