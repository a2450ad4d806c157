"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

from pathlib import Path

# =============================================================================
# COMMAND LINE DEFAULTS
# =============================================================================

DEFAULT_WIDTH = 48
DEFAULT_HEIGHT = 40
DEFAULT_MIN_ROOM_WIDTH = 4
DEFAULT_MIN_ROOM_HEIGHT = 5
DEFAULT_ALGORITHM = "rooms"

# =============================================================================
# SEEDS
# =============================================================================

# Number of seed characters consumed when seeding the random source.
# Directly supplied seeds shorter than this are rejected.
SEED_LENGTH = 32

# =============================================================================
# ROOMS & CORRIDORS
# =============================================================================

# Minimum number of wall tiles between a room and the board edge.
BORDER_MARGIN = 1

# Rooms expanded by this many tiles must not intersect each other.
ROOM_MARGIN = 1

# Largest room side is the minimum side times this (clamped to the board).
ROOM_SIZE_MULTIPLIER = 2

# Target room count = board area // (expected room area * ROOM_AREA_FACTOR).
# Leaves space for walls and corridors between rooms.
ROOM_AREA_FACTOR = 4

# Placement attempts allowed per targeted room before giving up.
PLACEMENT_ATTEMPTS_PER_ROOM = 10

# =============================================================================
# BSP
# =============================================================================

# Wall tiles kept between a room and the edge of its partition leaf.
BSP_LEAF_MARGIN = 1

# Regions whose long side is at least this many times the short side are
# always cut across the long side. Squarer regions use a coin flip.
BSP_SQUARE_RATIO = 1.25

# =============================================================================
# IMAGE EXPORT
# =============================================================================

IMAGE_TILE_SIZE = 16  # Pixels per tile side
IMAGE_OUTPUT_DIR = Path("./img")
IMAGE_FORMAT = "png"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
