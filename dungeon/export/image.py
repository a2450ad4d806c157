from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from dungeon import config
from dungeon.environment import tile_types
from dungeon.environment.level import Level

logger = logging.getLogger(__name__)


def level_to_pixels(level: Level, tile_size: int = config.IMAGE_TILE_SIZE) -> np.ndarray:
    """Return an (height * tile_size, width * tile_size, 3) uint8 RGB array.

    Each tile becomes a solid `tile_size` square in its tile type's colour.
    """
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")
    # Color map is (width, height, 3); images are row-major (height, width, 3).
    colors = tile_types.get_color_map(level.tiles).transpose(1, 0, 2)
    pixels = np.repeat(np.repeat(colors, tile_size, axis=0), tile_size, axis=1)
    return np.ascontiguousarray(pixels, dtype=np.uint8)


def draw_level(
    level: Level,
    output_dir: Path | str = config.IMAGE_OUTPUT_DIR,
    tile_size: int = config.IMAGE_TILE_SIZE,
) -> Path:
    """Write the level as `<output_dir>/<seed>.png` and return the path.

    The output directory is created if needed. I/O failures propagate as
    `OSError`; the level itself is only read.
    """
    output_dir = Path(output_dir)
    output_path = output_dir / f"{level.seed}.{config.IMAGE_FORMAT}"

    image = PILImage.fromarray(level_to_pixels(level, tile_size))
    output_dir.mkdir(parents=True, exist_ok=True)
    image.save(output_path)

    logger.info(f"Wrote {level.width}x{level.height} level image to {output_path}")
    return output_path
