from __future__ import annotations

from dungeon import config
from dungeon.environment.level import Algorithm, Level
from dungeon.types import RandomSeed, TileCoord
from dungeon.util.rng import RNG

from .base import BaseLevelGenerator, InvalidConfigError
from .bsp import BSPGenerator
from .rooms import RoomsAndCorridorsGenerator

GENERATORS: dict[Algorithm, type[BaseLevelGenerator]] = {
    Algorithm.ROOMS: RoomsAndCorridorsGenerator,
    Algorithm.BSP: BSPGenerator,
}


def create_generator(
    algorithm: Algorithm | str,
    width: TileCoord,
    height: TileCoord,
    min_room_width: int = config.DEFAULT_MIN_ROOM_WIDTH,
    min_room_height: int = config.DEFAULT_MIN_ROOM_HEIGHT,
    walls: bool = False,
) -> BaseLevelGenerator:
    """Create a validated generator for the named algorithm.

    Args:
        algorithm: An `Algorithm` or its string value ("rooms", "bsp").
        width: Board width in tiles.
        height: Board height in tiles.
        min_room_width: Smallest room width the generator may produce.
        min_room_height: Smallest room height the generator may produce.
        walls: Whether to run the wall-border pass after carving.

    Raises:
        InvalidConfigError: If the algorithm is unknown or the dimensions
            cannot produce a level.
    """
    try:
        algorithm = Algorithm(algorithm)
    except ValueError:
        raise InvalidConfigError(f"Unknown algorithm: {algorithm!r}") from None
    generator_cls = GENERATORS[algorithm]
    return generator_cls(width, height, min_room_width, min_room_height, walls)


def generate_level(
    algorithm: Algorithm | str,
    width: TileCoord,
    height: TileCoord,
    *,
    seed: RandomSeed,
    rng: RNG,
    walls: bool = False,
    min_room_width: int = config.DEFAULT_MIN_ROOM_WIDTH,
    min_room_height: int = config.DEFAULT_MIN_ROOM_HEIGHT,
) -> Level:
    """Generate one level with the chosen algorithm.

    `rng` is consumed in the algorithm's documented draw order and is not
    reseeded. `seed` is only recorded in the resulting Level.
    """
    generator = create_generator(
        algorithm, width, height, min_room_width, min_room_height, walls
    )
    return generator.generate(rng, seed)
