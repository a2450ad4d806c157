"""Command-line front end: generate a level and print or draw it.

Examples:
    python -m dungeon -t "my level" -a bsp
    python -m dungeon -s <64-char seed> --json --csv
    python -m dungeon -a rooms -w -d -o ./img
"""

from __future__ import annotations

import argparse
import logging
import sys

from dungeon import config
from dungeon.environment.generators import InvalidConfigError, generate_level
from dungeon.environment.level import Algorithm
from dungeon.export.image import draw_level
from dungeon.export.serialize import level_to_csv, level_to_json
from dungeon.types import RandomSeed
from dungeon.util import rng

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IMAGE_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dungeon", description="Generate a reproducible dungeon level"
    )
    parser.add_argument(
        "-t", "--text", help="Text to hash into a seed (ignored if --seed is given)"
    )
    parser.add_argument(
        "-s",
        "--seed",
        help=f"Existing seed, at least {config.SEED_LENGTH} characters long",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=config.DEFAULT_ALGORITHM,
        help="Generation algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "-j", "--json", action="store_true", help="Print the level as JSON"
    )
    parser.add_argument(
        "-d", "--draw", action="store_true", help="Draw the level to a PNG image"
    )
    parser.add_argument(
        "-c", "--csv", action="store_true", help="Print the tile codes as CSV"
    )
    parser.add_argument(
        "-w", "--walls", action="store_true", help="Mark walls next to open space"
    )
    parser.add_argument(
        "-x",
        "--width",
        type=int,
        default=config.DEFAULT_WIDTH,
        help="Board width in tiles (default: %(default)s)",
    )
    parser.add_argument(
        "-y",
        "--height",
        type=int,
        default=config.DEFAULT_HEIGHT,
        help="Board height in tiles (default: %(default)s)",
    )
    parser.add_argument(
        "-m",
        "--minroomwidth",
        type=int,
        default=config.DEFAULT_MIN_ROOM_WIDTH,
        help="Minimum room width (default: %(default)s)",
    )
    parser.add_argument(
        "-n",
        "--minroomheight",
        type=int,
        default=config.DEFAULT_MIN_ROOM_HEIGHT,
        help="Minimum room height (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=str(config.IMAGE_OUTPUT_DIR),
        help="Directory for drawn images (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def resolve_seed(seed: str | None, text: str | None) -> RandomSeed:
    """Pick the seed: a supplied seed, then hashed text, then a random one."""
    if seed is not None:
        return rng.validate_seed(seed)
    if text is not None:
        return rng.seed_from_text(text)
    return rng.random_seed()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format=config.LOG_FORMAT, stream=sys.stderr
    )

    try:
        seed = resolve_seed(args.seed, args.text)
        level = generate_level(
            args.algorithm,
            args.width,
            args.height,
            seed=seed,
            rng=rng.create(seed),
            walls=args.walls,
            min_room_width=args.minroomwidth,
            min_room_height=args.minroomheight,
        )
    except (rng.InvalidSeedError, InvalidConfigError) as e:
        logger.error(str(e))
        return EXIT_USAGE

    print(level.render())
    if args.json:
        print(level_to_json(level))
    if args.csv:
        print(level_to_csv(level), end="")

    if args.draw:
        try:
            path = draw_level(level, args.output)
        except OSError as e:
            logger.error(f"Drawing failed: {e}")
            return EXIT_IMAGE_FAILED
        logger.info(f"Level image saved to {path}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
