"""Level generation algorithms.

Two interchangeable generators share one contract, "given a configuration and
a random source, produce a Level":
- RoomsAndCorridorsGenerator: random non-overlapping rooms joined in order
- BSPGenerator: recursive binary space partitioning, one room per leaf

`generate_level()` picks a generator by `Algorithm` and runs it.
"""

from .base import BaseLevelGenerator, InvalidConfigError, carve_corridor, carve_room
from .bsp import BSPGenerator, PartitionNode, PartitionTree
from .factory import GENERATORS, create_generator, generate_level
from .rooms import RoomsAndCorridorsGenerator

__all__ = [
    "GENERATORS",
    "BSPGenerator",
    "BaseLevelGenerator",
    "InvalidConfigError",
    "PartitionNode",
    "PartitionTree",
    "RoomsAndCorridorsGenerator",
    "carve_corridor",
    "carve_room",
    "create_generator",
    "generate_level",
]
