"""Binary space partitioning: split the board into leaves, one room per leaf.

The partition tree is stored as an arena. Nodes live in a flat list and refer
to their children by index, which keeps the tree trivially copyable and lets
tests check tiling directly over `PartitionTree.leaves()`.

Random draws, in order:
    1. Partitioning, depth first with the left (or top) child before the right
       (or bottom) child. Per split: an optional coin flip
       `getrandbits(1)` for the orientation of squarish regions, then the cut
       offset `randint(leaf_min, extent - leaf_min)`.
    2. Rooms, one per leaf in the same depth-first order. Per leaf: width,
       height, x offset, y offset.

Corridors are carved bottom-up (post-order) and draw nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from dungeon import config
from dungeon.environment.grid import TileGrid
from dungeon.environment.level import Algorithm, Room
from dungeon.types import TileCoord
from dungeon.util.coordinates import Rect
from dungeon.util.rng import RNG

from .base import BaseLevelGenerator, InvalidConfigError, carve_corridor, carve_room

logger = logging.getLogger(__name__)


@dataclass
class PartitionNode:
    """A region of the board: either split into two children or a leaf.

    A horizontal split divides the width (left and right children), a vertical
    split divides the height (top and bottom children).
    """

    x: TileCoord
    y: TileCoord
    width: TileCoord
    height: TileCoord
    parent: int | None = None
    left: int | None = None
    right: int | None = None
    room: Room | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class PartitionTree:
    """Arena of partition nodes. Index 0 is the root."""

    def __init__(self, root: PartitionNode) -> None:
        self.nodes: list[PartitionNode] = [root]

    def add(self, node: PartitionNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> PartitionNode:
        return self.nodes[index]

    def preorder(self, index: int = 0) -> Iterator[int]:
        """Node indices depth first, each node before its children."""
        stack = [index]
        while stack:
            current = stack.pop()
            yield current
            node = self.nodes[current]
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self, index: int = 0) -> Iterator[int]:
        """Node indices depth first, each node after both of its children."""
        stack: list[tuple[int, bool]] = [(index, False)]
        while stack:
            current, children_done = stack.pop()
            node = self.nodes[current]
            if children_done or node.is_leaf:
                yield current
                continue
            stack.append((current, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def leaves(self, index: int = 0) -> list[PartitionNode]:
        return [self.nodes[i] for i in self.preorder(index) if self.nodes[i].is_leaf]

    def first_room(self, index: int) -> Room | None:
        """Room of the first leaf (depth first) below `index` that has one."""
        for i in self.preorder(index):
            room = self.nodes[i].room
            if room is not None:
                return room
        return None


class BSPGenerator(BaseLevelGenerator):
    """Generates a level by recursive binary space partitioning."""

    algorithm = Algorithm.BSP

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        min_room_width: int,
        min_room_height: int,
        walls: bool = False,
    ) -> None:
        super().__init__(map_width, map_height, min_room_width, min_room_height, walls)
        self.leaf_margin = config.BSP_LEAF_MARGIN
        # Smallest region that can still host a minimum room plus its margin.
        self.leaf_min_width = self.min_room_width + 2 * self.leaf_margin
        self.leaf_min_height = self.min_room_height + 2 * self.leaf_margin

        if (
            self.leaf_min_width > self.map_width
            or self.leaf_min_height > self.map_height
        ):
            raise InvalidConfigError(
                f"A {self.min_room_width}x{self.min_room_height} room with a "
                f"{self.leaf_margin}-tile margin needs at least a "
                f"{self.leaf_min_width}x{self.leaf_min_height} board, "
                f"got {self.map_width}x{self.map_height}"
            )

    # ------------------------------------------------------------------
    # Partitioning
    # ------------------------------------------------------------------

    def _choose_split(self, node: PartitionNode, rng: RNG) -> bool | None:
        """Return True to split the width, False to split the height.

        None means the node is a leaf.
        """
        can_split_width = node.width >= 2 * self.leaf_min_width
        can_split_height = node.height >= 2 * self.leaf_min_height

        if not can_split_width and not can_split_height:
            return None
        if can_split_width != can_split_height:
            return can_split_width

        if node.width >= node.height * config.BSP_SQUARE_RATIO:
            return True
        if node.height >= node.width * config.BSP_SQUARE_RATIO:
            return False
        return bool(rng.getrandbits(1))

    def _split(self, tree: PartitionTree, index: int, rng: RNG) -> None:
        node = tree[index]
        split_width = self._choose_split(node, rng)
        if split_width is None:
            return

        if split_width:
            cut = rng.randint(self.leaf_min_width, node.width - self.leaf_min_width)
            first = PartitionNode(node.x, node.y, cut, node.height, parent=index)
            second = PartitionNode(
                node.x + cut, node.y, node.width - cut, node.height, parent=index
            )
        else:
            cut = rng.randint(self.leaf_min_height, node.height - self.leaf_min_height)
            first = PartitionNode(node.x, node.y, node.width, cut, parent=index)
            second = PartitionNode(
                node.x, node.y + cut, node.width, node.height - cut, parent=index
            )

        node.left = tree.add(first)
        node.right = tree.add(second)
        self._split(tree, node.left, rng)
        self._split(tree, node.right, rng)

    def build_tree(self, rng: RNG) -> PartitionTree:
        """Partition the whole board. Leaves exactly tile the board."""
        tree = PartitionTree(PartitionNode(0, 0, self.map_width, self.map_height))
        self._split(tree, 0, rng)
        return tree

    # ------------------------------------------------------------------
    # Rooms and corridors
    # ------------------------------------------------------------------

    def _make_room(self, leaf: PartitionNode, rng: RNG) -> Room:
        margin = self.leaf_margin
        w = rng.randint(self.min_room_width, leaf.width - 2 * margin)
        h = rng.randint(self.min_room_height, leaf.height - 2 * margin)
        x = leaf.x + rng.randint(margin, leaf.width - w - margin)
        y = leaf.y + rng.randint(margin, leaf.height - h - margin)
        return Room(x, y, w, h)

    def _connect(self, grid: TileGrid, tree: PartitionTree) -> None:
        for index in tree.postorder():
            node = tree[index]
            if node.left is None or node.right is None:
                continue
            first = tree.first_room(node.left)
            second = tree.first_room(node.right)
            if first is not None and second is not None:
                carve_corridor(grid, first.center, second.center)

    def _build(self, grid: TileGrid, rng: RNG) -> list[Room]:
        tree = self.build_tree(rng)

        rooms: list[Room] = []
        for leaf in tree.leaves():
            leaf.room = self._make_room(leaf, rng)
            carve_room(grid, leaf.room)
            rooms.append(leaf.room)

        self._connect(grid, tree)
        logger.debug(f"Partitioned board into {len(tree)} nodes, {len(rooms)} leaves")
        return rooms
