from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, TypeVar

import numpy as np

from bintree.tree import BinaryTree, BTNode

from .config import DEFAULT_CONFIG, LayoutConfig
from .layout import Position, compute_tree_layout, layout_scale

T = TypeVar("T")


@dataclass(slots=True)
class TreeNode:
    """Represents a placed node in a visualization scene."""

    index: int
    label: str
    position: Position
    depth: int
    is_leaf: bool = False


@dataclass(slots=True)
class TreeEdge:
    """Represents the link from a parent to one of its children."""

    parent: int
    child: int
    side: str


@dataclass(slots=True)
class TreeScene:
    """Container for visualization nodes, edges, and metadata."""

    nodes: List[TreeNode]
    edges: List[TreeEdge]
    metadata: dict[str, Any] = field(default_factory=dict)

    def positions_array(self) -> np.ndarray:
        if not self.nodes:
            return np.empty((0, 2), dtype=float)
        return np.array([node.position for node in self.nodes], dtype=float)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` over all node positions."""

        points = self.positions_array()
        if points.size == 0:
            return (0.0, 0.0, 0.0, 0.0)
        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)
        return (float(min_x), float(min_y), float(max_x), float(max_y))


def build_tree_scene(
    tree: BinaryTree[T],
    positions: Optional[Mapping[int, Position]] = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> TreeScene:
    """Construct a :class:`TreeScene` for the provided binary tree."""

    if positions is None:
        positions = compute_tree_layout(tree, config=config)

    nodes: List[TreeNode] = []
    edges: List[TreeEdge] = []

    def visit(node: Optional[BTNode[T]], index: int, depth: int) -> None:
        if node is None:
            return
        nodes.append(
            TreeNode(
                index=index,
                label=str(node.element),
                position=positions.get(index, (0.0, 0.0)),
                depth=depth,
                is_leaf=node.is_leaf(),
            )
        )
        for child, child_index, side in (
            (node.left, 2 * index, "left"),
            (node.right, 2 * index + 1, "right"),
        ):
            if child is not None:
                edges.append(TreeEdge(parent=index, child=child_index, side=side))
                visit(child, child_index, depth + 1)

    visit(tree.root, 1, 0)

    h = tree.height()
    metadata = {
        "height": h,
        "node_count": len(nodes),
        "scale": layout_scale(h),
    }
    return TreeScene(nodes=nodes, edges=edges, metadata=metadata)
