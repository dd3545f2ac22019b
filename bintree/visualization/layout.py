from __future__ import annotations

from typing import Dict, Optional, Tuple, TypeVar

from bintree.tree import BinaryTree, BTNode

from .config import DEFAULT_CONFIG, LayoutConfig
from .sink import DrawingSink

T = TypeVar("T")

Position = Tuple[float, float]


def layout_scale(tree_height: int) -> float:
    """Uniform shrink factor so tall trees still fit on a fixed canvas."""

    if tree_height < 4:
        return 1.0
    return 16.0 / float(1 << tree_height)


def child_offset(
    leaf_dist: int, scale: float, config: LayoutConfig = DEFAULT_CONFIG
) -> Tuple[float, float]:
    """Return the (horizontal, vertical) distance from a node to its children.

    The horizontal half-spread is proportional to ``2 ** leaf_dist``, the most
    leaves a subtree at that level could hold, so it halves at every level.
    """

    if leaf_dist < 0:
        raise ValueError(f"leaf_dist must be non-negative, got {leaf_dist}")
    dx = (1 << leaf_dist) * config.node_separation * scale / 2
    dy = config.level_separation * scale
    return dx, dy


def compute_tree_layout(
    tree: BinaryTree[T],
    origin: Position = (0.0, 0.0),
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Dict[int, Position]:
    """Compute canvas positions for every node, keyed by complete-tree index.

    The root sits at ``origin``; children are placed below it (smaller y).
    """

    h = tree.height()
    scale = layout_scale(h)
    positions: Dict[int, Position] = {}

    def place(
        node: Optional[BTNode[T]], index: int, leaf_dist: int, x: float, y: float
    ) -> None:
        if node is None:
            return
        positions[index] = (x, y)
        dx, dy = child_offset(leaf_dist, scale, config)
        place(node.left, 2 * index, leaf_dist - 1, x - dx, y - dy)
        place(node.right, 2 * index + 1, leaf_dist - 1, x + dx, y - dy)

    place(tree.root, 1, h - 1, origin[0], origin[1])
    return positions


def render_tree(
    tree: BinaryTree[T],
    sink: DrawingSink,
    annotation: str = "",
    config: LayoutConfig = DEFAULT_CONFIG,
) -> None:
    """Draw ``tree`` on a new page of ``sink``.

    Edges to a node's children are stroked (and the children drawn) before the
    node's own text box, so every box covers the lines that meet it.
    """

    h = tree.height()
    scale = layout_scale(h)

    sink.begin_page(annotation)

    # root at the horizontal centre, one top margin below the top edge
    x = sink.width() / 2
    y = sink.height() - config.top_margin

    sink.select_font(config.font_name, config.font_scale * scale)
    sink.set_fill_color(config.fill_gray)
    sink.set_line_width(scale)

    _render_node(sink, tree.root, h - 1, x, y, scale, config)


def _render_node(
    sink: DrawingSink,
    node: Optional[BTNode[T]],
    leaf_dist: int,
    x: float,
    y: float,
    scale: float,
    config: LayoutConfig,
) -> None:
    if node is None:
        return

    dx, dy = child_offset(leaf_dist, scale, config)
    for child, child_x in ((node.left, x - dx), (node.right, x + dx)):
        if child is None:
            continue
        sink.move_to(x, y)
        sink.line_to(child_x, y - dy)
        sink.stroke()
        _render_node(sink, child, leaf_dist - 1, child_x, y - dy, scale, config)

    sink.draw_text_box(
        str(node.element),
        x,
        y,
        config.box_margin * scale,
        config.box_corner_radius * scale,
        0,
        config.font_scale * scale,
    )
