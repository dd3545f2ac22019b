"""Visualization helpers for bintree."""

from .config import DEFAULT_CONFIG, LayoutConfig
from .layout import child_offset, compute_tree_layout, layout_scale, render_tree
from .scene import TreeEdge, TreeNode, TreeScene, build_tree_scene
from .sink import DrawingSink

__all__ = [
    "DEFAULT_CONFIG",
    "DrawingSink",
    "LayoutConfig",
    "TreeEdge",
    "TreeNode",
    "TreeScene",
    "build_tree_scene",
    "child_offset",
    "compute_tree_layout",
    "layout_scale",
    "render_tree",
]
