"""Binary tree container and its recursive node helpers."""

from .binary_tree import BinaryTree
from .node import (
    BTNode,
    balance_factor,
    clone,
    height,
    inorder,
    leaf_count,
    node_count,
    postorder,
    preorder,
    structural_equal,
)

__all__ = [
    "BTNode",
    "BinaryTree",
    "balance_factor",
    "clone",
    "height",
    "inorder",
    "leaf_count",
    "node_count",
    "postorder",
    "preorder",
    "structural_equal",
]
