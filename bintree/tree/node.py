from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Visitor = Callable[[T], None]


@dataclass(slots=True, eq=False)
class BTNode(Generic[T]):
    """A single binary tree cell owning its two (optional) children."""

    element: T
    left: Optional[BTNode[T]] = None
    right: Optional[BTNode[T]] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BTNode({self.element!r})"


def clone(node: Optional[BTNode[T]]) -> Optional[BTNode[T]]:
    """Return an independent copy of the subtree rooted at ``node``.

    Every source node maps to a freshly allocated node, so the copy never
    shares structure with the source regardless of its shape.
    """

    if node is None:
        return None
    return BTNode(node.element, clone(node.left), clone(node.right))


def structural_equal(a: Optional[BTNode[T]], b: Optional[BTNode[T]]) -> bool:
    """Compare two subtrees position by position."""

    if a is None or b is None:
        return a is None and b is None
    return (
        a.element == b.element
        and structural_equal(a.left, b.left)
        and structural_equal(a.right, b.right)
    )


def height(node: Optional[BTNode[T]]) -> int:
    if node is None:
        return 0
    if node.is_leaf():
        return 1
    return 1 + max(height(node.left), height(node.right))


def node_count(node: Optional[BTNode[T]]) -> int:
    if node is None:
        return 0
    return 1 + node_count(node.left) + node_count(node.right)


def leaf_count(node: Optional[BTNode[T]]) -> int:
    if node is None:
        return 0
    if node.is_leaf():
        return 1
    return leaf_count(node.left) + leaf_count(node.right)


def balance_factor(node: Optional[BTNode[T]]) -> int:
    """Height of the left subtree minus the height of the right subtree."""

    if node is None:
        return 0
    return height(node.left) - height(node.right)


def preorder(visit: Visitor[T], node: Optional[BTNode[T]]) -> None:
    if node is None:
        return
    visit(node.element)
    preorder(visit, node.left)
    preorder(visit, node.right)


def inorder(visit: Visitor[T], node: Optional[BTNode[T]]) -> None:
    if node is None:
        return
    inorder(visit, node.left)
    visit(node.element)
    inorder(visit, node.right)


def postorder(visit: Visitor[T], node: Optional[BTNode[T]]) -> None:
    if node is None:
        return
    postorder(visit, node.left)
    postorder(visit, node.right)
    visit(node.element)
