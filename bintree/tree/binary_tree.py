from __future__ import annotations

import copy
from typing import Any, Generic, List, MutableSequence, Optional, Sequence, TypeVar

from . import node as _node
from .node import BTNode, Visitor, clone, structural_equal

try:  # pragma: no cover - optional import for graph export only
    import networkx as nx
except ModuleNotFoundError:  # pragma: no cover
    nx = None  # type: ignore[assignment]

T = TypeVar("T")


class BinaryTree(Generic[T]):
    """A general binary tree that exclusively owns its node graph.

    Elements can be loaded in bulk from a flat array under the complete-tree
    convention: the root lives at index 1, the children of index ``i`` at
    ``2 * i`` and ``2 * i + 1``, and index 0 is unused. So ``n`` elements take
    ``n + 1`` cells::

                 1
               /   \\            +---+---+---+---+---+---+---+---+
             2       3     -->   | X | 1 | 2 | 3 | 4 | 5 | 6 | 7 |
            / \\     / \\         +---+---+---+---+---+---+---+---+
           4   5   6   7           0   1   2   3   4   5   6   7

    Trees built by composing subtrees need not be complete; copying and
    equality work structurally and never go through the array form.
    """

    __slots__ = ("_root",)

    def __init__(
        self,
        elements: Optional[Sequence[T]] = None,
        n_elements: Optional[int] = None,
    ) -> None:
        self._root: Optional[BTNode[T]] = None
        if elements is not None:
            self.init_complete(elements, n_elements)

    # -------------------------------
    # Construction
    # -------------------------------
    @classmethod
    def from_array(
        cls, elements: Sequence[T], n_elements: Optional[int] = None
    ) -> BinaryTree[T]:
        return cls(elements, n_elements)

    @classmethod
    def from_subtrees(
        cls,
        element: T,
        left: Optional[BinaryTree[T]] = None,
        right: Optional[BinaryTree[T]] = None,
    ) -> BinaryTree[T]:
        """Build a tree rooted at ``element`` over copies of two subtrees."""

        tree: BinaryTree[T] = cls()
        tree._root = BTNode(
            element,
            clone(left._root) if left is not None else None,
            clone(right._root) if right is not None else None,
        )
        return tree

    def init_complete(
        self, elements: Sequence[T], n_elements: Optional[int] = None
    ) -> None:
        """Replace the contents with the complete tree over ``elements[1..n]``."""

        if n_elements is None:
            n_elements = len(elements) - 1
        if n_elements > 0 and len(elements) < n_elements + 1:
            raise ValueError(
                f"Expected at least {n_elements + 1} cells for {n_elements} "
                f"elements, got {len(elements)}"
            )
        self.clear()
        self._root = _build_complete(elements, n_elements, 1)

    def clear(self) -> bool:
        """Release every node; the tree is empty afterwards."""

        self._root = None
        return True

    # -------------------------------
    # Access and tests
    # -------------------------------
    @property
    def root(self) -> Optional[BTNode[T]]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return _node.height(self._root)

    def node_count(self) -> int:
        return _node.node_count(self._root)

    def leaf_count(self) -> int:
        return _node.leaf_count(self._root)

    def balance_factor(self) -> int:
        return _node.balance_factor(self._root)

    # -------------------------------
    # Traversals
    # -------------------------------
    def preorder(self, visit: Visitor[T]) -> None:
        _node.preorder(visit, self._root)

    def inorder(self, visit: Visitor[T]) -> None:
        _node.inorder(visit, self._root)

    def postorder(self, visit: Visitor[T]) -> None:
        _node.postorder(visit, self._root)

    # -------------------------------
    # Conversion to arrays
    # -------------------------------
    def to_flat_array(self, elements: MutableSequence[T], max_count: int) -> int:
        """Copy elements into ``elements`` in complete-tree order.

        At most ``max_count`` cells starting at ``elements[1]`` are written, so
        the buffer needs ``max_count + 1`` cells. The walk covers the whole
        tree either way and the largest index reached is returned; for a
        complete tree that is the node count. A return value above
        ``max_count`` means the output was truncated.
        """

        if max_count < 0:
            raise ValueError(f"max_count must be non-negative, got {max_count}")
        if len(elements) < max_count + 1:
            raise ValueError(
                f"Buffer of {len(elements)} cells cannot hold {max_count} elements"
            )
        return _flatten(self._root, elements, max_count, 1)

    def to_flat_list(self, fill: Any = None) -> List[Any]:
        """Return the flat array form, with ``fill`` at index 0 and in holes."""

        size = _max_index(self._root, 1)
        cells: List[Any] = [fill] * (size + 1)
        self.to_flat_array(cells, size)
        return cells

    # -------------------------------
    # Copying and comparison
    # -------------------------------
    def copy(self) -> BinaryTree[T]:
        duplicate: BinaryTree[T] = type(self)()
        duplicate._root = clone(self._root)
        return duplicate

    def assign(self, src: BinaryTree[T]) -> BinaryTree[T]:
        """Make this tree a deep copy of ``src`` and return it."""

        if src is not self:
            self._root = clone(src._root)
        return self

    def __copy__(self) -> BinaryTree[T]:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> BinaryTree[T]:
        duplicate: BinaryTree[T] = type(self)()
        memo[id(self)] = duplicate
        duplicate._root = _deep_clone(self._root, memo)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return structural_equal(self._root, other._root)

    # -------------------------------
    # Output
    # -------------------------------
    def __str__(self) -> str:
        parts: List[str] = []
        self.inorder(lambda element: parts.append(str(element)))
        return " ".join(parts)

    def __repr__(self) -> str:
        # the flat form grows with the deepest index, so sparse shapes nest instead
        if _max_index(self._root, 1) <= 2 * self.node_count():
            return f"{type(self).__name__}({self.to_flat_list()!r})"
        return f"{type(self).__name__}({_nested_repr(self._root)})"

    def to_networkx(self):
        """Convert the tree to a NetworkX ``DiGraph`` keyed by array index."""

        if nx is None:
            raise RuntimeError(
                "networkx is not available; install the 'graph' extra."
            )
        graph = nx.DiGraph()

        def add(node: Optional[BTNode[T]], index: int) -> None:
            if node is None:
                return
            graph.add_node(index, element=node.element)
            if node.left is not None:
                graph.add_edge(index, 2 * index, side="left")
                add(node.left, 2 * index)
            if node.right is not None:
                graph.add_edge(index, 2 * index + 1, side="right")
                add(node.right, 2 * index + 1)

        add(self._root, 1)
        return graph


def _deep_clone(node: Optional[BTNode[T]], memo: dict) -> Optional[BTNode[T]]:
    if node is None:
        return None
    return BTNode(
        copy.deepcopy(node.element, memo),
        _deep_clone(node.left, memo),
        _deep_clone(node.right, memo),
    )


def _nested_repr(node: Optional[BTNode[T]]) -> str:
    if node is None:
        return "None"
    left = _nested_repr(node.left)
    right = _nested_repr(node.right)
    return f"({node.element!r}, {left}, {right})"


def _build_complete(
    elements: Sequence[T], n_elements: int, index: int
) -> Optional[BTNode[T]]:
    if index > n_elements:
        return None
    return BTNode(
        elements[index],
        _build_complete(elements, n_elements, 2 * index),
        _build_complete(elements, n_elements, 2 * index + 1),
    )


def _flatten(
    node: Optional[BTNode[T]],
    elements: MutableSequence[T],
    max_count: int,
    index: int,
) -> int:
    if node is None:
        return 0
    if index <= max_count:
        elements[index] = node.element
    # keep descending past max_count so the true extent is still reported
    return max(
        index,
        _flatten(node.left, elements, max_count, 2 * index),
        _flatten(node.right, elements, max_count, 2 * index + 1),
    )


def _max_index(node: Optional[BTNode[T]], index: int) -> int:
    if node is None:
        return 0
    return max(
        index,
        _max_index(node.left, 2 * index),
        _max_index(node.right, 2 * index + 1),
    )
