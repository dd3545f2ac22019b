from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from bintree.tree import BinaryTree


class RecordingSink:
    """Drawing sink that records every call as ``(name, args)``."""

    def __init__(self, width: float = 612.0, height: float = 792.0) -> None:
        self._width = width
        self._height = height
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def begin_page(self, label):
        self.calls.append(("begin_page", (label,)))

    def move_to(self, x, y):
        self.calls.append(("move_to", (x, y)))

    def line_to(self, x, y):
        self.calls.append(("line_to", (x, y)))

    def stroke(self):
        self.calls.append(("stroke", ()))

    def draw_text_box(self, text, x, y, margin, corner_radius, rotation, font_size):
        self.calls.append(
            ("draw_text_box", (text, x, y, margin, corner_radius, rotation, font_size))
        )

    def select_font(self, name, size):
        self.calls.append(("select_font", (name, size)))

    def set_fill_color(self, value):
        self.calls.append(("set_fill_color", (value,)))

    def set_line_width(self, width):
        self.calls.append(("set_line_width", (width,)))

    def width(self):
        return self._width

    def height(self):
        return self._height

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def small_tree():
    return BinaryTree([None, 2, 1, 3])


@pytest.fixture
def lopsided_tree():
    """Hand-built, deliberately incomplete tree::

            a
           / \\
          b   c
           \\    \\
            d    e
           /
          f
    """

    leaf_f = BinaryTree.from_subtrees("f")
    d = BinaryTree.from_subtrees("d", left=leaf_f)
    b = BinaryTree.from_subtrees("b", right=d)
    c = BinaryTree.from_subtrees("c", right=BinaryTree.from_subtrees("e"))
    return BinaryTree.from_subtrees("a", b, c)
