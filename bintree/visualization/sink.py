from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DrawingSink(Protocol):
    """Drawing primitives a page backend must provide to render a tree.

    Coordinates are canvas-space floats with the origin at the bottom-left
    corner and y pointing up. Text boxes are centred on the given point.
    """

    def begin_page(self, label: str) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def draw_text_box(
        self,
        text: str,
        x: float,
        y: float,
        margin: float,
        corner_radius: float,
        rotation: float,
        font_size: float,
    ) -> None: ...

    def select_font(self, name: str, size: float) -> None: ...

    def set_fill_color(self, value: float) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def width(self) -> float: ...

    def height(self) -> float: ...
