from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

import tkinter as tk
from tkinter import font as tkfont

from bintree.tree import BinaryTree
from bintree.visualization import (
    DEFAULT_CONFIG,
    LayoutConfig,
    build_tree_scene,
    render_tree,
)

Point = Tuple[float, float]


def _gray_to_hex(value: float) -> str:
    level = max(0, min(255, round(value * 255)))
    return f"#{level:02x}{level:02x}{level:02x}"


class TkTreeViewer:
    """Render a binary tree using Tkinter."""

    def __init__(
        self,
        tree: BinaryTree[Any],
        title: str,
        *,
        config: LayoutConfig = DEFAULT_CONFIG,
        annotation: str = "",
    ) -> None:
        self.tree = tree
        self.title = title
        self.config = config
        self.annotation = annotation

    def run(self, output: Path | None = None) -> None:
        root = tk.Tk()
        root.withdraw()
        root.title(self.title)

        scene = build_tree_scene(self.tree, config=self.config)
        min_x, min_y, max_x, _ = scene.bounds()
        margin = 80
        # the root is drawn at the horizontal centre, so size for the wider side
        half_span = max(abs(min_x), abs(max_x))
        width = int(max(2 * half_span + 2 * margin, 640))
        height = int(max(-min_y + self.config.top_margin + 2 * margin, 480))

        container = tk.Frame(root, background="#f0f0f0")
        container.pack(fill="both", expand=True)

        canvas = _TreeCanvas(
            container,
            self.tree,
            config=self.config,
            annotation=self.annotation,
            width=width,
            height=height,
        )
        canvas.pack(side=tk.TOP, fill="both", expand=True)

        status = tk.Label(
            container,
            text=(
                f"height {scene.metadata['height']}  |  "
                f"{scene.metadata['node_count']} nodes  |  "
                f"scale {scene.metadata['scale']:.3g}"
            ),
            anchor="w",
            background="#fafafa",
            font=tkfont.Font(family="Helvetica", size=12),
        )
        status.pack(side=tk.BOTTOM, fill="x")

        root.update_idletasks()
        root.deiconify()
        root.lift()
        root.focus_force()

        if output:
            try:
                canvas.save_postscript(output)
            except tk.TclError as exc:
                print(f"Failed to save canvas: {exc}")

        root.mainloop()


class _TreeCanvas(tk.Canvas):
    """Canvas that acts as a drawing sink for :func:`render_tree`.

    Sink coordinates have y pointing up; Tk's y axis points down, so every
    point is flipped against the current canvas height.
    """

    def __init__(
        self,
        master: tk.Misc,
        tree: BinaryTree[Any],
        *,
        config: LayoutConfig,
        annotation: str,
        **kwargs,
    ) -> None:
        super().__init__(master, background="white", highlightthickness=0, **kwargs)
        self.tree = tree
        self.layout_config = config
        self.annotation = annotation
        self._canvas_size: Tuple[int, int] = (
            int(kwargs.get("width", self.winfo_reqwidth())),
            int(kwargs.get("height", self.winfo_reqheight())),
        )
        self._path: List[Point] = []
        self._font = tkfont.Font(family=config.font_name, size=-int(config.font_scale))
        self._fill = _gray_to_hex(config.fill_gray)
        self._line_width = 1.0

        self.bind("<Configure>", self._on_resize)
        self._draw()

    def save_postscript(self, destination: Path) -> None:
        self.update_idletasks()
        self.postscript(file=str(destination))

    def _on_resize(self, event: tk.Event) -> None:
        self._canvas_size = (event.width, event.height)
        self._draw()

    def _draw(self) -> None:
        render_tree(self.tree, self, self.annotation, self.layout_config)

    # -------------------------------
    # Drawing sink
    # -------------------------------
    def begin_page(self, label: str) -> None:
        self.delete("all")
        self._path = []
        if label:
            self.create_text(
                self.width() / 2,
                24,
                text=label,
                fill="#424242",
                font=tkfont.Font(family="Helvetica", size=12),
            )

    def width(self) -> float:
        return float(self._canvas_size[0])

    def height(self) -> float:
        return float(self._canvas_size[1])

    def select_font(self, name: str, size: float) -> None:
        # negative sizes are pixels in Tk
        self._font = tkfont.Font(family=name, size=-max(1, round(size)))

    def set_fill_color(self, value: float) -> None:
        self._fill = _gray_to_hex(value)

    def set_line_width(self, width: float) -> None:
        self._line_width = max(width, 1.0)

    def move_to(self, x: float, y: float) -> None:
        self._path = [self._flip(x, y)]

    def line_to(self, x: float, y: float) -> None:
        self._path.append(self._flip(x, y))

    def stroke(self) -> None:
        if len(self._path) > 1:
            coords = [value for point in self._path for value in point]
            self.create_line(*coords, width=self._line_width, fill="#000000")
        self._path = []

    def draw_text_box(
        self,
        text: str,
        x: float,
        y: float,
        margin: float,
        corner_radius: float,
        rotation: float,
        font_size: float,
    ) -> None:
        px, py = self._flip(x, y)
        font = tkfont.Font(
            family=self._font.actual("family"), size=-max(1, round(font_size))
        )
        half_w = font.measure(text) / 2 + margin
        half_h = font.metrics("linespace") / 2 + margin
        self._rounded_rectangle(
            px - half_w,
            py - half_h,
            px + half_w,
            py + half_h,
            corner_radius,
        )
        self.create_text(px, py, text=text, fill="#000000", font=font, angle=rotation)

    def _rounded_rectangle(
        self, x0: float, y0: float, x1: float, y1: float, radius: float
    ) -> None:
        r = min(radius, (x1 - x0) / 2, (y1 - y0) / 2)
        points = [
            x0 + r, y0, x1 - r, y0, x1, y0, x1, y0 + r,
            x1, y1 - r, x1, y1, x1 - r, y1, x0 + r, y1,
            x0, y1, x0, y1 - r, x0, y0 + r, x0, y0,
        ]
        self.create_polygon(
            points,
            smooth=True,
            fill=self._fill,
            outline="#000000",
            width=self._line_width,
        )

    def _flip(self, x: float, y: float) -> Point:
        return x, self.height() - y
