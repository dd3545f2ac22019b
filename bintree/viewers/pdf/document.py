from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

Point = Tuple[float, float]

_POINTS_PER_INCH = 72.0


class PdfTreeDocument:
    """Multi-page PDF drawing sink backed by matplotlib.

    One data unit equals one point and y points up, so coordinates map
    directly onto the page. Pages are flushed to ``path`` as soon as the next
    page begins or the document is closed.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        page_size: Tuple[float, float] = (612.0, 792.0),
    ) -> None:
        self.path = Path(path)
        self.page_size = page_size
        self._pages = PdfPages(self.path)
        self._figure: Optional[Figure] = None
        self._axes = None
        self._path_points: List[Point] = []
        self._pending: List[List[Point]] = []
        self._font_name = "Helvetica"
        self._font_size = 12.0
        self._fill = "0.75"
        self._line_width = 1.0
        self.page_count = 0

    def __enter__(self) -> PdfTreeDocument:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------
    # Page handling
    # -------------------------------
    def begin_page(self, label: str) -> None:
        self._flush_page()
        width, height = self.page_size
        figure = Figure(figsize=(width / _POINTS_PER_INCH, height / _POINTS_PER_INCH))
        axes = figure.add_axes((0.0, 0.0, 1.0, 1.0))
        axes.set_xlim(0.0, width)
        axes.set_ylim(0.0, height)
        axes.axis("off")
        if label:
            axes.text(
                width / 2,
                height - 24.0,
                label,
                ha="center",
                va="center",
                fontsize=10,
                color="#424242",
            )
        self._figure = figure
        self._axes = axes
        self._path_points = []
        self._pending = []
        self.page_count += 1

    def close(self) -> None:
        self._flush_page()
        self._pages.close()

    def width(self) -> float:
        return self.page_size[0]

    def height(self) -> float:
        return self.page_size[1]

    # -------------------------------
    # Graphics state
    # -------------------------------
    def select_font(self, name: str, size: float) -> None:
        self._font_name = name
        self._font_size = size

    def set_fill_color(self, value: float) -> None:
        # matplotlib reads a numeric string as a grey level
        self._fill = str(float(value))

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    # -------------------------------
    # Drawing
    # -------------------------------
    def move_to(self, x: float, y: float) -> None:
        self._require_page()
        if len(self._path_points) > 1:
            self._pending.append(self._path_points)
        self._path_points = [(x, y)]

    def line_to(self, x: float, y: float) -> None:
        self._require_page()
        if not self._path_points:
            raise RuntimeError("line_to() called without a current point")
        self._path_points.append((x, y))

    def stroke(self) -> None:
        axes = self._require_page()
        if len(self._path_points) > 1:
            self._pending.append(self._path_points)
        for points in self._pending:
            xs, ys = zip(*points)
            axes.add_line(
                Line2D(xs, ys, linewidth=self._line_width, color="black", zorder=1)
            )
        self._pending = []
        self._path_points = []

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
        axes = self._require_page()
        size = font_size or self._font_size
        # boxstyle padding and rounding are expressed in font-size units
        pad = margin / size if size else 0.0
        rounding = corner_radius / size if size else 0.0
        axes.text(
            x,
            y,
            text,
            ha="center",
            va="center",
            rotation=rotation,
            fontsize=size,
            fontfamily=[self._font_name, "sans-serif"],
            zorder=2,
            bbox={
                "boxstyle": f"round,pad={pad:.4f},rounding_size={rounding:.4f}",
                "facecolor": self._fill,
                "edgecolor": "black",
                "linewidth": self._line_width,
            },
        )

    def _require_page(self):
        if self._axes is None:
            raise RuntimeError("begin_page() must be called before drawing")
        return self._axes

    def _flush_page(self) -> None:
        if self._figure is None:
            return
        self.stroke()
        self._pages.savefig(self._figure)
        self._figure = None
        self._axes = None
