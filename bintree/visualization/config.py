from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Geometry and styling used when laying out and drawing a tree.

    Distances are in canvas units (points for the PDF backend) before the
    height-dependent scale is applied.
    """

    font_scale: float = 20.0
    level_separation: float = 90.0
    node_separation: float = 30.0
    box_margin: float = 6.0
    box_corner_radius: float = 6.0
    top_margin: float = 72.0
    font_name: str = "Helvetica"
    fill_gray: float = 0.75


DEFAULT_CONFIG = LayoutConfig()
