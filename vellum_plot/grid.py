from __future__ import annotations

import math

from vellum_svg import Line, Presentation


# pixels
GRID_STRIDE = 20.0

GRID_PRESENTATION = Presentation(opacity="0.1")


def grid_lines(
    x_min: float,
    y_min: float,
    x_max: float,
    y_max: float,
    x_unit: float,
    y_unit: float,
    width: float,
    height: float,
    *,
    stride: float = GRID_STRIDE,
    presentation: Presentation = GRID_PRESENTATION,
) -> list[Line]:
    """Background guide lines every `stride` pixels, horizontal first.

    The data-space limits and units are not read yet; they are kept so grid
    labels can be derived from them without changing callers.
    """
    if not math.isfinite(stride) or stride <= 0:
        raise ValueError(f"grid stride must be finite and > 0, got {stride}")
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"grid width/height must be finite, got {width}x{height}")
    lines: list[Line] = []

    # horizontal
    y = stride
    while y < height:
        lines.append(Line(x1=0.0, y1=y, x2=width, y2=y, presentation=presentation))
        y += stride

    # vertical
    x = stride
    while x < width:
        lines.append(Line(x1=x, y1=0.0, x2=x, y2=height, presentation=presentation))
        x += stride

    return lines
