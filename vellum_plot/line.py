from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from vellum_plot.errors import PlotDataError
from vellum_plot.grid import GRID_PRESENTATION, GRID_STRIDE, grid_lines
from vellum_plot.points import PlotPoint
from vellum_plot.scales import build_transform, compute_limits, map_points
from vellum_svg import SVG, PathBuilder, Presentation


LOGGER = logging.getLogger(__name__)

LINE_PRESENTATION = Presentation(stroke="red", stroke_width="0.8")
CANVAS_PRESENTATION = Presentation(stroke="black", fill="white", stroke_width="0.7")


@dataclass(frozen=True)
class LinePlotStyle:
    line: Presentation = LINE_PRESENTATION
    canvas: Presentation = CANVAS_PRESENTATION
    grid: Presentation = GRID_PRESENTATION
    grid_stride: float = GRID_STRIDE


DEFAULT_STYLE = LinePlotStyle()


def render_line(
    points: Sequence[PlotPoint],
    width: float,
    height: float,
    *,
    style: LinePlotStyle | None = None,
) -> SVG:
    """Produce a line plot of `points` scaled into a `width` x `height` canvas."""
    if len(points) == 0:
        raise PlotDataError("line plot requires at least one point")
    style = style or DEFAULT_STYLE
    limits = compute_limits(points)
    transform = build_transform(limits, width, height)
    mapped = map_points(points, transform)

    builder = PathBuilder()
    first, rest = mapped[0], mapped[1:]
    builder.move_to(first.x, first.y)
    for p in rest:
        builder.line_to(p.x, p.y)
    path = builder.build(presentation=style.line)

    grid = grid_lines(
        limits.xmin,
        limits.ymin,
        limits.xmax,
        limits.ymax,
        transform.x_unit,
        transform.y_unit,
        width,
        height,
        stride=style.grid_stride,
        presentation=style.grid,
    )
    LOGGER.debug("line plot: points=%d grid_lines=%d size=%sx%s", len(mapped), len(grid), width, height)
    return SVG(
        width=width,
        height=height,
        children=(path, *grid),
        presentation=style.canvas,
    )
