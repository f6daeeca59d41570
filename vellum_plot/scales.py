from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Sequence

import numpy as np

from vellum_plot.points import PlotPoint, extrema
from vellum_svg import Point


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataLimits:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class PlotTransform:
    """Data-space to pixel-space mapping: ((x - x_min) * x_unit, (y - y_min) * y_unit)."""

    x_min: float
    y_min: float
    x_unit: float
    y_unit: float


def compute_limits(points: Sequence[PlotPoint], pad: float = 1.0) -> DataLimits:
    xmin, ymin, xmax, ymax = extrema(points)

    if xmin == xmax:
        LOGGER.warning("zero x span at %s; widening by %s", xmin, pad)
        xmin -= pad
        xmax += pad

    if ymin == ymax:
        LOGGER.warning("zero y span at %s; widening by %s", ymin, pad)
        ymin -= pad
        ymax += pad

    return DataLimits(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def build_transform(limits: DataLimits, width: float, height: float) -> PlotTransform:
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise ValueError(f"plot width/height must be finite and > 0, got {width}x{height}")
    x_unit = width / (limits.xmax - limits.xmin)
    y_unit = height / (limits.ymax - limits.ymin)
    return PlotTransform(x_min=limits.xmin, y_min=limits.ymin, x_unit=x_unit, y_unit=y_unit)


def map_points(points: Sequence[PlotPoint], transform: PlotTransform) -> list[Point]:
    if len(points) == 0:
        return []
    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))
    px = (xs - transform.x_min) * transform.x_unit
    py = (ys - transform.y_min) * transform.y_unit
    return [Point(x, y) for x, y in zip(px.tolist(), py.tolist(), strict=True)]
