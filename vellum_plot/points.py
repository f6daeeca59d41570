from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from vellum_plot.errors import PlotDataError


class PlotPoint(Protocol):
    @property
    def x(self) -> float:
        ...

    @property
    def y(self) -> float:
        ...


P = TypeVar("P", bound=PlotPoint)


def reverse(points: list[P]) -> list[P]:
    i, j = 0, len(points) - 1
    while i < j:
        points[i], points[j] = points[j], points[i]
        i += 1
        j -= 1
    return points


def extrema(points: Sequence[PlotPoint]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) over `points`.

    Use extrema to find the coordinates which define the size of a chart.
    """
    if len(points) == 0:
        raise PlotDataError("extrema requires at least one point")
    first = points[0]
    min_x = max_x = float(first.x)
    min_y = max_y = float(first.y)
    for p in points[1:]:
        x, y = float(p.x), float(p.y)
        if x < min_x:
            min_x = x
        if y < min_y:
            min_y = y
        if x > max_x:
            max_x = x
        if y > max_y:
            max_y = y
    return min_x, min_y, max_x, max_y


def sample(points: Sequence[P], n: int) -> list[P]:
    """Keep every n-th point starting at index 0.

    Use sample to thin dense (sub-second) series before plotting.
    """
    if n < 1:
        raise PlotDataError(f"sample stride must be >= 1, got {n}")
    return list(points[::n])
