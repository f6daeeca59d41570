from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

import numpy as np

from vellum_plot.errors import PlotDataError
from vellum_svg import Point


LOGGER = logging.getLogger(__name__)


def normalize_points(
    y: Any = None,
    *,
    x: Any = None,
    points: Any = None,
) -> list[Point]:
    """Coerce plot input into a list of finite `Point`s.

    Either pass `points` (PlotPoint objects, (x, y) pairs or an (n, 2) array),
    or a 1-D `y` with an optional matching 1-D `x` (defaults to 0..n-1).
    """
    if points is not None:
        if y is not None or x is not None:
            raise PlotDataError("pass either points or x/y, not both")
        x_arr, y_arr = _split_pairs(points)
    else:
        if y is None:
            raise PlotDataError("y input is required")
        y_arr = _coerce_1d_numeric(y, label="y")
        if x is None:
            x_arr = np.arange(y_arr.size, dtype=np.float64)
        else:
            x_arr = _coerce_1d_numeric(x, label="x")

    if y_arr.size == 0:
        raise PlotDataError("empty series")
    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.any(mask):
        raise PlotDataError("series contains no finite points")
    dropped = int(mask.size - np.count_nonzero(mask))
    if dropped:
        LOGGER.warning("dropped %d non-finite point(s)", dropped)

    return [Point(px, py) for px, py in zip(x_arr[mask].tolist(), y_arr[mask].tolist(), strict=True)]


def _split_pairs(points: Any) -> tuple[np.ndarray, np.ndarray]:
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise PlotDataError(f"point array must have shape (n, 2), got {points.shape}")
        return (
            _coerce_ndarray(points[:, 0], label="x"),
            _coerce_ndarray(points[:, 1], label="y"),
        )

    if not isinstance(points, Sequence) or isinstance(points, (str, bytes, bytearray)):
        raise PlotDataError(f"unsupported points input type: {type(points)!r}")

    xs: list[Any] = []
    ys: list[Any] = []
    for i, item in enumerate(points):
        if hasattr(item, "x") and hasattr(item, "y"):
            xs.append(item.x)
            ys.append(item.y)
            continue
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray)) and len(item) == 2:
            xs.append(item[0])
            ys.append(item[1])
            continue
        raise PlotDataError(f"point at index {i} is not an (x, y) pair: {item!r}")
    return (
        _coerce_ndarray(np.asarray(xs, dtype=object), label="x"),
        _coerce_ndarray(np.asarray(ys, dtype=object), label="y"),
    )


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
