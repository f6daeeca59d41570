from __future__ import annotations

import csv
import io
import json
from pathlib import Path
import sys
from typing import Any, TextIO

from vellum_plot.adapters import normalize_points
from vellum_plot.errors import PlotDataError
from vellum_svg import Point


def read_points(source: str | Path) -> list[Point]:
    """Read points from a CSV or JSON file; "-" reads CSV from stdin."""
    if str(source) == "-":
        return parse_csv_points(sys.stdin)
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"input not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return parse_json_points(text)
    return parse_csv_points(io.StringIO(text))


def parse_csv_points(stream: TextIO) -> list[Point]:
    pairs: list[tuple[str, str]] = []
    seen_row = False
    for lineno, row in enumerate(csv.reader(stream), start=1):
        cells = [c.strip() for c in row]
        if not cells or not any(cells) or cells[0].startswith("#"):
            continue
        if len(cells) < 2:
            raise PlotDataError(f"line {lineno}: expected x,y columns")
        if not seen_row:
            seen_row = True
            if not _is_number(cells[0]):
                # header row
                continue
        if not (_is_number(cells[0]) and _is_number(cells[1])):
            raise PlotDataError(f"line {lineno}: non-numeric row: {row!r}")
        pairs.append((cells[0], cells[1]))
    return normalize_points(points=pairs)


def parse_json_points(text: str) -> list[Point]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PlotDataError(f"invalid JSON input: {exc}") from exc
    if not isinstance(raw, list):
        raise PlotDataError("JSON input must be a list of points")
    pairs: list[tuple[Any, Any]] = []
    for i, item in enumerate(raw):
        if isinstance(item, dict):
            try:
                pairs.append((item["x"], item["y"]))
            except KeyError as exc:
                raise PlotDataError(f"point at index {i} missing key: {exc.args[0]}") from exc
        elif isinstance(item, list) and len(item) == 2:
            pairs.append((item[0], item[1]))
        else:
            raise PlotDataError(f"point at index {i} is not an (x, y) pair: {item!r}")
    return normalize_points(points=pairs)


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True
