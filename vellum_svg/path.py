from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .encoder import TextSink, fmt
from .presentation import Presentation, encode_presentation


PathDirective = Literal["M", "L", "H", "V", "C", "Q", "T", "A", "Z"]

MOVE_TO: PathDirective = "M"
LINE_TO: PathDirective = "L"
HORIZONTAL_LINE_TO: PathDirective = "H"
VERTICAL_LINE_TO: PathDirective = "V"
CURVE_TO: PathDirective = "C"
# Shares the cubic code with CURVE_TO.
SMOOTH_CURVE_TO: PathDirective = "C"
QUADRATIC_BEZIER_CURVE: PathDirective = "Q"
SMOOTH_QUADRATIC_BEZIER_CURVE: PathDirective = "T"
ELLIPTICAL_ARC: PathDirective = "A"
CLOSE_PATH: PathDirective = "Z"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class PathCommand:
    """One step of a path "d" attribute.

    Every directive carries a point except CLOSE_PATH.
    """

    directive: PathDirective
    point: Point | None = None

    def __post_init__(self) -> None:
        if self.directive != CLOSE_PATH and self.point is None:
            raise ValueError(f"path directive {self.directive!r} requires a point")

    def encode(self, sink: TextSink) -> None:
        if self.directive == CLOSE_PATH or self.point is None:
            sink.write(CLOSE_PATH)
            return
        sink.write(f"{self.directive}{fmt(self.point.x)} {fmt(self.point.y)} ")


@dataclass(frozen=True)
class Path:
    d: tuple[PathCommand, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "d", tuple(self.d))

    def encode(self, sink: TextSink) -> None:
        sink.write('<path d="')
        for command in self.d:
            command.encode(sink)
        sink.write('"')
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass
class PathBuilder:
    """Accumulates commands before freezing them into a Path."""

    commands: list[PathCommand] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> "PathBuilder":
        self.commands.append(PathCommand(MOVE_TO, Point(float(x), float(y))))
        return self

    def line_to(self, x: float, y: float) -> "PathBuilder":
        self.commands.append(PathCommand(LINE_TO, Point(float(x), float(y))))
        return self

    def close(self) -> "PathBuilder":
        self.commands.append(PathCommand(CLOSE_PATH))
        return self

    def build(self, presentation: Presentation | None = None) -> Path:
        return Path(d=tuple(self.commands), presentation=presentation)
