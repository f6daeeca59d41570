from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .encoder import Encoder, TextSink, encode_children, escape_attr, escape_text, fmt
from .path import Point
from .presentation import Presentation, encode_presentation


def _freeze_children(obj: object, name: str = "children") -> None:
    object.__setattr__(obj, name, tuple(getattr(obj, name)))


def _encode_points(points: Sequence[Point]) -> str:
    return " ".join(f"{fmt(p.x)},{fmt(p.y)}" for p in points)


@dataclass(frozen=True)
class Anchor:
    show: str = ""
    actuate: str = ""
    href: str = ""
    target: str = ""
    children: tuple[Encoder, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        _freeze_children(self)

    def encode(self, sink: TextSink) -> None:
        sink.write(
            f'<a xlink:show="{escape_attr(self.show)}" xlink:actuate="{escape_attr(self.actuate)}"'
            f' xlink:href="{escape_attr(self.href)}" xlink:target="{escape_attr(self.target)}"'
        )
        encode_presentation(sink, self.presentation)
        sink.write(">")
        encode_children(sink, self.children)
        sink.write("</a>")


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    presentation: Presentation | None = None

    def encode(self, sink: TextSink) -> None:
        sink.write(f'<circle cx="{fmt(self.cx)}" cy="{fmt(self.cy)}" r="{fmt(self.r)}"')
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class Ellipse:
    cx: float
    cy: float
    rx: float
    ry: float
    presentation: Presentation | None = None

    def encode(self, sink: TextSink) -> None:
        sink.write(
            f'<ellipse cx="{fmt(self.cx)}" cy="{fmt(self.cy)}" rx="{fmt(self.rx)}" ry="{fmt(self.ry)}"'
        )
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class Group:
    children: tuple[Encoder, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        _freeze_children(self)

    def encode(self, sink: TextSink) -> None:
        sink.write("<g")
        encode_presentation(sink, self.presentation)
        sink.write(">")
        encode_children(sink, self.children)
        sink.write("</g>")


@dataclass(frozen=True)
class Image:
    x: float
    y: float
    width: float
    height: float
    href: str = ""
    presentation: Presentation | None = None

    def encode(self, sink: TextSink) -> None:
        sink.write(
            f'<image xlink:href="{escape_attr(self.href)}" x="{fmt(self.x)}" y="{fmt(self.y)}"'
            f' width="{fmt(self.width)}" height="{fmt(self.height)}"'
        )
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    presentation: Presentation | None = None

    def encode(self, sink: TextSink) -> None:
        sink.write(f'<line x1="{fmt(self.x1)}" y1="{fmt(self.y1)}" x2="{fmt(self.x2)}" y2="{fmt(self.y2)}"')
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        _freeze_children(self, "points")

    def encode(self, sink: TextSink) -> None:
        sink.write(f'<polygon points="{_encode_points(self.points)}"')
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        _freeze_children(self, "points")

    def encode(self, sink: TextSink) -> None:
        sink.write(f'<polyline points="{_encode_points(self.points)}"')
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0
    ry: float = 0.0
    presentation: Presentation | None = None

    def encode(self, sink: TextSink) -> None:
        sink.write(
            f'<rect x="{fmt(self.x)}" y="{fmt(self.y)}" rx="{fmt(self.rx)}" ry="{fmt(self.ry)}"'
            f' width="{fmt(self.width)}" height="{fmt(self.height)}"'
        )
        encode_presentation(sink, self.presentation)
        sink.write(" />")


@dataclass(frozen=True)
class TextSpan:
    content: str
    point: Point | None = None
    presentation: Presentation | None = None

    def encode(self, sink: TextSink) -> None:
        sink.write("<tspan")
        if self.point is not None:
            sink.write(f' x="{fmt(self.point.x)}" y="{fmt(self.point.y)}"')
        encode_presentation(sink, self.presentation)
        sink.write(f">{escape_text(self.content)}</tspan>")


@dataclass(frozen=True)
class Text:
    """Text element; `children` holds nested spans rendered after `content`."""

    content: str
    point: Point
    children: tuple[Encoder, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        _freeze_children(self)

    def encode(self, sink: TextSink) -> None:
        sink.write(f'<text x="{fmt(self.point.x)}" y="{fmt(self.point.y)}"')
        encode_presentation(sink, self.presentation)
        sink.write(f">{escape_text(self.content)}")
        encode_children(sink, self.children)
        sink.write("</text>")
