from __future__ import annotations

import io
from typing import Iterable, Protocol
from xml.sax.saxutils import escape


SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_ATTR_ENTITIES = {'"': "&quot;"}


class TextSink(Protocol):
    def write(self, text: str, /) -> object:
        ...


class Encoder(Protocol):
    """Anything that can serialize itself as SVG element text."""

    def encode(self, sink: TextSink) -> None:
        ...


def encode_to_string(encoder: Encoder) -> str:
    buf = io.StringIO()
    encoder.encode(buf)
    return buf.getvalue()


def fmt(value: float) -> str:
    return f"{float(value):.2f}"


def escape_attr(value: str) -> str:
    return escape(str(value), _ATTR_ENTITIES)


def escape_text(value: str) -> str:
    return escape(str(value))


def encode_children(sink: TextSink, children: Iterable[Encoder]) -> None:
    for child in children:
        child.encode(sink)
