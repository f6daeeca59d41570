from __future__ import annotations

from dataclasses import dataclass

from .encoder import TextSink, escape_attr


@dataclass(frozen=True)
class Presentation:
    """Shared presentation attributes; empty fields are omitted on encode."""

    color: str = ""
    fill: str = ""
    opacity: str = ""
    stroke: str = ""
    stroke_dasharray: str = ""
    stroke_width: str = ""

    def attributes(self) -> list[tuple[str, str]]:
        pairs = (
            ("color", self.color),
            ("fill", self.fill),
            ("opacity", self.opacity),
            ("stroke", self.stroke),
            ("stroke-dasharray", self.stroke_dasharray),
            ("stroke-width", self.stroke_width),
        )
        return [(name, value) for name, value in pairs if value]

    def encode(self, sink: TextSink) -> None:
        for name, value in self.attributes():
            sink.write(f' {name}="{escape_attr(value)}"')


def encode_presentation(sink: TextSink, presentation: Presentation | None) -> None:
    if presentation is not None:
        presentation.encode(sink)
