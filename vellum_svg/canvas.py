from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .encoder import SVG_NAMESPACE, Encoder, TextSink, encode_children, encode_to_string, fmt
from .presentation import Presentation, encode_presentation


@dataclass(frozen=True)
class SVG:
    """Root canvas; the only element that declares the SVG namespace."""

    width: float
    height: float
    children: tuple[Encoder, ...] = ()
    presentation: Presentation | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def encode(self, sink: TextSink) -> None:
        sink.write(f'<svg xmlns="{SVG_NAMESPACE}" width="{fmt(self.width)}" height="{fmt(self.height)}"')
        encode_presentation(sink, self.presentation)
        sink.write(" >")
        encode_children(sink, self.children)
        sink.write("</svg>")

    def to_markup(self) -> str:
        return encode_to_string(self)

    def write(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as f:
            self.encode(f)
            f.write("\n")
        return target
