from vellum_svg.canvas import SVG
from vellum_svg.elements import Anchor, Circle, Ellipse, Group, Image, Line, Polygon, Polyline, Rect, Text, TextSpan
from vellum_svg.encoder import Encoder, TextSink, encode_to_string
from vellum_svg.path import (
    CLOSE_PATH,
    CURVE_TO,
    ELLIPTICAL_ARC,
    HORIZONTAL_LINE_TO,
    LINE_TO,
    MOVE_TO,
    QUADRATIC_BEZIER_CURVE,
    SMOOTH_CURVE_TO,
    SMOOTH_QUADRATIC_BEZIER_CURVE,
    VERTICAL_LINE_TO,
    Path,
    PathBuilder,
    PathCommand,
    PathDirective,
    Point,
)
from vellum_svg.presentation import Presentation

__all__ = [
    "Anchor",
    "CLOSE_PATH",
    "CURVE_TO",
    "Circle",
    "ELLIPTICAL_ARC",
    "Ellipse",
    "Encoder",
    "Group",
    "HORIZONTAL_LINE_TO",
    "Image",
    "LINE_TO",
    "Line",
    "MOVE_TO",
    "Path",
    "PathBuilder",
    "PathCommand",
    "PathDirective",
    "Point",
    "Polygon",
    "Polyline",
    "Presentation",
    "QUADRATIC_BEZIER_CURVE",
    "Rect",
    "SMOOTH_CURVE_TO",
    "SMOOTH_QUADRATIC_BEZIER_CURVE",
    "SVG",
    "Text",
    "TextSink",
    "TextSpan",
    "VERTICAL_LINE_TO",
    "encode_to_string",
]
