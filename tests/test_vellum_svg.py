from __future__ import annotations

import io
import tempfile
from pathlib import Path
import unittest

from vellum_svg import (
    CLOSE_PATH,
    CURVE_TO,
    LINE_TO,
    MOVE_TO,
    SMOOTH_CURVE_TO,
    SVG,
    Anchor,
    Circle,
    Ellipse,
    Group,
    Image,
    Line,
    Path as SvgPath,
    PathBuilder,
    PathCommand,
    Point,
    Polygon,
    Polyline,
    Presentation,
    Rect,
    Text,
    TextSpan,
    encode_to_string,
)


FULL_PRESENTATION = Presentation(
    color="blue",
    fill="none",
    opacity="0.5",
    stroke="black",
    stroke_dasharray="5,5",
    stroke_width="2",
)


class ElementEncodingTests(unittest.TestCase):
    def test_anchor(self) -> None:
        anchor = Anchor(show="show", actuate="actuate", href="href", target="target")
        self.assertEqual(
            encode_to_string(anchor),
            '<a xlink:show="show" xlink:actuate="actuate" xlink:href="href" xlink:target="target"></a>',
        )

    def test_anchor_wraps_children_in_order(self) -> None:
        anchor = Anchor(href="#x", children=[Circle(1, 1, 1), Line(0, 0, 1, 1)])
        self.assertEqual(
            encode_to_string(anchor),
            '<a xlink:show="" xlink:actuate="" xlink:href="#x" xlink:target="">'
            '<circle cx="1.00" cy="1.00" r="1.00" />'
            '<line x1="0.00" y1="0.00" x2="1.00" y2="1.00" />'
            "</a>",
        )

    def test_circle(self) -> None:
        self.assertEqual(encode_to_string(Circle(cx=4.5, cy=5.4, r=6)), '<circle cx="4.50" cy="5.40" r="6.00" />')

    def test_ellipse(self) -> None:
        self.assertEqual(
            encode_to_string(Ellipse(cx=4, cy=5, rx=4.5, ry=5.5)),
            '<ellipse cx="4.00" cy="5.00" rx="4.50" ry="5.50" />',
        )

    def test_group(self) -> None:
        group = Group(children=[Circle(cx=4.5, cy=5.4, r=6)])
        self.assertEqual(encode_to_string(group), '<g><circle cx="4.50" cy="5.40" r="6.00" /></g>')

    def test_group_presentation_on_opening_tag(self) -> None:
        group = Group(presentation=Presentation(stroke="red"))
        self.assertEqual(encode_to_string(group), '<g stroke="red"></g>')

    def test_image(self) -> None:
        image = Image(x=4, y=4, width=5, height=5, href="href")
        self.assertEqual(
            encode_to_string(image),
            '<image xlink:href="href" x="4.00" y="4.00" width="5.00" height="5.00" />',
        )

    def test_line(self) -> None:
        self.assertEqual(
            encode_to_string(Line(x1=4, y1=4, x2=5, y2=5)),
            '<line x1="4.00" y1="4.00" x2="5.00" y2="5.00" />',
        )

    def test_path_with_close(self) -> None:
        path = SvgPath(
            d=[
                PathCommand(MOVE_TO, Point(5, 5)),
                PathCommand(LINE_TO, Point(5, 10)),
                PathCommand(CLOSE_PATH),
            ]
        )
        self.assertEqual(encode_to_string(path), '<path d="M5.00 5.00 L5.00 10.00 Z" />')

    def test_path_builder_matches_explicit_commands(self) -> None:
        built = PathBuilder().move_to(5, 5).line_to(5, 10).close().build()
        explicit = SvgPath(
            d=(
                PathCommand(MOVE_TO, Point(5.0, 5.0)),
                PathCommand(LINE_TO, Point(5.0, 10.0)),
                PathCommand(CLOSE_PATH),
            )
        )
        self.assertEqual(built, explicit)

    def test_path_command_requires_point_unless_closing(self) -> None:
        with self.assertRaises(ValueError):
            PathCommand(LINE_TO)

    def test_smooth_curve_shares_curve_code(self) -> None:
        self.assertEqual(SMOOTH_CURVE_TO, CURVE_TO)
        self.assertEqual(encode_to_string(PathCommand(SMOOTH_CURVE_TO, Point(1, 2))), "C1.00 2.00 ")

    def test_polygon_and_polyline_use_fixed_precision_pairs(self) -> None:
        pts = [Point(0, 0), Point(1, 2.5), Point(3.125, 4)]
        self.assertEqual(encode_to_string(Polygon(points=pts)), '<polygon points="0.00,0.00 1.00,2.50 3.12,4.00" />')
        self.assertEqual(
            encode_to_string(Polyline(points=pts)),
            '<polyline points="0.00,0.00 1.00,2.50 3.12,4.00" />',
        )

    def test_rect(self) -> None:
        self.assertEqual(
            encode_to_string(Rect(x=1, y=2, width=3, height=4, rx=0.5)),
            '<rect x="1.00" y="2.00" rx="0.50" ry="0.00" width="3.00" height="4.00" />',
        )

    def test_text_escapes_content(self) -> None:
        self.assertEqual(encode_to_string(Text("a < b & c", Point(1, 2))), '<text x="1.00" y="2.00">a &lt; b &amp; c</text>')

    def test_text_container_renders_spans_after_content(self) -> None:
        text = Text("v", Point(0, 0), children=[TextSpan("w", point=Point(1, 2)), TextSpan("z")])
        self.assertEqual(
            encode_to_string(text),
            '<text x="0.00" y="0.00">v<tspan x="1.00" y="2.00">w</tspan><tspan>z</tspan></text>',
        )

    def test_svg_canvas(self) -> None:
        canvas = SVG(
            width=10,
            height=20,
            children=[Circle(1, 2, 3)],
            presentation=Presentation(stroke="black", fill="white"),
        )
        self.assertEqual(
            canvas.to_markup(),
            '<svg xmlns="http://www.w3.org/2000/svg" width="10.00" height="20.00" fill="white" stroke="black" >'
            '<circle cx="1.00" cy="2.00" r="3.00" /></svg>',
        )

    def test_svg_canvas_without_presentation(self) -> None:
        self.assertEqual(
            SVG(width=1, height=1).to_markup(),
            '<svg xmlns="http://www.w3.org/2000/svg" width="1.00" height="1.00" ></svg>',
        )

    def test_svg_write_creates_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = SVG(width=1, height=1).write(Path(tmp) / "out" / "plot.svg")
            self.assertEqual(target.read_text(encoding="utf-8"), SVG(width=1, height=1).to_markup() + "\n")

    def test_encode_writes_to_any_text_sink(self) -> None:
        buf = io.StringIO()
        Circle(0, 0, 1).encode(buf)
        Circle(1, 1, 1).encode(buf)
        self.assertEqual(buf.getvalue(), '<circle cx="0.00" cy="0.00" r="1.00" /><circle cx="1.00" cy="1.00" r="1.00" />')

    def test_children_are_frozen_to_tuples(self) -> None:
        children = [Circle(0, 0, 1)]
        group = Group(children=children)
        children.append(Circle(1, 1, 1))
        self.assertEqual(len(group.children), 1)


class PresentationTests(unittest.TestCase):
    def test_empty_presentation_emits_nothing(self) -> None:
        self.assertEqual(encode_to_string(Presentation()), "")
        self.assertEqual(
            encode_to_string(Circle(1, 1, 1, presentation=Presentation())),
            '<circle cx="1.00" cy="1.00" r="1.00" />',
        )

    def test_fields_render_in_fixed_order(self) -> None:
        self.assertEqual(
            encode_to_string(Line(0, 0, 1, 1, presentation=FULL_PRESENTATION)),
            '<line x1="0.00" y1="0.00" x2="1.00" y2="1.00" color="blue" fill="none" opacity="0.5"'
            ' stroke="black" stroke-dasharray="5,5" stroke-width="2" />',
        )

    def test_absent_fields_are_omitted(self) -> None:
        out = encode_to_string(Ellipse(0, 0, 1, 1, presentation=Presentation(opacity="0.1")))
        self.assertEqual(out, '<ellipse cx="0.00" cy="0.00" rx="1.00" ry="1.00" opacity="0.1" />')
        for name in ("color", "fill", "stroke", "stroke-dasharray", "stroke-width"):
            self.assertNotIn(f" {name}=", out)

    def test_attribute_values_are_escaped(self) -> None:
        self.assertEqual(encode_to_string(Presentation(fill='url("#a")&')), ' fill="url(&quot;#a&quot;)&amp;"')

    def test_presentation_shared_by_reference(self) -> None:
        style = Presentation(stroke="red")
        a = Line(0, 0, 1, 1, presentation=style)
        b = Circle(0, 0, 1, presentation=style)
        self.assertIs(a.presentation, b.presentation)
        self.assertIn('stroke="red"', encode_to_string(a))
        self.assertIn('stroke="red"', encode_to_string(b))


if __name__ == "__main__":
    unittest.main()
