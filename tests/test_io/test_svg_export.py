"""
Tests for SVG export.
"""

import os
import tempfile
import unittest

from vecdraw.core.figure import Figure, GroupFigure
from vecdraw.core.geometry import Geometry
from vecdraw.core.layer import Layer
from vecdraw.core.settings import ExportSettings
from vecdraw.core.style import BorderStyle, FillStyle, Style
from vecdraw.core.transform import Transform
from vecdraw.io.svg_export import (
    SVG_HEADER, export_svg, figure_to_svg, format_number,
    layer_to_svg_lines, style_attribute
)


def red_fill() -> Style:
    return Style(FillStyle(color="red"), None)


class TestStyleAttribute(unittest.TestCase):
    """Test style string construction."""

    def test_fill_only(self):
        """Test a fill without border has no stroke clause."""
        self.assertEqual(style_attribute(red_fill()), 'style="fill:red"')

    def test_fill_and_stroke(self):
        """Test stroke clause follows the fill."""
        style = Style(FillStyle(color="red"), BorderStyle(color="black", width=2))
        self.assertEqual(style_attribute(style),
                         'style="fill:red;stroke:black;stroke-width:2"')

    def test_no_fill(self):
        """Test absent or hidden fill is written as none."""
        self.assertEqual(style_attribute(Style(None, None)), 'style="fill:none"')
        style = Style(FillStyle(is_visible=False), BorderStyle(color="blue", width=1.5))
        self.assertEqual(style_attribute(style),
                         'style="fill:none;stroke:blue;stroke-width:1.5"')

    def test_hidden_border(self):
        """Test an invisible border is not written."""
        style = Style(FillStyle(color="red"), BorderStyle(is_visible=False))
        self.assertEqual(style_attribute(style), 'style="fill:red"')

    def test_nearest_color_name(self):
        """Test off-palette colors use the nearest name."""
        style = Style(FillStyle(color=(254, 1, 0)), None)
        self.assertEqual(style_attribute(style), 'style="fill:red"')


class TestFigureToSvg(unittest.TestCase):
    """Test per-kind element serialization."""

    def test_rect(self):
        """Test rectangles carry their raw matrix."""
        figure = Figure(Geometry.rectangle(0, 0, 10, 10), style=red_fill())
        self.assertEqual(
            figure_to_svg(figure),
            '<rect x="0" y="0" width="10" height="10" '
            'transform="matrix(1,0,0,1,0,0)" style="fill:red"/>')

    def test_rect_uses_untransformed_box(self):
        """Test rectangle geometry stays local and the matrix is separate."""
        figure = Figure(Geometry.square(1, 2, 4), Transform(2, 0, 0, 3, 5, 6), red_fill())
        self.assertEqual(
            figure_to_svg(figure),
            '<rect x="1" y="2" width="4" height="4" '
            'transform="matrix(2,0,0,3,5,6)" style="fill:red"/>')

    def test_ellipse_has_no_transform(self):
        """Test ellipses drop their transform."""
        figure = Figure(Geometry.ellipse(0, 0, 10, 6), Transform(2, 0, 0, 2, 30, 40),
                        red_fill())
        element = figure_to_svg(figure)
        self.assertEqual(element, '<ellipse cx="5" cy="3" rx="5" ry="3" style="fill:red"/>')
        self.assertNotIn('transform', element)

    def test_circle(self):
        """Test circles use the untransformed box and no transform."""
        figure = Figure(Geometry.circle(2, 2, 6), Transform.translation(9, 9), red_fill())
        self.assertEqual(figure_to_svg(figure),
                         '<circle cx="5" cy="5" r="3" style="fill:red"/>')

    def test_polygon_points_pre_transformed(self):
        """Test polygon points have the transform baked in."""
        figure = Figure(Geometry.polygon([(0, 0), (1, 0), (1, 1)]),
                        Transform.scaling(2, 1), red_fill())
        element = figure_to_svg(figure)
        self.assertEqual(element, '<polygon points="0,0 2,0 2,1" style="fill:red"/>')
        self.assertNotIn('transform', element)

    def test_polyline(self):
        """Test polylines use their own element name."""
        figure = Figure(Geometry.polyline([(0, 0), (3, 4)]), Transform.translation(1, 1),
                        Style(None, BorderStyle(color="black", width=1)))
        self.assertEqual(
            figure_to_svg(figure),
            '<polyline points="1,1 4,5" style="fill:none;stroke:black;stroke-width:1"/>')

    def test_empty_polygon(self):
        """Test an empty point list gives an empty points attribute."""
        figure = Figure(Geometry.polygon([]), style=red_fill())
        self.assertEqual(figure_to_svg(figure), '<polygon points="" style="fill:red"/>')

    def test_unsupported_kinds(self):
        """Test free paths and groups produce no element."""
        self.assertIsNone(figure_to_svg(Figure(Geometry.path([(0, 0), (1, 1)]))))
        self.assertIsNone(figure_to_svg(GroupFigure([Figure(Geometry.rectangle())])))


class TestFormatNumber(unittest.TestCase):
    """Test compact number formatting."""

    def test_values(self):
        """Test integers, fractions and negative zero."""
        self.assertEqual(format_number(10.0), "10")
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(-3.25), "-3.25")
        self.assertEqual(format_number(-0.0), "0")
        self.assertEqual(format_number(1 / 3), "0.333333")


class TestExportSvg(unittest.TestCase):
    """Test whole-document export."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, 'out.svg')

    def tearDown(self):
        self._tmp.cleanup()

    def read(self):
        with open(self.path, 'r', encoding='utf-8') as f:
            return f.read()

    def test_document_structure(self):
        """Test header, fixed canvas, one line per figure and footer."""
        layer = Layer(figures=[
            Figure(Geometry.rectangle(0, 0, 10, 10), style=red_fill()),
            Figure(Geometry.circle(0, 0, 2), style=red_fill()),
        ])
        export_svg(self.path, layer)
        lines = self.read().splitlines()
        self.assertEqual(lines[:3], SVG_HEADER)
        self.assertEqual(
            lines[3],
            '<svg width="1000" height="1000"  xmlns="http://www.w3.org/2000/svg" version="1.1">')
        self.assertTrue(lines[4].startswith('<rect '))
        self.assertTrue(lines[5].startswith('<circle '))
        self.assertEqual(lines[6], '</svg>')
        self.assertEqual(len(lines), 7)

    def test_canvas_size_independent_of_content(self):
        """Test the canvas is 1000x1000 whatever the content bounds."""
        layer = Layer(figures=[Figure(Geometry.rectangle(0, 0, 5000, 5000))])
        lines = layer_to_svg_lines(layer)
        self.assertIn('width="1000" height="1000"', lines[3])

    def test_configured_canvas_size(self):
        """Test the canvas size can be changed through settings."""
        lines = layer_to_svg_lines(Layer(), ExportSettings(svg_canvas_size=(200, 100)))
        self.assertIn('width="200" height="100"', lines[3])

    def test_unsupported_kind_skipped(self):
        """Test unsupported figures vanish while others still export."""
        layer = Layer(figures=[
            Figure(Geometry.rectangle(0, 0, 1, 1), style=red_fill()),
            Figure(Geometry.path([(0, 0), (5, 5)], closed=True), style=red_fill()),
            Figure(Geometry.polygon([(0, 0), (1, 0), (1, 1)]), style=red_fill()),
        ])
        export_svg(self.path, layer)
        body = self.read().splitlines()[4:-1]
        self.assertEqual(len(body), 2)
        self.assertTrue(body[0].startswith('<rect '))
        self.assertTrue(body[1].startswith('<polygon '))

    def test_idempotent(self):
        """Test exporting twice gives identical text."""
        layer = Layer(figures=[
            Figure(Geometry.ellipse(0, 0, 3, 4), Transform.translation(1, 2)),
            Figure(Geometry.polyline([(0, 0), (1, 2)])),
        ])
        export_svg(self.path, layer)
        first = self.read()
        export_svg(self.path, layer)
        self.assertEqual(first, self.read())

    def test_empty_layer(self):
        """Test an empty layer is a well-formed empty document."""
        export_svg(self.path, Layer())
        lines = self.read().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[-1], '</svg>')

    def test_unwritable_path(self):
        """Test write failures surface as OSError."""
        with self.assertRaises(OSError):
            export_svg(os.path.join(self._tmp.name, 'missing', 'out.svg'), Layer())


if __name__ == '__main__':
    unittest.main()
