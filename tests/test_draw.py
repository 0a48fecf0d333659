"""Tests for the cairo drawing adapter."""
import os
import tempfile
import unittest

import cairo

from modulo_krinkle.draw import (
    DRAW_STYLES,
    TILE_TYPE_COLORS,
    draw_circles,
    draw_cross_weave,
    draw_lines,
    draw_tiling,
    mkcolor,
    rainbow_color,
    render,
    resolve_index,
)
from modulo_krinkle.geometry import Point2D
from modulo_krinkle.tile import TileType
from modulo_krinkle.tiling import Tiling


class TestColors(unittest.TestCase):
    def test_mkcolor(self):
        self.assertEqual(mkcolor(0xff0000), (1.0, 0.0, 0.0))
        self.assertEqual(mkcolor(0x000000), (0.0, 0.0, 0.0))

    def test_every_tile_type_has_a_color(self):
        self.assertEqual(set(TILE_TYPE_COLORS), set(TileType))

    def test_rainbow_start_is_red(self):
        r, g, b = rainbow_color(0, 0, 10)
        self.assertAlmostEqual(r, 1.0)
        self.assertAlmostEqual(g, 0.0)
        self.assertAlmostEqual(b, 0.0)

    def test_rainbow_end_hue(self):
        r, g, b = rainbow_color(10, 0, 10, end_hue=120)
        self.assertAlmostEqual(r, 0.0)
        self.assertAlmostEqual(g, 1.0)
        self.assertAlmostEqual(b, 0.0)

    def test_rainbow_clamps_and_flips(self):
        self.assertEqual(rainbow_color(50, 0, 10, end_hue=120), rainbow_color(10, 0, 10, end_hue=120))
        self.assertEqual(rainbow_color(0, 0, 10, end_hue=120, flip=True),
                         rainbow_color(10, 0, 10, end_hue=120))

    def test_rainbow_degenerate_range(self):
        self.assertEqual(rainbow_color(3, 3, 3), rainbow_color(0, 0, 10))


class TestResolveIndex(unittest.TestCase):
    def test_plain_indices(self):
        self.assertEqual(resolve_index(0, 12), 0)
        self.assertEqual(resolve_index(5, 12), 5)
        self.assertEqual(resolve_index(13, 12), 1)

    def test_negative_indices_count_from_far_point(self):
        self.assertEqual(resolve_index(-1, 12), 6)
        self.assertEqual(resolve_index(-2, 12), 7)

    def test_negative_indices_wrap_within_upper_half(self):
        self.assertEqual(resolve_index(-7, 12), 6)
        self.assertEqual(resolve_index(-8, 12), 7)
        self.assertEqual(resolve_index(-11, 12), 10)
        self.assertEqual(resolve_index(-13, 12), 6)
        # whole turns land back on the start point
        self.assertEqual(resolve_index(-12, 12), 0)
        for index in (i for i in range(-40, 0) if i % 12):
            self.assertIn(resolve_index(index, 12), range(6, 12))


class RecordingSurfaceTestCase(unittest.TestCase):
    def setUp(self):
        self.tiling = Tiling(m=2, k=5, t=2, unit_length=10, layer_count=3)
        self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 200, 200)
        self.ctx = cairo.Context(self.surface)
        self.ctx.translate(100, 100)
        self.ctx.scale(0.5, 0.5)

    def tearDown(self):
        self.surface.finish()


class TestDrawStyles(RecordingSurfaceTestCase):
    def test_every_style_draws_every_tile(self):
        for name in DRAW_STYLES:
            count = draw_tiling(self.ctx, self.tiling, Point2D.zero(), name)
            self.assertEqual(count, self.tiling.tile_count, name)

    def test_unknown_style(self):
        with self.assertRaises(KeyError):
            draw_tiling(self.ctx, self.tiling, style="sketchy")

    def test_custom_draw_function(self):
        seen = []
        draw_tiling(self.ctx, self.tiling, draw=lambda ctx, tile, center: seen.append(tile.label()))
        self.assertEqual(len(seen), self.tiling.tile_count)
        self.assertEqual(seen[0], "S0 W0 L0 (B)")

    def test_parameterised_styles(self):
        tile = self.tiling.wedges[0].layers[1][0]
        self.ctx.set_line_width(4)
        draw_lines([[0, 3, -1], [1, 2]])(self.ctx, tile, Point2D(5, 5))
        draw_cross_weave()(self.ctx, tile, Point2D.zero())
        self.surface.flush()
        self.assertTrue(any(self.surface.get_data()))

    def test_far_negative_indices_stay_on_tile(self):
        tile = self.tiling.wedges[0].layers[1][0]
        self.ctx.set_line_width(4)
        draw_lines([0, -7, -13])(self.ctx, tile, Point2D.zero())
        draw_circles(3, [-7, -20])(self.ctx, tile, Point2D.zero())
        self.surface.flush()
        self.assertTrue(any(self.surface.get_data()))

    def test_fills_pixels(self):
        draw_tiling(self.ctx, self.tiling, style="types")
        self.surface.flush()
        self.assertTrue(any(self.surface.get_data()))


class TestRender(unittest.TestCase):
    def setUp(self):
        self.tiling = Tiling(m=2, k=5, t=2, layer_count=2)
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_png(self):
        path = os.path.join(self.tmp.name, "tiling.png")
        render(self.tiling, path, size=128)
        with open(path, "rb") as fp:
            self.assertEqual(fp.read(8), b"\x89PNG\r\n\x1a\n")

    def test_svg(self):
        path = os.path.join(self.tmp.name, "tiling.svg")
        render(self.tiling, path, size=128, style="basic")
        with open(path, encoding="utf-8") as fp:
            self.assertIn("<svg", fp.read())

    def test_svg_finished_when_drawing_fails(self):
        path = os.path.join(self.tmp.name, "broken.svg")
        with self.assertRaises(KeyError):
            render(self.tiling, path, size=64, style="sketchy")
        with open(path, encoding="utf-8") as fp:
            self.assertIn("</svg>", fp.read())

    def test_unsupported_suffix(self):
        with self.assertRaises(ValueError):
            render(self.tiling, os.path.join(self.tmp.name, "tiling.txt"))


if __name__ == "__main__":
    unittest.main()
