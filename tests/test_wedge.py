"""Tests for wedge layering and wedge boundaries."""
import unittest

from modulo_krinkle.config import TilingConfig
from modulo_krinkle.directions import DirectionSequence
from modulo_krinkle.geometry import Point2D, rotate_point
from modulo_krinkle.tile import TileType
from modulo_krinkle.wedge import LayerCursor, Wedge, layer_tile_types, wedge_steps

B, L, M, C, R = TileType


class TestLayerTileTypes(unittest.TestCase):
    def test_types(self):
        self.assertEqual(layer_tile_types(1), [B])
        self.assertEqual(layer_tile_types(2), [L, R])
        self.assertEqual(layer_tile_types(3), [L, C, R])
        self.assertEqual(layer_tile_types(4), [L, M, M, R])
        self.assertEqual(layer_tile_types(5), [L, M, C, M, R])


class TestLayerCursor(unittest.TestCase):
    def test_origins_stored_far_tile_first(self):
        cursor = LayerCursor(2, Point2D(1, 1))
        self.assertEqual(cursor.origins(Point2D(-2, 0)),
                         [Point2D(-3, 1), Point2D(-1, 1), Point2D(1, 1)])

    def test_advance(self):
        cursor = LayerCursor(0, Point2D.zero()).advance(Point2D(1, 2)).advance(Point2D(1, 2))
        self.assertEqual(cursor, LayerCursor(2, Point2D(2, 4)))


class WedgeTestCase(unittest.TestCase):
    def setUp(self):
        self.config = TilingConfig.create(m=2, k=5, t=2, unit_length=10, layer_count=4)
        self.sequence = DirectionSequence.from_config(self.config)

    def assertPointAlmostEqual(self, a, b, places=7):
        self.assertAlmostEqual(a.x, b.x, places=places)
        self.assertAlmostEqual(a.y, b.y, places=places)


class TestWedgeSteps(WedgeTestCase):
    def test_to_next_tile(self):
        _, to_next_tile = wedge_steps(self.config, self.sequence)
        # u5 - u0 with n = 10 is (-1, 0) - (1, 0)
        self.assertPointAlmostEqual(to_next_tile, Point2D(-20, 0))

    def test_to_next_layer(self):
        to_next_layer, _ = wedge_steps(self.config, self.sequence)
        u = self.sequence.unit_vectors
        expected = (u[0] + u[2] + u[4] + u[1] + u[3]) * 10
        self.assertPointAlmostEqual(to_next_layer, expected)


class TestWedge(WedgeTestCase):
    def build(self, direction=0, translation=Point2D.zero()):
        return Wedge.build(self.config, self.sequence, direction, translation, wedge_index=direction)

    def test_layer_sizes(self):
        wedge = self.build()
        self.assertEqual([len(layer) for layer in wedge.layers], [1, 2, 3, 4])
        self.assertEqual(len(list(wedge.tiles())), 10)

    def test_single_layer(self):
        config = TilingConfig.create(m=2, k=5, layer_count=1)
        wedge = Wedge.build(config, self.sequence, 0, Point2D.zero())
        self.assertEqual(len(wedge.layers), 1)
        self.assertEqual(wedge.layers[0][0].tile_type, B)

    def test_tile_types(self):
        wedge = self.build()
        self.assertEqual([[t.tile_type for t in layer] for layer in wedge.layers],
                         [[B], [L, R], [L, C, R], [L, M, M, R]])

    def test_tile_origins(self):
        wedge = self.build()
        to_next_layer, to_next_tile = wedge_steps(self.config, self.sequence)
        for index, layer in enumerate(wedge.layers):
            start = to_next_layer * index
            self.assertPointAlmostEqual(layer[-1].origin, start)
            self.assertPointAlmostEqual(layer[0].origin, start + to_next_tile * index)

    def test_indices(self):
        wedge = self.build(direction=3)
        for index, layer in enumerate(wedge.layers):
            for tile in layer:
                self.assertEqual(tile.wedge_index, 3)
                self.assertEqual(tile.layer_index, index)
                self.assertEqual(tile.sector_index, 0)
                self.assertEqual(tile.direction, 3)

    def test_apex(self):
        apex = Point2D(12.5, -7)
        wedge = self.build(direction=2, translation=apex)
        self.assertPointAlmostEqual(wedge.layers[0][0].points[0], apex)
        self.assertEqual(wedge.translation, apex)

    def test_wedge_is_rotated_copy(self):
        plain = self.build()
        turned = self.build(direction=2)
        for a, b in zip(plain.tiles(), turned.tiles()):
            for p, q in zip(a.points, b.points):
                self.assertPointAlmostEqual(q, rotate_point(p, 2 * self.config.angle, Point2D.zero()))

    def test_boundaries(self):
        wedge = self.build()
        self.assertEqual(len(wedge.upper_boundary), 4 * 6)
        self.assertEqual(len(wedge.lower_boundary), 4 * 6)
        expected_upper = [e for layer in wedge.layers for e in layer[0].upper_boundary]
        expected_lower = [e for layer in wedge.layers for e in layer[-1].lower_boundary]
        self.assertEqual(list(wedge.upper_boundary), expected_upper)
        self.assertEqual(list(wedge.lower_boundary), expected_lower)


if __name__ == "__main__":
    unittest.main()
