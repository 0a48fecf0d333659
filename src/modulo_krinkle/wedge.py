from dataclasses import dataclass
from typing import Iterator, Optional

from modulo_krinkle.config import TilingConfig
from modulo_krinkle.directions import DirectionSequence
from modulo_krinkle.geometry import Point2D
from modulo_krinkle.tile import BoundaryEdge, ReplicaTile, Tile, TileType


def layer_tile_types(size: int) -> list[TileType]:
    """Types for a layer of `size` tiles, in stored order."""
    if size == 1:
        return [TileType.BASE]
    types = [TileType.LEFT] + [TileType.MIDDLE] * (size - 2) + [TileType.RIGHT]
    if size % 2 == 1:
        types[size // 2] = TileType.CENTER
    return types


@dataclass(frozen=True)
class LayerCursor:
    """Start position of a layer, in the wedge's unrotated frame."""
    layer: int
    start: Point2D

    def origins(self, to_next_tile: Point2D) -> list[Point2D]:
        # Stored first-to-last; the tile at the layer start goes last.
        return [self.start + to_next_tile * j for j in range(self.layer, -1, -1)]

    def advance(self, to_next_layer: Point2D) -> "LayerCursor":
        return LayerCursor(self.layer + 1, self.start + to_next_layer)


def wedge_steps(config: TilingConfig, sequence: DirectionSequence) -> tuple[Point2D, Point2D]:
    """
    The two translations that place tiles inside a wedge, scaled to unit_length.

    to_next_layer sums the lower half up to the turnaround (positions
    0..k-1). to_next_tile sums the two steps either side of the
    turnaround (positions k and k+1).
    """
    k = config.k
    to_next_layer = sequence.walk_sum(0, k) * config.unit_length
    to_next_tile = sequence.walk_sum(k, k + 2) * config.unit_length
    return to_next_layer, to_next_tile


@dataclass(frozen=True)
class Wedge:
    """
    A fan of tiles sharing one apex, grouped in layers.

    Layer 0 holds a single BASE tile; layer L holds L + 1 tiles. The
    boundaries are the open edges on either side of the fan: the upper
    boundary runs along the first tile of every layer, the lower boundary
    along the last.
    """
    direction: int
    translation: Point2D
    layers: tuple[tuple[Tile, ...], ...]
    upper_boundary: tuple[BoundaryEdge, ...]
    lower_boundary: tuple[BoundaryEdge, ...]
    wedge_index: int = 0
    sector_index: int = 0
    # Front-boundary edge this wedge was anchored to, None for the origin.
    anchor: Optional[BoundaryEdge] = None

    @staticmethod
    def build(
        config: TilingConfig,
        sequence: DirectionSequence,
        direction: int,
        translation: Point2D,
        wedge_index: int = 0,
        anchor: Optional[BoundaryEdge] = None,
    ) -> "Wedge":
        to_next_layer, to_next_tile = wedge_steps(config, sequence)

        layers: list[tuple[Tile, ...]] = []
        cursor = LayerCursor(0, Point2D.zero())
        for _ in range(config.layer_count):
            origins = cursor.origins(to_next_tile)
            types = layer_tile_types(len(origins))
            layers.append(tuple(
                Tile.build(config, sequence, origin, direction, translation, tile_type,
                           wedge_index=wedge_index, layer_index=cursor.layer)
                for origin, tile_type in zip(origins, types)
            ))
            cursor = cursor.advance(to_next_layer)

        upper: list[BoundaryEdge] = []
        lower: list[BoundaryEdge] = []
        for layer in layers:
            upper.extend(layer[0].upper_boundary)
            lower.extend(layer[-1].lower_boundary)

        return Wedge(
            direction=direction,
            translation=translation,
            layers=tuple(layers),
            upper_boundary=tuple(upper),
            lower_boundary=tuple(lower),
            wedge_index=wedge_index,
            anchor=anchor,
        )

    def tiles(self) -> Iterator[Tile]:
        for layer in self.layers:
            yield from layer


@dataclass(frozen=True)
class ReplicaWedge:
    """Rotated copy of a foundational wedge. Carries no boundaries."""
    direction: int
    layers: tuple[tuple[ReplicaTile, ...], ...]
    wedge_index: int
    sector_index: int
    pivot: Point2D
    rotation: float

    def tiles(self) -> Iterator[ReplicaTile]:
        for layer in self.layers:
            yield from layer
