from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union

from modulo_krinkle.config import TilingConfig
from modulo_krinkle.directions import DirectionSequence
from modulo_krinkle.geometry import Point2D, apply_transform, mktransform


class TileType(IntEnum):
    """Position of a tile inside its wedge layer. Only used for drawing."""
    BASE = 0    # the single tile of layer 0, touching the wedge apex
    LEFT = 1    # first tile of a layer
    MIDDLE = 2
    CENTER = 3  # middle tile of an odd-length layer
    RIGHT = 4   # last tile of a layer

    @property
    def letter(self) -> str:
        return "BLMCR"[self.value]


class BoundaryEdge(NamedTuple):
    # Unreduced: local direction + tile direction, not taken modulo n.
    direction: int
    point: Point2D


class _Labelled:
    tile_type: TileType
    sector_index: int
    wedge_index: int
    layer_index: int

    def label(self) -> str:
        """Name of this particular tile, e.g. 'S0 W3 L2 (M)'."""
        return f"S{self.sector_index} W{self.wedge_index} L{self.layer_index} ({self.tile_type.letter})"

    def symbol_name(self, tiling_id: str) -> str:
        """Name shared by every tile of this type, e.g. 'MK-2-5-10-B'."""
        return f"{tiling_id}-{self.tile_type.letter}"


@dataclass(frozen=True)
class Tile(_Labelled):
    origin: Point2D
    direction: int
    translation: Point2D
    points: tuple[Point2D, ...]
    tile_type: TileType
    lower_boundary: tuple[BoundaryEdge, ...]
    upper_boundary: tuple[BoundaryEdge, ...]
    wedge_index: int = 0
    layer_index: int = 0
    sector_index: int = 0

    @staticmethod
    def build(
        config: TilingConfig,
        sequence: DirectionSequence,
        origin: Point2D,
        direction: int,
        translation: Point2D,
        tile_type: TileType,
        wedge_index: int = 0,
        layer_index: int = 0,
    ) -> "Tile":
        # Walk every edge but the last; the last one closes back to origin.
        pos = origin
        local = [origin]
        for i in range(len(sequence) - 1):
            pos = pos + sequence.step(i) * config.unit_length
            local.append(pos)

        transform = mktransform(translation.x, translation.y, config.angle * direction)
        points = apply_transform(transform, local)

        k = config.k
        lower = tuple(
            BoundaryEdge(sequence[i] + direction, points[i + 1])
            for i in range(k + 1)
        )
        upper = tuple(
            BoundaryEdge(sequence[i] + direction, points[(i + 1) % len(points)])
            for i in range(len(sequence) - 1, k, -1)
        )

        return Tile(
            origin=origin,
            direction=direction,
            translation=translation,
            points=points,
            tile_type=tile_type,
            lower_boundary=lower,
            upper_boundary=upper,
            wedge_index=wedge_index,
            layer_index=layer_index,
        )


@dataclass(frozen=True)
class ReplicaTile(_Labelled):
    """Rotated copy of a source tile: points and identification only."""
    points: tuple[Point2D, ...]
    tile_type: TileType
    sector_index: int
    wedge_index: int
    layer_index: int


AnyTile = Union[Tile, ReplicaTile]
