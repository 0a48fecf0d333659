import logging
from typing import Sequence

from modulo_krinkle.config import TilingConfig
from modulo_krinkle.geometry import Point2D, rotate_points
from modulo_krinkle.tile import ReplicaTile
from modulo_krinkle.wedge import ReplicaWedge, Wedge

logger = logging.getLogger(__name__)


class SectorReplicator:
    """
    Completes a tiling by rotating its foundational sector t - 1 times.

    Plain tilings turn by 2π/t about the origin. Offset tilings turn by a
    half-turn about the midpoint of the first edge of the very first tile.
    """

    def __init__(self, config: TilingConfig, foundation: Sequence[Wedge]):
        self.config = config
        self.foundation = tuple(foundation)

    @property
    def rotation(self) -> float:
        return self.config.rotation

    @property
    def pivot(self) -> Point2D:
        if not self.config.offset:
            return Point2D.zero()
        base = self.foundation[0].layers[0][0]
        return base.points[0].midpoint(base.points[1])

    def replicate_sector(self, r: int) -> list[ReplicaWedge]:
        pivot = self.pivot
        theta = r * self.rotation
        count = len(self.foundation)

        wedges = []
        for w, source in enumerate(self.foundation):
            wedge_index = count * r + w
            layers = tuple(
                tuple(
                    ReplicaTile(
                        points=rotate_points(tile.points, theta, pivot),
                        tile_type=tile.tile_type,
                        sector_index=r,
                        wedge_index=wedge_index,
                        layer_index=layer_index,
                    )
                    for tile in layer
                )
                for layer_index, layer in enumerate(source.layers)
            )
            wedges.append(ReplicaWedge(
                direction=source.direction,
                layers=layers,
                wedge_index=wedge_index,
                sector_index=r,
                pivot=pivot,
                rotation=theta,
            ))
        logger.debug("Sector %d: %d wedges rotated by %.6f about (%g, %g)",
                     r, len(wedges), theta, pivot.x, pivot.y)
        return wedges

    def replicate(self) -> list[ReplicaWedge]:
        wedges: list[ReplicaWedge] = []
        for r in range(1, self.config.t):
            wedges.extend(self.replicate_sector(r))
        return wedges
