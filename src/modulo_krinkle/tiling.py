"""
Modulo Krinkle tiling.

Implements the non-periodic tiling described in:
  Miki Imura, A new non-periodic tiling based on modulo arithmetic,
  arXiv:2506.07638, https://arxiv.org/abs/2506.07638

Example:

    tiling = Tiling(m=2, k=5, t=2, offset=False, unit_length=10, layer_count=4)
    for tile in tiling.tiles():
        print(tile.label(), tile.points)
"""
import logging
from typing import Iterator, Union

from modulo_krinkle.boundary import FrontBoundary
from modulo_krinkle.config import DEFAULTS, TilingConfig
from modulo_krinkle.directions import DirectionSequence
from modulo_krinkle.geometry import Point2D, degrees
from modulo_krinkle.sectors import SectorReplicator
from modulo_krinkle.tile import AnyTile
from modulo_krinkle.wedge import ReplicaWedge, Wedge

logger = logging.getLogger(__name__)

AnyWedge = Union[Wedge, ReplicaWedge]


def build_foundation(config: TilingConfig, sequence: DirectionSequence) -> list[Wedge]:
    """
    Build the foundational wedges in direction order.

    Wedge i is anchored to the first open edge in direction i left by the
    wedges before it, or to the origin when there is none.
    """
    front = FrontBoundary()
    wedges: list[Wedge] = []
    for i in range(config.wedges_count):
        anchor = front.match(i)
        apex = anchor.point if anchor is not None else Point2D.zero()
        wedge = Wedge.build(config, sequence, i, apex, wedge_index=i, anchor=anchor)
        wedges.append(wedge)
        front.extend(wedge.upper_boundary)
    return wedges


class Tiling:
    def __init__(
        self,
        m: int = DEFAULTS["m"],
        k: int = DEFAULTS["k"],
        t: int = DEFAULTS["t"],
        offset: bool = DEFAULTS["offset"],
        unit_length: float = DEFAULTS["unit_length"],
        layer_count: int = DEFAULTS["layer_count"],
    ):
        self._init(TilingConfig.create(m, k, t, offset, unit_length, layer_count))

    @classmethod
    def from_config(cls, config: TilingConfig) -> "Tiling":
        tiling = cls.__new__(cls)
        tiling._init(config)
        return tiling

    def _init(self, config: TilingConfig) -> None:
        self._config = config
        self._sequence = DirectionSequence.from_config(config)

        foundation = build_foundation(config, self._sequence)
        replicas = SectorReplicator(config, foundation).replicate()
        self._wedges: tuple[AnyWedge, ...] = tuple(foundation) + tuple(replicas)

        logger.info("Built %s: n=%d, angle=%.2f°, %d wedges in %d sectors, %d tiles",
                    self, config.n, degrees(config.angle), len(self._wedges),
                    config.t, self.tile_count)

    @property
    def config(self) -> TilingConfig:
        return self._config

    @property
    def directions(self) -> DirectionSequence:
        return self._sequence

    @property
    def wedges(self) -> tuple[AnyWedge, ...]:
        return self._wedges

    @property
    def foundational_wedges(self) -> tuple[Wedge, ...]:
        return self._wedges[:self._config.wedges_count]

    def sector(self, r: int) -> tuple[AnyWedge, ...]:
        if not 0 <= r < self._config.t:
            raise IndexError(f"sector {r} out of range for t={self._config.t}")
        count = self._config.wedges_count
        return self._wedges[count * r:count * (r + 1)]

    def tiles(self) -> Iterator[AnyTile]:
        for wedge in self._wedges:
            yield from wedge.tiles()

    @property
    def tile_count(self) -> int:
        return sum(len(layer) for wedge in self._wedges for layer in wedge.layers)

    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) over every tile point."""
        xs, ys = [], []
        for tile in self.tiles():
            for p in tile.points:
                xs.append(p.x)
                ys.append(p.y)
        return min(xs), min(ys), max(xs), max(ys)

    def __str__(self) -> str:
        return str(self._config)

    def __repr__(self) -> str:
        c = self._config
        return (f"Tiling(m={c.m}, k={c.k}, t={c.t}, offset={c.offset}, "
                f"unit_length={c.unit_length}, layer_count={c.layer_count})")
