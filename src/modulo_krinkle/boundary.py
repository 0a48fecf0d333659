import logging
from typing import Iterable, Optional

from modulo_krinkle.tile import BoundaryEdge

logger = logging.getLogger(__name__)


class FrontBoundary:
    """
    Open edges left by the foundational wedges built so far, in order.

    Each new wedge is anchored to the first open edge pointing in its
    direction. Matching truncates the list at that edge: the matched edge
    and every edge after it are dropped, since the new wedge covers the
    region they bordered.
    """

    def __init__(self, edges: Iterable[BoundaryEdge] = ()):
        self._edges: list[BoundaryEdge] = list(edges)

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> tuple[BoundaryEdge, ...]:
        return tuple(self._edges)

    def find(self, direction: int) -> Optional[int]:
        for j, edge in enumerate(self._edges):
            if edge.direction == direction:
                return j
        return None

    def match(self, direction: int) -> Optional[BoundaryEdge]:
        j = self.find(direction)
        if j is None:
            logger.debug("No open edge in direction %d among %d", direction, len(self._edges))
            return None
        edge = self._edges[j]
        logger.debug("Direction %d matched open edge %d of %d, dropping %d",
                     direction, j, len(self._edges), len(self._edges) - j)
        del self._edges[j:]
        return edge

    def extend(self, edges: Iterable[BoundaryEdge]) -> None:
        self._edges.extend(edges)
