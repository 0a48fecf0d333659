from dataclasses import dataclass

from modulo_krinkle.config import TilingConfig
from modulo_krinkle.geometry import Point2D


@dataclass(frozen=True)
class DirectionSequence:
    """
    Closed walk of direction indices around one prototile.

    Positions 0..k are the lower half, walked forwards. Positions
    k+1..2k+1 are the upper half, walked with every step negated, so the
    tile folds back onto its start point.
    """
    k: int
    directions: tuple[int, ...]
    unit_vectors: tuple[Point2D, ...]

    @staticmethod
    def from_config(config: TilingConfig) -> "DirectionSequence":
        m, k = config.m, config.k

        lower = [(m * j) % k for j in range(k)]
        lower.append(k)
        # Upper half mirrors the lower half with its first and last
        # direction swapped.
        directions = lower + lower[::-1]
        directions[k + 1], directions[2 * k + 1] = directions[2 * k + 1], directions[k + 1]

        unit_vectors = tuple(Point2D.of_angle(config.angle * i) for i in range(config.n))
        return DirectionSequence(k, tuple(directions), unit_vectors)

    def __len__(self) -> int:
        return len(self.directions)

    def __getitem__(self, i: int) -> int:
        return self.directions[i]

    def in_upper_half(self, i: int) -> bool:
        return i > self.k

    def step(self, i: int) -> Point2D:
        """Unit step taken at walk position i."""
        vec = self.unit_vectors[self.directions[i]]
        return -vec if self.in_upper_half(i) else vec

    def walk_sum(self, start: int, stop: int) -> Point2D:
        """Unscaled sum of the steps over positions [start, stop)."""
        total = Point2D.zero()
        for i in range(start, stop):
            total = total + self.step(i)
        return total
