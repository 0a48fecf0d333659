"""
Tiling parameters.

A Modulo Krinkle tiling is fixed by six values: m, k, t, offset,
unit_length and layer_count. `TilingConfig.create` checks them, reduces
(m, k) to coprime form and derives the direction count n.
"""
import logging
from dataclasses import dataclass
from math import gcd, pi
from numbers import Integral, Real

from modulo_krinkle.errors import ParameterError

logger = logging.getLogger(__name__)

# Defaults of the original tiling constructor.
DEFAULTS = {
    "m": 3,
    "k": 7,
    "t": 2,
    "offset": False,
    "unit_length": 10.0,
    "layer_count": 3,
}

# Practical ranges offered by the parameter UI. Not enforced here.
UI_BOUNDS = {
    "m": (1, 49),
    "k": (2, 50),
    "t": (2, 10),
    "layer_count": (1, 10),
}


def _require_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ParameterError(f"{name} must be an integer")
    return int(value)


@dataclass(frozen=True)
class TilingConfig:
    m: int
    k: int
    t: int
    offset: bool
    unit_length: float
    layer_count: int

    @classmethod
    def create(
        cls,
        m: int = DEFAULTS["m"],
        k: int = DEFAULTS["k"],
        t: int = DEFAULTS["t"],
        offset: bool = DEFAULTS["offset"],
        unit_length: float = DEFAULTS["unit_length"],
        layer_count: int = DEFAULTS["layer_count"],
    ) -> "TilingConfig":
        """
        Validate raw parameters and reduce (m, k) by their gcd.

        The m > k check runs on the unreduced values, so (6, 4) is rejected
        even though it would reduce to (3, 2).

        Raises:
            ParameterError: if any parameter is out of range.
        """
        m = _require_int("m", m)
        k = _require_int("k", k)
        t = _require_int("t", t)
        layer_count = _require_int("layer_count", layer_count)

        if m < 1:
            raise ParameterError("m must be positive")
        if m > k:
            raise ParameterError("m exceeds k")
        if k < 1:
            raise ParameterError("k must be positive")
        if t < 2:
            raise ParameterError("t must be >= 2")
        if isinstance(unit_length, bool) or not isinstance(unit_length, Real) or unit_length <= 0:
            raise ParameterError("unit_length must be positive")
        if layer_count < 1:
            raise ParameterError("layer_count must be at least 1")
        if not isinstance(offset, bool):
            raise ParameterError("offset must be a boolean")

        divisor = gcd(m, k)
        if divisor > 1:
            logger.debug("Reducing m=%d, k=%d by gcd %d", m, k, divisor)
            m //= divisor
            k //= divisor

        return cls(m, k, t, offset, float(unit_length), layer_count)

    @property
    def n(self) -> int:
        """Number of directions."""
        if self.offset:
            return 2 * (self.t * self.k - self.m)
        return self.t * self.k

    @property
    def angle(self) -> float:
        return 2 * pi / self.n

    @property
    def wedges_count(self) -> int:
        """Foundational wedges built before rotation."""
        return self.n // 2 if self.offset else self.k

    @property
    def rotation(self) -> float:
        """Angle between consecutive sectors."""
        return pi if self.offset else 2 * pi / self.t

    def __str__(self) -> str:
        return f"MK-{self.m}-{self.k}-{self.n}"
