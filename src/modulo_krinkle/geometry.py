# Plane geometry shared by tiles, wedges and sector replication.
from dataclasses import dataclass
from math import sqrt, cos, sin, pi
from typing import Iterable, Iterator

import numpy as np


@dataclass(frozen=True)
class Point2D:
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> "Point2D":
        return Point2D(0.0, 0.0)

    def add(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x + other.x, self.y + other.y)

    def neg(self) -> "Point2D":
        return Point2D(-self.x, -self.y)

    def sub(self, other: "Point2D") -> "Point2D":
        return self.add(other.neg())

    def scale(self, scalar: float) -> "Point2D":
        return Point2D(self.x * scalar, self.y * scalar)

    def __add__(self, other: "Point2D") -> "Point2D":
        return self.add(other)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return self.sub(other)

    def __neg__(self) -> "Point2D":
        return self.neg()

    def __mul__(self, scalar: float) -> "Point2D":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Point2D":
        return self.scale(scalar)

    def __truediv__(self, scalar: float) -> "Point2D":
        return self.scale(1 / scalar)

    # Lets cairo take points directly: ctx.move_to(*p)
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @staticmethod
    def of_angle(angle: float) -> "Point2D":
        return Point2D(cos(angle), sin(angle))

    def len(self) -> float:
        return sqrt(self.x**2 + self.y**2)

    def distance(self, other: "Point2D") -> float:
        return (self - other).len()

    def midpoint(self, other: "Point2D") -> "Point2D":
        return Point2D((self.x + other.x) / 2, (self.y + other.y) / 2)


"""
Transformation that does
- rotation by θ (radians) about the origin
- translation to (x,y)

[ cos(θ)   -sin(θ)   x ] [ px ]
[ sin(θ)    cos(θ)   y ] [ py ]
[   0         0      1 ] [ 1  ]
"""
def mktransform(x: float, y: float, theta: float) -> np.ndarray:
    return np.array([
        [cos(theta), -sin(theta), x],
        [sin(theta),  cos(theta), y],
        [0.0, 0.0, 1.0],
    ])

def rotation_about(pivot: Point2D, theta: float) -> np.ndarray:
    """Affine matrix rotating by theta around pivot."""
    to_origin = mktransform(-pivot.x, -pivot.y, 0.0)
    back = mktransform(pivot.x, pivot.y, 0.0)
    return back @ mktransform(0.0, 0.0, theta) @ to_origin

def apply_transform(transform: np.ndarray, points: Iterable[Point2D]) -> tuple[Point2D, ...]:
    """Apply a 3x3 affine transform to every point in one matrix product."""
    pts = list(points)
    if not pts:
        return ()
    homogeneous = np.array([[p.x, p.y, 1.0] for p in pts]).T
    out = transform @ homogeneous
    return tuple(Point2D(float(x), float(y)) for x, y in zip(out[0], out[1]))

def rotate_points(points: Iterable[Point2D], theta: float, pivot: Point2D) -> tuple[Point2D, ...]:
    # Always computed from the given coordinates, never chained from a
    # previous rotation, so drift does not accumulate across sectors.
    if theta == 0:
        return tuple(points)
    return apply_transform(rotation_about(pivot, theta), points)

def rotate_point(p: Point2D, theta: float, pivot: Point2D) -> Point2D:
    if theta == 0:
        return p
    d = p - pivot
    c, s = cos(theta), sin(theta)
    return Point2D(d.x * c - d.y * s + pivot.x, d.x * s + d.y * c + pivot.y)

def degrees(theta: float) -> float:
    return theta * 180 / pi
