"""
Geometric Primitives for the bubble layout.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A position on the canvas. The y axis points down, as on screen."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Point:
        x, y = np.asarray(values, dtype=float)[:2]
        return cls(float(x), float(y))


@dataclass(frozen=True)
class Circle:
    """A disc on the canvas; the shape of a single bubble."""
    center: Point
    radius: float

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    def contains(self, point: Point) -> bool:
        """True if the point lies inside the circle or on its rim."""
        return self.center.distance_to(point) <= self.radius

    def distance_to(self, other: Circle) -> float:
        """Distance between the two centers."""
        return self.center.distance_to(other.center)

    def clearance_to(self, other: Circle) -> float:
        """
        Gap between the two rims.

        Negative when the circles overlap; the magnitude is then the
        penetration depth.
        """
        return self.distance_to(other) - self.radius - other.radius


@dataclass(frozen=True)
class Canvas:
    """
    Snapshot of the rectangular drawing area, origin in the top-left corner.
    """
    width: float
    height: float

    @property
    def is_ready(self) -> bool:
        """A canvas with a non-positive side has not been laid out yet."""
        return self.width > 0.0 and self.height > 0.0

    @property
    def center(self) -> Point:
        return Point(self.width / 2.0, self.height / 2.0)

    def edge_distance(self, circle: Circle) -> float:
        """Smallest gap between the circle rim and any canvas edge (negative if outside)."""
        x, y, r = circle.center.x, circle.center.y, circle.radius
        return min(x - r, y - r, self.width - x - r, self.height - y - r)

    def fits(self, circle: Circle, eps: float = 1e-9) -> bool:
        """True if the whole circle lies inside the canvas."""
        return self.edge_distance(circle) >= -eps
