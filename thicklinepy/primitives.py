"""
2D geometric primitives produced by the shape generator.

Coordinates are sketch-space points; hosts realise each polygon as a closed
chain of fixed lines.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cad_types import Vector2, VectorLike, as_vector
from .feature import FeatureType


class Line:
    """A 2D line segment in sketch coordinates."""

    def __init__(self, start: VectorLike, end: VectorLike):
        self.start = as_vector(start)
        self.end = as_vector(end)

    def length(self) -> float:
        return as_vector(self.end - self.start).length()

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __repr__(self):
        return f"Line(start={self.start.to_python()}, end={self.end.to_python()})"


class Polygon:
    """A closed planar polygon given by its corner points.

    The closing edge from the last corner back to the first is implicit.
    ``role`` tells the host which part of the thick line the polygon is
    (``"body"``, ``"feature_a"`` or ``"feature_b"``).
    """

    def __init__(
        self,
        points: Iterable[VectorLike],
        role: str = "body",
        feature: Optional[FeatureType] = None,
    ):
        self.points: Tuple[Vector2, ...] = tuple(as_vector(p) for p in points)
        if len(self.points) < 3:
            raise ValueError("A polygon needs at least 3 corners.")
        self.role = role
        self.feature = feature

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return (
            self.role == other.role
            and self.feature == other.feature
            and len(self.points) == len(other.points)
            and all(p == q for p, q in zip(self.points, other.points))
        )

    def __repr__(self):
        corners = ", ".join(p.to_python() for p in self.points)
        return f"Polygon(role={self.role!r}, points=[{corners}])"

    def to_numpy(self) -> np.ndarray:
        """Corner coordinates as an (n, 2) float array."""
        return np.array([[p.x, p.y] for p in self.points], dtype=np.float64)

    def edges(self) -> List[Line]:
        """Closed chain of edges, last corner back to the first."""
        count = len(self.points)
        return [Line(self.points[i], self.points[(i + 1) % count]) for i in range(count)]

    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise corner order."""
        coords = self.to_numpy()
        x, y = coords[:, 0], coords[:, 1]
        return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))

    def area(self) -> float:
        return abs(self.signed_area())

    def bounds(self) -> Tuple[float, float, float, float]:
        """Axis-aligned bounds as (min_x, min_y, max_x, max_y)."""
        coords = self.to_numpy()
        min_x, min_y = coords.min(axis=0)
        max_x, max_y = coords.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    def is_simple(self) -> bool:
        """True if no two non-adjacent edges intersect."""
        edges = self.edges()
        count = len(edges)
        for i in range(count):
            for j in range(i + 1, count):
                # Adjacent edges share a corner
                if j == i + 1 or (i == 0 and j == count - 1):
                    continue
                if _segments_intersect(edges[i], edges[j]):
                    return False
        return True

    def to_json(self):
        return {
            "role": self.role,
            "feature": self.feature.value if self.feature is not None else None,
            "points": [p.to_json() for p in self.points],
        }


def _orientation(p: Vector2, q: Vector2, r: Vector2) -> float:
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def _segments_intersect(first: Line, second: Line) -> bool:
    # Proper crossings only
    d1 = _orientation(second.start, second.end, first.start)
    d2 = _orientation(second.start, second.end, first.end)
    d3 = _orientation(first.start, first.end, second.start)
    d4 = _orientation(first.start, first.end, second.end)
    return d1 * d2 < 0 and d3 * d4 < 0
