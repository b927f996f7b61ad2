import math
from typing import Sequence, Tuple, Union

import numpy as np

# Absolute tolerance used by ``Vector2.__eq__``.
VECTOR_EQ_TOLERANCE = 1e-9


class Vector2(np.ndarray):
    """Immutable (x, y) point or direction in sketch space."""

    def __new__(cls, x: float, y: float) -> "Vector2":
        obj = np.asarray([float(x), float(y)], dtype=np.float64).view(cls)
        obj.flags.writeable = False
        return obj

    def __eq__(self, other: object) -> bool:
        try:
            other_arr = np.asarray(other, dtype=np.float64)
        except (TypeError, ValueError):
            return False
        if other_arr.shape != (2,):
            return False
        return bool(
            np.allclose(np.asarray(self), other_arr, rtol=0.0, atol=VECTOR_EQ_TOLERANCE)
        )

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    # Tolerant equality cannot be matched by a hash
    __hash__ = None

    def __str__(self):
        return f"Vector2(x={self.x}, y={self.y})"

    def __repr__(self):
        return self.__str__()

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def dot(self, other: "VectorLike") -> float:
        other = as_vector(other)
        return self.x * other.x + self.y * other.y

    def perp_ccw(self) -> "Vector2":
        """Rotate by 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        return Vector2(-self.y, self.x)

    def normalize(self) -> "Vector2":
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return Vector2(self.x / length, self.y / length)

    def to_json(self):
        return {
            "x": self.x,
            "y": self.y,
        }

    @staticmethod
    def from_json(json_data):
        return Vector2(json_data["x"], json_data["y"])

    def to_python(self):
        return f"Vector2(x={self.x}, y={self.y})"


VectorLike = Union[Tuple[float, float], Sequence[float], Vector2]


def as_vector(value: VectorLike) -> Vector2:
    """Coerce a 2-tuple, 3-tuple (z is dropped) or array into a ``Vector2``."""
    # Arithmetic on Vector2 yields writeable views; re-wrap those.
    if isinstance(value, Vector2) and not value.flags.writeable:
        return value
    coords = np.asarray(value, dtype=np.float64).ravel()
    if coords.shape[0] not in (2, 3):
        raise ValueError(f"Expected a 2D or 3D point, got {value!r}")
    return Vector2(coords[0], coords[1])
