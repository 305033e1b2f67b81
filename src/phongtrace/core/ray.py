# core/ray.py
import math

from phongtrace.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin, a unit direction and a
    maximum length. Intersections are only valid for parameters in
    [MIN_DISTANCE, length].
    """
    MIN_DISTANCE = 1e-6

    def __init__(self, origin: Vector3, direction: Vector3, length: float = math.inf):
        if direction.length_squared() == 0:
            raise ValueError("Ray direction must be non-zero")
        if length <= 0:
            raise ValueError(f"Ray length must be positive, got {length}")
        self.origin = origin
        self.direction = direction.normalize()
        self.length = length

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def in_range(self, t: float) -> bool:
        return self.MIN_DISTANCE <= t <= self.length

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, length={self.length})"
