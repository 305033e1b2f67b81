# geometry/plane.py
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.utils import EPSILON
from phongtrace.core.vector import Vector3
from phongtrace.geometry.surface import Surface
from phongtrace.materials.material import Material


class Plane(Surface):
    """
    An infinite plane through `point` with the given normal.
    """
    def __init__(self, point: Vector3, normal: Vector3, material: Optional[Material] = None):
        super().__init__(material)
        if normal.length_squared() == 0:
            raise ValueError("Plane normal must be non-zero")
        self.point = point
        self.normal = normal.normalize()

    @property
    def position(self) -> Vector3:
        return self.point

    @position.setter
    def position(self, position: Vector3):
        self.point = position

    def distance(self, ray: Ray) -> Optional[float]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < EPSILON:
            return None  # Parallel to the plane
        t = ray.origin.vector_to(self.point).dot(self.normal) / denom
        if not ray.in_range(t):
            return None
        return t

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    def __repr__(self) -> str:
        return f"Plane(point={self.point!r}, normal={self.normal!r})"
