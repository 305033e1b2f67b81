# geometry/sphere.py
import math
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.geometry.surface import Surface
from phongtrace.materials.material import Material


class Sphere(Surface):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Optional[Material] = None):
        super().__init__(material)
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius

    @property
    def position(self) -> Vector3:
        return self.center

    @position.setter
    def position(self, position: Vector3):
        self.center = position

    def distance(self, ray: Ray) -> Optional[float]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray.in_range(root):
            root = (-half_b + sqrt_disc) / a
            if not ray.in_range(root):
                return None
        return root

    def normal_at(self, point: Vector3) -> Vector3:
        # Only meaningful for points on the sphere; the center yields a zero vector.
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
