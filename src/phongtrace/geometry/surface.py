# geometry/surface.py
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.materials.material import Material


class Surface:
    """
    Abstract class for renderable shapes. A surface owns one Material.
    """
    def __init__(self, material: Optional[Material] = None):
        self._material = material if material is not None else Material()

    @property
    def position(self) -> Vector3:
        raise NotImplementedError("position must be implemented by subclasses.")

    @position.setter
    def position(self, position: Vector3):
        raise NotImplementedError("position must be implemented by subclasses.")

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material):
        self._material = material

    def distance(self, ray: Ray) -> Optional[float]:
        """
        Returns the ray parameter of the nearest valid hit, or None.
        """
        raise NotImplementedError("distance() must be implemented by subclasses.")

    def intersection(self, ray: Ray) -> Optional[Vector3]:
        """
        Returns the nearest point where the ray meets the surface, or None.
        """
        t = self.distance(ray)
        if t is None:
            return None
        return ray.at(t)

    def normal_at(self, point: Vector3) -> Vector3:
        """
        Returns the unit normal at a point on the surface.
        """
        raise NotImplementedError("normal_at() must be implemented by subclasses.")
