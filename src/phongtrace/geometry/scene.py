# geometry/scene.py
from typing import List, NamedTuple, Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.geometry.surface import Surface
from phongtrace.lighting.light import Light


class Hit(NamedTuple):
    surface: Surface
    point: Vector3
    distance: float


class Scene:
    """
    Ordered lists of surfaces and lights. Read-only during a render pass.
    """
    def __init__(self, surfaces: Optional[List[Surface]] = None, lights: Optional[List[Light]] = None):
        self.surfaces: List[Surface] = list(surfaces) if surfaces else []
        self.lights: List[Light] = list(lights) if lights else []

    def add_surface(self, surface: Surface):
        self.surfaces.append(surface)

    def add_light(self, light: Light):
        self.lights.append(light)

    def clear(self):
        self.surfaces.clear()
        self.lights.clear()

    def nearest_hit(self, ray: Ray) -> Optional[Hit]:
        """
        Intersects the ray with every surface and keeps the closest hit.
        On equal distances the earlier surface wins.
        """
        hit = None
        for surface in self.surfaces:
            t = surface.distance(ray)
            if t is not None and (hit is None or t < hit.distance):
                hit = Hit(surface, ray.at(t), t)
        return hit

    def __len__(self) -> int:
        return len(self.surfaces)
