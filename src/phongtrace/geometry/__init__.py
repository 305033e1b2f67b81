from phongtrace.geometry.plane import Plane
from phongtrace.geometry.scene import Hit, Scene
from phongtrace.geometry.sphere import Sphere
from phongtrace.geometry.surface import Surface

__all__ = ["Surface", "Sphere", "Plane", "Scene", "Hit"]
