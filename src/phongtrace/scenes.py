# scenes.py
from typing import Tuple

from phongtrace.camera.camera import Camera
from phongtrace.config import RenderConfig
from phongtrace.core.color import Color
from phongtrace.core.vector import Vector3
from phongtrace.geometry.scene import Scene
from phongtrace.geometry.sphere import Sphere
from phongtrace.lighting.light import Light
from phongtrace.materials.presets import MaterialPresets


def create_default_scene(config: RenderConfig = None) -> Tuple[Scene, Camera]:
    """
    Three spheres lit by three cyan point lights, seen from the origin
    looking down +Z.
    """
    if config is None:
        config = RenderConfig()

    scene = Scene()
    scene.add_surface(Sphere(Vector3(0.0, 0.0, 3.0), 1.0, MaterialPresets.glossy()))
    scene.add_surface(Sphere(Vector3(1.0, 1.0, 4.0), 0.5, MaterialPresets.glossy()))
    scene.add_surface(Sphere(Vector3(-1.0, -1.0, 5.0), 0.75, MaterialPresets.glossy()))

    scene.add_light(Light(Vector3(-1, 0, -1), 4, Color.cyan()))
    scene.add_light(Light(Vector3(1, 0, 1), 1, Color.cyan()))
    scene.add_light(Light(Vector3(2, 0, 1), 2, Color.cyan()))

    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, 1), config.width, config.height, config.fov)
    return scene, camera
