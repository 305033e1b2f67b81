# renderer/raytracer.py
import logging
import math
import time
from typing import Optional

import numpy as np

from phongtrace.camera.camera import Camera
from phongtrace.core.color import Color
from phongtrace.geometry.scene import Scene
from phongtrace.lighting.phong import shade

logger = logging.getLogger(__name__)


class Renderer:
    """
    Single-pass Phong ray tracer writing packed ARGB colors into a flat
    buffer indexed y*width+x.

    Scene and camera must not change while render() runs; resize between
    passes only.
    """
    def __init__(self, width: int, height: int, background: Optional[Color] = None,
                 ray_length: float = math.inf):
        self.background = background if background is not None else Color.green()
        self.ray_length = ray_length
        self.width = 0
        self.height = 0
        self.buffer = np.zeros(0, dtype=np.uint32)
        self.resize(width, height)

    def resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Render size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.buffer = np.zeros(self.width * self.height, dtype=np.uint32)
        logger.debug("Render buffer resized to %dx%d", self.width, self.height)

    def render_pixel(self, scene: Scene, camera: Camera, x: int, y: int) -> Color:
        ray = camera.shoot_ray(x, y, self.ray_length)
        hit = scene.nearest_hit(ray)
        if hit is None:
            return self.background.copy()
        return shade(hit.surface, scene.lights, camera.position, hit.point)

    def render(self, scene: Scene, camera: Camera) -> np.ndarray:
        """
        Renders one full pass and returns the pixel buffer.
        """
        if camera.width != self.width or camera.height != self.height:
            logger.warning("Camera is %dx%d but buffer is %dx%d; resizing camera",
                           camera.width, camera.height, self.width, self.height)
            camera.width = self.width
            camera.height = self.height

        start = time.perf_counter()
        for y in range(self.height):
            row = y * self.width
            for x in range(self.width):
                self.buffer[row + x] = self.render_pixel(scene, camera, x, y).argb

        elapsed = time.perf_counter() - start
        logger.info("Rendered %dx%d (%d surfaces, %d lights) in %.2fs",
                    self.width, self.height, len(scene.surfaces), len(scene.lights), elapsed)
        return self.buffer

    def pixel(self, x: int, y: int) -> Color:
        """Returns the color stored for pixel (x, y)."""
        return Color.from_argb(int(self.buffer[y * self.width + x]))

    def clear(self, color: Optional[Color] = None):
        fill = color if color is not None else self.background
        self.buffer.fill(fill.argb)
