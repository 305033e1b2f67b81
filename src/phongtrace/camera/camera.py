# camera/camera.py
import math

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3


class Camera:
    """
    Pinhole camera producing one ray per pixel. `fov` is the vertical field
    of view in degrees; pixel rows grow downward.
    """
    def __init__(self, position: Vector3, direction: Vector3, width: int, height: int,
                 fov: float = 60.0):
        if direction.length_squared() == 0:
            raise ValueError("Camera direction must be non-zero")
        if not 0 < fov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {fov}")
        self.position = position
        self.direction = direction.normalize()
        self.fov = fov
        self._width = 1
        self._height = 1
        self.width = width
        self.height = height
        self.update_camera()

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, width: int):
        if width <= 0:
            raise ValueError(f"Camera width must be positive, got {width}")
        self._width = int(width)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, height: int):
        if height <= 0:
            raise ValueError(f"Camera height must be positive, got {height}")
        self._height = int(height)

    @property
    def aspect_ratio(self) -> float:
        return self._width / self._height

    def update_camera(self):
        """Updates the camera's basis vectors."""
        global_up = Vector3(0, 1, 0)
        if abs(self.direction.dot(global_up)) > 1 - 1e-9:
            # Looking straight up or down
            global_up = Vector3(0, 0, 1)

        self.forward = self.direction
        self.right = global_up.cross(self.forward).normalize()
        self.up = self.forward.cross(self.right).normalize()

    def look_at(self, target: Vector3):
        self.direction = self.position.vector_to(target).normalize()
        self.update_camera()

    def shoot_ray(self, x: float, y: float, length: float = math.inf) -> Ray:
        """Generates a ray through the center of pixel (x, y)."""
        half_height = math.tan(math.radians(self.fov) / 2)
        half_width = half_height * self.aspect_ratio

        u = (2.0 * (x + 0.5) / self._width - 1.0) * half_width
        v = (1.0 - 2.0 * (y + 0.5) / self._height) * half_height

        direction = self.forward + self.right * u + self.up * v
        return Ray(self.position, direction, length)
