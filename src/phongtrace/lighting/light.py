# lighting/light.py
from typing import Optional

from phongtrace.core.color import Color
from phongtrace.core.utils import EPSILON
from phongtrace.core.vector import Vector3


class Light:
    """
    A point light with a position, an intensity and a color.
    """
    def __init__(self, position: Vector3, intensity: float = 1.0, color: Optional[Color] = None):
        if intensity < 0:
            raise ValueError(f"Light intensity must not be negative, got {intensity}")
        self.position = position
        self.intensity = intensity
        self.color = color if color is not None else Color.white()

    def inverse_square_law(self, point: Vector3) -> float:
        """
        Returns intensity / distance^2 at `point`. The squared distance is
        floored at EPSILON so the result stays finite at the light itself.
        """
        distance_squared = self.position.vector_to(point).length_squared()
        return self.intensity / max(distance_squared, EPSILON)

    def __repr__(self) -> str:
        return f"Light(position={self.position!r}, intensity={self.intensity}, color={self.color!r})"
