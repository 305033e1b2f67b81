# materials/material.py
from typing import Optional

from phongtrace.core.color import Color
from phongtrace.core.utils import clamp


class Material:
    """
    Phong material: a color plus ambient, diffuse, specular and shininess
    coefficients.

    Diffuse and specular always add up to 1. Setting one recomputes the
    other. Every setter clamps instead of failing: ambient, diffuse and
    specular to [0, 1], shininess to [0, inf).
    """
    def __init__(self, ambient: float = 0.0, diffuse: float = 1.0, shininess: float = 0.0,
                 color: Optional[Color] = None):
        self.color = color if color is not None else Color.white()
        self._ambient = 0.0
        self._diffuse = 1.0
        self._specular = 0.0
        self._shininess = 0.0
        self.ambient = ambient
        self.diffuse = diffuse
        self.shininess = shininess

    @property
    def ambient(self) -> float:
        return self._ambient

    @ambient.setter
    def ambient(self, ambient: float):
        self._ambient = clamp(float(ambient), 0.0, 1.0)

    @property
    def diffuse(self) -> float:
        return self._diffuse

    @diffuse.setter
    def diffuse(self, diffuse: float):
        self._diffuse = clamp(float(diffuse), 0.0, 1.0)
        self._specular = 1.0 - self._diffuse

    @property
    def specular(self) -> float:
        return self._specular

    @specular.setter
    def specular(self, specular: float):
        self._specular = clamp(float(specular), 0.0, 1.0)
        self._diffuse = 1.0 - self._specular

    @property
    def shininess(self) -> float:
        return self._shininess

    @shininess.setter
    def shininess(self, shininess: float):
        self._shininess = max(0.0, float(shininess))

    def copy(self) -> "Material":
        material = Material(self._ambient, self._diffuse, self._shininess, self.color.copy())
        # Specular is derived, but copy it exactly to avoid 1 - (1 - s) drift.
        material._specular = self._specular
        return material

    def __repr__(self) -> str:
        return (f"Material(ambient={self._ambient}, diffuse={self._diffuse}, "
                f"specular={self._specular}, shininess={self._shininess}, color={self.color!r})")
