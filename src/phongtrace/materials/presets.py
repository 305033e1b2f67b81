# materials/presets.py
from phongtrace.core.color import Color
from phongtrace.materials.material import Material


class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: Color = None) -> Material:
        return Material(ambient=0.1, diffuse=1.0, shininess=0.0, color=color)

    @staticmethod
    def plastic(color: Color = None) -> Material:
        return Material(ambient=0.1, diffuse=0.7, shininess=32.0, color=color)

    @staticmethod
    def glossy(color: Color = None) -> Material:
        return Material(ambient=0.1, diffuse=0.5, shininess=50.0, color=color)

    @staticmethod
    def metallic(color: Color = None) -> Material:
        return Material(ambient=0.05, diffuse=0.2, shininess=128.0, color=color)
