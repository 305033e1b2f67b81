# lighting/phong.py
"""
Phong illumination: ambient + diffuse + specular per light, attenuated by
the inverse-square law, then composed into a pixel color.
"""
from typing import Iterable, Sequence

from phongtrace.core.color import Color
from phongtrace.core.utils import reflect
from phongtrace.core.vector import Vector3
from phongtrace.geometry.surface import Surface
from phongtrace.lighting.light import Light


def calculate_light_intensity(surface: Surface, light: Light, viewpoint: Vector3,
                              intersection_point: Vector3) -> float:
    """
    Calculates the light intensity at an intersection point.

    Args:
        surface: The surface that was intersected.
        light: The light source.
        viewpoint: The camera position.
        intersection_point: A point previously returned by surface.intersection().

    Returns:
        The intensity contributed by this light, in [0, 1].
    """
    light_vector = intersection_point.vector_to(light.position).normalize()
    normal = surface.normal_at(intersection_point)

    # Angle between the normal and the light vector
    angle = normal.dot(light_vector)
    if angle < 0:
        # The light is behind the surface at this point
        return 0.0

    material = surface.material

    # Specular reflection
    # Sign flipped on purpose: reflect() yields -R, so dotting with the
    # camera-to-point vector gives the usual R.V
    reflection = reflect(light_vector, normal)
    view_vector = viewpoint.vector_to(intersection_point).normalize()
    specular_angle = max(0.0, reflection.dot(view_vector))
    specular = specular_angle ** material.shininess

    intensity = material.ambient
    intensity += material.diffuse * angle
    intensity += material.specular * specular

    # Max intensity is 1
    return min(1.0, intensity * light.inverse_square_law(intersection_point))


def total_intensity(surface: Surface, lights: Iterable[Light], viewpoint: Vector3,
                    intersection_point: Vector3) -> float:
    """
    Sum of the per-light intensities at a point.
    """
    return sum(calculate_light_intensity(surface, light, viewpoint, intersection_point)
               for light in lights)


def mix_light_colors(lights: Sequence[Light]) -> Color:
    """
    Channel-wise mean of the light colors, independent of light order.
    """
    if not lights:
        return Color.transparent()
    count = len(lights)
    channels = zip(*(light.color.to_tuple() for light in lights))
    return Color(*(sum(values) // count for values in channels))


def shade(surface: Surface, lights: Iterable[Light], viewpoint: Vector3,
          intersection_point: Vector3) -> Color:
    """
    Composes the color seen at an intersection point.

    Intensities of all lights are summed first. The mixed light color is
    blended with the material color and scaled once by that sum, so zero
    total intensity gives black.
    """
    lights = list(lights)
    intensity = total_intensity(surface, lights, viewpoint, intersection_point)
    return mix_light_colors(lights).blended(surface.material.color) * intensity
