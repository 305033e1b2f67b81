"""Shared fixtures for the ray tracer tests."""

import pytest

from phongtrace.core.color import Color
from phongtrace.core.vector import Vector3
from phongtrace.geometry.sphere import Sphere
from phongtrace.lighting.light import Light
from phongtrace.materials.material import Material


@pytest.fixture
def diffuse_material():
    """Pure diffuse material: no ambient, no specular."""
    return Material(ambient=0.0, diffuse=1.0, shininess=0.0)


@pytest.fixture
def unit_sphere(diffuse_material):
    """Sphere of radius 1 centered at (0, 0, 3)."""
    return Sphere(Vector3(0.0, 0.0, 3.0), 1.0, diffuse_material)


@pytest.fixture
def front_light():
    """Unit-intensity white light one unit in front of the unit sphere's near pole."""
    return Light(Vector3(0.0, 0.0, 1.0), 1.0, Color.white())


@pytest.fixture
def origin():
    return Vector3(0.0, 0.0, 0.0)
