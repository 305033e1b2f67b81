"""Phong ray tracing core: packed colors, materials, surfaces and lighting."""

__version__ = "0.1.0"
