"""Wireframe viewer for height maps, with XPM image loading and colour names."""

__version__ = "0.1.0"