"""Procedural planet generation: icospheres, simplex noise terrain and climate biomes."""

__version__ = "0.1.0"

__all__ = ["example", "icosphere", "library", "materials", "noise", "planet", "settings", "vector"]