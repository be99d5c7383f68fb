"""Argument checks, XPM textures, colour names, line reading and formatting for a raycasting game."""

__version__ = "0.1.0"