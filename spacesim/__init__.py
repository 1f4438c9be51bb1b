"""Newtonian gravity simulation of orbiting spheres with a free-flying camera."""

__version__ = "0.1.0"