"""Pitchside - roster-driven tactical board with a synchronized 3D scene."""

__version__ = "0.1.0"
