"""Catan board layout generator with a desktop 3D scene."""

__version__ = "0.1.0"
