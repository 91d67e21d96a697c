"""Headless scene model: projection, tile visuals and frame composition."""

from .camera import OrbitCamera
from .composer import Frame, Primitive, compose_frame
from .palette import ScenePalette, get_palette
from .tiles import TileVisual, build_tile_visuals
from .tokens import is_high_frequency, pip_count

__all__ = [
    "Frame",
    "OrbitCamera",
    "Primitive",
    "ScenePalette",
    "TileVisual",
    "build_tile_visuals",
    "compose_frame",
    "get_palette",
    "is_high_frequency",
    "pip_count",
]
