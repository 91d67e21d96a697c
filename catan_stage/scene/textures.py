from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFilter, ImageOps, UnidentifiedImageError

from .camera import Point2

logger = logging.getLogger(__name__)

DEFAULT_TEXTURE_DIR = Path(__file__).resolve().parents[1] / "assets" / "textures"

# Zoom textured artwork slightly so matte borders in source images
# don't leave pale bands near hex edges.
_TEXTURE_ZOOM = 1.2
_TEXTURE_MASK_THRESHOLD = 20
_MAX_CACHED_FITS = 80
_MAX_FIT_SIDE = 4096

Bounds = Tuple[int, int, int, int]


def polygon_int_bounds(points: Sequence[Point2]) -> Bounds:
    min_x = math.floor(min(point[0] for point in points))
    min_y = math.floor(min(point[1] for point in points))
    max_x = math.ceil(max(point[0] for point in points))
    max_y = math.ceil(max(point[1] for point in points))
    return (min_x, min_y, max_x, max_y)


class TextureLibrary:
    """Terrain artwork loaded from a directory, fitted to projected tile faces.

    Missing or unreadable files are remembered as absent so callers can fall
    back to flat colors without retrying the disk on every frame.
    """

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = Path(root) if root is not None else DEFAULT_TEXTURE_DIR
        self._sources: Dict[str, Optional[Image.Image]] = {}
        self._fitted: Dict[Tuple[str, Tuple[Point2, ...]], Image.Image] = {}

    def source(self, texture: str) -> Optional[Image.Image]:
        if texture in self._sources:
            return self._sources[texture]

        path = self.root / texture
        image: Optional[Image.Image] = None
        if path.is_file():
            try:
                with Image.open(path) as raw:
                    image = raw.convert("RGBA")
            except (OSError, UnidentifiedImageError) as exc:
                logger.debug("Ignoring unreadable texture %s: %s", path, exc)
        else:
            logger.debug("Texture %s not found; using flat color.", path)
        self._sources[texture] = image
        return image

    def has(self, texture: Optional[str]) -> bool:
        return texture is not None and self.source(texture) is not None

    def fit(self, texture: str, polygon: Sequence[Point2]) -> Optional[Tuple[Image.Image, Tuple[int, int]]]:
        """Return the texture cropped to `polygon` and the top-left pixel to paste it at."""
        source = self.source(texture)
        if source is None or len(polygon) < 3:
            return None

        min_x, min_y, max_x, max_y = polygon_int_bounds(polygon)
        width = max(4, int(max_x - min_x + 1))
        height = max(4, int(max_y - min_y + 1))
        if width > _MAX_FIT_SIDE or height > _MAX_FIT_SIDE:
            return None
        cache_key = (texture, tuple((round(x - min_x), round(y - min_y)) for x, y in polygon))
        cached = self._fitted.get(cache_key)
        if cached is not None:
            return cached, (min_x, min_y)

        resample = Image.Resampling.LANCZOS
        fitted = ImageOps.fit(source, (width, height), method=resample, centering=(0.5, 0.5))
        if _TEXTURE_ZOOM > 1.0:
            zoomed_w = max(width, int(round(width * _TEXTURE_ZOOM)))
            zoomed_h = max(height, int(round(height * _TEXTURE_ZOOM)))
            zoomed = fitted.resize((zoomed_w, zoomed_h), resample=resample)
            left = max(0, (zoomed_w - width) // 2)
            top = max(0, (zoomed_h - height) // 2)
            fitted = zoomed.crop((left, top, left + width, top + height))

        anti_alias = 3
        mask = Image.new("L", (width * anti_alias, height * anti_alias), 0)
        mask_points = [((x - min_x) * anti_alias, (y - min_y) * anti_alias) for x, y in polygon]
        ImageDraw.Draw(mask).polygon(mask_points, fill=255)
        mask = mask.resize((width, height), resample=resample)
        mask = mask.filter(ImageFilter.MaxFilter(3))
        mask = mask.point(lambda value: 255 if value >= _TEXTURE_MASK_THRESHOLD else 0)
        fitted = fitted.copy()
        fitted.putalpha(mask)

        if len(self._fitted) > _MAX_CACHED_FITS:
            self._fitted.clear()
        self._fitted[cache_key] = fitted
        return fitted, (min_x, min_y)
