from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from catan_stage.domain.board import BoardAssignment

from .camera import OrbitCamera
from .composer import Frame, compose_frame
from .palette import ScenePalette
from .textures import TextureLibrary


def rasterize(frame: Frame, *, textures: Optional[TextureLibrary] = None) -> Image.Image:
    image = Image.new("RGB", (frame.width, frame.height), frame.background)
    draw = ImageDraw.Draw(image)
    fonts: Dict[int, ImageFont.ImageFont] = {}

    for primitive in frame.primitives:
        if primitive.kind == "polygon":
            points = [(float(x), float(y)) for x, y in primitive.points]
            draw.polygon(points, fill=primitive.fill, outline=primitive.outline or None)
            if textures is not None and primitive.texture is not None:
                fitted = textures.fit(primitive.texture, primitive.points)
                if fitted is not None:
                    texture_image, origin = fitted
                    image.paste(texture_image, origin, texture_image)
        elif primitive.kind == "text":
            font = fonts.get(primitive.font_size)
            if font is None:
                font = ImageFont.load_default(size=primitive.font_size)
                fonts[primitive.font_size] = font
            x, y = primitive.points[0]
            draw.text((x, y), primitive.text, fill=primitive.fill, font=font, anchor="mm")
    return image


def render_snapshot(
    board: BoardAssignment,
    *,
    width: int = 960,
    height: int = 720,
    camera: Optional[OrbitCamera] = None,
    palette: Optional[ScenePalette] = None,
    textures: Optional[TextureLibrary] = None,
) -> Image.Image:
    frame = compose_frame(
        board,
        camera if camera is not None else OrbitCamera.default(),
        width,
        height,
        palette=palette,
    )
    return rasterize(frame, textures=textures)


def save_snapshot(image: Image.Image, path: Union[str, Path]) -> Path:
    target = Path(path)
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
    image.save(target, format="PNG")
    return target
