from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from catan_stage.domain.board import BoardAssignment, Terrain
from catan_stage.domain.placement import (
    BORDER_RADIUS,
    TILE_RADIUS,
    TILE_RAISE,
    Vec3,
    hex_corners,
)

from .camera import OrbitCamera, Point2
from .geometry import blend, centroid, hsl_color, lambert, normalize, rotate_y, shade
from .palette import ScenePalette, get_palette
from .tiles import TileVisual, build_tile_visuals

WATER_PLANE_SIZE = 400.0
WATER_PLANE_Y = -0.1
WATER_LAYER_COUNT = 3
WATER_LAYER_OPACITY = 0.3
WATER_TIME_SCALE = 0.5

COIN_RADIUS = 0.5
COIN_HEIGHT = 0.2
COIN_SEGMENTS = 24
PIP_RADIUS = 0.15
PIP_SPACING = 0.4
PIP_OFFSET = 0.85
PIP_SEGMENTS = 12
TOKEN_TEXT_SIZE = 0.45
DESERT_TEXT_SIZE = 0.35
MIN_FONT_SIZE = 6

UP: Vec3 = (0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Primitive:
    kind: str  # "polygon" or "text"
    points: Tuple[Point2, ...]
    fill: str
    outline: str = ""
    width: float = 0.0
    text: str = ""
    font_size: int = 0
    terrain: Optional[Terrain] = None
    texture: Optional[str] = None
    position: Optional[int] = None


@dataclass
class Frame:
    width: int
    height: int
    background: str
    primitives: List[Primitive] = field(default_factory=list)

    def polygons(self) -> List[Primitive]:
        return [primitive for primitive in self.primitives if primitive.kind == "polygon"]

    def texts(self) -> List[Primitive]:
        return [primitive for primitive in self.primitives if primitive.kind == "text"]


@dataclass(frozen=True)
class WaterLayer:
    size: float
    y: float
    rotation: float
    color: str


def water_layers(elapsed: float) -> List[WaterLayer]:
    time_value = elapsed * WATER_TIME_SCALE
    layers: List[WaterLayer] = []
    for index in range(WATER_LAYER_COUNT):
        layers.append(
            WaterLayer(
                size=180.0 - index * 10.0,
                y=-0.05 + index * 0.02 + math.sin(time_value * 2 + index) * 0.005,
                rotation=math.sin(time_value + index) * 0.02,
                color=hsl_color(0.58, 0.8, 0.3 + index * 0.1),
            )
        )
    return layers


def compose_frame(
    board: BoardAssignment,
    camera: OrbitCamera,
    width: int,
    height: int,
    *,
    palette: Optional[ScenePalette] = None,
    elapsed: float = 0.0,
    tiles: Optional[Sequence[TileVisual]] = None,
) -> Frame:
    """Flatten the scene into painter-ordered 2D primitives for one viewport."""
    palette = palette if palette is not None else get_palette("light")
    visuals = list(tiles) if tiles is not None else build_tile_visuals(board)
    frame = Frame(width=width, height=height, background=palette.sky)

    water_color = blend(palette.sky, palette.water, palette.water_opacity)
    frame.primitives.extend(
        _flat_square(camera, width, height, WATER_PLANE_SIZE, WATER_PLANE_Y, 0.0, water_color)
    )
    for layer in water_layers(elapsed):
        layer_color = blend(water_color, layer.color, WATER_LAYER_OPACITY)
        frame.primitives.extend(
            _flat_square(camera, width, height, layer.size, layer.y, layer.rotation, layer_color)
        )

    groups: List[Tuple[float, List[Primitive]]] = []
    for visual in visuals:
        depth = camera.depth(visual.placement.center)
        if depth < camera.near:
            continue
        groups.append((depth, _tile_primitives(visual, camera, width, height, palette)))

    # far tiles first so nearer ones paint over them
    groups.sort(key=lambda item: item[0], reverse=True)
    for _, primitives in groups:
        frame.primitives.extend(primitives)
    return frame


def _flat_square(
    camera: OrbitCamera,
    width: int,
    height: int,
    size: float,
    y: float,
    rotation: float,
    color: str,
) -> List[Primitive]:
    half = size / 2.0
    corners = [(-half, y, -half), (half, y, -half), (half, y, half), (-half, y, half)]
    if rotation:
        corners = [rotate_y(corner, rotation) for corner in corners]
    points = camera.project_polygon(corners, width, height)
    if len(points) < 3:
        return []
    return [Primitive(kind="polygon", points=tuple(points), fill=color)]


def _tile_primitives(
    visual: TileVisual,
    camera: OrbitCamera,
    width: int,
    height: int,
    palette: ScenePalette,
) -> List[Primitive]:
    placement = visual.placement
    primitives: List[Primitive] = []

    primitives.extend(
        _prism(
            camera,
            width,
            height,
            center=placement.center,
            radius=BORDER_RADIUS,
            bottom=placement.y,
            top=placement.border_top,
            color=palette.tile_border,
            outline=palette.face_outline,
            position=visual.position,
        )
    )
    primitives.extend(
        _prism(
            camera,
            width,
            height,
            center=placement.center,
            radius=TILE_RADIUS,
            bottom=placement.y + TILE_RAISE,
            top=placement.tile_top,
            color=visual.color,
            outline=palette.face_outline,
            position=visual.position,
            terrain=visual.terrain,
            texture=visual.texture,
        )
    )

    top_center = (placement.x, placement.tile_top, placement.z)
    if visual.show_token:
        primitives.extend(_token_primitives(visual, top_center, camera, width, height, palette))
    else:
        label_point = camera.project(top_center, width, height)
        pixels = camera.screen_scale(top_center, height)
        if label_point is not None and pixels > 0.0:
            primitives.append(
                Primitive(
                    kind="text",
                    points=(label_point,),
                    fill=palette.desert_text,
                    text="DESERT",
                    font_size=max(MIN_FONT_SIZE, int(round(DESERT_TEXT_SIZE * pixels))),
                    position=visual.position,
                )
            )
    return primitives


def _prism(
    camera: OrbitCamera,
    width: int,
    height: int,
    *,
    center: Vec3,
    radius: float,
    bottom: float,
    top: float,
    color: str,
    outline: str,
    position: int,
    terrain: Optional[Terrain] = None,
    texture: Optional[str] = None,
) -> List[Primitive]:
    primitives: List[Primitive] = []
    lower = hex_corners(center, radius, bottom)
    upper = hex_corners(center, radius, top)
    for index in range(6):
        following = (index + 1) % 6
        face = [lower[index], lower[following], upper[following], upper[index]]
        face_center = centroid(face)
        normal = normalize((face_center[0] - center[0], 0.0, face_center[2] - center[2]))
        if not camera.faces_camera(face_center, normal):
            continue
        points = camera.project_polygon(face, width, height)
        if len(points) < 3:
            continue
        primitives.append(
            Primitive(
                kind="polygon",
                points=tuple(points),
                fill=shade(color, lambert(normal, face_center)),
                outline=outline,
                width=1.0 if outline else 0.0,
                position=position,
            )
        )

    top_center = (center[0], top, center[2])
    if camera.faces_camera(top_center, UP):
        points = camera.project_polygon(upper, width, height)
        if len(points) >= 3:
            primitives.append(
                Primitive(
                    kind="polygon",
                    points=tuple(points),
                    fill=shade(color, lambert(UP, top_center)),
                    outline=outline,
                    width=1.0 if outline else 0.0,
                    terrain=terrain,
                    texture=texture,
                    position=position,
                )
            )
    return primitives


def _disc(center: Vec3, radius: float, segments: int) -> List[Vec3]:
    return [
        (
            center[0] + radius * math.cos(2 * math.pi * index / segments),
            center[1],
            center[2] + radius * math.sin(2 * math.pi * index / segments),
        )
        for index in range(segments)
    ]


def _token_primitives(
    visual: TileVisual,
    top_center: Vec3,
    camera: OrbitCamera,
    width: int,
    height: int,
    palette: ScenePalette,
) -> List[Primitive]:
    primitives: List[Primitive] = []
    hot = visual.highlighted

    coin_base = camera.project_polygon(_disc(top_center, COIN_RADIUS, COIN_SEGMENTS), width, height)
    if len(coin_base) >= 3:
        primitives.append(
            Primitive(kind="polygon", points=tuple(coin_base), fill=palette.coin_rim, position=visual.position)
        )
    coin_top_center = (top_center[0], top_center[1] + COIN_HEIGHT, top_center[2])
    coin_top = camera.project_polygon(_disc(coin_top_center, COIN_RADIUS, COIN_SEGMENTS), width, height)
    if len(coin_top) >= 3:
        primitives.append(
            Primitive(
                kind="polygon",
                points=tuple(coin_top),
                fill=palette.coin_fill,
                outline=palette.coin_rim,
                width=1.0,
                position=visual.position,
            )
        )

    label_point = camera.project(coin_top_center, width, height)
    pixels = camera.screen_scale(coin_top_center, height)
    if label_point is not None and pixels > 0.0:
        primitives.append(
            Primitive(
                kind="text",
                points=(label_point,),
                fill=palette.coin_hot_text if hot else palette.coin_text,
                text=str(visual.token),
                font_size=max(MIN_FONT_SIZE, int(round(TOKEN_TEXT_SIZE * pixels))),
                position=visual.position,
            )
        )

    marker_color = palette.pip_hot_marker if hot else palette.pip_marker
    for marker_center in pip_marker_centers(top_center, visual.pips):
        marker = camera.project_polygon(_disc(marker_center, PIP_RADIUS, PIP_SEGMENTS), width, height)
        if len(marker) >= 3:
            primitives.append(
                Primitive(kind="polygon", points=tuple(marker), fill=marker_color, position=visual.position)
            )
    return primitives


def pip_marker_centers(top_center: Vec3, count: int) -> List[Vec3]:
    """Row of marker centers in front of the coin, centered on the tile."""
    if count <= 0:
        return []
    start = -(count - 1) * PIP_SPACING / 2.0
    return [
        (top_center[0] + start + index * PIP_SPACING, top_center[1] + 0.01, top_center[2] + PIP_OFFSET)
        for index in range(count)
    ]


def textured_polygons(frame: Frame) -> Iterable[Primitive]:
    return (primitive for primitive in frame.primitives if primitive.texture is not None)
