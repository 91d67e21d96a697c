from __future__ import annotations

import colorsys
import math
from typing import List, Sequence, Tuple

Vec3 = Tuple[float, float, float]
Rgb = Tuple[int, int, int]

AMBIENT_INTENSITY = 0.4
DIRECTIONAL_INTENSITY = 0.8
LIGHT_POSITION: Vec3 = (10.0, 20.0, 5.0)


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(a: Vec3, factor: float) -> Vec3:
    return (a[0] * factor, a[1] * factor, a[2] * factor)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(a: Vec3) -> float:
    return math.sqrt(dot(a, a))


def normalize(a: Vec3) -> Vec3:
    magnitude = length(a)
    if magnitude <= 1e-12:
        return (0.0, 0.0, 0.0)
    return scale(a, 1.0 / magnitude)


def centroid(points: Sequence[Vec3]) -> Vec3:
    count = max(1, len(points))
    return (
        sum(point[0] for point in points) / count,
        sum(point[1] for point in points) / count,
        sum(point[2] for point in points) / count,
    )


def rotate_y(point: Vec3, angle: float, origin: Vec3 = (0.0, 0.0, 0.0)) -> Vec3:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point[0] - origin[0]
    dz = point[2] - origin[2]
    return (origin[0] + dx * cos_a + dz * sin_a, point[1], origin[2] - dx * sin_a + dz * cos_a)


def clip_near(points: Sequence[Vec3], near: float) -> List[Vec3]:
    """Clip a camera-space polygon (depth in the third component) to depth >= near."""
    if not points:
        return []
    clipped: List[Vec3] = []
    previous = points[-1]
    previous_inside = previous[2] >= near
    for current in points:
        current_inside = current[2] >= near
        if current_inside != previous_inside:
            t = (near - previous[2]) / (current[2] - previous[2])
            clipped.append(
                (
                    previous[0] + (current[0] - previous[0]) * t,
                    previous[1] + (current[1] - previous[1]) * t,
                    near,
                )
            )
        if current_inside:
            clipped.append(current)
        previous = current
        previous_inside = current_inside
    return clipped


def lambert(normal: Vec3, point: Vec3 = (0.0, 0.0, 0.0)) -> float:
    to_light = normalize(sub(LIGHT_POSITION, point))
    diffuse = max(0.0, dot(normalize(normal), to_light))
    return min(1.0, AMBIENT_INTENSITY + DIRECTIONAL_INTENSITY * diffuse)


# ── colors ──────────────────────────────────────────────────────


def parse_color(value: str) -> Rgb:
    raw = value.strip().lstrip("#")
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6:
        raise ValueError(f"Unsupported color value: {value!r}")
    return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))


def format_color(rgb: Rgb) -> str:
    return "#{:02X}{:02X}{:02X}".format(*(max(0, min(255, int(round(channel)))) for channel in rgb))


def shade(color: str, factor: float) -> str:
    red, green, blue = parse_color(color)
    return format_color((red * factor, green * factor, blue * factor))


def blend(base: str, overlay: str, opacity: float) -> str:
    opacity = max(0.0, min(1.0, opacity))
    base_rgb = parse_color(base)
    overlay_rgb = parse_color(overlay)
    return format_color(
        tuple(b * (1.0 - opacity) + o * opacity for b, o in zip(base_rgb, overlay_rgb))  # type: ignore[arg-type]
    )


def hsl_color(hue: float, saturation: float, lightness: float) -> str:
    red, green, blue = colorsys.hls_to_rgb(hue, lightness, saturation)
    return format_color((red * 255, green * 255, blue * 255))
