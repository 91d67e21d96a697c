from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .geometry import Vec3, add, clip_near, cross, dot, normalize, scale, sub

Point2 = Tuple[float, float]

WORLD_UP: Vec3 = (0.0, 1.0, 0.0)
DEFAULT_EYE: Vec3 = (0.0, 25.0, 20.0)
DEFAULT_FOV_DEG = 60.0
NEAR_PLANE = 0.1
MIN_DISTANCE = 5.0
MAX_DISTANCE = 50.0
MIN_POLAR = 0.05
MAX_POLAR = math.pi / 2.2


@dataclass
class OrbitCamera:
    """Perspective camera orbiting a target point.

    Angles follow the usual orbit-control convention: `polar` is measured from
    the world up axis and `azimuth` around it, starting on +z.
    """

    target: Vec3 = (0.0, 0.0, 0.0)
    distance: float = 0.0
    polar: float = 0.0
    azimuth: float = 0.0
    fov_deg: float = DEFAULT_FOV_DEG
    near: float = NEAR_PLANE
    _basis: Optional[Tuple[Vec3, Vec3, Vec3, Vec3]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.distance <= 0.0:
            self.look_from(DEFAULT_EYE)
        self._clamp()

    @classmethod
    def default(cls) -> "OrbitCamera":
        return cls()

    def look_from(self, eye: Vec3) -> None:
        offset = sub(eye, self.target)
        horizontal = math.hypot(offset[0], offset[2])
        self.distance = math.sqrt(horizontal**2 + offset[1] ** 2)
        self.polar = math.atan2(horizontal, offset[1])
        self.azimuth = math.atan2(offset[0], offset[2])
        self._clamp()

    # ── controls ────────────────────────────────────────────────

    def rotate(self, delta_azimuth: float, delta_polar: float) -> None:
        self.azimuth = (self.azimuth + delta_azimuth) % (2 * math.pi)
        self.polar += delta_polar
        self._clamp()

    def zoom(self, factor: float) -> None:
        if factor <= 0.0:
            return
        self.distance *= factor
        self._clamp()

    def pan(self, right_amount: float, forward_amount: float) -> None:
        """Slide the target across the ground plane in view-relative directions."""
        _, right, _, forward = self.basis()
        ground_forward = normalize((forward[0], 0.0, forward[2]))
        ground_right = normalize((right[0], 0.0, right[2]))
        shift = add(scale(ground_right, right_amount), scale(ground_forward, forward_amount))
        self.target = add(self.target, shift)
        self._basis = None

    def _clamp(self) -> None:
        self.distance = max(MIN_DISTANCE, min(MAX_DISTANCE, self.distance))
        self.polar = max(MIN_POLAR, min(MAX_POLAR, self.polar))
        self._basis = None

    # ── projection ──────────────────────────────────────────────

    @property
    def eye(self) -> Vec3:
        sin_polar = math.sin(self.polar)
        offset = (
            self.distance * sin_polar * math.sin(self.azimuth),
            self.distance * math.cos(self.polar),
            self.distance * sin_polar * math.cos(self.azimuth),
        )
        return add(self.target, offset)

    def basis(self) -> Tuple[Vec3, Vec3, Vec3, Vec3]:
        if self._basis is None:
            eye = self.eye
            forward = normalize(sub(self.target, eye))
            right = normalize(cross(forward, WORLD_UP))
            up = cross(right, forward)
            self._basis = (eye, right, up, forward)
        return self._basis

    def to_camera(self, point: Vec3) -> Vec3:
        eye, right, up, forward = self.basis()
        relative = sub(point, eye)
        return (dot(relative, right), dot(relative, up), dot(relative, forward))

    def depth(self, point: Vec3) -> float:
        return self.to_camera(point)[2]

    def focal_length(self, viewport_height: float) -> float:
        return (viewport_height / 2.0) / math.tan(math.radians(self.fov_deg) / 2.0)

    def project(self, point: Vec3, width: float, height: float) -> Optional[Point2]:
        camera_point = self.to_camera(point)
        if camera_point[2] < self.near:
            return None
        return self._to_screen(camera_point, width, height)

    def project_polygon(self, points: Sequence[Vec3], width: float, height: float) -> List[Point2]:
        camera_points = clip_near([self.to_camera(point) for point in points], self.near)
        return [self._to_screen(point, width, height) for point in camera_points]

    def screen_scale(self, point: Vec3, height: float) -> float:
        """Pixels per world unit at the depth of `point`, zero when behind the camera."""
        depth = self.depth(point)
        if depth < self.near:
            return 0.0
        return self.focal_length(height) / depth

    def faces_camera(self, face_point: Vec3, normal: Vec3) -> bool:
        return dot(normal, sub(self.eye, face_point)) > 0.0

    def _to_screen(self, camera_point: Vec3, width: float, height: float) -> Point2:
        focal = self.focal_length(height)
        x = width / 2.0 + camera_point[0] * focal / camera_point[2]
        y = height / 2.0 - camera_point[1] * focal / camera_point[2]
        return (x, y)
