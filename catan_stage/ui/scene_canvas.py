from __future__ import annotations

import math
import time
import tkinter as tk
from typing import Sequence

from PIL import ImageTk

from catan_stage.domain.board import BoardAssignment
from catan_stage.scene.camera import OrbitCamera
from catan_stage.scene.composer import Frame, Primitive, compose_frame
from catan_stage.scene.palette import ScenePalette, get_palette
from catan_stage.scene.textures import TextureLibrary
from catan_stage.scene.tiles import TileVisual, build_tile_visuals

from .themes import UiTheme, get_theme

FRAME_INTERVAL_MS = 33
ZOOM_STEP = 0.9
OVERLAY_PADDING = 10

SCENE_INFO_LINES: tuple[str, ...] = (
    "Classic 3-4-5-4-3 hexagon pattern",
    "Left click: rotate | Right click: pan | Scroll: zoom",
)
SCENE_INFO_TITLE = "Catan Board - Hexagon Grid"


class SceneCanvas(tk.Canvas):
    """Draws the board scene and turns mouse input into orbit-camera moves."""

    def __init__(
        self,
        master: tk.Widget,
        *,
        textures: TextureLibrary | None = None,
        theme_key: str = "light",
        **kwargs,
    ) -> None:
        self._palette: ScenePalette = get_palette(theme_key)
        self._ui_theme: UiTheme = get_theme(theme_key)
        super().__init__(
            master,
            width=960,
            height=640,
            bg=self._palette.sky,
            highlightthickness=0,
            **kwargs,
        )
        self.camera = OrbitCamera.default()
        self._textures = textures if textures is not None else TextureLibrary()
        self._texture_refs: list[object] = []
        self._board: BoardAssignment | None = None
        self._tiles: list[TileVisual] = []
        self._started_at = time.perf_counter()
        self._after_id: str | None = None
        self._drag_origin: tuple[int, int] | None = None
        self._pan_origin: tuple[int, int] | None = None

        self.bind("<Configure>", lambda _event: self.draw())
        self.bind("<ButtonPress-1>", self._start_rotate)
        self.bind("<B1-Motion>", self._handle_rotate)
        self.bind("<ButtonRelease-1>", self._end_drag)
        for button in (2, 3):
            self.bind(f"<ButtonPress-{button}>", self._start_pan)
            self.bind(f"<B{button}-Motion>", self._handle_pan)
            self.bind(f"<ButtonRelease-{button}>", self._end_drag)
        self.bind("<MouseWheel>", self._handle_wheel)
        self.bind("<Button-4>", self._handle_wheel_linux)
        self.bind("<Button-5>", self._handle_wheel_linux)

    # ── public API ──────────────────────────────────────────────

    def set_board(self, board: BoardAssignment | None) -> None:
        self._board = board
        self._tiles = build_tile_visuals(board) if board is not None else []
        self.draw()

    def set_visual_theme(self, theme_key: str) -> None:
        self._palette = get_palette(theme_key)
        self._ui_theme = get_theme(theme_key)
        self.configure(bg=self._palette.sky)
        self.draw()

    def reset_camera(self) -> None:
        self.camera = OrbitCamera.default()
        self.draw()

    def start_animation(self) -> None:
        if self._after_id is None:
            self._started_at = time.perf_counter()
            self._tick()

    def stop_animation(self) -> None:
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None

    # ── draw ────────────────────────────────────────────────────

    def draw(self) -> None:
        self.delete("all")
        self._texture_refs = []
        if self._board is None:
            return

        width, height = self._viewport()
        frame = compose_frame(
            self._board,
            self.camera,
            width,
            height,
            palette=self._palette,
            elapsed=time.perf_counter() - self._started_at,
            tiles=self._tiles,
        )
        self._draw_frame(frame)
        self._draw_overlay()

    def _draw_frame(self, frame: Frame) -> None:
        for primitive in frame.primitives:
            if primitive.kind == "polygon":
                self._draw_polygon(primitive)
            elif primitive.kind == "text":
                x, y = primitive.points[0]
                self.create_text(
                    x,
                    y,
                    text=primitive.text,
                    font=("Segoe UI", primitive.font_size, "bold"),
                    fill=primitive.fill,
                )

    def _draw_polygon(self, primitive: Primitive) -> None:
        flat = _flatten(primitive.points)
        self.create_polygon(
            flat,
            fill=primitive.fill,
            outline=primitive.outline,
            width=primitive.width,
            joinstyle=tk.ROUND,
        )
        if primitive.texture is None:
            return
        fitted = self._textures.fit(primitive.texture, primitive.points)
        if fitted is None:
            return
        texture_image, (left, top) = fitted
        photo_image = ImageTk.PhotoImage(texture_image)
        self.create_image(left, top, image=photo_image, anchor="nw")
        self._texture_refs.append(photo_image)

    def _draw_overlay(self) -> None:
        theme = self._ui_theme
        x = OVERLAY_PADDING * 2
        y = OVERLAY_PADDING * 2
        title_id = self.create_text(
            x,
            y,
            text=SCENE_INFO_TITLE,
            anchor="nw",
            font=theme.font_overlay_title,
            fill=theme.overlay_fg,
        )
        item_ids = [title_id]
        _, _, _, bottom = self.bbox(title_id)
        for line in SCENE_INFO_LINES:
            line_id = self.create_text(
                x,
                bottom + 4,
                text=line,
                anchor="nw",
                font=theme.font_overlay_body,
                fill=theme.overlay_fg,
            )
            item_ids.append(line_id)
            _, _, _, bottom = self.bbox(line_id)

        left, top, right, bottom = self.bbox(*item_ids)
        backdrop = self.create_rectangle(
            left - OVERLAY_PADDING,
            top - OVERLAY_PADDING,
            right + OVERLAY_PADDING,
            bottom + OVERLAY_PADDING,
            fill=theme.overlay_bg,
            outline=theme.border,
        )
        self.tag_lower(backdrop, title_id)

    def _viewport(self) -> tuple[int, int]:
        width = max(self.winfo_width(), 1)
        height = max(self.winfo_height(), 1)
        if width <= 1 or height <= 1:
            width = int(self.cget("width"))
            height = int(self.cget("height"))
        return width, height

    def _tick(self) -> None:
        self.draw()
        self._after_id = self.after(FRAME_INTERVAL_MS, self._tick)

    # ── input ───────────────────────────────────────────────────

    def _start_rotate(self, event: tk.Event) -> None:
        self._drag_origin = (event.x, event.y)

    def _handle_rotate(self, event: tk.Event) -> None:
        if self._drag_origin is None:
            return
        _, height = self._viewport()
        dx = event.x - self._drag_origin[0]
        dy = event.y - self._drag_origin[1]
        self._drag_origin = (event.x, event.y)
        self.camera.rotate(-2 * math.pi * dx / height, -2 * math.pi * dy / height)
        self.draw()

    def _start_pan(self, event: tk.Event) -> None:
        self._pan_origin = (event.x, event.y)

    def _handle_pan(self, event: tk.Event) -> None:
        if self._pan_origin is None:
            return
        _, height = self._viewport()
        dx = event.x - self._pan_origin[0]
        dy = event.y - self._pan_origin[1]
        self._pan_origin = (event.x, event.y)
        units_per_pixel = 2 * self.camera.distance * math.tan(math.radians(self.camera.fov_deg) / 2) / height
        self.camera.pan(-dx * units_per_pixel, dy * units_per_pixel)
        self.draw()

    def _end_drag(self, _event: tk.Event) -> None:
        self._drag_origin = None
        self._pan_origin = None

    def _handle_wheel(self, event: tk.Event) -> None:
        if event.delta == 0:
            return
        self.camera.zoom(ZOOM_STEP if event.delta > 0 else 1 / ZOOM_STEP)
        self.draw()

    def _handle_wheel_linux(self, event: tk.Event) -> None:
        if event.num == 4:
            self.camera.zoom(ZOOM_STEP)
        elif event.num == 5:
            self.camera.zoom(1 / ZOOM_STEP)
        self.draw()


def _flatten(points: Sequence[tuple[float, float]]) -> list[float]:
    flat: list[float] = []
    for x, y in points:
        flat.extend([x, y])
    return flat
