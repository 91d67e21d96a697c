from __future__ import annotations

import random
import tkinter as tk
from tkinter import ttk
from typing import Callable

from catan_stage.domain.board import BoardAssignment
from catan_stage.domain.randomizer import describe_outcome, generate_board
from catan_stage.scene.textures import TextureLibrary

from .scene_canvas import SceneCanvas
from .themes import available_themes


class HomePage(ttk.Frame):
    def __init__(self, master: tk.Widget, *, on_enter_stage: Callable[[], None]) -> None:
        super().__init__(master, padding=40, style="Home.TFrame")
        content = ttk.Frame(self, style="Home.TFrame")
        content.place(relx=0.5, rely=0.45, anchor="center")

        ttk.Label(content, text="Catan Stage", style="Title.TLabel").pack(pady=(0, 12))
        ttk.Label(
            content,
            text="Welcome to the interactive board experience",
            style="Muted.TLabel",
        ).pack(pady=(0, 24))
        ttk.Button(
            content,
            text="Enter Main Stage",
            style="Primary.TButton",
            command=on_enter_stage,
        ).pack()

    def mount(self) -> None:
        pass

    def unmount(self) -> None:
        pass


class StagePage(ttk.Frame):
    """Holds one generated board for as long as the page is shown."""

    def __init__(
        self,
        master: tk.Widget,
        *,
        on_back: Callable[[], None],
        on_theme_changed: Callable[[str], None],
        rng: random.Random,
        max_attempts: int,
        textures: TextureLibrary,
        theme_key: str = "light",
    ) -> None:
        super().__init__(master, padding=0)
        self._rng = rng
        self._max_attempts = max_attempts
        self.board: BoardAssignment | None = None

        header = ttk.Frame(self, padding=(12, 8), style="Header.TFrame")
        header.pack(fill="x")
        ttk.Button(header, text="← Back to Home", command=on_back).pack(side="left")
        ttk.Label(header, text="Main Stage", style="Heading.TLabel").pack(side="left", padx=(16, 0))

        self._theme_var = tk.StringVar(value=theme_key)
        theme_picker = ttk.Combobox(
            header,
            textvariable=self._theme_var,
            values=available_themes(),
            state="readonly",
            width=14,
        )
        theme_picker.pack(side="right")
        theme_picker.bind("<<ComboboxSelected>>", lambda _event: on_theme_changed(self._theme_var.get()))
        ttk.Label(header, text="Theme").pack(side="right", padx=(12, 6))

        ttk.Button(header, text="Reset View", command=self._reset_view).pack(side="right", padx=(6, 0))
        ttk.Button(header, text="New Board", style="Primary.TButton", command=self.regenerate).pack(
            side="right", padx=(6, 0)
        )

        self.canvas = SceneCanvas(self, textures=textures, theme_key=theme_key)
        self.canvas.pack(fill="both", expand=True)

        self._status_var = tk.StringVar(value="")
        self._status_label = ttk.Label(self, textvariable=self._status_var, padding=(12, 4))
        self._status_label.pack(fill="x")

    def mount(self) -> None:
        self.regenerate()
        self.canvas.start_animation()

    def unmount(self) -> None:
        self.canvas.stop_animation()
        self.board = None
        self.canvas.set_board(None)
        self._status_var.set("")

    def regenerate(self) -> None:
        self.board = generate_board(rng=self._rng, max_attempts=self._max_attempts)
        self.canvas.set_board(self.board)
        self._status_var.set(describe_outcome(self.board))
        self._status_label.configure(style="TLabel" if self.board.validated else "Warning.TLabel")

    def set_visual_theme(self, theme_key: str) -> None:
        self._theme_var.set(theme_key)
        self.canvas.set_visual_theme(theme_key)

    def _reset_view(self) -> None:
        self.canvas.reset_camera()
