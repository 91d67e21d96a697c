from __future__ import annotations

import random
import tkinter as tk
from tkinter import ttk

from catan_stage.config import StageSettings, load_settings
from catan_stage.scene.textures import TextureLibrary
from catan_stage.ui.pages import HomePage, StagePage
from catan_stage.ui.themes import UiTheme, get_theme

HOME_ROUTE = "home"
STAGE_ROUTE = "stage"


class CatanStageApp(tk.Tk):
    def __init__(self, settings: StageSettings | None = None) -> None:
        super().__init__()
        self.settings = settings if settings is not None else load_settings()
        self.title("Catan Stage")
        self.geometry("1200x820")
        self.minsize(800, 600)

        self._style = ttk.Style(self)
        self._theme: UiTheme = get_theme(self.settings.theme)
        self._current_route: str | None = None

        container = ttk.Frame(self)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self.pages: dict[str, HomePage | StagePage] = {
            HOME_ROUTE: HomePage(container, on_enter_stage=lambda: self.navigate(STAGE_ROUTE)),
            STAGE_ROUTE: StagePage(
                container,
                on_back=lambda: self.navigate(HOME_ROUTE),
                on_theme_changed=self.apply_theme,
                rng=random.Random(self.settings.seed),
                max_attempts=self.settings.max_attempts,
                textures=TextureLibrary(self.settings.texture_dir),
                theme_key=self._theme.key,
            ),
        }
        for page in self.pages.values():
            page.grid(row=0, column=0, sticky="nsew")

        self.apply_theme(self._theme.key)
        self.navigate(HOME_ROUTE)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def navigate(self, route: str) -> None:
        if route not in self.pages:
            raise KeyError(f"Unknown route: {route!r}")
        if route == self._current_route:
            return
        if self._current_route is not None:
            self.pages[self._current_route].unmount()
        self._current_route = route
        page = self.pages[route]
        page.tkraise()
        page.mount()

    @property
    def current_route(self) -> str | None:
        return self._current_route

    def apply_theme(self, theme_key: str) -> None:
        theme = get_theme(theme_key)
        self._theme = theme

        try:
            self._style.theme_use("clam")
        except tk.TclError:
            pass

        self.configure(bg=theme.window_bg)
        self._style.configure(".", background=theme.panel_bg, foreground=theme.panel_fg, font=theme.font_label)
        self._style.configure("TFrame", background=theme.panel_bg)
        self._style.configure("Home.TFrame", background=theme.window_bg)
        self._style.configure("Header.TFrame", background=theme.heading_bg)
        self._style.configure("TLabel", background=theme.panel_bg, foreground=theme.panel_fg, font=theme.font_label)
        self._style.configure(
            "Title.TLabel",
            background=theme.window_bg,
            foreground=theme.heading_fg,
            font=theme.font_title,
        )
        self._style.configure(
            "Muted.TLabel",
            background=theme.window_bg,
            foreground=theme.muted_fg,
            font=theme.font_label,
        )
        self._style.configure(
            "Heading.TLabel",
            background=theme.heading_bg,
            foreground=theme.heading_fg,
            font=theme.font_heading,
        )
        self._style.configure("Warning.TLabel", background=theme.panel_bg, foreground=theme.warning_fg)
        self._style.configure(
            "TButton",
            background=theme.button_bg,
            foreground=theme.button_fg,
            font=theme.font_label,
            padding=(8, 4),
            bordercolor=theme.border,
        )
        self._style.map(
            "TButton",
            background=[("active", theme.button_active_bg), ("pressed", theme.button_active_bg)],
            foreground=[("disabled", theme.muted_fg)],
        )
        self._style.configure(
            "Primary.TButton",
            background=theme.primary_button_bg,
            foreground=theme.primary_button_fg,
            padding=(12, 6),
        )
        self._style.map(
            "Primary.TButton",
            background=[("active", theme.primary_button_active_bg), ("pressed", theme.primary_button_active_bg)],
        )

        stage = self.pages[STAGE_ROUTE]
        if isinstance(stage, StagePage):
            stage.set_visual_theme(theme.key)

    def _on_close(self) -> None:
        if self._current_route is not None:
            self.pages[self._current_route].unmount()
        self.destroy()


def run_app(settings: StageSettings | None = None) -> None:
    app = CatanStageApp(settings)
    app.mainloop()
