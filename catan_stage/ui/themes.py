from __future__ import annotations

from dataclasses import dataclass

Font = tuple[str, int, str]

_FONT_FAMILY = "Segoe UI"


@dataclass(frozen=True)
class UiTheme:
    """Window chrome colors; scene colors live in `catan_stage.scene.palette`."""

    key: str
    window_bg: str
    panel_bg: str
    panel_fg: str
    muted_fg: str
    border: str
    heading_bg: str
    heading_fg: str
    button_bg: str
    button_fg: str
    button_active_bg: str
    primary_button_bg: str
    primary_button_fg: str
    primary_button_active_bg: str
    overlay_bg: str
    overlay_fg: str
    warning_fg: str
    font_title: Font
    font_heading: Font
    font_label: Font
    font_overlay_title: Font
    font_overlay_body: Font


def _fonts(bump: int = 0) -> dict[str, Font]:
    return {
        "font_title": (_FONT_FAMILY, 28 + bump, "bold"),
        "font_heading": (_FONT_FAMILY, 15 + bump, "bold"),
        "font_label": (_FONT_FAMILY, 10 + bump, "normal"),
        "font_overlay_title": (_FONT_FAMILY, 12 + bump, "bold"),
        "font_overlay_body": (_FONT_FAMILY, 9 + bump, "normal"),
    }


_THEMES: dict[str, UiTheme] = {
    # Parchment chrome around a daylight sea.
    "light": UiTheme(
        key="light",
        window_bg="#F3E9D2",
        panel_bg="#FBF5E6",
        panel_fg="#3B2A1A",
        muted_fg="#7A6248",
        border="#C8B08A",
        heading_bg="#E6D3AE",
        heading_fg="#3B2A1A",
        button_bg="#EADBBE",
        button_fg="#3B2A1A",
        button_active_bg="#DCC59C",
        primary_button_bg="#8B4513",
        primary_button_fg="#FFF8EC",
        primary_button_active_bg="#6F370F",
        overlay_bg="#2B1D12",
        overlay_fg="#F5F5DC",
        warning_fg="#B3261E",
        **_fonts(),
    ),
    "dark": UiTheme(
        key="dark",
        window_bg="#14100C",
        panel_bg="#1E1812",
        panel_fg="#EDE3D0",
        muted_fg="#B09C82",
        border="#4A3B2A",
        heading_bg="#2A2118",
        heading_fg="#F5ECDA",
        button_bg="#33291E",
        button_fg="#EDE3D0",
        button_active_bg="#4A3B2A",
        primary_button_bg="#C0702A",
        primary_button_fg="#14100C",
        primary_button_active_bg="#D9883E",
        overlay_bg="#0C0906",
        overlay_fg="#F5ECDA",
        warning_fg="#FF9A80",
        **_fonts(),
    ),
    "high_contrast": UiTheme(
        key="high_contrast",
        window_bg="#000000",
        panel_bg="#000000",
        panel_fg="#FFFFFF",
        muted_fg="#E0E0E0",
        border="#FFFFFF",
        heading_bg="#000000",
        heading_fg="#FFFF00",
        button_bg="#000000",
        button_fg="#FFFFFF",
        button_active_bg="#333333",
        primary_button_bg="#FFFF00",
        primary_button_fg="#000000",
        primary_button_active_bg="#FFFF80",
        overlay_bg="#000000",
        overlay_fg="#FFFFFF",
        warning_fg="#FF6060",
        **_fonts(bump=2),
    ),
}


def get_theme(theme_key: str) -> UiTheme:
    normalized = str(theme_key).strip().lower()
    return _THEMES.get(normalized, _THEMES["light"])


def available_themes() -> list[str]:
    return list(_THEMES)
