from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, Mapping, Optional, cast

from catan_stage.domain.randomizer import MAX_GENERATION_ATTEMPTS

ThemeName = Literal["light", "dark", "high_contrast"]
THEME_NAMES: tuple[str, ...] = ("light", "dark", "high_contrast")

ENV_PREFIX = "CATAN_STAGE_"


class ConfigError(ValueError):
    """Raised when a setting cannot be parsed."""


@dataclass(frozen=True)
class StageSettings:
    theme: ThemeName = "light"
    max_attempts: int = MAX_GENERATION_ATTEMPTS
    seed: Optional[int] = None
    texture_dir: Optional[Path] = None

    def with_overrides(self, **overrides: object) -> "StageSettings":
        """Apply non-None overrides, as passed through from CLI options."""
        present = {key: value for key, value in overrides.items() if value is not None}
        if "theme" in present:
            present["theme"] = _parse_theme(str(present["theme"]))
        if "texture_dir" in present:
            present["texture_dir"] = Path(str(present["texture_dir"]))
        return replace(self, **present)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> StageSettings:
    env = os.environ if environ is None else environ
    settings = StageSettings()

    theme = env.get(f"{ENV_PREFIX}THEME")
    if theme:
        settings = replace(settings, theme=_parse_theme(theme))

    max_attempts = env.get(f"{ENV_PREFIX}MAX_ATTEMPTS")
    if max_attempts:
        attempts = _parse_int(f"{ENV_PREFIX}MAX_ATTEMPTS", max_attempts)
        if attempts < 1:
            raise ConfigError(f"{ENV_PREFIX}MAX_ATTEMPTS must be >= 1, got {attempts}.")
        settings = replace(settings, max_attempts=attempts)

    seed = env.get(f"{ENV_PREFIX}SEED")
    if seed:
        settings = replace(settings, seed=_parse_int(f"{ENV_PREFIX}SEED", seed))

    texture_dir = env.get(f"{ENV_PREFIX}TEXTURE_DIR")
    if texture_dir:
        settings = replace(settings, texture_dir=Path(texture_dir).expanduser())

    return settings


def _parse_theme(raw: str) -> ThemeName:
    normalized = raw.strip().lower()
    if normalized not in THEME_NAMES:
        raise ConfigError(f"Unknown theme {raw!r}; expected one of {', '.join(THEME_NAMES)}.")
    return cast(ThemeName, normalized)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from exc
