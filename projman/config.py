"""Application settings stored as a dotenv file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from .project import default_base_dir

DEFAULT_TAGGING_FORMAT = "{category}-{subcat}-{id}"

_INTEGER = re.compile(r"[+-]?\d+")


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or written."""


@dataclass
class Config:
    """User settings for the project manager."""

    sounds_enabled: bool = False
    base_dir: str = ""
    nav_up_sound: str = "sounds/nav_up.wav"
    nav_down_sound: str = "sounds/nav_down.wav"
    select_sound: str = "sounds/select.wav"
    error_sound: str = "sounds/error.wav"
    confirm_sound: str = "sounds/confirm.wav"
    tagging_format: str = DEFAULT_TAGGING_FORMAT
    tagging_start: int = 1
    folder_presets: list[str] = field(default_factory=list)

    def to_env(self) -> dict[str, str]:
        """The settings as environment variable values."""
        return {
            "PROJMAN_BASE_DIR": self.base_dir,
            "PROJMAN_SOUND_ENABLED": str(self.sounds_enabled).lower(),
            "PROJMAN_SOUND_NAV_UP": self.nav_up_sound,
            "PROJMAN_SOUND_NAV_DOWN": self.nav_down_sound,
            "PROJMAN_SOUND_SELECT": self.select_sound,
            "PROJMAN_SOUND_CONFIRM": self.confirm_sound,
            "PROJMAN_SOUND_ERROR": self.error_sound,
            "PROJMAN_TAGGING_FORMAT": self.tagging_format,
            "PROJMAN_TAGGING_START": str(self.tagging_start),
            "PROJMAN_PROJECT_FOLDER_PRESETS": "",
        }


def config_path(base_dir: str | os.PathLike = "") -> Path:
    """Location of the configuration file below *base_dir*."""
    return Path(os.path.join(os.fspath(base_dir), "Config", "projman.conf"))


def _format_line(key: str, value: str) -> str:
    if _INTEGER.fullmatch(value):
        return f"{key}={value}"
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r")
    return f'{key}="{escaped}"'


def save_config(config: Config, path: str | os.PathLike | None = None) -> None:
    """Write *config* as a dotenv file, by default below its base directory."""
    target = Path(path) if path is not None else config_path(config.base_dir)
    lines = sorted(_format_line(k, v) for k, v in config.to_env().items())
    try:
        target.write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as err:
        raise ConfigError(f"failed to save config: {err}") from err


def load_config(path: str | os.PathLike | None = None) -> Config:
    """Read settings from the dotenv file at *path*; the process environment wins."""
    source = Path(path) if path is not None else config_path("")
    if not source.is_file():
        raise ConfigError(f"loading environment variables failed: no such file {source}")
    try:
        values = {**dotenv_values(source, interpolate=False, encoding="utf-8"), **os.environ}
    except OSError as err:
        raise ConfigError(f"loading environment variables failed: {err}") from err

    def get(key: str) -> str:
        return values.get(key) or ""

    start = get("PROJMAN_TAGGING_START")
    return Config(
        base_dir=get("PROJMAN_BASE_DIR") or str(default_base_dir()),
        sounds_enabled=get("PROJMAN_SOUND_ENABLED").lower() == "true",
        nav_up_sound=get("PROJMAN_SOUND_NAV_UP"),
        nav_down_sound=get("PROJMAN_SOUND_NAV_DOWN"),
        select_sound=get("PROJMAN_SOUND_SELECT"),
        confirm_sound=get("PROJMAN_SOUND_CONFIRM"),
        error_sound=get("PROJMAN_SOUND_ERROR"),
        tagging_format=get("PROJMAN_TAGGING_FORMAT"),
        tagging_start=int(start) if _INTEGER.fullmatch(start) else 1,
    )