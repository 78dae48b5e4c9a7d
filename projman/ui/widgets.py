"""Building blocks shared by the terminal screens."""

from __future__ import annotations

import contextlib
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from ..config import Config
from ..project import default_base_dir
from .sound import play_sound


class Navigation(Enum):
    """Where the application should go instead of staying on a screen."""

    MAIN_MENU = "main_menu"
    QUIT = "quit"


def launch(argv: Sequence[str]) -> None:
    """Start *argv* in the background, ignoring failures to start it."""
    with contextlib.suppress(OSError):
        subprocess.Popen(list(argv), stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


@dataclass
class TextInput:
    """A single-line editable text field driven by key names."""

    placeholder: str = ""
    char_limit: int = 0
    width: int = 0
    value: str = ""
    focused: bool = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def handle_key(self, key: str) -> bool:
        """Apply *key* if focused; return whether the key was consumed."""
        if not self.focused:
            return False
        if key == "backspace":
            self.value = self.value[:-1]
        elif key == "ctrl+u":
            self.value = ""
        elif len(key) == 1 and key.isprintable():
            if not self.char_limit or len(self.value) < self.char_limit:
                self.value += key
        else:
            return False
        return True

    def render(self) -> str:
        """A prompt followed by the field's text, or its placeholder when empty."""
        text = self.value[-self.width :] if self.width else self.value
        return f"> {text or self.placeholder}"


@dataclass
class AppContext:
    """Settings and side-effect hooks shared by all screens."""

    config: Config = field(default_factory=Config)
    base_dir: Path = field(default_factory=default_base_dir)
    player: Callable[[str, bool], object] = play_sound
    launcher: Callable[[Sequence[str]], object] = launch

    def play(self, sound: str) -> None:
        """Play *sound* if sound effects are enabled."""
        self.player(sound, self.config.sounds_enabled)


class Screen(Protocol):
    """A screen reacts to key names and renders itself as text."""

    def handle_key(self, key: str) -> Screen | Navigation: ...

    def render(self) -> str: ...