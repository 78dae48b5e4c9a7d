"""Main menu and the application loop that drives the screens."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Iterator
from enum import IntEnum
from typing import TextIO

from ..config import ConfigError, config_path, load_config
from .create_project import CreateProjectScreen
from .project_list import ProjectListScreen
from .settings import SettingsScreen
from .tools import ToolsScreen
from .view_project import ViewProjectScreen
from .widgets import AppContext, Navigation, Screen


class MenuOption(IntEnum):
    """Entries of the main menu, in display order."""

    LIST_PROJECTS = 0
    CREATE_PROJECT = 1
    VIEW_PROJECT = 2
    ARCHIVE_PROJECT = 3
    TOOLS = 4
    SETTINGS = 5
    QUIT = 6


MENU_ITEMS = {
    MenuOption.LIST_PROJECTS: "📋 Projects",
    MenuOption.CREATE_PROJECT: "🆕 Create New Project",
    MenuOption.VIEW_PROJECT: "🔍 View Project Status",
    MenuOption.ARCHIVE_PROJECT: "📦 Archive Project",
    MenuOption.TOOLS: "🧰 Tools",
    MenuOption.SETTINGS: "⚙️ Settings",
    MenuOption.QUIT: "❌ Quit",
}

_SCREENS = {
    MenuOption.LIST_PROJECTS: ProjectListScreen,
    MenuOption.CREATE_PROJECT: CreateProjectScreen,
    MenuOption.VIEW_PROJECT: ViewProjectScreen,
    MenuOption.TOOLS: ToolsScreen,
    MenuOption.SETTINGS: SettingsScreen,
}


class MainMenuScreen:
    """The top-level menu."""

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.cursor = 0
        self.notice = ""

    def handle_key(self, key: str) -> Screen | Navigation:
        if key in ("ctrl+c", "q"):
            return Navigation.QUIT
        if key in ("up", "k"):
            self.cursor = max(0, self.cursor - 1)
        elif key in ("down", "j"):
            self.cursor = min(len(MENU_ITEMS) - 1, self.cursor + 1)
        elif key in ("enter", " "):
            option = MenuOption(self.cursor)
            if option in _SCREENS:
                return _SCREENS[option](self.ctx)
            if option is not MenuOption.QUIT:
                self.notice = f"⏳ Selected: {MENU_ITEMS[option]} (functionality not available yet)"
            return Navigation.QUIT
        return self

    def render(self) -> str:
        lines = "".join(f"{'👉' if option == self.cursor else ' '} {item}\n" for option, item in MENU_ITEMS.items())
        return "🛠 Projman\n\nUse ↑/↓ to navigate and [Enter] to select\n\n" + lines


_KEYS = {
    "\x1b[A": "up", "\x1b[B": "down", "\x1b[C": "right", "\x1b[D": "left", "\x1b[Z": "shift+tab",
    "\r": "enter", "\n": "enter", "\t": "tab", "\x7f": "backspace", "\x1b": "esc",
}


def _decode_keys(chunk: str) -> Iterator[str]:
    """Translate raw terminal input into key names."""
    while chunk:
        seq = next((s for s in _KEYS if len(s) == 3 and chunk.startswith(s)), chunk[0])
        chunk = chunk[len(seq) :]
        if seq in _KEYS:
            yield _KEYS[seq]
        elif 1 <= ord(seq) <= 26:
            yield "ctrl+" + chr(ord("a") + ord(seq) - 1)
        else:
            yield seq


class App:
    """Runs the screens, switching between them as keys are pressed."""

    def __init__(
        self, ctx: AppContext | None = None, keys: Iterable[str] | None = None, out: TextIO | None = None
    ) -> None:
        self.ctx = ctx or AppContext()
        self.keys = keys
        self.out = out or sys.stdout
        self.screen: Screen = MainMenuScreen(self.ctx)
        self.running = True
        self.notice = ""

    def dispatch(self, key: str) -> bool:
        """Send *key* to the current screen; return whether the app keeps running."""
        result = self.screen.handle_key(key)
        if result is Navigation.QUIT:
            self.notice = self.screen.notice if isinstance(self.screen, MainMenuScreen) else ""
            self.running = False
        elif result is Navigation.MAIN_MENU:
            self.screen = MainMenuScreen(self.ctx)
        else:
            self.screen = result
        return self.running

    def render(self) -> str:
        return self.screen.render()

    def _drive(self, keys: Iterable[str], raw: bool) -> None:
        for key in [None, *keys]:
            if key is not None and not self.dispatch(key):
                break
            text = self.render()
            self.out.write("\x1b[H\x1b[2J" + text.replace("\n", "\r\n") if raw else text + "\n")
            self.out.flush()

    def run(self) -> None:
        """Process keys until the user quits or input ends."""
        if self.keys is not None:
            self._drive(self.keys, raw=False)
        elif os.name == "posix" and sys.stdin.isatty():
            import termios
            import tty

            fd = sys.stdin.fileno()
            saved = termios.tcgetattr(fd)
            tty.setraw(fd)
            try:
                self._drive((k for data in iter(lambda: os.read(fd, 64), b"")
                             for k in _decode_keys(data.decode("utf-8", "ignore"))), raw=True)
                self.out.write("\r\n")
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        else:
            self._drive((line.rstrip("\r\n") for line in sys.stdin if line.strip("\r\n")), raw=False)
        if self.notice:
            print(self.notice, file=self.out)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive project manager."""
    parser = argparse.ArgumentParser(prog="projman", description="Manage project folders.")
    parser.add_argument("--config", default=str(config_path("")), help="path to the configuration file")
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as err:
        print(err, file=sys.stderr)
        return 1
    App(AppContext(config=config)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())