"""Actions available for a single selected project."""

from __future__ import annotations

import sys
from contextlib import suppress

from ..archive import zip_project_folder
from ..project import Project
from .view_project import ViewProjectScreen
from .widgets import AppContext, Navigation, Screen

SUBMENU_ITEMS = ("View Status", "Archive Project", "Open Folder", "Back")


def open_folder_command(path: str, platform: str) -> list[str]:
    """The command that opens *path* in the file manager on *platform*."""
    if platform == "darwin":
        return ["open", path]
    if platform == "win32":
        return ["explorer", path]
    return ["xdg-open", path]


class ProjectSubmenuScreen:
    """Menu of actions for one project."""

    def __init__(self, ctx: AppContext, project: Project) -> None:
        self.ctx = ctx
        self.project = project
        self.choice = 0

    def handle_key(self, key: str) -> Screen | Navigation:
        sounds = self.ctx.config
        if key in ("up", "k"):
            self.ctx.play(sounds.nav_up_sound)
            if self.choice > 0:
                self.choice -= 1
        elif key in ("down", "j"):
            self.ctx.play(sounds.nav_down_sound)
            if self.choice < len(SUBMENU_ITEMS) - 1:
                self.choice += 1
        elif key == "enter":
            self.ctx.play(sounds.select_sound)
            return self._activate()
        elif key in ("esc", "q"):
            self.ctx.play(sounds.error_sound)
            return Navigation.MAIN_MENU
        return self

    def _activate(self) -> Screen | Navigation:
        path = self.project.path
        if self.choice == 0:
            return ViewProjectScreen(self.ctx, self.project)
        if self.choice == 1:
            with suppress(OSError):
                zip_project_folder(path, path + ".zip")
            return Navigation.MAIN_MENU
        if self.choice == 2:
            self.ctx.play(self.ctx.config.confirm_sound)
            self.ctx.launcher(open_folder_command(path, sys.platform))
            return Navigation.MAIN_MENU
        self.ctx.play(self.ctx.config.error_sound)
        return Navigation.MAIN_MENU

    def render(self) -> str:
        lines = [f"Project: {self.project.id} - {self.project.name}", ""]
        for index, item in enumerate(SUBMENU_ITEMS):
            prefix = "👉" if index == self.choice else "  "
            lines.append(f"{prefix} {item}")
        lines.append("")
        lines.append("[↑/↓] Navigate • [Enter] Select • [Esc] Cancel")
        return "\n".join(lines) + "\n"