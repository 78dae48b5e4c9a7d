"""Browsable, searchable list of projects."""

from __future__ import annotations

from collections.abc import Iterable

from ..project import Project, discover_projects
from .project_submenu import ProjectSubmenuScreen
from .widgets import AppContext, Navigation, Screen, TextInput


def filter_projects(projects: Iterable[Project], query: str) -> list[Project]:
    """Projects whose ID contains *query*, ignoring case."""
    if not query:
        return list(projects)
    needle = query.upper()
    return [p for p in projects if needle in p.id.upper()]


class ProjectListScreen:
    """Lists the projects in the base directory."""

    def __init__(self, ctx: AppContext, projects: list[Project] | None = None) -> None:
        self.ctx = ctx
        if projects is None:
            try:
                projects = discover_projects(ctx.base_dir)
            except OSError:
                projects = []
        self.all = list(projects)
        self.filtered = list(self.all)
        self.search_bar = TextInput(placeholder="Search Project ID...", char_limit=30, width=30)
        self.searching = False
        self.cursor = 0

    def handle_key(self, key: str) -> Screen | Navigation:
        if self.searching:
            if key == "esc":
                self.searching = False
                self.search_bar.blur()
                self.filtered = list(self.all)
                self.cursor = 0
            else:
                self.search_bar.handle_key(key)
                self.filtered = filter_projects(self.all, self.search_bar.value)
                if self.cursor >= len(self.filtered):
                    self.cursor = 0
                return self

        if key == "ctrl+f":
            self.searching = True
            self.search_bar.focus()
        elif key in ("ctrl+c", "q", "esc", "b"):
            return Navigation.MAIN_MENU
        elif key in ("up", "k"):
            if self.cursor > 0:
                self.cursor -= 1
                self.ctx.play(self.ctx.config.nav_up_sound)
        elif key in ("down", "j"):
            if self.cursor < len(self.filtered) - 1:
                self.cursor += 1
                self.ctx.play(self.ctx.config.nav_down_sound)
        elif key in ("enter", " "):
            if self.filtered:
                self.ctx.play(self.ctx.config.select_sound)
                return ProjectSubmenuScreen(self.ctx, self.filtered[self.cursor])
        return self

    def render(self) -> str:
        parts = ["📋 Project List\n\n"]
        if self.searching:
            parts.append(f"🔍 {self.search_bar.render()}\n\n")
        if not self.filtered:
            parts.append("📭 No projects found.\n\n[esc] Back\n")
            return "".join(parts)
        for index, p in enumerate(self.filtered):
            prefix = "👉" if index == self.cursor else "  "
            parts.append(f"{prefix} {p.id:<10}  {p.name:<25}  {p.status:<10}\n")
        parts.append(
            "\n[↑/↓] Navigate • [ctrl+f] Search • [enter/Spacebar] Select • [esc/b] Back/Cancel\n"
        )
        return "".join(parts)