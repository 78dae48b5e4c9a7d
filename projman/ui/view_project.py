"""Screen that looks up a project by ID and shows its metadata."""

from __future__ import annotations

import yaml

from ..project import Project, read_project_file, validate_id
from .widgets import AppContext, Navigation, Screen, TextInput


class ViewProjectScreen:
    """Prompts for a project ID and displays the project's details."""

    def __init__(self, ctx: AppContext, project: Project | None = None) -> None:
        self.ctx = ctx
        self.input = TextInput(
            placeholder="Enter Project ID", char_limit=32, width=30, focused=True
        )
        self.project = project
        self.error = ""
        self.done = project is not None

    def handle_key(self, key: str) -> Screen | Navigation:
        if key in ("ctrl+c", "esc"):
            return Navigation.MAIN_MENU
        if key == "enter":
            project_id = validate_id(self.input.value)
            if not project_id:
                self.error = "❌ Invalid ID"
                return self
            try:
                self.project = read_project_file(self.ctx.base_dir, project_id)
            except (OSError, ValueError, yaml.YAMLError) as err:
                self.error = f"❌ {err}"
                return self
            self.done = True
            return self
        self.input.handle_key(key)
        return self

    def render(self) -> str:
        if self.done and self.project is not None:
            p = self.project
            return "".join(
                [
                    "🔍 Project Info\n\n",
                    f"ID:          {p.id}\n",
                    f"Name:        {p.name}\n",
                    f"Description: {p.description}\n",
                    f"Status:      {p.status}\n",
                    f"Tags:        {', '.join(p.tags)}\n",
                    f"Created At:  {p.created_at}\n",
                    f"Path:        {p.path}\n",
                    "\n[esc] Back to menu",
                ]
            )
        return (
            f"🔍 View Project Status\n\n{self.input.render()}\n\n"
            f"[enter] Lookup • [esc] Cancel\n{self.error}"
        )