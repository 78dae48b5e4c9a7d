"""Form for creating a new project."""

from __future__ import annotations

from ..project import Params, create_project, validate_id
from .widgets import AppContext, Navigation, Screen, TextInput

FIELDS = ("Project ID", "Project Name", "Description", "Tags (comma-separated)")


class CreateProjectScreen:
    """Collects project details and creates the project on submit."""

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.inputs = [TextInput(placeholder=name, char_limit=100, width=40) for name in FIELDS]
        self.inputs[0].focus()
        self.focused_index = 0
        self.done = False
        self.message = ""

    def _move_focus(self, step: int) -> None:
        self.inputs[self.focused_index].blur()
        self.focused_index = (self.focused_index + step) % len(self.inputs)
        self.inputs[self.focused_index].focus()

    def _submit(self) -> None:
        id_field, name_field, desc_field, tags_field = self.inputs
        project_id = validate_id(id_field.value)
        name = name_field.value
        if not project_id or not name:
            self.message = "❌ ID and Name are required"
            return
        params = Params(
            id=project_id,
            name=name,
            description=desc_field.value,
            tags=tags_field.value,
            status="active",
        )
        try:
            create_project(self.ctx.base_dir, params)
        except OSError as err:
            self.message = f"❌ {err}"
            return
        self.done = True
        self.message = f"✅ Project {project_id} created!"

    def handle_key(self, key: str) -> Screen | Navigation:
        if key in ("ctrl+c", "esc"):
            return Navigation.MAIN_MENU
        if key == "enter":
            if self.focused_index == len(self.inputs) - 1:
                self._submit()
            else:
                self._move_focus(1)
            return self
        if key in ("tab", "down"):
            self._move_focus(1)
        elif key in ("shift+tab", "up"):
            self._move_focus(-1)
        for field in self.inputs:
            field.handle_key(key)
        return self

    def render(self) -> str:
        if self.done:
            return f"{self.message}\n\n[esc] Back to menu"
        parts = ["🆕 Create New Project\n\n"]
        parts.extend(f"{field.render()}\n" for field in self.inputs)
        parts.append("\n[tab] to switch • [enter] to submit • [esc] cancel\n")
        if self.message:
            parts.append(f"\n{self.message}\n")
        return "".join(parts)