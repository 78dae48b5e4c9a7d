"""Screen with auxiliary tools such as tag generation."""

from __future__ import annotations

from ..tagging import TaggingError, generate_tags
from .widgets import AppContext, Navigation, Screen, TextInput

TOOL_ITEMS = ("🏷️ Generate Tags", "⬅️ Back")

GENERATE_MODE = "generate"


class ToolsScreen:
    """Menu of tools and the form for generating tags."""

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.cursor = 0
        self.mode = ""
        self.input_csv = TextInput(placeholder="Path to input CSV", char_limit=128, width=40)
        self.output_yaml = TextInput(
            placeholder="Output YAML file path", char_limit=128, width=40
        )
        self.message = ""

    def _switch_field(self) -> None:
        if self.input_csv.focused:
            self.input_csv.blur()
            self.output_yaml.focus()
        else:
            self.output_yaml.blur()
            self.input_csv.focus()

    def _generate(self) -> None:
        csv_path = self.input_csv.value
        out_path = self.output_yaml.value
        if not csv_path or not out_path:
            return
        config = self.ctx.config
        try:
            generate_tags(csv_path, out_path, config.tagging_format, config.tagging_start)
        except TaggingError as err:
            self.message = f"❌ Failed: {err}"
        else:
            self.message = "✅ Tags generated successfully."
        self.mode = ""

    def _handle_generate_key(self, key: str) -> None:
        if key == "enter":
            self._generate()
        elif key == "esc":
            self.mode = ""
            self.message = ""
        elif key in ("tab", "shift+tab"):
            self._switch_field()
        else:
            self.input_csv.handle_key(key)
            self.output_yaml.handle_key(key)

    def handle_key(self, key: str) -> Screen | Navigation:
        if self.mode == GENERATE_MODE:
            self._handle_generate_key(key)
            return self
        if key in ("up", "k"):
            if self.cursor > 0:
                self.cursor -= 1
        elif key in ("down", "j"):
            if self.cursor < len(TOOL_ITEMS) - 1:
                self.cursor += 1
        elif key == "enter":
            if self.cursor == 0:
                self.mode = GENERATE_MODE
                self.output_yaml.blur()
                self.input_csv.focus()
            else:
                return Navigation.MAIN_MENU
        elif key in ("esc", "q"):
            return Navigation.MAIN_MENU
        return self

    def render(self) -> str:
        if self.mode == GENERATE_MODE:
            return (
                f"🛠 Generate Tags\n\nInput CSV:\n{self.input_csv.render()}\n\n"
                f"Output YAML:\n{self.output_yaml.render()}\n\n"
                f"[enter] Generate • [esc] Cancel\n\n{self.message}"
            )
        parts = ["🧰 Tools\n\n"]
        for index, item in enumerate(TOOL_ITEMS):
            prefix = "👉" if index == self.cursor else "  "
            parts.append(f"{prefix} {item}\n")
        parts.append("\n[↑/↓] Navigate • [Enter] Select • [Esc] Back\n")
        if self.message:
            parts.append(f"\n{self.message}\n")
        return "".join(parts)