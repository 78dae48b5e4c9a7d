"""Screen for changing user settings."""

from __future__ import annotations

from .widgets import AppContext, Navigation, Screen

SETTINGS_ITEMS = ("Enable Sound Effects", "Back to Menu")


class SettingsScreen:
    """Toggles for the user-adjustable settings."""

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.cursor = 0
        self.toggles = [ctx.config.sounds_enabled]

    def handle_key(self, key: str) -> Screen | Navigation:
        if key in ("ctrl+c", "esc"):
            return Navigation.MAIN_MENU
        if key in ("up", "k"):
            if self.cursor > 0:
                self.cursor -= 1
        elif key in ("down", "j"):
            if self.cursor < len(SETTINGS_ITEMS) - 1:
                self.cursor += 1
        elif key == "enter":
            if self.cursor == 0:
                self.toggles[0] = not self.toggles[0]
                self.ctx.config.sounds_enabled = self.toggles[0]
            elif self.cursor == 1:
                return Navigation.MAIN_MENU
        return self

    def render(self) -> str:
        parts = ["⚙️ Settings\n\n"]
        for index, item in enumerate(SETTINGS_ITEMS):
            prefix = "👉" if index == self.cursor else "  "
            value = ""
            if index == 0:
                value = "✅ On" if self.toggles[0] else "❌ Off"
            parts.append(f"{prefix} {item} {value}\n")
        parts.append("\n[↑/↓] Navigate • [Enter] Toggle/Select • [Esc] Back\n")
        return "".join(parts)