"""Playing short sound effects through the platform's audio tool."""

from __future__ import annotations

import subprocess
import sys


def sound_command(path: str, platform: str) -> list[str] | None:
    """The command that plays *path* on *platform*, or None if unsupported."""
    if platform.startswith("linux"):
        return ["aplay", path]
    if platform == "darwin":
        return ["afplay", path]
    if platform == "win32":
        return ["powershell", "-c", f"(New-Object Media.SoundPlayer '{path}').PlaySync();"]
    return None


def play_sound(path: str, enabled: bool) -> bool:
    """Start playing *path* in the background; return whether a player started."""
    command = sound_command(path, sys.platform) if enabled else None
    if command is None:
        return False
    try:
        subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError:
        return False
    return True