"""Folder layout presets stored as YAML files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

log = logging.getLogger(__name__)


@dataclass
class Preset:
    """A named list of folders to create in a project."""

    name: str = ""
    folders: list[str] = field(default_factory=list)


def available_presets(directory: str | os.PathLike) -> list[str]:
    """Names of the YAML presets in *directory*, without their extension."""
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as err:
        log.warning("failed to read preset directory: %s", err)
        return []
    return [entry.name.split(".")[0] for entry in entries if ".yaml" in entry.name]


def load_preset(directory: str | os.PathLike, name: str) -> Preset:
    """Read the preset *name* from *directory*."""
    path = Path(directory) / f"{name}.yaml"
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: preset is not a mapping")
    folders = data.get("folders") or []
    return Preset(
        name=str(data.get("name") or ""),
        folders=[str(folder) for folder in folders],
    )