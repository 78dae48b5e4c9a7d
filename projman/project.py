"""Project metadata, creation and listing."""

from __future__ import annotations

import logging
import os
import re
import sys
from dataclasses import asdict, dataclass, field, fields
from datetime import date
from pathlib import Path
from typing import Any, TextIO

import yaml

log = logging.getLogger(__name__)

PROJECT_FILE = "project.yaml"
DEFAULT_DIRS = ("Docs", "Planning", "Logs", "Exports")

_INVALID_ID_CHARS = re.compile(r"[^A-Z0-9\-]")


class ProjectExistsError(FileExistsError):
    """Raised when a project directory already exists."""


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value.isoformat() if isinstance(value, date) else str(value)


@dataclass
class Project:
    """Metadata stored in a project's ``project.yaml``."""

    id: str = ""
    name: str = ""
    status: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: str = ""
    description: str = ""
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        values = {f.name: _as_text(data.get(f.name)) for f in fields(cls) if f.name != "tags"}
        return cls(tags=[_as_text(t) for t in data.get("tags") or []], **values)


@dataclass
class Params:
    """User input describing a project to create."""

    id: str = ""
    name: str = ""
    description: str = ""
    status: str = ""
    tags: str = ""


def timestamp() -> str:
    """Current local time in RFC 3339 form."""
    from datetime import datetime

    stamp = datetime.now().astimezone().replace(microsecond=0).isoformat()
    return stamp[:-6] + "Z" if stamp.endswith("+00:00") else stamp


def validate_id(project_id: str) -> str:
    """Upper-case *project_id* and drop everything but A-Z, 0-9 and '-'."""
    return _INVALID_ID_CHARS.sub("", project_id.upper())


def clean_tags(tags: str) -> list[str]:
    """Split a comma-separated tag string, dropping blank entries."""
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def read_project_file(base_dir: str | os.PathLike, project_id: str) -> Project:
    """Read the metadata of project *project_id* under *base_dir*."""
    path = Path(base_dir) / validate_id(project_id) / PROJECT_FILE
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: project file is not a mapping")
    return Project.from_dict(data)


def write_project_file(project: Project) -> None:
    """Write *project* to ``project.yaml`` inside its own directory."""
    text = yaml.safe_dump(project.to_dict(), sort_keys=False, allow_unicode=True)
    (Path(project.path) / PROJECT_FILE).write_text(text, encoding="utf-8")


def default_base_dir() -> Path:
    """The default projects directory, ``~/Projects``."""
    return Path.home() / "Projects"


def create_project(base_dir: str | os.PathLike, params: Params) -> Project:
    """Create a project directory with its default folders and metadata."""
    project_id = validate_id(params.id)
    path = Path(base_dir) / project_id
    if path.exists():
        raise ProjectExistsError(f"Project {project_id} already exists")
    for name in DEFAULT_DIRS:
        (path / name).mkdir(parents=True, exist_ok=True)
    project = Project(
        id=project_id,
        name=params.name,
        description=params.description,
        status=params.status,
        tags=clean_tags(params.tags),
        created_at=timestamp(),
        path=str(path),
    )
    write_project_file(project)
    return project


def discover_projects(base_dir: str | os.PathLike, skip_archive: bool = False) -> list[Project]:
    """Read every valid, non-hidden project under *base_dir*, in name order."""
    projects = []
    for entry in sorted(os.scandir(base_dir), key=lambda e: e.name):
        if not entry.is_dir() or entry.name.startswith(".") or (skip_archive and entry.name == "Archive"):
            continue
        try:
            projects.append(read_project_file(base_dir, entry.name))
        except (OSError, ValueError, yaml.YAMLError) as err:
            log.warning("Skipping %s: %s", entry.name, err)
    return projects


def _row(*cells: str) -> str:
    return " ".join(f"{cell:<{width}}" for cell, width in zip(cells, (12, 25, 10, 20)))


def list_projects(base_dir: str | os.PathLike, out: TextIO | None = None) -> None:
    """Print a table of the projects under *base_dir*."""
    out = out or sys.stdout
    projects = discover_projects(base_dir, skip_archive=True)
    print(_row("ID", "Name", "Status", "Created"), file=out)
    print("-" * 70, file=out)
    for p in projects:
        print(_row(p.id, p.name, p.status, p.created_at), file=out)
    if not projects:
        print("📭 No valid projects found.", file=out)


def show_status(base_dir: str | os.PathLike, project_id: str, out: TextIO | None = None) -> None:
    """Print the full metadata of one project."""
    p = read_project_file(base_dir, project_id)
    print(
        f"󱖫 Project Status\n{'=' * 50}\n"
        f"ID:          {p.id}\nName:        {p.name}\nDescription: {p.description}\n"
        f"Status:      {p.status}\nCreated At:  {p.created_at}\n"
        f"Tags:        {', '.join(p.tags)}\nPath:        {p.path}\n{'=' * 50}",
        file=out or sys.stdout,
    )