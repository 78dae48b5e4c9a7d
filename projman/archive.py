"""Packing a project folder into a zip archive."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path


def zip_project_folder(source_dir: str | os.PathLike, dest_zip: str | os.PathLike) -> None:
    """Write every file under *source_dir* into *dest_zip*, named relative to it."""
    source = Path(source_dir)
    with zipfile.ZipFile(dest_zip, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        if not source.exists():
            raise FileNotFoundError(f"no such directory: {source}")
        for path in sorted(source.rglob("*")):
            if path.is_file():
                archive.write(path, path.relative_to(source).as_posix())