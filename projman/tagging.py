"""Generating tag identifiers from a CSV list of items."""

from __future__ import annotations

import csv
import os
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass

import yaml

from .config import DEFAULT_TAGGING_FORMAT


class TaggingError(Exception):
    """Raised when tags cannot be generated."""


@dataclass
class TagAssignment:
    """A generated tag identifier and the item it belongs to."""

    id: str
    category: str
    subcat: str
    name: str


def build_assignments(
    rows: Iterable[Sequence[str]], tag_format: str = DEFAULT_TAGGING_FORMAT, start: int = 1
) -> list[TagAssignment]:
    """Number (category, subcat, name) rows from *start* per category pair, skipping short rows."""
    if not tag_format:
        raise TaggingError("missing tag format in env")
    counter: Counter[str] = Counter()
    assignments = []
    for row in rows:
        if len(row) < 3:
            continue
        category, subcat, name = (cell.strip() for cell in row[:3])
        counter[f"{category}-{subcat}"] += 1
        number = start + counter[f"{category}-{subcat}"] - 1
        tag_id = (
            tag_format.replace("{category}", category)
            .replace("{subcat}", subcat)
            .replace("{id}", f"{number:02d}")
        )
        assignments.append(TagAssignment(tag_id, category, subcat, name))
    return assignments


def generate_tags(
    csv_path: str | os.PathLike,
    output_path: str | os.PathLike,
    tag_format: str = DEFAULT_TAGGING_FORMAT,
    start: int = 1,
) -> list[TagAssignment]:
    """Read items from *csv_path* (first row is a header) and write tags as YAML."""
    if not tag_format:
        raise TaggingError("missing tag format in env")
    try:
        with open(csv_path, newline="", encoding="utf-8") as handle:
            records = [row for row in csv.reader(handle, strict=True) if row]
    except OSError as err:
        raise TaggingError(f"open csv: {err}") from err
    except csv.Error as err:
        raise TaggingError(f"read csv: {err}") from err
    if any(len(row) != len(records[0]) for row in records):
        raise TaggingError("read csv: wrong number of fields")
    assignments = build_assignments(records[1:], tag_format, start)
    text = yaml.safe_dump([asdict(a) for a in assignments], sort_keys=False, allow_unicode=True)
    try:
        with open(output_path, "w", encoding="utf-8") as out:
            out.write(text)
    except OSError as err:
        raise TaggingError(f"write output: {err}") from err
    return assignments