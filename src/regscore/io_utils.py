"""Utilities for reading and writing JSONL and CSV pipeline artifacts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import orjson
import pandas as pd


def _coerce_path(path: str | Path) -> Path:
    """Convert input to a Path."""
    if isinstance(path, Path):
        return path
    return Path(path)


def write_jsonl(path: str | Path, rows: Iterable[Mapping[str, Any]]) -> None:
    """Write an iterable of mappings to JSON Lines format."""
    resolved_path = _coerce_path(path)
    resolved_path.parent.mkdir(parents=True, exist_ok=True)

    with resolved_path.open("wb") as handle:
        for row in rows:
            handle.write(orjson.dumps(dict(row), option=orjson.OPT_SERIALIZE_NUMPY))
            handle.write(b"\n")


def read_jsonl(path: str | Path) -> list[dict[str, Any]]:
    """Read a JSON Lines file into a list of dictionaries."""
    resolved_path = _coerce_path(path)
    with resolved_path.open("rb") as handle:
        return [orjson.loads(line) for line in handle if line.strip()]


def read_csv_rows(path: str | Path) -> list[dict[str, Any]]:
    """Read a CSV file as string-valued rows; empty cells stay empty strings."""
    frame = pd.read_csv(_coerce_path(path), dtype=str, keep_default_na=False)
    return frame.to_dict(orient="records")


def write_table(path: str | Path, frame: pd.DataFrame) -> None:
    """Write a DataFrame as CSV or JSONL depending on the file suffix."""
    resolved_path = _coerce_path(path)
    resolved_path.parent.mkdir(parents=True, exist_ok=True)

    if resolved_path.suffix.lower() == ".jsonl":
        write_jsonl(resolved_path, frame.to_dict(orient="records"))
    else:
        frame.to_csv(resolved_path, index=False)
