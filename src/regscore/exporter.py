"""Flatten scored documents into the output table."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from loguru import logger

from .config import LEXICON_SPECS
from .io_utils import write_table
from .schemas.documents import Document
from .schemas.scores import ScoreRecord

PRESCRIPTIVITY_COLUMN = "PRESCRIPTIVITY_Index"
AGE_COLUMN = "AGE_DaysLastModified"


def metric_columns() -> list[str]:
    """Metric columns in output order, grouped by dimension."""
    columns: list[str] = []
    dimensions: dict[str, list[str]] = {}
    for name, dimension, _ in LEXICON_SPECS:
        dimensions.setdefault(dimension, []).append(f"{dimension}_{name}")

    for dimension, stems in dimensions.items():
        columns.extend(f"{stem}_RawCount" for stem in stems)
        columns.extend(f"{stem}_Index" for stem in stems)
        if dimension == "PRESCRIPTIVITY":
            columns.append(PRESCRIPTIVITY_COLUMN)
        elif dimension == "AGE":
            columns.append(AGE_COLUMN)
    return columns


def _row(document: Document, record: ScoreRecord) -> dict[str, object]:
    row: dict[str, object] = {"reg_id": document.reg_id}
    row.update(document.metadata)
    row["LastAmendedDate"] = document.last_amended
    row["wordcount"] = document.wordcount
    row["repealed"] = "yes" if document.repealed else "no"

    for name, dimension, _ in LEXICON_SPECS:
        score = record.scores.get(name)
        if score is None:
            continue
        row[f"{dimension}_{name}_RawCount"] = score.raw_count
        row[f"{dimension}_{name}_Index"] = score.index
    row[PRESCRIPTIVITY_COLUMN] = record.prescriptivity
    row[AGE_COLUMN] = record.age_days
    return row


def build_table(documents: Sequence[Document], records: Sequence[ScoreRecord]) -> pd.DataFrame:
    """One row per document, without the full text."""
    by_id = {record.reg_id: record for record in records}
    rows = [_row(document, by_id[document.reg_id]) for document in documents]
    frame = pd.DataFrame(rows)
    if frame.empty:
        return pd.DataFrame(
            columns=["reg_id", "LastAmendedDate", "wordcount", "repealed", *metric_columns()]
        )

    metrics = metric_columns()
    leading = [column for column in frame.columns if column not in metrics]
    trailing = [column for column in metrics if column in frame.columns]
    return frame[leading + trailing]


def export_table(frame: pd.DataFrame, path: Path) -> Path:
    """Write the analysis table as CSV or JSONL."""
    path = Path(path)
    write_table(path, frame)
    logger.info("exporter:write | path={} | rows={} | columns={}", path, len(frame), len(frame.columns))
    return path


def summarize(frame: pd.DataFrame) -> pd.DataFrame:
    """Corpus-level statistics for every metric column."""
    present = [column for column in metric_columns() if column in frame.columns]
    if not present or frame.empty:
        return pd.DataFrame(columns=["count", "mean", "std", "min", "max"])
    stats = frame[present].astype(float).describe().T
    return stats[["count", "mean", "std", "min", "max"]]
