"""Load the regulation corpus and normalise it for scoring."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Any

import orjson
from loguru import logger

from .config import PipelineConfig
from .exceptions import DataFormatError
from .io_utils import read_csv_rows, read_jsonl
from .schemas.documents import REQUIRED_FIELDS, Document

_SINGLE_DIGIT_MONTH = re.compile(r"(?<=-)(\d)(?=-)")
_SINGLE_DIGIT_DAY = re.compile(r"(?<=-\d{2}-)(\d)(?!\d)")
_TIME_SUFFIX = re.compile(r"[T ].*$")

_TRUE_VALUES = {"yes", "y", "true", "t", "1"}
_FALSE_VALUES = {"no", "n", "false", "f", "0"}


def read_corpus(path: Path) -> list[dict[str, Any]]:
    """Read raw corpus rows from CSV, JSONL or a JSON array."""
    path = Path(path)
    if not path.exists():
        raise DataFormatError(f"Corpus file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        rows = read_csv_rows(path)
    elif suffix == ".jsonl":
        rows = read_jsonl(path)
    elif suffix == ".json":
        try:
            rows = orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as exc:
            raise DataFormatError(f"Corpus file {path} is not valid JSON: {exc}") from exc
        if not isinstance(rows, list):
            raise DataFormatError(f"Corpus file {path} must contain a JSON array of records.")
    else:
        raise DataFormatError(f"Unsupported corpus format '{suffix}' for {path}")

    logger.info("loader:read | path={} | rows={}", path, len(rows))
    return rows


def normalize_date(value: Any) -> str:
    """Rewrite a date such as ``2018-1-5`` into ``2018-01-05``.

    Separators ``/`` and ``.`` become ``-`` and any time-of-day suffix is
    dropped. The result is not checked against the calendar.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = _TIME_SUFFIX.sub("", str(value).strip())
    text = text.replace("/", "-").replace(".", "-")
    text = _SINGLE_DIGIT_MONTH.sub(r"0\1", text)
    return _SINGLE_DIGIT_DAY.sub(r"0\1", text)


def parse_wordcount(value: Any, reg_id: str | None = None) -> int:
    """Parse a word count that may arrive as text."""
    if isinstance(value, bool):
        raise DataFormatError("Word count must be numeric", reg_id=reg_id, field="wordcount")
    if isinstance(value, int):
        number: float = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError as exc:
            raise DataFormatError(
                f"Word count {value!r} is not numeric", reg_id=reg_id, field="wordcount"
            ) from exc

    if isinstance(number, float) and not number.is_integer():
        raise DataFormatError(
            f"Word count {value!r} is not a whole number", reg_id=reg_id, field="wordcount"
        )
    if number < 0:
        raise DataFormatError(f"Word count {value!r} is negative", reg_id=reg_id, field="wordcount")
    return int(number)


def parse_repealed(value: Any, reg_id: str | None = None) -> bool:
    """Interpret yes/no style repeal flags."""
    if isinstance(value, bool):
        return value
    token = str(value).strip().lower()
    if token in _TRUE_VALUES:
        return True
    if token in _FALSE_VALUES:
        return False
    raise DataFormatError(f"Unrecognised repeal flag {value!r}", reg_id=reg_id, field="repealed")


def _require(record: Mapping[str, Any], field: str, reg_id: str | None) -> Any:
    value = record.get(field)
    if value is None or (field != "full_text" and isinstance(value, str) and not value.strip()):
        raise DataFormatError("Missing required field", reg_id=reg_id, field=field)
    return value


def clean_record(record: Mapping[str, Any], position: int = 0) -> Document:
    """Validate one raw row and convert it into a Document."""
    reg_id = str(_require(record, "reg_id", f"row {position}"))
    repealed = parse_repealed(_require(record, "repealed", reg_id), reg_id)
    wordcount = parse_wordcount(_require(record, "wordcount", reg_id), reg_id)
    last_amended = normalize_date(_require(record, "LastAmendedDate", reg_id))
    full_text = _require(record, "full_text", reg_id)
    if not isinstance(full_text, str):
        raise DataFormatError("Full text must be a string", reg_id=reg_id, field="full_text")

    metadata = {key: value for key, value in record.items() if key not in REQUIRED_FIELDS}
    return Document(
        reg_id=reg_id,
        full_text=full_text.lower(),
        wordcount=wordcount,
        last_amended=last_amended,
        repealed=repealed,
        metadata=metadata,
    )


def clean_corpus(records: Iterable[Mapping[str, Any]], config: PipelineConfig) -> list[Document]:
    """Drop repealed and short regulations and normalise the rest.

    Repealed rows are discarded before their other fields are validated.
    Every surviving row must be well formed; the first bad one aborts the run.
    """
    documents: list[Document] = []
    seen: set[str] = set()
    dropped_repealed = 0
    dropped_short = 0

    for position, record in enumerate(records):
        reg_id = str(_require(record, "reg_id", f"row {position}"))
        if parse_repealed(_require(record, "repealed", reg_id), reg_id):
            dropped_repealed += 1
            continue

        document = clean_record(record, position)
        if config.filter_short and document.wordcount < config.min_wordcount:
            dropped_short += 1
            continue
        if document.reg_id in seen:
            raise DataFormatError("Duplicate regulation identifier", reg_id=document.reg_id, field="reg_id")
        seen.add(document.reg_id)
        documents.append(document)

    logger.info(
        "loader:clean | kept={} | repealed={} | short={} | min_wordcount={}",
        len(documents),
        dropped_repealed,
        dropped_short,
        config.min_wordcount if config.filter_short else None,
    )
    return documents
