"""Synthetic regulation corpus and starter word lists."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TypeVar

import pandas as pd

from .config import LEXICON_SPECS
from .io_utils import write_jsonl
from .lexicons import WORDS_COLUMN

DEFAULT_WORDLISTS: dict[str, list[str]] = {
    "prescriptions": ["shall", "must", "is required to", "is prohibited", "shall not"],
    "permissions": ["may", "is permitted to", "is entitled to", "is authorized to"],
    "exceptions": ["except", "unless", "exempt", "notwithstanding", "does not apply"],
    "discretions": ["in the opinion of", "if the minister considers", "reasonable", "satisfied that"],
    "legal_jargon": ["hereby", "thereof", "herein", "pursuant to", "aforementioned", "whereas"],
    "cross_referencing": ["subsection", "paragraph", "section", "schedule", "within the meaning of"],
    "outdated_words": ["fax", "telex", "pencil", "typewriter", "telegram", "facsimile"],
}

SUBJECTS = ["the licensee", "every operator", "the applicant", "a carrier", "the holder of a permit"]
ACTIONS = [
    "keep records of every shipment",
    "submit an annual report",
    "notify the minister in writing",
    "maintain the equipment in good repair",
    "display the certificate at the premises",
]

TEMPLATES = {
    "prescription": [
        "{subject} shall {action}.",
        "{subject} must {action} within thirty days.",
        "{subject} is required to {action}.",
    ],
    "permission": [
        "{subject} may {action}.",
        "{subject} is permitted to {action} by fax or telex.",
        "{subject} is entitled to {action} once each year.",
    ],
    "exception": [
        "subsection 2 does not apply unless {subject} is exempt.",
        "notwithstanding section 4, {subject} is not required to {action}.",
    ],
    "discretion": [
        "if the minister considers it reasonable, {subject} may {action}.",
        "where the board is satisfied that {subject} can {action}, it may issue a permit.",
    ],
    "jargon": [
        "the provisions hereby set out apply to the holder thereof.",
        "pursuant to the schedule herein, {subject} shall {action}.",
    ],
}

TITLES = ["Transport Safety", "Food Labelling", "Fisheries Licensing", "Radio Equipment", "Customs Tariff"]

T = TypeVar("T")


def _pick(rng: random.Random, items: Sequence[T]) -> T:
    return rng.choice(items)


def _generate_text(rng: random.Random, sentences: int) -> str:
    parts = []
    for _ in range(sentences):
        kind = _pick(rng, list(TEMPLATES.keys()))
        template = _pick(rng, TEMPLATES[kind])
        parts.append(template.format(subject=_pick(rng, SUBJECTS), action=_pick(rng, ACTIONS)))
    text = " ".join(parts)
    return text[0].upper() + text[1:]


def _regulation_records(count: int, seed: int) -> Iterator[dict[str, str]]:
    rng = random.Random(seed)

    for idx in range(1, count + 1):
        # Occasional one-sentence regulations fall under the default word filter.
        sentences = 1 if rng.random() < 0.1 else rng.randint(12, 30)
        text = _generate_text(rng, sentences)
        year = rng.randint(1978, 2018)
        yield {
            "reg_id": f"SOR-{year}-{idx:04d}",
            "title": f"{_pick(rng, TITLES)} Regulations",
            "full_text": text,
            "wordcount": str(len(text.split())),
            "LastAmendedDate": f"{year}-{rng.randint(1, 12)}-{rng.randint(1, 28)}",
            "repealed": "yes" if rng.random() < 0.1 else "no",
        }


def generate_corpus(output_path: Path, count: int, seed: int = 13) -> None:
    """Write ``count`` synthetic regulation records as JSONL."""
    if count < 0:
        raise ValueError("count must be non-negative")
    write_jsonl(output_path, _regulation_records(count=count, seed=seed))


def write_default_wordlists(directory: Path) -> list[Path]:
    """Write starter ``words`` CSV files for the seven lexicons."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for name, _, filename in LEXICON_SPECS:
        path = directory / filename
        pd.DataFrame({WORDS_COLUMN: DEFAULT_WORDLISTS[name]}).to_csv(path, index=False)
        written.append(path)
    return written
