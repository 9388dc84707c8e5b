"""Count lexicon phrases in regulation texts."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd
from loguru import logger

from .config import MatchMode
from .exceptions import LexiconLoadError
from .schemas.documents import Document
from .schemas.lexicons import Lexicon
from .schemas.scores import LexiconScore

Matcher = Callable[[str], int]


@dataclass
class PhraseMatrix:
    """Documents x phrases occurrence counts for one lexicon."""

    lexicon: str
    reg_ids: list[str]
    phrases: list[str]
    counts: np.ndarray

    @property
    def raw_counts(self) -> np.ndarray:
        return self.counts.sum(axis=1)

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame(self.counts, index=self.reg_ids, columns=self.phrases)
        frame.index.name = "reg_id"
        return frame


def _word_pattern(phrase: str) -> re.Pattern[str]:
    body = r"\s+".join(re.escape(part) for part in phrase.split())
    return re.compile(rf"(?<!\w){body}(?!\w)")


def _matcher(phrase: str, mode: MatchMode) -> Matcher:
    phrase = phrase.lower()
    if mode == "substring":
        return lambda text: text.count(phrase)

    if mode == "word":
        pattern = _word_pattern(phrase)
    elif mode == "regex":
        try:
            pattern = re.compile(phrase)
        except re.error as exc:
            raise LexiconLoadError(f"Phrase {phrase!r} is not a valid regular expression: {exc}") from exc
    else:
        raise ValueError(f"Unsupported match mode '{mode}'")
    return lambda text: sum(1 for _ in pattern.finditer(text))


def _matchers(lexicon: Lexicon, mode: MatchMode) -> list[Matcher]:
    try:
        return [_matcher(phrase, mode) for phrase in lexicon.phrases]
    except LexiconLoadError as exc:
        raise LexiconLoadError(f"Word list '{lexicon.name}': {exc}") from exc


def count_phrase(text: str, phrase: str, mode: MatchMode = "substring") -> int:
    """Count non-overlapping occurrences of ``phrase`` in ``text``.

    The default ``substring`` mode is literal and ignores word boundaries, so
    "may" is also counted inside "maybe". ``word`` only matches whole words
    and ``regex`` treats the phrase as a regular expression.
    """
    return _matcher(phrase, mode)(text.lower())


def score_document(document: Document, lexicon: Lexicon, mode: MatchMode = "substring") -> LexiconScore:
    """Score one document against one lexicon."""
    text = document.full_text.lower()
    phrase_counts = [match(text) for match in _matchers(lexicon, mode)]
    return LexiconScore(lexicon=lexicon.name, phrase_counts=phrase_counts, raw_count=sum(phrase_counts))


def score_corpus(
    documents: Sequence[Document],
    lexicons: Mapping[str, Lexicon],
    mode: MatchMode = "substring",
) -> dict[str, PhraseMatrix]:
    """Build a phrase matrix per lexicon across the whole corpus."""
    reg_ids = [document.reg_id for document in documents]
    texts = [document.full_text.lower() for document in documents]
    matrices: dict[str, PhraseMatrix] = {}

    for name, lexicon in lexicons.items():
        matchers = _matchers(lexicon, mode)
        counts = np.zeros((len(texts), len(matchers)), dtype=np.int64)
        for row, text in enumerate(texts):
            for column, match in enumerate(matchers):
                counts[row, column] = match(text)

        matrices[name] = PhraseMatrix(
            lexicon=name,
            reg_ids=reg_ids,
            phrases=list(lexicon.phrases),
            counts=counts,
        )
        logger.info(
            "scorer:lexicon | name={} | phrases={} | documents={} | total_hits={}",
            name,
            len(matchers),
            len(texts),
            int(counts.sum()),
        )

    return matrices


def write_phrase_matrix(matrix: PhraseMatrix, path: Path) -> Path:
    """Persist the per-phrase counts for auditing."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    matrix.to_frame().to_csv(path)
    logger.debug("scorer:matrix_written | name={} | path={}", matrix.lexicon, path)
    return path


def matrix_filename(lexicon: str) -> str:
    return f"regulations_data_word_mapping_{lexicon}.csv"
