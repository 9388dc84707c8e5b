"""Convert raw counts into per-100-word indices and composite scores."""

from __future__ import annotations

from collections.abc import Mapping

from .exceptions import DivisionUndefined
from .schemas.documents import Document
from .schemas.scores import LexiconScore, ScoreRecord

# Fixed smoothing for the prescriptivity ratio.
_COUNT_SMOOTHING = 1
_WORDCOUNT_SMOOTHING = 2


def per_100_words(raw_count: int, wordcount: int, reg_id: str | None = None) -> float:
    """Occurrences per 100 words."""
    if wordcount == 0:
        raise DivisionUndefined("Cannot normalise against a zero word count", reg_id=reg_id, field="wordcount")
    return raw_count / (wordcount / 100)


def prescriptivity_score(prescriptions_raw: int, permissions_raw: int, wordcount: int) -> float:
    """Smoothed ratio of the prescriptions index to the permissions index."""
    scale = (wordcount + _WORDCOUNT_SMOOTHING) / 100
    prescriptions = (prescriptions_raw + _COUNT_SMOOTHING) / scale
    permissions = (permissions_raw + _COUNT_SMOOTHING) / scale
    return prescriptions / permissions


def normalize_scores(document: Document, scores: Mapping[str, LexiconScore]) -> ScoreRecord:
    """Attach indices to each lexicon score and compute the prescriptivity ratio."""
    normalized = {
        name: score.model_copy(
            update={"index": per_100_words(score.raw_count, document.wordcount, document.reg_id)}
        )
        for name, score in scores.items()
    }

    prescriptivity = None
    if "prescriptions" in normalized and "permissions" in normalized:
        prescriptivity = prescriptivity_score(
            normalized["prescriptions"].raw_count,
            normalized["permissions"].raw_count,
            document.wordcount,
        )

    return ScoreRecord(reg_id=document.reg_id, scores=normalized, prescriptivity=prescriptivity)
