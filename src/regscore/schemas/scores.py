"""Schemas for per-document scoring results."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LexiconScore(BaseModel):
    """Counts for one document against one lexicon."""

    lexicon: str = Field(..., description="Name of the scored lexicon.")
    phrase_counts: list[int] = Field(..., description="Occurrences per phrase, in lexicon order.")
    raw_count: int = Field(..., ge=0, description="Sum of all phrase occurrences.")
    index: Optional[float] = Field(
        default=None, description="Occurrences per 100 words; filled by the normalizer."
    )


class ScoreRecord(BaseModel):
    """All derived metrics for one document."""

    reg_id: str = Field(..., description="Identifier of the scored document.")
    scores: dict[str, LexiconScore] = Field(..., description="Lexicon name to its score.")
    prescriptivity: Optional[float] = Field(
        default=None, description="Smoothed ratio of prescriptions to permissions."
    )
    age_days: Optional[int] = Field(
        default=None, description="Days between the last amendment and the reference date."
    )

    def raw(self, lexicon: str) -> int:
        return self.scores[lexicon].raw_count
