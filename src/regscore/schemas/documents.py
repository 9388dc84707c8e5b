"""Schemas for regulation document records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ("reg_id", "full_text", "wordcount", "LastAmendedDate", "repealed")


class Document(BaseModel):
    """Cleaned regulation ready for scoring."""

    model_config = ConfigDict(frozen=True)

    reg_id: str = Field(..., description="Unique identifier for the regulation.")
    full_text: str = Field(..., description="Case-folded full text.")
    wordcount: int = Field(..., ge=0, description="Number of words in the regulation.")
    last_amended: str = Field(..., description="Last amendment date as YYYY-MM-DD.")
    repealed: bool = Field(default=False, description="Whether the regulation has been repealed.")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional input columns carried through to the output, in input order.",
    )

    def to_record(self) -> dict[str, Any]:
        """Return the document in the raw corpus column layout."""
        record = dict(self.metadata)
        record.update(
            {
                "reg_id": self.reg_id,
                "full_text": self.full_text,
                "wordcount": self.wordcount,
                "LastAmendedDate": self.last_amended,
                "repealed": "yes" if self.repealed else "no",
            }
        )
        return record
