"""Schema for word lists."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Lexicon(BaseModel):
    """Named, ordered list of phrases scored against each document."""

    name: str = Field(..., description="Lexicon name, e.g. 'prescriptions'.")
    dimension: str = Field(..., description="Dimension the lexicon contributes to.")
    phrases: list[str] = Field(..., description="Lower-cased phrases in file order.")

    @property
    def column_stem(self) -> str:
        return f"{self.dimension}_{self.name}"
