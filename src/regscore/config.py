"""Pipeline configuration."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Literal, Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError

MatchMode = Literal["substring", "word", "regex"]

# (name, dimension, default file) in output order.
LEXICON_SPECS: tuple[tuple[str, str, str], ...] = (
    ("prescriptions", "PRESCRIPTIVITY", "prescriptions.csv"),
    ("permissions", "PRESCRIPTIVITY", "permissions.csv"),
    ("exceptions", "FLEXIBILITY", "exceptions.csv"),
    ("discretions", "FLEXIBILITY", "discretions.csv"),
    ("legal_jargon", "COMPLEXITY", "words_legal_jargon.csv"),
    ("cross_referencing", "COMPLEXITY", "words_cross_referencing.csv"),
    ("outdated_words", "AGE", "outdated_words.csv"),
)
LEXICON_NAMES = tuple(name for name, _, _ in LEXICON_SPECS)

DEFAULT_REFERENCE_DATE = date(2018, 10, 5)
DEFAULT_MIN_WORDCOUNT = 100


def _default_lexicon_files() -> dict[str, str]:
    return {name: filename for name, _, filename in LEXICON_SPECS}


class PipelineConfig(BaseModel):
    """Settings for one pipeline run, passed explicitly to every stage."""

    model_config = ConfigDict(extra="forbid")

    corpus_path: Path = Field(
        default=Path("regulations_data.csv"), description="Input corpus (.csv, .jsonl or .json)."
    )
    output_path: Path = Field(
        default=Path("regulations_data_analysis.csv"), description="Output table (.csv or .jsonl)."
    )
    wordlist_dir: Path = Field(default=Path("Wordlists"), description="Directory holding word lists.")
    lexicon_files: dict[str, str] = Field(
        default_factory=_default_lexicon_files,
        description="Lexicon name to file, relative to wordlist_dir unless absolute.",
    )
    filter_short: bool = Field(default=True, description="Drop documents below min_wordcount.")
    min_wordcount: int = Field(default=DEFAULT_MIN_WORDCOUNT, ge=0, description="Word-count threshold.")
    reference_date: date = Field(
        default=DEFAULT_REFERENCE_DATE, description="As-of date for age calculation."
    )
    match_mode: MatchMode = Field(default="substring", description="Phrase matching strategy.")
    save_matrices: bool = Field(default=False, description="Persist per-phrase matrices.")
    matrix_dir: Optional[Path] = Field(
        default=None, description="Directory for phrase matrices; defaults to the output directory."
    )

    @field_validator("lexicon_files")
    @classmethod
    def _complete_lexicons(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(value) - set(LEXICON_NAMES))
        if unknown:
            raise ValueError(f"unknown lexicons: {', '.join(unknown)}")
        merged = _default_lexicon_files()
        merged.update(value)
        return merged

    def lexicon_path(self, name: str) -> Path:
        path = Path(self.lexicon_files[name])
        return path if path.is_absolute() else self.wordlist_dir / path

    def resolved_matrix_dir(self) -> Path:
        return self.matrix_dir if self.matrix_dir is not None else self.output_path.parent


def load_config(path: Path, **overrides: object) -> PipelineConfig:
    """Read a JSON config file and apply non-None overrides on top."""
    try:
        payload = orjson.loads(Path(path).read_bytes())
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except orjson.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object.")
    return build_config(payload, **overrides)


def build_config(base: dict | None = None, **overrides: object) -> PipelineConfig:
    """Validate settings, ignoring overrides left as None."""
    values = dict(base or {})
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return PipelineConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
