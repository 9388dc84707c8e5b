"""Load the word lists that define each scoring dimension."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from loguru import logger

from .config import LEXICON_SPECS, PipelineConfig
from .exceptions import LexiconLoadError
from .schemas.lexicons import Lexicon

WORDS_COLUMN = "words"
_DIMENSIONS = {name: dimension for name, dimension, _ in LEXICON_SPECS}


def load_lexicon(path: Path, name: str, dimension: str | None = None) -> Lexicon:
    """Read a single-column ``words`` CSV into a Lexicon."""
    path = Path(path)
    if not path.exists():
        raise LexiconLoadError(f"Word list '{name}' not found at {path}")

    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise LexiconLoadError(f"Word list '{name}' at {path} is not readable CSV: {exc}") from exc

    if WORDS_COLUMN not in frame.columns:
        raise LexiconLoadError(f"Word list '{name}' at {path} has no '{WORDS_COLUMN}' column")

    phrases = []
    blanks = 0
    for raw in frame[WORDS_COLUMN]:
        if not raw.strip():
            blanks += 1
            continue
        # Padding is kept; " may " only matches the standalone word.
        phrases.append(raw.lower())

    if blanks:
        logger.warning("lexicon:blank_rows | name={} | skipped={}", name, blanks)
    if not phrases:
        raise LexiconLoadError(f"Word list '{name}' at {path} is empty")

    resolved_dimension = dimension or _DIMENSIONS.get(name)
    if resolved_dimension is None:
        raise LexiconLoadError(f"No dimension known for word list '{name}'")

    logger.debug("lexicon:load | name={} | phrases={} | path={}", name, len(phrases), path)
    return Lexicon(name=name, dimension=resolved_dimension, phrases=phrases)


def load_lexicons(config: PipelineConfig) -> dict[str, Lexicon]:
    """Load all seven lexicons in output order."""
    lexicons = {
        name: load_lexicon(config.lexicon_path(name), name, dimension)
        for name, dimension, _ in LEXICON_SPECS
    }
    logger.info(
        "lexicon:load_all | counts={}",
        {name: len(lexicon.phrases) for name, lexicon in lexicons.items()},
    )
    return lexicons
