"""End-to-end scoring pipeline."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pandas as pd
from loguru import logger

from .age import age_days
from .config import PipelineConfig
from .exporter import build_table, export_table
from .lexicons import load_lexicons
from .loader import clean_corpus, read_corpus
from .normalizer import normalize_scores
from .schemas.documents import Document
from .schemas.lexicons import Lexicon
from .schemas.scores import LexiconScore, ScoreRecord
from .scorer import PhraseMatrix, matrix_filename, score_corpus, write_phrase_matrix


def _records_from_matrices(
    documents: Sequence[Document],
    matrices: Mapping[str, PhraseMatrix],
    config: PipelineConfig,
) -> list[ScoreRecord]:
    records: list[ScoreRecord] = []
    for row, document in enumerate(documents):
        scores = {
            name: LexiconScore(
                lexicon=name,
                phrase_counts=[int(value) for value in matrix.counts[row]],
                raw_count=int(matrix.counts[row].sum()),
            )
            for name, matrix in matrices.items()
        }
        record = normalize_scores(document, scores)
        record.age_days = age_days(document.last_amended, config.reference_date, document.reg_id)
        records.append(record)
    return records


def analyze_documents(
    documents: Sequence[Document],
    lexicons: Mapping[str, Lexicon],
    config: PipelineConfig,
) -> tuple[list[ScoreRecord], dict[str, PhraseMatrix]]:
    """Score, normalise and age already-cleaned documents."""
    matrices = score_corpus(documents, lexicons, config.match_mode)
    records = _records_from_matrices(documents, matrices, config)
    logger.info(
        "pipeline:analyze | documents={} | match_mode={} | reference_date={}",
        len(records),
        config.match_mode,
        config.reference_date.isoformat(),
    )
    return records, matrices


def run_pipeline(config: PipelineConfig) -> pd.DataFrame:
    """Load, clean, score and export the corpus described by ``config``."""
    logger.info("pipeline:start | corpus={} | output={}", config.corpus_path, config.output_path)

    documents = clean_corpus(read_corpus(config.corpus_path), config)
    lexicons = load_lexicons(config)
    records, matrices = analyze_documents(documents, lexicons, config)

    if config.save_matrices:
        matrix_dir = config.resolved_matrix_dir()
        for name, matrix in matrices.items():
            write_phrase_matrix(matrix, matrix_dir / matrix_filename(name))
        logger.info("pipeline:matrices | dir={} | count={}", matrix_dir, len(matrices))

    frame = build_table(documents, records)
    export_table(frame, config.output_path)
    logger.success("pipeline:done | rows={}", len(frame))
    return frame
