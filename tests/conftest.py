"""Shared fixtures for pipeline tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import pytest
from loguru import logger

from regscore.config import LEXICON_SPECS, PipelineConfig


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


def write_wordlist(path: Path, words: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame({"words": words}).to_csv(path, index=False)
    return path


@pytest.fixture
def wordlist_dir(tmp_path: Path) -> Path:
    """Minimal word lists: one phrase per lexicon."""
    phrases = {
        "prescriptions": ["shall"],
        "permissions": ["may"],
        "exceptions": ["unless"],
        "discretions": ["reasonable"],
        "legal_jargon": ["hereby"],
        "cross_referencing": ["section"],
        "outdated_words": ["fax"],
    }
    directory = tmp_path / "Wordlists"
    for name, _, filename in LEXICON_SPECS:
        write_wordlist(directory / filename, phrases[name])
    return directory


@pytest.fixture
def raw_records() -> list[dict[str, str]]:
    return [
        {
            "reg_id": "SOR-2001-1",
            "title": "Licensing Regulations",
            "full_text": "The licensee shall comply. The licensee may apply for exemption.",
            "wordcount": "10",
            "LastAmendedDate": "2018-1-5",
            "repealed": "no",
        },
        {
            "reg_id": "SOR-1999-7",
            "title": "Old Regulations",
            "full_text": "Repealed text.",
            "wordcount": "2",
            "LastAmendedDate": "1999-3-3",
            "repealed": "yes",
        },
        {
            "reg_id": "SOR-2005-2",
            "title": "Empty Regulations",
            "full_text": "",
            "wordcount": "0",
            "LastAmendedDate": "2005-12-1",
            "repealed": "no",
        },
    ]


@pytest.fixture
def config(tmp_path: Path, wordlist_dir: Path) -> PipelineConfig:
    return PipelineConfig(
        corpus_path=tmp_path / "corpus.csv",
        output_path=tmp_path / "out" / "analysis.csv",
        wordlist_dir=wordlist_dir,
        min_wordcount=1,
    )
