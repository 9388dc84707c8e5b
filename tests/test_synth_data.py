"""Tests for synthetic data generation."""

from pathlib import Path

import pytest

from regscore.config import LEXICON_SPECS, PipelineConfig
from regscore.io_utils import read_jsonl
from regscore.lexicons import load_lexicons
from regscore.loader import clean_corpus
from regscore.synth_data import generate_corpus, write_default_wordlists


def test_generate_corpus_creates_expected_count(tmp_path: Path) -> None:
    output = tmp_path / "regs.jsonl"
    generate_corpus(output_path=output, count=5, seed=42)

    rows = read_jsonl(output)
    assert len(rows) == 5
    assert rows[0]["reg_id"].endswith("-0001")
    assert all(int(row["wordcount"]) == len(row["full_text"].split()) for row in rows)
    assert {row["repealed"] for row in rows} <= {"yes", "no"}


def test_generate_corpus_deterministic_seed(tmp_path: Path) -> None:
    generate_corpus(tmp_path / "first.jsonl", count=3, seed=7)
    generate_corpus(tmp_path / "second.jsonl", count=3, seed=7)

    assert read_jsonl(tmp_path / "first.jsonl") == read_jsonl(tmp_path / "second.jsonl")


def test_generate_corpus_negative_count(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        generate_corpus(tmp_path / "out.jsonl", count=-1)


def test_generated_corpus_cleans_and_wordlists_load(tmp_path: Path) -> None:
    output = tmp_path / "regs.jsonl"
    generate_corpus(output, count=40, seed=3)
    written = write_default_wordlists(tmp_path / "Wordlists")

    assert [path.name for path in written] == [filename for _, _, filename in LEXICON_SPECS]
    documents = clean_corpus(read_jsonl(output), PipelineConfig())
    assert all(document.wordcount >= 100 for document in documents)
    assert all(len(document.last_amended) == 10 for document in documents)
    lexicons = load_lexicons(PipelineConfig(wordlist_dir=tmp_path / "Wordlists"))
    assert "shall" in lexicons["prescriptions"].phrases
