"""Tests for word-list loading."""

from pathlib import Path

import pytest

from regscore.config import LEXICON_NAMES, PipelineConfig
from regscore.exceptions import LexiconLoadError
from regscore.lexicons import load_lexicon, load_lexicons
from regscore.schemas.documents import Document
from regscore.scorer import score_document

from conftest import write_wordlist


def test_load_lexicon_lowercases_and_skips_blanks(tmp_path: Path) -> None:
    path = tmp_path / "prescriptions.csv"
    path.write_text('words\nSHALL\n" "\nIs Required To\n')

    lexicon = load_lexicon(path, "prescriptions")

    assert lexicon.phrases == ["shall", "is required to"]
    assert lexicon.dimension == "PRESCRIPTIVITY"
    assert lexicon.column_stem == "PRESCRIPTIVITY_prescriptions"


def test_load_lexicon_keeps_padding_around_phrases(tmp_path: Path) -> None:
    path = tmp_path / "permissions.csv"
    path.write_text('words\n" May "\n')

    lexicon = load_lexicon(path, "permissions")
    document = Document(reg_id="A", full_text="you may maybe go", wordcount=4, last_amended="2018-01-05")

    assert lexicon.phrases == [" may "]
    assert score_document(document, lexicon).raw_count == 1


def test_load_lexicon_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LexiconLoadError, match="not found"):
        load_lexicon(tmp_path / "nope.csv", "permissions")


def test_load_lexicon_requires_words_column(tmp_path: Path) -> None:
    path = tmp_path / "exceptions.csv"
    path.write_text("term\nunless\n")

    with pytest.raises(LexiconLoadError, match="'words' column"):
        load_lexicon(path, "exceptions")


def test_load_lexicon_rejects_empty_list(tmp_path: Path) -> None:
    path = write_wordlist(tmp_path / "discretions.csv", [])

    with pytest.raises(LexiconLoadError, match="empty"):
        load_lexicon(path, "discretions")


def test_load_lexicons_returns_all_in_order(wordlist_dir: Path) -> None:
    lexicons = load_lexicons(PipelineConfig(wordlist_dir=wordlist_dir))

    assert tuple(lexicons) == LEXICON_NAMES
    assert lexicons["outdated_words"].phrases == ["fax"]
    assert lexicons["outdated_words"].dimension == "AGE"


def test_load_lexicons_honours_absolute_override(tmp_path: Path, wordlist_dir: Path) -> None:
    custom = write_wordlist(tmp_path / "custom" / "musts.csv", ["must"])
    config = PipelineConfig(wordlist_dir=wordlist_dir, lexicon_files={"prescriptions": str(custom)})

    lexicons = load_lexicons(config)

    assert lexicons["prescriptions"].phrases == ["must"]
    assert lexicons["permissions"].phrases == ["may"]
