"""Tests for JSONL and table helpers."""

from pathlib import Path

import numpy as np
import pandas as pd

from regscore.io_utils import read_csv_rows, read_jsonl, write_jsonl, write_table


def test_write_and_read_jsonl_roundtrip(tmp_path: Path) -> None:
    target = tmp_path / "artifacts" / "sample.jsonl"
    payload = [{"reg_id": "a", "wordcount": 12}, {"reg_id": "b", "wordcount": np.int64(3)}]

    write_jsonl(target, payload)

    assert read_jsonl(target) == [{"reg_id": "a", "wordcount": 12}, {"reg_id": "b", "wordcount": 3}]


def test_read_jsonl_ignores_blank_lines(tmp_path: Path) -> None:
    target = tmp_path / "data.jsonl"
    target.write_text('{"id": 1}\n\n{"id": 2}\n')

    assert read_jsonl(target) == [{"id": 1}, {"id": 2}]


def test_read_csv_rows_keeps_strings_and_blanks(tmp_path: Path) -> None:
    target = tmp_path / "corpus.csv"
    target.write_text("reg_id,wordcount,note\n007,120,\n")

    assert read_csv_rows(target) == [{"reg_id": "007", "wordcount": "120", "note": ""}]


def test_write_table_picks_format_from_suffix(tmp_path: Path) -> None:
    frame = pd.DataFrame({"reg_id": ["a"], "score": [1.5]})

    write_table(tmp_path / "nested" / "out.csv", frame)
    write_table(tmp_path / "out.jsonl", frame)

    assert (tmp_path / "nested" / "out.csv").read_text().splitlines()[0] == "reg_id,score"
    assert read_jsonl(tmp_path / "out.jsonl") == [{"reg_id": "a", "score": 1.5}]
