"""Tests for the output table."""

import pytest

from regscore.config import PipelineConfig
from regscore.exporter import build_table, metric_columns, summarize
from regscore.lexicons import load_lexicons
from regscore.loader import clean_corpus
from regscore.pipeline import analyze_documents


def test_metric_columns_grouped_by_dimension() -> None:
    columns = metric_columns()

    assert columns[:5] == [
        "PRESCRIPTIVITY_prescriptions_RawCount",
        "PRESCRIPTIVITY_permissions_RawCount",
        "PRESCRIPTIVITY_prescriptions_Index",
        "PRESCRIPTIVITY_permissions_Index",
        "PRESCRIPTIVITY_Index",
    ]
    assert columns[-3:] == ["AGE_outdated_words_RawCount", "AGE_outdated_words_Index", "AGE_DaysLastModified"]
    assert len(columns) == 16


def test_build_table_and_summary(config: PipelineConfig, raw_records) -> None:
    raw_records.append(
        {
            "reg_id": "SOR-2010-4",
            "title": "Fax Regulations",
            "full_text": "Reports may be sent by fax unless section 3 applies.",
            "wordcount": "10",
            "LastAmendedDate": "2018-10-1",
            "repealed": "no",
        }
    )
    documents = clean_corpus(raw_records, config)
    records, _ = analyze_documents(documents, load_lexicons(config), config)

    frame = build_table(documents, records)

    assert list(frame["reg_id"]) == ["SOR-2001-1", "SOR-2010-4"]
    assert frame.columns.tolist()[-16:] == metric_columns()
    second = frame.iloc[1]
    assert second["AGE_outdated_words_RawCount"] == 1
    assert second["FLEXIBILITY_exceptions_RawCount"] == 1
    assert second["COMPLEXITY_cross_referencing_Index"] == pytest.approx(10.0)
    assert second["AGE_DaysLastModified"] == 4

    stats = summarize(frame)
    assert stats.loc["AGE_DaysLastModified", "mean"] == pytest.approx((273 + 4) / 2)
    assert stats.loc["PRESCRIPTIVITY_Index", "count"] == 2


def test_build_table_empty_corpus() -> None:
    frame = build_table([], [])

    assert frame.empty
    assert "PRESCRIPTIVITY_Index" in frame.columns
    assert summarize(frame).empty
