"""Tests for JSON export."""

import datetime
import json

from sentiview.core.aggregations import aggregate_trend, compute_kpis, get_top_lists
from sentiview.core.models import DateRange, FilterSpec
from sentiview.core.nlp import sentiment_term_frequencies
from sentiview.utils.data_prep import export_to_json, prepare_export


def test_prepare_and_export(sample_records, tmp_path):
    spec = FilterSpec(date_range=DateRange(start="2024-01-01"))
    data = prepare_export(
        spec,
        compute_kpis(sample_records),
        aggregate_trend(sample_records),
        get_top_lists(sample_records),
        sentiment_term_frequencies(sample_records),
    )

    out = tmp_path / "export.json"
    export_to_json(data, str(out))
    loaded = json.loads(out.read_text(encoding="utf-8"))

    assert loaded["filters"]["date_range"] == {"start": "2024-01-01", "end": None}
    assert loaded["summary"]["total"] == 4
    assert loaded["summary"]["dominant_sentiment"] == {"label": "Positive", "count": 2, "percentage": 50}
    assert [p["week_start"] for p in loaded["trend"]] == ["2024-01-08", "2024-01-15"]
    assert loaded["top_topics"][0] == {"label": "Harga", "count": 2}
    assert loaded["terms"]["positive"][0] == {"term": "bagus", "count": 3}
    stamp = datetime.datetime.fromisoformat(loaded["metadata"]["export_timestamp"])
    assert stamp.microsecond == 0


def test_prepare_without_terms(sample_records):
    data = prepare_export(FilterSpec(), compute_kpis([]), [], get_top_lists([]))
    assert "terms" not in data
    assert data["summary"]["dominant_sentiment"]["label"] == "N/A"
