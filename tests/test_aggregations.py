"""Tests for KPIs, weekly trend and top lists."""

import pytest
from sentiview.core.aggregations import (
    aggregate_trend,
    compute_kpis,
    get_top_lists,
    rank_labels,
    week_start,
)
from sentiview.core.models import LabelCount


class TestComputeKpis:
    """Test dashboard KPI computation."""

    def test_dominant_sentiment_percentage(self, record_factory):
        records = [record_factory(i, sentiment="Positive") for i in range(3)]
        records.append(record_factory(3, sentiment="Neutral"))

        metrics = compute_kpis(records)

        assert metrics.total_comments == 4
        assert metrics.sentiment_counts == {"Positive": 3, "Neutral": 1, "Negative": 0}
        assert metrics.dominant_sentiment.label == "Positive"
        assert metrics.dominant_sentiment.count == 3
        assert metrics.dominant_sentiment.percentage == 75

    def test_dominant_sentiment_tie_prefers_first_bucket(self, record_factory):
        records = [record_factory(0, sentiment="Negative"), record_factory(1, sentiment="Neutral")]
        assert compute_kpis(records).dominant_sentiment.label == "Neutral"

        records = [record_factory(0, sentiment="Negative"), record_factory(1, sentiment="Positive")]
        assert compute_kpis(records).dominant_sentiment.label == "Positive"

    def test_percentage_rounds_half_up(self, record_factory):
        single = [record_factory(0, sentiment="Negative")]
        assert compute_kpis(single).dominant_sentiment.percentage == 100

        # 5 of 8 = 62.5%
        five_eighths = [record_factory(0, sentiment="Positive")] * 5 + [record_factory(1, sentiment="Negative")] * 3
        assert compute_kpis(five_eighths).dominant_sentiment.percentage == 63

        two_thirds = [record_factory(0, sentiment="Negative")] * 2 + [record_factory(1, sentiment="Positive")]
        assert compute_kpis(two_thirds).dominant_sentiment.percentage == 67

        eighth = [record_factory(0, sentiment="Positive")] + [record_factory(1, sentiment="Negative")] * 7
        assert compute_kpis(eighth).dominant_sentiment.percentage == 88  # 87.5 rounds up

    def test_top_topic_and_aspect(self, sample_records):
        metrics = compute_kpis(sample_records)
        assert metrics.top_topic == LabelCount("Harga", 2)
        # Harga appears as aspect1 once and aspect2 once; Umum is never counted
        assert metrics.top_aspect == LabelCount("Harga", 2)

    def test_top_label_tie_prefers_first_seen(self, record_factory):
        records = [record_factory(0, topic="B"), record_factory(1, topic="A")]
        assert compute_kpis(records).top_topic == LabelCount("B", 1)

    def test_only_general_aspects(self, record_factory):
        metrics = compute_kpis([record_factory(0, aspect1="Umum")])
        assert metrics.top_aspect == LabelCount("None", 0)

    def test_empty_input(self):
        metrics = compute_kpis([])
        assert metrics.total_comments == 0
        assert metrics.sentiment_counts == {"Positive": 0, "Neutral": 0, "Negative": 0}
        assert metrics.dominant_sentiment.label == "N/A"
        assert metrics.dominant_sentiment.percentage == 0
        assert metrics.top_topic == LabelCount("None", 0)
        assert metrics.top_aspect == LabelCount("None", 0)


@pytest.mark.parametrize("date_str, expected", [
    ("2024-01-08", "2024-01-08"),  # Monday
    ("2024-01-10", "2024-01-08"),  # Wednesday
    ("2024-01-14", "2024-01-08"),  # Sunday belongs to the week before
    ("2024-01-01", "2024-01-01"),
    ("2023-01-01", "2022-12-26"),  # Sunday across a year boundary
    ("2024-03-03", "2024-02-26"),  # Sunday across a leap day
    ("not a date", None),
    ("", None),
])
def test_week_start(date_str, expected):
    assert week_start(date_str) == expected


class TestAggregateTrend:
    """Test weekly bucketing."""

    def test_same_week_single_bucket(self, record_factory):
        records = [record_factory(0, date_str="2024-01-08"), record_factory(1, date_str="2024-01-10")]
        trend = aggregate_trend(records)

        assert len(trend) == 1
        assert trend[0].date == "2024-01-08"
        assert trend[0].week_start == "2024-01-08"
        assert trend[0].total == 2

    def test_counts_and_sub_lists(self, sample_records):
        trend = aggregate_trend(sample_records)

        assert [p.week_start for p in trend] == ["2024-01-08", "2024-01-15"]
        first, second = trend
        assert (first.total, first.positive, first.neutral, first.negative) == (2, 1, 0, 1)
        assert (second.total, second.positive, second.neutral, second.negative) == (2, 1, 1, 0)
        assert first.top_topics == (LabelCount("Harga", 1), LabelCount("Layanan", 1))
        assert first.top_aspects == (LabelCount("Harga", 1),)
        # Umum is excluded from the aspect sub-list
        assert second.top_aspects == (LabelCount("Kualitas", 1),)

    def test_sub_list_caps(self, record_factory):
        records = [
            record_factory(0, topic="A", aspect1="X"),
            record_factory(1, topic="B", aspect1="Y"),
            record_factory(2, topic="B", aspect1="Y"),
            record_factory(3, topic="C", aspect1="Z"),
        ]
        point = aggregate_trend(records)[0]
        assert point.top_topics == (LabelCount("B", 2), LabelCount("A", 1))
        assert point.top_aspects == (LabelCount("Y", 2),)

    def test_buckets_sorted_ascending(self, record_factory):
        records = [
            record_factory(0, date_str="2024-03-01"),
            record_factory(1, date_str="2024-01-02"),
            record_factory(2, date_str="2024-02-14"),
        ]
        keys = [p.week_start for p in aggregate_trend(records)]
        assert keys == sorted(keys)

    def test_never_exceeds_max_date(self, record_factory):
        records = [
            record_factory(0, date_str="2024-01-08"),
            record_factory(1, date_str="2024-01-09"),
            record_factory(2, date_str="2024-01-21"),
        ]
        max_date = max(r.date_str for r in records)
        assert all(p.week_start <= max_date for p in aggregate_trend(records))

    def test_unparsable_dates_are_skipped(self, record_factory):
        records = [record_factory(0, date_str="2024-01-08"), record_factory(1, date_str="sometime")]
        trend = aggregate_trend(records)
        assert [p.week_start for p in trend] == ["2024-01-08"]
        assert trend[0].total == 1

    def test_empty_input(self):
        assert aggregate_trend([]) == []


class TestTopLists:
    """Test global top topics and aspects."""

    def test_aspects_counted_once_per_record(self, record_factory):
        records = [
            record_factory(0, aspect1="Harga", aspect2="Harga"),
            record_factory(1, aspect1="Layanan", aspect2="Harga"),
        ]
        lists = get_top_lists(records)
        assert lists.top_aspects == (LabelCount("Harga", 2), LabelCount("Layanan", 1))

    def test_capped_at_five_with_first_seen_ties(self, record_factory):
        topics = ["F", "E", "D", "C", "B", "A", "A"]
        records = [record_factory(i, topic=t) for i, t in enumerate(topics)]
        lists = get_top_lists(records)
        assert [c.label for c in lists.top_topics] == ["A", "F", "E", "D", "C"]

    def test_general_aspect_excluded(self, sample_records):
        lists = get_top_lists(sample_records)
        assert "Umum" not in [c.label for c in lists.top_aspects]

    def test_empty_input(self):
        lists = get_top_lists([])
        assert lists.top_topics == ()
        assert lists.top_aspects == ()


def test_rank_labels():
    assert rank_labels(["b", "a", "b", "c", "a"], 2) == (LabelCount("b", 2), LabelCount("a", 2))
    assert rank_labels([], 3) == ()
    assert rank_labels(["a"], 0) == ()
