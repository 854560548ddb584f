"""Shared fixtures for SentiView tests."""

import datetime

import pytest

from sentiview.core.models import AnalysisText, DisplayText, Record, Sentiment


def make_record(id=0, topic="Harga", source="TikTok", sentiment=Sentiment.NEUTRAL, text="",
                text_no_stop="", aspect1="Umum", aspect2=None, aspect_score=3.0,
                date_str="2024-01-08"):
    """Build a Record directly, bypassing the normalizer."""
    try:
        date = datetime.date.fromisoformat(date_str)
    except ValueError:
        date = datetime.date(2024, 1, 1)
    return Record(
        id=id,
        topic=topic,
        source=source,
        sentiment=Sentiment(sentiment),
        text=DisplayText(text),
        text_no_stop=AnalysisText(text_no_stop),
        aspect1=aspect1,
        aspect2=aspect2,
        aspect_score=aspect_score,
        aspect1_keywords=(),
        aspect2_keywords=(),
        date=date,
        date_str=date_str,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def sample_records():
    """A small mixed corpus across two weeks and two platforms."""
    return [
        make_record(0, topic="Harga", source="TikTok", sentiment="Positive", text="Harganya bagus sekali",
                    text_no_stop="harganya bagus", aspect1="Harga", aspect_score=4.0, date_str="2024-01-08"),
        make_record(1, topic="Layanan", source="YouTube", sentiment="Negative", text="Layanan lambat",
                    text_no_stop="layanan lambat", aspect1="Layanan", aspect2="Harga", aspect_score=2.5,
                    date_str="2024-01-10"),
        make_record(2, topic="Harga", source="TikTok", sentiment="Neutral", text="Biasa saja",
                    text_no_stop="biasa", aspect1="Umum", aspect_score=1.0, date_str="2024-01-15"),
        make_record(3, topic="Produk", source="YouTube", sentiment="Positive", text="Produk bagus, bagus!",
                    text_no_stop="produk bagus bagus", aspect1="Kualitas", aspect_score=5.0,
                    date_str="2024-01-16"),
    ]
