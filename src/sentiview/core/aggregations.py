"""Dashboard aggregations: KPIs, weekly trend and top lists."""

import datetime
import logging
import math
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .constants import LabelConstants, RankingConstants
from .models import (
    DashboardMetrics,
    DominantSentiment,
    LabelCount,
    Record,
    Sentiment,
    TopLists,
    TrendPoint,
)
from .normalizer import parse_date

logger = logging.getLogger(__name__)

# Iteration order decides dominant-sentiment ties
SENTIMENT_ORDER = (Sentiment.POSITIVE, Sentiment.NEUTRAL, Sentiment.NEGATIVE)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rank_labels(labels: Iterable[str], top_n: int) -> Tuple[LabelCount, ...]:
    """
    Count labels and keep the top_n by descending count.

    Counter preserves first-seen order and sorted() is stable, so equal counts
    stay in the order their label first appeared.
    """
    counts = Counter(labels)
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return tuple(LabelCount(label, count) for label, count in ranked[:max(0, top_n)])


def _top_label(counts: Dict[str, int]) -> LabelCount:
    best = LabelCount(LabelConstants.NO_LABEL, 0)
    for label, count in counts.items():
        if count > best.count:
            best = LabelCount(label, count)
    return best


def compute_kpis(records: Sequence[Record]) -> DashboardMetrics:
    """Compute total, per-sentiment counts, dominant sentiment, top topic and top aspect."""
    total = len(records)
    sentiment_counts = {s.value: 0 for s in SENTIMENT_ORDER}

    if total == 0:
        return DashboardMetrics(
            total_comments=0,
            sentiment_counts=sentiment_counts,
            dominant_sentiment=DominantSentiment(LabelConstants.NOT_AVAILABLE, 0, 0),
            top_topic=LabelCount(LabelConstants.NO_LABEL, 0),
            top_aspect=LabelCount(LabelConstants.NO_LABEL, 0),
        )

    topic_counts: Dict[str, int] = Counter()
    aspect_counts: Dict[str, int] = Counter()
    for r in records:
        sentiment_counts[r.sentiment.value] += 1
        if r.topic:
            topic_counts[r.topic] += 1
        if r.aspect1 and r.aspect1 != LabelConstants.GENERAL_ASPECT:
            aspect_counts[r.aspect1] += 1
        if r.aspect2 and r.aspect2 != LabelConstants.GENERAL_ASPECT:
            aspect_counts[r.aspect2] += 1

    dom_label, dom_count = Sentiment.NEUTRAL.value, -1
    for s in SENTIMENT_ORDER:
        if sentiment_counts[s.value] > dom_count:
            dom_label, dom_count = s.value, sentiment_counts[s.value]

    return DashboardMetrics(
        total_comments=total,
        sentiment_counts=sentiment_counts,
        dominant_sentiment=DominantSentiment(
            label=dom_label,
            count=dom_count,
            percentage=_round_half_up(dom_count / total * 100),
        ),
        top_topic=_top_label(topic_counts),
        top_aspect=_top_label(aspect_counts),
    )


def week_start(date_str: str) -> Optional[str]:
    """Return the Monday on or before date_str as YYYY-MM-DD, or None if it does not parse."""
    day = parse_date(date_str)
    if day is None:
        return None
    monday = day - datetime.timedelta(days=day.isoweekday() - 1)
    return monday.isoformat()


class _WeekBucket:
    def __init__(self, key: str):
        self.key = key
        self.total = 0
        self.counts = {s: 0 for s in SENTIMENT_ORDER}
        self.topics: List[str] = []
        self.aspects: List[str] = []

    def add(self, record: Record) -> None:
        self.total += 1
        self.counts[record.sentiment] += 1
        if record.topic:
            self.topics.append(record.topic)
        if record.aspect1 and record.aspect1 != LabelConstants.GENERAL_ASPECT:
            self.aspects.append(record.aspect1)

    def to_point(self) -> TrendPoint:
        return TrendPoint(
            week_start=self.key,
            total=self.total,
            positive=self.counts[Sentiment.POSITIVE],
            neutral=self.counts[Sentiment.NEUTRAL],
            negative=self.counts[Sentiment.NEGATIVE],
            top_topics=rank_labels(self.topics, RankingConstants.TREND_TOP_TOPICS),
            top_aspects=rank_labels(self.aspects, RankingConstants.TREND_TOP_ASPECTS),
        )


def aggregate_trend(records: Sequence[Record]) -> List[TrendPoint]:
    """
    Bucket records by ISO week (Monday start) and summarize each bucket.

    Buckets whose Monday sorts after the largest date_str of the input are
    dropped. Records whose date_str does not parse cannot be placed in a week
    and are left out of the buckets, but still take part in the maximum.
    """
    if not records:
        return []

    max_date_str = max(r.date_str for r in records)

    buckets: Dict[str, _WeekBucket] = {}
    skipped = 0
    for r in records:
        key = week_start(r.date_str)
        if key is None:
            skipped += 1
            continue
        if key not in buckets:
            buckets[key] = _WeekBucket(key)
        buckets[key].add(r)

    if skipped:
        logger.debug(f"Trend: {skipped} records without a parsable date were not bucketed")

    valid = [b for b in buckets.values() if b.key <= max_date_str]
    valid.sort(key=lambda b: b.key)
    return [b.to_point() for b in valid]


def get_top_lists(records: Iterable[Record]) -> TopLists:
    """Global top topics and aspects. A record counts once per distinct aspect value."""
    topics: List[str] = []
    aspects: List[str] = []
    for r in records:
        if r.topic:
            topics.append(r.topic)
        seen = []
        for aspect in (r.aspect1, r.aspect2):
            if aspect and aspect != LabelConstants.GENERAL_ASPECT and aspect not in seen:
                seen.append(aspect)
        aspects.extend(seen)

    return TopLists(
        top_topics=rank_labels(topics, RankingConstants.TOP_LIST_SIZE),
        top_aspects=rank_labels(aspects, RankingConstants.TOP_LIST_SIZE),
    )
