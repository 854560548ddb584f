"""Sample comments for a clicked or searched term."""

import logging
import re
from typing import Iterable, List, Tuple

from .constants import LabelConstants, RankingConstants
from .models import Record, TermSamples

logger = logging.getLogger(__name__)


def count_occurrences(text: str, term: str) -> int:
    """Count non-overlapping, case-insensitive matches of term in text."""
    if not text or not term:
        return 0
    return len(re.findall(re.escape(term.lower()), text.lower()))


def highlight_segments(text: str, term: str) -> List[Tuple[str, bool]]:
    """Split text into (segment, is_match) pairs around case-insensitive matches of term."""
    if not text:
        return []
    if not term:
        return [(text, False)]
    pattern = re.compile(f"({re.escape(term)})", re.IGNORECASE)
    lower_term = term.lower()
    return [(part, part.lower() == lower_term) for part in pattern.split(text) if part]


def rank_term_samples(
    term: str,
    records: Iterable[Record],
    source: str = LabelConstants.ALL,
    topic: str = LabelConstants.ALL,
    sample_size: int = RankingConstants.TERM_SAMPLE_SIZE,
) -> TermSamples:
    """
    Find records whose display text contains term and rank them for display.

    Matches are narrowed by the exact source/topic filters, then ordered by
    occurrence count (descending) and date_str (most recent first), and cut
    to sample_size.
    """
    if not term:
        return TermSamples(term=term or "", total_matches=0, available_topics=(), samples=())

    lower_term = term.lower()
    matched = [r for r in records if r.text and lower_term in r.text.lower()]
    available_topics = tuple(sorted({r.topic for r in matched if r.topic}))

    narrowed = [
        r for r in matched
        if (source == LabelConstants.ALL or r.source == source)
        and (topic == LabelConstants.ALL or r.topic == topic)
    ]

    # Two stable passes: date descending, then count descending on top
    narrowed.sort(key=lambda r: r.date_str, reverse=True)
    narrowed.sort(key=lambda r: count_occurrences(r.text, term), reverse=True)

    logger.debug(f"Term '{term}': {len(matched)} matches, {len(narrowed)} after narrowing")
    return TermSamples(
        term=term,
        total_matches=len(matched),
        available_topics=available_topics,
        samples=tuple(narrowed[:max(0, sample_size)]),
    )
