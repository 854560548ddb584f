"""Raw CSV row normalization.

Every raw row becomes a :class:`Record`. Missing or malformed fields are
repaired one by one using the defaults below, so a row is never rejected:

============================  ==============================================
Field                         Default
============================  ==============================================
topic, source                 ``"Unknown"``
sentiment                     ``Sentiment.NEUTRAL`` (also for unknown labels)
text, text_no_stop            empty string (``text_no_stop`` never falls back
                              to ``text``)
aspect1                       ``"Umum"``
aspect2                       ``None``
aspect_score                  ``0.0`` (also for NaN, infinities, negatives)
aspect keywords               empty tuple
date                          the load's fallback date
date_str                      the raw ``Date_std`` string, trimmed
============================  ==============================================
"""

import datetime
import logging
import math
import re
from typing import Iterable, Mapping, Optional, Tuple

from .constants import ColumnConstants, LabelConstants, TextConstants
from .models import AnalysisText, DisplayText, Record, Sentiment

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})")
TITLE_WORD_RE = re.compile(r"\w\S*")
NUMBER_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_SENTIMENTS = {s.value.lower(): s for s in Sentiment}


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def to_title_case(value: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest."""
    return TITLE_WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), value)


def canonical_source(value: str, aliases: Optional[Mapping[str, str]] = None) -> str:
    """Map a platform name to its display form ("tiktok" -> "TikTok")."""
    source = _clean(value)
    if not source:
        return LabelConstants.UNKNOWN
    table = LabelConstants.DEFAULT_SOURCE_ALIASES if aliases is None else aliases
    known = table.get(source.lower())
    if known:
        return known
    return to_title_case(source)


def parse_sentiment(value: str) -> Sentiment:
    label = _clean(value)
    sentiment = _SENTIMENTS.get(label.lower())
    if sentiment is None:
        if label:
            logger.debug(f"Unknown sentiment label '{label}', using Neutral")
        return Sentiment.NEUTRAL
    return sentiment


def parse_score(value) -> float:
    """Parse an aspect score from its leading number, so "3abc" reads as 3.

    Values without a leading number, NaN, infinite and negative values become 0.
    """
    raw = _clean(value)
    match = NUMBER_PREFIX_RE.match(raw)
    if not match:
        if raw:
            logger.debug(f"Non-numeric aspect score '{raw}', using 0")
        return 0.0
    score = float(match.group(0))
    if math.isnan(score) or math.isinf(score) or score < 0:
        return 0.0
    return score


def parse_keywords(value) -> Tuple[str, ...]:
    """Parse a bracketed, comma-separated keyword list such as "['harga', 'mahal']"."""
    raw = _clean(value)
    if not raw:
        return ()
    stripped = raw.translate({ord(ch): None for ch in TextConstants.KEYWORD_STRIP_CHARS})
    if not stripped.strip():
        return ()
    return tuple(piece.strip() for piece in stripped.split(",") if piece.strip())


def parse_date(value: str) -> Optional[datetime.date]:
    """Parse the leading YYYY-MM-DD part of a date string, or return None."""
    match = ISO_DATE_RE.match(_clean(value))
    if not match:
        return None
    try:
        return datetime.date.fromisoformat(match.group(1))
    except ValueError:
        return None


def normalize_row(
    raw: Mapping[str, str],
    index: int,
    source_aliases: Optional[Mapping[str, str]] = None,
    fallback_date: Optional[datetime.date] = None,
) -> Record:
    """Turn one raw CSV row into a Record. Never raises for malformed data."""
    date_str = _clean(raw.get(ColumnConstants.DATE))
    date = parse_date(date_str)
    if date is None:
        logger.debug(f"Row {index}: unparsable date '{date_str}', using fallback date")
        date = fallback_date or datetime.date.today()

    return Record(
        id=index,
        topic=_clean(raw.get(ColumnConstants.TOPIC)) or LabelConstants.UNKNOWN,
        source=canonical_source(raw.get(ColumnConstants.SOURCE), source_aliases),
        sentiment=parse_sentiment(raw.get(ColumnConstants.SENTIMENT)),
        text=DisplayText(_clean(raw.get(ColumnConstants.TEXT))),
        text_no_stop=AnalysisText(_clean(raw.get(ColumnConstants.TEXT_NO_STOP))),
        aspect1=_clean(raw.get(ColumnConstants.ASPECT_1)) or LabelConstants.GENERAL_ASPECT,
        aspect2=_clean(raw.get(ColumnConstants.ASPECT_2)) or None,
        aspect_score=parse_score(raw.get(ColumnConstants.ASPECT_SCORE)),
        aspect1_keywords=parse_keywords(raw.get(ColumnConstants.ASPECT_1_KEYWORDS)),
        aspect2_keywords=parse_keywords(raw.get(ColumnConstants.ASPECT_2_KEYWORDS)),
        date=date,
        date_str=date_str,
    )


def normalize_rows(
    rows: Iterable[Mapping[str, str]],
    source_aliases: Optional[Mapping[str, str]] = None,
    fallback_date: Optional[datetime.date] = None,
) -> Tuple[Record, ...]:
    """Normalize rows in order; ids are the zero-based row positions."""
    fallback = fallback_date or datetime.date.today()
    records = tuple(
        normalize_row(row, index, source_aliases=source_aliases, fallback_date=fallback)
        for index, row in enumerate(rows)
    )
    logger.info(f"Normalized {len(records)} rows")
    return records
