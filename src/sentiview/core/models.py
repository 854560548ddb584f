"""Data models for SentiView."""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Dict


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class DisplayText(str):
    """Readable comment text, lightly cleaned upstream. Used for search and samples."""

    __slots__ = ()


class AnalysisText(str):
    """Comment text with stopwords already removed upstream. Used for frequency views only."""

    __slots__ = ()


@dataclass(frozen=True)
class Record:
    """Represents a single normalized comment."""
    id: int
    topic: str
    source: str
    sentiment: Sentiment
    text: DisplayText
    text_no_stop: AnalysisText
    aspect1: str
    aspect2: Optional[str]
    aspect_score: float
    aspect1_keywords: Tuple[str, ...]
    aspect2_keywords: Tuple[str, ...]
    date: datetime.date
    date_str: str  # authoritative YYYY-MM-DD form


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds compared against Record.date_str."""
    start: Optional[str] = None
    end: Optional[str] = None


@dataclass(frozen=True)
class FilterSpec:
    """Global filter state for a single query."""
    source: str = "All"
    topic: str = "All"
    sentiment: str = "All"
    aspect: str = "All"
    date_range: DateRange = field(default_factory=DateRange)
    hide_general: bool = False
    min_aspect_score: float = 0.0
    search_query: str = ""  # explore view only

    @classmethod
    def dashboard_defaults(cls) -> "FilterSpec":
        """Initial dashboard state: general comments hidden, aspect score at least 2."""
        return cls(hide_general=True, min_aspect_score=2.0)


@dataclass(frozen=True)
class LabelCount:
    label: str
    count: int


@dataclass(frozen=True)
class TermCount:
    term: str
    count: int


@dataclass(frozen=True)
class DominantSentiment:
    label: str
    count: int
    percentage: int


@dataclass(frozen=True)
class DashboardMetrics:
    """Summary KPIs for a record selection."""
    total_comments: int
    sentiment_counts: Dict[str, int]
    dominant_sentiment: DominantSentiment
    top_topic: LabelCount
    top_aspect: LabelCount


@dataclass(frozen=True)
class TrendPoint:
    """One weekly bucket, keyed by the Monday that starts it."""
    week_start: str
    total: int
    positive: int
    neutral: int
    negative: int
    top_topics: Tuple[LabelCount, ...]
    top_aspects: Tuple[LabelCount, ...]

    @property
    def date(self) -> str:
        return self.week_start


@dataclass(frozen=True)
class TopLists:
    top_topics: Tuple[LabelCount, ...]
    top_aspects: Tuple[LabelCount, ...]


@dataclass(frozen=True)
class NgramOptions:
    """Filters applied while building n-grams."""
    remove_stopwords: bool = False
    min_token_len: int = 3
    drop_pure_number: bool = False


@dataclass(frozen=True)
class SentimentTerms:
    """Ranked terms per sentiment bucket."""
    positive: Tuple[TermCount, ...]
    neutral: Tuple[TermCount, ...]
    negative: Tuple[TermCount, ...]


@dataclass(frozen=True)
class TermSamples:
    """Ranked sample comments for a clicked or searched term."""
    term: str
    total_matches: int  # before source/topic narrowing
    available_topics: Tuple[str, ...]
    samples: Tuple[Record, ...]


@dataclass(frozen=True)
class Page:
    items: Tuple[Record, ...]
    page: int
    page_size: int
    total_items: int
    total_pages: int
