"""Core modules for SentiView."""

from .models import *
from .config import settings
from .normalizer import normalize_row, normalize_rows
from .filters import apply_filters, matches, search_filter
from .aggregations import compute_kpis, aggregate_trend, get_top_lists
from .nlp import (
    tokenize, build_ngrams, count_top_terms, count_analysis_terms, count_display_terms, sentiment_term_frequencies,
)
from .samples import rank_term_samples

__all__ = [
    "settings",
    "Sentiment",
    "DisplayText",
    "AnalysisText",
    "Record",
    "DateRange",
    "FilterSpec",
    "LabelCount",
    "TermCount",
    "DominantSentiment",
    "DashboardMetrics",
    "TrendPoint",
    "TopLists",
    "NgramOptions",
    "SentimentTerms",
    "TermSamples",
    "Page",
    "normalize_row",
    "normalize_rows",
    "apply_filters",
    "matches",
    "search_filter",
    "compute_kpis",
    "aggregate_trend",
    "get_top_lists",
    "tokenize",
    "build_ngrams",
    "count_top_terms",
    "count_analysis_terms",
    "count_display_terms",
    "sentiment_term_frequencies",
    "rank_term_samples",
]
