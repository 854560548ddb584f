"""Data preparation for export."""

import dataclasses
import datetime
import json
from typing import Any, Dict, List, Optional

from .. import __version__
from ..core.models import DashboardMetrics, FilterSpec, SentimentTerms, TopLists, TrendPoint


def _label_counts(items) -> List[Dict[str, Any]]:
    return [{"label": i.label, "count": i.count} for i in items]


def _term_counts(items) -> List[Dict[str, Any]]:
    return [{"term": t.term, "count": t.count} for t in items]


def prepare_export(
    spec: FilterSpec,
    metrics: DashboardMetrics,
    trend: List[TrendPoint],
    top_lists: TopLists,
    terms: Optional[SentimentTerms] = None,
) -> Dict[str, Any]:
    """Prepare dashboard outputs for JSON export."""

    export_data = {
        "filters": dataclasses.asdict(spec),
        "summary": {
            "total": metrics.total_comments,
            "sentiment_counts": dict(metrics.sentiment_counts),
            "dominant_sentiment": dataclasses.asdict(metrics.dominant_sentiment),
            "top_topic": dataclasses.asdict(metrics.top_topic),
            "top_aspect": dataclasses.asdict(metrics.top_aspect),
        },
        "trend": [
            {
                "week_start": p.week_start,
                "total": p.total,
                "positive": p.positive,
                "neutral": p.neutral,
                "negative": p.negative,
                "top_topics": _label_counts(p.top_topics),
                "top_aspects": _label_counts(p.top_aspects),
            }
            for p in trend
        ],
        "top_topics": _label_counts(top_lists.top_topics),
        "top_aspects": _label_counts(top_lists.top_aspects),
        "metadata": {
            "export_timestamp": None,
            "version": __version__
        }
    }

    if terms is not None:
        export_data["terms"] = {
            "positive": _term_counts(terms.positive),
            "neutral": _term_counts(terms.neutral),
            "negative": _term_counts(terms.negative),
        }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Stamp the export time into the metadata block and write the payload as UTF-8 JSON."""
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat(timespec="seconds")

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)
