"""Long-lived analytics context.

The context owns the dataset and the stopword list. Both are loaded at most
once, on first use, and are read-only afterwards. Build one context per
process (or per dataset) and pass it to the pipeline calls below.
"""

import logging
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..core.aggregations import aggregate_trend, compute_kpis, get_top_lists
from ..core.config import Settings, settings as default_settings
from ..core.constants import LabelConstants
from ..core.filters import (
    SORT_NEWEST, apply_filters, paginate, search_filter, sort_records, unique_aspects, unique_topics,
)
from ..core.models import (
    DashboardMetrics, FilterSpec, Page, Record, SentimentTerms, TermCount, TermSamples, TopLists, TrendPoint,
)
from ..core.nlp import count_display_terms, sentiment_term_frequencies
from ..core.samples import rank_term_samples
from .data_loader import DatasetLoader
from .stopwords import StopwordRepository

logger = logging.getLogger(__name__)


class AnalyticsContext:
    """Dataset, stopwords and the pipeline operations over them."""

    def __init__(self, loader: DatasetLoader, stopwords: Optional[StopwordRepository] = None,
                 config: Optional[Settings] = None):
        self.loader = loader
        self.stopword_repo = stopwords or StopwordRepository()
        self.config = config or default_settings

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "AnalyticsContext":
        config = config or default_settings
        loader = DatasetLoader(
            path=config.data_path,
            url=config.data_url,
            timeout=config.request_timeout,
            aliases_path=config.source_aliases_file,
        )
        return cls(loader, StopwordRepository(config.stopwords_path), config)

    @property
    def records(self) -> Tuple[Record, ...]:
        """All records. Raises DataLoadError if the dataset cannot be fetched."""
        return self.loader.load()

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self.stopword_repo.load()

    def filtered(self, spec: FilterSpec) -> List[Record]:
        return apply_filters(self.records, spec)

    def filter_options(self) -> Dict[str, List[str]]:
        """Topic and aspect choices for filter controls, taken from the full dataset."""
        return {
            "topics": unique_topics(self.records),
            "aspects": unique_aspects(self.records),
        }

    def kpis(self, spec: FilterSpec) -> DashboardMetrics:
        return compute_kpis(self.filtered(spec))

    def trend(self, spec: FilterSpec) -> List[TrendPoint]:
        return aggregate_trend(self.filtered(spec))

    def top_lists(self, spec: FilterSpec) -> TopLists:
        return get_top_lists(self.filtered(spec))

    def term_frequencies(self, spec: FilterSpec, n: Optional[int] = None,
                         top_n: Optional[int] = None) -> SentimentTerms:
        n = n or self.config.default_ngram
        top_n = top_n or self.config.default_top_n
        return sentiment_term_frequencies(self.filtered(spec), n=n, top_n=top_n)

    def display_terms(self, spec: FilterSpec, n: Optional[int] = None,
                      top_n: Optional[int] = None) -> List[TermCount]:
        """Most frequent terms of the readable text, with the stopword list applied."""
        n = n or self.config.default_ngram
        top_n = top_n or self.config.default_top_n
        return count_display_terms((r.text for r in self.filtered(spec)), n, self.stopwords, top_n=top_n)

    def term_samples(self, term: str, spec: FilterSpec, source: str = LabelConstants.ALL,
                     topic: str = LabelConstants.ALL, sample_size: Optional[int] = None) -> TermSamples:
        return rank_term_samples(
            term,
            self.filtered(spec),
            source=source,
            topic=topic,
            sample_size=sample_size or self.config.sample_size,
        )

    def explore(self, spec: FilterSpec, order: str = SORT_NEWEST, page: int = 1) -> Page:
        rows: Sequence[Record] = sort_records(search_filter(self.filtered(spec), spec.search_query), order)
        return paginate(rows, page, self.config.page_size)
