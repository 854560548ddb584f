"""Tokenization, n-gram building and term frequency ranking.

This is a lexical pipeline only: no stemming, no lemmatization. Word
frequency views must rank the stopword-free ``AnalysisText`` variant through
:func:`count_analysis_terms`; :func:`count_top_terms` is the general engine
for any other text.
"""

import logging
import re
from collections import Counter
from typing import AbstractSet, Iterable, List, Sequence, Tuple

from .constants import RankingConstants, TextConstants
from .models import AnalysisText, DisplayText, NgramOptions, Record, Sentiment, SentimentTerms, TermCount

logger = logging.getLogger(__name__)

URL_RE = re.compile(r"https?://\S+")
NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
WS_RE = re.compile(r"\s+")
DIGITS_RE = re.compile(r"^\d+$")

EMPTY_STOPWORDS: AbstractSet[str] = frozenset()

CLOUD_OPTIONS = NgramOptions(
    remove_stopwords=False,
    min_token_len=TextConstants.MIN_TOKEN_LEN,
    drop_pure_number=True,
)


def tokenize(text: str) -> List[str]:
    """Lowercase, drop URLs, replace anything outside [a-z0-9] with spaces, split."""
    if not text:
        return []
    clean = URL_RE.sub("", text.lower())
    clean = NON_ALNUM_RE.sub(" ", clean)
    return [t for t in WS_RE.split(clean) if t]


def _is_numeric(token: str) -> bool:
    return bool(DIGITS_RE.match(token))


def build_ngrams(
    tokens: Sequence[str],
    n: int,
    stopwords: AbstractSet[str] = EMPTY_STOPWORDS,
    options: NgramOptions = NgramOptions(),
) -> List[str]:
    """Slide a window of n tokens and join each surviving window with single spaces."""
    if n < 1 or len(tokens) < n:
        return []

    check_stopwords = options.remove_stopwords and len(stopwords) > 0
    min_len = options.min_token_len

    result = []
    for i in range(len(tokens) - n + 1):
        window = tokens[i:i + n]
        if check_stopwords and any(t in stopwords for t in window):
            continue
        if any(len(t) < min_len for t in window):
            continue
        if options.drop_pure_number and any(_is_numeric(t) for t in window):
            continue
        result.append(" ".join(window))
    return result


def count_top_terms(
    documents: Iterable[str],
    n: int,
    stopwords: AbstractSet[str],
    options: NgramOptions,
    top_n: int,
) -> List[TermCount]:
    """
    Count n-grams across all documents and return the top_n by descending count.

    Ties keep the order in which the phrases were first seen.
    """
    if top_n <= 0:
        return []

    counts: Counter = Counter()
    for doc in documents or ():
        if not doc:
            continue
        counts.update(build_ngrams(tokenize(doc), n, stopwords, options))

    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [TermCount(term, count) for term, count in ranked[:top_n]]


def count_analysis_terms(
    documents: Iterable[AnalysisText],
    n: int,
    options: NgramOptions = CLOUD_OPTIONS,
    top_n: int = RankingConstants.DEFAULT_TOP_TERMS,
) -> List[TermCount]:
    """
    Rank terms of stopword-free text.

    Stopwords were removed upstream, so no stopword set is applied here.
    Passing display text is a programming error: it would put stopwords back
    into the counts.
    """
    docs = []
    for doc in documents:
        if isinstance(doc, DisplayText):
            raise TypeError("count_analysis_terms() needs AnalysisText, got DisplayText")
        docs.append(doc)

    if options.remove_stopwords:
        options = NgramOptions(
            remove_stopwords=False,
            min_token_len=options.min_token_len,
            drop_pure_number=options.drop_pure_number,
        )
    return count_top_terms(docs, n, EMPTY_STOPWORDS, options, top_n)


def count_display_terms(
    documents: Iterable[DisplayText],
    n: int,
    stopwords: AbstractSet[str],
    options: NgramOptions = CLOUD_OPTIONS,
    top_n: int = RankingConstants.DEFAULT_TOP_TERMS,
) -> List[TermCount]:
    """Rank terms of display text, removing stopwords on the fly."""
    docs = []
    for doc in documents:
        if isinstance(doc, AnalysisText):
            raise TypeError("count_display_terms() needs DisplayText, got AnalysisText")
        docs.append(doc)

    options = NgramOptions(
        remove_stopwords=True,
        min_token_len=options.min_token_len,
        drop_pure_number=options.drop_pure_number,
    )
    return count_top_terms(docs, n, stopwords, options, top_n)


def _cloud_texts(records: Iterable[Record], sentiment: Sentiment) -> Tuple[AnalysisText, ...]:
    return tuple(
        r.text_no_stop for r in records
        if r.sentiment == sentiment and r.text_no_stop.strip()
    )


def sentiment_term_frequencies(
    records: Sequence[Record],
    n: int = 1,
    top_n: int = RankingConstants.DEFAULT_TOP_TERMS,
) -> SentimentTerms:
    """Rank terms separately for positive, neutral and negative comments."""
    if not records:
        return SentimentTerms((), (), ())

    ranked = {
        s: tuple(count_analysis_terms(_cloud_texts(records, s), n, CLOUD_OPTIONS, top_n))
        for s in (Sentiment.POSITIVE, Sentiment.NEUTRAL, Sentiment.NEGATIVE)
    }
    logger.debug(
        f"Term frequencies (n={n}, top={top_n}): "
        f"{len(ranked[Sentiment.POSITIVE])} positive, "
        f"{len(ranked[Sentiment.NEUTRAL])} neutral, "
        f"{len(ranked[Sentiment.NEGATIVE])} negative"
    )
    return SentimentTerms(
        positive=ranked[Sentiment.POSITIVE],
        neutral=ranked[Sentiment.NEUTRAL],
        negative=ranked[Sentiment.NEGATIVE],
    )
