"""Filter predicate engine and explore-view helpers."""

import datetime
import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import LabelConstants, RankingConstants
from .models import FilterSpec, Page, Record

logger = logging.getLogger(__name__)

SORT_NEWEST = "Newest"
SORT_OLDEST = "Oldest"
SORT_HIGHEST_SCORE = "HighestScore"
SORT_ORDERS = (SORT_NEWEST, SORT_OLDEST, SORT_HIGHEST_SCORE)


def _bound(value) -> Optional[str]:
    """Render a date bound in the YYYY-MM-DD form used by Record.date_str."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return str(value)


def matches(record: Record, spec: FilterSpec) -> bool:
    """Return True if the record passes every active clause of the spec.

    ``search_query`` is not a clause here; the explore view applies it on top
    with :func:`search_filter`.
    """
    all_ = LabelConstants.ALL

    if spec.source != all_ and record.source != spec.source:
        return False

    start = _bound(spec.date_range.start)
    if start is not None and record.date_str < start:
        return False
    end = _bound(spec.date_range.end)
    if end is not None and record.date_str > end:
        return False

    if spec.topic != all_ and record.topic != spec.topic:
        return False

    if spec.sentiment != all_ and record.sentiment != spec.sentiment:
        return False

    if spec.aspect != all_ and spec.aspect not in (record.aspect1, record.aspect2):
        return False

    if spec.hide_general and record.aspect1 == LabelConstants.GENERAL_ASPECT:
        return False

    if record.aspect_score < spec.min_aspect_score:
        return False

    return True


def apply_filters(records: Iterable[Record], spec: FilterSpec) -> List[Record]:
    """Keep the records matching the spec, in input order."""
    return [r for r in records if matches(r, spec)]


def search_filter(records: Sequence[Record], query: str) -> List[Record]:
    """Case-insensitive substring search over the display text. Empty query keeps everything."""
    if not query:
        return list(records)
    lower = query.lower()
    return [r for r in records if lower in r.text.lower()]


def unique_topics(records: Iterable[Record]) -> List[str]:
    return sorted({r.topic for r in records if r.topic})


def unique_aspects(records: Iterable[Record]) -> List[str]:
    aspects = set()
    for r in records:
        if r.aspect1:
            aspects.add(r.aspect1)
        if r.aspect2:
            aspects.add(r.aspect2)
    return sorted(aspects)


def sort_records(records: Iterable[Record], order: str = SORT_NEWEST) -> List[Record]:
    """Stable sort for the explore table. Unknown orders keep input order."""
    if order == SORT_NEWEST:
        return sorted(records, key=lambda r: r.date_str, reverse=True)
    if order == SORT_OLDEST:
        return sorted(records, key=lambda r: r.date_str)
    if order == SORT_HIGHEST_SCORE:
        return sorted(records, key=lambda r: r.aspect_score, reverse=True)
    logger.warning(f"Unknown sort order '{order}', keeping input order")
    return list(records)


def paginate(records: Sequence[Record], page: int = 1, page_size: int = RankingConstants.PAGE_SIZE) -> Page:
    """Slice one page out of the records. The page number is clamped to the valid range."""
    page_size = max(1, int(page_size))
    total_items = len(records)
    total_pages = math.ceil(total_items / page_size)
    page = min(max(1, int(page)), max(1, total_pages))
    start = (page - 1) * page_size
    items: Tuple[Record, ...] = tuple(records[start:start + page_size])
    return Page(
        items=items,
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )
