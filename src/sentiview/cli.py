"""Command-line interface for SentiView."""

import argparse
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants, LabelConstants, TextConstants
from .core.filters import SORT_NEWEST, SORT_ORDERS
from .core.models import DateRange, FilterSpec
from .services.context import AnalyticsContext
from .services.data_loader import DataLoadError
from .services.stopwords import StopwordRepository
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def build_filter_spec(args) -> FilterSpec:
    """Build the global filter from the shared command-line options."""
    return FilterSpec(
        source=args.source,
        topic=args.topic,
        sentiment=args.sentiment,
        aspect=args.aspect,
        date_range=DateRange(start=args.date_from, end=args.date_to),
        hide_general=not args.show_general,
        min_aspect_score=args.min_score,
        search_query=args.query or "",
    )


def cmd_summary(args, context: AnalyticsContext):
    """Summary command."""
    spec = build_filter_spec(args)
    records = context.filtered(spec)
    metrics = context.kpis(spec)
    top_lists = context.top_lists(spec)

    print(f"Comments: {metrics.total_comments} of {len(context.records)}")
    for label, count in metrics.sentiment_counts.items():
        print(f"  {label}: {count}")
    dom = metrics.dominant_sentiment
    print(f"Dominant sentiment: {dom.label} ({dom.count}, {dom.percentage}%)")
    print(f"Top topic: {metrics.top_topic.label} ({metrics.top_topic.count})")
    print(f"Top aspect: {metrics.top_aspect.label} ({metrics.top_aspect.count})")

    print("\nTop topics:")
    for i, item in enumerate(top_lists.top_topics, 1):
        print(f"  {i}. {item.label}: {item.count}")
    print("Top aspects:")
    for i, item in enumerate(top_lists.top_aspects, 1):
        print(f"  {i}. {item.label}: {item.count}")

    if args.out:
        trend = context.trend(spec)
        terms = context.term_frequencies(spec) if records else None
        export_to_json(prepare_export(spec, metrics, trend, top_lists, terms), args.out)
        print(f"\nResults exported to {args.out}")


def cmd_trend(args, context: AnalyticsContext):
    """Weekly trend command."""
    trend = context.trend(build_filter_spec(args))
    if not trend:
        print("No data for the selected filters.")
        return

    print(f"{'Week':<12}{'Total':>7}{'Pos':>6}{'Neu':>6}{'Neg':>6}  Top topics / aspect")
    for p in trend:
        topics = ", ".join(f"{t.label} ({t.count})" for t in p.top_topics)
        aspect = ", ".join(f"{a.label} ({a.count})" for a in p.top_aspects) or "-"
        print(f"{p.week_start:<12}{p.total:>7}{p.positive:>6}{p.neutral:>6}{p.negative:>6}  {topics} / {aspect}")


def cmd_terms(args, context: AnalyticsContext):
    """Word frequency command."""
    spec = build_filter_spec(args)

    if args.display_text:
        terms = context.display_terms(spec, n=args.ngram, top_n=args.top)
        print(f"Top {args.top} terms (n={args.ngram}, readable text):")
        for t in terms:
            print(f"  {t.term}: {t.count}")
        return

    ranked = context.term_frequencies(spec, n=args.ngram, top_n=args.top)
    for label, terms in (("Positive", ranked.positive), ("Neutral", ranked.neutral), ("Negative", ranked.negative)):
        print(f"\n{label} (top {args.top}, n={args.ngram}):")
        if not terms:
            print("  (no terms)")
        for t in terms:
            print(f"  {t.term}: {t.count}")


def cmd_samples(args, context: AnalyticsContext):
    """Term samples command."""
    result = context.term_samples(
        args.term,
        build_filter_spec(args),
        source=args.sample_source,
        topic=args.sample_topic,
        sample_size=args.limit,
    )
    print(f"Term: {result.term} ({result.total_matches} matches found)")
    if result.available_topics:
        print(f"Topics: {', '.join(result.available_topics)}")
    for r in result.samples:
        print(f"\n[{r.date_str}] {r.source} / {r.topic} / {r.sentiment.value}")
        print(f"  {r.text[:240]}")


def cmd_explore(args, context: AnalyticsContext):
    """Explore command."""
    page = context.explore(build_filter_spec(args), order=args.sort, page=args.page)
    if page.total_items == 0:
        print("No comments match the selected filters.")
        return

    first = (page.page - 1) * page.page_size + 1
    last = first + len(page.items) - 1
    print(f"Showing {first} to {last} of {page.total_items} entries (page {page.page}/{page.total_pages})")
    for r in page.items:
        aspects = r.aspect1 if not r.aspect2 else f"{r.aspect1}, {r.aspect2}"
        print(f"\n#{r.id} [{r.date_str}] {r.source} / {r.topic} / {r.sentiment.value} / {aspects} ({r.aspect_score:g})")
        print(f"  {r.text[:240]}")


def cmd_download_stopwords(args):
    """Download the stopword list."""
    dest = StopwordRepository.download(args.url, args.dest)
    print(f"Stopwords saved to {dest}")


def _add_filter_args(parser):
    parser.add_argument('--source', default=LabelConstants.ALL, help='Platform, e.g. TikTok or YouTube')
    parser.add_argument('--topic', default=LabelConstants.ALL, help='Topic label')
    parser.add_argument('--sentiment', default=LabelConstants.ALL, choices=['All', 'Positive', 'Neutral', 'Negative'])
    parser.add_argument('--aspect', default=LabelConstants.ALL, help='Aspect label (matches aspect 1 or 2)')
    parser.add_argument('--from', dest='date_from', help='First date, YYYY-MM-DD (inclusive)')
    parser.add_argument('--to', dest='date_to', help='Last date, YYYY-MM-DD (inclusive)')
    parser.add_argument('--show-general', action='store_true', default=not settings.hide_general_by_default,
                        help=f"Include comments whose aspect is '{LabelConstants.GENERAL_ASPECT}'")
    parser.add_argument('--min-score', type=float, default=settings.default_min_aspect_score,
                        help='Minimum aspect score')
    parser.add_argument('--query', help='Case-insensitive text search over the explore view')


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="SentiView - Social Comment Analytics")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    filters = argparse.ArgumentParser(add_help=False)
    _add_filter_args(filters)

    # Summary command
    summary_parser = subparsers.add_parser('summary', parents=[filters], help='Show KPIs and top lists')
    summary_parser.add_argument('--out', help='Output JSON file')

    # Trend command
    subparsers.add_parser('trend', parents=[filters], help='Show the weekly trend')

    # Terms command
    terms_parser = subparsers.add_parser('terms', parents=[filters], help='Show top terms per sentiment')
    terms_parser.add_argument('--ngram', type=int, default=settings.default_ngram,
                              choices=range(1, TextConstants.MAX_NGRAM + 1), help='Phrase length')
    terms_parser.add_argument('--top', type=int, default=settings.default_top_n, help='Terms per sentiment')
    terms_parser.add_argument('--display-text', action='store_true',
                              help='Rank the readable text with the stopword list instead')

    # Samples command
    samples_parser = subparsers.add_parser('samples', parents=[filters], help='Show comments containing a term')
    samples_parser.add_argument('term', help='Term to look up')
    samples_parser.add_argument('--sample-source', default=LabelConstants.ALL, help='Narrow samples by platform')
    samples_parser.add_argument('--sample-topic', default=LabelConstants.ALL, help='Narrow samples by topic')
    samples_parser.add_argument('--limit', type=int, default=settings.sample_size, help='Maximum samples')

    # Explore command
    explore_parser = subparsers.add_parser('explore', parents=[filters], help='Browse filtered comments')
    explore_parser.add_argument('--sort', default=SORT_NEWEST, choices=SORT_ORDERS)
    explore_parser.add_argument('--page', type=int, default=1)

    # Download stopwords command
    download_parser = subparsers.add_parser('download-stopwords', help='Download the stopword list')
    download_parser.add_argument('--url', default=settings.stopwords_url)
    download_parser.add_argument('--dest', default=settings.stopwords_path)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {
        'summary': cmd_summary,
        'trend': cmd_trend,
        'terms': cmd_terms,
        'samples': cmd_samples,
        'explore': cmd_explore,
    }

    try:
        if args.command == 'download-stopwords':
            cmd_download_stopwords(args)
        else:
            commands[args.command](args, AnalyticsContext.from_settings())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except DataLoadError as e:
        logger.error(f"Could not load dataset: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
