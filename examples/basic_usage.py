"""Basic usage examples for SentiView."""

import sys

from sentiview import AnalyticsContext, DataLoadError
from sentiview.core.models import DateRange, FilterSpec
from sentiview.core.samples import highlight_segments


def example_dashboard(context: AnalyticsContext):
    """Example: KPIs, top lists and weekly trend for the default dashboard filters."""
    print("📊 Dashboard (general comments hidden, aspect score >= 2)")

    spec = FilterSpec.dashboard_defaults()
    kpis = context.kpis(spec)
    print(f"Comments: {kpis.total_comments}")
    dom = kpis.dominant_sentiment
    print(f"Dominant sentiment: {dom.label} ({dom.percentage}%)")

    top = context.top_lists(spec)
    print("Top aspects:")
    for i, item in enumerate(top.top_aspects, 1):
        print(f"  {i}. {item.label}: {item.count}")

    print("Weekly trend:")
    for point in context.trend(spec):
        print(f"  {point.week_start}: {point.total} ({point.positive}+ / {point.negative}-)")


def example_word_frequencies(context: AnalyticsContext):
    """Example: bigram frequencies per sentiment for TikTok comments in January 2024."""
    print("\n☁️ Bigrams on TikTok, January 2024")

    spec = FilterSpec(source="TikTok", date_range=DateRange(start="2024-01-01", end="2024-01-31"))
    terms = context.term_frequencies(spec, n=2, top_n=10)
    for label, ranked in (("Positive", terms.positive), ("Negative", terms.negative)):
        print(f"{label}: " + ", ".join(f"{t.term} ({t.count})" for t in ranked))
    return terms


def example_term_samples(context: AnalyticsContext, term: str):
    """Example: ranked sample comments for a term, with the term highlighted."""
    print(f"\n🔍 Samples for '{term}'")

    result = context.term_samples(term, FilterSpec(), sample_size=5)
    print(f"{result.total_matches} matches found")
    for record in result.samples:
        marked = "".join(f"**{part}**" if hit else part for part, hit in highlight_segments(record.text, term))
        print(f"  [{record.date_str}] {marked}")


if __name__ == "__main__":
    context = AnalyticsContext.from_settings()

    print("🚀 SentiView Examples")
    print("=" * 50)

    try:
        example_dashboard(context)
        terms = example_word_frequencies(context)
        if terms.positive:
            example_term_samples(context, terms.positive[0].term)
        print("\n✅ All examples completed successfully!")
    except DataLoadError as e:
        print(f"\n❌ Could not load the dataset: {e}")
        sys.exit(1)
