"""Grouping, counting and ranking helpers shared by the aggregators."""

from collections import Counter
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from shelfstats.schemas.stats import RankedItem, Window

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def count_by(items: Iterable[T], key: Callable[[T], K | None]) -> Counter:
    """Count items per key. Keys keep first-seen order; a None key skips the item."""
    counts: Counter = Counter()
    for item in items:
        k = key(item)
        if k is None:
            continue
        counts[k] += 1
    return counts


def rank(counts: Counter, limit: int | None = None) -> list[RankedItem]:
    # sorted() is stable, so equal counts stay in first-seen order
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    if limit is not None:
        ordered = ordered[:limit]
    return [RankedItem(name=name, count=count) for name, count in ordered]


def month_key(d: date) -> date:
    return date(d.year, d.month, 1)


def month_label(month: date) -> str:
    return month.strftime("%b %y")


def bucket_by_month(items: Iterable[T], key: Callable[[T], date | None]) -> list[tuple[date, list[T]]]:
    buckets: dict[date, list[T]] = {}
    for item in items:
        d = key(item)
        if d is None:
            continue
        buckets.setdefault(month_key(d), []).append(item)
    return sorted(buckets.items(), key=lambda kv: kv[0])


def trailing_window(buckets: Sequence[T], window: Window) -> list[T]:
    """Keep the most recent 6 or 12 buckets, or all of them."""
    if window == "all":
        return list(buckets)
    size = int(window)
    return list(buckets[-size:])


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves up (2.25 -> 2.3), where round() would go to the even digit."""
    exp = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(exp, rounding=ROUND_HALF_UP))
