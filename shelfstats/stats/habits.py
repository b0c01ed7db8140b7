"""Reading habits: monthly completions, reading speed and the rating histogram."""

from datetime import date
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry
from shelfstats.schemas.stats import (
    HabitsStats,
    MonthlyBucket,
    RatingBucket,
    ReadingSpeed,
    SpeedSample,
    Window,
)
from shelfstats.stats.buckets import (
    bucket_by_month,
    count_by,
    month_label,
    round_half_up,
    trailing_window,
)
from shelfstats.stats.normalize import NormalizedEntry, normalize_all


def finished_by_month(entries: Iterable[NormalizedEntry]) -> list[tuple[date, list[NormalizedEntry]]]:
    """Finished entries with a usable end date, grouped per month in ascending order."""
    return bucket_by_month(
        (e for e in entries if e.is_finished),
        lambda e: e.end_date,
    )


def monthly_series(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    window: Window = "all",
) -> list[MonthlyBucket]:
    buckets = finished_by_month(normalize_all(entries))
    return [
        MonthlyBucket(month=month, label=month_label(month), count=len(items))
        for month, items in trailing_window(buckets, window)
    ]


def _speed_days(e: NormalizedEntry) -> int | None:
    if e.start_date is None or e.end_date is None:
        return None
    days = (e.end_date - e.start_date).days
    return days if days >= 0 else None


def reading_speed(entries: Iterable[LibraryEntry | NormalizedEntry]) -> ReadingSpeed:
    """Average, fastest and slowest reads among entries with a valid start/end range.

    Ties on fastest/slowest go to the entry seen first.
    """
    total = 0
    count = 0
    fastest: tuple[NormalizedEntry, int] | None = None
    slowest: tuple[NormalizedEntry, int] | None = None

    for e in normalize_all(entries):
        days = _speed_days(e)
        if days is None:
            continue
        total += days
        count += 1
        if fastest is None or days < fastest[1]:
            fastest = (e, days)
        if slowest is None or days > slowest[1]:
            slowest = (e, days)

    if count == 0:
        return ReadingSpeed(average_days=0, fastest=None, slowest=None, sample_count=0)

    return ReadingSpeed(
        average_days=int(round_half_up(total / count)),
        fastest=SpeedSample(entry=fastest[0].entry, days=fastest[1]),
        slowest=SpeedSample(entry=slowest[0].entry, days=slowest[1]),
        sample_count=count,
    )


def rating_distribution(entries: Iterable[LibraryEntry | NormalizedEntry]) -> list[RatingBucket]:
    counts = count_by(
        normalize_all(entries),
        lambda e: round_half_up(e.rating * 2) / 2 if e.is_finished and e.rating is not None else None,
    )
    return [
        RatingBucket(rating=rating, label=f"{rating:.1f}", count=count)
        for rating, count in sorted(counts.items())
    ]


def compute_habits(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    window: Window = "12",
) -> HabitsStats:
    normalized = normalize_all(entries)
    return HabitsStats(
        window=window,
        monthly=monthly_series(normalized, window),
        speed=reading_speed(normalized),
        rating_distribution=rating_distribution(normalized),
    )
