from datetime import date
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry, ReadingStatus
from shelfstats.schemas.stats import NO_RATING, OverviewStats
from shelfstats.stats.buckets import count_by, round_half_up
from shelfstats.stats.normalize import NormalizedEntry, normalize_all

STATUS_ORDER = (
    ReadingStatus.Finished,
    ReadingStatus.Reading,
    ReadingStatus.WantToRead,
    ReadingStatus.Dropped,
)


def average_rating(entries: Iterable[NormalizedEntry]) -> float | None:
    """Mean rating of finished entries that have one, to one decimal. None when nothing is rated."""
    ratings = [e.rating for e in entries if e.is_finished and e.rating is not None]
    if not ratings:
        return None
    return round_half_up(sum(ratings) / len(ratings), 1)


def compute_overview(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    today: date,
) -> OverviewStats:
    normalized = normalize_all(entries)

    counts = count_by(normalized, lambda e: e.status)
    status_counts = {status: counts.get(status, 0) for status in STATUS_ORDER}

    avg = average_rating(normalized)
    finished_this_month = sum(
        1
        for e in normalized
        if e.is_finished
        and e.end_date is not None
        and (e.end_date.year, e.end_date.month) == (today.year, today.month)
    )

    return OverviewStats(
        status_counts=status_counts,
        total_entries=len(normalized),
        total_finished=status_counts[ReadingStatus.Finished],
        currently_reading=status_counts[ReadingStatus.Reading],
        average_rating=avg,
        average_rating_label=NO_RATING if avg is None else f"{avg:.1f}",
        finished_this_month=finished_this_month,
    )
