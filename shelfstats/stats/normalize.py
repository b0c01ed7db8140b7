"""Coerce library entries into the shape the aggregators work on."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry, ReadingStatus

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"
MAX_RATING = 5


@dataclass(frozen=True)
class NormalizedEntry:
    entry: LibraryEntry
    status: ReadingStatus
    category: str
    rating: float | None = None
    start_date: date | None = None
    end_date: date | None = None

    @property
    def author(self) -> str:
        return self.entry.author

    @property
    def is_finished(self) -> bool:
        return self.status is ReadingStatus.Finished


def parse_date(raw: str | None) -> date | None:
    """Parse an ISO date or datetime string. Returns None if it can't be parsed.

    Datetimes keep the calendar date as written; offsets are not applied.
    """
    if not raw or not raw.strip():
        return None
    try:
        return datetime.fromisoformat(raw.strip()).date()
    except ValueError:
        logger.debug("Ignoring unparsable date %r", raw)
        return None


def parse_timestamp(raw: str | None) -> datetime | None:
    """Parse an ISO date or datetime into an aware UTC datetime, or None.

    Naive values are taken as UTC.
    """
    if not raw or not raw.strip():
        return None
    try:
        parsed = datetime.fromisoformat(raw.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        logger.debug("Ignoring unparsable timestamp %r", raw)
        return None


def normalize(entry: LibraryEntry) -> NormalizedEntry:
    review = entry.review
    if review is None:
        return NormalizedEntry(
            entry=entry,
            status=ReadingStatus.WantToRead,
            category=entry.category or UNCATEGORIZED,
        )

    rating = review.rating
    # Ratings live in (0, 5]; anything else counts as unrated.
    if rating is None or not math.isfinite(rating) or not 0 < rating <= MAX_RATING:
        rating = None
    return NormalizedEntry(
        entry=entry,
        status=review.status or ReadingStatus.WantToRead,
        category=entry.category or UNCATEGORIZED,
        rating=rating,
        start_date=parse_date(review.start_date),
        end_date=parse_date(review.end_date),
    )


def normalize_all(entries: Iterable[LibraryEntry | NormalizedEntry]) -> list[NormalizedEntry]:
    """Normalize a collection once, preserving order. Already-normalized items pass through."""
    return [e if isinstance(e, NormalizedEntry) else normalize(e) for e in entries]
