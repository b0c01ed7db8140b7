"""Index finished books by completion day and lay them out as a month grid."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry
from shelfstats.schemas.stats import CalendarDay, CalendarMonth
from shelfstats.stats.normalize import NormalizedEntry, normalize_all


@dataclass(frozen=True)
class CalendarCursor:
    year: int
    month: int

    @classmethod
    def of(cls, d: date) -> "CalendarCursor":
        return cls(d.year, d.month)

    def previous(self) -> "CalendarCursor":
        if self.month == 1:
            return CalendarCursor(self.year - 1, 12)
        return CalendarCursor(self.year, self.month - 1)

    def next(self) -> "CalendarCursor":
        if self.month == 12:
            return CalendarCursor(self.year + 1, 1)
        return CalendarCursor(self.year, self.month + 1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])


def _days_since_sunday(d: date) -> int:
    return (d.weekday() + 1) % 7


def grid_days(cursor: CalendarCursor) -> list[date]:
    """Every day from the Sunday on or before the 1st to the Saturday on or after month end."""
    start = cursor.first_day - timedelta(days=_days_since_sunday(cursor.first_day))
    end = cursor.last_day + timedelta(days=6 - _days_since_sunday(cursor.last_day))
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def index_by_day(entries: Iterable[LibraryEntry | NormalizedEntry]) -> dict[date, list[NormalizedEntry]]:
    index: dict[date, list[NormalizedEntry]] = {}
    for e in normalize_all(entries):
        if e.is_finished and e.end_date is not None:
            index.setdefault(e.end_date, []).append(e)
    return index


def build_calendar(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    year: int,
    month: int,
    today: date | None = None,
) -> CalendarMonth:
    cursor = CalendarCursor(year, month)
    index = index_by_day(entries)

    days = []
    for day in grid_days(cursor):
        if (day.year, day.month) != (year, month):
            # Padding days from neighbouring months carry no entries
            days.append(CalendarDay(date=day, in_month=False))
            continue
        on_day = index.get(day, [])
        days.append(
            CalendarDay(
                date=day,
                in_month=True,
                is_today=day == today,
                count=len(on_day),
                representative=on_day[-1].entry if on_day else None,
            )
        )

    return CalendarMonth(
        year=year,
        month=month,
        label=cursor.first_day.strftime("%B %Y"),
        days=days,
    )


def entries_on_day(entries: Iterable[LibraryEntry | NormalizedEntry], day: date) -> list[LibraryEntry]:
    """Books finished on the given day, most recent end date first."""
    on_day = index_by_day(entries).get(day, [])
    return [e.entry for e in sorted(on_day, key=lambda e: e.end_date, reverse=True)]
