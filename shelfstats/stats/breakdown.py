from datetime import date
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry
from shelfstats.schemas.stats import MonthlyBreakdown, MonthlyBucket, Window
from shelfstats.stats.buckets import month_key
from shelfstats.stats.habits import monthly_series
from shelfstats.stats.normalize import NormalizedEntry, normalize_all


class MonthlyBreakdownSelector:
    """Monthly completion series with a selected month and that month's books.

    The first computation with data selects the most recent month. A later
    window or collection change keeps whatever was selected, even if that month
    dropped out of the series; the selection is then stale and lists nothing.
    """

    def __init__(
        self,
        entries: Iterable[LibraryEntry | NormalizedEntry],
        window: Window = "12",
        selected: date | None = None,
    ) -> None:
        self._entries = normalize_all(entries)
        self.window: Window = window
        self.selected: date | None = month_key(selected) if selected else None
        self.series: list[MonthlyBucket] = []
        self._recompute()

    def _recompute(self) -> None:
        self.series = monthly_series(self._entries, self.window)
        if self.selected is None and self.series:
            self.selected = self.series[-1].month

    def set_window(self, window: Window) -> None:
        self.window = window
        self._recompute()

    def set_entries(self, entries: Iterable[LibraryEntry | NormalizedEntry]) -> None:
        self._entries = normalize_all(entries)
        self._recompute()

    def select(self, month: date) -> None:
        self.selected = month_key(month)

    @property
    def is_stale(self) -> bool:
        return self.selected is not None and all(b.month != self.selected for b in self.series)

    def selected_entries(self) -> list[LibraryEntry]:
        if self.selected is None or self.is_stale:
            return []
        in_month = [
            e
            for e in self._entries
            if e.is_finished and e.end_date is not None and month_key(e.end_date) == self.selected
        ]
        in_month.sort(key=lambda e: e.end_date, reverse=True)
        return [e.entry for e in in_month]

    def snapshot(self) -> MonthlyBreakdown:
        return MonthlyBreakdown(
            window=self.window,
            series=self.series,
            selected=self.selected,
            stale=self.is_stale,
            entries=self.selected_entries(),
        )
