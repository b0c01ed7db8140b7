from datetime import date
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry, ReadingStatus
from shelfstats.schemas.stats import StatsReport, Window
from shelfstats.stats.favorites import compute_favorites
from shelfstats.stats.habits import compute_habits
from shelfstats.stats.normalize import NormalizedEntry, normalize_all
from shelfstats.stats.overview import compute_overview
from shelfstats.stats.taxonomy import compute_taxonomy


def compute_report(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    today: date,
    window: Window = "12",
) -> StatsReport:
    """Every statistics tab from a single normalization pass."""
    normalized = normalize_all(entries)
    return StatsReport(
        today=today,
        overview=compute_overview(normalized, today),
        habits=compute_habits(normalized, window),
        genres=compute_taxonomy(normalized, ReadingStatus.Finished),
        wishlist=compute_taxonomy(normalized, ReadingStatus.WantToRead),
        favorites=compute_favorites(normalized),
    )
