from shelfstats.stats.breakdown import MonthlyBreakdownSelector
from shelfstats.stats.favorites import collect_favorites, compute_favorites
from shelfstats.stats.habits import compute_habits, monthly_series, rating_distribution, reading_speed
from shelfstats.stats.normalize import NormalizedEntry, normalize, normalize_all
from shelfstats.stats.overview import compute_overview
from shelfstats.stats.reading_calendar import CalendarCursor, build_calendar, entries_on_day, index_by_day
from shelfstats.stats.report import compute_report
from shelfstats.stats.taxonomy import compute_taxonomy

__all__ = [
    "CalendarCursor",
    "MonthlyBreakdownSelector",
    "NormalizedEntry",
    "build_calendar",
    "collect_favorites",
    "compute_favorites",
    "compute_habits",
    "compute_overview",
    "compute_report",
    "compute_taxonomy",
    "entries_on_day",
    "index_by_day",
    "monthly_series",
    "normalize",
    "normalize_all",
    "rating_distribution",
    "reading_speed",
]
