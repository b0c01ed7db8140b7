from datetime import date

from fastapi import APIRouter, Query

from shelfstats import config
from shelfstats.schemas.entry import LibraryEntry, ReadingStatus
from shelfstats.schemas.stats import (
    BreakdownRequest,
    CalendarMonth,
    CalendarRequest,
    DayRequest,
    FavoritesStats,
    FavoriteTab,
    HabitsStats,
    MonthlyBreakdown,
    OverviewStats,
    StatsReport,
    StatsRequest,
    TaxonomyStats,
)
from shelfstats.stats.breakdown import MonthlyBreakdownSelector
from shelfstats.stats.favorites import compute_favorites
from shelfstats.stats.habits import compute_habits
from shelfstats.stats.overview import compute_overview
from shelfstats.stats.reading_calendar import build_calendar, entries_on_day
from shelfstats.stats.report import compute_report
from shelfstats.stats.taxonomy import compute_taxonomy

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.post("", response_model=StatsReport)
async def full_report(data: StatsRequest):
    return compute_report(
        data.entries,
        today=data.today or date.today(),
        window=data.window or config.DEFAULT_WINDOW,
    )


@router.post("/overview", response_model=OverviewStats)
async def overview(data: StatsRequest):
    return compute_overview(data.entries, today=data.today or date.today())


@router.post("/habits", response_model=HabitsStats)
async def habits(data: StatsRequest):
    return compute_habits(data.entries, window=data.window or config.DEFAULT_WINDOW)


@router.post("/taxonomy", response_model=TaxonomyStats)
async def taxonomy(
    data: StatsRequest,
    population: ReadingStatus = Query(ReadingStatus.Finished, description="Finished for genres, Want to Read for the wishlist"),
    display: bool = Query(False, description="Cap the category list for charting"),
):
    result = compute_taxonomy(data.entries, population=population)
    if display:
        result = result.model_copy(update={"categories": result.categories[: config.CATEGORY_DISPLAY_LIMIT]})
    return result


@router.post("/calendar", response_model=CalendarMonth)
async def calendar_month(data: CalendarRequest):
    today = data.today or date.today()
    return build_calendar(
        data.entries,
        year=data.year or today.year,
        month=data.month or today.month,
        today=today,
    )


@router.post("/calendar/day", response_model=list[LibraryEntry])
async def calendar_day(data: DayRequest):
    return entries_on_day(data.entries, data.day)


@router.post("/breakdown", response_model=MonthlyBreakdown)
async def monthly_breakdown(data: BreakdownRequest):
    selector = MonthlyBreakdownSelector(
        data.entries,
        window=data.window or config.DEFAULT_WINDOW,
        selected=data.selected,
    )
    return selector.snapshot()


@router.post("/favorites", response_model=FavoritesStats)
async def favorites(
    data: StatsRequest,
    tab: FavoriteTab = Query("all", description="all, quotes or memos"),
):
    return compute_favorites(data.entries, tab=tab)
