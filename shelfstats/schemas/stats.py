import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from shelfstats.schemas.entry import LibraryEntry, ReadingStatus

Window = Literal["6", "12", "all"]

FavoriteTab = Literal["all", "quotes", "memos"]

NO_RATING = "N/A"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RankedItem(_Frozen):
    name: str
    count: int


class OverviewStats(_Frozen):
    status_counts: dict[ReadingStatus, int]
    total_entries: int
    total_finished: int
    currently_reading: int
    average_rating: float | None
    average_rating_label: str
    finished_this_month: int


class MonthlyBucket(_Frozen):
    month: dt.date  # first day of the month
    label: str
    count: int


class RatingBucket(_Frozen):
    rating: float
    label: str
    count: int


class SpeedSample(_Frozen):
    entry: LibraryEntry
    days: int


class ReadingSpeed(_Frozen):
    average_days: int
    fastest: SpeedSample | None
    slowest: SpeedSample | None
    sample_count: int


class HabitsStats(_Frozen):
    window: Window
    monthly: list[MonthlyBucket]
    speed: ReadingSpeed
    rating_distribution: list[RatingBucket]


class TaxonomyStats(_Frozen):
    population: ReadingStatus
    total: int
    categories: list[RankedItem]
    authors: list[RankedItem]


class CalendarDay(_Frozen):
    date: dt.date
    in_month: bool
    is_today: bool = False
    count: int = 0
    representative: LibraryEntry | None = None

    @computed_field
    @property
    def has_entries(self) -> bool:
        return self.count > 0

    @computed_field
    @property
    def more(self) -> int:
        return max(self.count - 1, 0)


class CalendarMonth(_Frozen):
    year: int
    month: int
    label: str
    days: list[CalendarDay]

    @property
    def weeks(self) -> list[list[CalendarDay]]:
        return [self.days[i:i + 7] for i in range(0, len(self.days), 7)]


class MonthlyBreakdown(_Frozen):
    window: Window
    series: list[MonthlyBucket]
    selected: dt.date | None
    stale: bool
    entries: list[LibraryEntry]


class FavoriteItem(_Frozen):
    kind: Literal["quote", "memo"]
    content: str
    entry: LibraryEntry
    created_at: str | None = None  # as stored on the quote or memo


class FavoriteCounts(_Frozen):
    all: int = 0
    quotes: int = 0
    memos: int = 0


class FavoritesStats(_Frozen):
    tab: FavoriteTab
    items: list[FavoriteItem]
    counts: FavoriteCounts


class StatsReport(_Frozen):
    today: dt.date
    overview: OverviewStats
    habits: HabitsStats
    genres: TaxonomyStats
    wishlist: TaxonomyStats
    favorites: FavoritesStats


class StatsRequest(BaseModel):
    entries: list[LibraryEntry] = []
    window: Window | None = None  # defaults to config.DEFAULT_WINDOW
    today: dt.date | None = None  # defaults to today in the endpoint


class CalendarRequest(BaseModel):
    entries: list[LibraryEntry] = []
    year: int | None = Field(None, ge=1900, le=2999)
    month: int | None = Field(None, ge=1, le=12)
    today: dt.date | None = None


class DayRequest(BaseModel):
    entries: list[LibraryEntry] = []
    day: dt.date


class BreakdownRequest(BaseModel):
    entries: list[LibraryEntry] = []
    window: Window | None = None
    selected: dt.date | None = Field(None, description="Any day in the month to select")
