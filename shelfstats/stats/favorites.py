"""Favourite quotes and memos gathered across the whole library."""

from datetime import datetime, timezone
from typing import Iterable

from shelfstats.schemas.entry import LibraryEntry
from shelfstats.schemas.stats import FavoriteCounts, FavoriteItem, FavoritesStats, FavoriteTab
from shelfstats.stats.normalize import NormalizedEntry, parse_timestamp

_UNDATED = datetime.min.replace(tzinfo=timezone.utc)

_TAB_KIND = {"quotes": "quote", "memos": "memo"}


def collect_favorites(entries: Iterable[LibraryEntry | NormalizedEntry]) -> list[FavoriteItem]:
    """Every favourited quote and memo, most recent first.

    Undated or unparsable items sort last; ties keep collection order.
    """
    items = []
    for e in entries:
        entry = e.entry if isinstance(e, NormalizedEntry) else e
        review = entry.review
        if review is None:
            continue
        for q in review.memorable_quotes:
            if q.is_favorite:
                items.append(FavoriteItem(kind="quote", content=q.quote, entry=entry, created_at=q.date))
        for m in review.memos:
            if m.is_favorite:
                items.append(FavoriteItem(kind="memo", content=m.text, entry=entry, created_at=m.created_at))

    return sorted(items, key=lambda i: parse_timestamp(i.created_at) or _UNDATED, reverse=True)


def compute_favorites(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    tab: FavoriteTab = "all",
) -> FavoritesStats:
    items = collect_favorites(entries)
    counts = FavoriteCounts(
        all=len(items),
        quotes=sum(1 for i in items if i.kind == "quote"),
        memos=sum(1 for i in items if i.kind == "memo"),
    )
    if tab != "all":
        items = [i for i in items if i.kind == _TAB_KIND[tab]]
    return FavoritesStats(tab=tab, items=items, counts=counts)
