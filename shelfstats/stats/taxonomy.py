from typing import Iterable

from shelfstats import config
from shelfstats.schemas.entry import LibraryEntry, ReadingStatus
from shelfstats.schemas.stats import TaxonomyStats
from shelfstats.stats.buckets import count_by, rank
from shelfstats.stats.normalize import NormalizedEntry, normalize_all


def compute_taxonomy(
    entries: Iterable[LibraryEntry | NormalizedEntry],
    population: ReadingStatus = ReadingStatus.Finished,
    top_authors: int | None = None,
) -> TaxonomyStats:
    """Rank categories and authors among entries with the given status.

    Finished entries give the genre/author view, Want to Read the wishlist view.
    The category list is complete; authors are cut to the top N.
    """
    matching = [e for e in normalize_all(entries) if e.status is population]
    limit = config.TOP_AUTHORS if top_authors is None else top_authors
    return TaxonomyStats(
        population=population,
        total=len(matching),
        categories=rank(count_by(matching, lambda e: e.category)),
        # Author strings are used as-is; an empty author is a bucket of its own
        authors=rank(count_by(matching, lambda e: e.author), limit=limit),
    )
