"""Parse a Goodreads library export CSV into library entries."""

import csv
import io
import logging
from datetime import datetime

from shelfstats.schemas.entry import LibraryEntry, ReadingStatus, ReviewRecord

logger = logging.getLogger(__name__)

EXCLUSIVE_SHELF_STATUS = {
    "read": ReadingStatus.Finished,
    "currently-reading": ReadingStatus.Reading,
    "to-read": ReadingStatus.WantToRead,
}


def _clean_isbn(raw: str | None) -> str | None:
    """Strip the ="" wrapper Goodreads puts around ISBNs."""
    if not raw:
        return None
    cleaned = raw.strip().strip('="').strip('"')
    return cleaned if cleaned else None


def _parse_int(raw: str | None) -> int | None:
    if not raw or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_date(raw: str | None) -> str | None:
    """Goodreads writes dates as YYYY/MM/DD; return them as ISO strings."""
    if not raw or not raw.strip():
        return None
    try:
        return datetime.strptime(raw.strip(), "%Y/%m/%d").date().isoformat()
    except ValueError:
        logger.debug("Ignoring unparsable Goodreads date %r", raw)
        return None


def _status(exclusive_shelf: str) -> ReadingStatus | None:
    if not exclusive_shelf:
        return None
    # Any other exclusive shelf is a custom one such as "did-not-finish"
    return EXCLUSIVE_SHELF_STATUS.get(exclusive_shelf, ReadingStatus.Dropped)


def parse_goodreads_csv(content: str) -> list[LibraryEntry]:
    """Parse a Goodreads CSV export string into a list of LibraryEntry objects."""
    reader = csv.DictReader(io.StringIO(content))
    entries = []
    for line_no, row in enumerate(reader, start=2):
        title = (row.get("Title") or "").strip()
        if not title:
            logger.warning("Skipping Goodreads row %d without a title", line_no)
            continue

        exclusive_shelf = (row.get("Exclusive Shelf") or "").strip()
        bookshelves_raw = row.get("Bookshelves") or ""
        bookshelves = [
            s.strip()
            for s in bookshelves_raw.split(",")
            if s.strip() and s.strip() != exclusive_shelf
        ]
        rating_val = _parse_int(row.get("My Rating"))
        isbn13 = _clean_isbn(row.get("ISBN13"))

        entries.append(
            LibraryEntry(
                id=(row.get("Book Id") or "").strip() or isbn13 or f"goodreads-{line_no}",
                title=title,
                author=(row.get("Author") or "").strip(),
                category=bookshelves[0] if bookshelves else None,
                review=ReviewRecord(
                    status=_status(exclusive_shelf),
                    rating=float(rating_val) if rating_val and rating_val > 0 else None,
                    end_date=_parse_date(row.get("Date Read")),
                    one_line_review=(row.get("My Review") or "").strip() or None,
                    notes=(row.get("Private Notes") or "").strip() or None,
                ),
            )
        )
    return entries
