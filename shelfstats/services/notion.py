"""Turn pages from a Notion reading-log database query into library entries."""

import logging
from typing import Any

from shelfstats.schemas.entry import LibraryEntry, ReadingStatus, ReviewRecord
from shelfstats.stats.normalize import UNCATEGORIZED, parse_date

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown Author"
UNTITLED = "Untitled"

# Property names used by the reading-log database
STATUS_PROPERTY = "상태"
DATE_PROPERTY = "날짜"
NOTES_PROPERTY = "비고"
RATING_PROPERTY = "Rating out of 5"

NOTION_STATUS = {
    "Finished": ReadingStatus.Finished,
    "Dropped": ReadingStatus.Dropped,
    "Reading": ReadingStatus.Reading,
}


def _get(obj: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None as soon as a step is missing."""
    for step in path:
        if isinstance(obj, dict) and isinstance(step, str):
            obj = obj.get(step)
        elif isinstance(obj, list) and isinstance(step, int) and -len(obj) <= step < len(obj):
            obj = obj[step]
        else:
            return None
    return obj


def _rich_text(prop: Any) -> str:
    parts = _get(prop, "rich_text") or []
    return "\n".join(p.get("plain_text", "") for p in parts if isinstance(p, dict)).strip()


def parse_notion_page(page: dict) -> LibraryEntry:
    props = page.get("properties") or {}

    rating = _get(props, RATING_PROPERTY, "number")
    if not isinstance(rating, (int, float)) or rating <= 0:
        rating = None

    status_name = _get(props, STATUS_PROPERTY, "status", "name")
    if not isinstance(status_name, str):
        status_name = ""

    # Only the date part of the page timestamp is kept
    created = _get(props, DATE_PROPERTY, "created_time")
    end_date = parse_date(created) if isinstance(created, str) else None

    return LibraryEntry(
        id=str(page.get("id", "")),
        title=_get(props, "Name", "title", 0, "plain_text") or UNTITLED,
        author=_get(props, "Author", "select", "name") or UNKNOWN_AUTHOR,
        category=_get(props, "Tags", "multi_select", 0, "name") or UNCATEGORIZED,
        cover_image_url=_get(props, "표지", "url"),
        review=ReviewRecord(
            status=NOTION_STATUS.get(status_name, ReadingStatus.WantToRead),
            rating=rating,
            end_date=end_date.isoformat() if end_date else None,
            notes=_rich_text(props.get(NOTES_PROPERTY)) or None,
        ),
    )


def parse_notion_pages(pages: list[Any]) -> list[LibraryEntry]:
    entries = []
    for i, page in enumerate(pages):
        if not isinstance(page, dict):
            logger.warning("Skipping Notion page %d: expected an object, got %s", i, type(page).__name__)
            continue
        entries.append(parse_notion_page(page))
    return entries
