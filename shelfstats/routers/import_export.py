from typing import Any

from fastapi import APIRouter, Body, HTTPException, UploadFile

from shelfstats.schemas.entry import LibraryEntry
from shelfstats.services.goodreads import parse_goodreads_csv
from shelfstats.services.notion import parse_notion_pages

router = APIRouter(prefix="/api/import", tags=["import"])


@router.post("/goodreads", response_model=list[LibraryEntry])
async def import_goodreads(file: UploadFile):
    try:
        content = (await file.read()).decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Goodreads export must be UTF-8 encoded CSV")
    return parse_goodreads_csv(content)


@router.post("/notion", response_model=list[LibraryEntry])
async def import_notion(data: list[Any] | dict[str, Any] = Body(...)):
    # Accept either the raw query response or just its results list
    pages = data.get("results", []) if isinstance(data, dict) else data
    if not isinstance(pages, list):
        raise HTTPException(status_code=400, detail="Expected a list of Notion pages")
    return parse_notion_pages(pages)
