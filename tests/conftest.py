import itertools

import pytest
from httpx import ASGITransport, AsyncClient

from shelfstats.app import create_app
from shelfstats.schemas.entry import LibraryEntry, ReadingStatus, ReviewRecord


@pytest.fixture
def make_entry():
    """Build a LibraryEntry. no_review=True leaves the review record off entirely."""
    ids = itertools.count(1)

    def _make(
        title: str | None = None,
        author: str = "Frank Herbert",
        category: str | None = None,
        status: ReadingStatus | None = None,
        rating: float | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        no_review: bool = False,
    ) -> LibraryEntry:
        n = next(ids)
        review = None
        if not no_review:
            review = ReviewRecord(
                status=status,
                rating=rating,
                start_date=start_date,
                end_date=end_date,
            )
        return LibraryEntry(
            id=f"book-{n}",
            title=title or f"Book {n}",
            author=author,
            category=category,
            review=review,
        )

    return _make


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
