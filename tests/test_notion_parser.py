from shelfstats.schemas.entry import ReadingStatus
from shelfstats.services.notion import parse_notion_pages

PAGE = {
    "id": "page-1",
    "properties": {
        "Name": {"title": [{"plain_text": "채식주의자"}]},
        "Author": {"select": {"name": "한강"}},
        "Tags": {"multi_select": [{"name": "소설"}, {"name": "한국문학"}]},
        "상태": {"status": {"name": "Finished"}},
        "Rating out of 5": {"number": 4.5},
        "날짜": {"created_time": "2024-05-03T09:12:00.000Z"},
        "비고": {"rich_text": [{"plain_text": "첫 줄"}, {"plain_text": "둘째 줄"}]},
        "표지": {"url": "https://example.com/cover.jpg"},
    },
}


def test_parse_page_fields():
    entry = parse_notion_pages([PAGE])[0]
    assert entry.id == "page-1"
    assert entry.title == "채식주의자"
    assert entry.author == "한강"
    assert entry.category == "소설"
    assert entry.cover_image_url == "https://example.com/cover.jpg"
    assert entry.review.status is ReadingStatus.Finished
    assert entry.review.rating == 4.5
    assert entry.review.end_date == "2024-05-03"
    assert entry.review.notes == "첫 줄\n둘째 줄"


def test_parse_page_defaults():
    entry = parse_notion_pages([{"id": "empty", "properties": {}}])[0]
    assert entry.title == "Untitled"
    assert entry.author == "Unknown Author"
    assert entry.category == "Uncategorized"
    assert entry.review.status is ReadingStatus.WantToRead
    assert entry.review.rating is None
    assert entry.review.end_date is None
    assert entry.review.notes is None


def test_parse_page_status_mapping():
    pages = [
        {"id": str(i), "properties": {"상태": {"status": {"name": name}}}}
        for i, name in enumerate(["Dropped", "Reading", "Not started"])
    ]
    statuses = [e.review.status for e in parse_notion_pages(pages)]
    assert statuses == [ReadingStatus.Dropped, ReadingStatus.Reading, ReadingStatus.WantToRead]


def test_parse_pages_skips_non_objects():
    entries = parse_notion_pages([PAGE, "junk", None])
    assert len(entries) == 1
