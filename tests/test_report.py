from datetime import date

from shelfstats.schemas.entry import ReadingStatus
from shelfstats.stats.report import compute_report


def test_report_combines_tabs(make_entry):
    entries = [
        make_entry(status=ReadingStatus.Finished, category="Fiction", rating=5, end_date="2025-03-02"),
        make_entry(status=ReadingStatus.Finished, category="Fiction", rating=3, end_date="2025-02-11"),
        make_entry(status=ReadingStatus.WantToRead, category="Sci-Fi", author="Banks"),
    ]
    report = compute_report(entries, today=date(2025, 3, 18), window="6")
    assert report.overview.average_rating_label == "4.0"
    assert report.overview.finished_this_month == 1
    assert [b.count for b in report.habits.monthly] == [1, 1]
    assert report.genres.categories[0].name == "Fiction"
    assert report.wishlist.authors[0].name == "Banks"


def test_report_empty():
    report = compute_report([], today=date(2025, 3, 18))
    assert report.overview.total_entries == 0
    assert report.overview.average_rating_label == "N/A"
    assert report.habits.monthly == []
    assert report.habits.speed.fastest is None
    assert report.genres.categories == []
    assert report.wishlist.authors == []


def test_report_survives_huge_rating(make_entry):
    entries = [
        make_entry(status=ReadingStatus.Finished, rating=1e30, end_date="2025-03-02"),
        make_entry(status=ReadingStatus.Finished, rating=9, end_date="2025-03-03"),
    ]
    report = compute_report(entries, today=date(2025, 3, 18))
    assert report.overview.average_rating is None
    assert report.habits.rating_distribution == []


def test_report_includes_favorites(make_entry):
    report = compute_report([make_entry(status=ReadingStatus.Finished)], today=date(2025, 3, 18))
    assert report.favorites.items == []
    assert report.favorites.counts.all == 0
