from shelfstats.schemas.entry import ReadingStatus
from shelfstats.stats.taxonomy import compute_taxonomy

FINISHED = ReadingStatus.Finished
WISHLIST = ReadingStatus.WantToRead


def test_genre_and_wishlist_scenario(make_entry):
    entries = [
        make_entry(status=FINISHED, category="Fiction", rating=5),
        make_entry(status=FINISHED, category="Fiction", rating=3),
        make_entry(status=WISHLIST, category="Sci-Fi"),
    ]
    genres = compute_taxonomy(entries, FINISHED)
    wishlist = compute_taxonomy(entries, WISHLIST)
    assert [(c.name, c.count) for c in genres.categories] == [("Fiction", 2)]
    assert [(c.name, c.count) for c in wishlist.categories] == [("Sci-Fi", 1)]
    assert genres.total == 2
    assert wishlist.population is WISHLIST


def test_wishlist_includes_entries_without_status(make_entry):
    entries = [make_entry(category="Poetry"), make_entry(no_review=True)]
    wishlist = compute_taxonomy(entries, WISHLIST)
    assert [(c.name, c.count) for c in wishlist.categories] == [("Poetry", 1), ("Uncategorized", 1)]


def test_category_ranking_is_complete(make_entry):
    entries = [make_entry(status=FINISHED, category=f"Genre {i}") for i in range(15)]
    assert len(compute_taxonomy(entries).categories) == 15


def test_author_ranking_top_ten_sorted(make_entry):
    entries = []
    for i in range(12):
        entries += [make_entry(status=FINISHED, author=f"Author {i}") for _ in range(i + 1)]
    authors = compute_taxonomy(entries).authors
    assert len(authors) == 10
    counts = [a.count for a in authors]
    assert counts == sorted(counts, reverse=True)
    assert authors[0].name == "Author 11"


def test_author_ties_keep_first_seen_order(make_entry):
    entries = [
        make_entry(status=FINISHED, author="Le Guin"),
        make_entry(status=FINISHED, author="Banks"),
        make_entry(status=FINISHED, author="Banks"),
        make_entry(status=FINISHED, author="Le Guin"),
        make_entry(status=FINISHED, author="Herbert"),
    ]
    assert [a.name for a in compute_taxonomy(entries).authors] == ["Le Guin", "Banks", "Herbert"]


def test_author_string_is_opaque(make_entry):
    entries = [
        make_entry(status=FINISHED, author="한강"),
        make_entry(status=FINISHED, author="한강 (지은이)"),
        make_entry(status=FINISHED, author=""),
    ]
    names = [a.name for a in compute_taxonomy(entries).authors]
    assert names == ["한강", "한강 (지은이)", ""]


def test_empty():
    result = compute_taxonomy([], WISHLIST)
    assert result.total == 0
    assert result.categories == []
    assert result.authors == []
