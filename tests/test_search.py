"""
Search behaviour against the preset catalog.
"""


def ids(entries):
    return sorted(book_id for book_id, _ in entries)


def test_title_match_has_no_year_false_positive(seeded):
    # No preset book was published in 1984, so only the title matches.
    assert ids(seeded.search("1984")) == [3]


def test_year_matches_exactly(seeded):
    assert ids(seeded.search("1949")) == [3]
    assert ids(seeded.search("-800")) == [10]


def test_case_insensitive_title_and_author(seeded):
    assert ids(seeded.search("TOLKIEN")) == [6]
    assert ids(seeded.search("orwell")) == [3]
    assert ids(seeded.search("the")) == [1, 5, 6, 10]


def test_isbn_substring(seeded):
    assert ids(seeded.search("0451524")) == [3]


def test_id_must_match_whole_string(seeded):
    assert ids(seeded.search("10")) == [10]


def test_no_match_is_empty_list(seeded):
    assert seeded.search("zzz not a book") == []


def test_empty_query_matches_everything(seeded):
    assert ids(seeded.search("")) == list(range(1, 11))


def test_search_sees_loaned_books(seeded):
    seeded.borrow_book(8, "Ann")
    assert ids(seeded.search("moby")) == [8]
