"""Pure tests for reader catalog filtering and search."""

from pentopublic.api.schemas.catalog import CatalogBook
from pentopublic.catalog.filters import (
    CatalogFilter,
    CatalogSource,
    apply_filter,
    search_books,
    source_for,
    toggle_like,
)


def _book(**kw) -> CatalogBook:
    return CatalogBook.model_validate(kw)


BOOKS = [
    _book(bookId=1, title="The Ocean Ledger", author={"name": "Neil Gaiman"},
          uploadDate="2025-03-01T00:00:00Z", price=4.99,
          bookFiles=[{"pdfPath": "https://drive.google.com/file/d/x/view"}]),
    _book(bookId=2, title="Binti Rising", author={"name": "Nnedi Okorafor"},
          createdAt="2025-03-10T00:00:00Z", isFree=True,
          bookFiles=[{"audioPath": "https://cdn/binti.mp3"}]),
    _book(id=3, title="Field Guide to Clouds", price=0),
    _book(bookId=4, title="Night Market", author={"name": "Nnedi Okorafor"},
          uploadDate="2025-03-20T00:00:00", bookFiles=[{}, {"audioPath": "https://cdn/late.mp3"}]),
]


def _titles(books):
    return [b.title for b in books]


def test_top_filter_reads_from_top_endpoint():
    assert source_for(CatalogFilter.TOP) is CatalogSource.TOP_BOOKS
    for f in (CatalogFilter.ALL, CatalogFilter.RECENT, CatalogFilter.FREE, CatalogFilter.AUDIO):
        assert source_for(f) is CatalogSource.ALL_BOOKS


def test_all_keeps_server_order():
    assert _titles(apply_filter(BOOKS, CatalogFilter.ALL)) == _titles(BOOKS)


def test_recent_sorts_newest_first_with_undated_last():
    # Book 2 has only createdAt; book 4 is naive and treated as UTC.
    assert _titles(apply_filter(BOOKS, CatalogFilter.RECENT)) == [
        "Night Market", "Binti Rising", "The Ocean Ledger", "Field Guide to Clouds",
    ]


def test_free_matches_flag_or_zero_price():
    assert _titles(apply_filter(BOOKS, CatalogFilter.FREE)) == ["Binti Rising", "Field Guide to Clouds"]


def test_audio_only_checks_first_file():
    assert _titles(apply_filter(BOOKS, CatalogFilter.AUDIO)) == ["Binti Rising"]


def test_search_matches_title_or_author_case_insensitively():
    assert _titles(search_books(BOOKS, "okorafor")) == ["Binti Rising", "Night Market"]
    assert _titles(search_books(BOOKS, "LEDGER")) == ["The Ocean Ledger"]
    assert search_books(BOOKS, "zzz") == []


def test_blank_search_returns_everything():
    assert len(search_books(BOOKS, "   ")) == len(BOOKS)


def test_book_key_prefers_book_id():
    assert [b.key for b in BOOKS] == [1, 2, 3, 4]
    assert BOOKS[2].author_name == "Unknown"


def test_toggle_like_adds_then_removes():
    liked = toggle_like(frozenset(), 2)
    assert liked == {2}
    assert toggle_like(liked, 2) == frozenset()
