"""Reader catalog: client-side filtering, ordering, search and likes.

Pure functions over ``CatalogBook`` lists; fetching is the caller's job
(``source_for`` says which endpoint a filter reads from).
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from pentopublic.api.schemas.catalog import CatalogBook


class CatalogFilter(str, Enum):
    ALL = "all"
    TOP = "top"
    RECENT = "recent"
    FREE = "free"
    AUDIO = "audio"


class CatalogSource(str, Enum):
    ALL_BOOKS = "all_books"
    TOP_BOOKS = "top_books"


FILTER_LABELS: dict[CatalogFilter, str] = {
    CatalogFilter.ALL: "All Books",
    CatalogFilter.TOP: "Top Rated",
    CatalogFilter.RECENT: "Recently Added",
    CatalogFilter.FREE: "Free",
    CatalogFilter.AUDIO: "Audio Books",
}


def source_for(filter_: CatalogFilter) -> CatalogSource:
    return CatalogSource.TOP_BOOKS if filter_ is CatalogFilter.TOP else CatalogSource.ALL_BOOKS


def _published_at(book: CatalogBook) -> datetime | None:
    moment = book.upload_date or book.created_at
    if moment is not None and moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def is_free(book: CatalogBook) -> bool:
    return bool(book.is_free) or book.price == 0


def has_audio(book: CatalogBook) -> bool:
    return bool(book.book_files and book.book_files[0].audio_path)


def has_pdf(book: CatalogBook) -> bool:
    return bool(book.book_files and book.book_files[0].pdf_path)


def apply_filter(books: Iterable[CatalogBook], filter_: CatalogFilter) -> list[CatalogBook]:
    """Order or narrow *books* for the selected filter.

    ``recent`` sorts newest first with undated books last; ``all`` and ``top``
    keep the server's order.
    """
    books = list(books)
    if filter_ is CatalogFilter.RECENT:
        dated = [b for b in books if _published_at(b) is not None]
        undated = [b for b in books if _published_at(b) is None]
        dated.sort(key=_published_at, reverse=True)
        return dated + undated
    if filter_ is CatalogFilter.FREE:
        return [b for b in books if is_free(b)]
    if filter_ is CatalogFilter.AUDIO:
        return [b for b in books if has_audio(b)]
    return books


def search_books(books: Iterable[CatalogBook], query: str) -> list[CatalogBook]:
    """Case-insensitive substring match on title or author name."""
    needle = query.strip().lower()
    if not needle:
        return list(books)
    matches = []
    for book in books:
        title = (book.title or "").lower()
        author = (book.author.name or "").lower() if book.author else ""
        if needle in title or needle in author:
            matches.append(book)
    return matches


def toggle_like(liked: frozenset, book_id: int | str) -> frozenset:
    if book_id in liked:
        return liked - {book_id}
    return liked | {book_id}
