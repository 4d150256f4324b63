"""Published-book listing for the stand-in backend."""
from __future__ import annotations
from pentopublic.infra.memory_store import BookRecord, BookStatus, PlatformStore
from pentopublic.api.schemas.catalog import BookAuthor, BookFile, CatalogBook


class CatalogService:
    def __init__(self, store: PlatformStore) -> None:
        self._store = store

    def list_published(self) -> list[CatalogBook]:
        return [self._to_dto(b) for b in self._published()]

    def list_top(self, limit: int = 10) -> list[CatalogBook]:
        ranked = sorted(self._published(), key=lambda b: b.rating, reverse=True)
        return [self._to_dto(b) for b in ranked[:limit]]

    def _published(self) -> list[BookRecord]:
        return [b for b in self._store.books.values() if b.status is BookStatus.APPROVED]

    def _to_dto(self, book: BookRecord) -> CatalogBook:
        author = self._store.users.get(book.author_id)
        files = []
        if book.front_page_link or book.pdf_path or book.audio_path:
            files.append(BookFile(
                front_page_link=book.front_page_link,
                pdf_path=book.pdf_path,
                audio_path=book.audio_path,
            ))
        return CatalogBook(
            book_id=book.id,
            title=book.title,
            description=book.description,
            author=BookAuthor(id=author.id, name=author.name) if author else None,
            upload_date=book.upload_date,
            is_free=book.is_free,
            price=book.price,
            book_files=files,
        )
