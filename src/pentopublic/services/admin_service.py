"""Admin moderation use-case service (stand-in backend)."""
from __future__ import annotations
from pentopublic.domain.exceptions import ConflictError, NotFoundError
from pentopublic.infra.memory_store import BookStatus, PlatformStore
from pentopublic.api.schemas.admin import (
    BookCounts, BookSummaryEntry, DashboardSummary, ModerationResult,
    PendingSubmission, UserCounts, UserSummary,
)


class AdminService:
    def __init__(self, store: PlatformStore) -> None:
        self._store = store

    def get_summary(self) -> DashboardSummary:
        books = list(self._store.books.values())
        users = list(self._store.users.values())
        by_status = {status: sum(1 for b in books if b.status is status) for status in BookStatus}
        return DashboardSummary(
            books=BookCounts(
                total=len(books),
                approved=by_status[BookStatus.APPROVED],
                pending=by_status[BookStatus.PENDING],
                rejected=by_status[BookStatus.REJECTED],
            ),
            users=UserCounts(
                authors=sum(1 for u in users if u.role == "writer"),
                readers=sum(1 for u in users if u.role == "reader"),
                subscribed_readers=sum(1 for u in users if u.role == "reader" and u.subscribed),
            ),
        )

    def list_pending(self) -> list[PendingSubmission]:
        return [
            PendingSubmission(
                id=b.id,
                title=b.title,
                author=self._author_name(b.author_id),
                description=b.description,
                category=b.category,
                submitted_date=b.submitted_date,
            )
            for b in self._store.books.values()
            if b.status is BookStatus.PENDING
        ]

    def list_users(self, role: str) -> list[UserSummary]:
        return [
            UserSummary(
                id=u.id,
                first_name=u.first_name,
                last_name=u.last_name,
                email=u.email,
                is_active=u.is_active,
            )
            for u in self._store.users.values()
            if u.role == role
        ]

    def list_books_summary(self) -> list[BookSummaryEntry]:
        return [
            BookSummaryEntry(id=b.id, title=b.title, description=b.description, status=b.status.value)
            for b in self._store.books.values()
        ]

    def review(self, book_id: int, status: BookStatus) -> ModerationResult:
        with self._store.lock:
            book = self._store.books.get(book_id)
            if book is None:
                raise NotFoundError(f"Book {book_id} not found")
            if book.status is not BookStatus.PENDING:
                raise ConflictError(f"Book {book_id} is already {book.status.value}")
            book.status = status
        return ModerationResult(
            id=book_id,
            status=status.value,
            message=f"Book {status.value} successfully",
        )

    def _author_name(self, author_id: int) -> str:
        author = self._store.users.get(author_id)
        return author.name if author else "Unknown"
