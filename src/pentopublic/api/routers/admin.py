"""Admin moderation endpoints."""
from fastapi import APIRouter, Depends
from pentopublic.api.deps import get_admin_service, require_admin
from pentopublic.api.schemas.admin import (
    BookSummaryEntry, DashboardSummary, ModerationResult, PendingSubmission, UserSummary,
)
from pentopublic.infra.memory_store import BookStatus
from pentopublic.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardSummary)
def get_dashboard(svc: AdminService = Depends(get_admin_service)) -> DashboardSummary:
    return svc.get_summary()


@router.get("/pending-books", response_model=list[PendingSubmission])
def list_pending_books(svc: AdminService = Depends(get_admin_service)) -> list[PendingSubmission]:
    return svc.list_pending()


@router.get("/readers", response_model=list[UserSummary])
def list_readers(svc: AdminService = Depends(get_admin_service)) -> list[UserSummary]:
    return svc.list_users("reader")


@router.get("/authors", response_model=list[UserSummary])
def list_authors(svc: AdminService = Depends(get_admin_service)) -> list[UserSummary]:
    return svc.list_users("writer")


@router.get("/books-summary", response_model=list[BookSummaryEntry])
def list_books_summary(svc: AdminService = Depends(get_admin_service)) -> list[BookSummaryEntry]:
    return svc.list_books_summary()


@router.put("/books/{book_id}/approve", response_model=ModerationResult)
def approve_book(book_id: int, svc: AdminService = Depends(get_admin_service)) -> ModerationResult:
    return svc.review(book_id, BookStatus.APPROVED)


@router.put("/books/{book_id}/reject", response_model=ModerationResult)
def reject_book(book_id: int, svc: AdminService = Depends(get_admin_service)) -> ModerationResult:
    return svc.review(book_id, BookStatus.REJECTED)
