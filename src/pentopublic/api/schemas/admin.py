"""Admin dashboard DTOs: pure Pydantic, shared by client and stand-in API.

Wire keys are camelCase; models also accept field names.
"""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

_WIRE = {"alias_generator": to_camel, "populate_by_name": True}

EntityId = int | str


class BookCounts(BaseModel):
    model_config = _WIRE

    total: int | None = None
    approved: int | None = None
    pending: int | None = None
    rejected: int | None = None


class UserCounts(BaseModel):
    model_config = _WIRE

    authors: int | None = None
    readers: int | None = None
    subscribed_readers: int | None = None


class DashboardSummary(BaseModel):
    model_config = _WIRE

    books: BookCounts | None = None
    users: UserCounts | None = None


class PendingSubmission(BaseModel):
    model_config = _WIRE

    id: EntityId
    title: str
    author: str
    description: str | None = None
    category: str | None = None
    submitted_date: datetime | None = None


class UserSummary(BaseModel):
    model_config = _WIRE

    id: EntityId
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    status: str | None = None
    is_active: bool | None = None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def status_label(self) -> str | None:
        if self.status:
            return self.status
        if self.is_active is None:
            return None
        return "Active" if self.is_active else "Inactive"


class BookSummaryEntry(BaseModel):
    model_config = _WIRE

    id: EntityId
    title: str | None = None
    name: str | None = None
    description: str | None = None
    status: str | None = None
    is_active: bool | None = None

    @property
    def display_name(self) -> str:
        return self.title or self.name or ""

    @property
    def status_label(self) -> str | None:
        if self.status:
            return self.status
        if self.is_active is None:
            return None
        return "Active" if self.is_active else "Inactive"


class ModerationResult(BaseModel):
    id: EntityId
    status: str
    message: str | None = None
