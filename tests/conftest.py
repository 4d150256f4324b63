"""Shared test fixtures.

  platform_store  : freshly seeded in-memory backend state (10 books: 6/3/1).
  app             : stand-in FastAPI app over that store.
  client          : FastAPI TestClient for route tests.
  admin_token     : bearer token for the seeded admin account.
  make_api_client : builds a ``PentoClient`` that talks to ``app`` in-process.
  make_fake_api   : builds a ``FakeAdminAPI`` with canned dashboard data.
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from pentopublic.api.app import create_app
from pentopublic.api.schemas.admin import (
    BookCounts, BookSummaryEntry, DashboardSummary, PendingSubmission, UserCounts, UserSummary,
)
from pentopublic.dashboard.store import Slice
from pentopublic.infra.memory_store import seed_store
from pentopublic.ui.api_client import APIError, PentoClient


def sample_summary() -> DashboardSummary:
    return DashboardSummary(
        books=BookCounts(total=10, approved=6, pending=3, rejected=1),
        users=UserCounts(authors=3, readers=3, subscribed_readers=2),
    )


def sample_pending() -> list[PendingSubmission]:
    return [
        PendingSubmission(
            id=1, title="Salt and Ember", author="Neil Gaiman", category="Fantasy",
            submitted_date=datetime(2025, 3, 31, tzinfo=timezone.utc),
        ),
        PendingSubmission(id=2, title="Fourth Orbit", author="Nnedi Okorafor"),
        PendingSubmission(id=3, title="Letters to Ithaca", author="Neil Gaiman", description="Epistolary."),
    ]


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class FakeAdminAPI:
    """In-memory ``AdminAPI`` with per-endpoint failure switches.

    ``gate`` (an ``asyncio.Event``) holds every fetch until it is set.
    """

    def __init__(
        self,
        *,
        summary: DashboardSummary | None = None,
        pending: list | None = None,
        readers: list | None = None,
        authors: list | None = None,
        books_summary: list | None = None,
        failing: set[Slice] | frozenset[Slice] = frozenset(),
        action_error: APIError | None = None,
    ) -> None:
        self.data = {
            Slice.SUMMARY: summary if summary is not None else sample_summary(),
            Slice.PENDING: pending if pending is not None else sample_pending(),
            Slice.READERS: readers if readers is not None else [
                UserSummary(id=5, first_name="Ana", last_name="Lopez", email="ana@example.com", is_active=True),
                UserSummary(id=6, name="Ben Ito", status="suspended"),
            ],
            Slice.AUTHORS: authors if authors is not None else [
                UserSummary(id=2, first_name="Neil", last_name="Gaiman", is_active=True),
            ],
            Slice.BOOKS_SUMMARY: books_summary if books_summary is not None else [
                BookSummaryEntry(id=1, title="The Ocean Ledger", status="approved"),
            ],
        }
        self.failing = set(failing)
        self.action_error = action_error
        self.gate: asyncio.Event | None = None
        self.fetches: list[Slice] = []
        self.actions: list[tuple[str, object]] = []

    async def _answer(self, name: Slice):
        self.fetches.append(name)
        if self.gate is not None:
            await self.gate.wait()
        if name in self.failing:
            raise APIError(503, f"{name.value} unavailable")
        return self.data[name]

    async def get_dashboard_summary(self):
        return await self._answer(Slice.SUMMARY)

    async def get_pending_submissions(self):
        return await self._answer(Slice.PENDING)

    async def get_readers(self):
        return await self._answer(Slice.READERS)

    async def get_authors(self):
        return await self._answer(Slice.AUTHORS)

    async def get_books_summary(self):
        return await self._answer(Slice.BOOKS_SUMMARY)

    async def approve_submission(self, submission_id):
        self.actions.append(("approve", submission_id))
        if self.action_error is not None:
            raise self.action_error
        return {"message": "ok"}

    async def reject_submission(self, submission_id):
        self.actions.append(("reject", submission_id))
        if self.action_error is not None:
            raise self.action_error
        return {"message": "ok"}


@pytest.fixture
def make_fake_api():
    return FakeAdminAPI


@pytest.fixture
def platform_store():
    return seed_store("admin", "admin")


@pytest.fixture
def app(platform_store):
    return create_app(platform_store)


@pytest.fixture
def client(app):
    """FastAPI TestClient backed by the isolated in-memory store."""
    from fastapi.testclient import TestClient

    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_token(client):
    resp = client.post("/auth/login", json={"userName": "admin", "password": "admin"})
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def make_api_client(app):
    """Factory for clients wired straight into the stand-in app (no sockets)."""
    def _make(token: str | None = None) -> PentoClient:
        return PentoClient(
            "http://testserver", token=token, transport=httpx.ASGITransport(app=app),
        )
    return _make
