"""Admin dashboard loader.

Issues the five dashboard fetches concurrently and waits for every one of them
to settle. A failing fetch never cancels its siblings: each branch is wrapped
so that it returns a ``SliceOutcome`` instead of raising, and the whole cycle
is folded into the store in one step.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Protocol

from pentopublic.api.schemas.admin import (
    BookSummaryEntry, DashboardSummary, EntityId, PendingSubmission, UserSummary,
)
from pentopublic.dashboard.store import DashboardState, DashboardStore, Slice, SliceOutcome

logger = logging.getLogger(__name__)


class AdminAPI(Protocol):
    """The slice of ``PentoClient`` the dashboard depends on."""

    async def get_dashboard_summary(self) -> DashboardSummary: ...
    async def get_pending_submissions(self) -> list[PendingSubmission]: ...
    async def get_readers(self) -> list[UserSummary]: ...
    async def get_authors(self) -> list[UserSummary]: ...
    async def get_books_summary(self) -> list[BookSummaryEntry]: ...
    async def approve_submission(self, submission_id: EntityId) -> Any: ...
    async def reject_submission(self, submission_id: EntityId) -> Any: ...


_FETCHERS: dict[Slice, str] = {
    Slice.SUMMARY: "get_dashboard_summary",
    Slice.PENDING: "get_pending_submissions",
    Slice.READERS: "get_readers",
    Slice.AUTHORS: "get_authors",
    Slice.BOOKS_SUMMARY: "get_books_summary",
}


@dataclass
class LoadReport:
    state: DashboardState
    succeeded: list[Slice] = field(default_factory=list)
    failures: dict[Slice, str] = field(default_factory=dict)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


async def _settle(name: Slice, fetch: Callable[[], Awaitable[Any]]) -> SliceOutcome:
    try:
        value = await fetch()
    except Exception as exc:
        logger.warning("Dashboard fetch %s failed: %s", name.value, exc)
        return SliceOutcome(name, error=exc)
    return SliceOutcome(name, value=value)


async def load_all(client: AdminAPI, store: DashboardStore) -> LoadReport:
    """Run one load cycle and apply it to *store*.

    Never raises for endpoint failures; the outcome is recorded in the store
    (``error``, ``failed_count``, ``full_failure``) and returned as a report.
    """
    store.begin_load()
    try:
        settled = await asyncio.gather(
            *(_settle(name, getattr(client, method)) for name, method in _FETCHERS.items())
        )
    except asyncio.CancelledError:
        store.abort_load()
        raise

    outcomes = {outcome.name: outcome for outcome in settled}
    state = store.finish_load(outcomes)

    report = LoadReport(state=state)
    for outcome in settled:
        if outcome.ok:
            report.succeeded.append(outcome.name)
        else:
            report.failures[outcome.name] = str(outcome.error)

    if report.failures:
        logger.warning(
            "Dashboard loaded with %d/%d endpoint failures%s",
            report.failed_count, len(_FETCHERS),
            " (nothing to show)" if state.full_failure else "",
        )
    else:
        logger.info("Dashboard loaded (%d pending submissions)", len(state.pending))
    return report
