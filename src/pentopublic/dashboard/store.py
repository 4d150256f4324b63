"""Admin dashboard state container.

``DashboardState`` is immutable; every change goes through one of the pure
transition functions below and ``DashboardStore`` swaps in the result. Only the
aggregator (load cycle) and the moderation actions write list/summary data.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from pentopublic.api.schemas.admin import (
    BookSummaryEntry, DashboardSummary, EntityId,
    PendingSubmission, UserSummary,
)
from pentopublic.dashboard.tabs import Tab


class Slice(str, Enum):
    """Independently fetched parts of the dashboard."""

    SUMMARY = "summary"
    PENDING = "pending"
    READERS = "readers"
    AUTHORS = "authors"
    BOOKS_SUMMARY = "books_summary"


class Decision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


@dataclass(frozen=True)
class SliceOutcome:
    """Result of one fetch: either ``value`` or ``error`` is meaningful."""

    name: Slice
    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardState(BaseModel):
    model_config = {"frozen": True}

    summary: DashboardSummary | None = None
    pending: tuple[PendingSubmission, ...] = ()
    readers: tuple[UserSummary, ...] = ()
    authors: tuple[UserSummary, ...] = ()
    books_summary: tuple[BookSummaryEntry, ...] = ()

    loaded: frozenset[Slice] = frozenset()
    loads_in_flight: int = 0
    failed_count: int = 0
    error: str | None = None
    full_failure: bool = False

    active_tab: Tab = Tab.DASHBOARD

    @property
    def loading(self) -> bool:
        return self.loads_in_flight > 0

    @property
    def attempted(self) -> bool:
        """True once any load cycle has settled into this state."""
        return bool(self.loaded) or self.failed_count > 0


def same_id(a: EntityId, b: EntityId) -> bool:
    # Ids arrive as ints from JSON and as strings from forms and the CLI.
    return str(a) == str(b)


# ---------------------------------------------------------------------------
# Transitions (pure)
# ---------------------------------------------------------------------------


def begin_load(state: DashboardState) -> DashboardState:
    return state.model_copy(update={"loads_in_flight": state.loads_in_flight + 1})


def apply_load(state: DashboardState, outcomes: Mapping[Slice, SliceOutcome]) -> DashboardState:
    """Fold one settled load cycle into the state.

    Successful slices replace what is there; failed slices keep their previous
    value. ``loads_in_flight`` is decremented for the cycle.
    """
    update: dict[str, Any] = {}
    loaded = set(state.loaded)
    failed = 0

    for slice_, outcome in outcomes.items():
        if not outcome.ok:
            failed += 1
            continue
        loaded.add(slice_)
        if slice_ is Slice.SUMMARY:
            update["summary"] = outcome.value
        else:
            update[slice_.value] = tuple(outcome.value or ())

    update["loaded"] = frozenset(loaded)
    update["loads_in_flight"] = max(0, state.loads_in_flight - 1)
    update["failed_count"] = failed
    update["error"] = f"{failed} API endpoints failed to load" if failed else None
    update["full_failure"] = failed == len(Slice) and not loaded
    return state.model_copy(update=update)


def abort_load(state: DashboardState) -> DashboardState:
    """Close a load cycle that was cancelled before it settled."""
    return state.model_copy(update={"loads_in_flight": max(0, state.loads_in_flight - 1)})


def apply_decision(
    state: DashboardState, submission_id: EntityId, decision: Decision,
) -> DashboardState:
    """Remove a reviewed submission and move one book out of the pending count.

    Unknown ids leave the state untouched.
    """
    remaining = tuple(s for s in state.pending if not same_id(s.id, submission_id))
    if len(remaining) == len(state.pending):
        return state

    update: dict[str, Any] = {"pending": remaining}
    summary = state.summary
    if summary is not None and summary.books is not None:
        books = summary.books
        counts = {"pending": max(0, (books.pending or 0) - 1)}
        if decision is Decision.APPROVE:
            counts["approved"] = (books.approved or 0) + 1
        else:
            counts["rejected"] = (books.rejected or 0) + 1
        update["summary"] = summary.model_copy(
            update={"books": books.model_copy(update=counts)},
        )
    return state.model_copy(update=update)


def select_tab(state: DashboardState, tab: Tab | str) -> DashboardState:
    return state.model_copy(update={"active_tab": Tab(tab)})


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


class DashboardStore:
    """Holds the current ``DashboardState``; one serialized mutation path."""

    def __init__(self, state: DashboardState | None = None) -> None:
        self._state = state or DashboardState()
        self._listeners: list[Callable[[DashboardState], None]] = []

    @property
    def state(self) -> DashboardState:
        return self._state

    def subscribe(self, listener: Callable[[DashboardState], None]) -> None:
        self._listeners.append(listener)

    def _commit(self, new_state: DashboardState) -> DashboardState:
        if new_state is not self._state:
            self._state = new_state
            for listener in self._listeners:
                listener(new_state)
        return new_state

    def begin_load(self) -> DashboardState:
        return self._commit(begin_load(self._state))

    def finish_load(self, outcomes: Mapping[Slice, SliceOutcome]) -> DashboardState:
        return self._commit(apply_load(self._state, outcomes))

    def abort_load(self) -> DashboardState:
        return self._commit(abort_load(self._state))

    def apply_decision(self, submission_id: EntityId, decision: Decision) -> DashboardState:
        return self._commit(apply_decision(self._state, submission_id, decision))

    def select_tab(self, tab: Tab | str) -> DashboardState:
        return self._commit(select_tab(self._state, tab))
