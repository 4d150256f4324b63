"""Admin dashboard tabs.

Labels are projections of the live collections, recomputed on every render;
they are never stored.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pentopublic.dashboard.store import DashboardState


class Tab(str, Enum):
    DASHBOARD = "dashboard"
    PENDING = "pending"
    AUTHORS = "authors"
    READERS = "readers"
    SUMMARY = "summary"


def tab_label(state: DashboardState, tab: Tab) -> str:
    if tab is Tab.DASHBOARD:
        return "Dashboard"
    if tab is Tab.PENDING:
        return f"Pending Books ({len(state.pending)})"
    if tab is Tab.AUTHORS:
        return f"Authors ({len(state.authors)})"
    if tab is Tab.READERS:
        return f"Readers ({len(state.readers)})"
    return f"Books ({len(state.books_summary)})"


def tab_labels(state: DashboardState) -> list[tuple[Tab, str]]:
    """All tabs in display order with their current labels."""
    return [(tab, tab_label(state, tab)) for tab in Tab]
