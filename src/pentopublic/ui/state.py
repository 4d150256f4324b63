"""Session-state helpers for the Streamlit UI.

No server code; only reads/writes ``st.session_state``.
"""
import streamlit as st
from typing import Optional

from pentopublic.api.schemas.auth import AuthSession
from pentopublic.dashboard.notifications import Notifier
from pentopublic.dashboard.store import DashboardStore


def init_session() -> None:
    """Initialize session state variables."""
    if "auth_session" not in st.session_state:
        st.session_state["auth_session"] = None
    if "liked_books" not in st.session_state:
        st.session_state["liked_books"] = frozenset()


def get_auth_session() -> Optional[AuthSession]:
    return st.session_state.get("auth_session")


def set_auth_session(session: AuthSession) -> None:
    st.session_state["auth_session"] = session


def logout() -> None:
    """Drop credentials and everything fetched with them."""
    for key in ("auth_session", "admin_dashboard_store", "admin_notifier"):
        st.session_state.pop(key, None)


def get_role() -> Optional[str]:
    session = get_auth_session()
    return session.role if session else None


def get_dashboard_store() -> DashboardStore:
    """One dashboard store per browser session."""
    if "admin_dashboard_store" not in st.session_state:
        st.session_state["admin_dashboard_store"] = DashboardStore()
    return st.session_state["admin_dashboard_store"]


def get_notifier() -> Notifier:
    if "admin_notifier" not in st.session_state:
        st.session_state["admin_notifier"] = Notifier()
    return st.session_state["admin_notifier"]


def get_liked_books() -> frozenset:
    return st.session_state.get("liked_books", frozenset())


def set_liked_books(liked: frozenset) -> None:
    st.session_state["liked_books"] = liked
