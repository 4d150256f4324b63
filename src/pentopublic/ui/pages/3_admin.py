from typing import Awaitable, Callable, Sequence

import streamlit as st
from pentopublic.api.schemas.admin import BookSummaryEntry, EntityId, UserSummary
from pentopublic.dashboard.aggregator import load_all
from pentopublic.dashboard.moderation import approve, reject
from pentopublic.dashboard.tabs import Tab, tab_labels
from pentopublic.ui.api_client import get_client, run_async
from pentopublic.ui.state import get_dashboard_store, get_notifier, get_role, init_session

init_session()

if get_role() != "admin":
    st.error("The admin dashboard requires an admin account.")
    st.stop()

store = get_dashboard_store()
notifier = get_notifier()


def _refresh() -> None:
    async def _load():
        async with get_client() as client:
            await load_all(client, store)
    run_async(_load())


def _moderate(action: Callable[..., Awaitable[bool]], submission_id: EntityId) -> None:
    async def _run():
        async with get_client() as client:
            await action(client, store, notifier, submission_id)
    run_async(_run())


if not store.state.attempted and not store.state.loading:
    with st.spinner("Fetching data..."):
        _refresh()

state = store.state

# --- Full failure: nothing to show ---
if state.full_failure:
    st.title("Connection Failed")
    st.error(state.error)
    if st.button("Try Again", type="primary"):
        with st.spinner("Fetching data..."):
            _refresh()
        st.rerun()
    st.stop()


@st.fragment(run_every=1)
def _notification_area() -> None:
    note = notifier.current()
    if note is None:
        return
    if note.kind.value == "success":
        st.success(note.message)
    elif note.kind.value == "error":
        st.error(note.message)
    else:
        st.info(note.message)


# --- Header ---
h1, h2 = st.columns([4, 1])
h1.title("Admin Dashboard")
h1.caption("Manage books and monitor platform activity")
if h2.button("Refresh", disabled=state.loading):
    with st.spinner("Refreshing..."):
        _refresh()
    st.rerun()

if state.error:
    st.warning(state.error)

_notification_area()

# --- Tabs ---
labels = dict(tab_labels(state))
selected = st.radio(
    "Section",
    list(Tab),
    index=list(Tab).index(state.active_tab),
    format_func=labels.get,
    horizontal=True,
    label_visibility="collapsed",
)
if selected is not state.active_tab:
    store.select_tab(selected)
    state = store.state

st.divider()


def _render_list(title: str, entries: Sequence[UserSummary | BookSummaryEntry], noun: str) -> None:
    st.subheader(title)
    st.caption(f"{len(entries)} {noun} total")
    if not entries:
        st.info(f"No {noun} found")
        return
    for i, item in enumerate(entries):
        c1, c2 = st.columns([5, 1])
        c1.markdown(f"**{item.display_name or f'Item {i + 1}'}**")
        subtitle = getattr(item, "email", None) or getattr(item, "description", None)
        c1.caption(subtitle or "No additional information")
        if item.status_label:
            c2.write(item.status_label)


if state.active_tab is Tab.DASHBOARD:
    summary = state.summary
    if summary is None:
        st.info("No Dashboard Data. Unable to load dashboard statistics.")
    else:
        books = summary.books
        users = summary.users

        def _v(value: int | None) -> int | str:
            return "-" if value is None else value

        st.subheader("Book Statistics")
        b1, b2, b3, b4 = st.columns(4)
        b1.metric("Total Books", _v(books.total if books else None))
        b2.metric("Approved", _v(books.approved if books else None))
        b3.metric("Pending", _v(books.pending if books else None))
        b4.metric("Rejected", _v(books.rejected if books else None))

        st.subheader("User Statistics")
        u1, u2, u3 = st.columns(3)
        u1.metric("Authors", _v(users.authors if users else None))
        u2.metric("Readers", _v(users.readers if users else None))
        u3.metric("Subscribed", _v(users.subscribed_readers if users else None))

elif state.active_tab is Tab.PENDING:
    st.subheader("Pending Book Approvals")
    st.caption(f"{len(state.pending)} books awaiting review")
    if not state.pending:
        st.success("All Caught Up! No pending books to review.")
    for book in state.pending:
        with st.container(border=True):
            c1, c2 = st.columns([4, 1])
            c1.markdown(f"### {book.title}")
            c1.write(f"by {book.author}")
            if book.description:
                c1.caption(book.description)
            meta = []
            if book.category:
                meta.append(book.category)
            if book.submitted_date:
                meta.append(book.submitted_date.strftime("%Y-%m-%d"))
            if meta:
                c1.caption(" · ".join(meta))
            if c2.button("Approve", key=f"approve_{book.id}", type="primary"):
                _moderate(approve, book.id)
                st.rerun()
            if c2.button("Reject", key=f"reject_{book.id}"):
                _moderate(reject, book.id)
                st.rerun()

elif state.active_tab is Tab.AUTHORS:
    _render_list("Authors", state.authors, "authors")
elif state.active_tab is Tab.READERS:
    _render_list("Readers", state.readers, "readers")
else:
    _render_list("Books Summary", state.books_summary, "books")
