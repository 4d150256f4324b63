import streamlit as st
from pentopublic.catalog.filters import (
    FILTER_LABELS, CatalogFilter, CatalogSource, apply_filter, has_audio, has_pdf,
    search_books, source_for, toggle_like,
)
from pentopublic.ui.api_client import get_client, run_async, APIError
from pentopublic.ui.state import get_auth_session, get_liked_books, init_session, set_liked_books

init_session()
st.title("Catalog")

if get_auth_session() is None:
    st.warning("Please sign in to browse the catalog.")
    st.stop()

c1, c2 = st.columns([2, 3])
filter_ = c1.radio(
    "Show", list(CatalogFilter), format_func=FILTER_LABELS.get, horizontal=True, key="catalog_filter",
)
query = c2.text_input("Search by title or author", key="catalog_search")


async def _fetch(source: CatalogSource):
    async with get_client() as client:
        if source is CatalogSource.TOP_BOOKS:
            return await client.list_top_books()
        return await client.list_books()


try:
    books = run_async(_fetch(source_for(filter_)))
except APIError as e:
    st.error(f"Failed to load books: {e.detail}")
    books = []

visible = search_books(apply_filter(books, filter_), query)
st.subheader(f"All Books ({len(visible)})")

if not visible:
    st.info("No books found. Try adjusting search or filters.")
    st.stop()

liked = get_liked_books()
cols = st.columns(4)
for i, book in enumerate(visible):
    with cols[i % 4].container(border=True):
        st.markdown(f"**{book.title or 'Untitled'}**")
        if book.description:
            st.caption(book.description)
        st.write(f"\U0001f464 {book.author_name}")
        uploaded = book.upload_date.strftime("%Y-%m-%d") if book.upload_date else "Unknown"
        st.write(f"\U0001f4c5 {uploaded}")

        badges = []
        if has_pdf(book):
            badges.append("PDF")
        if has_audio(book):
            badges.append("Audio")
        if badges:
            st.caption(" · ".join(badges))

        key = book.key
        is_liked = key in liked
        if st.button("❤️ Liked" if is_liked else "\U0001f90d Like", key=f"like_{key}_{i}"):
            set_liked_books(toggle_like(liked, key))
            st.rerun()
