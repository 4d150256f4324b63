"""Streamlit entry point: ``streamlit run src/pentopublic/ui/app.py``."""
import streamlit as st

from pentopublic.logging import setup_logging
from pentopublic.ui.state import get_auth_session, init_session, logout
from pentopublic.ui.validation import run_all_checks

setup_logging()
st.set_page_config(page_title="PentoPublic", page_icon="\U0001f4da", layout="wide")
init_session()

st.title("PentoPublic")
st.caption("Publish, discover and moderate books.")

session = get_auth_session()
if session is None:
    st.info("You are not signed in.")
    st.page_link("pages/1_login.py", label="Sign in or register", icon="\U0001f511")
else:
    st.sidebar.success(f"Signed in as {session.user_name} ({session.role})")
    if st.sidebar.button("Log out"):
        logout()
        st.rerun()
    if session.role == "admin":
        st.page_link("pages/3_admin.py", label="Admin dashboard", icon="\U0001f6e0")
    st.page_link("pages/2_catalog.py", label="Browse the catalog", icon="\U0001f4d6")

with st.expander("Backend status"):
    errors = run_all_checks()
    if errors:
        for err in errors:
            st.error(err)
    else:
        st.success("Backend reachable.")
