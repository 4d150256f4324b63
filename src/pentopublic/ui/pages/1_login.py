import streamlit as st
from pydantic import ValidationError
from pentopublic.api.schemas.auth import RegisterRequest, UserRole
from pentopublic.ui.api_client import get_client, run_async, APIError
from pentopublic.ui.state import init_session, set_auth_session

_LANDING = {
    "reader": "pages/2_catalog.py",
    "writer": "pages/2_catalog.py",
    "admin": "pages/3_admin.py",
}

init_session()
st.title("Sign in")

login_tab, register_tab = st.tabs(["Login", "Register"])

with login_tab:
    with st.form("login_form"):
        user_name = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted and user_name and password:
        async def _login():
            async with get_client() as client:
                return await client.login(user_name, password)

        try:
            session = run_async(_login())
        except APIError:
            st.error("Invalid credentials")
        else:
            landing = _LANDING.get(session.role)
            if landing is None:
                st.error("Unknown user role")
            else:
                set_auth_session(session)
                st.switch_page(landing)

with register_tab:
    with st.form("register_form"):
        new_user = st.text_input("Username", key="reg_user")
        email = st.text_input("Email", key="reg_email")
        new_password = st.text_input("Password", type="password", key="reg_password")
        role = st.selectbox(
            "I am a", [UserRole.READER, UserRole.WRITER], format_func=lambda r: r.value.title(),
        )
        registered = st.form_submit_button("Create account")

    if registered:
        try:
            payload = RegisterRequest(user_name=new_user, email=email, password=new_password, role=role)
        except ValidationError:
            st.warning("Please fill in every field.")
        else:
            async def _register():
                async with get_client() as client:
                    return await client.register(payload)

            try:
                created = run_async(_register())
                st.success(f"Account '{created.user_name}' created. You can log in now.")
            except APIError as e:
                st.error(f"Registration failed: {e.detail}")
