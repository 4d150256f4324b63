"""Typed async HTTP client for the Streamlit pages, the dashboard core and the CLI.

Only imports from ``pentopublic.api.schemas``, never the stand-in server's
routers or services. Every failure surfaces as ``APIError`` so callers can
treat "this endpoint failed" uniformly.

The client wraps an ``httpx.AsyncClient``, which is bound to the event loop it
first runs on. Use one client per ``asyncio.run`` (``async with get_client()``).
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from pentopublic.api.schemas.admin import (
    BookSummaryEntry, DashboardSummary, EntityId, ModerationResult,
    PendingSubmission, UserSummary,
)
from pentopublic.api.schemas.auth import AuthSession, LoginRequest, RegisterRequest, RegisterResponse
from pentopublic.api.schemas.catalog import CatalogBook
from pentopublic.config import settings

T = TypeVar("T")

_PENDING_LIST = TypeAdapter(list[PendingSubmission])
_USER_LIST = TypeAdapter(list[UserSummary])
_BOOK_SUMMARY_LIST = TypeAdapter(list[BookSummaryEntry])
_CATALOG_LIST = TypeAdapter(list[CatalogBook])


class APIError(Exception):
    """Raised for any failed call: 4xx/5xx, transport error, timeout or bad payload.

    ``status_code`` is ``None`` when no response was received.
    """

    def __init__(self, status_code: int | None, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        prefix = f"[{status_code}] " if status_code is not None else ""
        super().__init__(f"{prefix}{detail}")


class PentoClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> PentoClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def set_token(self, token: str | None) -> None:
        if token:
            self._client.headers["Authorization"] = f"Bearer {token}"
        else:
            self._client.headers.pop("Authorization", None)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise APIError(None, f"{type(exc).__name__}: {exc}") from exc
        self._raise_for_status(resp)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise APIError(resp.status_code, "Response body is not valid JSON") from exc

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            body = resp.json()
            detail = body.get("detail") or body.get("message") or resp.text
        except Exception:
            detail = resp.text
        raise APIError(resp.status_code, str(detail) or resp.reason_phrase)

    @staticmethod
    def _parse(adapter: TypeAdapter[T] | type[BaseModel], data: Any) -> Any:
        try:
            if isinstance(adapter, TypeAdapter):
                return adapter.validate_python(data)
            return adapter.model_validate(data)
        except ValidationError as exc:
            raise APIError(None, f"Malformed response: {exc.error_count()} validation error(s)") from exc

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def login(self, user_name: str, password: str) -> AuthSession:
        payload = LoginRequest(user_name=user_name, password=password)
        data = await self._request("POST", "/auth/login", json=payload.model_dump(by_alias=True))
        session = self._parse(AuthSession, data)
        if session.user_name is None:
            session = session.model_copy(update={"user_name": user_name})
        return session

    async def register(self, payload: RegisterRequest) -> RegisterResponse:
        data = await self._request(
            "POST", "/auth/register", json=payload.model_dump(by_alias=True, mode="json"),
        )
        return self._parse(RegisterResponse, data)

    # ------------------------------------------------------------------
    # Admin dashboard
    # ------------------------------------------------------------------

    async def get_dashboard_summary(self) -> DashboardSummary:
        data = await self._request("GET", "/admin/dashboard")
        return self._parse(DashboardSummary, data or {})

    async def get_pending_submissions(self) -> list[PendingSubmission]:
        data = await self._request("GET", "/admin/pending-books")
        return self._parse(_PENDING_LIST, data or [])

    async def get_readers(self) -> list[UserSummary]:
        data = await self._request("GET", "/admin/readers")
        return self._parse(_USER_LIST, data or [])

    async def get_authors(self) -> list[UserSummary]:
        data = await self._request("GET", "/admin/authors")
        return self._parse(_USER_LIST, data or [])

    async def get_books_summary(self) -> list[BookSummaryEntry]:
        data = await self._request("GET", "/admin/books-summary")
        return self._parse(_BOOK_SUMMARY_LIST, data or [])

    async def approve_submission(self, submission_id: EntityId) -> ModerationResult:
        data = await self._request("PUT", f"/admin/books/{submission_id}/approve")
        return self._moderation_result(submission_id, "approved", data)

    async def reject_submission(self, submission_id: EntityId) -> ModerationResult:
        data = await self._request("PUT", f"/admin/books/{submission_id}/reject")
        return self._moderation_result(submission_id, "rejected", data)

    def _moderation_result(self, submission_id: EntityId, status: str, data: Any) -> ModerationResult:
        # Some backends answer 204, a bare message or their own status shape;
        # only the 2xx matters, so the body is read leniently and never raises.
        body = data if isinstance(data, dict) else {}
        server_status = body.get("status")
        message = body.get("message")
        return ModerationResult(
            id=submission_id,
            status=server_status if isinstance(server_status, str) and server_status else status,
            message=message if isinstance(message, str) else None,
        )

    # ------------------------------------------------------------------
    # Reader catalog
    # ------------------------------------------------------------------

    async def list_books(self) -> list[CatalogBook]:
        data = await self._request("GET", "/books/with-files")
        return self._parse(_CATALOG_LIST, data or [])

    async def list_top_books(self) -> list[CatalogBook]:
        data = await self._request("GET", "/books/top")
        return self._parse(_CATALOG_LIST, data or [])

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def health(self) -> dict:
        return await self._request("GET", "/health") or {}


# ------------------------------------------------------------------
# Streamlit helpers: one client per script run
# ------------------------------------------------------------------

def get_client() -> PentoClient:
    """Return a ``PentoClient`` configured from the current Streamlit session."""
    import streamlit as st

    base_url = st.session_state.get("pento_api_url", settings.API_BASE_URL)
    auth = st.session_state.get("auth_session")
    token = auth.token if auth is not None else None
    if token is None and settings.API_TOKEN is not None:
        token = settings.API_TOKEN.get_secret_value()
    return PentoClient(base_url=base_url, token=token)


def run_async(awaitable: Awaitable[T]) -> T:
    """Drive a coroutine to completion from synchronous Streamlit code."""
    async def _main() -> T:
        return await awaitable
    return asyncio.run(_main())
