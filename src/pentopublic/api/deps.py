"""FastAPI dependencies."""
from __future__ import annotations
from fastapi import Depends, Header, Request
from pentopublic.domain.exceptions import AuthError
from pentopublic.infra.memory_store import PlatformStore, UserRecord
from pentopublic.services.admin_service import AdminService
from pentopublic.services.auth_service import AuthService
from pentopublic.services.catalog_service import CatalogService


def get_store(request: Request) -> PlatformStore:
    return request.app.state.store


def get_auth_service(store: PlatformStore = Depends(get_store)) -> AuthService:
    return AuthService(store)


def get_admin_service(store: PlatformStore = Depends(get_store)) -> AdminService:
    return AdminService(store)


def get_catalog_service(store: PlatformStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def require_admin(
    authorization: str | None = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> UserRecord:
    """Resolve the bearer token and insist on the admin role."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise AuthError("Missing bearer token")
    user = auth.resolve(token)
    if user.role != "admin":
        raise AuthError("Admin role required")
    return user
