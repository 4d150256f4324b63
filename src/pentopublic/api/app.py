"""FastAPI application factory for the stand-in PentoPublic API.

Serves the routes the client talks to, backed by an in-memory store. Used by
``pentopublic devserver`` and by the integration tests.
"""
from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pentopublic import __version__
from pentopublic.domain.exceptions import AuthError, ConflictError, NotFoundError
from pentopublic.infra.memory_store import PlatformStore, seed_store


def create_app(store: PlatformStore | None = None) -> FastAPI:
    app = FastAPI(
        title="PentoPublic stand-in API",
        version=__version__,
    )
    if store is None:
        from pentopublic.config import settings
        store = seed_store(
            settings.DEV_ADMIN_USERNAME, settings.DEV_ADMIN_PASSWORD.get_secret_value(),
        )
    app.state.store = store

    # Import routers inside create_app() to avoid circular imports at module load time
    from pentopublic.api.routers.auth import router as auth_router
    from pentopublic.api.routers.admin import router as admin_router
    from pentopublic.api.routers.catalog import router as catalog_router

    app.include_router(auth_router)
    app.include_router(admin_router)
    app.include_router(catalog_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(ConflictError)
    def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message})

    @app.exception_handler(AuthError)
    def _unauthorized(request: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
