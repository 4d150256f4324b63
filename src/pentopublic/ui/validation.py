"""Pre-flight validation for the Streamlit UI and the ``doctor`` command."""
from typing import List

from pentopublic.ui.api_client import PentoClient, run_async


def validate_backend_url() -> List[str]:
    """Validate that the configured API base URL looks usable."""
    from pentopublic.config import settings
    errors = []
    if not settings.API_BASE_URL.startswith(("http://", "https://")):
        errors.append(f"API_BASE_URL must be an http(s) URL, got {settings.API_BASE_URL!r}")
    if settings.API_TIMEOUT_SECONDS <= 0:
        errors.append("API_TIMEOUT_SECONDS must be positive")
    return errors


def validate_backend_connection(client: PentoClient | None = None) -> List[str]:
    """Validate that the backend answers ``/health``."""
    errors = []

    async def _check() -> None:
        async with (client or PentoClient()) as c:
            await c.health()

    try:
        run_async(_check())
    except Exception as e:
        errors.append(f"Backend connection failed: {e}")
    return errors


def run_all_checks() -> List[str]:
    """Run all validation checks."""
    errors = []
    errors.extend(validate_backend_url())
    if not errors:
        errors.extend(validate_backend_connection())
    return errors
