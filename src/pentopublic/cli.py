import asyncio
import sys
import typer
from pentopublic import __version__
from pentopublic.config import settings
from pentopublic.logging import logger, get_run_id, setup_logging
from pentopublic.ui.api_client import APIError, PentoClient

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """
    PentoPublic client CLI.
    """
    setup_logging("DEBUG" if verbose else None)


def _make_client(token: str | None = None) -> PentoClient:
    if token is None and settings.API_TOKEN is not None:
        token = settings.API_TOKEN.get_secret_value()
    return PentoClient(token=token)


@app.command(name="doctor")
def doctor():
    """
    Check configuration and backend reachability.
    """
    from pentopublic.ui.validation import validate_backend_connection, validate_backend_url

    logger.info("Running doctor check...")
    print("\n\U0001fa7a PentoPublic Doctor\n")

    print("[Environment]")
    print(f"  Python:               {sys.version.split()[0]}")
    print(f"  pentopublic:          {__version__}")
    print(f"  Run ID:               {get_run_id()}")

    print("\n[Configuration]")
    print(f"  API_BASE_URL:         {settings.API_BASE_URL}")
    print(f"  API_TIMEOUT_SECONDS:  {settings.API_TIMEOUT_SECONDS}")
    print(f"  API_TOKEN:            {'✅ Set' if settings.API_TOKEN else '⚠️  Not set (login required for admin commands)'}")
    print(f"  NOTIFICATION_SECONDS: {settings.NOTIFICATION_SECONDS}")

    failures = validate_backend_url()
    if not failures:
        print("\n[Backend]")
        failures = validate_backend_connection(_make_client())
        if not failures:
            print(f"  {settings.API_BASE_URL}/health  ✅ Reachable")

    print(f"\n{'─' * 50}")
    if failures:
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    print("All checks passed ✅\n")


@app.command(name="login")
def login(
    username: str = typer.Option(..., "--username", "-u", prompt=True),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
):
    """Sign in and print a bearer token (export it as API_TOKEN)."""
    async def _login():
        async with _make_client() as client:
            return await client.login(username, password)

    try:
        session = asyncio.run(_login())
    except APIError as e:
        logger.error(f"Login failed: {e}")
        print(f"❌ Login failed: {e.detail}")
        raise typer.Exit(code=1)
    print(f"✅ Signed in as {session.user_name} ({session.role})")
    print(f"API_TOKEN={session.token}")


admin_app = typer.Typer(help="Admin moderation commands.")
app.add_typer(admin_app, name="admin")


def _token_option() -> str | None:
    return typer.Option(None, "--token", envvar="API_TOKEN", help="Admin bearer token")


@admin_app.command("load")
def admin_load(token: str | None = _token_option()):
    """Load every dashboard section and print a summary."""
    from pentopublic.dashboard.aggregator import load_all
    from pentopublic.dashboard.store import DashboardStore
    from pentopublic.dashboard.tabs import tab_labels

    store = DashboardStore()

    async def _load():
        async with _make_client(token) as client:
            return await load_all(client, store)

    report = asyncio.run(_load())
    state = report.state

    if state.full_failure:
        print(f"❌ {state.error}")
        for name, reason in report.failures.items():
            print(f"  - {name.value}: {reason}")
        raise typer.Exit(code=1)

    books = state.summary.books if state.summary else None
    if books is not None:
        print(
            f"Books: {books.total} total, {books.approved} approved, "
            f"{books.pending} pending, {books.rejected} rejected"
        )
    for _, label in tab_labels(state)[1:]:
        print(f"  {label}")
    if report.failures:
        print(f"⚠️  {state.error}")
        for name, reason in report.failures.items():
            print(f"  - {name.value}: {reason}")


@admin_app.command("pending")
def admin_pending(token: str | None = _token_option()):
    """List submissions awaiting review."""
    async def _pending():
        async with _make_client(token) as client:
            return await client.get_pending_submissions()

    try:
        pending = asyncio.run(_pending())
    except APIError as e:
        print(f"❌ Failed to load pending books: {e.detail}")
        raise typer.Exit(code=1)

    if not pending:
        print("All caught up: no pending books.")
        return
    print(f"{len(pending)} books awaiting review:")
    for book in pending:
        submitted = f" [{book.submitted_date:%Y-%m-%d}]" if book.submitted_date else ""
        print(f"  #{book.id} {book.title} by {book.author}{submitted}")


def _review(submission_id: str, decision, token: str | None) -> None:
    from pentopublic.dashboard.moderation import moderate
    from pentopublic.dashboard.notifications import Notifier
    from pentopublic.dashboard.store import DashboardStore

    notifier = Notifier()

    async def _run():
        async with _make_client(token) as client:
            return await moderate(client, DashboardStore(), notifier, submission_id, decision)

    ok = asyncio.run(_run())
    note = notifier.current()
    message = note.message if note else ""
    if not ok:
        print(f"❌ {message}")
        raise typer.Exit(code=1)
    print(f"✅ {message}")


@admin_app.command("approve")
def admin_approve(submission_id: str, token: str | None = _token_option()):
    """Approve a pending submission."""
    from pentopublic.dashboard.store import Decision
    _review(submission_id, Decision.APPROVE, token)


@admin_app.command("reject")
def admin_reject(submission_id: str, token: str | None = _token_option()):
    """Reject a pending submission."""
    from pentopublic.dashboard.store import Decision
    _review(submission_id, Decision.REJECT, token)


@app.command(name="devserver")
def devserver(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
):
    """Serve the in-memory stand-in API for local development."""
    import uvicorn
    from pentopublic.api.app import create_app

    logger.info("Starting stand-in API on %s:%s", host, port)
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    app()
