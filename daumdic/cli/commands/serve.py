"""Serve command for running the HTTP API."""

import typer

from daumdic.config import settings


def serve(
    host: str = typer.Option(settings.api_host, help="Interface to bind"),
    port: int = typer.Option(settings.api_port, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the dictionary HTTP API."""
    from daumdic.main import run

    run(host=host, port=port, reload=reload)
