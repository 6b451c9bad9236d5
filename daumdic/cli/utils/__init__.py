"""CLI utility modules."""

from daumdic.cli.utils.async_runner import run_async
from daumdic.cli.utils.console import console, error_console

__all__ = ["run_async", "console", "error_console"]
