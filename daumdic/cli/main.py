"""Main CLI application entry point."""

import typer

from daumdic.cli.commands import search, serve
from daumdic.logging_config import setup_logging

app = typer.Typer(
    name="daumdic",
    help="Look up words in Daum dictionary",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup() -> None:
    """Initialize application on startup."""
    setup_logging()


app.command(name="search", help="Look up a word")(search.search)
app.command(name="parse", help="Parse a saved result page")(search.parse_file)
app.command(name="serve", help="Run the HTTP API")(serve.serve)


if __name__ == "__main__":
    app()
