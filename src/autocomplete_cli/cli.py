"""Command-line interface: one subcommand per suggestion source."""

import logging
import sys

import anyio
import structlog
import typer

from autocomplete_cli import __version__
from autocomplete_cli.config import settings
from autocomplete_cli.models.suggest import Source, SuggestOptions
from autocomplete_cli.suggest import handle_command

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Query autocomplete suggestions from Google, YouTube, Bing, Amazon, and DuckDuckGo",
)
logger = structlog.get_logger(__name__)

QUERY_ARGUMENT = typer.Argument(..., metavar="<query>", help="Search query", show_default=False)
LANG_OPTION = typer.Option(None, "--lang", "-l", help="Language code (e.g., en, de, es)")
COUNTRY_OPTION = typer.Option(None, "--country", "-c", help="Country code (e.g., us, uk, in)")
DELAY_OPTION = typer.Option(
    None,
    "--delay",
    "-d",
    min=0,
    help=f"Delay between API calls in milliseconds (default: {settings.default_delay_ms})",
    show_default=False,
)


def configure_logging(level: str) -> None:
    """Render structlog events to stderr, keeping stdout for suggestions."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    configure_logging("DEBUG" if verbose else settings.log_level)


def _run(
    query: str,
    source: Source,
    lang: str | None = None,
    country: str | None = None,
    delay: int | None = None,
) -> None:
    options = SuggestOptions(lang=lang, country=country, delay=delay)
    logger.debug("command_started", source=source.value, options=options.model_dump(exclude_none=True))

    result = anyio.run(handle_command, query, options, source)
    if not result.success:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)


@app.command()
def google(
    query: str = QUERY_ARGUMENT,
    lang: str | None = LANG_OPTION,
    country: str | None = COUNTRY_OPTION,
    delay: int | None = DELAY_OPTION,
) -> None:
    """Get Google autocomplete suggestions."""
    _run(query, Source.GOOGLE, lang, country, delay)


@app.command()
def youtube(
    query: str = QUERY_ARGUMENT,
    lang: str | None = LANG_OPTION,
    country: str | None = COUNTRY_OPTION,
    delay: int | None = DELAY_OPTION,
) -> None:
    """Get YouTube autocomplete suggestions."""
    _run(query, Source.YOUTUBE, lang, country, delay)


@app.command()
def bing(
    query: str = QUERY_ARGUMENT,
    lang: str | None = LANG_OPTION,
    country: str | None = typer.Option(None, "--country", "-c", help="Country code (e.g., us, uk, de)"),
    delay: int | None = DELAY_OPTION,
) -> None:
    """Get Bing autocomplete suggestions."""
    _run(query, Source.BING, lang, country, delay)


@app.command()
def amazon(
    query: str = QUERY_ARGUMENT,
    delay: int | None = DELAY_OPTION,
) -> None:
    """Get Amazon autocomplete suggestions."""
    _run(query, Source.AMAZON, delay=delay)


@app.command()
def duckduckgo(
    query: str = QUERY_ARGUMENT,
    delay: int | None = DELAY_OPTION,
) -> None:
    """Get DuckDuckGo autocomplete suggestions."""
    _run(query, Source.DUCKDUCKGO, delay=delay)


app.command("ddg", help="Alias for duckduckgo.")(duckduckgo)


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI and return the process exit code.

    Usage errors (missing query, unknown command) exit with 1.
    """
    try:
        app(args=argv, prog_name="autocomplete")
    except SystemExit as e:
        # click reports usage errors with status 2
        return 1 if e.code == 2 else int(e.code or 0)
    return 0
