"""CLI entry-point (Typer).

Exposes `get` and `post`. Arguments are validated by the pure parsers in
`core.arguments` through Typer callbacks, so malformed input is reported as a
usage error (exit code 2) before any network activity. Runtime failures
(transport, formatting) are printed on stderr and exit with code 1.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from adapters.http_client import build_async_client
from cli.ui_components import print_response
from core.arguments import parse_kv_pair, parse_url
from core.config import AppSettings, __version__
from core.domain.errors import NaiveHttpieError, UsageError
from core.domain.models import Command, GetCommand, KvPair, PostCommand, ResponseView
from core.logging_config import configure_logging
from core.services.request_executor import execute_command

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="A naive httpie: send GET/POST requests and pretty-print the response.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _url_callback(value: str) -> str:
    try:
        return parse_url(value)
    except UsageError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _pairs_callback(values: Optional[List[str]]) -> list[KvPair]:
    try:
        return [parse_kv_pair(v) for v in values or []]
    except UsageError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"naive-httpie {__version__}", highlight=False)
        raise typer.Exit()


async def _fetch(command: Command, settings: AppSettings) -> ResponseView:
    async with build_async_client(settings) as client:
        return await execute_command(client, command)


def _fail(exc: Exception) -> typer.Exit:
    _err_console.print(Text.assemble(("Error:", "red"), " ", str(exc)), soft_wrap=True)
    return typer.Exit(code=1)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise _fail(exc) from exc


def _run(ctx: typer.Context, command: Command) -> None:
    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else _load_settings()
    try:
        response = asyncio.run(_fetch(command, settings))
        print_response(_console, response)
    except NaiveHttpieError as exc:
        logger.debug("request failed", exc_info=True)
        raise _fail(exc) from exc


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Send one HTTP request and print status, headers and body."""

    settings = _load_settings()
    ctx.obj = settings
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def get(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=_url_callback, help="URL to GET."),
) -> None:
    """Feed get with an url and we will retrieve the response for you."""

    _run(ctx, GetCommand(url=url))


@app.command()
def post(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=_url_callback, help="URL to POST to."),
    pairs: Optional[List[str]] = typer.Argument(
        None,
        callback=_pairs_callback,
        metavar="KEY=VALUE...",
        help="Body fields, sent as a JSON object of strings.",
    ),
) -> None:
    """Feed post with an url and optional key=value pairs.

    The pairs are posted as a JSON object and the response is printed.
    """

    _run(ctx, PostCommand(url=url, pairs=tuple(pairs or ())))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
