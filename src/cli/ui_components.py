"""Response rendering (Rich).

Why separate from the commands:
- Keeps Typer wiring apart from presentation details.
- Rendering takes an explicit `Console`, so tests can capture it in memory.

Output order is fixed: status line, blank line, headers, blank line, body.
Header values and non-JSON bodies bypass Rich and are written to the console
file as received; only our own text (status, header names, re-indented JSON)
is styled.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.text import Text

from core.domain.errors import FormattingError
from core.domain.models import MediaType, ResponseView

JSON_ESSENCE = "application/json"

STATUS_STYLE = "blue"
HEADER_NAME_STYLE = "green"
JSON_BODY_STYLE = "cyan"


def _write_raw(console: Console, text: str) -> None:
    # Rich Text strips control codes (\r, \x0c, ...) and expands tabs.
    console.file.write(text + "\n")
    console.file.flush()


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a JSON value")


def print_status(console: Console, response: ResponseView) -> None:
    """Status line (`HTTP/1.1 200 OK`) followed by a blank line."""

    console.print(Text(response.status_line, style=STATUS_STYLE), soft_wrap=True)
    console.print()


def print_headers(console: Console, response: ResponseView) -> None:
    """One `name: value` line per header in receipt order, then a blank line.

    Only the name goes through Rich; the value is written to the console file
    as received.
    """

    for name, value in response.headers:
        console.print(Text(name, style=HEADER_NAME_STYLE), end="", soft_wrap=True)
        _write_raw(console, f": {value}")
    console.print()


def pretty_json(body: str) -> str:
    """Re-indent a JSON document (2 spaces, key order and non-ASCII kept)."""

    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise FormattingError(f"Response declared {JSON_ESSENCE} but body is not valid JSON: {exc}") from exc
    return json.dumps(payload, indent=2, ensure_ascii=False)


def print_body(console: Console, content_type: MediaType | None, body: str) -> None:
    """Print the body; only `application/json` is reformatted."""

    if content_type is not None and content_type.essence == JSON_ESSENCE:
        console.out(pretty_json(body), style=JSON_BODY_STYLE, highlight=False)
        return
    _write_raw(console, body)


def print_response(console: Console, response: ResponseView) -> None:
    """Status, headers and body, in that order."""

    print_status(console, response)
    print_headers(console, response)
    print_body(console, response.content_type, response.body)
