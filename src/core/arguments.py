"""Argument model: pure parsers for command-line tokens.

Kept outside the CLI so they can be tested without Typer and reused by any
other entry-point. The Typer layer (`cli.main`) only wires them as callbacks.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import AnyUrl, TypeAdapter, ValidationError

from core.domain.errors import InvalidKeyValueError, InvalidUrlError, UsageError
from core.domain.models import Command, GetCommand, KvPair, PostCommand

_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_url(value: str) -> str:
    """Check URL syntax only (no reachability) and return the input unchanged.

    An absolute URL is required: `abc` fails, `http://abc.xyz` passes.
    """

    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        errors = exc.errors()
        reason = errors[0]["msg"] if errors else str(exc)
        raise InvalidUrlError(value, reason) from exc
    return value


def parse_kv_pair(value: str) -> KvPair:
    """Split `key=value` on the first `=` only."""

    key, sep, rest = value.partition("=")
    if not sep:
        raise InvalidKeyValueError(value)
    return KvPair(key=key, value=rest)


def build_command(method: str, url: str, pairs: Iterable[str] = ()) -> Command:
    """Validate raw tokens and build the command for `method` (`get`/`post`)."""

    name = method.strip().lower()
    checked_url = parse_url(url)
    if name == "get":
        if tuple(pairs):
            raise UsageError("get does not accept key=value arguments")
        return GetCommand(url=checked_url)
    if name == "post":
        return PostCommand(url=checked_url, pairs=tuple(parse_kv_pair(p) for p in pairs))
    raise UsageError(f"Unknown subcommand {method!r} (expected 'get' or 'post')")
