"""Error hierarchy.

Every failure of the tool is terminal: the CLI catches `NaiveHttpieError`,
prints the message on stderr and exits non-zero. Nothing retries.
"""

from __future__ import annotations


class NaiveHttpieError(Exception):
    """Base class for all errors reported to the user."""


class UsageError(NaiveHttpieError):
    """Missing or malformed arguments, or an unknown subcommand."""


class InvalidUrlError(UsageError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class InvalidKeyValueError(UsageError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Failed to parse {raw}")
        self.raw = raw


class RequestError(NaiveHttpieError):
    """The request could not be completed."""


class TransportError(RequestError):
    """DNS, connect, timeout or TLS failure; no response was received."""

    def __init__(self, url: str, cause: Exception) -> None:
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Request to {url} failed: {detail}")
        self.url = url
        self.cause = cause


class FormattingError(NaiveHttpieError):
    """A response body could not be rendered as declared (e.g. invalid JSON)."""
