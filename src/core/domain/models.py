"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Immutable, validated values for everything that crosses a layer boundary
  (CLI -> executor -> renderer).
- The models describe *what* a command or a response is, not *how* it is
  obtained or printed.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class KvPair(BaseModel):
    """A `key=value` token from the command line."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Text before the first '='.")
    value: str = Field(
        default="",
        description="Everything after the first '=' (may be empty or contain more '=').",
    )


class GetCommand(BaseModel):
    """`get <url>`: a GET request without body."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = "GET"
    url: str = Field(..., min_length=1, description="URL exactly as typed by the user.")


class PostCommand(BaseModel):
    """`post <url> [key=value ...]`: a POST request with a JSON object body."""

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    url: str = Field(..., min_length=1, description="URL exactly as typed by the user.")
    pairs: tuple[KvPair, ...] = Field(
        default=(),
        description="Body pairs in command-line order.",
    )


Command = Union[GetCommand, PostCommand]


class MediaType(BaseModel):
    """Structured `Content-Type` value."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1)
    subtype: str = Field(..., min_length=1)
    parameters: dict[str, str] = Field(default_factory=dict)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @classmethod
    def parse(cls, value: str | None) -> MediaType | None:
        """Parse a header value such as `application/json; charset=utf-8`.

        Returns `None` when there is no `type/subtype` token to work with.
        Type, subtype and parameter names are case-insensitive and are
        lower-cased; parameter values keep their case (quotes stripped).
        """

        if not value:
            return None

        head, *raw_params = value.split(";")
        type_, sep, subtype = head.strip().partition("/")
        type_ = type_.strip().lower()
        subtype = subtype.strip().lower()
        if not sep or not type_ or not subtype or "/" in subtype:
            return None

        parameters: dict[str, str] = {}
        for raw in raw_params:
            name, eq, param_value = raw.partition("=")
            name = name.strip().lower()
            if not eq or not name:
                continue
            parameters[name] = param_value.strip().strip('"')

        return cls(type=type_, subtype=subtype, parameters=parameters)


class ResponseView(BaseModel):
    """Everything the renderer needs from a received response."""

    model_config = ConfigDict(frozen=True)

    http_version: str = Field(
        default="HTTP/1.1",
        description="Protocol version as reported by the transport (e.g. 'HTTP/2').",
    )
    status_code: int = Field(..., ge=100, le=999)
    reason_phrase: str = Field(default="")
    headers: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="(name, value) pairs in receipt order; repeated names are kept.",
    )
    content_type: MediaType | None = Field(default=None)
    body: str = Field(default="", description="Decoded body text.")

    @property
    def status_line(self) -> str:
        parts = [self.http_version, str(self.status_code)]
        if self.reason_phrase:
            parts.append(self.reason_phrase)
        return " ".join(parts)
