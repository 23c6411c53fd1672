"""
Authentication headers attached to every request.

  AuthSecret -- the ``Authorization`` header (API key or OIDC bearer token)
  ApiKey     -- an extra named header, e.g. ``X-OpenAI-Api-Key`` for
                vectorizer / generative modules
"""
from __future__ import annotations

import re
from dataclasses import dataclass

# RFC 7230 token characters
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_HEADER_VALUE_RE = re.compile(r"^[\t\x20-\x7e\x80-\xff]*$")


def _check_header_value(value: str) -> str:
    if not _HEADER_VALUE_RE.match(value):
        raise ValueError("Invalid header value: control characters are not allowed.")
    return value


@dataclass(frozen=True)
class AuthSecret:
    scheme: str  # ApiKey | Bearer
    secret: str

    @classmethod
    def api_key(cls, api_key: str) -> AuthSecret:
        return cls(scheme="ApiKey", secret=api_key)

    @classmethod
    def bearer_token(cls, token: str) -> AuthSecret:
        return cls(scheme="Bearer", secret=token)

    def header_value(self) -> str:
        """Value for the ``Authorization`` header."""
        return _check_header_value(f"{self.scheme} {self.secret}")

    def __repr__(self) -> str:
        return f"AuthSecret(scheme={self.scheme!r}, secret='***')"


@dataclass(frozen=True)
class ApiKey:
    header: str
    key: str

    def header_name(self) -> str:
        if not _HEADER_NAME_RE.match(self.header):
            raise ValueError(f"Invalid header name: {self.header!r}")
        return self.header

    def header_value(self) -> str:
        return _check_header_value(self.key)

    def __repr__(self) -> str:
        return f"ApiKey(header={self.header!r}, key='***')"


def build_auth_headers(
    auth: AuthSecret | None = None,
    api_keys: list[ApiKey] | tuple[ApiKey, ...] = (),
) -> dict[str, str]:
    """Collect all authentication headers into one mapping.

    Raises
    ------
    ValueError
        If a header name or value is not valid HTTP.
    """
    headers: dict[str, str] = {}
    if auth is not None:
        headers["Authorization"] = auth.header_value()
    for key in api_keys:
        headers[key.header_name()] = key.header_value()
    return headers
