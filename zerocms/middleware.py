"""Bearer-token authentication for admin requests."""

from __future__ import annotations

from typing import Any, Callable


class Unauthorized(Exception):
    """The request carries no usable credentials."""

    status = 401

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def authenticate(auth_header: str | None, token_lookup: Callable[[str], Any]) -> int:
    """Return the user id for an ``Authorization: Bearer <token>`` header.

    ``token_lookup`` maps an access token to a record with a ``user_id``
    attribute and raises when the token is unknown.
    """
    if not auth_header:
        raise Unauthorized("Authorization header is missing")

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise Unauthorized("Invalid authorization format")

    try:
        token = token_lookup(parts[1])
    except Exception as exc:
        raise Unauthorized(f"查询失败：{exc}") from exc
    return token.user_id