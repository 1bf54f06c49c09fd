"""Salt generation and bcrypt password hashing."""

from __future__ import annotations

import base64
import secrets

import bcrypt

DEFAULT_COST = 10
_MAX_PASSWORD_BYTES = 72


def generate_salt(size: int) -> str:
    """Return ``size`` random bytes encoded as standard base64."""
    return base64.b64encode(secrets.token_bytes(size)).decode("ascii")


def generate_hash(content: str, salt: str) -> str:
    """Hash ``content + salt`` with bcrypt at the default cost."""
    payload = (content + salt).encode("utf-8")
    if len(payload) > _MAX_PASSWORD_BYTES:
        raise ValueError("bcrypt: password length exceeds 72 bytes")
    hashed = bcrypt.hashpw(payload, bcrypt.gensalt(rounds=DEFAULT_COST, prefix=b"2a"))
    return hashed.decode("ascii")


def compare_password(hashed_password: str, plain_password: str) -> bool:
    """Return True when the plain text matches the bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        return False