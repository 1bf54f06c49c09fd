"""Small file helpers used at start-up."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(filename: PathLike) -> bool:
    """Return False only when the path is known not to exist."""
    try:
        os.stat(filename)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def create_file(filename: PathLike) -> None:
    """Create an empty file unless something already exists at the path."""
    if file_exists(filename):
        return
    try:
        Path(filename).touch(exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create file: {exc}") from exc


def read_file(file_path: PathLike) -> bytes:
    """Return the whole content of a file."""
    return Path(file_path).read_bytes()