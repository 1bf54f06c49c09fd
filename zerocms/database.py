"""Database bootstrap helpers working on DB-API connections."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Iterator

log = logging.getLogger(__name__)

_DATABASE_NAME = re.compile(r"/([a-zA-Z0-9_]+)\\?")


def remove_database_name(dsn: str) -> str:
    """Strip everything after the first slash of a DSN, keeping the slash."""
    return dsn.split("/", 1)[0] + "/"


def parse_database_name(dsn: str) -> str:
    """Extract the database name from a DSN."""
    match = _DATABASE_NAME.search(dsn)
    if match is None:
        raise ValueError("database name not found")
    return match.group(1)


def _execute(db: Any, query: str) -> None:
    cursor = db.cursor()
    try:
        cursor.execute(query)
    finally:
        cursor.close()


def create_database(db: Any, db_name: str) -> None:
    """Create the database if it does not exist yet."""
    try:
        _execute(db, f"CREATE DATABASE IF NOT EXISTS {db_name}")
    except Exception as exc:
        log.error("Error creating database: %s", exc)
        raise


def execute_sql_file(db: Any, file_path: str | os.PathLike[str]) -> None:
    """Run every semicolon-separated statement of an SQL file."""
    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to read SQL file: {exc}") from exc

    for query in (part.strip() for part in content.split(";")):
        if not query:
            continue
        try:
            _execute(db, query)
        except Exception as exc:
            raise RuntimeError(f"failed to execute query: {exc}") from exc


def _sql_files(path: Path) -> Iterator[Path]:
    if path.is_dir() and not path.is_symlink():
        for child in sorted(path.iterdir(), key=lambda entry: entry.name):
            yield from _sql_files(child)
    elif path.name.endswith(".sql"):
        yield path


def execute_sql_files_in_directory(db: Any, dir_path: str | os.PathLike[str]) -> None:
    """Run every ``.sql`` file below a directory, in lexical walk order."""
    root = Path(dir_path)
    if not os.path.lexists(root):
        raise FileNotFoundError(f"no such file or directory: {root}")
    for path in _sql_files(root):
        try:
            execute_sql_file(db, path)
        except (OSError, RuntimeError) as exc:
            raise RuntimeError(f"failed to execute SQL file {path}: {exc}") from exc