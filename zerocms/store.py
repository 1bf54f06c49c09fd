"""Thin table access over a DB-API connection using ``?`` placeholders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence


class NotFoundError(LookupError):
    """Raised when a query that must return a row returns none."""

    def __init__(self, message: str = "sql: no rows in result set") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ExecResult:
    """Outcome of a statement that changes data."""

    last_insert_id: int
    rows_affected: int


def _row_to_dict(description: Sequence[Sequence[Any]], row: Sequence[Any]) -> Dict[str, Any]:
    return {column[0]: value for column, value in zip(description, row)}


class Store:
    """Runs queries against one table of a connection."""

    def __init__(self, conn: Any, table: str) -> None:
        self.conn = conn
        self.table = table

    def query_row(self, query: str, *args: Any) -> Dict[str, Any]:
        """Return the first row of a query as a column-to-value mapping."""
        cursor = self.conn.cursor()
        try:
            cursor.execute(query, args)
            row = cursor.fetchone()
            if row is None:
                raise NotFoundError()
            return _row_to_dict(cursor.description, row)
        finally:
            cursor.close()

    def query_rows(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Return every row of a query as column-to-value mappings."""
        cursor = self.conn.cursor()
        try:
            cursor.execute(query, args)
            rows = cursor.fetchall()
            description = cursor.description or ()
            return [_row_to_dict(description, row) for row in rows]
        finally:
            cursor.close()

    def execute(self, query: str, *args: Any) -> ExecResult:
        """Run a statement and commit it."""
        cursor = self.conn.cursor()
        try:
            cursor.execute(query, args)
            result = ExecResult(
                last_insert_id=cursor.lastrowid or 0,
                rows_affected=cursor.rowcount,
            )
        finally:
            cursor.close()
        commit = getattr(self.conn, "commit", None)
        if commit is not None:
            commit()
        return result