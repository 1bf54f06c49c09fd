"""Access to the ``sys_role`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from zerocms.store import ExecResult, NotFoundError, Store

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_COLUMNS = (
    "id",
    "parent_id",
    "name",
    "description",
    "level",
    "sort",
    "status",
    "created_at",
    "updated_at",
    "deleted_at",
)
_WRITABLE = ("parent_id", "name", "description", "level", "sort", "status", "deleted_at")
_TIME_COLUMNS = ("created_at", "updated_at", "deleted_at")

SYS_ROLE_ROWS = ",".join(f"`{column}`" for column in _COLUMNS)


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii")
    return datetime.fromisoformat(str(value))


def _format_time(value: Optional[datetime]) -> Optional[str]:
    return None if value is None else value.strftime(_TIME_FORMAT)


@dataclass
class SysRole:
    """One row of ``sys_role``."""

    id: int = 0
    parent_id: int = 0
    name: str = ""
    description: Optional[str] = None
    level: Optional[str] = None
    sort: int = 0
    status: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


def _from_row(row: Dict[str, Any]) -> SysRole:
    values = dict(row)
    for column in _TIME_COLUMNS:
        if column in values:
            values[column] = _parse_time(values[column])
    return SysRole(**values)


def _writable_values(data: SysRole) -> tuple:
    return (
        data.parent_id,
        data.name,
        data.description,
        data.level,
        data.sort,
        data.status,
        _format_time(data.deleted_at),
    )


class SysRoleModel(Store):
    """Queries on roles; soft-deleted roles are hidden by ``first`` and ``list``."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_role`")

    def find_one(self, id: int) -> SysRole:
        """Return the role with this id, deleted or not."""
        query = f"select {SYS_ROLE_ROWS} from {self.table} where `id` = ? limit 1"
        return _from_row(self.query_row(query, id))

    def first(self, id: int) -> SysRole:
        """Return the role with this id unless it has been deleted."""
        role = self.find_one(id)
        if role.deleted_at is not None:
            raise NotFoundError()
        return role

    def count(self) -> int:
        """Return the number of rows in the table, deleted ones included."""
        row = self.query_row(f"SELECT COUNT(*) FROM {self.table}")
        return int(next(iter(row.values())))

    def list(self, page: int, limit: int) -> List[SysRole]:
        """Return live roles; a limit of 0 returns all of them."""
        query = f"SELECT {SYS_ROLE_ROWS} FROM {self.table} WHERE deleted_at IS NULL"
        args: List[int] = []
        if limit != 0:
            query += " limit ?,?"
            args = [(page - 1) * limit, limit]
        return [_from_row(row) for row in self.query_rows(query, *args)]

    def insert(self, data: SysRole) -> ExecResult:
        columns = ",".join(f"`{column}`" for column in _WRITABLE)
        marks = ", ".join("?" for _ in _WRITABLE)
        query = f"insert into {self.table} ({columns}) values ({marks})"
        return self.execute(query, *_writable_values(data))

    def update(self, data: SysRole) -> None:
        assignments = ",".join(f"`{column}`=?" for column in _WRITABLE)
        query = f"update {self.table} set {assignments} where `id` = ?"
        self.execute(query, *_writable_values(data), data.id)