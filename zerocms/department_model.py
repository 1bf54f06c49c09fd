"""Access to the ``sys_department`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from zerocms.store import ExecResult, Store

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_COLUMNS = (
    "id",
    "parent_id",
    "ancestors",
    "name",
    "sort",
    "leader",
    "phone",
    "email",
    "status",
    "create_by",
    "update_by",
    "created_at",
    "updated_at",
    "deleted_at",
)
_WRITABLE = (
    "parent_id",
    "ancestors",
    "name",
    "sort",
    "leader",
    "phone",
    "email",
    "status",
    "create_by",
    "update_by",
    "deleted_at",
)
_TIME_COLUMNS = ("created_at", "updated_at", "deleted_at")

SYS_DEPARTMENT_ROWS = ",".join(f"`{column}`" for column in _COLUMNS)


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii")
    return datetime.fromisoformat(str(value))


def _format_time(value: Optional[datetime]) -> Optional[str]:
    return None if value is None else value.strftime(_TIME_FORMAT)


@dataclass
class SysDepartment:
    """One row of ``sys_department``."""

    id: int = 0
    parent_id: int = 0
    ancestors: str = ""
    name: str = ""
    sort: int = 0
    leader: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    status: int = 0
    create_by: int = 0
    update_by: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


def _from_row(row: Dict[str, Any]) -> SysDepartment:
    values = dict(row)
    for column in _TIME_COLUMNS:
        if column in values:
            values[column] = _parse_time(values[column])
    return SysDepartment(**values)


def _writable_values(data: SysDepartment) -> tuple:
    return (
        data.parent_id,
        data.ancestors,
        data.name,
        data.sort,
        data.leader,
        data.phone,
        data.email,
        data.status,
        data.create_by,
        data.update_by,
        _format_time(data.deleted_at),
    )


class SysDepartmentModel(Store):
    """Queries on departments; soft-deleted ones are hidden by ``first`` and ``list``."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_department`")

    def find_one(self, id: int) -> SysDepartment:
        """Return the department with this id, deleted or not."""
        query = f"select {SYS_DEPARTMENT_ROWS} from {self.table} where `id` = ? limit 1"
        return _from_row(self.query_row(query, id))

    def first(self, id: int) -> SysDepartment:
        """Return the department with this id unless it has been deleted."""
        query = (
            f"select {SYS_DEPARTMENT_ROWS} from {self.table} "
            "where `id` = ? AND deleted_at IS NULL limit 1"
        )
        return _from_row(self.query_row(query, id))

    def find_one_by_name(self, name: str) -> SysDepartment:
        """Return the department with this name."""
        query = f"select {SYS_DEPARTMENT_ROWS} from {self.table} where `name` = ? limit 1"
        return _from_row(self.query_row(query, name))

    def count(self) -> int:
        """Return the number of rows in the table, deleted ones included."""
        row = self.query_row(f"SELECT COUNT(*) FROM {self.table}")
        return int(next(iter(row.values())))

    def list(self, page: int, limit: int) -> List[SysDepartment]:
        """Return live departments; a limit of 0 returns all of them."""
        query = f"SELECT {SYS_DEPARTMENT_ROWS} FROM {self.table} WHERE deleted_at IS NULL"
        args: List[int] = []
        if limit != 0:
            query += " limit ?,?"
            args = [(page - 1) * limit, limit]
        return [_from_row(row) for row in self.query_rows(query, *args)]

    def insert(self, data: SysDepartment) -> ExecResult:
        columns = ",".join(f"`{column}`" for column in _WRITABLE)
        marks = ", ".join("?" for _ in _WRITABLE)
        query = f"insert into {self.table} ({columns}) values ({marks})"
        return self.execute(query, *_writable_values(data))

    def update(self, data: SysDepartment) -> None:
        assignments = ",".join(f"`{column}`=?" for column in _WRITABLE)
        query = f"update {self.table} set {assignments} where `id` = ?"
        self.execute(query, *_writable_values(data), data.id)