"""Access to the ``sys_menu`` and ``sys_api`` tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from zerocms.store import ExecResult, NotFoundError, Store

_MENU_COLUMNS = (
    "menu_id",
    "menu_name",
    "parent_id",
    "order",
    "path",
    "component",
    "query",
    "is_frame",
    "is_cache",
    "menu_type",
    "visible",
    "status",
    "perms",
    "icon",
    "created_id",
    "created_by",
    "updated_id",
    "updated_by",
    "remark",
    "created_at",
    "updated_at",
    "deleted_at",
)
_TIME_COLUMNS = ("created_at", "updated_at", "deleted_at")

SYS_MENU_ROWS = ",".join(f"`{column}`" for column in _MENU_COLUMNS)


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii")
    return datetime.fromisoformat(str(value))


@dataclass
class SysMenu:
    """One row of ``sys_menu``."""

    menu_id: int = 0
    menu_name: str = ""
    parent_id: int = 0
    order: int = 0
    path: str = ""
    component: Optional[str] = None
    query: Optional[str] = None
    is_frame: int = 0
    is_cache: int = 0
    menu_type: str = ""
    visible: int = 0
    status: int = 0
    perms: Optional[str] = None
    icon: str = ""
    created_id: Optional[int] = None
    created_by: str = ""
    updated_id: Optional[int] = None
    updated_by: str = ""
    remark: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


def _menu_from_row(row: Dict[str, Any]) -> SysMenu:
    values = dict(row)
    for column in _TIME_COLUMNS:
        if column in values:
            values[column] = _parse_time(values[column])
    return SysMenu(**values)


class SysMenuModel(Store):
    """Queries on menus."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_menu`")

    def find_one(self, menu_id: int) -> SysMenu:
        """Return the menu with this id."""
        query = f"select {SYS_MENU_ROWS} from {self.table} where `menu_id` = ? limit 1"
        return _menu_from_row(self.query_row(query, menu_id))

    def list(self) -> List[SysMenu]:
        """Return every menu that has not been deleted."""
        query = f"SELECT {SYS_MENU_ROWS} FROM {self.table} WHERE deleted_at IS NULL"
        return [_menu_from_row(row) for row in self.query_rows(query)]


@dataclass
class SysApi:
    """One row of ``sys_api``."""

    id: int = 0
    path: str = ""
    description: str = ""
    group: str = ""
    method: str = ""


@dataclass(frozen=True)
class Route:
    """An HTTP route served by the application."""

    method: str
    path: str


class SysApiModel(Store):
    """Queries on the registered API endpoints."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_api`")

    def find_one_by_path_and_method(self, path: str, method: str) -> SysApi:
        query = (
            "SELECT `id`, `path`, `description`, `group`, `method` "
            f"FROM {self.table} WHERE path = ? AND method = ?"
        )
        return SysApi(**self.query_row(query, path, method))

    def insert(self, data: SysApi) -> ExecResult:
        query = (
            f"insert into {self.table} (`path`, `description`, `group`, `method`) "
            "values (?, ?, ?, ?)"
        )
        return self.execute(query, data.path, data.description, data.group, data.method)

    def update(self, data: SysApi) -> None:
        query = (
            f"update {self.table} set `path`=?,`description`=?,`group`=?,`method`=? "
            "where `id` = ?"
        )
        self.execute(query, data.path, data.description, data.group, data.method, data.id)

    def sync_all_api(self, routes: Iterable[Route]) -> None:
        """Record every route, keeping the description and group of known ones."""
        for route in routes:
            try:
                existing = self.find_one_by_path_and_method(route.path, route.method)
            except NotFoundError:
                self.insert(SysApi(path=route.path, method=route.method))
                continue
            self.update(
                SysApi(
                    id=existing.id,
                    path=route.path,
                    method=route.method,
                    description=existing.description,
                    group=existing.group,
                )
            )