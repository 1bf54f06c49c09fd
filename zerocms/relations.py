"""Link tables between menus, APIs, roles, departments and users."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

from zerocms.store import ExecResult, Store

SUPER_ADMIN_ROLE_ID = 1


@dataclass
class SysMenuApi:
    menu_id: int = 0
    api_id: int = 0


@dataclass
class SysRoleDepartment:
    role_id: int = 0
    department_id: int = 0


@dataclass
class SysRoleMenu:
    role_id: int = 0
    menu_id: int = 0


@dataclass
class SysUserRole:
    user_id: int = 0
    role_id: int = 0


def super_admin(user_roles: Iterable[SysUserRole]) -> bool:
    """Return True when any of the roles is the super administrator role."""
    return any(role.role_id == SUPER_ADMIN_ROLE_ID for role in user_roles)


class SysMenuApiModel(Store):
    """Access to the ``sys_menu_api`` table."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_menu_api`")

    def insert(self, data: SysMenuApi) -> ExecResult:
        query = f"INSERT INTO {self.table} (`menu_id`, `api_id`) VALUES (?, ?)"
        return self.execute(query, data.menu_id, data.api_id)

    def list(self, menu_id: int) -> List[SysMenuApi]:
        query = f"SELECT menu_id, api_id FROM {self.table} WHERE menu_id = ?"
        return [SysMenuApi(**row) for row in self.query_rows(query, menu_id)]

    def find_one_by_menu_id_and_api_id(self, menu_id: int, api_id: int) -> SysMenuApi:
        query = f"SELECT menu_id, api_id FROM {self.table} WHERE menu_id = ? AND api_id = ?"
        return SysMenuApi(**self.query_row(query, menu_id, api_id))

    def delete_by_menu_id_and_api_id(self, menu_id: int, api_id: int) -> None:
        self.find_one_by_menu_id_and_api_id(menu_id, api_id)
        query = f"DELETE FROM {self.table} WHERE menu_id = ? AND api_id = ?"
        self.execute(query, menu_id, api_id)


class SysRoleDepartmentModel(Store):
    """Access to the ``sys_role_department`` table."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_role_department`")

    def insert(self, data: SysRoleDepartment) -> ExecResult:
        query = f"insert into {self.table} (`role_id`, `department_id`) values (?, ?)"
        return self.execute(query, data.role_id, data.department_id)

    def list(self, role_id: int) -> List[SysRoleDepartment]:
        query = f"SELECT role_id, department_id FROM {self.table} WHERE role_id = ?"
        return [SysRoleDepartment(**row) for row in self.query_rows(query, role_id)]

    def first(self, role_id: int, department_id: int) -> SysRoleDepartment:
        query = (
            f"SELECT role_id, department_id FROM {self.table} "
            "WHERE role_id = ? AND department_id = ?"
        )
        return SysRoleDepartment(**self.query_row(query, role_id, department_id))

    def delete_by_role_id_and_department_id(self, role_id: int, department_id: int) -> None:
        self.first(role_id, department_id)
        query = f"delete from {self.table} WHERE role_id = ? AND department_id = ?"
        self.execute(query, role_id, department_id)


class SysRoleMenuModel(Store):
    """Access to the ``sys_role_menu`` table."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_role_menu`")

    def insert(self, data: SysRoleMenu) -> ExecResult:
        query = f"INSERT INTO {self.table} (`role_id`, `menu_id`) VALUES (?, ?)"
        return self.execute(query, data.role_id, data.menu_id)

    def list(self, role_id: int) -> List[SysRoleMenu]:
        query = f"SELECT role_id, menu_id FROM {self.table} WHERE role_id = ?"
        return [SysRoleMenu(**row) for row in self.query_rows(query, role_id)]

    def find_one_by_role_id_and_menu_id(self, role_id: int, menu_id: int) -> SysRoleMenu:
        query = f"SELECT role_id, menu_id FROM {self.table} WHERE role_id = ? AND menu_id = ?"
        return SysRoleMenu(**self.query_row(query, role_id, menu_id))

    def delete_by_role_id_and_menu_id(self, role_id: int, menu_id: int) -> None:
        self.find_one_by_role_id_and_menu_id(role_id, menu_id)
        query = f"DELETE FROM {self.table} WHERE role_id = ? AND menu_id = ?"
        self.execute(query, role_id, menu_id)


class SysUserRoleModel(Store):
    """Access to the ``sys_user_role`` table."""

    def __init__(self, conn: Any) -> None:
        super().__init__(conn, "`sys_user_role`")

    def insert(self, data: SysUserRole) -> ExecResult:
        query = f"INSERT INTO {self.table} (`user_id`, `role_id`) VALUES (?, ?)"
        return self.execute(query, data.user_id, data.role_id)

    def list(self, user_id: int) -> List[SysUserRole]:
        query = f"SELECT user_id, role_id FROM {self.table} WHERE user_id = ?"
        return [SysUserRole(**row) for row in self.query_rows(query, user_id)]

    def first(self, user_id: int, role_id: int) -> SysUserRole:
        query = f"SELECT user_id, role_id FROM {self.table} WHERE user_id = ? AND role_id = ?"
        return SysUserRole(**self.query_row(query, user_id, role_id))

    def delete_by_user_id_and_role_id(self, user_id: int, role_id: int) -> None:
        self.first(user_id, role_id)
        query = f"DELETE FROM {self.table} WHERE user_id = ? AND role_id = ?"
        self.execute(query, user_id, role_id)