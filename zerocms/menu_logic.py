"""Operations behind the greeting and menu endpoints."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, List, Optional, Tuple

from zerocms.menu_model import SysMenu, SysMenuModel
from zerocms.relations import SysUserRoleModel, super_admin
from zerocms.tree import list_to_tree
from zerocms.types import Date, HelloData, Menu, MenuReq, Response, success

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_ZERO_TIME_UNIX = -62135596800
_ZERO_TIME_TEXT = "0001-01-01 00:00:00"
_INTEGER = re.compile(r"[+-]?[0-9]+")
_ROOT_USER_ID = 1


def _stamp(value: Optional[datetime]) -> Tuple[int, str]:
    if value is None:
        return _ZERO_TIME_UNIX, _ZERO_TIME_TEXT
    seconds = int(value.timestamp())
    return seconds, datetime.fromtimestamp(seconds).strftime(_TIME_FORMAT)


def hello(user_id: int) -> Response:
    """Greet the authenticated user with their id."""
    return Response(rest=success("获取成功！"), data=HelloData(id=user_id))


def _to_menu(row: SysMenu) -> Menu:
    created_at, created_time = _stamp(row.created_at)
    updated_at, updated_time = _stamp(row.updated_at)
    return Menu(
        menu_id=row.menu_id,
        menu_name=row.menu_name,
        parent_id=row.parent_id,
        order=row.order,
        path=row.path,
        component=row.component or "",
        query=row.query or "",
        is_frame=row.is_frame,
        is_cache=row.is_cache,
        menu_type=row.menu_type,
        visible=row.visible,
        status=row.status,
        perms=row.perms or "",
        icon=row.icon,
        created_id=row.created_id or 0,
        created_by=row.created_by,
        updated_id=row.updated_id or 0,
        updated_by=row.updated_by,
        remark=row.remark,
        date=Date(
            created_at=created_at,
            created_time=created_time,
            updated_at=updated_at,
            updated_time=updated_time,
        ),
    )


class MenuLogic:
    """Menus visible to one user."""

    def __init__(
        self,
        menu_model: SysMenuModel,
        user_role_model: SysUserRoleModel,
        enforcer: Any,
        user_id: int,
    ) -> None:
        self.menu_model = menu_model
        self.user_role_model = user_role_model
        self.enforcer = enforcer
        self.user_id = user_id

    def _visible_menus(self) -> List[SysMenu]:
        roles = self.user_role_model.list(self.user_id)
        if super_admin(roles) or self.user_id == _ROOT_USER_ID:
            return self.menu_model.list()

        menus: List[SysMenu] = []
        for access in self.enforcer.get_filtered_policy(0, str(self.user_id)):
            menu_id_text = access[1]
            if not _INTEGER.fullmatch(menu_id_text):
                continue
            menus.append(self.menu_model.find_one(int(menu_id_text)))
        return menus

    def all(self, req: Optional[MenuReq] = None) -> Response:
        """Return the user's menus as a tree.

        Super administrators see every live menu; other users see the menus
        their access policies name.
        """
        menus = [_to_menu(row) for row in self._visible_menus()]
        return Response(rest=success("获取成功！"), data=list_to_tree(menus, "menu_id"))