"""Request and response shapes of the admin API."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _serialize(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value


@dataclass
class Rest:
    """Status part shared by every response."""

    code: int = 0
    msg: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "msg": self.msg}


def success(msg: str) -> Rest:
    """Return a successful status with the given message."""
    return Rest(code=1, msg=msg)


def error(msg: str) -> Rest:
    """Return a failed status with the given message."""
    return Rest(code=0, msg=msg)


@dataclass
class Date:
    """Creation and update timestamps with their formatted forms."""

    created_at: int = 0
    created_time: str = ""
    updated_at: int = 0
    updated_time: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "createAt": self.created_at,
            "createdTime": self.created_time,
            "updatedAt": self.updated_at,
            "updatedTime": self.updated_time,
        }


@dataclass
class Paginate:
    """Paging parameters and result total."""

    current: int = 1
    page_size: int = 10
    total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"current": self.current, "pageSize": self.page_size, "total": self.total}


@dataclass
class LoginReq:
    username: str
    password: str


@dataclass
class TokenData:
    access_token: str = ""
    expires_at: int = 0
    refresh_token: str = ""
    re_expires_at: int = 0


@dataclass
class HelloData:
    id: int = 0


@dataclass
class ShowRoleReq:
    id: int = 0


@dataclass
class RoleReq:
    name: str = ""
    id: int = 0
    parent_id: int = 0
    description: str = ""
    menu_ids: List[int] = field(default_factory=list)
    sort: int = 0
    status: int = 0
    paginate: Paginate = field(default_factory=Paginate)


@dataclass
class Role:
    id: int = 0
    parent_id: int = 0
    name: str = ""
    description: str = ""
    menu_ids: List[int] = field(default_factory=list)
    level: str = ""
    sort: int = 0
    status: int = 0
    date: Date = field(default_factory=Date)
    children: List["Role"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id, "parentId": self.parent_id, "name": self.name}
        if self.description:
            out["description"] = self.description
        if self.menu_ids:
            out["menuIds"] = list(self.menu_ids)
        out.update(level=self.level, sort=self.sort, status=self.status)
        out.update(self.date.to_dict())
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@dataclass
class DataScopeReq:
    id: int = 0
    data_scope: int = 0
    department_ids: List[int] = field(default_factory=list)


@dataclass
class DataScope:
    id: int = 0
    data_scope: int = 0
    department_ids: List[int] = field(default_factory=list)
    role_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        # The identifier carries no JSON name, so it is emitted as "Id".
        out: Dict[str, Any] = {"Id": self.id, "dataScope": self.data_scope}
        if self.department_ids:
            out["departmentIds"] = list(self.department_ids)
        out["roleName"] = self.role_name
        return out


@dataclass
class MenuReq:
    menu_id: int = 0
    menu_name: str = ""
    parent_id: int = 0
    status: int = 0
    visible: int = 0
    order: int = 0
    path: str = ""
    component: str = ""
    query: str = ""
    is_frame: int = 0
    is_cache: int = 0
    menu_type: str = ""
    perms: str = ""
    icon: str = ""
    remark: str = ""


@dataclass
class Menu:
    menu_id: int = 0
    menu_name: str = ""
    parent_id: int = 0
    order: int = 0
    path: str = ""
    component: str = ""
    query: str = ""
    is_frame: int = 0
    is_cache: int = 0
    menu_type: str = ""
    visible: int = 0
    status: int = 0
    perms: str = ""
    icon: str = ""
    created_id: int = 0
    created_by: str = ""
    updated_id: int = 0
    updated_by: str = ""
    remark: str = ""
    children: List["Menu"] = field(default_factory=list)
    date: Date = field(default_factory=Date)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "menuId": self.menu_id,
            "menuName": self.menu_name,
            "parentId": self.parent_id,
            "order": self.order,
            "path": self.path,
            "component": self.component,
            "query": self.query,
            "isFrame": self.is_frame,
            "isCache": self.is_cache,
            "menuType": self.menu_type,
            "visible": self.visible,
            "status": self.status,
            "perms": self.perms,
            "icon": self.icon,
            "createdId": self.created_id,
            "createdBy": self.created_by,
            "updatedId": self.updated_id,
            "updatedBy": self.updated_by,
            "remark": self.remark,
        }
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        out.update(self.date.to_dict())
        return out


@dataclass
class ShowDepartmentReq:
    id: int = 0


@dataclass
class DepartmentReq:
    name: str = ""
    id: int = 0
    parent_id: int = 0
    sort: int = 0
    leader: str = ""
    phone: str = ""
    email: str = ""
    status: Optional[int] = None
    paginate: Paginate = field(default_factory=Paginate)


@dataclass
class Department:
    id: int = 0
    parent_id: int = 0
    ancestors: str = ""
    name: str = ""
    sort: int = 0
    leader: str = ""
    phone: str = ""
    email: str = ""
    status: int = 0
    create_by: int = 0
    update_by: int = 0
    deleted_at: int = 0
    date: Date = field(default_factory=Date)
    children: List["Department"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id}
        if self.parent_id:
            out["parentId"] = self.parent_id
        if self.ancestors:
            out["ancestors"] = self.ancestors
        out["name"] = self.name
        optional = (
            ("sort", self.sort),
            ("leader", self.leader),
            ("phone", self.phone),
            ("email", self.email),
        )
        out.update((key, value) for key, value in optional if value)
        out["status"] = self.status
        trailing = (
            ("createBy", self.create_by),
            ("updateBy", self.update_by),
            ("deletedAt", self.deleted_at),
        )
        out.update((key, value) for key, value in trailing if value)
        out.update(self.date.to_dict())
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@dataclass
class Response:
    """A status together with its payload."""

    rest: Rest = field(default_factory=Rest)
    data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        out = self.rest.to_dict()
        out["data"] = _serialize(self.data)
        return out