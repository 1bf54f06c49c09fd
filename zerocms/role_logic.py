"""Operations behind the role endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from zerocms.department_model import SysDepartmentModel
from zerocms.relations import SysRoleDepartment, SysRoleDepartmentModel
from zerocms.role_model import SysRole, SysRoleModel
from zerocms.store import NotFoundError
from zerocms.tree import list_to_tree
from zerocms.types import (
    DataScope,
    DataScopeReq,
    Date,
    Paginate,
    Response,
    Role,
    RoleReq,
    ShowRoleReq,
    success,
)

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_ZERO_TIME_UNIX = -62135596800
_ZERO_TIME_TEXT = "0001-01-01 00:00:00"
_CUSTOM_DATA_SCOPE = 2


def _stamp(value: Optional[datetime]) -> Tuple[int, str]:
    """Return the Unix time of a moment and its local date-time text."""
    if value is None:
        return _ZERO_TIME_UNIX, _ZERO_TIME_TEXT
    seconds = int(value.timestamp())
    return seconds, datetime.fromtimestamp(seconds).strftime(_TIME_FORMAT)


def _date(created: Optional[datetime], updated: Optional[datetime]) -> Date:
    created_at, created_time = _stamp(created)
    updated_at, updated_time = _stamp(updated)
    return Date(
        created_at=created_at,
        created_time=created_time,
        updated_at=updated_at,
        updated_time=updated_time,
    )


def _to_role(row: SysRole, *, with_parent: bool) -> Role:
    return Role(
        id=row.id,
        parent_id=row.parent_id if with_parent else 0,
        name=row.name,
        description=row.description or "",
        level=row.level or "",
        sort=row.sort,
        status=row.status,
        date=_date(row.created_at, row.updated_at),
    )


class _Session:
    """A connection view whose statements are committed only as a whole."""

    def __init__(self, conn: Any) -> None:
        self._conn = conn
        self.pending = False

    def cursor(self) -> Any:
        return self._conn.cursor()

    def commit(self) -> None:
        """Record the request; the real commit happens when the transaction ends."""
        self.pending = True


class RoleLogic:
    """Role listing, paging, lookup, creation, update, deletion and data scope."""

    def __init__(
        self,
        role_model: SysRoleModel,
        role_department_model: SysRoleDepartmentModel,
        department_model: SysDepartmentModel,
        enforcer: Any,
        user_id: int,
    ) -> None:
        self.role_model = role_model
        self.role_department_model = role_department_model
        self.department_model = department_model
        self.enforcer = enforcer
        self.user_id = user_id

    def all(self, req: Optional[RoleReq] = None) -> Response:
        """Return every live role as a tree."""
        try:
            rows = self.role_model.list(1, 0)
        except Exception as exc:
            raise RuntimeError(f"获取角色列表失败: {exc}") from exc
        roles = [_to_role(row, with_parent=True) for row in rows]
        return Response(rest=success("获取成功！"), data=list_to_tree(roles, "id"))

    def index(self, req: RoleReq) -> Response:
        """Return one page of live roles together with the table total."""
        current = req.paginate.current
        page_size = req.paginate.page_size
        if current < 0:
            raise ValueError("分页参数错误！")

        try:
            total = self.role_model.count()
        except Exception as exc:
            raise RuntimeError(f"获取角色总数失败: {exc}") from exc
        try:
            rows = self.role_model.list(current, page_size)
        except Exception as exc:
            raise RuntimeError(f"获取角色列表失败: {exc}") from exc

        page: Dict[str, Any] = Paginate(
            current=current, page_size=page_size, total=total
        ).to_dict()
        page["data"] = [_to_role(row, with_parent=False) for row in rows]
        return Response(rest=success("获取成功！"), data=page)

    def show(self, req: ShowRoleReq) -> Response:
        """Return one live role."""
        try:
            row = self.role_model.first(req.id)
        except NotFoundError as exc:
            raise NotFoundError(f"角色不存在或查询失败: {exc}") from exc
        except Exception as exc:
            raise RuntimeError(f"角色不存在或查询失败: {exc}") from exc
        return Response(rest=success("查询成功"), data=_to_role(row, with_parent=False))

    def store(self, req: RoleReq) -> Response:
        """Create a role, record its level path and grant the chosen menus."""
        user_id_text = str(self.user_id)

        level = "0"
        if req.parent_id != 0:
            level = self.role_model.first(req.parent_id).level or ""

        role = SysRole(
            parent_id=req.parent_id,
            name=req.name,
            description=req.description,
            level=level,
            sort=req.sort,
            status=req.status,
        )

        conn = self.role_model.conn
        session = _Session(conn)
        session_model = SysRoleModel(session)
        try:
            insert_id = session_model.insert(role).last_insert_id
            role.id = insert_id
            role.level = f"{level}-{insert_id}"
            session_model.update(role)

            rules = [[user_id_text, str(menu_id)] for menu_id in req.menu_ids]
            self.enforcer.add_policies(rules)
            self.enforcer.save_policy()
        except BaseException:
            rollback = getattr(conn, "rollback", None)
            if rollback is not None:
                rollback()
            raise
        commit = getattr(conn, "commit", None)
        if commit is not None and session.pending:
            commit()

        now = datetime.now()
        return Response(
            rest=success("新增成功"),
            data=Role(
                id=insert_id,
                name=role.name,
                description=role.description or "",
                level=role.level or "",
                sort=role.sort,
                status=role.status,
                date=_date(now, now),
            ),
        )

    def update(self, req: RoleReq) -> Response:
        """Change a live role's fields and reset its level from the parent."""
        try:
            role = self.role_model.first(req.id)
        except NotFoundError as exc:
            raise NotFoundError(f"角色不存在或无法查找: {exc}") from exc
        except Exception as exc:
            raise RuntimeError(f"角色不存在或无法查找: {exc}") from exc

        level = "0"
        if req.parent_id != 0:
            try:
                parent = self.role_model.find_one(req.parent_id)
            except NotFoundError as exc:
                raise NotFoundError(f"父角色查找失败: {exc}") from exc
            except Exception as exc:
                raise RuntimeError(f"父角色查找失败: {exc}") from exc
            level = parent.level or ""

        role.parent_id = req.parent_id
        role.name = req.name
        role.description = req.description
        role.sort = req.sort
        role.status = req.status
        role.level = level

        try:
            self.role_model.update(role)
        except Exception as exc:
            raise RuntimeError(f"角色更新失败: {exc}") from exc

        updated_at, updated_time = _stamp(datetime.now())
        return Response(
            rest=success("更新成功"),
            data=Role(
                id=role.id,
                name=role.name,
                description=role.description or "",
                level=role.level or "",
                sort=role.sort,
                status=role.status,
                date=Date(updated_at=updated_at, updated_time=updated_time),
            ),
        )

    def destroy(self, req: ShowRoleReq) -> Response:
        """Mark a live role as deleted."""
        existing = self.role_model.first(req.id)
        self.role_model.update(
            SysRole(
                id=req.id,
                parent_id=existing.parent_id,
                name=existing.name,
                description=existing.description,
                level=existing.level,
                sort=existing.sort,
                status=existing.status,
                deleted_at=datetime.now(),
            )
        )
        data = _to_role(existing, with_parent=True)
        data.id = req.id
        return Response(rest=success("删除成功！"), data=data)

    def data_scope(self, req: DataScopeReq) -> Response:
        """Set the departments a role may see when it uses a custom scope."""
        role_id = req.id
        role = self.role_model.first(role_id)
        department_ids = list(req.department_ids)

        if req.data_scope == _CUSTOM_DATA_SCOPE:
            if not department_ids:
                raise ValueError("必须选择部门")

            current = self.role_department_model.list(role_id)
            wanted = set(department_ids)
            held = {link.department_id for link in current}

            to_add = [dep_id for dep_id in department_ids if dep_id not in held]
            to_remove = [link for link in current if link.department_id not in wanted]

            missing: List[str] = []
            for dep_id in department_ids:
                try:
                    self.department_model.find_one(dep_id)
                except NotFoundError:
                    missing.append(str(dep_id))
            if missing:
                raise NotFoundError("部门不存在：" + ",".join(missing))

            for dep_id in to_add:
                self.role_department_model.insert(
                    SysRoleDepartment(role_id=role_id, department_id=dep_id)
                )
            for link in to_remove:
                self.role_department_model.delete_by_role_id_and_department_id(
                    link.role_id, link.department_id
                )

        return Response(
            rest=success("操作成功！"),
            data=DataScope(
                id=role_id,
                data_scope=req.data_scope,
                department_ids=department_ids,
                role_name=role.name,
            ),
        )