"""Operations behind the department endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Tuple

from zerocms.department_model import SysDepartment, SysDepartmentModel
from zerocms.store import NotFoundError
from zerocms.tree import list_to_tree
from zerocms.types import (
    Date,
    Department,
    DepartmentReq,
    Response,
    ShowDepartmentReq,
    success,
)

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_ZERO_TIME_UNIX = -62135596800
_ZERO_TIME_TEXT = "0001-01-01 00:00:00"


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


def _to_department(row: SysDepartment, date: Date, **overrides: Any) -> Department:
    values = dict(
        id=row.id,
        parent_id=row.parent_id,
        name=row.name,
        ancestors=row.ancestors,
        sort=row.sort,
        leader=row.leader or "",
        phone=row.phone or "",
        email=row.email or "",
        status=row.status,
        date=date,
        create_by=row.create_by,
        update_by=row.update_by,
    )
    values.update(overrides)
    return Department(**values)


class DepartmentLogic:
    """Department listing, lookup, creation, update and soft deletion."""

    def __init__(self, model: SysDepartmentModel, user_id: int) -> None:
        self.model = model
        self.user_id = user_id

    def _first(self, department_id: int) -> SysDepartment:
        try:
            return self.model.first(department_id)
        except NotFoundError as exc:
            raise NotFoundError("部门不存在") from exc

    def _check_name(self, name: str) -> None:
        # Only a lookup failure other than a miss is reported as a clash.
        try:
            self.model.find_one_by_name(name)
        except NotFoundError:
            return
        except Exception as exc:
            raise ValueError("部门名称已存在") from exc

    def all(self, req: Optional[DepartmentReq] = None) -> Response:
        """Return every live department as a tree."""
        try:
            rows = self.model.list(1, 0)
        except Exception as exc:
            raise RuntimeError(f"获取部门列表失败: {exc}") from exc

        departments: List[Department] = [
            _to_department(row, _date(row.created_at, row.updated_at)) for row in rows
        ]
        return Response(rest=success("获取成功！"), data=list_to_tree(departments, "id"))

    def show(self, req: ShowDepartmentReq) -> Response:
        """Return one live department."""
        one = self._first(req.id)
        created_at, _ = _stamp(one.created_at)
        updated_at, _ = _stamp(one.updated_at)
        date = Date(
            created_at=created_at,
            created_time=one.created_at.strftime(_TIME_FORMAT)
            if one.created_at
            else _ZERO_TIME_TEXT,
            updated_at=updated_at,
            updated_time=one.updated_at.strftime(_TIME_FORMAT)
            if one.updated_at
            else _ZERO_TIME_TEXT,
        )
        return Response(rest=success("获取成功！"), data=_to_department(one, date))

    def store(self, req: DepartmentReq) -> Response:
        """Create a department below its parent and record its ancestry."""
        self._check_name(req.name)

        ancestors = "0"
        if req.parent_id > 0:
            ancestors = self.model.first(req.parent_id).ancestors

        status = 1 if req.status is None else req.status
        department = SysDepartment(
            parent_id=req.parent_id,
            ancestors=ancestors,
            name=req.name,
            sort=req.sort,
            leader=req.leader,
            phone=req.phone,
            email=req.email,
            status=status,
            create_by=self.user_id,
        )
        insert_id = self.model.insert(department).last_insert_id

        department.id = insert_id
        department.ancestors = f"{ancestors}-{insert_id}"
        self.model.update(department)

        now = datetime.now()
        return Response(
            rest=success("新增成功！"),
            data=_to_department(
                department,
                _date(now, now),
                create_by=self.user_id,
                update_by=self.user_id,
            ),
        )

    def update(self, req: DepartmentReq) -> Response:
        """Change a live department, moving it under a new parent if asked."""
        existing = self.model.first(req.id)
        status = 1 if req.status is None else req.status

        if req.name != existing.name:
            self._check_name(req.name)

        ancestors = existing.ancestors
        if req.parent_id > 0 and req.parent_id != existing.parent_id:
            parent = self.model.first(req.parent_id)
            ancestors = f"{parent.ancestors}-{req.id}"

        existing.parent_id = req.parent_id
        existing.name = req.name
        existing.sort = req.sort
        existing.leader = req.leader or None
        existing.phone = req.phone or None
        existing.email = req.email or None
        existing.status = status
        existing.update_by = self.user_id
        existing.ancestors = ancestors
        self.model.update(existing)

        date = _date(existing.created_at, datetime.now())
        return Response(
            rest=success("更新成功！"),
            data=_to_department(
                existing, date, create_by=self.user_id, update_by=self.user_id
            ),
        )

    def destroy(self, req: ShowDepartmentReq) -> Response:
        """Mark a live department as deleted."""
        existing = self._first(req.id)
        existing.deleted_at = datetime.now()
        existing.update_by = self.user_id
        self.model.update(existing)

        return Response(
            rest=success("删除成功！"),
            data=_to_department(
                existing,
                _date(existing.created_at, existing.updated_at),
                deleted_at=int(existing.deleted_at.timestamp()),
            ),
        )