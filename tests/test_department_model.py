import sqlite3
from datetime import datetime

import pytest

from zerocms.department_model import SysDepartment, SysDepartmentModel
from zerocms.store import NotFoundError

SCHEMA = """
CREATE TABLE sys_department (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    parent_id INTEGER NOT NULL DEFAULT 0,
    ancestors TEXT NOT NULL DEFAULT '',
    name TEXT NOT NULL UNIQUE,
    sort INTEGER NOT NULL DEFAULT 0,
    leader TEXT,
    phone TEXT,
    email TEXT,
    status INTEGER NOT NULL DEFAULT 1,
    create_by INTEGER NOT NULL DEFAULT 0,
    update_by INTEGER NOT NULL DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    deleted_at DATETIME
)
"""


@pytest.fixture
def model():
    conn = sqlite3.connect(":memory:")
    conn.execute(SCHEMA)
    yield SysDepartmentModel(conn)
    conn.close()


def _add(model, name, **kwargs):
    return model.insert(SysDepartment(name=name, **kwargs)).last_insert_id


def test_insert_and_first_round_trip(model):
    dept_id = _add(
        model, "sales", ancestors="0", leader="lead", email="sales@example.com", status=1
    )
    dept = model.first(dept_id)
    assert dept.id == dept_id
    assert dept.name == "sales"
    assert dept.ancestors == "0"
    assert dept.leader == "lead"
    assert dept.email == "sales@example.com"
    assert dept.phone is None
    assert isinstance(dept.updated_at, datetime)


def test_first_skips_deleted_but_find_one_does_not(model):
    dept_id = _add(model, "old", deleted_at=datetime(2023, 5, 6, 7, 8, 9))
    with pytest.raises(NotFoundError):
        model.first(dept_id)
    assert model.find_one(dept_id).deleted_at == datetime(2023, 5, 6, 7, 8, 9)


def test_find_one_by_name(model):
    dept_id = _add(model, "hr")
    assert model.find_one_by_name("hr").id == dept_id
    with pytest.raises(NotFoundError):
        model.find_one_by_name("missing")


def test_list_and_count(model):
    _add(model, "a")
    _add(model, "b", deleted_at=datetime(2024, 1, 1))
    _add(model, "c")
    live = model.list(1, 0)
    assert [dept.name for dept in live] == ["a", "c"]
    assert model.count() == len(live) + 1
    assert [dept.name for dept in model.list(2, 1)] == ["c"]


def test_update_sets_ancestors(model):
    dept_id = _add(model, "ops", ancestors="0")
    dept = model.first(dept_id)
    dept.ancestors = f"0-{dept_id}"
    dept.update_by = 7
    model.update(dept)
    stored = model.first(dept_id)
    assert stored.ancestors == f"0-{dept_id}"
    assert stored.update_by == 7