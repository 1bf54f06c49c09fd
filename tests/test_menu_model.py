import sqlite3
from datetime import datetime

import pytest

from zerocms.menu_model import Route, SysApi, SysApiModel, SysMenuModel
from zerocms.store import NotFoundError

MENU_SCHEMA = """
CREATE TABLE sys_menu (
    menu_id INTEGER PRIMARY KEY AUTOINCREMENT,
    menu_name TEXT NOT NULL,
    parent_id INTEGER NOT NULL DEFAULT 0,
    `order` INTEGER NOT NULL DEFAULT 0,
    path TEXT NOT NULL DEFAULT '',
    component TEXT,
    query TEXT,
    is_frame INTEGER NOT NULL DEFAULT 0,
    is_cache INTEGER NOT NULL DEFAULT 0,
    menu_type TEXT NOT NULL DEFAULT '',
    visible INTEGER NOT NULL DEFAULT 0,
    status INTEGER NOT NULL DEFAULT 0,
    perms TEXT,
    icon TEXT NOT NULL DEFAULT '',
    created_id INTEGER,
    created_by TEXT NOT NULL DEFAULT '',
    updated_id INTEGER,
    updated_by TEXT NOT NULL DEFAULT '',
    remark TEXT NOT NULL DEFAULT '',
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    deleted_at DATETIME
)
"""

API_SCHEMA = """
CREATE TABLE sys_api (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    path TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    `group` TEXT NOT NULL DEFAULT '',
    method TEXT NOT NULL
)
"""


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    connection.execute(MENU_SCHEMA)
    connection.execute(API_SCHEMA)
    yield connection
    connection.close()


def _add_menu(conn, name, parent_id=0, deleted_at=None, perms=None):
    cursor = conn.execute(
        "INSERT INTO sys_menu (menu_name, parent_id, path, perms, deleted_at) "
        "VALUES (?, ?, ?, ?, ?)",
        (name, parent_id, "/" + name, perms, deleted_at),
    )
    conn.commit()
    return cursor.lastrowid


def test_find_one_menu(conn):
    menu_id = _add_menu(conn, "system", perms="system:view")
    menu = SysMenuModel(conn).find_one(menu_id)
    assert menu.menu_id == menu_id
    assert menu.menu_name == "system"
    assert menu.path == "/system"
    assert menu.perms == "system:view"
    assert menu.component is None
    assert isinstance(menu.created_at, datetime)


def test_find_one_missing_menu(conn):
    with pytest.raises(NotFoundError):
        SysMenuModel(conn).find_one(99)


def test_list_skips_deleted_menus(conn):
    first = _add_menu(conn, "a")
    _add_menu(conn, "b", deleted_at="2024-01-01 00:00:00")
    third = _add_menu(conn, "c", parent_id=first)
    menus = SysMenuModel(conn).list()
    assert [menu.menu_id for menu in menus] == [first, third]
    assert menus[1].parent_id == first


def test_sync_inserts_new_routes(conn):
    model = SysApiModel(conn)
    routes = [Route("POST", "/api/v1/admin/login"), Route("GET", "/api/v1/admin/hello")]
    model.sync_all_api(routes)
    for route in routes:
        api = model.find_one_by_path_and_method(route.path, route.method)
        assert (api.path, api.method) == (route.path, route.method)
        assert api.description == ""
        assert api.group == ""


def test_sync_keeps_description_and_group(conn):
    model = SysApiModel(conn)
    api_id = model.insert(
        SysApi(path="/roles", method="GET", description="list roles", group="role")
    ).last_insert_id
    model.sync_all_api([Route("GET", "/roles")])
    api = model.find_one_by_path_and_method("/roles", "GET")
    assert api == SysApi(
        id=api_id, path="/roles", description="list roles", group="role", method="GET"
    )


def test_sync_is_idempotent(conn):
    model = SysApiModel(conn)
    routes = [Route("GET", "/a"), Route("DELETE", "/a")]
    model.sync_all_api(routes)
    model.sync_all_api(routes)
    rows = model.query_rows("SELECT id FROM `sys_api`")
    assert len(rows) == len(routes)


def test_find_missing_api_raises(conn):
    with pytest.raises(NotFoundError):
        SysApiModel(conn).find_one_by_path_and_method("/none", "GET")