# zerocms

The back-end logic of a small content-management admin: roles, menus,
departments and the links between them, with role-based access to menus
and department-level data scopes for roles.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `zerocms.fileutil`: `file_exists`, `create_file` (creates an empty
  file unless the path exists) and `read_file` (returns bytes).
- `zerocms.hashing`: `generate_salt(size)` returns `size` random bytes
  as base64; `generate_hash(content, salt)` bcrypt-hashes
  `content + salt` at cost 10 and raises `ValueError` past 72 bytes;
  `compare_password(hashed_password, plain_password)` returns a bool.
- `zerocms.database`: `parse_database_name` and `remove_database_name`
  for MySQL-style DSNs, and `create_database`, `execute_sql_file`
  (splits a file on `;` and runs each non-empty statement) and
  `execute_sql_files_in_directory` (every `.sql` file below a directory,
  in sorted walk order) on a DB-API connection.
- `zerocms.types`: request and response records (`Role`, `Menu`,
  `Department`, `DataScope`, `Paginate`, `Date`, `Response`, and the
  `...Req` records) with `to_dict()` giving the JSON field names, and
  `success(msg)` / `error(msg)` building the `Rest` status (`code` 1 or
  0).
- `zerocms.store`: `Store`, a thin layer over a DB-API connection using
  `?` placeholders. `query_row` raises `NotFoundError` when no row comes
  back; `execute` commits and returns an `ExecResult` with
  `last_insert_id` and `rows_affected`.
- `zerocms.role_model`, `zerocms.department_model`,
  `zerocms.menu_model`: table models for `sys_role`, `sys_department`,
  `sys_menu` and `sys_api`. `first` and `list` leave out rows whose
  `deleted_at` is set; `list(page, limit)` with a limit of 0 returns all
  rows. `SysApiModel.sync_all_api(routes)` inserts unknown `Route`s and
  updates known ones, keeping their description and group.
- `zerocms.relations`: models for the join tables `sys_menu_api`,
  `sys_role_department`, `sys_role_menu` and `sys_user_role`, and
  `super_admin(user_roles)`, true when any role has id 1.
- `zerocms.middleware`: `authenticate(auth_header, token_lookup)` checks
  an `Authorization: Bearer <token>` value, passes the token to
  `token_lookup` and returns the record's `user_id`. It raises
  `Unauthorized` (`status` 401) when the header is missing, malformed or
  the lookup fails.
- `zerocms.tree`: `list_to_tree(items, id_attr)` nests records under
  their `parent_id`; records with parent 0 are roots and records whose
  parent is absent are dropped.
- `zerocms.department_logic.DepartmentLogic`: `all`, `show`, `store`,
  `update` and `destroy` (soft delete) for departments, keeping the
  `ancestors` path.
- `zerocms.role_logic.RoleLogic`: `all`, `index` (paged), `show`,
  `store`, `update`, `destroy` (soft delete) and `data_scope`, which for
  scope 2 syncs the role's departments with the requested ids.
- `zerocms.menu_logic`: `hello(user_id)` and `MenuLogic.all`, the tree
  of menus a user may see: every live menu for user 1 or a holder of
  role 1, otherwise the menus named by the user's access policies.

Every operation returns a `Response`; its `to_dict()` gives the JSON
body `{"code": 1, "msg": "...", "data": ...}`. Failures are raised as
exceptions (`NotFoundError`, `ValueError`, `RuntimeError`).

## Example

```python
import sqlite3

from zerocms.department_logic import DepartmentLogic
from zerocms.department_model import SysDepartmentModel
from zerocms.types import DepartmentReq

conn = sqlite3.connect(":memory:")
conn.execute(
    """CREATE TABLE sys_department (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        parent_id INTEGER DEFAULT 0,
        ancestors TEXT DEFAULT '',
        name TEXT,
        sort INTEGER DEFAULT 0,
        leader TEXT, phone TEXT, email TEXT,
        status INTEGER DEFAULT 1,
        create_by INTEGER DEFAULT 0,
        update_by INTEGER DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        deleted_at TIMESTAMP
    )"""
)

logic = DepartmentLogic(SysDepartmentModel(conn), user_id=1)
root = logic.store(DepartmentReq(name="Engineering"))
logic.store(DepartmentReq(name="Platform", parent_id=root.data.id))

print(logic.all().to_dict())
```

## What it does not do

- It has no HTTP server, routing or command-line program; the logic
  classes are called directly with request records and a user id.
- It does not create the database tables. The models expect
  `sys_role`, `sys_department`, `sys_menu`, `sys_api` and the join
  tables to exist; `zerocms.database` can run SQL files that create
  them.
- It has no user or token tables, no login and no token issuing.
  `authenticate` needs a `token_lookup` supplied by the caller.
- It has no access-policy engine. `MenuLogic` and `RoleLogic.store` take
  an `enforcer` object that provides `get_filtered_policy`,
  `add_policies` and `save_policy`.
- Menus can only be listed as a tree; there is no create, update, show
  or delete for menus, and no paged department listing.