import sqlite3

import pytest

from zerocms.database import (
    create_database,
    execute_sql_file,
    execute_sql_files_in_directory,
    parse_database_name,
    remove_database_name,
)

DSN = "user:password@tcp(localhost:3306)/zerocms?charset=utf8mb4&parseTime=true"


class _Cursor:
    def __init__(self, log, fail_on):
        self._log = log
        self._fail_on = fail_on

    def execute(self, query):
        if self._fail_on is not None and self._fail_on in query:
            raise sqlite3.OperationalError("boom")
        self._log.append(query)

    def close(self):
        pass


class _RecordingDB:
    def __init__(self, fail_on=None):
        self.queries = []
        self._fail_on = fail_on

    def cursor(self):
        return _Cursor(self.queries, self._fail_on)


def _tables(conn):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
    return sorted(row[0] for row in rows)


def test_remove_database_name_keeps_slash():
    assert remove_database_name(DSN) == "user:password@tcp(localhost:3306)/"


def test_remove_database_name_without_slash_appends_one():
    assert remove_database_name("localhost") == "localhost/"


def test_parse_database_name():
    assert parse_database_name(DSN) == "zerocms"


def test_parse_database_name_without_name_raises():
    with pytest.raises(ValueError, match="database name not found"):
        parse_database_name("user@tcp(localhost:3306)/")


def test_create_database_issues_statement():
    db = _RecordingDB()
    create_database(db, "zerocms")
    assert db.queries == ["CREATE DATABASE IF NOT EXISTS zerocms"]


def test_create_database_propagates_failure():
    db = _RecordingDB(fail_on="CREATE DATABASE")
    with pytest.raises(sqlite3.OperationalError):
        create_database(db, "zerocms")


def test_execute_sql_file_runs_each_statement(tmp_path):
    script = tmp_path / "init.sql"
    script.write_text(
        "CREATE TABLE a (id INTEGER);\n\n;  ;CREATE TABLE b (id INTEGER);\n"
    )
    conn = sqlite3.connect(":memory:")
    execute_sql_file(conn, script)
    assert _tables(conn) == ["a", "b"]


def test_execute_sql_file_bad_statement_raises(tmp_path):
    script = tmp_path / "bad.sql"
    script.write_text("CREATE TABLE a (id INTEGER); NOT SQL AT ALL;")
    conn = sqlite3.connect(":memory:")
    with pytest.raises(RuntimeError, match="failed to execute query"):
        execute_sql_file(conn, script)
    assert _tables(conn) == ["a"]


def test_execute_sql_file_missing_raises(tmp_path):
    with pytest.raises(OSError, match="failed to read SQL file"):
        execute_sql_file(sqlite3.connect(":memory:"), tmp_path / "missing.sql")


def test_directory_walk_order_and_filter(tmp_path):
    (tmp_path / "b.sql").write_text("Q_B1; Q_B2")
    (tmp_path / "notes.txt").write_text("Q_TXT")
    nested = tmp_path / "a"
    nested.mkdir()
    (nested / "x.sql").write_text("Q_AX")
    (tmp_path / "c.sql").write_text("Q_C")
    db = _RecordingDB()
    execute_sql_files_in_directory(db, tmp_path)
    assert db.queries == ["Q_AX", "Q_B1", "Q_B2", "Q_C"]


def test_directory_with_sqlite(tmp_path):
    (tmp_path / "users.sql").write_text("CREATE TABLE sys_user (id INTEGER);")
    (tmp_path / "roles.sql").write_text("CREATE TABLE sys_role (id INTEGER);")
    conn = sqlite3.connect(":memory:")
    execute_sql_files_in_directory(conn, tmp_path)
    assert _tables(conn) == ["sys_role", "sys_user"]


def test_directory_failure_names_file(tmp_path):
    (tmp_path / "a.sql").write_text("Q_OK")
    (tmp_path / "b.sql").write_text("Q_FAIL")
    db = _RecordingDB(fail_on="Q_FAIL")
    with pytest.raises(RuntimeError, match="b.sql"):
        execute_sql_files_in_directory(db, tmp_path)
    assert db.queries == ["Q_OK"]


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        execute_sql_files_in_directory(_RecordingDB(), tmp_path / "missing")