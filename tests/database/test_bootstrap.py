from __future__ import annotations

from attendance_tracker.database.bootstrap import (
    SCHEMA_PATH,
    SEED_PATH,
    _strip_comments,
    _strip_create_db_and_use,
    split_sql_statements,
)


def test_split_ignores_semicolons_inside_literals():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\", 'it''s');  ;\nSELECT 1"
    assert list(split_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        "INSERT INTO t VALUES (\"c;d\", 'it''s')",
        "SELECT 1",
    ]


def test_split_handles_escaped_quotes():
    sql = r"INSERT INTO t VALUES ('O\'Reilly; Ltd');SELECT 2;"
    assert list(split_sql_statements(sql)) == [r"INSERT INTO t VALUES ('O\'Reilly; Ltd')", "SELECT 2"]


def test_schema_script_defines_all_tables():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8")))
    statements = list(split_sql_statements(sql))

    assert len(statements) == 4
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    assert "UNIQUE KEY uq_attendance_employee_day (employee_id, work_date)" in statements[2]


def test_seed_script_is_rerunnable():
    statements = list(split_sql_statements(_strip_comments(SEED_PATH.read_text(encoding="utf-8"))))
    assert statements
    assert all("ON DUPLICATE KEY UPDATE" in s for s in statements)
