from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent
SCHEMA_PATH = SQL_DIR / "schema.sql"
SEED_PATH = SQL_DIR / "seed.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def split_sql_statements(sql: str) -> Iterable[str]:
    """Yield the statements of a script, split on semicolons outside string literals."""
    buf: list[str] = []
    quote = None
    chars = iter(sql)

    for ch in chars:
        if ch == ";" and quote is None:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)
        if ch == "\\":
            buf.append(next(chars, ""))
        elif quote is None and ch in "'\"":
            quote = ch
        elif ch == quote:
            quote = None

    stmt = "".join(buf).strip()
    if stmt:
        yield stmt


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=int(target.port),
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _run_script(target: DBConfig, path: Path) -> int:
    sql = _strip_comments(_strip_create_db_and_use(path.read_text(encoding="utf-8")))
    statements = list(split_sql_statements(sql))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    return len(statements)


def ensure_database_exists(target: DBConfig) -> None:
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(target: DBConfig, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(target)
    count = _run_script(target, Path(schema_path))
    logger.info("Applied %s (%d statements) to %s", Path(schema_path).name, count, target.database)


def apply_seed_sql(target: DBConfig, *, seed_path: str | Path = SEED_PATH) -> None:
    count = _run_script(target, Path(seed_path))
    logger.info("Applied %s (%d statements) to %s", Path(seed_path).name, count, target.database)


def list_tables(target: DBConfig) -> list[str]:
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
