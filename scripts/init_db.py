from __future__ import annotations

from attendance_tracker.config.settings import load_settings
from attendance_tracker.database.bootstrap import apply_schema, list_tables


def main() -> None:
    db = load_settings().db

    apply_schema(db)
    tables = list_tables(db)
    print(f"OK: Applied schema.sql -> {db.user}@{db.host}:{db.port}/{db.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
