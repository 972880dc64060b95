from __future__ import annotations

from attendance_tracker.config.settings import load_settings
from attendance_tracker.database.bootstrap import apply_seed_sql


def main() -> None:
    db = load_settings().db

    apply_seed_sql(db)
    print(f"OK: Seeded database -> {db.user}@{db.host}:{db.port}/{db.database}")


if __name__ == "__main__":
    main()
