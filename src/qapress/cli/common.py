from __future__ import annotations

from rich.console import Console

from qapress.config import load_settings
from qapress.db import DB, init_db

console = Console()


def _db() -> DB:
    s = load_settings()
    db = DB(path=s.db_path)
    init_db(db)
    return db
