from __future__ import annotations

import logging

from sqlalchemy import inspect

from timegrid.db.base import Base
from timegrid.db.session import engine
import timegrid.models  # noqa: F401

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: dict[str, set[str]] = {
    "kv_entries": {"key", "payload", "updated_at"},
}


def _assert_required_columns() -> None:
    with engine.connect() as connection:
        inspector = inspect(connection)
        table_names = set(inspector.get_table_names())
        for table_name, columns in REQUIRED_COLUMNS.items():
            if table_name not in table_names:
                raise RuntimeError(f"Missing required table: {table_name}")
            existing = {item["name"] for item in inspector.get_columns(table_name)}
            missing = sorted(columns - existing)
            if missing:
                raise RuntimeError(f"Table {table_name} is missing column(s): {', '.join(missing)}")


def ensure_schema() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        _assert_required_columns()
    except Exception as exc:  # pragma: no cover - runtime environment dependent
        logger.exception("Schema bootstrap failed")
        raise RuntimeError("Schema bootstrap failed") from exc
