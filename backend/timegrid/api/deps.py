from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from timegrid.core.config import get_settings
from timegrid.db.repository import DepartmentRepository
from timegrid.db.session import SessionLocal
from timegrid.db.store import SqlKeyValueStore


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_repository(db: Session = Depends(get_db)) -> DepartmentRepository:
    settings = get_settings()
    return DepartmentRepository(
        SqlKeyValueStore(db),
        departments_key=settings.departments_store_key,
        requests_key=settings.requests_store_key,
    )
