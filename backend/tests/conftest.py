import os

# Keep the app's own engine off the developer database during tests.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from timegrid.api.deps import get_db
from timegrid.db.base import Base
from timegrid.db.repository import DepartmentRepository
from timegrid.db.store import InMemoryKeyValueStore
from timegrid.main import app
from timegrid.schemas.department import Assignment, Batch, Department, Subject, Teacher, TimetableSettings
import timegrid.models  # noqa: F401


@pytest.fixture()
def client():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def repository():
    return DepartmentRepository(InMemoryKeyValueStore())


@pytest.fixture()
def small_department():
    return Department(
        id="dept-test",
        name="Test Department",
        teachers=[Teacher(id="t1", name="Dr. One"), Teacher(id="t2", name="Dr. Two")],
        subjects=[
            Subject(id="s1", name="Algebra", code="MA101"),
            Subject(id="s2", name="Physics", code="PH101"),
        ],
        assignments=[
            Assignment(id="a1", teacher_id="t1", subject_id="s1", weekly_lectures=3),
            Assignment(id="a2", teacher_id="t2", subject_id="s2", weekly_lectures=2),
        ],
        batches=[
            Batch(id="b1", name="Batch A", subject_ids=["s1", "s2"]),
            Batch(id="b2", name="Batch B", subject_ids=["s1"]),
        ],
        settings=TimetableSettings(
            working_days=["Monday", "Tuesday", "Wednesday"],
            period_timings=["09:00 - 10:00", "10:00 - 11:00", "11:00 - 12:00"],
            max_lectures_per_day=2,
        ),
    )
