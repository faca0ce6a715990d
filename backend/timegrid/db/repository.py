from __future__ import annotations

from collections.abc import Callable
import logging
import uuid

from pydantic import TypeAdapter, ValidationError

from timegrid.core.exceptions import ResourceNotFoundError
from timegrid.db.seed import sample_departments
from timegrid.db.store import KeyValueStore
from timegrid.schemas.change_request import ChangeRequest
from timegrid.schemas.department import Department, TimetableSettings

DEPARTMENTS_KEY = "timetable_scheduler_departments"
REQUESTS_KEY = "timetable_scheduler_requests"

logger = logging.getLogger(__name__)

_departments_adapter = TypeAdapter(list[Department])
_requests_adapter = TypeAdapter(list[ChangeRequest])


class DepartmentRepository:
    """Departments and change requests as two JSON documents in a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        departments_key: str = DEPARTMENTS_KEY,
        requests_key: str = REQUESTS_KEY,
        seed: Callable[[], list[Department]] = sample_departments,
    ) -> None:
        self.store = store
        self.departments_key = departments_key
        self.requests_key = requests_key
        self._seed = seed

    # Departments

    def list_departments(self) -> list[Department]:
        raw = self.store.load(self.departments_key)
        if raw is None:
            return self._seed()
        try:
            return _departments_adapter.validate_python(raw)
        except ValidationError:
            logger.exception("Stored departments under %s are unreadable; falling back to sample data", self.departments_key)
            return self._seed()

    def save_departments(self, departments: list[Department]) -> None:
        self.store.save(
            self.departments_key,
            _departments_adapter.dump_python(departments, mode="json", by_alias=True),
        )

    def get_department(self, department_id: str) -> Department:
        for department in self.list_departments():
            if department.id == department_id:
                return department
        raise ResourceNotFoundError("Department", department_id)

    def create_department(self, name: str) -> Department:
        department = Department(id=f"dept-{uuid.uuid4().hex[:12]}", name=name, settings=TimetableSettings())
        departments = self.list_departments()
        departments.append(department)
        self.save_departments(departments)
        return department

    def save_department(self, department: Department) -> Department:
        departments = self.list_departments()
        for index, existing in enumerate(departments):
            if existing.id == department.id:
                departments[index] = department
                break
        else:
            raise ResourceNotFoundError("Department", department.id)
        self.save_departments(departments)
        return department

    def delete_department(self, department_id: str) -> None:
        departments = self.list_departments()
        remaining = [item for item in departments if item.id != department_id]
        if len(remaining) == len(departments):
            raise ResourceNotFoundError("Department", department_id)
        self.save_departments(remaining)

    def reset(self) -> list[Department]:
        departments = self._seed()
        self.save_departments(departments)
        logger.info("Department data reset to %d sample department(s)", len(departments))
        return departments

    # Change requests

    def list_requests(self) -> list[ChangeRequest]:
        raw = self.store.load(self.requests_key)
        if raw is None:
            return []
        try:
            return _requests_adapter.validate_python(raw)
        except ValidationError:
            logger.exception("Stored change requests under %s are unreadable", self.requests_key)
            return []

    def save_requests(self, requests: list[ChangeRequest]) -> None:
        self.store.save(
            self.requests_key,
            _requests_adapter.dump_python(requests, mode="json", by_alias=True),
        )
