from __future__ import annotations

import random

from fastapi import APIRouter, Depends, Response, status

from timegrid.api.deps import get_repository
from timegrid.core.config import get_settings
from timegrid.core.exceptions import ConfigurationError
from timegrid.db.repository import DepartmentRepository
from timegrid.schemas.department import Department, DepartmentCreate, DepartmentUpdate
from timegrid.schemas.generator import (
    AnalyzeTimetableRequest,
    AnalyzeTimetableResponse,
    GenerateTimetableRequest,
    GenerateTimetableResponse,
    PublishTimetableRequest,
    UnresolvedPair,
)
from timegrid.schemas.schedule import BatchSchedule, FacultySchedule
from timegrid.services.conflict_analyzer import analyze_conflicts
from timegrid.services.generator import (
    configuration_problems,
    ensure_scheduling_inputs_unchanged,
    generate_for_department,
    publish_timetable,
    unlock_timetable,
)
from timegrid.services.schedule_views import batch_schedule, faculty_schedule
from timegrid.services.workload import UtilizationThresholds

router = APIRouter()


def _analyzer_thresholds() -> UtilizationThresholds:
    settings = get_settings()
    return UtilizationThresholds(
        over_hours=settings.over_utilization_hours,
        under_hours=settings.under_utilization_hours,
    )


@router.get("/", response_model=list[Department])
def list_departments(repository: DepartmentRepository = Depends(get_repository)) -> list[Department]:
    return repository.list_departments()


@router.post("/", response_model=Department, status_code=status.HTTP_201_CREATED)
def create_department(
    payload: DepartmentCreate,
    repository: DepartmentRepository = Depends(get_repository),
) -> Department:
    return repository.create_department(payload.name.strip())


@router.post("/reset", response_model=list[Department])
def reset_departments(repository: DepartmentRepository = Depends(get_repository)) -> list[Department]:
    return repository.reset()


@router.get("/{department_id}", response_model=Department)
def get_department(
    department_id: str,
    repository: DepartmentRepository = Depends(get_repository),
) -> Department:
    return repository.get_department(department_id)


@router.put("/{department_id}", response_model=Department)
def update_department(
    department_id: str,
    payload: DepartmentUpdate,
    repository: DepartmentRepository = Depends(get_repository),
) -> Department:
    department = repository.get_department(department_id)
    merged = department.model_dump()
    merged.update(payload.model_dump(exclude_unset=True, exclude_none=True))
    merged["id"] = department.id
    updated = Department.model_validate(merged)
    ensure_scheduling_inputs_unchanged(department, updated)
    return repository.save_department(updated)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(
    department_id: str,
    repository: DepartmentRepository = Depends(get_repository),
) -> Response:
    repository.delete_department(department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{department_id}/generate", response_model=GenerateTimetableResponse)
def generate_department_timetable(
    department_id: str,
    payload: GenerateTimetableRequest | None = None,
    repository: DepartmentRepository = Depends(get_repository),
) -> GenerateTimetableResponse:
    department = repository.get_department(department_id)
    problems = configuration_problems(department.assignments, department.batches, department.settings)
    if problems:
        raise ConfigurationError("Department configuration is incomplete", problems)

    seed = payload.seed if payload is not None and payload.seed is not None else get_settings().default_random_seed
    result = generate_for_department(department, rng=random.Random(seed), thresholds=_analyzer_thresholds())
    return GenerateTimetableResponse(
        grid=result.grid,
        conflicts=result.conflicts,
        stats=result.stats,
        unresolved=[
            UnresolvedPair(
                batch_id=item.batch.id,
                batch_name=item.batch.name,
                subject_id=item.subject_id,
                reason=item.reason,
            )
            for item in result.unresolved
        ],
    )


@router.post("/{department_id}/analyze", response_model=AnalyzeTimetableResponse)
def analyze_department_timetable(
    department_id: str,
    payload: AnalyzeTimetableRequest,
    repository: DepartmentRepository = Depends(get_repository),
) -> AnalyzeTimetableResponse:
    department = repository.get_department(department_id)
    conflicts = analyze_conflicts(
        payload.grid,
        department.teachers,
        department.assignments,
        department.settings,
        thresholds=_analyzer_thresholds(),
    )
    return AnalyzeTimetableResponse(conflicts=conflicts)


@router.post("/{department_id}/publish", response_model=Department)
def publish_department_timetable(
    department_id: str,
    payload: PublishTimetableRequest,
    repository: DepartmentRepository = Depends(get_repository),
) -> Department:
    department = repository.get_department(department_id)
    published = publish_timetable(department, payload.grid, replace=payload.replace)
    return repository.save_department(published)


@router.delete("/{department_id}/finalized", response_model=Department)
def unlock_department_timetable(
    department_id: str,
    repository: DepartmentRepository = Depends(get_repository),
) -> Department:
    department = repository.get_department(department_id)
    return repository.save_department(unlock_timetable(department))


@router.get("/{department_id}/faculty/{teacher_id}/schedule", response_model=FacultySchedule)
def get_faculty_schedule(
    department_id: str,
    teacher_id: str,
    repository: DepartmentRepository = Depends(get_repository),
) -> FacultySchedule:
    return faculty_schedule(repository.get_department(department_id), teacher_id)


@router.get("/{department_id}/batches/{batch_id}/schedule", response_model=BatchSchedule)
def get_batch_schedule(
    department_id: str,
    batch_id: str,
    repository: DepartmentRepository = Depends(get_repository),
) -> BatchSchedule:
    return batch_schedule(repository.get_department(department_id), batch_id)
