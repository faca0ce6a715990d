from __future__ import annotations

from collections.abc import Sequence

from timegrid.core.exceptions import ResourceNotFoundError, ScheduleNotPublishedError
from timegrid.schemas.department import Department, TimetableGrid
from timegrid.schemas.schedule import BatchSchedule, BatchScheduleEntry, FacultySchedule, FacultyScheduleEntry


def _published_grid(department: Department) -> TimetableGrid:
    if department.finalized_timetable is None:
        raise ScheduleNotPublishedError(department.id)
    return department.finalized_timetable


def faculty_schedule(department: Department, teacher_id: str) -> FacultySchedule:
    teacher = next((item for item in department.teachers if item.id == teacher_id), None)
    if teacher is None:
        raise ResourceNotFoundError("Teacher", teacher_id)
    grid = _published_grid(department)
    settings = department.settings

    schedule: dict[str, list[FacultyScheduleEntry | None]] = {}
    for day in settings.working_days:
        periods = grid.get(day, [])
        row: list[FacultyScheduleEntry | None] = []
        for period in range(settings.periods_per_day):
            slots = periods[period] if period < len(periods) else []
            entry = None
            for batch_index, slot in enumerate(slots):
                if slot is None or slot.teacher.id != teacher.id:
                    continue
                batch = department.batches[batch_index] if batch_index < len(department.batches) else None
                entry = FacultyScheduleEntry(
                    subject_code=slot.subject.code,
                    subject_name=slot.subject.name,
                    batch_id=batch.id if batch else "",
                    batch_name=batch.name if batch else f"Batch {batch_index + 1}",
                )
                break
            row.append(entry)
        schedule[day] = row

    return FacultySchedule(
        department_id=department.id,
        teacher_id=teacher.id,
        teacher_name=teacher.name,
        days=list(settings.working_days),
        time_slots=list(settings.period_timings),
        schedule=schedule,
    )


def batch_schedule(department: Department, batch_id: str) -> BatchSchedule:
    batch_index = next((index for index, item in enumerate(department.batches) if item.id == batch_id), None)
    if batch_index is None:
        raise ResourceNotFoundError("Batch", batch_id)
    grid = _published_grid(department)
    settings = department.settings

    schedule: dict[str, list[BatchScheduleEntry | None]] = {}
    for day in settings.working_days:
        periods = grid.get(day, [])
        row: list[BatchScheduleEntry | None] = []
        for period in range(settings.periods_per_day):
            slots = periods[period] if period < len(periods) else []
            slot = slots[batch_index] if batch_index < len(slots) else None
            if slot is None:
                row.append(None)
                continue
            row.append(
                BatchScheduleEntry(
                    subject_code=slot.subject.code,
                    subject_name=slot.subject.name,
                    teacher_id=slot.teacher.id,
                    teacher_name=slot.teacher.name,
                )
            )
        schedule[day] = row

    batch = department.batches[batch_index]
    return BatchSchedule(
        department_id=department.id,
        batch_id=batch.id,
        batch_name=batch.name,
        days=list(settings.working_days),
        time_slots=list(settings.period_timings),
        schedule=schedule,
    )


def find_teacher_department(departments: Sequence[Department], teacher_name: str) -> Department | None:
    """First published department listing the teacher by name."""
    for department in departments:
        if department.is_locked and any(teacher.name == teacher_name for teacher in department.teachers):
            return department
    return None
