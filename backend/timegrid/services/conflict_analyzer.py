from __future__ import annotations

from collections.abc import Iterable, Sequence

from timegrid.schemas.conflict import Conflict, ConflictLevel, ConflictType
from timegrid.schemas.department import Assignment, Teacher, TimetableGrid, TimetableSettings
from timegrid.services.workload import UtilizationThresholds, classify_utilization, declared_load


def _teachers_by_id(teachers: Sequence[Teacher]) -> dict[str, Teacher]:
    """First teacher per id, in list order."""
    by_id: dict[str, Teacher] = {}
    for teacher in teachers:
        by_id.setdefault(teacher.id, teacher)
    return by_id


def utilization_conflicts(
    teachers: Sequence[Teacher],
    assignments: Sequence[Assignment],
    thresholds: UtilizationThresholds = UtilizationThresholds(),
) -> list[Conflict]:
    conflicts: list[Conflict] = []
    teacher_by_id = _teachers_by_id(teachers)
    for teacher_id, total in declared_load(teachers, assignments).items():
        name = teacher_by_id[teacher_id].name
        verdict = classify_utilization(total, thresholds)
        if verdict == "over":
            description = f"{name} is over-utilized with {total} weekly lectures."
        elif verdict == "under":
            description = f"{name} may be under-utilized with only {total} weekly lectures."
        else:
            continue
        conflicts.append(
            Conflict(type=ConflictType.utilization, description=description, level=ConflictLevel.warning)
        )
    return conflicts


def daily_load(grid: TimetableGrid, working_days: Sequence[str]) -> dict[str, dict[str, int]]:
    """Placed sessions per teacher id per day, counted over every period and batch."""
    counts: dict[str, dict[str, int]] = {}
    for day in dict.fromkeys(working_days):
        for period_slots in grid.get(day, []):
            for slot in period_slots:
                if slot is None:
                    continue
                per_day = counts.setdefault(slot.teacher.id, {})
                per_day[day] = per_day.get(day, 0) + 1
    return counts


def daily_load_conflicts(
    grid: TimetableGrid,
    teachers: Sequence[Teacher],
    settings: TimetableSettings,
) -> list[Conflict]:
    conflicts: list[Conflict] = []
    counts = daily_load(grid, settings.working_days)
    limit = settings.max_lectures_per_day
    for teacher in _teachers_by_id(teachers).values():
        per_day = counts.get(teacher.id, {})
        for day in dict.fromkeys(settings.working_days):
            count = per_day.get(day, 0)
            if count > limit:
                conflicts.append(
                    Conflict(
                        type=ConflictType.excessive_daily_load,
                        description=(
                            f"{teacher.name} has {count} lectures on {day}, exceeding the limit of {limit}."
                        ),
                        level=ConflictLevel.error,
                    )
                )
    return conflicts


def analyze_conflicts(
    grid: TimetableGrid,
    teachers: Sequence[Teacher],
    assignments: Sequence[Assignment],
    settings: TimetableSettings,
    unplaced: Iterable[Conflict] = (),
    thresholds: UtilizationThresholds = UtilizationThresholds(),
) -> list[Conflict]:
    """Combined report: unplaced classes, then utilization, then daily load."""
    conflicts = list(unplaced)
    conflicts.extend(utilization_conflicts(teachers, assignments, thresholds))
    conflicts.extend(daily_load_conflicts(grid, teachers, settings))
    return conflicts
