from __future__ import annotations

from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass, field
import logging
from time import perf_counter
import random

from timegrid.core.exceptions import SchedulerError, TimetableLockedError
from timegrid.schemas.conflict import Conflict
from timegrid.schemas.department import (
    Assignment,
    Batch,
    Department,
    Subject,
    Teacher,
    TimetableGrid,
    TimetableSettings,
)
from timegrid.schemas.generator import GenerationStats
from timegrid.services.conflict_analyzer import analyze_conflicts
from timegrid.services.demand import UnresolvedDemand, expand_demand
from timegrid.services.slot_placer import place_sessions
from timegrid.services.workload import UtilizationThresholds

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    grid: TimetableGrid
    conflicts: list[Conflict]
    stats: GenerationStats
    unresolved: list[UnresolvedDemand] = field(default_factory=list)


def configuration_problems(
    assignments: Sequence[Assignment],
    batches: Sequence[Batch],
    settings: TimetableSettings,
) -> list[str]:
    problems: list[str] = []
    for assignment in assignments:
        if not assignment.teacher_id:
            problems.append(f"Assignment {assignment.id} has no teacher")
        if not assignment.subject_id:
            problems.append(f"Assignment {assignment.id} has no subject")
        if assignment.weekly_lectures <= 0:
            problems.append(f"Assignment {assignment.id} must have at least one weekly lecture")
    if not batches:
        problems.append("At least one batch is required")
    for batch in batches:
        if not batch.subject_ids:
            problems.append(f"Batch {batch.name} has no subjects")
    if not settings.working_days:
        problems.append("At least one working day is required")
    elif len(set(settings.working_days)) != len(settings.working_days):
        problems.append("Working days must not repeat")
    if settings.periods_per_day < 1:
        problems.append("At least one period per day is required")
    return problems


def is_configuration_valid(
    assignments: Sequence[Assignment],
    batches: Sequence[Batch],
    settings: TimetableSettings,
) -> bool:
    return not configuration_problems(assignments, batches, settings)


def generate_timetable(
    teachers: Sequence[Teacher],
    subjects: Sequence[Subject],
    batches: Sequence[Batch],
    assignments: Sequence[Assignment],
    settings: TimetableSettings,
    rng: random.Random | None = None,
    thresholds: UtilizationThresholds = UtilizationThresholds(),
) -> GenerationResult:
    """Expand demand, place it greedily and analyze the outcome.

    Callers are expected to run ``configuration_problems`` first; only
    settings that make the grid itself impossible raise here.
    """
    started = perf_counter()
    expansion = expand_demand(batches, subjects, assignments, teachers)
    placement = place_sessions(expansion.sessions, settings, len(batches), rng=rng)
    conflicts = analyze_conflicts(
        placement.grid,
        teachers,
        assignments,
        settings,
        unplaced=placement.conflicts,
        thresholds=thresholds,
    )
    stats = GenerationStats(
        required_sessions=expansion.total,
        placed_sessions=placement.placed,
        unplaced_sessions=len(placement.conflicts),
        unresolved_pairs=len(expansion.unresolved),
    )
    logger.info(
        "Generated timetable: %d/%d sessions placed, %d conflict(s), %d unresolved pair(s) in %.3fs",
        stats.placed_sessions,
        stats.required_sessions,
        len(conflicts),
        stats.unresolved_pairs,
        perf_counter() - started,
    )
    return GenerationResult(
        grid=placement.grid,
        conflicts=conflicts,
        stats=stats,
        unresolved=expansion.unresolved,
    )


def generate_for_department(
    department: Department,
    rng: random.Random | None = None,
    thresholds: UtilizationThresholds = UtilizationThresholds(),
) -> GenerationResult:
    return generate_timetable(
        department.teachers,
        department.subjects,
        department.batches,
        department.assignments,
        department.settings,
        rng=rng,
        thresholds=thresholds,
    )


def grid_shape_problems(grid: TimetableGrid, settings: TimetableSettings, batch_count: int) -> list[str]:
    problems: list[str] = []
    expected_days = set(settings.working_days)
    missing = [day for day in settings.working_days if day not in grid]
    extra = sorted(day for day in grid if day not in expected_days)
    if missing:
        problems.append(f"Grid is missing day(s): {', '.join(missing)}")
    if extra:
        problems.append(f"Grid has unknown day(s): {', '.join(extra)}")
    for day in settings.working_days:
        periods = grid.get(day)
        if periods is None:
            continue
        if len(periods) != settings.periods_per_day:
            problems.append(f"{day} has {len(periods)} period(s), expected {settings.periods_per_day}")
            continue
        for index, row in enumerate(periods):
            if len(row) != batch_count:
                problems.append(f"{day} period {index + 1} has {len(row)} batch slot(s), expected {batch_count}")
    return problems


def count_placed_sessions(grid: TimetableGrid) -> int:
    return sum(1 for periods in grid.values() for row in periods for slot in row if slot is not None)


def publish_timetable(department: Department, grid: TimetableGrid, *, replace: bool = False) -> Department:
    if department.is_locked and not replace:
        raise TimetableLockedError(department.id)
    problems = grid_shape_problems(grid, department.settings, len(department.batches))
    if problems:
        raise SchedulerError(
            message="Timetable grid does not match the department configuration",
            details={"problems": problems},
        )
    logger.info(
        "Publishing timetable for department %s (%d placed session(s))",
        department.id,
        count_placed_sessions(grid),
    )
    return department.model_copy(update={"finalized_timetable": deepcopy(grid)}, deep=True)


def ensure_scheduling_inputs_unchanged(department: Department, updated: Department) -> None:
    """A finalized grid is indexed by the batch order and settings it was published with."""
    if not department.is_locked:
        return
    changed = [
        name
        for name in ("batches", "settings")
        if getattr(department, name) != getattr(updated, name)
    ]
    if changed:
        raise TimetableLockedError(department.id, changed_fields=changed)


def unlock_timetable(department: Department) -> Department:
    if department.is_locked:
        logger.info("Unlocking finalized timetable for department %s", department.id)
    return department.model_copy(update={"finalized_timetable": None}, deep=True)
