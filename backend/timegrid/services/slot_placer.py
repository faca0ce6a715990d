from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
import random

from timegrid.core.exceptions import SchedulerError
from timegrid.schemas.conflict import Conflict, ConflictLevel, ConflictType
from timegrid.schemas.department import GeneratedSlot, TimetableGrid, TimetableSettings
from timegrid.services.demand import RequiredSession

logger = logging.getLogger(__name__)


@dataclass
class Placement:
    grid: TimetableGrid
    conflicts: list[Conflict] = field(default_factory=list)
    placed: int = 0


def empty_grid(settings: TimetableSettings, batch_count: int) -> TimetableGrid:
    if not settings.working_days:
        raise SchedulerError(message="No working days configured for timetable generation")
    if settings.periods_per_day < 1:
        raise SchedulerError(message="At least one period per day is required for timetable generation")
    return {
        day: [[None] * batch_count for _ in range(settings.periods_per_day)]
        for day in settings.working_days
    }


def unplaced_conflict(session: RequiredSession) -> Conflict:
    return Conflict(
        type=ConflictType.unplaced_class,
        description=f"Could not schedule {session.subject.code} for {session.batch.name}",
        level=ConflictLevel.error,
    )


def place_sessions(
    sessions: Sequence[RequiredSession],
    settings: TimetableSettings,
    batch_count: int,
    rng: random.Random | None = None,
) -> Placement:
    """Greedy first-fit placement over a shuffled demand list.

    Each session lands in the earliest (day, period) where its batch cell is
    free and its teacher is not booked for any other batch. Sessions with no
    such cell become ``Unplaced Class`` conflicts; nothing is retried or
    moved to make room.
    """
    grid = empty_grid(settings, batch_count)
    rng = rng or random.Random()

    ordered = list(sessions)
    rng.shuffle(ordered)

    teacher_busy: set[tuple[str, str, int]] = set()
    placement = Placement(grid=grid)

    for session in ordered:
        slot = _first_open_slot(grid, settings, session, teacher_busy)
        if slot is None:
            placement.conflicts.append(unplaced_conflict(session))
            continue
        day, period = slot
        grid[day][period][session.batch_index] = GeneratedSlot(subject=session.subject, teacher=session.teacher)
        teacher_busy.add((session.teacher.id, day, period))
        placement.placed += 1

    logger.debug(
        "Placed %d of %d sessions across %d day(s) x %d period(s)",
        placement.placed,
        len(ordered),
        len(settings.working_days),
        settings.periods_per_day,
    )
    return placement


def _first_open_slot(
    grid: TimetableGrid,
    settings: TimetableSettings,
    session: RequiredSession,
    teacher_busy: set[tuple[str, str, int]],
) -> tuple[str, int] | None:
    for day in settings.working_days:
        for period in range(settings.periods_per_day):
            if grid[day][period][session.batch_index] is not None:
                continue
            if (session.teacher.id, day, period) in teacher_busy:
                continue
            return day, period
    return None
