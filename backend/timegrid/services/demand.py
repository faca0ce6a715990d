from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging

from timegrid.schemas.department import Assignment, Batch, Subject, Teacher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequiredSession:
    batch: Batch
    batch_index: int
    subject: Subject
    teacher: Teacher


@dataclass(frozen=True)
class UnresolvedDemand:
    batch: Batch
    subject_id: str
    reason: str


@dataclass
class DemandExpansion:
    sessions: list[RequiredSession] = field(default_factory=list)
    unresolved: list[UnresolvedDemand] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.sessions)


def _first_assignment_by_subject(assignments: Sequence[Assignment]) -> dict[str, Assignment]:
    by_subject: dict[str, Assignment] = {}
    for assignment in assignments:
        if assignment.subject_id in by_subject:
            logger.debug(
                "Ignoring assignment %s: subject %s is already taught under assignment %s",
                assignment.id,
                assignment.subject_id,
                by_subject[assignment.subject_id].id,
            )
            continue
        by_subject[assignment.subject_id] = assignment
    return by_subject


def expand_demand(
    batches: Sequence[Batch],
    subjects: Sequence[Subject],
    assignments: Sequence[Assignment],
    teachers: Sequence[Teacher],
) -> DemandExpansion:
    """Expand every batch's subject list into one record per weekly session.

    Only the first assignment for a subject is consulted. A batch/subject pair
    whose subject, assignment or teacher cannot be resolved yields no sessions
    and no conflict; it is only reported in ``unresolved``.
    """
    subject_by_id = {subject.id: subject for subject in subjects}
    teacher_by_id = {teacher.id: teacher for teacher in teachers}
    assignment_by_subject = _first_assignment_by_subject(assignments)

    expansion = DemandExpansion()
    for batch_index, batch in enumerate(batches):
        for subject_id in batch.subject_ids:
            subject = subject_by_id.get(subject_id)
            assignment = assignment_by_subject.get(subject_id)
            teacher = teacher_by_id.get(assignment.teacher_id) if assignment else None

            if subject is None:
                reason = "unknown subject"
            elif assignment is None:
                reason = "no assignment"
            elif teacher is None:
                reason = f"unknown teacher {assignment.teacher_id!r}"
            else:
                reason = ""

            if reason:
                expansion.unresolved.append(UnresolvedDemand(batch=batch, subject_id=subject_id, reason=reason))
                logger.warning("Skipping subject %s for batch %s: %s", subject_id, batch.name, reason)
                continue

            for _ in range(max(0, assignment.weekly_lectures)):
                expansion.sessions.append(
                    RequiredSession(batch=batch, batch_index=batch_index, subject=subject, teacher=teacher)
                )
    return expansion
