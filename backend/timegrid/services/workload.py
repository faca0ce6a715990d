from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from timegrid.schemas.department import Assignment, Department, Teacher
from timegrid.schemas.workload import TeacherWorkload, WorkloadAssignmentLine, WorkloadStatus

OVER_UTILIZATION_HOURS = 18
UNDER_UTILIZATION_HOURS = 8
REPORT_UNDER_UTILIZATION_HOURS = 10


@dataclass(frozen=True)
class UtilizationThresholds:
    over_hours: int = OVER_UTILIZATION_HOURS
    under_hours: int = UNDER_UTILIZATION_HOURS


def classify_utilization(
    total_hours: int,
    thresholds: UtilizationThresholds = UtilizationThresholds(),
) -> Literal["over", "under"] | None:
    if total_hours > thresholds.over_hours:
        return "over"
    if 0 < total_hours < thresholds.under_hours:
        return "under"
    return None


def declared_load(teachers: Sequence[Teacher], assignments: Sequence[Assignment]) -> dict[str, int]:
    """Weekly lectures per teacher id, in teacher order, from assignments alone."""
    totals = {teacher.id: 0 for teacher in teachers}
    for assignment in assignments:
        if assignment.teacher_id in totals:
            totals[assignment.teacher_id] += assignment.weekly_lectures
    return totals


def workload_status(
    total_hours: int,
    *,
    over_hours: int = OVER_UTILIZATION_HOURS,
    under_hours: int = REPORT_UNDER_UTILIZATION_HOURS,
) -> WorkloadStatus:
    if total_hours > over_hours:
        return "Over-utilized"
    if total_hours < under_hours:
        return "Under-utilized"
    return "Optimal"


def faculty_workload_report(
    departments: Sequence[Department],
    *,
    over_hours: int = OVER_UTILIZATION_HOURS,
    under_hours: int = REPORT_UNDER_UTILIZATION_HOURS,
) -> list[TeacherWorkload]:
    """Cross-department load keyed by teacher name, heaviest first.

    Teachers are matched by name because ids are only unique within a
    department; an assignment counts only when its teacher and subject both
    resolve inside its own department.
    """
    totals: dict[str, int] = {}
    lines: dict[str, list[WorkloadAssignmentLine]] = {}

    for department in departments:
        teacher_by_id = {teacher.id: teacher for teacher in department.teachers}
        subject_by_id = {subject.id: subject for subject in department.subjects}
        for assignment in department.assignments:
            teacher = teacher_by_id.get(assignment.teacher_id)
            subject = subject_by_id.get(assignment.subject_id)
            if teacher is None or subject is None:
                continue
            totals[teacher.name] = totals.get(teacher.name, 0) + assignment.weekly_lectures
            lines.setdefault(teacher.name, []).append(
                WorkloadAssignmentLine(
                    department_name=department.name,
                    subject_name=subject.name,
                    hours=assignment.weekly_lectures,
                )
            )

    report = [
        TeacherWorkload(
            teacher_name=name,
            total_hours=total,
            department_count=len({line.department_name for line in lines[name]}),
            status=workload_status(total, over_hours=over_hours, under_hours=under_hours),
            assignments=lines[name],
        )
        for name, total in totals.items()
    ]
    report.sort(key=lambda item: item.total_hours, reverse=True)
    return report
