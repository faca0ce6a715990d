from fastapi import APIRouter, Depends, Query

from timegrid.api.deps import get_repository
from timegrid.core.config import get_settings
from timegrid.core.exceptions import ResourceNotFoundError
from timegrid.db.repository import DepartmentRepository
from timegrid.schemas.schedule import FacultySchedule
from timegrid.schemas.workload import TeacherWorkload
from timegrid.services.schedule_views import faculty_schedule, find_teacher_department
from timegrid.services.workload import faculty_workload_report

router = APIRouter()


@router.get("/workload", response_model=list[TeacherWorkload])
def get_workload_report(repository: DepartmentRepository = Depends(get_repository)) -> list[TeacherWorkload]:
    settings = get_settings()
    return faculty_workload_report(
        repository.list_departments(),
        over_hours=settings.over_utilization_hours,
        under_hours=settings.report_under_utilization_hours,
    )


@router.get("/schedule", response_model=FacultySchedule)
def get_my_schedule(
    teacher_name: str = Query(min_length=1, max_length=200, alias="teacherName"),
    repository: DepartmentRepository = Depends(get_repository),
) -> FacultySchedule:
    department = find_teacher_department(repository.list_departments(), teacher_name)
    if department is None:
        raise ResourceNotFoundError("Published schedule for teacher", teacher_name)
    teacher = next(item for item in department.teachers if item.name == teacher_name)
    return faculty_schedule(department, teacher.id)
