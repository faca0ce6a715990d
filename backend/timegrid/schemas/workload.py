from typing import Literal

from pydantic import BaseModel, Field

WorkloadStatus = Literal["Over-utilized", "Under-utilized", "Optimal"]


class WorkloadAssignmentLine(BaseModel):
    department_name: str = Field(alias="deptName")
    subject_name: str = Field(alias="subjectName")
    hours: int

    model_config = {"populate_by_name": True}


class TeacherWorkload(BaseModel):
    teacher_name: str = Field(alias="teacherName")
    total_hours: int = Field(alias="totalHours")
    department_count: int = Field(alias="departmentCount")
    status: WorkloadStatus
    assignments: list[WorkloadAssignmentLine] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
