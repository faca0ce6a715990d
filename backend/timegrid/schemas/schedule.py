from __future__ import annotations

from pydantic import BaseModel, Field


class FacultyScheduleEntry(BaseModel):
    subject_code: str = Field(alias="subjectCode")
    subject_name: str = Field(alias="subjectName")
    batch_id: str = Field(alias="batchId")
    batch_name: str = Field(alias="batchName")

    model_config = {"populate_by_name": True}


class BatchScheduleEntry(BaseModel):
    subject_code: str = Field(alias="subjectCode")
    subject_name: str = Field(alias="subjectName")
    teacher_id: str = Field(alias="teacherId")
    teacher_name: str = Field(alias="teacherName")

    model_config = {"populate_by_name": True}


class FacultySchedule(BaseModel):
    department_id: str = Field(alias="departmentId")
    teacher_id: str = Field(alias="teacherId")
    teacher_name: str = Field(alias="teacherName")
    days: list[str]
    time_slots: list[str] = Field(alias="timeSlots")
    schedule: dict[str, list[FacultyScheduleEntry | None]]

    model_config = {"populate_by_name": True}


class BatchSchedule(BaseModel):
    department_id: str = Field(alias="departmentId")
    batch_id: str = Field(alias="batchId")
    batch_name: str = Field(alias="batchName")
    days: list[str]
    time_slots: list[str] = Field(alias="timeSlots")
    schedule: dict[str, list[BatchScheduleEntry | None]]

    model_config = {"populate_by_name": True}
