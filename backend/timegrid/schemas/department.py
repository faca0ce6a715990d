from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

DEFAULT_WORKING_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

DEFAULT_PERIOD_TIMINGS = [
    "09:00 - 10:00",
    "10:00 - 11:00",
    "11:00 - 12:00",
    "13:00 - 14:00",
    "14:00 - 15:00",
    "15:00 - 16:00",
    "16:00 - 17:00",
]

DEFAULT_MAX_LECTURES_PER_DAY = 4


class CamelModel(BaseModel):
    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class Teacher(CamelModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=200)


class Subject(CamelModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=50)


class Batch(CamelModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=200)
    subject_ids: list[str] = Field(default_factory=list, alias="subjectIds")


class Assignment(CamelModel):
    # Incomplete assignments are stored as-is and reported by configuration_problems.
    id: str = Field(min_length=1, max_length=64)
    teacher_id: str = Field(default="", alias="teacherId")
    subject_id: str = Field(default="", alias="subjectId")
    weekly_lectures: int = Field(default=1, alias="weeklyLectures")


class Classroom(CamelModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=100)
    capacity: int = Field(default=0, ge=0, le=2000)
    equipment: list[str] = Field(default_factory=list)


class TimetableSettings(CamelModel):
    working_days: list[str] = Field(default_factory=lambda: list(DEFAULT_WORKING_DAYS), alias="workingDays")
    period_timings: list[str] = Field(default_factory=lambda: list(DEFAULT_PERIOD_TIMINGS), alias="periodTimings")
    periods_per_day: int = Field(default=0, ge=0, alias="periodsPerDay")
    max_lectures_per_day: int = Field(default=DEFAULT_MAX_LECTURES_PER_DAY, ge=1, alias="maxLecturesPerDay")

    @model_validator(mode="after")
    def sync_periods_per_day(self) -> "TimetableSettings":
        # The timing labels are authoritative whenever they are present.
        if self.period_timings:
            self.periods_per_day = len(self.period_timings)
        return self


class GeneratedSlot(CamelModel):
    subject: Subject
    teacher: Teacher


TimetableGrid = dict[str, list[list[GeneratedSlot | None]]]


class Department(CamelModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=200)
    teachers: list[Teacher] = Field(default_factory=list)
    subjects: list[Subject] = Field(default_factory=list)
    assignments: list[Assignment] = Field(default_factory=list)
    batches: list[Batch] = Field(default_factory=list)
    classrooms: list[Classroom] = Field(default_factory=list)
    settings: TimetableSettings = Field(default_factory=TimetableSettings)
    finalized_timetable: TimetableGrid | None = Field(default=None, alias="finalizedTimetable")

    @property
    def is_locked(self) -> bool:
        return self.finalized_timetable is not None


class DepartmentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)


class DepartmentUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    teachers: list[Teacher] | None = None
    subjects: list[Subject] | None = None
    assignments: list[Assignment] | None = None
    batches: list[Batch] | None = None
    classrooms: list[Classroom] | None = None
    settings: TimetableSettings | None = None
