from enum import Enum

from pydantic import BaseModel


class ConflictType(str, Enum):
    unplaced_class = "Unplaced Class"
    # Reserved: the placer never double-books a teacher.
    teacher_clash = "Teacher Clash"
    utilization = "Utilization"
    excessive_daily_load = "Excessive Daily Load"


class ConflictLevel(str, Enum):
    error = "error"
    warning = "warning"


class Conflict(BaseModel):
    type: ConflictType
    description: str
    level: ConflictLevel
