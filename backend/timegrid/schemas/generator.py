from __future__ import annotations

from pydantic import BaseModel, Field

from timegrid.schemas.conflict import Conflict
from timegrid.schemas.department import TimetableGrid


class GenerationStats(BaseModel):
    required_sessions: int = Field(default=0, ge=0, alias="requiredSessions")
    placed_sessions: int = Field(default=0, ge=0, alias="placedSessions")
    unplaced_sessions: int = Field(default=0, ge=0, alias="unplacedSessions")
    unresolved_pairs: int = Field(default=0, ge=0, alias="unresolvedPairs")

    model_config = {"populate_by_name": True}


class UnresolvedPair(BaseModel):
    batch_id: str = Field(alias="batchId")
    batch_name: str = Field(alias="batchName")
    subject_id: str = Field(alias="subjectId")
    reason: str

    model_config = {"populate_by_name": True}


class GenerateTimetableRequest(BaseModel):
    seed: int | None = Field(default=None, ge=0, le=2_000_000_000)


class GenerateTimetableResponse(BaseModel):
    grid: TimetableGrid
    conflicts: list[Conflict] = Field(default_factory=list)
    stats: GenerationStats = Field(default_factory=GenerationStats)
    unresolved: list[UnresolvedPair] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class AnalyzeTimetableRequest(BaseModel):
    grid: TimetableGrid


class AnalyzeTimetableResponse(BaseModel):
    conflicts: list[Conflict] = Field(default_factory=list)


class PublishTimetableRequest(BaseModel):
    grid: TimetableGrid
    replace: bool = False
