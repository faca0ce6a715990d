from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class ChangeRequestType(str, Enum):
    swap = "SWAP"
    reschedule = "RESCHEDULE"
    takeover = "TAKEOVER"
    cancel = "CANCEL"


class ChangeRequestStatus(str, Enum):
    pending = "PENDING"
    approved = "APPROVED"
    rejected = "REJECTED"
    cancelled = "CANCELLED"


class RequestedSlot(BaseModel):
    day: str = Field(min_length=1, max_length=20)
    time: str = Field(min_length=1, max_length=50)
    course: str = Field(min_length=1, max_length=50)


class ChangeRequestCreate(BaseModel):
    requester_name: str = Field(min_length=1, max_length=200, alias="requesterName")
    type: ChangeRequestType = ChangeRequestType.reschedule
    from_slot: RequestedSlot = Field(alias="from")
    to_day: str | None = Field(default=None, max_length=20, alias="toDay")
    to_time: str | None = Field(default=None, max_length=50, alias="toTime")
    swap_with: str | None = Field(default=None, max_length=200, alias="swapWith")
    reason: str = Field(default="", max_length=1000)

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def validate_target(self) -> "ChangeRequestCreate":
        if self.type == ChangeRequestType.reschedule and not (self.to_day and self.to_time):
            raise ValueError("Reschedule requests require toDay and toTime")
        return self


class ChangeRequest(BaseModel):
    id: str
    created_at: datetime = Field(alias="createdAt")
    requester_name: str = Field(alias="requesterName")
    type: ChangeRequestType
    from_slot: RequestedSlot = Field(alias="from")
    to: dict[str, Any] | None = None
    reason: str = ""
    status: ChangeRequestStatus = ChangeRequestStatus.pending

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class ChangeRequestReview(BaseModel):
    status: ChangeRequestStatus

    @field_validator("status")
    @classmethod
    def validate_decision(cls, value: ChangeRequestStatus) -> ChangeRequestStatus:
        if value not in (ChangeRequestStatus.approved, ChangeRequestStatus.rejected):
            raise ValueError("Review status must be APPROVED or REJECTED")
        return value
