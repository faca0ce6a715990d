from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
import logging
import uuid

from timegrid.core.exceptions import RequestStateError, ResourceNotFoundError
from timegrid.schemas.change_request import (
    ChangeRequest,
    ChangeRequestCreate,
    ChangeRequestStatus,
    ChangeRequestType,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_request(
    payload: ChangeRequestCreate,
    *,
    now: Callable[[], datetime] = _utcnow,
    new_id: Callable[[], str] = lambda: str(uuid.uuid4()),
) -> ChangeRequest:
    if payload.type == ChangeRequestType.reschedule:
        target = {"day": payload.to_day, "time": payload.to_time}
    elif payload.type == ChangeRequestType.swap:
        target = {"note": payload.swap_with or ""}
    else:
        target = None
    return ChangeRequest(
        id=new_id(),
        created_at=now(),
        requester_name=payload.requester_name,
        type=payload.type,
        from_slot=payload.from_slot,
        to=target,
        reason=payload.reason,
        status=ChangeRequestStatus.pending,
    )


def submit(requests: Sequence[ChangeRequest], payload: ChangeRequestCreate) -> tuple[ChangeRequest, list[ChangeRequest]]:
    """Newest requests come first."""
    created = build_request(payload)
    logger.info("Change request %s (%s) submitted by %s", created.id, created.type.value, created.requester_name)
    return created, [created, *requests]


def list_for_requester(
    requests: Sequence[ChangeRequest],
    requester_name: str | None = None,
    status: ChangeRequestStatus | None = None,
) -> list[ChangeRequest]:
    visible = list(requests)
    if requester_name is not None:
        visible = [item for item in visible if item.requester_name == requester_name]
    if status is not None:
        visible = [item for item in visible if item.status == status]
    return visible


def _transition(
    requests: Sequence[ChangeRequest],
    request_id: str,
    target: ChangeRequestStatus,
) -> tuple[ChangeRequest, list[ChangeRequest]]:
    updated: list[ChangeRequest] = []
    changed: ChangeRequest | None = None
    for item in requests:
        if item.id != request_id:
            updated.append(item)
            continue
        if item.status != ChangeRequestStatus.pending:
            raise RequestStateError(item.id, item.status.value, target.value)
        changed = item.model_copy(update={"status": target})
        updated.append(changed)
    if changed is None:
        raise ResourceNotFoundError("Change request", request_id)
    logger.info("Change request %s is now %s", request_id, target.value)
    return changed, updated


def cancel(requests: Sequence[ChangeRequest], request_id: str) -> tuple[ChangeRequest, list[ChangeRequest]]:
    return _transition(requests, request_id, ChangeRequestStatus.cancelled)


def review(
    requests: Sequence[ChangeRequest],
    request_id: str,
    decision: ChangeRequestStatus,
) -> tuple[ChangeRequest, list[ChangeRequest]]:
    return _transition(requests, request_id, decision)
