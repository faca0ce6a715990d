from fastapi import APIRouter, Depends, Query, status

from timegrid.api.deps import get_repository
from timegrid.db.repository import DepartmentRepository
from timegrid.schemas.change_request import (
    ChangeRequest,
    ChangeRequestCreate,
    ChangeRequestReview,
    ChangeRequestStatus,
)
from timegrid.services import change_requests

router = APIRouter()


@router.get("/", response_model=list[ChangeRequest])
def list_requests(
    requester: str | None = Query(default=None, max_length=200),
    request_status: ChangeRequestStatus | None = Query(default=None, alias="status"),
    repository: DepartmentRepository = Depends(get_repository),
) -> list[ChangeRequest]:
    return change_requests.list_for_requester(repository.list_requests(), requester, request_status)


@router.post("/", response_model=ChangeRequest, status_code=status.HTTP_201_CREATED)
def submit_request(
    payload: ChangeRequestCreate,
    repository: DepartmentRepository = Depends(get_repository),
) -> ChangeRequest:
    created, updated = change_requests.submit(repository.list_requests(), payload)
    repository.save_requests(updated)
    return created


@router.post("/{request_id}/cancel", response_model=ChangeRequest)
def cancel_request(
    request_id: str,
    repository: DepartmentRepository = Depends(get_repository),
) -> ChangeRequest:
    changed, updated = change_requests.cancel(repository.list_requests(), request_id)
    repository.save_requests(updated)
    return changed


@router.post("/{request_id}/review", response_model=ChangeRequest)
def review_request(
    request_id: str,
    payload: ChangeRequestReview,
    repository: DepartmentRepository = Depends(get_repository),
) -> ChangeRequest:
    changed, updated = change_requests.review(repository.list_requests(), request_id, payload.status)
    repository.save_requests(updated)
    return changed
