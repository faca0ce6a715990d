class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class SchedulerError(AppError):
    """Raised when the scheduler is handed structurally invalid input."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)

class ConfigurationError(AppError):
    """Raised when a department configuration fails the pre-flight check."""
    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message, status_code=400, details={"problems": list(problems or [])})

class ResourceNotFoundError(AppError):
    """Raised when a requested resource is not found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with id {resource_id} not found", status_code=404)

class TimetableLockedError(AppError):
    """Raised when a finalized timetable blocks publishing or scheduling edits."""
    def __init__(self, department_id: str, changed_fields: list[str] | None = None):
        details = {"department_id": department_id}
        if changed_fields:
            details["changed_fields"] = list(changed_fields)
        super().__init__(
            f"Department {department_id} already has a finalized timetable",
            status_code=409,
            details=details,
        )

class ScheduleNotPublishedError(AppError):
    """Raised when a personal schedule is requested before anything is published."""
    def __init__(self, department_id: str):
        super().__init__(
            f"Department {department_id} has no finalized timetable",
            status_code=409,
            details={"department_id": department_id},
        )

class RequestStateError(AppError):
    """Raised on an invalid change-request status transition."""
    def __init__(self, request_id: str, current_status: str, target_status: str):
        super().__init__(
            f"Request {request_id} is {current_status} and cannot become {target_status}",
            status_code=409,
            details={"request_id": request_id, "status": current_status},
        )
