"""Employee Manager domain error hierarchy.

All service-layer errors inherit from EmployeeManagerError. The global
exception handler in main.py converts these to structured JSON responses with
the correct HTTP status code and a request_id for traceability.
"""


class EmployeeManagerError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(EmployeeManagerError):
    status_code = 404
    code = "NOT_FOUND"


class InvalidOperationError(EmployeeManagerError):
    """The request would break a sentinel-protection rule (Reserve/Unemployed)."""

    status_code = 400
    code = "INVALID_OPERATION"


class ConflictError(EmployeeManagerError):
    status_code = 409
    code = "CONFLICT"


class ValidationError(EmployeeManagerError):
    status_code = 422
    code = "VALIDATION_ERROR"
