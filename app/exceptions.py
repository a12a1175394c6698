from typing import Any, Mapping, Optional


class PlanITError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code used in the error envelope
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "ERROR"

    def __init__(self, message: str = "Error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(PlanITError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class NotFoundError(PlanITError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)

    @classmethod
    def for_resource(cls, resource: str, resource_id: Any) -> "NotFoundError":
        return cls(
            f"{resource.capitalize()} with ID {resource_id} not found",
            details={"resource": resource, "id": resource_id},
        )


class UnauthorizedError(PlanITError):
    """Raised when authentication fails or the caller does not own the resource."""

    http_status = 401
    default_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)

    @classmethod
    def for_resource(cls, resource: str, resource_id: Any) -> "UnauthorizedError":
        return cls(
            f"Unauthorized access to {resource} with ID {resource_id}",
            details={"resource": resource, "id": resource_id},
        )


class OperationFailedError(PlanITError):
    """Raised when the persistence layer reports that a create/update/delete did not happen."""

    http_status = 500
    default_code = "OPERATION_FAILED"

    def __init__(self, message: str = "Operation failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)

    @classmethod
    def for_resource(cls, resource: str, resource_id: Any, operation: str) -> "OperationFailedError":
        return cls(
            f"Failed to {operation} {resource} with ID {resource_id}",
            details={"resource": resource, "id": resource_id, "operation": operation},
        )
