from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class UserNotFound(NotFound):
    code = "user_not_found"


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class InvalidMembershipType(ValidationError):
    code = "invalid_membership_type"


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class OperationFailed(AppError):
    """Persistence failure with no more specific cause.

    Raised with ``from exc`` so the original error stays on ``__cause__``.
    """

    code = "operation_failed"
    status_code = 500


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500
