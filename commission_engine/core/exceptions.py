"""Custom application exceptions."""

from typing import Any


class AppException(Exception):
    """Base application exception."""

    def __init__(self, detail: str = "An unexpected error occurred") -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(AppException):
    """Validation error exception."""

    def __init__(self, detail: str = "Validation failed", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(detail)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None, detail: str | None = None) -> None:
        if detail is None:
            detail = f"{resource} not found"
            if identifier:
                detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(detail)


class InvalidAgreementError(AppException):
    """Commission agreement data is internally inconsistent."""

    def __init__(self, detail: str = "Invalid commission agreement") -> None:
        super().__init__(detail)


class InvalidInputError(AppException):
    """Malformed caller input (e.g. a report month token)."""

    def __init__(self, detail: str = "Invalid input") -> None:
        super().__init__(detail)


class InvalidBookingStatus(AppException):
    """Invalid booking status for operation."""

    def __init__(self, detail: str = "This operation is not allowed for the current booking status") -> None:
        super().__init__(detail)


class CommissionAlreadyCalculated(AppException):
    """Booking already carries a commission calculation."""

    def __init__(self, detail: str = "Commission already calculated for this booking") -> None:
        super().__init__(detail)
