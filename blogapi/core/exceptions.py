"""Service-level exceptions raised by repositories and services."""

from typing import List, Optional

from blogapi.core.response.schemas import ErrorDetail


class ServiceException(Exception):
    """Base exception for service errors."""

    def __init__(self, detail: str, error_details: Optional[List[ErrorDetail]] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_details = error_details or []


class ValidationException(ServiceException):
    """Raised when input data is missing required fields or is inconsistent."""


class NotFoundException(ServiceException):
    """Raised when no item matches the requested id."""