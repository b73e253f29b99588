"""Error hierarchy for the employee management API.

Every error carries a code, a category and the HTTP status the global
handlers answer with. Messages are static and safe to show to clients;
the underlying cause is only logged.
"""
from __future__ import annotations
from enum import Enum


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


class EmployeeManagementError(Exception):
    """Base exception for all employee management errors."""

    def __init__(self, message: str, code: str, category: ErrorCategory, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        return {
            "detail": self.message,
            "code": self.code,
            "category": self.category.value,
        }


class NotFoundError(EmployeeManagementError):
    def __init__(self, message: str = "resource not found"):
        super().__init__(message, code="NOT_FOUND", category=ErrorCategory.RESOURCE_NOT_FOUND, http_status=404)


class BadRequestError(EmployeeManagementError):
    def __init__(self, message: str = "bad request"):
        super().__init__(message, code="BAD_REQUEST", category=ErrorCategory.VALIDATION, http_status=400)


class StorageFaultError(EmployeeManagementError):
    """Raised by repositories when the underlying store fails. Never retried."""

    def __init__(self, message: str = "Error retrieving data from the database"):
        super().__init__(message, code="STORAGE_FAULT", category=ErrorCategory.DATABASE, http_status=500)
