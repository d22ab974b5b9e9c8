from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the API.
    Keeps the error format returned to the frontend consistent.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


class StudentNotFound(NotFoundException):
    def __init__(self, student_id: int):
        super().__init__(
            message="Student not found",
            details={"student_id": student_id}
        )


class MonthNotFound(NotFoundException):
    """The month does not exist or belongs to another student."""
    def __init__(self, month_id: int, student_id: int):
        super().__init__(
            message="Month not found for student",
            details={"month_id": month_id, "student_id": student_id}
        )


class ClassNotFound(NotFoundException):
    def __init__(self, class_id: int):
        super().__init__(
            message="Class not found",
            details={"class_id": class_id}
        )
