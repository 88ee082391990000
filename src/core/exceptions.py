from typing import List, Optional

from fastapi import HTTPException, status

from src.core.response.schemas import ErrorDetail


class ServiceException(HTTPException):
    """Base exception raised by the service layer."""

    error_code = "SERVICE_ERROR"

    def __init__(
        self,
        detail: str = "Service error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_details = error_details or []


class ValidationException(ServiceException):
    """A required field is missing or empty."""

    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        detail: str = "Validation error",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(
            detail=detail,
            status_code=422,
            error_details=error_details,
        )

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationException":
        return cls(
            detail=message,
            error_details=[
                ErrorDetail(field=field, code="REQUIRED", message=message)
            ],
        )


class NotFoundException(ServiceException):
    """The referenced author or post does not exist."""

    error_code = "NOT_FOUND"

    def __init__(self, entity: str, item_id: int, field: str = "id"):
        self.entity = entity
        self.item_id = item_id
        message = f"{entity} with id {item_id} not found"
        super().__init__(
            detail=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_details=[
                ErrorDetail(
                    field=field, code="NOT_FOUND", message=message, target=entity
                )
            ],
        )


class StorageException(ServiceException):
    """Persistence failure not otherwise classified."""

    error_code = "STORAGE_ERROR"
