import logging
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core import exceptions
from src.core.response.schemas import BaseResponse, ErrorDetail, ErrorResponse, ListResponse

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    body = BaseResponse[Any](success=True, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def list_response(items: List[Any], message: Optional[str] = None) -> JSONResponse:
    body = ListResponse[Any](success=True, message=message, data=items, total=len(items))
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(body))


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[dict]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=[ErrorDetail(**detail) for detail in details or []],
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def service_error_response(exc: exceptions.ServiceException) -> JSONResponse:
    """Render a service-layer exception in the error envelope."""
    return error_response(
        error_code=exc.error_code,
        message=str(exc.detail),
        status_code=exc.status_code,
        details=[detail.model_dump() for detail in exc.error_details],
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(
            {
                "field": ".".join(location),
                "code": str(error.get("type", "invalid")).upper(),
                "message": error.get("msg", "Invalid value"),
            }
        )
    return error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details=details,
    )


async def service_exception_handler(
    request: Request, exc: exceptions.ServiceException
) -> JSONResponse:
    return service_error_response(exc)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
