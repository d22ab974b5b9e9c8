# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import BaseAPIException
from app.core.logging import logger


def error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details
            }
        },
    )


# 1. Custom logic errors raised by our own code
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(f"{request.method} {request.url.path}: {exc.message} {exc.details or ''}")
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


# 2. Validation errors (raised by Pydantic when the frontend sends the wrong data)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # Get field name (e.g., "body.class_price" becomes "class_price")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Input validation failed",
        details,
    )


# 3. Standard HTTP errors (404 for an unknown URL, 405, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


# 4. Anything else (bugs, library failures)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please contact support.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
