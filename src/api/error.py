"""API error mapping

Use cases return `Error` values; routes raise `ClientError` and the handlers
registered here render them as `{"message": ..., "code": ...}`.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from libs.result import Error

logger = logging.getLogger(__name__)

BAD_REQUEST_CODES = {"VALIDATION_ERROR", "INVALID_ID", "ACCOUNT_ID_REQUIRED"}


def status_for(code: str) -> int:
    """Map an error code to its HTTP status"""
    if code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if code in BAD_REQUEST_CODES:
        return status.HTTP_400_BAD_REQUEST
    if code == "UNAUTHENTICATED":
        return status.HTTP_401_UNAUTHORIZED
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ClientError(Exception):
    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error.code)


def validate_id(value: str, name: str = "id") -> str:
    """Reject path ids that are not UUIDs"""
    try:
        return str(uuid.UUID(value))
    except (ValueError, TypeError, AttributeError):
        raise ClientError(
            Error(code="INVALID_ID", message=f"Invalid {name}: {value}", reason="Expected a UUID")
        )


async def client_error_handler(request: Request, exc: ClientError):
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.error.code} {exc.error.message} ({exc.error.reason})"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.error.message, "code": exc.error.code},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(f"Validation error for {request.url.path}: {errors}")
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:]) or 'request'}: {err.get('msg')}"
        for err in errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": details or "Invalid request", "code": "VALIDATION_ERROR"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
