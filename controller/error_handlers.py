# controller/error_handlers.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from model.api import ErrorResponse
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        ErrorResponse(error=exc.message).model_dump(), status_code=exc.http_status
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    detail = ErrorMessage.INVALID_BODY.value
    return JSONResponse(
        ErrorResponse(error=detail.message).model_dump(),
        status_code=detail.http_status,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map AppError and malformed bodies to `{"error": ...}` responses."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
