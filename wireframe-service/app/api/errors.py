"""
Fatal error to HTTP error descriptor mapping.

Every descriptor has the shape ``{success: false, error, code, timestamp}``.
Validation failures of a generated document are not errors and never reach
these handlers.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.llm.base import GenerationError, GenerationTimeoutError
from app.services.generation.response_parser import UnparsableJsonError
from app.utils.datetime_utils import to_iso_string
from app.utils.logging import get_logger

logger = get_logger(__name__)


def error_descriptor(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "code": code,
            "timestamp": to_iso_string(),
        },
    )


async def generation_timeout_handler(request: Request, exc: GenerationTimeoutError) -> JSONResponse:
    logger.error(
        "http.generation.timeout",
        extra={"path": request.url.path, "provider": exc.provider},
    )
    return error_descriptor(504, "TIMEOUT", str(exc))


async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    logger.error(
        "http.generation.failed",
        extra={"path": request.url.path, "provider": exc.provider, "status_code": exc.status_code},
    )
    return error_descriptor(502, "API_ERROR", str(exc))


async def unparsable_json_handler(request: Request, exc: UnparsableJsonError) -> JSONResponse:
    logger.error(
        "http.generation.invalid_json",
        extra={"path": request.url.path, "sample": exc.snippet},
    )
    return error_descriptor(422, "INVALID_JSON", str(exc))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "app.exception.unhandled",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=exc
    )
    return error_descriptor(500, "INTERNAL_ERROR", "An unexpected error occurred. Please try again later.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GenerationTimeoutError, generation_timeout_handler)
    app.add_exception_handler(GenerationError, generation_error_handler)
    app.add_exception_handler(UnparsableJsonError, unparsable_json_handler)
    app.add_exception_handler(Exception, global_exception_handler)
