"""Exception handlers that render every failure as an error envelope."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from knowledge.models import EntryNotFoundError, KnowledgeError, ValidationFailedError

logger = structlog.get_logger()

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.info(
        "request.http_error",
        status=exc.status_code,
        detail=str(exc.detail),
        path=request.url.path,
        method=request.method,
    )
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe_validation_errors(exc)
    logger.info("request.invalid", error=message, path=request.url.path, method=request.method)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def knowledge_exception_handler(request: Request, exc: KnowledgeError) -> JSONResponse:
    if isinstance(exc, EntryNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ValidationFailedError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= 500:
        logger.error("request.knowledge_error", error=str(exc), path=request.url.path, exc_info=exc)
        return error_response(status_code, INTERNAL_ERROR_MESSAGE)

    logger.info("request.client_error", status=status_code, error=str(exc), path=request.url.path)
    return error_response(status_code, str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.unhandled_error",
        error=str(exc),
        exception_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(KnowledgeError, knowledge_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
