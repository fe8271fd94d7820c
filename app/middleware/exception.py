import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.utility.exception import code_for_status
from app.utility.response import error_response

logger = logging.getLogger(__name__)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    code = getattr(exc, "code", None) or code_for_status(exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.status_code, str(exc.detail), code, getattr(exc, "errors", [])),
        headers=getattr(exc, "headers", None)
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", []) if part not in ("body", "query", "path")),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    message = "; ".join(f"{e['field']}: {e['message']}" if e["field"] else e["message"] for e in errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(status.HTTP_400_BAD_REQUEST, message or "Invalid request", "ValidationError", errors)
    )


async def handle_unexpected_exception(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "Internal")
    )


def add_exception_handlers(application):
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(RequestValidationError, handle_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_exception)
