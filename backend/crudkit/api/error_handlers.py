"""Error Handlers — global exception handlers, the outermost request boundary.

Invariants:
    - CrudKitError → {"error": message} with the error's http_status
    - RecordInvalidError → the record's field errors as one sentence (400)
    - PresenterNotFoundError → 500, logged at critical: a configuration error
    - RequestValidationError → 400 with a readable message
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Record-level and statement-level failures are converted here once, so
      action templates need no per-call try/except
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from crudkit.core.errors import (
    CrudKitError, ErrorSeverity, PresenterNotFoundError, RecordInvalidError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_crudkit_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_crudkit_error_handler(app: FastAPI) -> None:
    """Register crudkit domain/infrastructure error handler."""

    @app.exception_handler(CrudKitError)
    async def crudkit_error_handler(request: Request, exc: CrudKitError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "resource": exc.context.resource,
            "record_id": exc.context.record_id,
            "operation": exc.context.operation,
        }
        if isinstance(exc, PresenterNotFoundError):
            logger.critical(f"Configuration error: {exc.message}", extra=extra)
        elif exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            logger.error(f"CrudKitError: {exc.message}", extra=extra)
        else:
            logger.info(f"CrudKitError: {exc.message}", extra=extra)

        if isinstance(exc, RecordInvalidError):
            content = {"error": exc.record.errors.to_sentence()}
        else:
            content = exc.to_response()
        return JSONResponse(status_code=exc.http_status, content=content)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_sentence(exc)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def _validation_sentence(exc: RequestValidationError) -> str:
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    return "; ".join(parts) or "Invalid request data"
