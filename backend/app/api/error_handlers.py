"""Error Handlers: global exception handlers producing the uniform envelope.

Invariants:
    - AccountServiceError → its own envelope and status
    - RequestValidationError → 400; contract-rule messages passed through verbatim
    - Unmatched route (404) or unmatched method (405) → 404 "Route not found"
    - Exception (catch-all) → 500, never leaks internal details
    - Every body carries success=false and a message

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - 405 folded into 404: a method the path does not serve is an unmatched route
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.middleware import INTERNAL_ERROR_BODY
from app.core.errors import AccountServiceError
from app.schemas import REQUEST_CONTRACT_ERROR

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AccountServiceError)
    async def service_error_handler(request: Request, exc: AccountServiceError):
        """Handle all domain and store errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request validation errors with the 400 envelope."""
        logger.info(
            f"Validation error on {request.url.path}",
            extra={"path": request.url.path, "error_code": "INVALID_INPUT"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Routing misses become the 404 envelope; other HTTP errors keep their status."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "success": False,
                    "message": "Route not found",
                    "code": "ROUTE_NOT_FOUND",
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "message": str(exc.detail),
                "code": "HTTP_ERROR",
            },
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Last resort for errors raised outside UnhandledErrorMiddleware; never leaks internals."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )


def build_validation_error_response(errors: list[dict]) -> dict:
    """Build the 400 envelope; the first contract-rule message wins."""
    message = next(
        (e["msg"] for e in errors if e.get("type") == REQUEST_CONTRACT_ERROR),
        INVALID_REQUEST_MESSAGE,
    )
    return {
        "success": False,
        "message": message,
        "code": "INVALID_INPUT",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e.get("loc", ())),
                "message": e.get("msg", ""),
                "type": e.get("type", ""),
            }
            for e in errors
        ],
    }
