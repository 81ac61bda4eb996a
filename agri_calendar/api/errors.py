"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module est la frontière unique où les types d'erreurs métier (`ErrorKind`)
sont traduits en codes HTTP et en enveloppe `{status: false, message, errors?}`.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from agri_calendar.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
    HTTP_UNAUTHORIZED,
)
from agri_calendar.domain.results import ErrorKind, Outcome
from agri_calendar.services.auth import INVALID_TOKEN

log = structlog.get_logger(__name__)

T = TypeVar("T")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: HTTP_BAD_REQUEST,
    ErrorKind.AUTH: HTTP_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: HTTP_NOT_FOUND,
    ErrorKind.CONSTRAINT: HTTP_BAD_REQUEST,
    ErrorKind.UNKNOWN: HTTP_INTERNAL_SERVER_ERROR,
}


class APIError(HTTPException):
    """Erreur API étiquetée par un `ErrorKind`."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        errors: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(status_code=STATUS_BY_KIND[kind], detail=message)
        self.kind = kind
        self.message = message
        self.errors = errors


def not_found(message: str) -> APIError:
    return APIError(ErrorKind.NOT_FOUND, message)


def unauthorized(message: str = INVALID_TOKEN) -> APIError:
    return APIError(ErrorKind.AUTH, message)


def bad_request(message: str, errors: dict[str, Any] | None = None) -> APIError:
    return APIError(ErrorKind.VALIDATION, message, errors)


def unwrap(outcome: Outcome[T]) -> T:
    """Retourne la valeur d'un `Outcome` ou lève l'`APIError` correspondante."""
    if outcome.ok:
        return outcome.value
    raise APIError(outcome.error, outcome.message, outcome.details)


def create_error_response(
    status_code: int, message: str, errors: dict[str, Any] | None = None
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": False,
            "message": message,
            **({"errors": errors} if errors else {}),
        },
    )


def _field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Regroupe les erreurs Pydantic par champ (sans le préfixe body/query/path)."""
    fields: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        key = ".".join(loc) or "body"
        fields.setdefault(key, []).append(err.get("msg", "Invalid value"))
    return fields


def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions with standard envelope."""
    log.info(
        "api_error",
        kind=exc.kind.value,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return create_error_response(exc.status_code, exc.message, exc.errors)


def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Validation Pydantic → 400 avec le détail par champ."""
    return create_error_response(HTTP_BAD_REQUEST, "Validation failed", _field_errors(exc))


def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle Starlette/FastAPI HTTPException with standard envelope."""
    if exc.status_code == HTTP_NOT_FOUND:
        return create_error_response(HTTP_NOT_FOUND, "Resource not found")
    return create_error_response(exc.status_code, str(exc.detail))


def make_generic_handler(production: bool):
    """Construit le handler des erreurs non prévues (500).

    En production le message ne contient aucun détail interne.
    """

    def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
        log.error(
            "unhandled_error",
            path=request.url.path,
            exception_type=type(exc).__name__,
            exc_info=exc,
        )
        message = "Internal server error" if production else (str(exc) or type(exc).__name__)
        return create_error_response(HTTP_INTERNAL_SERVER_ERROR, message)

    return handle_generic_exception


def register_error_handlers(app: FastAPI, production: bool) -> None:
    """Enregistre les handlers d'exceptions sur l'application."""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, make_generic_handler(production))
