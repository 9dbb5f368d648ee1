"""
Errores de dominio y respuestas JSON de error

Todas las respuestas de la API usan el sobre:
    {"success": true, "data": ...}
    {"success": false, "error": "..."}
"""
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException


logger = logging.getLogger(__name__)


class PapaloteError(Exception):
    """Base error for business rule failures"""
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(PapaloteError, ValueError):
    """Input rejected by a business rule"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PapaloteError, LookupError):
    """Referenced entity does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


def ok(data: Any = None, **extra: Any) -> dict:
    """Build a success envelope"""
    body = {"success": True, "data": data}
    body.update(extra)
    return body


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    """Build a failure envelope"""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


def _format_validation_error(exc: RequestValidationError) -> str:
    """First validation issue as a readable message"""
    errors = exc.errors()
    if not errors:
        return "Solicitud inválida"

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
    message = first.get("msg", "valor inválido")
    if first.get("type") == "missing":
        return f"{location} is required"
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers that turn every error into the JSON envelope"""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, _format_validation_error(exc))

    @app.exception_handler(PapaloteError)
    async def papalote_exception_handler(request: Request, exc: PapaloteError):
        return error_response(exc.status_code, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor")
