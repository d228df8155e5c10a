from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from barmanager.config.settings import settings
from barmanager.shared.schemas.common import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}

def _error_json(status_code: int, body: ErrorResponse, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers
    )

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

def setup_exception_handlers(app: FastAPI):
    """Respuestas de error uniformes: 400 validación, 4xx HTTP, 500 genérico"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            FieldError(
                field=".".join(str(part) for part in err.get("loc", ()) if part != "body") or "body",
                message=err.get("msg", ""),
                type=err.get("type")
            )
            for err in exc.errors()
        ]
        return _error_json(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(message="Datos inválidos", error_code="VALIDATION_ERROR", errors=errors)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_json(
            exc.status_code,
            ErrorResponse(
                message=str(exc.detail),
                error_code=ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
            ),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Violación de integridad en {request.method} {request.url.path}: {exc.orig}")
        return _error_json(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(
                message="La operación viola una restricción de datos (duplicado o referencia en uso)",
                error_code="INTEGRITY_ERROR"
            )
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Error inesperado en {request.method} {request.url.path}")
        return _error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(message="Error interno del servidor", error_code="INTERNAL_ERROR")
        )
