from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tempero.common.errors import NotFoundError, ValidationError
from tempero.logger_config import logger


def _error_response(status_code: int, message: str, error=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({
            "success": False,
            "message": message,
            "status_code": status_code,
            "error": error if error is not None else message,
        }),
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        # Malformed input never reaches the services
        logger.info(f"Validation failed on {request.method} {request.url.path}")
        return _error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", exc.errors())

    @app.exception_handler(ValidationError)
    async def handle_domain_validation_error(request: Request, exc: ValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_exception(request: Request, exc: Exception):
        logger.exception("Unhandled exception occurred")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
