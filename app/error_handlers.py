import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from .errors import AppError, UnknownFilterKey

logger = logging.getLogger(__name__)

def init_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        logger.warning("%s(code=%s): %s", exc.__class__.__name__, exc.code, exc.message)
        content = {"error": exc.code, "message": exc.message}
        if isinstance(exc, UnknownFilterKey):
            content["key"] = exc.key
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.error("ValidationError: %s", exc.errors())
        return JSONResponse(
            status_code=422,
            content={
                "error": "VALIDATION_ERROR",
                "message": "Payload inválido",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unexpected error")
        return JSONResponse(
            status_code=500,
            content={"error": "INTERNAL_ERROR", "message": "Ocurrió un error inesperado"},
        )
