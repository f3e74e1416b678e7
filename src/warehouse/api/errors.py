"""Translate domain exceptions into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from warehouse.utils.logging import get_logger

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """ValidationError maps to 400, ObjectNotFoundError to 404."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("request_rejected", path=request.url.path, errors=exc.messages)
        return JSONResponse(status_code=400, content={"error": exc.messages})

    @app.exception_handler(ObjectNotFoundError)
    async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
        logger.info("object_not_found", path=request.url.path, errors=exc.messages)
        return JSONResponse(status_code=404, content={"error": exc.messages})
