"""Translate order intake errors into JSON responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from orders.errors import StorageError, UploadAcceptanceError, ValidationError

logger = structlog.get_logger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "message": "Validation error",
            "errors": [error.to_dict() for error in exc.errors],
        },
    )


async def upload_acceptance_error_handler(request: Request, exc: UploadAcceptanceError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": "File upload error", "error": str(exc)})


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(UploadAcceptanceError, upload_acceptance_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
