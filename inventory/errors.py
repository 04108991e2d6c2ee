import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=409,
        content={"detail": "Conflicting record", "code": "integrity_error"},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Driver messages stay in the log, never in the response body
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "code": "database_error"},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(IntegrityError, integrity_error_handler)
    application.add_exception_handler(SQLAlchemyError, database_error_handler)
