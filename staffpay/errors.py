from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from staffpay.core.validation import InvalidInputError
from staffpay.infrastructure import PersistenceError

logger = logging.getLogger(__name__)


def fail(request: Request, message: str | list[str], status: int, code: str | None = None) -> JSONResponse:
    body: dict[str, object] = {
        "success": False,
        "statusCode": status,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
    }
    if code:
        body["code"] = code
    return JSONResponse(body, status_code=status)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidInputError)
    async def _invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        return fail(request, str(exc), status=422, code="INVALID_INPUT")

    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return fail(request, [error["msg"] for error in exc.errors()], status=422, code="INVALID_INPUT")

    @app.exception_handler(PersistenceError)
    async def _persistence(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.warning("persistence failure on %s: %s", request.url.path, exc)
        return fail(request, str(exc), status=502, code="PERSISTENCE_ERROR")

    @app.exception_handler(StarletteHTTPException)
    async def _http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return fail(request, str(exc.detail), status=exc.status_code)
