"""
Error translation chain.

Every exception that escapes a route is run through ``ERROR_CHAIN`` in
order.  Each stage either returns the ``ApiError`` to respond with or
``None`` to defer to the next stage; the last stage always answers, so a
failure is translated exactly once:

1. request validation  -> BadRequest / NotFound
2. storage error codes -> BadRequest
3. ApiError passthrough
4. anything else       -> InternalError

Response bodies are always ``{"msg": <str>}``.
"""
import logging
from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from news_api.errors import ApiError, BadRequest, InternalError, NotFound

logger = logging.getLogger(__name__)

ErrorStage = Callable[[Exception], ApiError | None]

# SQLSTATE codes caused by client input rather than server faults.
CLIENT_SQLSTATES: frozenset[str] = frozenset(
    {
        "22P02",  # invalid_text_representation
        "22003",  # numeric_value_out_of_range
        "23502",  # not_null_violation
        "23503",  # foreign_key_violation
        "42601",  # syntax_error
        "08P01",  # protocol_violation
    }
)


def _sqlstate(exc: DBAPIError) -> str | None:
    orig = exc.orig
    # asyncpg (through SQLAlchemy's adapter) exposes ``sqlstate``,
    # psycopg exposes ``pgcode``.
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is None and orig is not None:
        code = getattr(orig.__cause__, "sqlstate", None)
    return code


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def classify_request_error(exc: Exception) -> ApiError | None:
    """Map FastAPI / Starlette request-level failures."""
    if isinstance(exc, RequestValidationError):
        return BadRequest(str(exc.errors()))
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in (404, 405):
            return NotFound(str(exc.detail))
        if 400 <= exc.status_code < 500:
            return BadRequest(str(exc.detail))
    return None


def classify_storage_error(exc: Exception) -> ApiError | None:
    """Map database rejections of client input to BadRequest."""
    if not isinstance(exc, DBAPIError):
        return None
    code = _sqlstate(exc)
    if code in CLIENT_SQLSTATES:
        return BadRequest(f"storage rejected input ({code})")
    if code is None and isinstance(exc, IntegrityError):
        # SQLite reports constraint failures without a SQLSTATE.
        return BadRequest(f"storage constraint failed: {exc.orig}")
    return None


def passthrough_api_error(exc: Exception) -> ApiError | None:
    if isinstance(exc, ApiError):
        return exc
    return None


def fallback_internal_error(exc: Exception) -> ApiError | None:
    return InternalError(repr(exc))


ERROR_CHAIN: tuple[ErrorStage, ...] = (
    classify_request_error,
    classify_storage_error,
    passthrough_api_error,
    fallback_internal_error,
)


def translate_error(exc: Exception) -> ApiError:
    """Run *exc* through ``ERROR_CHAIN`` and return the first answer."""
    for stage in ERROR_CHAIN:
        error = stage(exc)
        if error is not None:
            return error
    # Unreachable while fallback_internal_error terminates the chain.
    return InternalError(repr(exc))


# ---------------------------------------------------------------------------
# FastAPI wiring
# ---------------------------------------------------------------------------

async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    error = translate_error(exc)
    if error.status_code >= 500:
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method, request.url.path, exc,
            exc_info=exc,
        )
    else:
        logger.warning(
            "%s on %s %s: %s",
            error.status_code, request.method, request.url.path, error.detail or error.msg,
        )
    return JSONResponse(status_code=error.status_code, content=error.to_response())


def register_error_handlers(app: FastAPI) -> None:
    """Route every failure type the app can raise through ``handle_error``."""
    for exc_class in (
        ApiError,
        RequestValidationError,
        StarletteHTTPException,
        SQLAlchemyError,
        Exception,
    ):
        app.add_exception_handler(exc_class, handle_error)
