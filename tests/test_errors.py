"""
Error-translation chain tests - each stage in isolation, then the chain
wired into a bare FastAPI app for the 500 path.
"""
import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from news_api.error_handlers import (
    classify_request_error,
    classify_storage_error,
    register_error_handlers,
    translate_error,
)
from news_api.errors import BadRequest, InternalError, NotFound


class FakeDriverError(Exception):
    """Stand-in for a DB-API exception carrying a SQLSTATE."""

    def __init__(self, sqlstate: str | None = None) -> None:
        super().__init__("driver error")
        self.sqlstate = sqlstate


def _dbapi_error(cls=DBAPIError, sqlstate: str | None = None) -> DBAPIError:
    return cls("SELECT 1", {}, FakeDriverError(sqlstate))


# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------

def test_error_variants():
    assert (BadRequest.status_code, BadRequest().to_response()) == (400, {"msg": "bad request"})
    assert (NotFound.status_code, NotFound().to_response()) == (404, {"msg": "not found"})
    assert (InternalError.status_code, InternalError().to_response()) == (
        500,
        {"msg": "Internal Server Error"},
    )


def test_detail_never_reaches_response():
    error = NotFound("article 42 does not exist")
    assert error.detail == "article 42 does not exist"
    assert error.to_response() == {"msg": "not found"}


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def test_request_validation_is_bad_request():
    assert isinstance(classify_request_error(RequestValidationError([])), BadRequest)


@pytest.mark.parametrize("status_code", [404, 405])
def test_routing_misses_are_not_found(status_code: int):
    exc = StarletteHTTPException(status_code=status_code)
    assert isinstance(classify_request_error(exc), NotFound)


def test_other_client_http_errors_are_bad_request():
    exc = StarletteHTTPException(status_code=400, detail="There was an error parsing the body")
    assert isinstance(classify_request_error(exc), BadRequest)


def test_request_stage_defers_on_unrelated_errors():
    assert classify_request_error(ValueError("x")) is None
    assert classify_request_error(NotFound()) is None


@pytest.mark.parametrize("sqlstate", ["22P02", "22003", "23502", "23503", "42601", "08P01"])
def test_client_sqlstates_are_bad_request(sqlstate: str):
    assert isinstance(classify_storage_error(_dbapi_error(sqlstate=sqlstate)), BadRequest)


def test_foreign_key_violation_is_bad_request():
    exc = _dbapi_error(IntegrityError, sqlstate="23503")
    assert isinstance(translate_error(exc), BadRequest)


def test_integrity_error_without_sqlstate_is_bad_request():
    exc = _dbapi_error(IntegrityError)
    assert isinstance(classify_storage_error(exc), BadRequest)


@pytest.mark.parametrize("sqlstate", ["40001", "53300", None])
def test_server_side_storage_errors_fall_through(sqlstate):
    exc = _dbapi_error(OperationalError, sqlstate=sqlstate)
    assert classify_storage_error(exc) is None
    assert isinstance(translate_error(exc), InternalError)


def test_pgcode_is_read_when_sqlstate_missing():
    orig = Exception("psycopg error")
    orig.pgcode = "22P02"
    exc = DBAPIError("SELECT 1", {}, orig)
    assert isinstance(classify_storage_error(exc), BadRequest)


# ---------------------------------------------------------------------------
# Full chain
# ---------------------------------------------------------------------------

def test_api_errors_pass_through_unchanged():
    error = NotFound("missing")
    assert translate_error(error) is error


def test_unknown_errors_become_internal():
    error = translate_error(RuntimeError("boom"))
    assert isinstance(error, InternalError)
    assert error.to_response() == {"msg": "Internal Server Error"}


@pytest.mark.asyncio
async def test_unhandled_exception_returns_generic_500():
    """Internals never leak into the response body."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/explode")
    async def explode():
        raise RuntimeError("secret connection string")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/explode")
    assert resp.status_code == 500
    assert resp.json() == {"msg": "Internal Server Error"}
    assert "secret" not in resp.text


@pytest.mark.asyncio
async def test_storage_error_in_route_returns_400():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/bad-literal")
    async def bad_literal():
        raise _dbapi_error(DBAPIError, sqlstate="22P02")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/bad-literal")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "bad request"}
