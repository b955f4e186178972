"""
Error taxonomy for the News API.

Every failure that reaches a client is one of three variants, each with a
fixed status code and message:

- ``BadRequest``    400  "bad request"
- ``NotFound``      404  "not found"
- ``InternalError`` 500  "Internal Server Error"

Services raise ``BadRequest`` / ``NotFound`` when the condition is known
locally (an allow-list miss, zero rows after a lookup).  Anything else is
left to ``news_api.error_handlers`` to classify.
"""


class ApiError(Exception):
    """Base class for failures that carry their own HTTP status and message."""

    status_code: int = 500
    msg: str = "Internal Server Error"

    def __init__(self, detail: str | None = None) -> None:
        # ``detail`` is for logs only; clients always receive ``msg``.
        super().__init__(detail or self.msg)
        self.detail = detail

    def to_response(self) -> dict:
        return {"msg": self.msg}


class BadRequest(ApiError):
    status_code = 400
    msg = "bad request"


class NotFound(ApiError):
    status_code = 404
    msg = "not found"


class InternalError(ApiError):
    status_code = 500
    msg = "Internal Server Error"
