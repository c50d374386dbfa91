"""Error taxonomy for identifier resolution, rendered as problem+json.

The lookup route answers NotFound, Ambiguous and Solr failures itself in
plain text; whatever else escapes a route is rendered here.
"""

from enum import StrEnum

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

PROBLEM_TYPE_BASE = "https://aries.lib.virginia.edu/errors"


class ErrorCode(StrEnum):
    """Application error codes."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    AMBIGUOUS_IDENTIFIER = "AMBIGUOUS_IDENTIFIER"
    SOLR_ERROR = "SOLR_ERROR"


_CODE_BY_STATUS: dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.NOT_FOUND,
    422: ErrorCode.VALIDATION_ERROR,
}


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    code: ErrorCode


class AppError(Exception):
    """Base error; subclasses fix ``code``, ``title`` and ``status``."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    title: str = "Internal error"
    status: int = 500

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(detail or self.title)


class NotFoundError(AppError):
    """No index record matches the identifier."""

    code = ErrorCode.NOT_FOUND
    title = "Identifier not found"
    status = 404


class ValidationError(AppError):
    """The identifier cannot be looked up at all (e.g. it is blank)."""

    code = ErrorCode.VALIDATION_ERROR
    title = "Invalid identifier"
    status = 422


class AmbiguousIdentifierError(AppError):
    """More than one index record matched an identifier."""

    code = ErrorCode.AMBIGUOUS_IDENTIFIER
    title = "Identifier matches more than one record"
    status = 400

    def __init__(self, identifier: str, query: str, num_found: int) -> None:
        self.identifier = identifier
        self.query = query
        self.num_found = num_found
        super().__init__(f"{identifier} matched {num_found} records: {query}")


class SolrError(AppError):
    """Avalon Solr was unreachable, failed, or answered something unparseable."""

    code = ErrorCode.SOLR_ERROR
    title = "Avalon Solr service error"
    status = 502

    def __init__(self, detail: str, query: str | None = None) -> None:
        self.query = query
        super().__init__(detail)


def problem_response(
    request: Request,
    *,
    code: ErrorCode,
    title: str,
    status: int,
    detail: str | None = None,
) -> JSONResponse:
    problem = ProblemDetail(
        type=f"{PROBLEM_TYPE_BASE}/{code.value}",
        title=title,
        status=status,
        detail=detail,
        instance=str(request.url),
        code=code,
    )
    return JSONResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
        media_type="application/problem+json",
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an ``AppError`` that escaped its route."""
    return problem_response(
        request,
        code=exc.code,
        title=exc.title,
        status=exc.status,
        detail=exc.detail,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework errors (unknown routes, wrong methods) the same way."""
    return problem_response(
        request,
        code=_CODE_BY_STATUS.get(exc.status_code, ErrorCode.INTERNAL_ERROR),
        title=str(exc.detail),
        status=exc.status_code,
    )
