"""Aries identifier lookup endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from aries_avalon.platform.errors import (
    AmbiguousIdentifierError,
    NotFoundError,
    SolrError,
)
from aries_avalon.transport.http.deps import Resolver
from aries_avalon.transport.http.schemas import AriesResponse

router = APIRouter(prefix="/api/aries", tags=["aries"])


@router.get("", response_class=PlainTextResponse)
async def aries_ping() -> str:
    """Liveness message for the Aries API; no lookup is performed."""
    return "Avalon Aries API"


@router.get(
    "/{identifier}",
    response_model=AriesResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Identifier matches more than one record"},
        404: {"description": "Identifier not found"},
        422: {"description": "Identifier is blank"},
    },
)
async def aries_lookup(identifier: str, resolver: Resolver) -> AriesResponse | Response:
    """Resolve an identifier to Avalon access, admin and file locations.

    Solr being unreachable is reported as 404, the same as a missing record.
    A blank identifier is left to the problem+json handler.
    """
    try:
        result = await resolver.resolve(identifier)
    except AmbiguousIdentifierError as e:
        return PlainTextResponse(
            f"{identifier} matches {e.num_found} records; query: {e.query}",
            status_code=400,
        )
    except (NotFoundError, SolrError):
        return PlainTextResponse(f"{identifier} not found", status_code=404)
    return AriesResponse.from_result(result)
