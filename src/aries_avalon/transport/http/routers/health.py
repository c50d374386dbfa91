"""Health, version and housekeeping endpoints."""

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from aries_avalon import __version__
from aries_avalon.services.health import check_health
from aries_avalon.transport.http.deps import Solr

router = APIRouter(tags=["health"])


@router.get("/healthcheck", response_model=dict[str, str])
async def healthcheck(solr: Solr) -> dict[str, str]:
    """Report whether this service and Avalon Solr are reachable."""
    return await check_health(solr)


@router.get("/version", response_class=PlainTextResponse)
async def version() -> str:
    """Service version."""
    return f"Aries Avalon version {__version__}"


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    # Silences browser requests for a favicon.
    return Response(status_code=200)
