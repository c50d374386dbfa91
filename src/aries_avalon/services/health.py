"""Dependency health checks."""

from __future__ import annotations

from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.platform.logging import get_logger

logger = get_logger(__name__)

SERVICE_NAME = "AriesAvalon"
SOLR_DEPENDENCY = "Avalon"


async def check_health(solr: SolrClient) -> dict[str, str]:
    """Report ``"true"``/``"false"`` for this service and each dependency."""
    solr_ok = await solr.ping()
    if not solr_ok:
        logger.warning("Healthcheck: Avalon Solr unreachable", url=solr.select_url)
    return {
        SERVICE_NAME: "true",
        SOLR_DEPENDENCY: "true" if solr_ok else "false",
    }
