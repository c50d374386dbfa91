"""Avalon Solr integration."""

from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.integrations.solr.models import SolrQueryResult, SolrSelectResponse

__all__ = ["SolrClient", "SolrQueryResult", "SolrSelectResponse"]
