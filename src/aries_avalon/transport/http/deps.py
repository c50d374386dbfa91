"""Dependency injection for HTTP routes."""

from typing import Annotated

from fastapi import Depends, Request

from aries_avalon.domain.avalon_urls import AvalonURLs
from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.platform.config import Settings
from aries_avalon.services.resolver import AriesResolver


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_solr_client(request: Request) -> SolrClient:
    """Process-wide Solr client."""
    return request.app.state.solr_client


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Solr = Annotated[SolrClient, Depends(get_solr_client)]


def get_resolver(settings: AppSettings, solr: Solr) -> AriesResolver:
    """Build a resolver from the injected settings and Solr client."""
    return AriesResolver(solr=solr, urls=AvalonURLs(settings.avalon_url))


Resolver = Annotated[AriesResolver, Depends(get_resolver)]
