"""Aries lookup response DTOs."""

from __future__ import annotations

from pydantic import BaseModel

from aries_avalon.services.resolver import ResolutionResult


class ServiceURLResponse(BaseModel):
    """A queryable service endpoint for the record."""

    url: str
    protocol: str


class AriesResponse(BaseModel):
    """Aries resolution response.

    Empty lists are serialised as absent fields.
    """

    identifier: list[str] | None = None
    service_url: list[ServiceURLResponse] | None = None
    access_url: list[str] | None = None
    admin_url: list[str] | None = None
    metadata_url: list[str] | None = None
    master_file: list[str] | None = None
    derivative_file: list[str] | None = None

    @classmethod
    def from_result(cls, result: ResolutionResult) -> AriesResponse:
        return cls(
            identifier=result.identifiers or None,
            service_url=[
                ServiceURLResponse(url=s.url, protocol=s.protocol)
                for s in result.service_urls
            ]
            or None,
            access_url=result.access_urls or None,
            admin_url=result.admin_urls or None,
            metadata_url=result.metadata_urls or None,
            master_file=result.master_files or None,
            derivative_file=result.derivative_files or None,
        )
