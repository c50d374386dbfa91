"""Request/response DTOs for HTTP routes."""

from aries_avalon.transport.http.schemas.aries import AriesResponse, ServiceURLResponse

__all__ = ["AriesResponse", "ServiceURLResponse"]
