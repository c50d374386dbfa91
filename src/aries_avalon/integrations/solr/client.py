"""Async HTTP client for the Avalon Solr ``select`` handler.

Two call policies are exposed:

- :meth:`SolrClient.select` is *required*: any transport failure, timeout,
  non-2xx status, non-zero Solr status or unparseable body raises
  :class:`~aries_avalon.platform.errors.SolrError`.
- :meth:`SolrClient.select_or_none` is *best-effort*: the same failures are
  logged and reported as ``None``.

No retries are performed; a failed call fails immediately.
"""

from collections.abc import Mapping

import httpx
from pydantic import ValidationError as PydanticValidationError
from structlog.contextvars import bound_contextvars

from aries_avalon.integrations.solr.models import SolrQueryResult, SolrSelectResponse
from aries_avalon.platform.errors import SolrError
from aries_avalon.platform.logging import get_logger

logger = get_logger(__name__)

type SolrParams = Mapping[str, str | int]


class SolrClient:
    """HTTP client for one Solr core."""

    def __init__(
        self,
        base_url: str,
        core: str,
        timeout: float = 10.0,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.core = core.strip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def select_url(self) -> str:
        """URL of the select handler for this core."""
        return f"{self.base_url}/{self.core}/select"

    def build_url(self, params: SolrParams) -> str:
        """Render the full select URL (with encoded query string) for ``params``."""
        return str(httpx.URL(self.select_url, params=dict(params)))

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, url: str) -> httpx.Response:
        client = await self._get_client()
        logger.debug("Solr request")
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Solr HTTP error",
                status_code=e.response.status_code,
                response_text=e.response.text[:500],
            )
            raise SolrError(
                f"GET {url} -> HTTP {e.response.status_code}: {e.response.text[:200]}",
                query=url,
            ) from e
        except httpx.RequestError as e:
            logger.error("Solr request error", error=str(e))
            raise SolrError(f"Request failed: {e}", query=url) from e
        return response

    async def select(self, params: SolrParams) -> SolrQueryResult:
        """Run a required select query.

        The query URL is bound to the log context while the call runs.

        :param params: Query parameters (``q``, ``fl``, ``rows``...). ``wt=json``
            is always added.
        :returns: Parsed response plus the URL used.
        :raises SolrError: On any transport, HTTP or parse failure.
        """
        url = self.build_url({**params, "wt": "json"})
        with bound_contextvars(query=url):
            response = await self._get(url)
            try:
                body = SolrSelectResponse.model_validate_json(response.content)
            except PydanticValidationError as e:
                logger.error("Unable to parse Solr response", error=str(e))
                raise SolrError(f"Unable to parse response: {e}", query=url) from e

            if body.response_header.status != 0:
                logger.error(
                    "Solr reported failure", solr_status=body.response_header.status
                )
                raise SolrError(
                    f"Solr status {body.response_header.status}", query=url
                )
        return SolrQueryResult(url=url, body=body)

    async def select_or_none(self, params: SolrParams) -> SolrQueryResult | None:
        """Run a best-effort select query; failures are logged and yield ``None``."""
        try:
            return await self.select(params)
        except SolrError as e:
            logger.warning(
                "Best-effort Solr query failed", query=e.query, error=e.detail
            )
            return None

    async def ping(self) -> bool:
        """Check reachability with a minimal, zero-row query."""
        url = self.build_url({"q": "*:*", "wt": "json", "rows": 0})
        with bound_contextvars(query=url):
            try:
                await self._get(url)
            except SolrError:
                return False
        return True
