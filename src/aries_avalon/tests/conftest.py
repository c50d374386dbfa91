from collections.abc import AsyncGenerator, Callable, Generator

import httpx
import pytest
import respx
import structlog
from fastapi import FastAPI
from structlog.testing import LogCapture

from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.platform.config import Settings
from aries_avalon.tests.fixtures.solr import (
    AVALON_URL,
    SOLR_CORE,
    SOLR_HOST,
    SOLR_SELECT_PATH,
    SOLR_URL,
    solr_body,
)

type SolrOutcome = httpx.Response | Exception


@pytest.fixture
def settings() -> Settings:
    return Settings(
        solr_url=SOLR_URL,
        solr_core=SOLR_CORE,
        avalon_url=AVALON_URL,
        log_format="console",
    )


@pytest.fixture
async def solr_client(settings: Settings) -> AsyncGenerator[SolrClient]:
    client = SolrClient(settings.solr_url, settings.solr_core, timeout=1.0)
    yield client
    await client.close()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    from aries_avalon.main import create_app

    return create_app(settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    # ASGITransport does not run the lifespan, so close the Solr client here.
    await app.state.solr_client.close()


@pytest.fixture
def solr_respx() -> Generator[respx.Router]:
    """respx router for mocking outbound Solr httpx requests."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def solr_by_query(
    solr_respx: respx.Router,
) -> Callable[[dict[str, SolrOutcome]], respx.Route]:
    """Route Solr select calls by their ``q`` parameter.

    Unknown queries get an empty result set. Every handled request is
    recorded on ``route.calls``.
    """

    def _install(responses: dict[str, SolrOutcome]) -> respx.Route:
        def _handler(request: httpx.Request) -> httpx.Response:
            outcome = responses.get(request.url.params.get("q", ""))
            if outcome is None:
                return httpx.Response(200, json=solr_body([]))
            if isinstance(outcome, Exception):
                raise outcome
            return httpx.Response(
                outcome.status_code,
                content=outcome.content,
                headers=outcome.headers,
            )

        return solr_respx.get(host=SOLR_HOST, path=SOLR_SELECT_PATH).mock(
            side_effect=_handler
        )

    return _install


@pytest.fixture
def log_output() -> Generator[LogCapture]:
    """Capture structlog events, including values bound to the log context."""
    capture = LogCapture()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, capture]
    )
    yield capture
    structlog.reset_defaults()
