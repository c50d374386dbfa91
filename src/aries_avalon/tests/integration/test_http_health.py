import httpx
import respx

from aries_avalon import __version__
from aries_avalon.tests.fixtures.solr import SOLR_HOST, SOLR_SELECT_PATH, solr_body


async def test_version(client: httpx.AsyncClient) -> None:
    resp = await client.get("/version")
    assert resp.status_code == 200
    assert resp.text == f"Aries Avalon version {__version__}"


async def test_healthcheck_ok(
    client: httpx.AsyncClient, solr_respx: respx.Router
) -> None:
    route = solr_respx.get(host=SOLR_HOST, path=SOLR_SELECT_PATH).respond(
        200, json=solr_body([], num_found=10)
    )

    resp = await client.get("/healthcheck")

    assert resp.status_code == 200
    assert resp.json() == {"AriesAvalon": "true", "Avalon": "true"}
    assert route.calls.last.request.url.params["rows"] == "0"


async def test_healthcheck_solr_error_status(
    client: httpx.AsyncClient, solr_respx: respx.Router
) -> None:
    solr_respx.get(host=SOLR_HOST, path=SOLR_SELECT_PATH).respond(500)

    resp = await client.get("/healthcheck")

    assert resp.status_code == 200
    assert resp.json() == {"AriesAvalon": "true", "Avalon": "false"}


async def test_healthcheck_solr_timeout(
    client: httpx.AsyncClient, solr_respx: respx.Router
) -> None:
    solr_respx.get(host=SOLR_HOST, path=SOLR_SELECT_PATH).mock(
        side_effect=httpx.ConnectTimeout("slow")
    )

    resp = await client.get("/healthcheck")

    assert resp.json()["Avalon"] == "false"


async def test_favicon_is_silenced(client: httpx.AsyncClient) -> None:
    resp = await client.get("/favicon.ico")
    assert resp.status_code == 200
    assert resp.content == b""
