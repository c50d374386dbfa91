"""Aries Avalon application factory."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import cast
from uuid import uuid4

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response

from aries_avalon import __version__
from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.platform.config import Settings, get_settings
from aries_avalon.platform.errors import (
    AppError,
    app_error_handler,
    http_exception_handler,
)
from aries_avalon.platform.logging import bind_request, get_logger, setup_logging
from aries_avalon.transport.http.routers import aries, health

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

type ExceptionHandler = Callable[[Request, Exception], Awaitable[Response]]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings: Settings = app.state.settings
    solr: SolrClient = app.state.solr_client

    setup_logging(settings)
    logger.info(
        "Aries Avalon listening",
        version=__version__,
        port=settings.api_port,
        solr_select=solr.select_url,
        avalon_url=settings.avalon_url,
    )
    yield
    await solr.close()
    logger.info("Solr client closed")


def _install_request_id(app: FastAPI) -> None:
    """Tag every request (and its log lines) with an ``X-Request-ID``."""

    @app.middleware("http")
    async def request_id(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request(rid)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response


def _install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, cast(ExceptionHandler, app_error_handler))
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the service around one Solr client.

    :param settings: Explicit settings (default: cached environment settings).
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Aries Avalon",
        description="Aries identifier resolution for Avalon media objects",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.api_docs_enabled else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.solr_client = SolrClient(
        base_url=settings.solr_url,
        core=settings.solr_core,
        timeout=settings.solr_timeout_seconds,
    )

    _install_request_id(app)
    _install_error_handlers(app)
    app.include_router(health.router)
    app.include_router(aries.router)
    return app


app = create_app()
