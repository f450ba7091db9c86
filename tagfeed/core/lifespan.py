"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (search HTTP client, telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from tagfeed.core.config import get_settings
from tagfeed.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared search HTTP client, telemetry (if
    enabled). Shutdown order: search client close, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    # Shared HTTP client for Solr calls (connection reuse across requests).
    app.state.search_http_client = httpx.AsyncClient(
        timeout=settings.solr_timeout_seconds
    )

    if settings.telemetry_enabled:
        from tagfeed.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_httpx()
        logger.info("Telemetry initialized")

    logger.info("Search backend: %s", settings.solr_url)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "search_http_client", None) is not None:
        await app.state.search_http_client.aclose()
        app.state.search_http_client = None
        logger.info("Search HTTP client closed")

    from tagfeed.shared.telemetry.telemetry import get_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        logger.info("Telemetry shutdown complete")
