"""Command line entry point: authorize, fetch the weight once, then serve it."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import click
import httpx
import uvicorn

from .errors import MissingCredentialsError, WithingsError
from .main import create_app
from .metrics import WeightMetrics
from .models.withings import WeightReading
from .settings import Settings, get_settings
from .withings.application import (
    CodeReader,
    Printer,
    fetch_current_weight,
    obtain_access_token,
)
from .withings.infrastructure import create_withings_api_client

logger = logging.getLogger(__name__)


async def bootstrap(
    settings: Settings, read_code: CodeReader, echo: Printer
) -> WeightReading:
    async with httpx.AsyncClient() as http_client:
        port = create_withings_api_client(http_client=http_client, settings=settings)
        access_token = await obtain_access_token(settings, port, read_code, echo)
        return await fetch_current_weight(port, access_token)


@click.command()
@click.option("--host", default=None, help="Interface to bind the metrics server to.")
@click.option("--port", default=None, type=int, help="Port to serve /metrics on.")
def main(host: Optional[str], port: Optional[int]) -> None:
    """Serve the latest Withings weight at /metrics for Prometheus."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        reading = asyncio.run(bootstrap(settings, click.prompt, click.echo))
    except MissingCredentialsError as exc:
        click.echo(str(exc))
        return
    except WithingsError as exc:
        logger.error("Could not read the current weight from Withings: %s", exc)
        raise SystemExit(1) from exc

    weight_metrics = WeightMetrics()
    weight_metrics.set_weight(reading.weight_kg)

    host = host or settings.metrics_host
    port = port or settings.metrics_port
    logger.info(
        "Serving metrics on http://localhost:%d/metrics. "
        "Configure your Prometheus to scrape accordingly.",
        port,
    )
    uvicorn.run(
        create_app(weight_metrics),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
