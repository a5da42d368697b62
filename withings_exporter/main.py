from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from . import __version__
from .metrics import WeightMetrics
from .routes.metrics import router as metrics_router


def create_app(weight_metrics: Optional[WeightMetrics] = None) -> FastAPI:
    """Build the scrape endpoint around an already populated registry."""

    app = FastAPI(
        title="Withings Exporter",
        version=__version__,
        description="Serves the latest Withings weight as a Prometheus gauge",
    )
    app.state.weight_metrics = weight_metrics or WeightMetrics()

    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    @app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
    async def healthz() -> dict[str, str]:
        """Lightweight endpoint used for health checks."""
        return {"status": "ok"}

    app.include_router(metrics_router)
    return app
