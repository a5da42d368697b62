"""Prometheus registry holding the exported weight gauge."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Gauge, generate_latest

logger = logging.getLogger(__name__)

WEIGHT_METRIC_NAME = "withings_current_weight"
WEIGHT_METRIC_HELP = "Shows the latest weight measurement (assumed in kg)"


@dataclass
class WeightMetrics:
    """A private registry so scrapes expose nothing but the weight gauge."""

    registry: CollectorRegistry = field(
        default_factory=lambda: CollectorRegistry(auto_describe=True)
    )

    def __post_init__(self) -> None:
        self.current_weight = Gauge(
            WEIGHT_METRIC_NAME, WEIGHT_METRIC_HELP, registry=self.registry
        )

    def set_weight(self, weight_kg: float) -> None:
        self.current_weight.set(weight_kg)
        logger.info("Setting %s metric to %fkg.", WEIGHT_METRIC_NAME, weight_kg)

    def render(self) -> bytes:
        return generate_latest(self.registry)


__all__ = [
    "CONTENT_TYPE_LATEST",
    "WEIGHT_METRIC_HELP",
    "WEIGHT_METRIC_NAME",
    "WeightMetrics",
]
