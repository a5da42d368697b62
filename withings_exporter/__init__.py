"""Expose the latest Withings weight measurement as a Prometheus gauge."""

__version__ = "1.0.0"
