"""Infrastructure helpers for Withings integration."""

from .client import WithingsAPIClient, create_withings_api_client

__all__ = ["WithingsAPIClient", "create_withings_api_client"]
