"""Withings integration modules."""

from .application import (
    WithingsPort,
    fetch_current_weight,
    obtain_access_token,
)
from .infrastructure import WithingsAPIClient, create_withings_api_client

__all__ = [
    "WithingsPort",
    "fetch_current_weight",
    "obtain_access_token",
    "WithingsAPIClient",
    "create_withings_api_client",
]
