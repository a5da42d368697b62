"""Ports for interacting with Withings data sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...models.withings import WeightReading


class WithingsPort(ABC):
    """Interface describing the Withings operations the exporter needs."""

    @abstractmethod
    def authorization_url(self) -> str:
        """Return the URL the user visits to grant access."""

    @abstractmethod
    async def request_token(self, code: str) -> str:
        """Exchange an authorization code for an access token."""

    @abstractmethod
    async def fetch_latest_weight(self, access_token: str) -> WeightReading:
        """Return the most recent weight measurement."""
