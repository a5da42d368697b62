"""Error types raised while talking to the Withings API."""

from __future__ import annotations

from typing import Optional


class MissingCredentialsError(ValueError):
    """Raised when no access token is configured and the app credentials are incomplete."""


class WithingsError(RuntimeError):
    """Base class for failures while obtaining a token or a measurement."""


class WithingsNetworkError(WithingsError):
    """The request never produced an HTTP response."""


class WithingsDecodeError(WithingsError):
    """The response body could not be turned into the expected payload."""


class WithingsAPIError(WithingsError):
    """Withings answered, but with an HTTP error or a non-zero ``status``."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class NoMeasurementsError(WithingsError):
    """The measurement response contained no usable weight reading."""


__all__ = [
    "MissingCredentialsError",
    "WithingsError",
    "WithingsNetworkError",
    "WithingsDecodeError",
    "WithingsAPIError",
    "NoMeasurementsError",
]
