"""HTTP-backed implementation of the Withings port."""
from __future__ import annotations

from typing import Any, Dict, Type, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from ...errors import (
    NoMeasurementsError,
    WithingsAPIError,
    WithingsDecodeError,
    WithingsNetworkError,
)
from ...models.withings import (
    REAL_MEASUREMENT_CATEGORY,
    WEIGHT_MEASURE_TYPE,
    MeasuresResponse,
    TokenResponse,
    WeightReading,
)
from ...settings import Settings
from ..application.ports import WithingsPort

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class WithingsAPIClient(WithingsPort):
    """Talk to the Withings OAuth2 and measure endpoints over a shared client."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings

    def authorization_url(self) -> str:
        query = urlencode(
            {
                "response_type": "code",
                "client_id": self._settings.withings_app_client_id,
                "scope": self._settings.withings_scopes,
                "state": self._settings.withings_oauth_state,
                "redirect_uri": self._settings.withings_redirect_uri,
            },
            safe=",:/",
        )
        return f"{self._settings.withings_authorize_url}?{query}"

    async def request_token(self, code: str) -> str:
        """Exchange an authorization code for an access token."""

        payload = {
            "action": "requesttoken",
            "grant_type": "authorization_code",
            "client_id": self._settings.withings_app_client_id,
            "client_secret": self._settings.withings_app_client_secret,
            "code": code,
            "redirect_uri": self._settings.withings_redirect_uri,
        }
        data = await self._post(f"{self._settings.wbsapi_url}/v2/oauth2", data=payload)
        token = self._parse(TokenResponse, data)

        if not token.body.access_token:
            raise WithingsDecodeError("Withings token response missing access token")
        return token.body.access_token

    async def fetch_latest_weight(self, access_token: str) -> WeightReading:
        """Fetch real weight measurements and keep only the newest one."""

        payload = {
            "action": "getmeas",
            "meastypes": WEIGHT_MEASURE_TYPE,
            "category": REAL_MEASUREMENT_CATEGORY,
        }
        headers = {"Authorization": f"Bearer {access_token}"}
        data = await self._post(
            f"{self._settings.wbsapi_url}/measure", data=payload, headers=headers
        )
        measures = self._parse(MeasuresResponse, data)

        group = measures.latest_group()
        if group is None:
            raise NoMeasurementsError("Withings returned no measure groups")
        measure = group.weight_measure()
        if measure is None:
            raise NoMeasurementsError("Latest Withings measure group has no weight entry")
        return WeightReading.from_group(group, measure)

    async def _post(self, url: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = await self._http_client.post(url, **kwargs)
        except httpx.HTTPError as exc:
            raise WithingsNetworkError(f"Request to {url} failed: {exc}") from exc

        if response.status_code != 200:
            raise WithingsAPIError(
                f"Withings responded with HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise WithingsDecodeError("Withings response is not valid JSON") from exc
        if not isinstance(data, dict):
            raise WithingsDecodeError("Withings response is not a JSON object")

        status = data.get("status", 0)
        if status != 0:
            raise WithingsAPIError(
                f"Withings API error: {data.get('error')}", status=status
            )
        return data

    @staticmethod
    def _parse(model: Type[PayloadT], data: Dict[str, Any]) -> PayloadT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise WithingsDecodeError(f"Unexpected Withings payload: {exc}") from exc


def create_withings_api_client(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> WithingsPort:
    """Create a Withings client bound to an existing HTTP client."""
    return WithingsAPIClient(http_client=http_client, settings=settings)
