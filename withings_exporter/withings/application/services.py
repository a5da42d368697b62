"""Application services orchestrating the token and measurement flows."""

from __future__ import annotations

import logging
from typing import Callable

from ...errors import MissingCredentialsError
from ...models.withings import WeightReading
from ...settings import Settings
from .ports import WithingsPort

logger = logging.getLogger(__name__)

CodeReader = Callable[[str], str]
Printer = Callable[[str], None]


async def obtain_access_token(
    settings: Settings,
    port: WithingsPort,
    read_code: CodeReader,
    echo: Printer,
) -> str:
    """Return the configured access token or run the authorization-code flow.

    When ``WITHINGS_API_ACCESS_TOKEN`` is set it is returned as-is and the
    port is never touched. Otherwise the user is sent to the Withings consent
    page, the code they paste back is exchanged for a token, and a shell
    export line is printed so the next start can skip the dance.
    """

    if settings.withings_api_access_token:
        logger.info("Using the configured Withings access token")
        return settings.withings_api_access_token

    if not settings.has_credentials:
        raise MissingCredentialsError(
            "Set your Withings API application up with `WITHINGS_APP_CLIENT_ID` "
            "and `WITHINGS_APP_CLIENT_SECRET` envvars."
        )

    echo(f"Go to {port.authorization_url()}")
    code = read_code("Enter the value of `code` from the returned query string").strip()

    access_token = await port.request_token(code)
    logger.info("Obtained a Withings access token")
    echo(
        "To avoid reauthenticating every time, run "
        f"`export WITHINGS_API_ACCESS_TOKEN={access_token}`"
    )
    return access_token


async def fetch_current_weight(port: WithingsPort, access_token: str) -> WeightReading:
    reading = await port.fetch_latest_weight(access_token)
    logger.info("Fetched Withings weight measurement taken at %s", reading.measured_at)
    return reading
