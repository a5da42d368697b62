"""Shared test fixtures and doubles."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any, Dict

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from withings_exporter.main import create_app
from withings_exporter.metrics import WeightMetrics
from withings_exporter.models.withings import WeightReading
from withings_exporter.settings import Settings, get_settings
from withings_exporter.withings.application.ports import WithingsPort

WITHINGS_ENV_VARS = (
    "WITHINGS_API_ACCESS_TOKEN",
    "WITHINGS_APP_CLIENT_ID",
    "WITHINGS_APP_CLIENT_SECRET",
    "WBSAPI_URL",
    "METRICS_HOST",
    "METRICS_PORT",
    "LOG_LEVEL",
)


@dataclass
class _Expectation:
    expected: Dict[str, Any]
    returns: Any = None
    raises: Exception | None = None


class WithingsPortFake(WithingsPort):
    """Fake Withings port exposing expectation helpers."""

    def __init__(self) -> None:
        self._expected_token: list[_Expectation] = []
        self._expected_fetch: list[_Expectation] = []
        self.requested_codes: list[str] = []
        self.fetched_with: list[str] = []

    def expect_request_token(
        self, code: str | None = None, *, returns: str | None = None, raises: Exception | None = None
    ) -> "WithingsPortFake":
        self._expected_token.append(_Expectation({"code": code}, returns, raises))
        return self

    def expect_fetch_latest_weight(
        self,
        access_token: str | None = None,
        *,
        returns: WeightReading | None = None,
        raises: Exception | None = None,
    ) -> "WithingsPortFake":
        self._expected_fetch.append(
            _Expectation({"access_token": access_token}, returns, raises)
        )
        return self

    def assert_token_not_requested(self) -> None:
        assert not self.requested_codes, (
            f"request_token() was called with {self.requested_codes!r}"
        )

    def assert_last_fetch(self, access_token: str) -> None:
        assert self.fetched_with, "fetch_latest_weight() was not called"
        assert (
            self.fetched_with[-1] == access_token
        ), f"Expected fetch with {access_token!r}, saw {self.fetched_with[-1]!r}"

    def authorization_url(self) -> str:
        return "https://account.example.com/authorize?client_id=withings-client"

    async def request_token(self, code: str) -> str:
        self.requested_codes.append(code)
        if self._expected_token:
            expectation = self._expected_token.pop(0)
            expected_code = expectation.expected.get("code")
            if expected_code is not None and expected_code != code:
                raise AssertionError(
                    f"Expected request_token({expected_code!r}) but got {code!r}"
                )
            if expectation.raises:
                raise expectation.raises
            if expectation.returns is not None:
                return expectation.returns
        return ""

    async def fetch_latest_weight(self, access_token: str) -> WeightReading:
        self.fetched_with.append(access_token)
        if self._expected_fetch:
            expectation = self._expected_fetch.pop(0)
            expected_token = expectation.expected.get("access_token")
            if expected_token is not None and expected_token != access_token:
                raise AssertionError(
                    f"Expected fetch_latest_weight({expected_token!r}) but got {access_token!r}"
                )
            if expectation.raises:
                raise expectation.raises
            if expectation.returns is not None:
                return expectation.returns
        return WeightReading(weight_kg=0.0)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's shell variables out of the settings under test."""

    for name in WITHINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        _env_file=None,
        withings_api_access_token=None,
        withings_app_client_id="withings-client",
        withings_app_client_secret="withings-secret",
        wbsapi_url="https://wbs.example.com",
    )


@pytest.fixture
def withings_port_fake() -> WithingsPortFake:
    return WithingsPortFake()


@pytest.fixture
def weight_metrics() -> WeightMetrics:
    return WeightMetrics()


@pytest.fixture
def app(weight_metrics: WeightMetrics) -> FastAPI:
    """Scrape application bound to a fresh registry."""

    return create_app(weight_metrics)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
