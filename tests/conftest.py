"""Shared fixtures: an in-memory stand-in for aiohttp.ClientSession."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

import aiohttp
import pytest


class FakeResponse:
    def __init__(self, url: str, status: int, payload: Any, body: Any = None) -> None:
        self.url = url
        self.status = status
        self._payload = payload
        self._body = body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                aiohttp.RequestInfo(self.url, "GET", {}, self.url),
                (),
                status=self.status,
                message="fake error",
            )

    async def json(self, content_type: Any = "application/json") -> Any:
        if self._body is not None:
            return json.loads(self._body)
        return self._payload

    async def text(self) -> str:
        if self._body is not None:
            return self._body
        return str(self._payload)


class FakeHTTP:
    """Routes GET requests to canned (status, payload) answers and records them."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, Any, Any]] = {}
        self.requested: List[str] = []
        self.timeouts: List[Any] = []

    def add(self, url: str, payload: Any = None, status: int = 200, body: Any = None) -> None:
        """Register an answer; ``body`` is served as raw text instead of JSON."""
        self.routes[url] = (status, payload, body)

    def session_factory(self, *args: Any, **kwargs: Any) -> "FakeSession":
        self.timeouts.append(kwargs.get("timeout"))
        return FakeSession(self)


class FakeSession:
    def __init__(self, http: FakeHTTP) -> None:
        self._http = http

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self._http.requested.append(url)
        if url not in self._http.routes:
            raise aiohttp.ClientConnectionError(f"no route to {url}")
        status, payload, body = self._http.routes[url]
        return FakeResponse(url, status, payload, body)


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch) -> FakeHTTP:
    """Replace aiohttp.ClientSession for the duration of a test."""
    http = FakeHTTP()
    monkeypatch.setattr(aiohttp, "ClientSession", http.session_factory)
    return http


@pytest.fixture
def us_payload() -> Dict[str, Any]:
    return {
        "ip": "8.8.8.8",
        "network": "8.8.8.0/24",
        "version": "IPv4",
        "city": "Mountain View",
        "region": "California",
        "region_code": "CA",
        "country": "US",
        "country_name": "United States",
        "country_code": "US",
        "country_code_iso3": "USA",
        "country_capital": "Washington",
        "country_tld": ".us",
        "continent_code": "NA",
        "in_eu": False,
        "postal": "94043",
        "latitude": 37.42301,
        "longitude": -122.083352,
        "timezone": "America/Los_Angeles",
        "utc_offset": "-0700",
        "country_calling_code": "+1",
        "currency": "USD",
        "currency_name": "Dollar",
        "languages": "en-US,es-US,haw,fr",
        "country_area": 9629091.0,
        "country_population": 327167434,
        "asn": "AS15169",
        "org": "GOOGLE",
    }
