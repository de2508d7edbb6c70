from __future__ import annotations

import aiohttp
import pytest

from ipview.config import IP_ECHO_URL
from ipview.ip_resolver import resolve_ip_address


@pytest.mark.asyncio
async def test_override_skips_echo_service(fake_http):
    ip_address = await resolve_ip_address("8.8.8.8")

    assert ip_address == "8.8.8.8"
    assert fake_http.requested == []


@pytest.mark.asyncio
async def test_override_is_not_validated(fake_http):
    assert await resolve_ip_address("not an ip") == "not an ip"
    assert fake_http.requested == []


@pytest.mark.asyncio
@pytest.mark.parametrize("override", [None, ""])
async def test_missing_override_asks_echo_service(fake_http, override):
    fake_http.add(IP_ECHO_URL, {"ip": "198.51.100.4"})

    assert await resolve_ip_address(override) == "198.51.100.4"
    assert fake_http.requested == [IP_ECHO_URL]


@pytest.mark.asyncio
async def test_echo_failure_propagates(fake_http):
    with pytest.raises(aiohttp.ClientError):
        await resolve_ip_address(None)
