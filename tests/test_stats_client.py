"""Tests for the Activision stats client, using httpx.MockTransport"""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from Stats import (
    AuthenticationError,
    Platform,
    RateLimiter,
    StatsClient,
    StatsProviderError,
    resolve_platform,
)
from fixtures import sample_stats_document


def login_handler(request: httpx.Request):
    """Fake Activision login endpoints; returns None for other URLs"""
    if request.url.path == "/cod/login":
        return httpx.Response(200, headers={"set-cookie": "XSRF-TOKEN=xsrf123; Path=/"})
    if request.url.path == "/do_login":
        form = parse_qs(request.content.decode())
        if form.get("password") != ["secret"]:
            return httpx.Response(200, text="bad credentials")
        assert form["username"] == ["me@example.com"]
        assert form["_csrf"] == ["xsrf123"]
        return httpx.Response(302, headers=[
            ("set-cookie", "ACT_SSO_COOKIE=sso456; Path=/"),
            ("set-cookie", "atkn=tok789; Path=/"),
            ("location", "https://profile.callofduty.com/cod/login_succeeded"),
        ])
    return None


def make_client(stats_handler=None):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        response = login_handler(request)
        if response is not None:
            return response
        return stats_handler(request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return StatsClient(max_requests=100, period=1.0, http_client=http_client), requests


def success(document):
    return httpx.Response(200, json={"status": "success", "data": document})


@pytest.mark.parametrize("token, platform", [
    ("battle", Platform.BATTLE),
    ("psn", Platform.PSN),
    ("xbl", Platform.XBL),
    ("all", Platform.ALL),
    ("steam", Platform.ALL),
    ("", Platform.ALL),
    ("PSN", Platform.ALL),
])
def test_resolve_platform(token, platform):
    assert resolve_platform(token) is platform


def test_login_installs_auth_headers():
    document = sample_stats_document()
    client, requests = make_client(lambda request: success(document))

    async def scenario():
        await client.login("me@example.com", "secret")
        result = await client.fetch_stats("Player#1234", "battle")
        await client.close()
        return result

    assert asyncio.run(scenario()) == document
    assert client.logged_in

    stats_request = requests[-1]
    assert stats_request.url.host == "my.callofduty.com"
    assert stats_request.url.raw_path == (
        b"/api/papi-client/stats/cod/v1/title/mw/platform/battle/gamer/Player%231234/profile/type/wz"
    )
    assert stats_request.headers["Atvi-Auth"] == "sso456"
    assert stats_request.headers["ACT_SSO_COOKIE"] == "sso456"
    assert stats_request.headers["X-XSRF-TOKEN"] == "xsrf123"
    assert stats_request.headers["atkn"] == "tok789"


def test_unknown_platform_queries_all():
    client, requests = make_client(lambda request: success(sample_stats_document()))

    async def scenario():
        await client.login("me@example.com", "secret")
        await client.fetch_stats("someone", "steam")

    asyncio.run(scenario())
    assert b"/platform/all/gamer/someone/" in requests[-1].url.raw_path


def test_login_rejected():
    client, _ = make_client()
    with pytest.raises(AuthenticationError):
        asyncio.run(client.login("me@example.com", "wrong"))
    assert not client.logged_in


def test_fetch_before_login_fails_without_request():
    client, requests = make_client(lambda request: success({}))
    with pytest.raises(AuthenticationError):
        asyncio.run(client.fetch_stats("p1", "battle"))
    assert requests == []


def logged_in_fetch(stats_handler, handle="p1"):
    client, _ = make_client(stats_handler)

    async def scenario():
        await client.login("me@example.com", "secret")
        return await client.fetch_stats(handle, "psn")

    return asyncio.run(scenario())


def test_provider_error_envelope():
    def handler(request):
        return httpx.Response(200, json={"status": "error", "data": {"message": "Not permitted: user not found"}})

    with pytest.raises(StatsProviderError, match="user not found"):
        logged_in_fetch(handler)


def test_http_error_status():
    with pytest.raises(StatsProviderError, match="HTTP 500"):
        logged_in_fetch(lambda request: httpx.Response(500, text="oops"))


def test_invalid_json():
    with pytest.raises(StatsProviderError, match="invalid JSON"):
        logged_in_fetch(lambda request: httpx.Response(200, text="<html>"))


def test_network_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StatsProviderError, match="connection refused"):
        logged_in_fetch(handler)


def test_rate_limiter_spaces_requests():
    limiter = RateLimiter(max_requests=2, period=0.2)

    async def scenario():
        loop = asyncio.get_running_loop()
        times = []
        for _ in range(3):
            async with limiter:
                times.append(loop.time())
        return times

    times = asyncio.run(scenario())
    assert times[1] - times[0] < 0.1
    assert times[2] - times[0] >= 0.19


def test_rate_limiter_rejects_zero_budget():
    with pytest.raises(ValueError):
        RateLimiter(max_requests=0)
