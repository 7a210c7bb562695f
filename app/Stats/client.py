"""
Activision Stats Client

Thin async client for the Call of Duty stats API used by the bot.

Features:
    - Cookie based login with e-mail and password
    - Modern Warfare / Warzone profile lookup per platform
    - Sliding window rate limiting of every outbound request
    - Provider errors surfaced as StatsProviderError

Dependencies:
    - httpx: async HTTP client
    - loguru: structured logging
"""

import asyncio
import collections
from typing import Any, Deque, Dict, Optional
from urllib.parse import quote

import httpx
from loguru import logger

from .errors import AuthenticationError, StatsProviderError
from .platforms import Platform, resolve_platform

LOGIN_PAGE_URL = "https://profile.callofduty.com/cod/login"
LOGIN_POST_URL = "https://profile.callofduty.com/do_login?new_SiteId=cod"
API_BASE_URL = "https://my.callofduty.com/api/papi-client/"
API_VERSION = "v1"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": "no-cache",
    "User-Agent": "cod-stats-bot",
}


class RateLimiter:
    """Allow at most `max_requests` acquisitions in any `period` second window"""

    def __init__(self, max_requests: int = 2, period: float = 1.0):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        self.max_requests = max_requests
        self.period = period
        self._timestamps: Deque[float] = collections.deque()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            loop = asyncio.get_running_loop()
            while True:
                now = loop.time()
                while self._timestamps and now - self._timestamps[0] >= self.period:
                    self._timestamps.popleft()
                if len(self._timestamps) < self.max_requests:
                    self._timestamps.append(now)
                    return
                await asyncio.sleep(self.period - (now - self._timestamps[0]))

    async def __aenter__(self) -> "RateLimiter":
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


class StatsClient:
    """Authenticated session against the Activision stats API"""

    def __init__(self, max_requests: int = 2, period: float = 1.0,
                 http_client: Optional[httpx.AsyncClient] = None):
        self._http = http_client or httpx.AsyncClient(headers=DEFAULT_HEADERS)
        self._limiter = RateLimiter(max_requests, period)
        self._logged_in = False

    @property
    def logged_in(self) -> bool:
        return self._logged_in

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        async with self._limiter:
            try:
                return await self._http.request(method, url, **kwargs)
            except httpx.RequestError as e:
                raise StatsProviderError(f"request to {e.request.url} failed: {e}") from e

    async def login(self, email: str, password: str) -> None:
        """
        Log in to Activision and install the auth headers on the session.

        Args:
            email: Activision account e-mail
            password: Activision account password

        Raises:
            AuthenticationError: credentials rejected or login flow changed
        """
        logger.info("Logging in to Activision...")
        await self._request("GET", LOGIN_PAGE_URL)
        xsrf_token = self._http.cookies.get("XSRF-TOKEN")
        if not xsrf_token:
            raise AuthenticationError("could not obtain XSRF token from login page")

        response = await self._request(
            "POST",
            LOGIN_POST_URL,
            data={
                "username": email,
                "password": password,
                "remember_me": "true",
                "_csrf": xsrf_token,
            },
        )
        sso_cookie = self._http.cookies.get("ACT_SSO_COOKIE")
        if not sso_cookie:
            raise AuthenticationError(f"login rejected (HTTP {response.status_code})")

        self._http.headers.update({
            "X-XSRF-TOKEN": xsrf_token,
            "X-CSRF-TOKEN": xsrf_token,
            "Atvi-Auth": sso_cookie,
            "ACT_SSO_COOKIE": sso_cookie,
            "atkn": self._http.cookies.get("atkn") or "",
        })
        self._logged_in = True
        logger.success("Logged in to Activision")

    async def fetch_stats(self, handle: str, platform: str) -> Dict[str, Any]:
        """
        Fetch the Modern Warfare / Warzone profile document of a player.

        Args:
            handle: player name on the platform (battle tags keep their '#')
            platform: shorthand token ('battle', 'psn', 'xbl', anything else means all)

        Returns:
            The provider's stats document, unwrapped from its response envelope
        """
        if not self._logged_in:
            raise AuthenticationError("stats client is not logged in")

        resolved = resolve_platform(platform)
        url = self._profile_url(handle, resolved)
        logger.debug(f"Fetching stats for {handle} on {resolved.value}")

        response = await self._request("GET", url)
        if response.is_error:
            raise StatsProviderError(f"stats API returned HTTP {response.status_code} for {handle}")

        try:
            body = response.json()
        except ValueError as e:
            raise StatsProviderError(f"stats API returned invalid JSON for {handle}") from e

        if not isinstance(body, dict):
            raise StatsProviderError(f"stats API returned an unexpected payload for {handle}")

        data = body.get("data")
        if body.get("status") != "success":
            message = data.get("message") if isinstance(data, dict) else None
            raise StatsProviderError(message or f"stats API returned an error for {handle}")
        if not isinstance(data, dict):
            raise StatsProviderError(f"stats API returned no data for {handle}")
        return data

    @staticmethod
    def _profile_url(handle: str, platform: Platform) -> str:
        return (
            f"{API_BASE_URL}stats/cod/{API_VERSION}/title/mw/platform/{platform.value}"
            f"/gamer/{quote(handle, safe='')}/profile/type/wz"
        )

    async def close(self) -> None:
        await self._http.aclose()
