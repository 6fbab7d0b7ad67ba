"""Asynchronous HTTP client for profile pages and relays."""
import logging
from typing import Any, Dict, Optional
import httpx

from config import settings
from domain.entities import Deadline
from domain.enums import FailureReason

logger = logging.getLogger(__name__)


class PageClient:
    """Thin wrapper over a shared httpx.AsyncClient.

    Every call is bounded by the caller's Deadline; transport errors are
    raised as httpx exceptions and classified by ``failure_for``. An owned
    session is opened on first use when the client was never entered.
    """

    def __init__(
        self,
        session: Optional[httpx.AsyncClient] = None,
        *,
        user_agent: str = settings.USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.user_agent = user_agent
        self._transport = transport
        self._owns_session = session is None
        self.last_status_code: Optional[int] = None

    async def __aenter__(self):
        self._ensure_session()
        return self

    def _ensure_session(self) -> httpx.AsyncClient:
        if self.session is None:
            self.session = httpx.AsyncClient(follow_redirects=True, transport=self._transport)
            self._owns_session = True
        return self.session

    async def __aexit__(self, *_):
        await self.aclose()

    async def aclose(self) -> None:
        if self.session and self._owns_session:
            await self.session.aclose()
            self.session = None

    def browser_headers(self, **extra: str) -> Dict[str, str]:
        headers = {"User-Agent": self.user_agent, "Accept": settings.ACCEPT}
        headers.update(extra)
        return headers

    async def get(
        self,
        url: str,
        deadline: Deadline,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        return await self._request("GET", url, deadline, headers=headers or self.browser_headers())

    async def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        deadline: Deadline,
    ) -> httpx.Response:
        return await self._request(
            "POST", url, deadline,
            headers={"Content-Type": "application/json"},
            json=payload,
        )

    async def _request(self, method: str, url: str, deadline: Deadline, **kwargs: Any) -> httpx.Response:
        session = self._ensure_session()
        remaining = deadline.remaining()
        if remaining <= 0:
            raise httpx.TimeoutException(f"deadline passed before {method} {url}")
        response = await session.request(method, url, timeout=remaining, **kwargs)
        self.last_status_code = response.status_code
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response


def failure_for(exc: BaseException) -> FailureReason:
    """Map a transport-level exception to a FailureReason."""
    if isinstance(exc, httpx.TimeoutException):
        return FailureReason.TIMEOUT
    if isinstance(exc, httpx.InvalidURL):
        return FailureReason.MALFORMED_SOURCE_URL
    if isinstance(exc, httpx.HTTPError):
        return FailureReason.NETWORK_FAILURE
    return FailureReason.UNEXPECTED_ERROR
