"""
REST HTTP executor for the WriteFreely API.

Composes `<base>/api<endpoint>`, attaches `Authorization: Token <token>` when
a token is known, sends JSON and unwraps the `{code, data}` response envelope.
"""

import logging
from typing import Any, Optional

import httpx

from writefreely.errors import ConnectionError, RequestError, UrlError
from writefreely.transport.envelope import build_body, parse_envelope

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://write.as"
API_PREFIX = "/api"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "writefreely-py/0.1.0"


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        self._token = token
        self._transport = transport

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def url(self, endpoint: str) -> str:
        """Assemble the full API URL for an endpoint such as `/posts/42`."""
        try:
            parsed = httpx.URL(self._base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise UrlError(f"Invalid base URL {self._base_url!r}: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise UrlError(f"Base URL must be an absolute http(s) URL, got {self._base_url!r}")
        return f"{self._base_url.rstrip('/')}{API_PREFIX}{endpoint}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self._token is not None:
            headers["Authorization"] = f"Token {self._token}"
        return headers

    async def _send(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        url = self.url(endpoint)
        payload = build_body(body)
        if logger.isEnabledFor(logging.DEBUG):
            redacted = {k: ("<redacted>" if k == "token" else v) for k, v in (params or {}).items()}
            logger.debug("HTTP request: %s %s params=%s authenticated=%s",
                         method, url, redacted, self.is_authenticated)
        try:
            async with httpx.AsyncClient(
                headers=self._headers(),
                timeout=DEFAULT_TIMEOUT,
                transport=self._transport,
            ) as client:
                resp = await client.request(method, url, json=payload, params=params)
        except httpx.InvalidURL as e:
            raise UrlError(f"Invalid request URL {url!r}: {e}") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"{method} {url} failed: {e!r}") from e

        logger.debug("HTTP response: %s %s -> %s", method, url, resp.status_code)
        if not resp.is_success:
            raise RequestError(resp.status_code, _reason(resp))
        return resp

    async def get(self, endpoint: str, target: Any, params: Optional[dict[str, str]] = None) -> Any:
        resp = await self._send("GET", endpoint, params=params)
        return parse_envelope(resp.text, target)

    async def post(
        self,
        endpoint: str,
        target: Any,
        body: Any = None,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        resp = await self._send("POST", endpoint, body=body, params=params)
        return parse_envelope(resp.text, target)

    async def delete(self, endpoint: str, params: Optional[dict[str, str]] = None) -> None:
        """DELETE an endpoint. The response body, if any, is not unwrapped."""
        await self._send("DELETE", endpoint, params=params)


def _reason(resp: httpx.Response) -> str:
    reason = resp.reason_phrase or ""
    excerpt = resp.text[:200]
    if excerpt:
        return f"{reason}: {excerpt}" if reason else excerpt
    return reason
