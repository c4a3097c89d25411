"""
Client — the session value every API operation starts from.

A Client holds the server base URL and an optional access token. It is never
changed in place: `authenticate()` and `logout()` return a new Client, and
handles fetched through an older Client keep using that older snapshot.
"""

import logging
from typing import Optional

import httpx

from writefreely.auth import Credentials, Login, Token, exchange_login
from writefreely.errors import LoggedOutError, UsageError
from writefreely.handlers import CollectionHandler, PostHandler, UserHandler
from writefreely.transport.http import DEFAULT_BASE_URL, HttpClient

logger = logging.getLogger(__name__)


class Client:
    __slots__ = ("_base_url", "_token", "_transport")

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        self._token = token
        self._transport = transport

    def __repr__(self) -> str:
        return f"Client(base_url={self._base_url!r}, authenticated={self.is_authenticated})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def _replace(self, token: Optional[str]) -> "Client":
        return Client(base_url=self._base_url, token=token, transport=self._transport)

    def api(self) -> HttpClient:
        """Request executor bound to this client's URL and token."""
        return HttpClient(base_url=self._base_url, token=self._token, transport=self._transport)

    async def authenticate(self, credentials: Credentials) -> "Client":
        """Return a new Client authenticated with a Token or a Login."""
        if isinstance(credentials, Token):
            return self._replace(credentials.token)
        if isinstance(credentials, Login):
            result = await exchange_login(self.api(), credentials)
            logger.info("Logged in to %s as %s", self._base_url, credentials.username)
            return self._replace(result.access_token)
        raise UsageError(f"Unsupported credentials type: {type(credentials).__name__}")

    async def logout(self) -> "Client":
        """Revoke the current token (DELETE /auth/me) and return a logged-out Client."""
        if not self.is_authenticated:
            raise LoggedOutError("Cannot log out: client has no token")
        await self.api().delete("/auth/me")
        logger.info("Logged out of %s", self._base_url)
        return self._replace(None)

    async def user(self) -> UserHandler:
        if not self.is_authenticated:
            raise LoggedOutError()
        return await UserHandler.load(self)

    def posts(self) -> PostHandler:
        return PostHandler(self)

    def collections(self) -> CollectionHandler:
        return CollectionHandler(self)
