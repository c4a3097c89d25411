"""
Auth module — token and username/password credentials.

A Token is used as-is. A Login is exchanged for an access token via
POST /auth/login.
"""

from typing import Union

from pydantic import BaseModel, Field

from writefreely.errors import AuthenticationError, RequestError
from writefreely.models.users import LoginRequest, LoginResponse
from writefreely.transport.http import HttpClient

# Statuses the login endpoint uses for bad or unknown credentials.
REJECTED_LOGIN_STATUSES = {400, 401, 403, 404}


class Token(BaseModel):
    token: str = Field(repr=False)

    def __init__(self, token: str, **data):
        super().__init__(token=token, **data)


class Login(BaseModel):
    username: str
    password: str = Field(repr=False)

    def __init__(self, username: str, password: str, **data):
        super().__init__(username=username, password=password, **data)


Credentials = Union[Token, Login]


async def exchange_login(http: HttpClient, login: Login) -> LoginResponse:
    """Trade a username/password pair for an access token."""
    try:
        return await http.post(
            "/auth/login",
            LoginResponse,
            LoginRequest(alias=login.username, password=login.password),
        )
    except RequestError as e:
        if e.status in REJECTED_LOGIN_STATUSES:
            raise AuthenticationError(f"Login rejected for {login.username!r}: {e}") from e
        raise
