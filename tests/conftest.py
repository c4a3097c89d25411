"""Shared fixtures — an in-process fake WriteFreely server on httpx.MockTransport."""

import json
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from writefreely import Client

BASE_URL = "http://example.test:8080"

Handler = Callable[[httpx.Request], httpx.Response]


def envelope(data: Any, code: int = 200) -> httpx.Response:
    return httpx.Response(code, json={"code": code, "data": data})


class FakeServer:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Union[httpx.Response, Handler]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, response: Union[httpx.Response, Handler]) -> None:
        self.routes[(method, path)] = response

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"code": 404, "error_msg": "Not found"})
        if callable(route):
            return route(request)
        return route

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def client(self, token: Optional[str] = None) -> Client:
        return Client(BASE_URL, token=token, transport=self.transport)

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


def post_data(id: str = "42", body: str = "hi", **extra: Any) -> dict[str, Any]:
    data = {
        "id": id,
        "slug": None,
        "appearance": "norm",
        "language": "en",
        "rtl": False,
        "created": "2024-03-01T12:00:00Z",
        "title": None,
        "body": body,
        "tags": [],
        "views": 0,
    }
    data.update(extra)
    return data


def collection_data(alias: str = "blog", **extra: Any) -> dict[str, Any]:
    data = {
        "alias": alias,
        "title": "My Blog",
        "description": "",
        "style_sheet": "",
        "public": True,
        "views": 10,
        "total_posts": 2,
    }
    data.update(extra)
    return data
