"""
Top-level handlers — operations that don't start from an existing Post or Collection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from writefreely.errors import LoggedOutError, UsageError, WriteFreelyError
from writefreely.models.collections import Collection
from writefreely.models.posts import Post, PostCreation
from writefreely.models.users import User

if TYPE_CHECKING:
    from writefreely.client import Client

logger = logging.getLogger(__name__)


class UserHandler:
    """Authenticated-user operations. Build with `await UserHandler.load(client)`."""

    def __init__(self, client: Client, current: Optional[User] = None):
        self._client = client
        self._current = current

    @classmethod
    async def load(cls, client: Client) -> UserHandler:
        """Create a handler, preloading GET /me when authenticated.

        A failing /me request is logged and leaves `info()` empty.
        """
        current = None
        if client.is_authenticated:
            try:
                current = await client.api().get("/me", User)
            except WriteFreelyError as e:
                logger.warning("Could not load current user from %s: %s", client.base_url, e)
        return cls(client, current)

    def info(self) -> Optional[User]:
        return self._current

    def _require_auth(self) -> None:
        if not self._client.is_authenticated:
            raise LoggedOutError()

    async def posts(self) -> list[Post]:
        """All posts of the authenticated user — GET /me/posts"""
        self._require_auth()
        posts = await self._client.api().get("/me/posts", list[Post])
        return [p._with_client(self._client) for p in posts]

    async def post(self, id: str) -> Post:
        self._require_auth()
        post = await self._client.api().get(f"/posts/{id}", Post)
        return post._with_client(self._client)

    async def collections(self) -> list[Collection]:
        """All collections of the authenticated user — GET /me/collections"""
        self._require_auth()
        collections = await self._client.api().get("/me/collections", list[Collection])
        return [c._with_client(self._client) for c in collections]

    async def collection(self, alias: str) -> Collection:
        self._require_auth()
        collection = await self._client.api().get(f"/collections/{alias}", Collection)
        return collection._with_client(self._client)


class PostHandler:
    def __init__(self, client: Client):
        self._client = client

    async def get(self, id: str) -> Post:
        post = await self._client.api().get(f"/posts/{id}", Post)
        return post._with_client(self._client)

    def create(self, body: str) -> PostCreation:
        """Start a draft with `body`; fill in title, collection etc. before publishing."""
        draft = PostCreation(body=body)
        draft._with_client(self._client)
        return draft

    async def publish(self, draft: PostCreation) -> Post:
        """POST the draft to /collections/{alias}/post when it names a collection, else /posts."""
        if draft.collection:
            endpoint = f"/collections/{draft.collection}/post"
        else:
            endpoint = "/posts"
        post = await self._client.api().post(endpoint, Post, draft)
        return post._with_client(self._client)


class CollectionParameters(BaseModel):
    alias: Optional[str] = None
    title: Optional[str] = None


class CollectionHandler:
    def __init__(self, client: Client):
        self._client = client

    async def create(self, alias: Optional[str] = None, title: Optional[str] = None) -> Collection:
        """Create a collection. At least one of `alias` and `title` is required."""
        if not alias and not title:
            raise UsageError("Collection needs an alias or a title")
        if not self._client.is_authenticated:
            raise LoggedOutError()
        collection = await self._client.api().post(
            "/collections", Collection, CollectionParameters(alias=alias, title=title),
        )
        return collection._with_client(self._client)

    async def get(self, alias: str) -> Collection:
        collection = await self._client.api().get(f"/collections/{alias}", Collection)
        return collection._with_client(self._client)
