"""
Post models — the Post handle plus creation and update drafts.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from pydantic import Field

from writefreely.models.base import ClientBound

if TYPE_CHECKING:
    from writefreely.models.collections import Collection, MoveResult


class PostAppearance(str, Enum):
    """Post font. Older servers report `norm` for serif."""
    SANS = "sans"
    SERIF = "serif"
    WRAP = "wrap"
    MONO = "mono"
    CODE = "code"

    @classmethod
    def _missing_(cls, value: object) -> Optional["PostAppearance"]:
        if value == "norm":
            return cls.SERIF
        return None


class PostUpdate(ClientBound):
    """Pending update to a Post. Build one with `Post.build_update()`."""
    id: str = Field(exclude=True)
    token: Optional[str] = None     # needed when the post isn't owned
    body: str
    title: Optional[str] = None
    font: Optional[PostAppearance] = None
    lang: Optional[str] = None
    rtl: Optional[bool] = None

    async def submit(self) -> "Post":
        client = self._require_client()
        post = await client.api().post(f"/posts/{self.id}", Post, self)
        return post._with_client(client)


class PostCreation(ClientBound):
    """Draft of a new post. `collection` selects the target blog by alias."""
    collection: Optional[str] = Field(default=None, exclude=True)
    body: str
    title: Optional[str] = None
    font: Optional[PostAppearance] = None
    lang: Optional[str] = None
    rtl: Optional[bool] = None
    created: Optional[datetime] = None

    async def publish(self) -> "Post":
        client = self._require_client()
        return await client.posts().publish(self)


class Post(ClientBound):
    id: str
    slug: Optional[str] = None
    appearance: Optional[PostAppearance] = None
    language: Optional[str] = None
    rtl: bool = False
    created: Optional[datetime] = None
    title: Optional[str] = None
    body: str
    tags: list[str] = Field(default_factory=list)
    views: Optional[int] = None
    collection: Optional["Collection"] = None
    token: Optional[str] = None

    def _with_client(self, client: Any) -> "Post":
        super()._with_client(client)
        if self.collection is not None and self.collection.client is None:
            self.collection._with_client(client)
        return self

    def build_update(self, body: str) -> PostUpdate:
        """Start an update of this post with a new body; set other fields before `submit()`."""
        update = PostUpdate(id=self.id, body=body, rtl=self.rtl)
        if self._client is not None:
            update._with_client(self._client)
        return update

    async def update(self, update: PostUpdate) -> "Post":
        client = self._require_client()
        post = await client.api().post(f"/posts/{self.id}", Post, update)
        return post._with_client(client)

    async def delete(self) -> None:
        """Delete this post.

        Anonymous clients authorize with the post's own token, sent as the
        `token` query parameter.
        """
        client = self._require_client()
        params = None
        if not client.is_authenticated and self.token is not None:
            params = {"token": self.token}
        await client.api().delete(f"/posts/{self.id}", params=params)

    async def move_to(self, collection: str) -> "MoveResult":
        """Move this post into the collection with alias `collection`.

        Two requests: the collection lookup, then the move. A failed move does
        not undo anything.
        """
        from writefreely.models.collections import MovePost

        client = self._require_client()
        target = await client.collections().get(collection)
        if client.is_authenticated:
            item = MovePost(id=self.id)
        else:
            item = MovePost(id=self.id, token=self.token)
        results = await target.take_posts([item])
        return results[0]


# Post.collection needs Collection, whose module imports Post; it rebuilds Post on import.
import writefreely.models.collections  # noqa: E402,F401
