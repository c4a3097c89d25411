"""
Collection (blog) models and the batch collect / pin / unpin operations.

Batch endpoints answer with one result per submitted item, in request order.
Results carry no type field: a success is `{code, post}` (collect) or
`{code, id}` (pin/unpin), a failure is `{code, error_msg}`. Items are decoded
as the success shape first and fall back to the failure shape, so a future
payload that satisfies both would be read as a success.
"""

from enum import IntEnum
from typing import Annotated, Any, ClassVar, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from writefreely.errors import UnknownError, UsageError
from writefreely.models.base import ClientBound
from writefreely.models.posts import Post


class CollectionVisibility(IntEnum):
    UNLISTED = 0
    PUBLIC = 1
    PRIVATE = 2
    PASSWORD = 4


class MovePost(BaseModel):
    """A post to move into a collection. `token` is required for posts you don't own."""
    id: str
    token: Optional[str] = None


class PinPost(BaseModel):
    id: str
    position: Optional[int] = None  # not used by unpin


class MoveSuccess(BaseModel):
    ok: ClassVar[bool] = True
    code: int
    post: Post


class MoveError(BaseModel):
    ok: ClassVar[bool] = False
    code: int
    error_msg: str


class PinSuccess(BaseModel):
    ok: ClassVar[bool] = True
    code: int
    id: str


class PinError(BaseModel):
    ok: ClassVar[bool] = False
    code: int
    error_msg: str


MoveResult = Annotated[Union[MoveSuccess, MoveError], Field(union_mode="left_to_right")]
PinResult = Annotated[Union[PinSuccess, PinError], Field(union_mode="left_to_right")]


class CollectionUpdate(ClientBound):
    """Pending update to a Collection. Build one with `Collection.build_update()`."""
    alias: Optional[str] = Field(default=None, exclude=True)
    title: Optional[str] = None
    description: Optional[str] = None
    style_sheet: Optional[str] = None
    script: Optional[str] = None    # Write.as only
    visibility: Optional[CollectionVisibility] = None
    password: Optional[str] = Field(default=None, alias="pass", repr=False)
    mathjax: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True)

    async def submit(self) -> "Collection":
        client = self._require_client()
        if not self.alias:
            raise UsageError("CollectionUpdate needs the alias of the collection to update")
        collection = await client.api().post(f"/collections/{self.alias}", Collection, self)
        return collection._with_client(client)


class Collection(ClientBound):
    alias: str
    title: str
    description: Optional[str] = None
    style_sheet: Optional[str] = None
    public: bool = False
    views: Optional[int] = None
    verification_link: Optional[str] = None
    total_posts: Optional[int] = None

    def build_update(self) -> CollectionUpdate:
        update = CollectionUpdate(alias=self.alias)
        if self._client is not None:
            update._with_client(self._client)
        return update

    async def update(self, update: CollectionUpdate) -> "Collection":
        client = self._require_client()
        collection = await client.api().post(f"/collections/{self.alias}", Collection, update)
        return collection._with_client(client)

    async def delete(self) -> None:
        client = self._require_client()
        await client.api().delete(f"/collections/{self.alias}")

    async def get_posts(self) -> list[Post]:
        client = self._require_client()
        posts = await client.api().get(f"/collections/{self.alias}/posts", list[Post])
        return [p._with_client(client) for p in posts]

    async def get_post(self, slug: str) -> Post:
        client = self._require_client()
        post = await client.api().get(f"/collections/{self.alias}/posts/{slug}", Post)
        return post._with_client(client)

    async def take_posts(self, posts: Sequence[MovePost]) -> list[Union[MoveSuccess, MoveError]]:
        """Move posts into this collection. Returns one MoveSuccess/MoveError per item."""
        client = self._require_client()
        results = await self._batch(client, "collect", list(posts), list[MoveResult])
        for result in results:
            if isinstance(result, MoveSuccess):
                result.post._with_client(client)
        return results

    async def pin_posts(self, posts: Sequence[PinPost]) -> list[Union[PinSuccess, PinError]]:
        """Pin posts to this collection. Returns one PinSuccess/PinError per item."""
        client = self._require_client()
        return await self._batch(client, "pin", list(posts), list[PinResult])

    async def unpin_posts(self, ids: Sequence[str]) -> list[Union[PinSuccess, PinError]]:
        """Unpin posts by ID. Returns one PinSuccess/PinError per item."""
        client = self._require_client()
        return await self._batch(client, "unpin", [PinPost(id=i) for i in ids], list[PinResult])

    async def _batch(self, client: Any, action: str, items: list[BaseModel], target: Any) -> list[Any]:
        results = await client.api().post(f"/collections/{self.alias}/{action}", target, items)
        if len(results) != len(items):
            raise UnknownError(
                f"/collections/{self.alias}/{action} returned {len(results)} results for {len(items)} items"
            )
        return results


# Post.collection refers to Collection; resolve it now that both exist.
Post.model_rebuild()
MoveSuccess.model_rebuild()
