"""Post handles and the post handler: publish, update, delete, move."""

import httpx
import pytest

from writefreely import (
    MoveError,
    MoveSuccess,
    Post,
    PostAppearance,
    PostCreation,
    RequestError,
    UnknownError,
    UsageError,
)

from conftest import collection_data, envelope, post_data


@pytest.mark.asyncio
async def test_publish_anonymous_draft_to_posts(server):
    def echo(request: httpx.Request) -> httpx.Response:
        sent = server.body()
        return envelope(post_data(id="rf3t35fkax0aw", body=sent["body"], title=sent.get("title"),
                                  tags=["python"], token="ozPEuJWYK8L1QsysBUcTUKy9za7yqQ4M"), code=201)

    server.add("POST", "/api/posts", echo)
    client = server.client()

    draft = client.posts().create("Hello #python")
    draft.title = "Greeting"
    draft.font = PostAppearance.SANS
    post = await draft.publish()

    assert server.body() == {"body": "Hello #python", "title": "Greeting", "font": "sans"}
    assert post.body == "Hello #python"
    assert post.title == "Greeting"
    assert post.tags == ["python"]
    assert post.token == "ozPEuJWYK8L1QsysBUcTUKy9za7yqQ4M"
    assert post.client is client


@pytest.mark.asyncio
async def test_publish_into_collection(server):
    server.add("POST", "/api/collections/blog/post", envelope(post_data(id="7", body="in blog"), code=201))
    client = server.client(token="abc")

    draft = client.posts().create("in blog")
    draft.collection = "blog"
    post = await client.posts().publish(draft)

    assert post.id == "7"
    assert server.requests[0].url.path == "/api/collections/blog/post"
    assert "collection" not in server.body()


@pytest.mark.asyncio
async def test_unbound_draft_cannot_publish():
    with pytest.raises(UsageError):
        await PostCreation(body="orphan").publish()


@pytest.mark.asyncio
async def test_unbound_post_operations_fail_with_usage_error():
    post = Post(id="42", body="hi")
    with pytest.raises(UsageError):
        await post.delete()
    with pytest.raises(UsageError):
        await post.update(post.build_update("new"))
    with pytest.raises(UsageError):
        await post.move_to("blog")
    with pytest.raises(UsageError):
        await post.build_update("new").submit()


@pytest.mark.asyncio
async def test_update_returns_fresh_bound_post(server):
    server.add("GET", "/api/posts/42", envelope(post_data()))
    server.add("POST", "/api/posts/42", envelope(post_data(body="updated", title="T", language="de")))
    client = server.client(token="abc")
    post = await client.posts().get("42")

    update = post.build_update("updated")
    update.title = "T"
    update.lang = "de"
    updated = await update.submit()

    assert server.body() == {"body": "updated", "title": "T", "lang": "de", "rtl": False}
    assert updated.body == "updated"
    assert updated.client is client
    assert updated is not post
    assert post.body == "hi"


@pytest.mark.asyncio
async def test_delete_authenticated_uses_header(server):
    server.add("GET", "/api/posts/42", envelope(post_data(token="secret")))
    server.add("DELETE", "/api/posts/42", httpx.Response(204))
    post = await server.client(token="abc").posts().get("42")

    await post.delete()

    request = server.requests[-1]
    assert request.headers["Authorization"] == "Token abc"
    assert "token" not in request.url.params


@pytest.mark.asyncio
async def test_delete_anonymous_sends_post_token_as_query(server):
    server.add("GET", "/api/posts/42", envelope(post_data(token="secret")))
    server.add("DELETE", "/api/posts/42", httpx.Response(204))
    post = await server.client().posts().get("42")

    await post.delete()

    request = server.requests[-1]
    assert request.url.params["token"] == "secret"
    assert "Authorization" not in request.headers


@pytest.mark.asyncio
async def test_move_to_resolves_collection_then_collects(server):
    server.add("GET", "/api/posts/42", envelope(post_data(token="secret")))
    server.add("GET", "/api/collections/blog", envelope(collection_data("blog")))
    server.add("POST", "/api/collections/blog/collect",
               envelope([{"code": 200, "post": post_data(collection=collection_data("blog"))}]))
    client = server.client(token="abc")
    post = await client.posts().get("42")

    result = await post.move_to("blog")

    assert isinstance(result, MoveSuccess)
    assert result.ok
    assert result.post.client is client
    assert result.post.collection.alias == "blog"
    assert [r.url.path for r in server.requests] == [
        "/api/posts/42", "/api/collections/blog", "/api/collections/blog/collect",
    ]
    assert server.body() == [{"id": "42"}]


@pytest.mark.asyncio
async def test_move_to_anonymous_sends_post_token(server):
    server.add("GET", "/api/posts/42", envelope(post_data(token="secret")))
    server.add("GET", "/api/collections/blog", envelope(collection_data("blog")))
    server.add("POST", "/api/collections/blog/collect",
               envelope([{"code": 403, "error_msg": "Cannot move post."}]))
    post = await server.client().posts().get("42")

    result = await post.move_to("blog")

    assert isinstance(result, MoveError)
    assert not result.ok
    assert result.code == 403
    assert result.error_msg == "Cannot move post."
    assert server.body() == [{"id": "42", "token": "secret"}]


@pytest.mark.asyncio
async def test_move_to_empty_result_is_unknown_error(server):
    server.add("GET", "/api/posts/42", envelope(post_data()))
    server.add("GET", "/api/collections/blog", envelope(collection_data("blog")))
    server.add("POST", "/api/collections/blog/collect", envelope([]))
    post = await server.client(token="abc").posts().get("42")

    with pytest.raises(UnknownError):
        await post.move_to("blog")


@pytest.mark.asyncio
async def test_move_to_missing_collection_stops_before_move(server):
    server.add("GET", "/api/posts/42", envelope(post_data()))
    post = await server.client(token="abc").posts().get("42")

    with pytest.raises(RequestError) as exc:
        await post.move_to("nope")

    assert exc.value.status == 404
    assert server.requests[-1].url.path == "/api/collections/nope"


@pytest.mark.asyncio
async def test_build_update_keeps_post_direction(server):
    server.add("GET", "/api/posts/42", envelope(post_data(rtl=True)))
    server.add("POST", "/api/posts/42", envelope(post_data(body="new", rtl=True)))
    post = await server.client(token="abc").posts().get("42")

    updated = await post.build_update("new").submit()

    assert server.body() == {"body": "new", "rtl": True}
    assert updated.rtl is True


@pytest.mark.asyncio
async def test_post_update_posts_to_own_endpoint(server):
    server.add("GET", "/api/posts/42", envelope(post_data()))
    server.add("POST", "/api/posts/42", envelope(post_data(body="edited", title="New title")))
    client = server.client(token="abc")
    post = await client.posts().get("42")

    update = post.build_update("edited")
    update.title = "New title"
    updated = await post.update(update)

    request = server.requests[-1]
    assert request.method == "POST"
    assert request.url.path == "/api/posts/42"
    assert server.body() == {"body": "edited", "title": "New title", "rtl": False}
    assert updated.title == "New title"
    assert updated.client is client
    assert updated is not post
