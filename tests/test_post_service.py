"""Tests for the post service."""

from datetime import timedelta

import pytest

from src.core.config import settings
from src.core.exceptions import NotFoundException, ValidationException


@pytest.fixture
async def author(author_service):
    return await author_service.create({"name": "Ada"})


async def test_create_then_get_post(post_service, author):
    post = await post_service.create(
        {"title": "T", "content": "C", "author_id": author.id}
    )

    fetched = await post_service.get(post.id)

    assert fetched.title == "T"
    assert fetched.content == "C"
    assert fetched.author_id == author.id
    assert fetched.created_at == fetched.updated_at
    assert fetched.author.id == author.id
    assert fetched.author.name == "Ada"


async def test_create_post_with_missing_author(post_service):
    with pytest.raises(NotFoundException) as exc_info:
        await post_service.create({"title": "T", "content": "C", "author_id": 123})

    assert exc_info.value.entity == "Author"
    assert exc_info.value.error_details[0].field == "author_id"
    assert await post_service.list() == []


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"title": "", "content": "C"}, "title"),
        ({"title": "T", "content": "  "}, "content"),
        ({"content": "C"}, "title"),
    ],
)
async def test_create_post_requires_title_and_content(post_service, author, payload, field):
    with pytest.raises(ValidationException) as exc_info:
        await post_service.create({**payload, "author_id": author.id})

    assert exc_info.value.error_details[0].field == field
    assert await post_service.list() == []


async def test_get_missing_post_returns_none(post_service):
    assert await post_service.get(5) is None


async def test_list_posts_joins_authors(post_service, author_service, author):
    grace = await author_service.create({"name": "Grace"})
    await post_service.create({"title": "A", "content": "a", "author_id": author.id})
    await post_service.create({"title": "B", "content": "b", "author_id": grace.id})

    posts = await post_service.list()

    assert [(p.title, p.author.name) for p in posts] == [("A", "Ada"), ("B", "Grace")]


async def test_update_post_applies_only_given_fields(post_service, author):
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    updated = await post_service.update(post.id, {"title": "T2"})

    assert updated.title == "T2"
    assert updated.content == "C"
    assert updated.author_id == author.id
    assert updated.created_at == post.created_at
    assert updated.updated_at > post.updated_at


async def test_update_post_without_fields_bumps_updated_at(post_service, author):
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    updated = await post_service.update(post.id, {})

    assert updated.title == post.title
    assert updated.content == post.content
    assert updated.author_id == post.author_id
    assert updated.created_at == post.created_at
    assert updated.updated_at > post.updated_at


async def test_update_post_moves_to_other_author(post_service, author_service, author):
    grace = await author_service.create({"name": "Grace"})
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    await post_service.update(post.id, {"author_id": grace.id})

    assert (await post_service.get(post.id)).author.name == "Grace"


async def test_update_post_with_missing_author(post_service, author):
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    with pytest.raises(NotFoundException) as exc_info:
        await post_service.update(post.id, {"author_id": 404, "title": "changed"})

    assert exc_info.value.entity == "Author"
    unchanged = await post_service.get(post.id)
    assert unchanged.title == "T"
    assert unchanged.updated_at == post.updated_at


async def test_update_missing_post(post_service):
    with pytest.raises(NotFoundException) as exc_info:
        await post_service.update(9, {"title": "x"})

    assert exc_info.value.entity == "Post"


async def test_update_post_rejects_blank_content(post_service, author):
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    with pytest.raises(ValidationException):
        await post_service.update(post.id, {"content": ""})


async def test_delete_post(post_service, author):
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    assert await post_service.delete(post.id) is True
    assert await post_service.get(post.id) is None


async def test_delete_missing_post(post_service):
    with pytest.raises(NotFoundException):
        await post_service.delete(1)


async def test_timestamps_come_back_in_configured_time_zone(
    post_service, author_service, monkeypatch
):
    monkeypatch.setattr(settings, "TIME_ZONE", "Asia/Aden")
    author = await author_service.create({"name": "Ada"})
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    fetched = await post_service.get(post.id)

    assert fetched.created_at.utcoffset() == timedelta(hours=3)
    assert fetched.updated_at.utcoffset() == timedelta(hours=3)
    assert fetched.author.created_at.utcoffset() == timedelta(hours=3)
    assert fetched.created_at == post.created_at


async def test_timestamps_are_stored_as_utc(post_service, author_service, monkeypatch):
    monkeypatch.setattr(settings, "TIME_ZONE", "Asia/Aden")
    author = await author_service.create({"name": "Ada"})
    post = await post_service.create({"title": "T", "content": "C", "author_id": author.id})

    monkeypatch.setattr(settings, "TIME_ZONE", "UTC")
    fetched = await post_service.get(post.id)

    assert fetched.created_at.utcoffset() == timedelta(0)
    assert fetched.created_at == post.created_at
