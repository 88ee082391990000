"""Tests for the author service."""

import pytest

from src.core.exceptions import NotFoundException, ValidationException


async def test_create_author(author_service):
    author = await author_service.create({"name": "Ada"})

    assert author.id == 1
    assert author.name == "Ada"
    assert author.created_at is not None


@pytest.mark.parametrize("name", ["", "   ", None])
async def test_create_author_rejects_blank_name(author_service, name):
    with pytest.raises(ValidationException) as exc_info:
        await author_service.create({"name": name})

    assert exc_info.value.error_details[0].field == "name"
    assert await author_service.list() == []


async def test_get_missing_author_returns_none(author_service):
    assert await author_service.get(42) is None


async def test_list_authors_in_insertion_order(author_service):
    for name in ("Ada", "Grace", "Linus"):
        await author_service.create({"name": name})

    authors = await author_service.list()

    assert [a.name for a in authors] == ["Ada", "Grace", "Linus"]


async def test_update_author_name(author_service):
    author = await author_service.create({"name": "Ada"})

    updated = await author_service.update(author.id, {"name": "Ada Lovelace"})

    assert updated.name == "Ada Lovelace"
    assert updated.created_at == author.created_at
    assert (await author_service.get(author.id)).name == "Ada Lovelace"


async def test_update_author_without_name_is_noop(author_service):
    author = await author_service.create({"name": "Ada"})

    same = await author_service.update(author.id, {})

    assert same.id == author.id
    assert same.name == "Ada"
    assert same.created_at == author.created_at


async def test_update_author_rejects_blank_name(author_service):
    author = await author_service.create({"name": "Ada"})

    with pytest.raises(ValidationException):
        await author_service.update(author.id, {"name": " "})

    assert (await author_service.get(author.id)).name == "Ada"


async def test_update_missing_author(author_service):
    with pytest.raises(NotFoundException) as exc_info:
        await author_service.update(7, {"name": "Nobody"})

    assert exc_info.value.entity == "Author"
    assert exc_info.value.item_id == 7


async def test_delete_author(author_service):
    author = await author_service.create({"name": "Ada"})

    assert await author_service.delete(author.id) is True
    assert await author_service.get(author.id) is None


async def test_delete_missing_author(author_service):
    with pytest.raises(NotFoundException):
        await author_service.delete(99)
