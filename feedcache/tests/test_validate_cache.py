"""Tests for LocalFeedLoader.validate_cache."""

import gc
import json
from datetime import datetime, timedelta

import pytest

from feedcache.cache.file_store import FileFeedStore
from feedcache.cache.local_loader import LocalFeedLoader
from feedcache.tests.helpers import FIXED_NOW, any_error, max_age_ago, settle, unique_feed
from feedcache.tests.store_spy import FeedStoreSpy


def make_sut():
    store = FeedStoreSpy()
    loader = LocalFeedLoader(store=store, current_date=lambda: FIXED_NOW)
    return loader, store


def test_init_does_not_message_store():
    _, store = make_sut()
    assert store.received_messages == []


@pytest.mark.asyncio
async def test_validate_cache_deletes_cache_on_retrieval_error():
    loader, store = make_sut()

    loader.validate_cache()
    await settle()
    store.complete_retrieval(any_error())
    await settle()

    assert store.received_messages == [FeedStoreSpy.RETRIEVE, FeedStoreSpy.DELETE]


@pytest.mark.asyncio
async def test_validate_cache_does_not_delete_cache_on_empty_cache():
    loader, store = make_sut()

    task = loader.validate_cache()
    await settle()
    store.complete_retrieval_with_empty_cache()
    await task

    assert store.received_messages == [FeedStoreSpy.RETRIEVE]


@pytest.mark.asyncio
async def test_validate_cache_does_not_delete_non_expired_cache():
    loader, store = make_sut()
    _, local = unique_feed()

    task = loader.validate_cache()
    await settle()
    store.complete_retrieval_with(local, max_age_ago(FIXED_NOW) + timedelta(seconds=1))
    await task

    assert store.received_messages == [FeedStoreSpy.RETRIEVE]


@pytest.mark.asyncio
@pytest.mark.parametrize("offset", [timedelta(0), timedelta(seconds=1), timedelta(days=30)])
async def test_validate_cache_deletes_cache_on_or_past_expiration(offset):
    loader, store = make_sut()
    _, local = unique_feed()

    loader.validate_cache()
    await settle()
    store.complete_retrieval_with(local, max_age_ago(FIXED_NOW) - offset)
    await settle()

    assert store.received_messages == [FeedStoreSpy.RETRIEVE, FeedStoreSpy.DELETE]


@pytest.mark.asyncio
async def test_validate_cache_ignores_deletion_failure():
    loader, store = make_sut()

    task = loader.validate_cache()
    await settle()
    store.complete_retrieval(any_error())
    await settle()
    store.complete_deletion(any_error())

    assert await task is None


@pytest.mark.asyncio
async def test_validate_cache_does_not_delete_after_loader_is_released():
    loader, store = make_sut()

    task = loader.validate_cache()
    await settle()
    del loader
    gc.collect()
    store.complete_retrieval(any_error())
    await task

    assert store.received_messages == [FeedStoreSpy.RETRIEVE]


@pytest.mark.asyncio
async def test_validate_cache_deletes_cache_with_timestamp_without_offset():
    loader, store = make_sut()
    _, local = unique_feed()

    loader.validate_cache()
    await settle()
    store.complete_retrieval_with(local, datetime(2024, 5, 1, 10, 0))
    await settle()

    assert store.received_messages == [FeedStoreSpy.RETRIEVE, FeedStoreSpy.DELETE]


@pytest.mark.asyncio
async def test_validate_cache_removes_stored_snapshot_without_offset(tmp_path):
    path = tmp_path / "feed.json"
    path.write_text(json.dumps({"feed": [], "timestamp": "2024-05-01T10:00:00"}))
    store = FileFeedStore(path)
    loader = LocalFeedLoader(store=store, current_date=lambda: FIXED_NOW)

    await loader.validate_cache()
    await store.aclose()

    assert not path.exists()
