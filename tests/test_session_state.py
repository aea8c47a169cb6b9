"""Tests for session lists and the last-request-wins result slot."""

import asyncio

import pytest

from content_validator import normalize_records
from data_models import CategoryID, ContentFormat
from errors import EmptyQuery
from session_state import DiscoveryState, SessionLists


def make_items(make_record, *ids):
    return normalize_records(
        [make_record(item_id) for item_id in ids], CategoryID.SCIENCE, ContentFormat.VIDEOS
    )


class FakeService:
    """Discovery service whose searches settle only when released"""

    def __init__(self):
        self.searches = []
        self.briefs = []
        self._pending = {}

    async def search_discovery(self, category, query, content_format):
        gate = asyncio.Event()
        self.searches.append((category, query, content_format))
        self._pending[content_format] = gate
        await gate.wait()
        return self.results[content_format]

    def release(self, content_format):
        self._pending[content_format].set()

    async def request_brief(self, topic, context=None):
        self.briefs.append((topic, context))
        return f"brief for {topic}"


class TestSessionLists:
    def test_history_newest_first_and_deduplicated(self, make_record):
        lists = SessionLists()
        a, b = make_items(make_record, "a", "b")
        lists.record_view(a)
        lists.record_view(b)
        lists.record_view(a)
        assert [item.id for item in lists.history] == ["a", "b"]

    def test_history_is_capped(self, make_record):
        lists = SessionLists(history_limit=3)
        for item in make_items(make_record, "a", "b", "c", "d"):
            lists.record_view(item)
        assert len(lists.history) == 3
        assert "a" not in [item.id for item in lists.history]

    def test_default_cap_is_fifty(self, make_record):
        lists = SessionLists()
        records = [make_record(f"item-{i}") for i in range(60)]
        items = normalize_records(records, "science", "Videos", limit=60)
        for item in items:
            lists.record_view(item)
        assert len(lists.history) == 50

    def test_toggle_saved(self, make_record):
        lists = SessionLists()
        a, b = make_items(make_record, "a", "b")
        assert lists.toggle_saved(a) is True
        assert lists.toggle_saved(b) is True
        assert [item.id for item in lists.saved] == ["b", "a"]
        assert lists.toggle_saved(a) is False
        assert not lists.is_saved("a")
        assert [item.id for item in lists.saved] == ["b"]


class TestDiscoveryState:
    def test_blank_query_never_reaches_service(self):
        service = FakeService()
        state = DiscoveryState(service)
        state.select_category("health")
        with pytest.raises(EmptyQuery):
            asyncio.run(state.search("   "))
        assert service.searches == []

    def test_search_requires_category(self):
        state = DiscoveryState(FakeService())
        with pytest.raises(ValueError):
            asyncio.run(state.search("sleep"))

    def test_search_fills_slot(self, make_record):
        service = FakeService()
        service.results = {ContentFormat.VIDEOS: make_items(make_record, "a")}
        state = DiscoveryState(service)
        state.select_category(CategoryID.HEALTH)

        async def scenario():
            task = asyncio.ensure_future(state.search(" sleep "))
            await asyncio.sleep(0)
            assert state.loading is True
            service.release(ContentFormat.VIDEOS)
            return await task

        assert asyncio.run(scenario()) is True
        assert state.loading is False
        assert state.query == "sleep"
        assert [item.id for item in state.results] == ["a"]

    def test_stale_result_is_discarded(self, make_record):
        service = FakeService()
        service.results = {
            ContentFormat.VIDEOS: make_items(make_record, "stale"),
            ContentFormat.PODCASTS: make_items(make_record, "fresh"),
        }
        state = DiscoveryState(service)
        state.select_category(CategoryID.SCIENCE)

        async def scenario():
            first = asyncio.ensure_future(state.search("fusion"))
            await asyncio.sleep(0)
            second = asyncio.ensure_future(state.change_format(ContentFormat.PODCASTS))
            await asyncio.sleep(0)
            service.release(ContentFormat.PODCASTS)
            fresh_applied = await second
            assert state.loading is False
            service.release(ContentFormat.VIDEOS)
            stale_applied = await first
            return fresh_applied, stale_applied

        assert asyncio.run(scenario()) == (True, False)
        assert [item.id for item in state.results] == ["fresh"]
        assert len(service.searches) == 2

    def test_loading_stays_on_until_latest_settles(self, make_record):
        service = FakeService()
        service.results = {
            ContentFormat.VIDEOS: make_items(make_record, "old"),
            ContentFormat.NEWS: make_items(make_record, "new"),
        }
        state = DiscoveryState(service)
        state.select_category(CategoryID.POLITICS)

        async def scenario():
            first = asyncio.ensure_future(state.search("elections"))
            await asyncio.sleep(0)
            second = asyncio.ensure_future(state.change_format("News"))
            await asyncio.sleep(0)
            service.release(ContentFormat.VIDEOS)
            await first
            assert state.loading is True
            assert state.results == []
            service.release(ContentFormat.NEWS)
            await second

        asyncio.run(scenario())
        assert state.loading is False
        assert [item.id for item in state.results] == ["new"]

    def test_change_format_without_search_does_not_call(self):
        service = FakeService()
        state = DiscoveryState(service)
        state.select_category("culture")
        assert asyncio.run(state.change_format("Documentaries")) is False
        assert state.content_format is ContentFormat.DOCUMENTARIES
        assert service.searches == []

    def test_open_item_records_history_and_toggles_save(self, make_record):
        state = DiscoveryState(FakeService())
        item, = make_items(make_record, "a")
        state.open_item(item)
        assert state.lists.history == [item]
        assert state.toggle_saved() is True
        assert state.lists.is_saved("a")

    def test_brief_subject(self, make_record):
        service = FakeService()
        state = DiscoveryState(service)
        assert state.brief_subject() is None
        assert asyncio.run(state.fetch_brief()) is None

        state.select_category("science")
        state.query = "fusion"
        assert state.brief_subject() == ("fusion", "Category: science")

        item, = make_items(make_record, "a")
        state.open_item(item)
        assert asyncio.run(state.fetch_brief()) == "brief for Title a"
        assert service.briefs == [("Title a", "Description of a")]

        state.close_item()
        assert state.brief_subject() == ("fusion", "Category: science")


class FailingService:
    async def search_discovery(self, category, query, content_format):
        raise RuntimeError("unexpected failure")


def test_loading_cleared_when_search_raises():
    state = DiscoveryState(FailingService())
    state.select_category("science")
    with pytest.raises(RuntimeError):
        asyncio.run(state.search("fusion"))
    assert state.loading is False
    assert state.results == []
