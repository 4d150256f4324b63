"""Tests for the dashboard fan-out loader."""
import asyncio
import itertools

import pytest

from pentopublic.dashboard.aggregator import load_all
from pentopublic.dashboard.moderation import approve
from pentopublic.dashboard.notifications import Notifier
from pentopublic.dashboard.store import DashboardStore, Slice
from pentopublic.dashboard.tabs import Tab, tab_label

from conftest import sample_pending, sample_summary

FAILURE_SUBSETS = [
    frozenset(combo)
    for size in range(len(Slice) + 1)
    for combo in itertools.combinations(Slice, size)
]


async def _let_tasks_start():
    for _ in range(5):
        await asyncio.sleep(0)


def _subset_id(subset):
    return "+".join(sorted(s.value for s in subset)) or "none"


@pytest.mark.parametrize("failing", FAILURE_SUBSETS, ids=_subset_id)
def test_every_failure_subset_renders_the_rest(failing, make_fake_api):
    api = make_fake_api(failing=failing)
    store = DashboardStore()

    report = asyncio.run(load_all(api, store))
    state = store.state

    assert sorted(api.fetches) == sorted(Slice)
    assert report.failed_count == state.failed_count == len(failing)
    assert set(report.failures) == failing
    assert not state.loading

    if len(failing) == len(Slice):
        assert state.full_failure
        return

    assert not state.full_failure
    assert state.loaded == frozenset(Slice) - failing
    assert (state.summary is not None) == (Slice.SUMMARY not in failing)
    assert len(state.pending) == (0 if Slice.PENDING in failing else 3)
    assert len(state.readers) == (0 if Slice.READERS in failing else 2)
    assert len(state.authors) == (0 if Slice.AUTHORS in failing else 1)
    assert len(state.books_summary) == (0 if Slice.BOOKS_SUMMARY in failing else 1)
    if failing:
        assert state.error == f"{len(failing)} API endpoints failed to load"
    else:
        assert state.error is None


def test_total_failure_after_a_good_load_keeps_old_data(make_fake_api):
    store = DashboardStore()
    asyncio.run(load_all(make_fake_api(), store))

    asyncio.run(load_all(make_fake_api(failing=frozenset(Slice)), store))
    state = store.state

    assert not state.full_failure
    assert state.failed_count == 5
    assert state.error == "5 API endpoints failed to load"
    assert state.summary == sample_summary()
    assert len(state.pending) == 3


def test_successful_refresh_clears_previous_error(make_fake_api):
    store = DashboardStore()
    asyncio.run(load_all(make_fake_api(failing={Slice.READERS}), store))
    assert store.state.error == "1 API endpoints failed to load"

    asyncio.run(load_all(make_fake_api(), store))
    assert store.state.error is None
    assert store.state.failed_count == 0


def test_retry_after_full_failure_recovers(make_fake_api):
    store = DashboardStore()
    asyncio.run(load_all(make_fake_api(failing=frozenset(Slice)), store))
    assert store.state.full_failure

    asyncio.run(load_all(make_fake_api(), store))
    assert not store.state.full_failure
    assert len(store.state.pending) == 3


def test_one_slow_failure_does_not_cancel_siblings(make_fake_api):
    api = make_fake_api(failing={Slice.SUMMARY})
    store = DashboardStore()

    async def scenario():
        api.gate = asyncio.Event()
        task = asyncio.create_task(load_all(api, store))
        await _let_tasks_start()
        assert store.state.loading
        assert len(api.fetches) == 5
        api.gate.set()
        return await task

    report = asyncio.run(scenario())
    assert report.succeeded == [Slice.PENDING, Slice.READERS, Slice.AUTHORS, Slice.BOOKS_SUMMARY]
    assert not store.state.loading


def test_overlapping_loads_last_settled_wins(make_fake_api):
    store = DashboardStore()
    slow = make_fake_api(pending=sample_pending()[:1])
    fast = make_fake_api(pending=sample_pending())

    async def scenario():
        slow.gate = asyncio.Event()
        slow_task = asyncio.create_task(load_all(slow, store))
        await _let_tasks_start()
        await load_all(fast, store)

        assert len(store.state.pending) == 3
        assert store.state.loading

        slow.gate.set()
        await slow_task

    asyncio.run(scenario())
    assert [s.id for s in store.state.pending] == [1]
    assert not store.state.loading


def test_cancelled_load_releases_loading_flag(make_fake_api):
    api = make_fake_api()
    store = DashboardStore()

    async def scenario():
        api.gate = asyncio.Event()
        task = asyncio.create_task(load_all(api, store))
        await _let_tasks_start()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert not store.state.loading
    assert store.state.pending == ()


def test_failures_are_logged(make_fake_api, caplog):
    caplog.set_level("WARNING", logger="pentopublic.dashboard.aggregator")
    asyncio.run(load_all(make_fake_api(failing={Slice.AUTHORS}), DashboardStore()))
    assert "authors" in caplog.text
    assert "1/5 endpoint failures" in caplog.text


def test_end_to_end_against_stand_in_api(make_api_client, admin_token):
    store = DashboardStore()
    notifier = Notifier(duration=4)

    async def scenario():
        async with make_api_client(admin_token) as client:
            await load_all(client, store)
            loaded = store.state
            second = loaded.pending[1]
            await approve(client, store, notifier, second.id)
            return loaded, second

    loaded, second = asyncio.run(scenario())
    books = loaded.summary.books
    assert (books.total, books.approved, books.pending, books.rejected) == (10, 6, 3, 1)
    assert len(loaded.pending) == 3

    state = store.state
    books = state.summary.books
    assert (books.total, books.approved, books.pending, books.rejected) == (10, 7, 2, 1)
    assert second.id not in [s.id for s in state.pending]
    assert len(state.pending) == 2
    assert tab_label(state, Tab.PENDING) == "Pending Books (2)"
    assert tab_label(state, Tab.AUTHORS) == "Authors (3)"


def test_stand_in_api_without_token_is_total_failure(make_api_client):
    store = DashboardStore()

    async def scenario():
        async with make_api_client() as client:
            return await load_all(client, store)

    report = asyncio.run(scenario())
    assert store.state.full_failure
    assert all("401" in reason for reason in report.failures.values())
