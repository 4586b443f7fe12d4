"""Tests for the in-memory guest feedback store."""
from datetime import timezone

from services.guest_feedback import GuestFeedbackStore


class FakeClock:
    def __init__(self, start=1_700_000_000.0):
        self.now = start

    def __call__(self):
        return self.now


def test_add_and_get_keeps_insertion_order():
    """Guest entries come back oldest first with UTC timestamps."""
    store = GuestFeedbackStore(ttl_seconds=7200, clock=FakeClock())
    store.add("s1", "3", "like")
    store.add("s1", "5", "dislike")
    entries = store.get("s1")
    assert [(e.meal_id, e.type) for e in entries] == [("3", "like"), ("5", "dislike")]
    assert entries[0].timestamp.tzinfo == timezone.utc


def test_sessions_are_isolated():
    """Each guest session sees only its own feedback."""
    store = GuestFeedbackStore(clock=FakeClock())
    store.add("s1", "3", "like")
    assert store.get("s2") == []
    assert len(store) == 1


def test_get_returns_a_copy():
    """Mutating returned entries does not touch the store."""
    store = GuestFeedbackStore(clock=FakeClock())
    store.add("s1", "3", "like")
    store.get("s1").clear()
    assert len(store.get("s1")) == 1


def test_idle_sessions_are_evicted():
    """Sessions idle past the TTL are dropped."""
    clock = FakeClock()
    store = GuestFeedbackStore(ttl_seconds=7200, clock=clock)
    store.add("old", "1", "like")
    clock.now += 3600
    store.add("fresh", "2", "like")
    clock.now += 3601
    assert store.get("old") == []
    assert len(store.get("fresh")) == 1


def test_activity_refreshes_the_idle_timer():
    """Adding feedback resets a session's idle timer."""
    clock = FakeClock()
    store = GuestFeedbackStore(ttl_seconds=100, clock=clock)
    store.add("s1", "1", "like")
    clock.now += 90
    store.add("s1", "2", "interested")
    clock.now += 90
    assert len(store.get("s1")) == 2
    clock.now += 11
    assert store.cleanup() == 1
    assert len(store) == 0
