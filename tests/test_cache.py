"""Tests for the in-memory cache."""

from datetime import UTC, datetime, timedelta

from calorie_vita.services.cache import InMemoryCache


def test_get_returns_fresh_value() -> None:
    cache = InMemoryCache()
    cache.set("analytics:a:goals", {"calorie_goal": 2000}, ttl_seconds=60)

    assert cache.get("analytics:a:goals") == {"calorie_goal": 2000}
    assert cache.get("analytics:missing") is None


def test_expired_entries_are_evicted() -> None:
    cache = InMemoryCache()
    cache.set("key", "value", ttl_seconds=60)
    cache._entries["key"].expires_at = datetime.now(tz=UTC) - timedelta(seconds=1)

    assert cache.get("key") is None
    assert "key" not in cache._entries


def test_invalidate_prefix_only_drops_matching_keys() -> None:
    cache = InMemoryCache()
    cache.set("analytics:a:goals", 1, ttl_seconds=60)
    cache.set("analytics:a:summaries:x", 2, ttl_seconds=60)
    cache.set("analytics:b:goals", 3, ttl_seconds=60)

    dropped = cache.invalidate_prefix("analytics:a:")

    assert dropped == 2
    assert cache.get("analytics:a:goals") is None
    assert cache.get("analytics:b:goals") == 3


def test_set_sweeps_expired_entries() -> None:
    cache = InMemoryCache()
    cache.set("analytics:a:summaries:2026-01-01:2026-01-01", [], ttl_seconds=60)
    cache._entries[
        "analytics:a:summaries:2026-01-01:2026-01-01"
    ].expires_at = datetime.now(tz=UTC) - timedelta(seconds=1)

    cache.set("analytics:a:summaries:2026-01-02:2026-01-02", [], ttl_seconds=60)

    assert list(cache._entries) == ["analytics:a:summaries:2026-01-02:2026-01-02"]
