"""Snapshot stores for carts and single-service drafts.

Payloads are wrapped with a `saved_at` timestamp; anything older than the
store's max age is treated as missing on load.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

import redis

from paintquote.config import settings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _wrap(payload: dict, now: datetime) -> dict:
    return {"saved_at": now.isoformat(), "payload": payload}


def _unwrap(envelope: dict, max_age: timedelta, now: datetime) -> dict | None:
    try:
        saved_at = datetime.fromisoformat(envelope["saved_at"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Discarding snapshot without a valid saved_at")
        return None
    if now - saved_at > max_age:
        return None
    return envelope.get("payload")


class MemorySnapshotStore:
    """Process-local store, used in tests and when redis is not configured."""

    def __init__(self, max_age: timedelta = timedelta(hours=settings.cart_max_age_hours), clock: Clock = _utcnow):
        self.max_age = max_age
        self._clock = clock
        self._data: dict[str, dict] = {}

    def save(self, key: str, payload: dict) -> None:
        # Round-trip through JSON so callers never share mutable state with the store.
        self._data[key] = json.loads(json.dumps(_wrap(payload, self._clock()), default=str))

    def load(self, key: str) -> dict | None:
        envelope = self._data.get(key)
        if envelope is None:
            return None
        payload = _unwrap(envelope, self.max_age, self._clock())
        if payload is None:
            self._data.pop(key, None)
        return payload

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class RedisSnapshotStore:
    def __init__(
        self,
        client: redis.Redis,
        prefix: str = "cart",
        max_age: timedelta = timedelta(hours=settings.cart_max_age_hours),
        clock: Clock = _utcnow,
    ):
        self.client = client
        self.prefix = prefix
        self.max_age = max_age
        self._clock = clock

    def _key(self, key: str) -> str:
        return f"{settings.snapshot_prefix}:{self.prefix}:{key}"

    def save(self, key: str, payload: dict) -> None:
        ttl = int(self.max_age.total_seconds())
        self.client.setex(self._key(key), ttl, json.dumps(_wrap(payload, self._clock()), default=str))
        logger.debug("Saved snapshot %s (ttl %ds)", self._key(key), ttl)

    def load(self, key: str) -> dict | None:
        raw = self.client.get(self._key(key))
        if raw is None:
            return None
        try:
            envelope = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable snapshot %s", self._key(key))
            return None
        return _unwrap(envelope, self.max_age, self._clock())

    def delete(self, key: str) -> None:
        self.client.delete(self._key(key))


def redis_client() -> redis.Redis:
    return redis.Redis.from_url(settings.redis_url, decode_responses=True)
