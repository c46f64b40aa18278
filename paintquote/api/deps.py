"""FastAPI dependency injection."""

from datetime import timedelta
from functools import lru_cache

from paintquote.config import settings
from paintquote.data.base import SnapshotStore, SubmissionSink
from paintquote.data.cart_store import RedisSnapshotStore, redis_client
from paintquote.data.submissions import InMemorySubmissionSink
from paintquote.engine.totals import TotalsPolicy
from paintquote.models.rates import RateTable, rate_table_from_settings


@lru_cache
def get_rates() -> RateTable:
    return rate_table_from_settings(settings)


@lru_cache
def get_policy() -> TotalsPolicy:
    return TotalsPolicy.from_settings(settings)


@lru_cache
def get_cart_store() -> SnapshotStore:
    return RedisSnapshotStore(
        redis_client(), prefix="cart", max_age=timedelta(hours=settings.cart_max_age_hours)
    )


@lru_cache
def get_draft_store() -> SnapshotStore:
    return RedisSnapshotStore(
        redis_client(), prefix="draft", max_age=timedelta(hours=settings.draft_max_age_hours)
    )


@lru_cache
def get_submission_sink() -> SubmissionSink:
    return InMemorySubmissionSink()
