"""Protocol definitions for the engine's collaborators.

The cart and checkout code only depends on these interfaces; concrete stores
and sinks are injected.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SnapshotStore(Protocol):
    def save(self, key: str, payload: dict) -> None:
        """Persist a JSON-serializable snapshot under key."""
        ...

    def load(self, key: str) -> dict | None:
        """Return the snapshot, or None when missing or stale."""
        ...

    def delete(self, key: str) -> None:
        ...


@runtime_checkable
class SubmissionSink(Protocol):
    def submit(self, payload: dict) -> str:
        """Record a checkout payload and return its request id."""
        ...
