"""Submission sinks for checked-out carts."""

import logging
import uuid

logger = logging.getLogger(__name__)


class InMemorySubmissionSink:
    """Keeps submitted payloads in order, keyed by generated request id."""

    def __init__(self):
        self.submissions: dict[str, dict] = {}

    def submit(self, payload: dict) -> str:
        request_id = f"req_{uuid.uuid4().hex[:12]}"
        self.submissions[request_id] = payload
        logger.info("Recorded submission %s (%d items)", request_id, len(payload.get("items", [])))
        return request_id
