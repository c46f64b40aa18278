"""Tests for checkout orchestration."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from paintquote.data.submissions import InMemorySubmissionSink
from paintquote.engine.checkout import build_submission, checkout

CUSTOMER = {"name": "Dana Lee", "email": "dana@example.com", "phone": "555-0100"}


@pytest.fixture
def sink() -> InMemorySubmissionSink:
    return InMemorySubmissionSink()


class TestBuildSubmission:
    def test_payload_shape(self, cart, standard_room_params):
        cart.add_item("small-bathroom", standard_room_params)
        payload = build_submission(cart, CUSTOMER)
        assert payload["type"] == "cart-order"
        assert payload["status"] == "pending"
        assert payload["customer"]["email"] == "dana@example.com"
        assert len(payload["items"]) == 1
        line = payload["items"][0]
        assert line["service_id"] == "small-bathroom"
        assert line["service_type"] == "calculated"
        assert line["params"]["length"] == "12"
        assert line["estimate"]["total_cost"] == "557"
        assert payload["totals"]["grand_total"] == "557"
        assert "created_at" in payload


class TestCheckout:
    def test_empty_cart_is_blocked(self, cart, sink):
        result = checkout(cart, CUSTOMER, sink)
        assert not result.submitted
        assert result.reason == "Your cart has no items."
        assert sink.submissions == {}

    def test_ineligible_cart_is_untouched(self, cart, sink):
        cart.add_item("interior-door", {"door_count": 2})
        result = checkout(cart, CUSTOMER, sink)
        assert not result.submitted
        assert len(cart) == 1
        assert sink.submissions == {}

    def test_submit_and_clear(self, cart, sink, standard_room_params):
        cart.add_item("small-bathroom", standard_room_params)
        cart.add_item("interior-door", {"door_count": 1})
        result = checkout(cart, CUSTOMER, sink)
        assert result.submitted
        assert result.request_id.startswith("req_")
        assert result.totals.grand_total == Decimal("632")
        assert sink.submissions[result.request_id]["customer"]["name"] == "Dana Lee"
        assert len(cart) == 0

    def test_sink_failure_propagates(self, cart, standard_room_params):
        cart.add_item("small-bathroom", standard_room_params)
        failing = MagicMock()
        failing.submit.side_effect = RuntimeError("storage offline")
        with pytest.raises(RuntimeError):
            checkout(cart, CUSTOMER, failing)
        assert len(cart) == 1
