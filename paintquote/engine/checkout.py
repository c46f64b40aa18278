"""Checkout: gate the cart, hand a plain payload to the submission sink, clear."""

import logging
from datetime import datetime, timezone
from typing import Mapping

from paintquote.data.base import SubmissionSink
from paintquote.engine.cart import Cart
from paintquote.models.cart import CheckoutResult

logger = logging.getLogger(__name__)


def build_submission(cart: Cart, customer: Mapping) -> dict:
    return {
        "type": "cart-order",
        "status": "pending",
        "session_id": cart.session_id,
        "customer": dict(customer),
        "items": [
            {
                "service_id": item.service_id,
                "service_name": item.service_name,
                "service_type": item.service_type.value,
                "params": dict(item.params),
                "estimate": item.estimate.to_dict(),
            }
            for item in cart.items
        ],
        "totals": cart.totals.to_dict(),
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


def checkout(cart: Cart, customer: Mapping, sink: SubmissionSink) -> CheckoutResult:
    """Submit an eligible cart. Sink errors propagate and leave the cart untouched."""
    gate = cart.eligibility
    if not gate.eligible:
        logger.info("Checkout blocked for cart %s: %s", cart.session_id, gate.reason)
        return CheckoutResult(submitted=False, reason=gate.reason)

    totals = cart.totals
    request_id = sink.submit(build_submission(cart, customer))
    cart.clear()
    logger.info("Cart %s submitted as %s ($%s)", cart.session_id, request_id, totals.grand_total)
    return CheckoutResult(submitted=True, request_id=request_id, totals=totals)
