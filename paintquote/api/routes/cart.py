"""Cart routes. The cart is loaded from its snapshot on every request."""

from fastapi import APIRouter, Depends, HTTPException

from paintquote.api.deps import get_cart_store, get_policy, get_rates, get_submission_sink
from paintquote.api.routes.estimates import validation_http_error
from paintquote.api.schemas import (
    AddItemRequest,
    CartResponse,
    CheckoutRequest,
    CheckoutResponse,
    UpdateItemRequest,
    cart_response,
    totals_response,
)
from paintquote.data.base import SnapshotStore, SubmissionSink
from paintquote.engine.cart import Cart
from paintquote.engine.checkout import checkout
from paintquote.engine.services import UnknownServiceError
from paintquote.engine.totals import TotalsPolicy
from paintquote.engine.validation import InputValidationError
from paintquote.models.rates import RateTable

router = APIRouter(prefix="/api/v1/carts", tags=["cart"])


def _load(
    session_id: str,
    store: SnapshotStore = Depends(get_cart_store),
    rates: RateTable = Depends(get_rates),
    policy: TotalsPolicy = Depends(get_policy),
) -> Cart:
    return Cart.load(store, session_id, policy=policy, rates=rates)


@router.get("/{session_id}", response_model=CartResponse)
def get_cart(cart: Cart = Depends(_load)):
    return cart_response(cart)


@router.post("/{session_id}/items", response_model=CartResponse, status_code=201)
def add_item(req: AddItemRequest, cart: Cart = Depends(_load)):
    try:
        cart.add_item(req.service_id, req.params)
    except UnknownServiceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InputValidationError as e:
        raise validation_http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return cart_response(cart)


@router.put("/{session_id}/items/{item_id}", response_model=CartResponse)
def update_item(item_id: str, req: UpdateItemRequest, cart: Cart = Depends(_load)):
    try:
        cart.update_item(item_id, req.params)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown line item: {item_id}")
    except InputValidationError as e:
        raise validation_http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return cart_response(cart)


@router.delete("/{session_id}/items/{item_id}", response_model=CartResponse)
def remove_item(item_id: str, cart: Cart = Depends(_load)):
    try:
        cart.remove_item(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown line item: {item_id}")
    return cart_response(cart)


@router.delete("/{session_id}", response_model=CartResponse)
def clear_cart(cart: Cart = Depends(_load)):
    cart.clear()
    return cart_response(cart)


@router.post("/{session_id}/checkout", response_model=CheckoutResponse)
def checkout_cart(
    req: CheckoutRequest,
    cart: Cart = Depends(_load),
    sink: SubmissionSink = Depends(get_submission_sink),
):
    """Submit the cart. 409 with the gate's reason when the cart is not eligible."""
    result = checkout(cart, req.customer.model_dump(), sink)
    if not result.submitted:
        raise HTTPException(status_code=409, detail=result.reason)
    return CheckoutResponse(request_id=result.request_id, totals=totals_response(result.totals))
