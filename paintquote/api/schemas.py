"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from paintquote.engine.cart import Cart
from paintquote.models.cart import CartTotals, EligibilityResult, LineItem
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.services import Promotion, Service


# ---- Request schemas ----

class AddItemRequest(BaseModel):
    service_id: str = Field(..., description="Catalog service or promotion id")
    params: dict[str, Any] = Field(default_factory=dict, description="Service form payload")


class UpdateItemRequest(BaseModel):
    params: dict[str, Any] = Field(default_factory=dict)


class CustomerInfo(BaseModel):
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    postal_code: str | None = None
    preferred_date: str | None = None
    notes: str | None = None


class CheckoutRequest(BaseModel):
    customer: CustomerInfo


class DraftRequest(BaseModel):
    service_id: str
    params: dict[str, Any] = Field(default_factory=dict)


# ---- Response schemas ----

class ServiceResponse(BaseModel):
    id: str
    name: str
    description: str
    type: str
    category: str
    flat_rate: Decimal | None = None


class PromotionResponse(BaseModel):
    id: str
    name: str
    subtitle: str
    price: Decimal
    original_price: Decimal
    savings: Decimal
    percentage: int
    features: list[str] = []


class EstimateResponse(BaseModel):
    labor_hours: int
    setup_cleanup_hours: int
    total_hours: int
    material_units: int
    labor_cost: Decimal
    material_cost: Decimal
    supplies_cost: Decimal
    addon_cost: Decimal
    prep_fee: Decimal
    travel_fee: Decimal
    other_fees: Decimal
    subtotal: Decimal
    total_cost: Decimal
    notes: list[str] = []


class EstimateEnvelope(BaseModel):
    service_id: str
    estimate: EstimateResponse | None = None


class LineItemResponse(BaseModel):
    id: str
    service_id: str
    service_name: str
    service_type: str
    params: dict[str, Any]
    estimate: EstimateResponse
    created_at: datetime


class CartTotalsResponse(BaseModel):
    items_subtotal: Decimal
    discount: Decimal
    travel_fee_mode: str
    travel_fee_adjustment: Decimal
    grand_total: Decimal


class EligibilityResponse(BaseModel):
    eligible: bool
    reason: str | None = None


class CartResponse(BaseModel):
    session_id: str
    items: list[LineItemResponse] = []
    totals: CartTotalsResponse
    eligibility: EligibilityResponse


class CheckoutResponse(BaseModel):
    request_id: str
    totals: CartTotalsResponse


class DraftResponse(BaseModel):
    session_id: str
    service_id: str
    params: dict[str, Any]
    estimate: EstimateResponse | None = None


# ---- Converters ----

def service_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        name=service.name,
        description=service.description,
        type=service.type.value,
        category=service.category.value,
        flat_rate=service.flat_rate,
    )


def promotion_response(promotion: Promotion) -> PromotionResponse:
    return PromotionResponse(
        id=promotion.id,
        name=promotion.name,
        subtitle=promotion.subtitle,
        price=promotion.price,
        original_price=promotion.original_price,
        savings=promotion.savings,
        percentage=promotion.percentage,
        features=list(promotion.features),
    )


def estimate_response(b: EstimateBreakdown | None) -> EstimateResponse | None:
    if b is None:
        return None
    return EstimateResponse(
        labor_hours=b.labor_hours,
        setup_cleanup_hours=b.setup_cleanup_hours,
        total_hours=b.total_hours,
        material_units=b.material_units,
        labor_cost=b.labor_cost,
        material_cost=b.material_cost,
        supplies_cost=b.supplies_cost,
        addon_cost=b.addon_cost,
        prep_fee=b.prep_fee,
        travel_fee=b.travel_fee,
        other_fees=b.other_fees,
        subtotal=b.subtotal,
        total_cost=b.total_cost,
        notes=list(b.notes),
    )


def line_item_response(item: LineItem) -> LineItemResponse:
    return LineItemResponse(
        id=item.id,
        service_id=item.service_id,
        service_name=item.service_name,
        service_type=item.service_type.value,
        params=item.params,
        estimate=estimate_response(item.estimate),
        created_at=item.created_at,
    )


def totals_response(totals: CartTotals) -> CartTotalsResponse:
    return CartTotalsResponse(
        items_subtotal=totals.items_subtotal,
        discount=totals.discount,
        travel_fee_mode=totals.travel_fee_mode.value,
        travel_fee_adjustment=totals.travel_fee_adjustment,
        grand_total=totals.grand_total,
    )


def eligibility_response(result: EligibilityResult) -> EligibilityResponse:
    return EligibilityResponse(eligible=result.eligible, reason=result.reason)


def cart_response(cart: Cart) -> CartResponse:
    return CartResponse(
        session_id=cart.session_id,
        items=[line_item_response(i) for i in cart.items],
        totals=totals_response(cart.totals),
        eligibility=eligibility_response(cart.eligibility),
    )
