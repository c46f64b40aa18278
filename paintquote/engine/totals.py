"""Cart-level totals: subtotal, volume discount, long-job travel adjustment.

Travel is assumed to be included once per order. As soon as any single item
runs past the long-job threshold the cart switches to per-item travel and
charges a travel share for every item except the one with the largest share.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from paintquote.models.cart import CartTotals, LineItem, TravelFeeMode

ZERO = Decimal("0")
TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class TotalsPolicy:
    discount_threshold: Decimal = Decimal("1000")  # discount applies strictly above this
    discount_rate: Decimal = Decimal("0.15")
    long_job_hours: int = 10  # any item strictly above switches to per-item travel
    travel_share: Decimal = Decimal("0.5")  # fraction of an item's other_fees that is travel

    @classmethod
    def from_settings(cls, settings) -> "TotalsPolicy":
        return cls(
            discount_threshold=settings.discount_threshold,
            discount_rate=settings.discount_rate,
            long_job_hours=settings.long_job_hours,
            travel_share=settings.travel_share,
        )


DEFAULT_POLICY = TotalsPolicy()


def _travel_adjustment(items: list[LineItem], policy: TotalsPolicy) -> tuple[TravelFeeMode, Decimal]:
    if not any(item.estimate.total_hours > policy.long_job_hours for item in items):
        return TravelFeeMode.PER_ORDER, ZERO

    shares = sorted(
        (max(ZERO, item.estimate.other_fees * policy.travel_share) for item in items),
        reverse=True,
    )
    # The largest share is the baseline already included once per order.
    adjustment = sum(shares[1:], ZERO)
    return TravelFeeMode.PER_ITEM, adjustment.quantize(TWO_PLACES, ROUND_HALF_UP)


def compute_totals(items: Iterable[LineItem], policy: TotalsPolicy = DEFAULT_POLICY) -> CartTotals:
    items = list(items)
    subtotal = sum((item.estimate.total_cost for item in items), ZERO)

    discount = ZERO
    if subtotal > policy.discount_threshold:
        discount = (subtotal * policy.discount_rate).quantize(TWO_PLACES, ROUND_HALF_UP)

    mode, adjustment = _travel_adjustment(items, policy)
    grand_total = max(ZERO, subtotal + adjustment - discount)

    return CartTotals(
        items_subtotal=subtotal,
        discount=discount,
        travel_fee_mode=mode,
        travel_fee_adjustment=adjustment,
        grand_total=grand_total,
    )
