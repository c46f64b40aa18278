"""Cart data types: line items, derived totals, gate and checkout outcomes."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.services import ServiceType


class TravelFeeMode(Enum):
    PER_ORDER = "per-order"  # travel assumed already included once
    PER_ITEM = "per-item"


@dataclass
class LineItem:
    id: str
    service_id: str
    service_name: str
    service_type: ServiceType
    params: dict
    estimate: EstimateBreakdown
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "service_id": self.service_id,
            "service_name": self.service_name,
            "service_type": self.service_type.value,
            "params": dict(self.params),
            "estimate": self.estimate.to_dict(),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        return cls(
            id=data["id"],
            service_id=data["service_id"],
            service_name=data.get("service_name", data["service_id"]),
            service_type=ServiceType(data["service_type"]),
            params=dict(data.get("params", {})),
            estimate=EstimateBreakdown.from_dict(data["estimate"]),
            created_at=datetime.fromisoformat(data["created_at"]),
        )


@dataclass(frozen=True)
class CartTotals:
    items_subtotal: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    travel_fee_mode: TravelFeeMode = TravelFeeMode.PER_ORDER
    travel_fee_adjustment: Decimal = Decimal("0")
    grand_total: Decimal = Decimal("0")

    def to_dict(self) -> dict:
        return {
            "items_subtotal": str(self.items_subtotal),
            "discount": str(self.discount),
            "travel_fee_mode": self.travel_fee_mode.value,
            "travel_fee_adjustment": str(self.travel_fee_adjustment),
            "grand_total": str(self.grand_total),
        }


@dataclass(frozen=True)
class EligibilityResult:
    eligible: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class CheckoutResult:
    submitted: bool
    request_id: Optional[str] = None
    reason: Optional[str] = None
    totals: Optional[CartTotals] = None
