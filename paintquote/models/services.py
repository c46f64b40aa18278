"""Service catalog data types."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class ServiceType(Enum):
    CALCULATED = "calculated"
    FLAT_RATE = "flat-rate"
    CUSTOM_QUOTE = "custom-quote"
    PROMOTION = "promotion"


class ServiceCategory(Enum):
    EMERGENCY = "emergency"
    INTERIOR = "interior"
    EXTERIOR = "exterior"
    SPECIALTY = "specialty"


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str
    type: ServiceType
    category: ServiceCategory
    flat_rate: Optional[Decimal] = None


@dataclass(frozen=True)
class Promotion:
    id: str
    name: str
    subtitle: str
    price: Decimal
    original_price: Decimal
    features: tuple[str, ...] = field(default_factory=tuple)

    @property
    def savings(self) -> Decimal:
        return self.original_price - self.price

    @property
    def percentage(self) -> int:
        if self.original_price <= 0:
            return 0
        return int((self.savings / self.original_price * 100).to_integral_value())
