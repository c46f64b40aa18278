"""Itemized estimate produced for one priced configuration."""

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class EstimateBreakdown:
    labor_hours: int = 0  # productive hours, rounded up
    setup_cleanup_hours: int = 0
    total_hours: int = 0  # billed hours
    material_units: int = 0  # gallons, rounded up

    labor_cost: Decimal = ZERO
    material_cost: Decimal = ZERO
    supplies_cost: Decimal = ZERO
    addon_cost: Decimal = ZERO  # dollar add-ons and flat fees
    prep_fee: Decimal = ZERO
    travel_fee: Decimal = ZERO

    notes: tuple[str, ...] = ()

    @property
    def other_fees(self) -> Decimal:
        return self.prep_fee + self.travel_fee

    @property
    def subtotal(self) -> Decimal:
        return self.labor_cost + self.material_cost + self.supplies_cost + self.addon_cost

    @property
    def total_cost(self) -> Decimal:
        return self.subtotal + self.other_fees

    def to_dict(self) -> dict:
        return {
            "labor_hours": self.labor_hours,
            "setup_cleanup_hours": self.setup_cleanup_hours,
            "total_hours": self.total_hours,
            "material_units": self.material_units,
            "labor_cost": str(self.labor_cost),
            "material_cost": str(self.material_cost),
            "supplies_cost": str(self.supplies_cost),
            "addon_cost": str(self.addon_cost),
            "prep_fee": str(self.prep_fee),
            "travel_fee": str(self.travel_fee),
            "other_fees": str(self.other_fees),
            "subtotal": str(self.subtotal),
            "total_cost": str(self.total_cost),
            "notes": list(self.notes),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EstimateBreakdown":
        # Derived fields (subtotal, total_cost, other_fees) are recomputed, never read back.
        return cls(
            labor_hours=int(data.get("labor_hours", 0)),
            setup_cleanup_hours=int(data.get("setup_cleanup_hours", 0)),
            total_hours=int(data.get("total_hours", 0)),
            material_units=int(data.get("material_units", 0)),
            labor_cost=Decimal(str(data.get("labor_cost", "0"))),
            material_cost=Decimal(str(data.get("material_cost", "0"))),
            supplies_cost=Decimal(str(data.get("supplies_cost", "0"))),
            addon_cost=Decimal(str(data.get("addon_cost", "0"))),
            prep_fee=Decimal(str(data.get("prep_fee", "0"))),
            travel_fee=Decimal(str(data.get("travel_fee", "0"))),
            notes=tuple(data.get("notes", ())),
        )
