"""Per-door service families and their per-unit rate tables."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class DoorFamily(Enum):
    INTERIOR = "interior-door"
    FRONT = "front-door"


@dataclass(frozen=True)
class DoorConfigurationKey:
    """Identity of a door configuration for merge purposes. Count is excluded."""
    family: DoorFamily
    include_frames: bool = False
    include_hardware: bool = False
    include_weatherproofing: bool = False


@dataclass(frozen=True)
class DoorSpec:
    family: DoorFamily
    count: int
    include_frames: bool = False
    include_hardware: bool = False
    include_weatherproofing: bool = False

    @property
    def configuration_key(self) -> DoorConfigurationKey:
        return DoorConfigurationKey(
            family=self.family,
            include_frames=self.include_frames,
            include_hardware=self.include_hardware,
            include_weatherproofing=self.include_weatherproofing,
        )

    def with_count(self, count: int) -> "DoorSpec":
        return DoorSpec(
            family=self.family,
            count=count,
            include_frames=self.include_frames,
            include_hardware=self.include_hardware,
            include_weatherproofing=self.include_weatherproofing,
        )


@dataclass(frozen=True)
class DoorRateTable:
    base_price: Decimal
    frame_price: Decimal
    hardware_price: Decimal
    weatherproofing_price: Decimal | None  # None = option not offered
    hours_per_door: Decimal
    gallons_per_door: Decimal
    paint_rate: Decimal = Decimal("45")  # $ per gallon
    setup_cleanup_hours: int = 1
    prep_pct: Decimal = Decimal("0")  # share of price itemized as prep

    def unit_price(self, spec: DoorSpec) -> Decimal:
        price = self.base_price
        if spec.include_frames:
            price += self.frame_price
        if spec.include_hardware:
            price += self.hardware_price
        if spec.include_weatherproofing and self.weatherproofing_price is not None:
            price += self.weatherproofing_price
        return price


DOOR_RATES: dict[DoorFamily, DoorRateTable] = {
    DoorFamily.INTERIOR: DoorRateTable(
        base_price=Decimal("75"),
        frame_price=Decimal("25"),
        hardware_price=Decimal("15"),
        weatherproofing_price=None,
        hours_per_door=Decimal("1.5"),
        gallons_per_door=Decimal("0.25"),
    ),
    DoorFamily.FRONT: DoorRateTable(
        base_price=Decimal("150"),
        frame_price=Decimal("25"),
        hardware_price=Decimal("20"),
        weatherproofing_price=Decimal("25"),  # caulking, sealing
        hours_per_door=Decimal("2"),
        gallons_per_door=Decimal("0.5"),
        prep_pct=Decimal("0.05"),
    ),
}
