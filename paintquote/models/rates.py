"""Rate tables: every constant the estimator prices against.

All values are static business policy. The process builds one RateTable at
startup (see rate_table_from_settings) and never mutates it.
"""

from dataclasses import dataclass, field, fields
from decimal import Decimal


def _check_positive(obj) -> None:
    for f in fields(obj):
        value = getattr(obj, f.name)
        if isinstance(value, (int, Decimal)) and not isinstance(value, bool) and value <= 0:
            raise ValueError(f"{type(obj).__name__}.{f.name} must be positive, got {value}")


@dataclass(frozen=True)
class ProductionRates:
    """Time to complete. Areas in sq ft/hour, runs in linear ft/hour, chunks in hours each."""
    ceiling: Decimal = Decimal("150")
    walls_two_coat: Decimal = Decimal("110")
    walls_one_coat: Decimal = Decimal("180")

    door_flat: Decimal = Decimal("0.5")  # hours per in-room door, trim + jamb, 2 coats
    window_simple: Decimal = Decimal("0.5")

    baseboard_low_one_coat: Decimal = Decimal("60")  # <4"
    baseboard_low_two_coat: Decimal = Decimal("40")
    baseboard_high_one_coat: Decimal = Decimal("50")  # >5"
    baseboard_high_two_coat: Decimal = Decimal("30")

    trim_one_coat: Decimal = Decimal("50")
    trim_two_coat: Decimal = Decimal("30")

    fence_paint: Decimal = Decimal("90")
    fence_stain: Decimal = Decimal("80")

    def __post_init__(self):
        _check_positive(self)


@dataclass(frozen=True)
class SpreadRates:
    """Coverage per gallon."""
    doors_per_gallon: Decimal = Decimal("9")
    baseboard_low_one_coat: Decimal = Decimal("800")  # linear ft per gallon
    baseboard_low_two_coat: Decimal = Decimal("450")
    baseboard_high_one_coat: Decimal = Decimal("700")
    baseboard_high_two_coat: Decimal = Decimal("400")

    def __post_init__(self):
        _check_positive(self)


@dataclass(frozen=True)
class RoomAddonPricing:
    """Dollar add-ons from the booking-flow price list."""
    accent_walls_per_sqft: Decimal = Decimal("1.50")
    crown_molding_per_lf: Decimal = Decimal("6")
    stucco_ceiling_per_sqft: Decimal = Decimal("4.50")
    closet_each: Decimal = Decimal("150")
    ensuite_bathroom: Decimal = Decimal("200")

    def __post_init__(self):
        _check_positive(self)


@dataclass(frozen=True)
class StaircaseDifficulty:
    railings: Decimal = Decimal("1.5")
    walls: Decimal = Decimal("1.3")
    ceiling: Decimal = Decimal("1.4")

    def __post_init__(self):
        _check_positive(self)


@dataclass(frozen=True)
class CabinetRates:
    doors_per_hour: Decimal = Decimal("2")  # prep + prime + 2 coats + hardware
    frames_per_hour: Decimal = Decimal("3")
    drawers_per_hour: Decimal = Decimal("4")
    hardware_per_hour: Decimal = Decimal("6")  # removal + replacement
    setup_cleanup_divisor: int = 4
    paint_multiplier: Decimal = Decimal("2.5")

    def __post_init__(self):
        _check_positive(self)


@dataclass(frozen=True)
class RateTable:
    labor_rate: Decimal = Decimal("50")  # $ per hour
    paint_rate: Decimal = Decimal("50")  # $ per gallon
    supplies_rate: Decimal = Decimal("2")  # $ per billed hour
    paint_coverage: Decimal = Decimal("400")  # sq ft per gallon
    two_coat_multiplier: Decimal = Decimal("1.6")
    setup_cleanup_divisor: int = 6  # productive hours / 6 = setup/cleanup hours
    prep_fee_pct: Decimal = Decimal("0.15")  # of labor cost
    travel_fee: Decimal = Decimal("50")
    min_wall_height: Decimal = Decimal("7")

    production: ProductionRates = field(default_factory=ProductionRates)
    spread: SpreadRates = field(default_factory=SpreadRates)
    room_addons: RoomAddonPricing = field(default_factory=RoomAddonPricing)
    staircase: StaircaseDifficulty = field(default_factory=StaircaseDifficulty)
    cabinets: CabinetRates = field(default_factory=CabinetRates)

    def __post_init__(self):
        _check_positive(self)


DEFAULT_RATES = RateTable()


def rate_table_from_settings(settings) -> RateTable:
    """Build the process-wide rate table, applying any environment overrides."""
    return RateTable(
        labor_rate=settings.labor_rate,
        paint_rate=settings.paint_rate,
        supplies_rate=settings.supplies_rate,
        paint_coverage=settings.paint_coverage,
        travel_fee=settings.travel_fee,
    )
