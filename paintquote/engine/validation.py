"""Form payload validation.

Turns loosely typed form parameters into surface specs before they reach the
estimator. Two outcomes are kept apart:

- missing, blank, non-numeric or zero values become None ("not yet
  computable"), and the estimator then returns no breakdown;
- negative values, fractional counts and out-of-range choices raise
  InputValidationError.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from paintquote.models.doors import DoorFamily, DoorSpec
from paintquote.models.rates import DEFAULT_RATES, RateTable
from paintquote.models.surfaces import (
    BaseboardProfile,
    CabinetSection,
    FenceSpec,
    LinearRunSpec,
    RoomSpec,
    StaircaseSpec,
)

_TRUTHY = {"true", "1", "yes", "on"}


class InputValidationError(ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def coerce_number(value: Any) -> Optional[Decimal]:
    """Best-effort numeric parse. Anything unparseable is None, never 0."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    if not number.is_finite():
        return None
    return number


def require_non_negative(field: str, value: Optional[Decimal]) -> Optional[Decimal]:
    if value is not None and value < 0:
        raise InputValidationError(field, "cannot be negative")
    return value


def dimension(params: Mapping, field: str, minimum: Optional[Decimal] = None) -> Optional[Decimal]:
    value = require_non_negative(field, coerce_number(params.get(field)))
    if value is None or value == 0:
        return None
    if minimum is not None and value < minimum:
        raise InputValidationError(field, f"must be at least {minimum}")
    return value


def count(params: Mapping, field: str, default: int = 0) -> int:
    value = require_non_negative(field, coerce_number(params.get(field)))
    if value is None:
        return default
    if value != value.to_integral_value():
        raise InputValidationError(field, "must be a whole number")
    return int(value)


def flag(params: Mapping, field: str, default: bool = False) -> bool:
    value = params.get(field, default)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def coats(params: Mapping, default: int = 2) -> int:
    value = count(params, "coats", default)
    if value not in (1, 2):
        raise InputValidationError("coats", "must be 1 or 2")
    return value


def profile(params: Mapping, field: str = "baseboard_profile",
            default: BaseboardProfile = BaseboardProfile.LOW) -> BaseboardProfile:
    raw = params.get(field)
    if raw in (None, ""):
        return default
    try:
        return BaseboardProfile(str(raw).strip().lower())
    except ValueError:
        raise InputValidationError(field, "must be 'low' or 'high'")


# ------------------------------------------------------------------
# Spec builders
# ------------------------------------------------------------------

def validate_room_params(params: Mapping, rates: RateTable = DEFAULT_RATES) -> RoomSpec:
    """Room payload to RoomSpec. Heights under the minimum wall height are rejected."""
    return RoomSpec(
        length=dimension(params, "length"),
        width=dimension(params, "width"),
        height=dimension(params, "height", minimum=rates.min_wall_height),
        coats=coats(params),
        include_ceiling=flag(params, "include_ceiling"),
        include_baseboards=flag(params, "include_baseboards"),
        baseboard_profile=profile(params),
        include_trim=flag(params, "include_trim"),
        doors=count(params, "doors"),
        windows=count(params, "windows"),
        closets=count(params, "closets"),
        accent_walls=flag(params, "accent_walls"),
        crown_molding=flag(params, "crown_molding"),
        stucco_ceiling=flag(params, "stucco_ceiling"),
        ensuite_bathroom=flag(params, "ensuite_bathroom"),
    )


def room_specs(params: Mapping, rates: RateTable = DEFAULT_RATES) -> list[RoomSpec]:
    rooms = params.get("rooms") or []
    if not isinstance(rooms, list):
        raise InputValidationError("rooms", "must be a list")
    specs = []
    for index, room in enumerate(rooms):
        if not isinstance(room, Mapping):
            raise InputValidationError(f"rooms[{index}]", "must be an object")
        try:
            specs.append(validate_room_params(room, rates))
        except InputValidationError as e:
            raise InputValidationError(f"rooms[{index}].{e.field}", e.message)
    return specs


def linear_run_spec(params: Mapping, default_profile: BaseboardProfile = BaseboardProfile.LOW) -> LinearRunSpec:
    return LinearRunSpec(
        linear_feet=dimension(params, "linear_feet"),
        profile=profile(params, "profile", default_profile),
        coats=coats(params),
    )


def staircase_spec(params: Mapping) -> StaircaseSpec:
    railing_feet = dimension(params, "railing_feet") or dimension(params, "linear_feet")
    return StaircaseSpec(
        wall_area=dimension(params, "wall_area") or Decimal("0"),
        ceiling_area=dimension(params, "ceiling_area") or Decimal("0"),
        include_railings=flag(params, "include_railings", default=True),
        railing_feet=railing_feet or Decimal("0"),
    )


def fence_spec(params: Mapping) -> FenceSpec:
    sides = count(params, "sides", default=1)
    if sides not in (1, 2):
        raise InputValidationError("sides", "must be 1 or 2")
    return FenceSpec(
        linear_feet=dimension(params, "linear_feet"),
        height=dimension(params, "height"),
        sides=sides,
        stain=flag(params, "stain"),
    )


def cabinet_sections(params: Mapping) -> list[CabinetSection]:
    raw_sections = params.get("sections")
    if raw_sections is None:
        raw_sections = [params]
    if not isinstance(raw_sections, list):
        raise InputValidationError("sections", "must be a list")
    sections = []
    for index, raw in enumerate(raw_sections):
        if not isinstance(raw, Mapping):
            raise InputValidationError(f"sections[{index}]", "must be an object")
        try:
            sections.append(
                CabinetSection(
                    doors=count(raw, "doors"),
                    frames=count(raw, "frames"),
                    drawers=count(raw, "drawers"),
                    height=dimension(raw, "height"),
                    width=dimension(raw, "width"),
                    include_hardware=flag(raw, "include_hardware"),
                )
            )
        except InputValidationError as e:
            raise InputValidationError(f"sections[{index}].{e.field}", e.message)
    return sections


def door_spec(family: DoorFamily, params: Mapping) -> DoorSpec:
    # An absent count means one door; a blank or unreadable one is not computable.
    default = 1 if params.get("door_count") is None else 0
    return DoorSpec(
        family=family,
        count=count(params, "door_count", default=default),
        include_frames=flag(params, "include_frames"),
        include_hardware=flag(params, "include_hardware"),
        include_weatherproofing=(
            flag(params, "include_weatherproofing", default=True)
            if family == DoorFamily.FRONT
            else False
        ),
    )
