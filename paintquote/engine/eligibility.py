"""Checkout eligibility gate.

Door-only carts are too small a job on their own: interior doors need a
minimum number of units (or another service alongside), front doors always
need another service.
"""

from typing import Iterable

from paintquote.models.cart import EligibilityResult, LineItem
from paintquote.models.doors import DoorFamily

MIN_INTERIOR_DOORS = 3

INTERIOR_DOOR = DoorFamily.INTERIOR.value
FRONT_DOOR = DoorFamily.FRONT.value
DOOR_SERVICES = {family.value for family in DoorFamily}


def _door_units(item: LineItem) -> int:
    try:
        return int(item.params.get("door_count", 1))
    except (TypeError, ValueError):
        return 0


def check_eligibility(items: Iterable[LineItem]) -> EligibilityResult:
    items = list(items)
    if not items:
        return EligibilityResult(False, "Your cart has no items.")

    has_other_service = any(item.service_id not in DOOR_SERVICES for item in items)
    if has_other_service:
        return EligibilityResult(True)

    interior_units = sum(_door_units(i) for i in items if i.service_id == INTERIOR_DOOR)
    if any(i.service_id == FRONT_DOOR for i in items):
        return EligibilityResult(
            False,
            "Front door painting must be booked together with another painting service.",
        )
    if interior_units < MIN_INTERIOR_DOORS:
        return EligibilityResult(
            False,
            f"Interior door painting requires at least {MIN_INTERIOR_DOORS} doors, "
            f"or another painting service in the same order (you have {interior_units}).",
        )
    return EligibilityResult(True)
