"""Per-door estimator for the combinable door families.

The customer-facing price is count x per-door rate. The breakdown itemizes
that price: hours and gallons scale per door and are rounded up for the whole
count, paint and supplies are costed from them, an optional prep share is
split out, and labor takes the remainder so the parts always add to the price.
Because of the rounding, an estimate for n doors is not n copies of the
estimate for one door.
"""

import logging
import math
from decimal import Decimal
from typing import Optional

from paintquote.models.doors import DOOR_RATES, DoorSpec
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.rates import DEFAULT_RATES, RateTable

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def estimate_doors(spec: DoorSpec, rates: RateTable = DEFAULT_RATES) -> Optional[EstimateBreakdown]:
    if spec.count <= 0:
        return None
    table = DOOR_RATES[spec.family]

    unit_price = table.unit_price(spec)
    price = spec.count * unit_price

    labor_hours = math.ceil(spec.count * table.hours_per_door)
    setup_hours = table.setup_cleanup_hours
    total_hours = labor_hours + setup_hours
    gallons = math.ceil(spec.count * table.gallons_per_door)

    material_cost = gallons * table.paint_rate
    supplies_cost = total_hours * rates.supplies_rate
    prep_fee = (price * table.prep_pct).quantize(TWO_PLACES)
    labor_cost = price - material_cost - supplies_cost - prep_fee

    options = [
        name
        for name, selected in (
            ("frames/trim", spec.include_frames),
            ("hardware", spec.include_hardware),
            ("weatherproofing", spec.include_weatherproofing and table.weatherproofing_price is not None),
        )
        if selected
    ]
    notes = (
        f"{spec.family.value}: {spec.count} x ${unit_price} = ${price}",
        f"Options: {', '.join(options) if options else 'none'}",
        f"Labor hours: {spec.count} x {table.hours_per_door} -> {labor_hours}",
        f"Setup/cleanup: {setup_hours} hours",
        f"Paint: {gallons} gallons x ${table.paint_rate} = ${material_cost}",
    )
    logger.debug("Door estimate %s x%d -> $%s", spec.family.value, spec.count, price)

    return EstimateBreakdown(
        labor_hours=labor_hours,
        setup_cleanup_hours=setup_hours,
        total_hours=total_hours,
        material_units=gallons,
        labor_cost=labor_cost,
        material_cost=material_cost,
        supplies_cost=supplies_cost,
        prep_fee=prep_fee,
        notes=notes,
    )
