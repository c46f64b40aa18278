"""Breakdowns for fixed-price items (flat-rate services and promotion bundles).

The price is rounded to whole dollars; paint and supplies take fixed shares and
labor takes the remainder, so the parts always add up to the price.
"""

from decimal import Decimal, ROUND_HALF_UP

from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.services import Promotion

PAINT_SHARE = Decimal("0.2")
SUPPLIES_SHARE = Decimal("0.1")
ONE = Decimal("1")

# Nominal effort shown for a bundle; price does not depend on it.
NOMINAL_LABOR_HOURS = 8
NOMINAL_SETUP_HOURS = 1
NOMINAL_GALLONS = 3


def estimate_flat_rate(price: Decimal, label: str = "Flat rate") -> EstimateBreakdown:
    total = price.quantize(ONE, ROUND_HALF_UP)
    paint = (total * PAINT_SHARE).quantize(ONE, ROUND_HALF_UP)
    supplies = (total * SUPPLIES_SHARE).quantize(ONE, ROUND_HALF_UP)
    labor = total - paint - supplies
    return EstimateBreakdown(
        labor_hours=NOMINAL_LABOR_HOURS,
        setup_cleanup_hours=NOMINAL_SETUP_HOURS,
        total_hours=NOMINAL_LABOR_HOURS + NOMINAL_SETUP_HOURS,
        material_units=NOMINAL_GALLONS,
        labor_cost=labor,
        material_cost=paint,
        supplies_cost=supplies,
        notes=(f"{label}: ${total} (all-inclusive)",),
    )


def estimate_promotion(promotion: Promotion) -> EstimateBreakdown:
    return estimate_flat_rate(promotion.price, label=f"{promotion.name} ({promotion.subtitle})")
