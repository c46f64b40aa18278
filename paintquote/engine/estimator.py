"""Dimensional cost estimator.

Pure functions: surface description in, EstimateBreakdown out. No I/O.

Every estimate follows the same costing: raw productive hours are rounded up
to whole hours, setup/cleanup is added once on top, and each paint bucket
(ceiling, wall, trim) is rounded up to whole gallons. A missing or zero
required dimension yields None instead of a zero-cost breakdown.
"""

import logging
import math
from dataclasses import fields, replace
from decimal import Decimal
from typing import Iterable, Optional

from paintquote.engine.geometry import ceiling_area, perimeter, wall_area
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.rates import DEFAULT_RATES, RateTable
from paintquote.models.surfaces import (
    BaseboardProfile,
    CabinetSection,
    FenceSpec,
    LinearRunSpec,
    RoomSpec,
    StaircaseSpec,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _price(
    raw_hours: Decimal,
    paint_buckets: Iterable[Decimal],
    rates: RateTable,
    notes: list[str],
    addon_cost: Decimal = ZERO,
    setup_divisor: Optional[int] = None,
) -> EstimateBreakdown:
    """Turn raw hours and raw gallons into a costed breakdown."""
    divisor = setup_divisor or rates.setup_cleanup_divisor
    labor_hours = math.ceil(raw_hours)
    setup_hours = math.ceil(Decimal(labor_hours) / divisor)
    total_hours = labor_hours + setup_hours

    gallons = [math.ceil(b) for b in paint_buckets]
    material_units = sum(gallons)

    labor_cost = total_hours * rates.labor_rate
    material_cost = material_units * rates.paint_rate
    supplies_cost = total_hours * rates.supplies_rate
    prep_fee = Decimal(math.ceil(labor_cost * rates.prep_fee_pct))
    travel_fee = rates.travel_fee

    lines = list(notes)
    lines.append(f"Total raw labor: {raw_hours:.2f} -> {labor_hours} hours")
    lines.append(f"Setup/cleanup: {labor_hours} / {divisor} = {setup_hours} hours")
    lines.append(f"Total hours: {total_hours}")
    lines.append(f"Paint: {material_units} gallons x ${rates.paint_rate} = ${material_cost}")
    lines.append(f"Labor: {total_hours} hours x ${rates.labor_rate} = ${labor_cost}")
    lines.append(f"Supplies: {total_hours} hours x ${rates.supplies_rate} = ${supplies_cost}")
    if addon_cost:
        lines.append(f"Add-ons: ${addon_cost}")
    lines.append(f"Other fees (prep & travel): ${prep_fee + travel_fee}")

    return EstimateBreakdown(
        labor_hours=labor_hours,
        setup_cleanup_hours=setup_hours,
        total_hours=total_hours,
        material_units=material_units,
        labor_cost=labor_cost,
        material_cost=material_cost,
        supplies_cost=supplies_cost,
        addon_cost=addon_cost,
        prep_fee=prep_fee,
        travel_fee=travel_fee,
        notes=tuple(lines),
    )


def _wall_rate(coats: int, rates: RateTable) -> Decimal:
    p = rates.production
    return p.walls_two_coat if coats == 2 else p.walls_one_coat


def _wall_gallons(area: Decimal, coats: int, rates: RateTable) -> Decimal:
    multiplier = rates.two_coat_multiplier if coats == 2 else Decimal("1")
    return area / rates.paint_coverage * multiplier


def _baseboard_rates(profile: BaseboardProfile, coats: int, rates: RateTable) -> tuple[Decimal, Decimal]:
    """(production lf/hour, spread lf/gallon) for a baseboard profile."""
    p, s = rates.production, rates.spread
    if profile == BaseboardProfile.LOW:
        if coats == 2:
            return p.baseboard_low_two_coat, s.baseboard_low_two_coat
        return p.baseboard_low_one_coat, s.baseboard_low_one_coat
    if coats == 2:
        return p.baseboard_high_two_coat, s.baseboard_high_two_coat
    return p.baseboard_high_one_coat, s.baseboard_high_one_coat


def _trim_rates(coats: int, rates: RateTable) -> tuple[Decimal, Decimal]:
    p, s = rates.production, rates.spread
    if coats == 2:
        return p.trim_two_coat, s.baseboard_high_two_coat
    return p.trim_one_coat, s.baseboard_high_one_coat


# ------------------------------------------------------------------
# Single surfaces
# ------------------------------------------------------------------

def estimate_walls(
    area: Optional[Decimal], coats: int = 2, rates: RateTable = DEFAULT_RATES
) -> Optional[EstimateBreakdown]:
    if not area:
        return None
    production = _wall_rate(coats, rates)
    hours = area / production
    notes = [f"Wall area: {area} sq ft ({coats} coat{'s' if coats > 1 else ''})"]
    return _price(hours, [_wall_gallons(area, coats, rates)], rates, notes)


def estimate_ceiling(area: Optional[Decimal], rates: RateTable = DEFAULT_RATES) -> Optional[EstimateBreakdown]:
    if not area:
        return None
    hours = area / rates.production.ceiling
    notes = [f"Ceiling area: {area} sq ft"]
    return _price(hours, [area / rates.paint_coverage], rates, notes)


def estimate_accent_wall(
    length: Optional[Decimal], height: Optional[Decimal], rates: RateTable = DEFAULT_RATES
) -> Optional[EstimateBreakdown]:
    """A single feature wall, always two coats."""
    if not length or not height:
        return None
    return estimate_walls(length * height, coats=2, rates=rates)


def estimate_baseboards(spec: LinearRunSpec, rates: RateTable = DEFAULT_RATES) -> Optional[EstimateBreakdown]:
    if not spec.linear_feet:
        return None
    production, spread = _baseboard_rates(spec.profile, spec.coats, rates)
    hours = spec.linear_feet / production
    notes = [
        f"Baseboards: {spec.linear_feet} linear ft ({spec.profile.value} profile, "
        f"{spec.coats} coat{'s' if spec.coats > 1 else ''})"
    ]
    return _price(hours, [spec.linear_feet / spread], rates, notes)


# ------------------------------------------------------------------
# Rooms
# ------------------------------------------------------------------

def estimate_room(spec: RoomSpec, rates: RateTable = DEFAULT_RATES) -> Optional[EstimateBreakdown]:
    """Walls plus any selected ceiling, trim, fixtures and add-ons.

    Raw hours from every surface are summed before rounding, so setup/cleanup
    is charged once for the whole room.
    """
    if not spec.length or not spec.width or not spec.height:
        return None

    p, s, addons = rates.production, rates.spread, rates.room_addons
    walls = wall_area(spec.length, spec.width, spec.height)
    ceiling = ceiling_area(spec.length, spec.width)
    run = perimeter(spec.length, spec.width)

    raw_hours = ZERO
    ceiling_paint = ZERO
    trim_paint = ZERO
    addon_cost = ZERO
    notes: list[str] = []

    wall_hours = walls / _wall_rate(spec.coats, rates)
    raw_hours += wall_hours
    wall_paint = _wall_gallons(walls, spec.coats, rates)
    notes.append(f"Walls: {walls} sq ft = {wall_hours:.2f} hours")

    if spec.include_ceiling:
        ceiling_hours = ceiling / p.ceiling
        raw_hours += ceiling_hours
        ceiling_paint = ceiling / rates.paint_coverage
        notes.append(f"Ceiling: {ceiling} sq ft = {ceiling_hours:.2f} hours")

    if spec.include_baseboards:
        production, spread = _baseboard_rates(spec.baseboard_profile, 2, rates)
        baseboard_hours = run / production
        raw_hours += baseboard_hours
        trim_paint += run / spread
        notes.append(f"Baseboards: {run} ft = {baseboard_hours:.2f} hours")

    if spec.include_trim:
        production, spread = _trim_rates(2, rates)
        trim_hours = run / production
        raw_hours += trim_hours
        trim_paint += run / spread
        notes.append(f"Trim: {run} ft = {trim_hours:.2f} hours")

    if spec.doors > 0:
        door_hours = spec.doors * p.door_flat
        raw_hours += door_hours
        trim_paint += Decimal(spec.doors) / s.doors_per_gallon
        notes.append(f"Doors: {spec.doors} x {p.door_flat} hrs = {door_hours:.2f} hours")

    if spec.windows > 0:
        window_hours = spec.windows * p.window_simple
        raw_hours += window_hours
        notes.append(f"Windows: {spec.windows} x {p.window_simple} hrs = {window_hours:.2f} hours")

    if spec.closets > 0:
        cost = spec.closets * addons.closet_each
        addon_cost += cost
        notes.append(f"Closets: {spec.closets} x ${addons.closet_each} = ${cost}")
    if spec.accent_walls:
        cost = walls * addons.accent_walls_per_sqft
        addon_cost += cost
        notes.append(f"Accent walls: {walls} sq ft x ${addons.accent_walls_per_sqft} = ${cost}")
    if spec.stucco_ceiling:
        cost = ceiling * addons.stucco_ceiling_per_sqft
        addon_cost += cost
        notes.append(f"Stucco ceiling: {ceiling} sq ft x ${addons.stucco_ceiling_per_sqft} = ${cost}")
    if spec.crown_molding:
        cost = run * addons.crown_molding_per_lf
        addon_cost += cost
        notes.append(f"Crown molding: {run} ft x ${addons.crown_molding_per_lf} = ${cost}")
    if spec.ensuite_bathroom:
        addon_cost += addons.ensuite_bathroom
        notes.append(f"Ensuite bathroom: ${addons.ensuite_bathroom}")

    return _price(raw_hours, [ceiling_paint, wall_paint, trim_paint], rates, notes, addon_cost=addon_cost)


def estimate_bedrooms(
    rooms: list[RoomSpec], rates: RateTable = DEFAULT_RATES
) -> Optional[EstimateBreakdown]:
    """Each bedroom is estimated on its own, then the breakdowns are summed."""
    breakdowns = []
    for index, room in enumerate(rooms, start=1):
        estimate = estimate_room(room, rates)
        if estimate is None:
            return None
        breakdowns.append(replace(estimate, notes=(f"--- Bedroom {index} ---",) + estimate.notes))
    return sum_breakdowns(breakdowns)


# ------------------------------------------------------------------
# Staircases, fences, cabinets
# ------------------------------------------------------------------

def estimate_staircase(spec: StaircaseSpec, rates: RateTable = DEFAULT_RATES) -> Optional[EstimateBreakdown]:
    """Stairwell walls, ceiling and optional railings, each with an access-difficulty multiplier."""
    difficulty = rates.staircase
    raw_hours = ZERO
    wall_paint = ZERO
    ceiling_paint = ZERO
    trim_paint = ZERO
    notes: list[str] = []

    if spec.include_railings and spec.railing_feet > 0:
        production, spread = _baseboard_rates(BaseboardProfile.HIGH, 2, rates)
        hours = spec.railing_feet / production * difficulty.railings
        raw_hours += hours
        trim_paint += spec.railing_feet / spread
        notes.append(f"Railings: {spec.railing_feet} ft x {difficulty.railings} (difficulty) = {hours:.2f} hours")

    if spec.wall_area > 0:
        hours = spec.wall_area / rates.production.walls_two_coat * difficulty.walls
        raw_hours += hours
        wall_paint = _wall_gallons(spec.wall_area, 2, rates)
        notes.append(f"Walls: {spec.wall_area} sq ft x {difficulty.walls} (difficulty) = {hours:.2f} hours")

    if spec.ceiling_area > 0:
        hours = spec.ceiling_area / rates.production.ceiling * difficulty.ceiling
        raw_hours += hours
        ceiling_paint = spec.ceiling_area / rates.paint_coverage
        notes.append(f"Ceiling: {spec.ceiling_area} sq ft x {difficulty.ceiling} (difficulty) = {hours:.2f} hours")

    if not raw_hours:
        return None
    return _price(raw_hours, [ceiling_paint, wall_paint, trim_paint], rates, notes)


def estimate_fence(spec: FenceSpec, rates: RateTable = DEFAULT_RATES) -> Optional[EstimateBreakdown]:
    """Fence area painted (two coats) or stained (one coat) on one or both sides."""
    if not spec.linear_feet or not spec.height:
        return None
    area = spec.linear_feet * spec.height * spec.sides
    production = rates.production.fence_stain if spec.stain else rates.production.fence_paint
    coats = 1 if spec.stain else 2
    notes = [
        f"Fence: {spec.linear_feet} ft x {spec.height} ft ({'both sides' if spec.sides == 2 else 'one side'})",
        f"Total area: {area} sq ft",
    ]
    return _price(area / production, [_wall_gallons(area, coats, rates)], rates, notes)


def estimate_cabinet_section(
    section: CabinetSection, rates: RateTable = DEFAULT_RATES
) -> Optional[EstimateBreakdown]:
    if not section.height or not section.width:
        return None
    pieces = section.doors + section.frames + section.drawers
    if pieces <= 0:
        return None

    c = rates.cabinets
    hardware = section.doors + section.drawers if section.include_hardware else 0
    door_hours = math.ceil(section.doors / c.doors_per_hour)
    frame_hours = math.ceil(section.frames / c.frames_per_hour)
    drawer_hours = math.ceil(section.drawers / c.drawers_per_hour)
    hardware_hours = math.ceil(hardware / c.hardware_per_hour)

    area = pieces * (section.height * section.width / 144)
    notes = [
        f"Cabinets: {section.doors} doors, {section.frames} frames, {section.drawers} drawers",
        f"Total area: {area:.1f} sq ft",
        f"Door labor: {door_hours} hours",
        f"Frame labor: {frame_hours} hours",
        f"Drawer labor: {drawer_hours} hours",
        f"Hardware labor: {hardware_hours} hours" if hardware else "Hardware: Not included",
    ]
    raw_hours = Decimal(door_hours + frame_hours + drawer_hours + hardware_hours)
    gallons = area / rates.paint_coverage * c.paint_multiplier
    return _price(raw_hours, [gallons], rates, notes, setup_divisor=c.setup_cleanup_divisor)


def estimate_cabinets(
    sections: list[CabinetSection], rates: RateTable = DEFAULT_RATES
) -> Optional[EstimateBreakdown]:
    breakdowns = []
    for section in sections:
        estimate = estimate_cabinet_section(section, rates)
        if estimate is None:
            return None
        breakdowns.append(estimate)
    return sum_breakdowns(breakdowns)


# ------------------------------------------------------------------
# Multi-unit reduction
# ------------------------------------------------------------------

def sum_breakdowns(breakdowns: Iterable[EstimateBreakdown]) -> Optional[EstimateBreakdown]:
    """Field-wise sum of every numeric field; notes are concatenated in order."""
    items = list(breakdowns)
    if not items:
        return None
    summed = {}
    for f in fields(EstimateBreakdown):
        if f.name == "notes":
            summed[f.name] = tuple(line for b in items for line in b.notes)
        else:
            summed[f.name] = sum((getattr(b, f.name) for b in items), f.default)
    logger.debug("Summed %d unit breakdowns", len(items))
    return EstimateBreakdown(**summed)
