"""Service dispatch: catalog id + form payload -> EstimateBreakdown.

Validation runs first (paintquote.engine.validation), so estimators only ever
see well-formed specs. Returns None when the payload is not yet computable or
the service is quoted by a person.
"""

import logging
from typing import Callable, Mapping, Optional

from paintquote.data.catalog import get_promotion, get_service
from paintquote.engine import validation
from paintquote.engine.doors import estimate_doors
from paintquote.engine.estimator import (
    estimate_accent_wall,
    estimate_baseboards,
    estimate_bedrooms,
    estimate_cabinets,
    estimate_ceiling,
    estimate_fence,
    estimate_room,
    estimate_staircase,
)
from paintquote.engine.flat_rate import estimate_flat_rate, estimate_promotion
from paintquote.engine.geometry import ceiling_area
from paintquote.models.doors import DoorFamily
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.rates import DEFAULT_RATES, RateTable
from paintquote.models.services import ServiceType
from paintquote.models.surfaces import BaseboardProfile, LinearRunSpec

logger = logging.getLogger(__name__)

Estimator = Callable[[Mapping, RateTable], Optional[EstimateBreakdown]]


class UnknownServiceError(ValueError):
    def __init__(self, service_id: str):
        super().__init__(f"Unknown service: {service_id}")
        self.service_id = service_id


def _accent_wall(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    length = validation.dimension(params, "length")
    height = validation.dimension(params, "height", minimum=rates.min_wall_height)
    return estimate_accent_wall(length, height, rates)


def _ceiling(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    length = validation.dimension(params, "length")
    width = validation.dimension(params, "width")
    if length is None or width is None:
        return None
    return estimate_ceiling(ceiling_area(length, width), rates)


def _room(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    return estimate_room(validation.validate_room_params(params, rates), rates)


def _bedrooms(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    return estimate_bedrooms(validation.room_specs(params, rates), rates)


def _baseboards(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    return estimate_baseboards(validation.linear_run_spec(params), rates)


def _exterior_railings(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    # Railings are priced like high-profile baseboards, two coats.
    spec = LinearRunSpec(
        linear_feet=validation.dimension(params, "linear_feet"),
        profile=BaseboardProfile.HIGH,
        coats=2,
    )
    return estimate_baseboards(spec, rates)


def _staircase(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    return estimate_staircase(validation.staircase_spec(params), rates)


def _fence(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    return estimate_fence(validation.fence_spec(params), rates)


def _cabinets(params: Mapping, rates: RateTable) -> Optional[EstimateBreakdown]:
    return estimate_cabinets(validation.cabinet_sections(params), rates)


CALCULATORS: dict[str, Estimator] = {
    "accent-wall": _accent_wall,
    "ceiling": _ceiling,
    "small-bathroom": _room,
    "foyer-entryway": _room,
    "bedrooms": _bedrooms,
    "trimming-baseboards": _baseboards,
    "staircase-railings": _staircase,
    "deck-railings": _exterior_railings,
    "small-porch": _exterior_railings,
    "fence": _fence,
    "kitchen-cabinets": _cabinets,
}

DOOR_SERVICES: dict[str, DoorFamily] = {family.value: family for family in DoorFamily}


def door_family(service_id: str) -> Optional[DoorFamily]:
    return DOOR_SERVICES.get(service_id)


def describe_service(service_id: str) -> tuple[str, ServiceType]:
    """(display name, service type) for a catalog service or promotion id."""
    promotion = get_promotion(service_id)
    if promotion is not None:
        return f"{promotion.name} ({promotion.subtitle})", ServiceType.PROMOTION
    service = get_service(service_id)
    if service is None:
        raise UnknownServiceError(service_id)
    return service.name, service.type


def estimate_service(
    service_id: str, params: Mapping, rates: RateTable = DEFAULT_RATES
) -> Optional[EstimateBreakdown]:
    """Estimate one service from its form payload.

    Raises:
        UnknownServiceError: service_id is not in the catalog.
        InputValidationError: the payload has negative or out-of-range values.
    """
    family = door_family(service_id)
    if family is not None:
        return estimate_doors(validation.door_spec(family, params), rates)

    promotion = get_promotion(service_id)
    if promotion is not None:
        return estimate_promotion(promotion)

    service = get_service(service_id)
    if service is None:
        raise UnknownServiceError(service_id)
    if service.type == ServiceType.CUSTOM_QUOTE:
        return None
    if service.type == ServiceType.FLAT_RATE:
        return estimate_flat_rate(service.flat_rate, label=service.name)

    calculator = CALCULATORS.get(service_id)
    if calculator is None:
        raise UnknownServiceError(service_id)
    estimate = calculator(params, rates)
    if estimate is None:
        logger.debug("Estimate for %s not computable from %s", service_id, sorted(params))
    return estimate
