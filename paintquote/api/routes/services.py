"""Service catalog routes."""

from fastapi import APIRouter, HTTPException, Query

from paintquote.api.schemas import (
    PromotionResponse,
    ServiceResponse,
    promotion_response,
    service_response,
)
from paintquote.data.catalog import (
    PROMOTIONS,
    SERVICES,
    get_service,
    services_by_category,
    services_by_type,
)
from paintquote.models.services import ServiceCategory, ServiceType

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get("/services", response_model=list[ServiceResponse])
def list_services(
    category: ServiceCategory | None = None,
    service_type: ServiceType | None = Query(None, alias="type"),
):
    """List catalog services, optionally filtered by category and/or pricing type."""
    services = list(SERVICES)
    if category is not None:
        services = [s for s in services_by_category(category) if s in services]
    if service_type is not None:
        services = [s for s in services_by_type(service_type) if s in services]
    return [service_response(s) for s in services]


@router.get("/services/{service_id}", response_model=ServiceResponse)
def get_service_detail(service_id: str):
    service = get_service(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Unknown service: {service_id}")
    return service_response(service)


@router.get("/promotions", response_model=list[PromotionResponse])
def list_promotions():
    return [promotion_response(p) for p in PROMOTIONS]
