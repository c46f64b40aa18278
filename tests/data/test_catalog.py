"""Tests for the static service catalog."""

from decimal import Decimal

from paintquote.data.catalog import (
    PROMOTIONS,
    SERVICES,
    get_promotion,
    get_service,
    services_by_category,
    services_by_type,
)
from paintquote.models.services import ServiceCategory, ServiceType


class TestServices:
    def test_ids_are_unique(self):
        ids = [s.id for s in SERVICES] + [p.id for p in PROMOTIONS]
        assert len(ids) == len(set(ids))

    def test_lookup(self):
        service = get_service("small-closet")
        assert service.type == ServiceType.FLAT_RATE
        assert service.flat_rate == Decimal("150")
        assert get_service("missing") is None

    def test_flat_rates_have_prices(self):
        for service in services_by_type(ServiceType.FLAT_RATE):
            assert service.flat_rate is not None and service.flat_rate > 0

    def test_flat_rate_services(self):
        ids = {s.id for s in services_by_type(ServiceType.FLAT_RATE)}
        assert ids == {"small-closet", "mailbox-post", "shutters", "small-fence"}

    def test_by_category(self):
        emergency = services_by_category(ServiceCategory.EMERGENCY)
        assert [s.id for s in emergency] == ["emergency-247"]
        assert emergency[0].type == ServiceType.CUSTOM_QUOTE


class TestPromotions:
    def test_derived_savings(self):
        promo = get_promotion("january-jumpstart")
        assert promo.savings == Decimal("850")
        assert promo.percentage == 46

    def test_every_promotion_is_discounted(self):
        for promo in PROMOTIONS:
            assert promo.price < promo.original_price
            assert 0 < promo.percentage < 100

    def test_missing(self):
        assert get_promotion("summer-sale") is None
