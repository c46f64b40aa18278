"""Tests for catalog id -> estimate dispatch."""

from decimal import Decimal

import pytest

from paintquote.data.catalog import SERVICES
from paintquote.engine.services import (
    CALCULATORS,
    UnknownServiceError,
    describe_service,
    door_family,
    estimate_service,
)
from paintquote.engine.validation import InputValidationError
from paintquote.models.services import ServiceType


class TestEstimateService:
    @pytest.mark.parametrize("service_id", ["small-bathroom", "foyer-entryway"])
    def test_room_services(self, service_id, standard_room_params):
        assert estimate_service(service_id, standard_room_params).total_cost == Decimal("557")

    def test_bedrooms(self, standard_room_params):
        b = estimate_service("bedrooms", {"rooms": [standard_room_params, standard_room_params]})
        assert b.total_cost == Decimal("1114")

    def test_ceiling(self):
        assert estimate_service("ceiling", {"length": 12, "width": 10}).total_cost == Decimal("219")

    def test_ceiling_incomplete(self):
        assert estimate_service("ceiling", {"length": 12}) is None

    def test_accent_wall(self):
        assert estimate_service("accent-wall", {"length": "12", "height": "9"}).total_cost == Decimal("219")

    def test_baseboards(self):
        b = estimate_service("trimming-baseboards", {"linear_feet": "100", "profile": "low"})
        assert b.total_cost == Decimal("338")

    @pytest.mark.parametrize("service_id", ["deck-railings", "small-porch"])
    def test_exterior_railings(self, service_id):
        # High-profile two-coat rates: 60 / 30 = 2 hours, +1 setup
        b = estimate_service(service_id, {"linear_feet": "60"})
        assert b.total_hours == 3
        assert b.total_cost == Decimal("279")

    def test_staircase(self):
        b = estimate_service("staircase-railings", {"linear_feet": "30"})
        assert b.total_hours == 3

    def test_fence(self):
        b = estimate_service("fence", {"linear_feet": "100", "height": "6"})
        assert b.total_cost == Decimal("736")

    def test_cabinets(self):
        b = estimate_service(
            "kitchen-cabinets",
            {"sections": [{"doors": 10, "frames": 6, "drawers": 4, "height": 30, "width": 15,
                           "include_hardware": True}]},
        )
        assert b.total_hours == 14

    def test_interior_doors(self):
        assert estimate_service("interior-door", {"door_count": 3}).total_cost == Decimal("225")

    def test_front_door(self):
        assert estimate_service("front-door", {}).total_cost == Decimal("175")

    @pytest.mark.parametrize("raw", ["", "abc"])
    def test_unreadable_door_count_has_no_estimate(self, raw):
        assert estimate_service("interior-door", {"door_count": raw}) is None
        assert estimate_service("front-door", {"door_count": raw}) is None

    def test_malformed_room_list(self):
        with pytest.raises(InputValidationError):
            estimate_service("bedrooms", {"rooms": ["oops"]})

    def test_malformed_cabinet_sections(self):
        with pytest.raises(InputValidationError):
            estimate_service("kitchen-cabinets", {"sections": [5]})

    def test_flat_rate(self):
        assert estimate_service("small-closet", {}).total_cost == Decimal("150")

    def test_promotion(self):
        assert estimate_service("guest-suite", {}).total_cost == Decimal("500")

    def test_custom_quote_has_no_estimate(self):
        assert estimate_service("garage-door", {"anything": 1}) is None

    def test_unknown_service(self):
        with pytest.raises(UnknownServiceError):
            estimate_service("roof-repair", {})

    def test_negative_input(self, standard_room_params):
        with pytest.raises(InputValidationError):
            estimate_service("small-bathroom", {**standard_room_params, "width": "-10"})


class TestCatalogCoverage:
    def test_every_calculated_service_is_priced(self):
        for service in SERVICES:
            if service.type == ServiceType.CALCULATED:
                assert service.id in CALCULATORS or door_family(service.id) is not None, service.id

    def test_describe_service(self):
        assert describe_service("accent-wall") == ("Accent Wall", ServiceType.CALCULATED)
        name, service_type = describe_service("master-suite")
        assert service_type == ServiceType.PROMOTION
        assert "Master Suite Bundle" in name

    def test_describe_unknown(self):
        with pytest.raises(UnknownServiceError):
            describe_service("nope")
