"""Tests for cart totals: discount, long-job travel and grand total."""

from decimal import Decimal

from paintquote.engine.totals import TotalsPolicy, compute_totals
from paintquote.models.cart import TravelFeeMode


class TestDiscount:
    def test_empty_cart(self):
        totals = compute_totals([])
        assert totals.items_subtotal == Decimal("0")
        assert totals.grand_total == Decimal("0")
        assert totals.travel_fee_mode == TravelFeeMode.PER_ORDER

    def test_no_discount_at_threshold(self, make_item):
        totals = compute_totals([make_item(labor_cost=Decimal("1000"))])
        assert totals.discount == Decimal("0")
        assert totals.grand_total == Decimal("1000")

    def test_discount_just_above_threshold(self, make_item):
        totals = compute_totals([make_item(labor_cost=Decimal("1000.01"))])
        assert totals.discount == Decimal("150.00")
        assert totals.grand_total == Decimal("850.01")

    def test_subtotal_is_sum_of_item_totals(self, make_item):
        items = [
            make_item(labor_cost=Decimal("300"), travel_fee=Decimal("50")),
            make_item(material_cost=Decimal("120"), prep_fee=Decimal("30")),
        ]
        assert compute_totals(items).items_subtotal == Decimal("500")

    def test_custom_policy(self, make_item):
        policy = TotalsPolicy(discount_threshold=Decimal("100"), discount_rate=Decimal("0.10"))
        totals = compute_totals([make_item(labor_cost=Decimal("200"))], policy)
        assert totals.discount == Decimal("20.00")


class TestLongJobTravel:
    def test_short_jobs_stay_per_order(self, make_item):
        items = [
            make_item(total_hours=10, travel_fee=Decimal("50")),
            make_item(total_hours=4, travel_fee=Decimal("50")),
        ]
        totals = compute_totals(items)
        assert totals.travel_fee_mode == TravelFeeMode.PER_ORDER
        assert totals.travel_fee_adjustment == Decimal("0")

    def test_long_job_charges_every_share_but_the_largest(self, make_item):
        items = [
            make_item(total_hours=11, prep_fee=Decimal("30"), travel_fee=Decimal("50")),  # share 40
            make_item(total_hours=2, prep_fee=Decimal("10"), travel_fee=Decimal("50")),  # share 30
            make_item(total_hours=1, prep_fee=Decimal("20")),  # share 10
        ]
        totals = compute_totals(items)
        assert totals.travel_fee_mode == TravelFeeMode.PER_ITEM
        assert totals.travel_fee_adjustment == Decimal("40")
        assert totals.grand_total == totals.items_subtotal + Decimal("40")

    def test_single_long_job_has_no_adjustment(self, make_item):
        totals = compute_totals([make_item(total_hours=20, travel_fee=Decimal("50"))])
        assert totals.travel_fee_mode == TravelFeeMode.PER_ITEM
        assert totals.travel_fee_adjustment == Decimal("0")


class TestGrandTotal:
    def test_never_negative(self, make_item):
        totals = compute_totals([make_item(labor_cost=Decimal("-75"))])
        assert totals.grand_total == Decimal("0")

    def test_discount_and_adjustment_combine(self, make_item):
        items = [
            make_item(total_hours=12, labor_cost=Decimal("900"), travel_fee=Decimal("50")),
            make_item(total_hours=3, labor_cost=Decimal("200"), travel_fee=Decimal("50")),
        ]
        totals = compute_totals(items)
        # subtotal 1200, discount 180, adjustment one extra share of 25
        assert totals.items_subtotal == Decimal("1200")
        assert totals.discount == Decimal("180.00")
        assert totals.travel_fee_adjustment == Decimal("25")
        assert totals.grand_total == Decimal("1045")
