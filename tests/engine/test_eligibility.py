"""Tests for the checkout eligibility gate."""

from paintquote.engine.cart import Cart
from paintquote.engine.eligibility import DOOR_SERVICES, check_eligibility
from paintquote.models.doors import DoorFamily


def _cart(*lines) -> Cart:
    cart = Cart()
    for service_id, params in lines:
        cart.add_item(service_id, params)
    return cart


ROOM = ("small-bathroom", {"length": 8, "width": 6, "height": 8})


class TestEligibility:
    def test_empty_cart(self):
        result = check_eligibility([])
        assert not result.eligible
        assert result.reason == "Your cart has no items."

    def test_regular_service(self):
        result = check_eligibility(_cart(ROOM).items)
        assert result.eligible
        assert result.reason is None

    def test_too_few_interior_doors(self):
        result = check_eligibility(_cart(("interior-door", {"door_count": 2})).items)
        assert not result.eligible
        assert "at least 3 doors" in result.reason

    def test_three_interior_doors(self):
        assert check_eligibility(_cart(("interior-door", {"door_count": 3})).items).eligible

    def test_interior_door_units_across_configurations(self):
        cart = _cart(
            ("interior-door", {"door_count": 2}),
            ("interior-door", {"door_count": 1, "include_frames": True}),
        )
        assert len(cart.items) == 2
        assert check_eligibility(cart.items).eligible

    def test_interior_doors_with_other_service(self):
        cart = _cart(("interior-door", {"door_count": 1}), ROOM)
        assert check_eligibility(cart.items).eligible

    def test_front_door_alone(self):
        result = check_eligibility(_cart(("front-door", {"door_count": 2})).items)
        assert not result.eligible
        assert "another painting service" in result.reason

    def test_front_door_needs_non_door_service(self):
        cart = _cart(("front-door", {}), ("interior-door", {"door_count": 4}))
        assert not check_eligibility(cart.items).eligible

    def test_front_door_with_room(self):
        assert check_eligibility(_cart(("front-door", {}), ROOM).items).eligible

    def test_does_not_mutate(self):
        cart = _cart(("interior-door", {"door_count": 1}))
        before = [item.to_dict() for item in cart.items]
        check_eligibility(cart.items)
        assert [item.to_dict() for item in cart.items] == before

    def test_adding_a_door_to_the_same_cart_unlocks_checkout(self):
        cart = _cart(("interior-door", {"door_count": 2}))
        assert not cart.eligibility.eligible
        cart.add_item("interior-door", {"door_count": 1})
        assert len(cart) == 1
        assert cart.eligibility.eligible

    def test_adding_another_service_to_the_same_cart_unlocks_checkout(self):
        cart = _cart(("interior-door", {"door_count": 2}))
        assert not cart.eligibility.eligible
        cart.add_item(*ROOM)
        assert cart.eligibility.eligible

    def test_door_service_ids_match_door_families(self):
        assert DOOR_SERVICES == {family.value for family in DoorFamily}
        assert check_eligibility(_cart(("front-door", {}), ROOM).items).eligible
