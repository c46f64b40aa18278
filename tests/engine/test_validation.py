"""Tests for form payload coercion and validation."""

from decimal import Decimal

import pytest

from paintquote.engine.validation import (
    InputValidationError,
    cabinet_sections,
    coerce_number,
    count,
    dimension,
    door_spec,
    fence_spec,
    flag,
    linear_run_spec,
    room_specs,
    staircase_spec,
    validate_room_params,
)
from paintquote.models.doors import DoorFamily
from paintquote.models.surfaces import BaseboardProfile


class TestCoerceNumber:
    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12ft", True, "nan", "Infinity"])
    def test_not_a_number(self, raw):
        assert coerce_number(raw) is None

    def test_numeric_string(self):
        assert coerce_number(" 12.5 ") == Decimal("12.5")

    def test_numbers(self):
        assert coerce_number(3) == Decimal("3")
        assert coerce_number(2.5) == Decimal("2.5")


class TestDimension:
    def test_zero_is_not_computable(self):
        assert dimension({"length": "0"}, "length") is None

    def test_missing_is_not_computable(self):
        assert dimension({}, "length") is None

    def test_negative_rejected(self):
        with pytest.raises(InputValidationError) as exc:
            dimension({"length": "-4"}, "length")
        assert exc.value.field == "length"

    def test_minimum(self):
        with pytest.raises(InputValidationError):
            dimension({"height": "6.5"}, "height", minimum=Decimal("7"))
        assert dimension({"height": "7"}, "height", minimum=Decimal("7")) == Decimal("7")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            dimension({"width": -1}, "width")


class TestCountsAndFlags:
    def test_count_default(self):
        assert count({}, "doors", default=2) == 2

    def test_fractional_count_rejected(self):
        with pytest.raises(InputValidationError):
            count({"doors": "1.5"}, "doors")

    def test_negative_count_rejected(self):
        with pytest.raises(InputValidationError):
            count({"windows": -1}, "windows")

    def test_whole_float_accepted(self):
        assert count({"doors": 3.0}, "doors") == 3

    @pytest.mark.parametrize("raw, expected", [("true", True), ("false", False), ("on", True), (1, True), (0, False)])
    def test_flag(self, raw, expected):
        assert flag({"x": raw}, "x") is expected


class TestRoomParams:
    def test_form_strings(self, standard_room_params, standard_room):
        assert validate_room_params(standard_room_params) == standard_room

    def test_short_wall_rejected(self, standard_room_params):
        with pytest.raises(InputValidationError) as exc:
            validate_room_params({**standard_room_params, "height": "6"})
        assert exc.value.field == "height"

    def test_blank_height_is_not_an_error(self, standard_room_params):
        spec = validate_room_params({**standard_room_params, "height": ""})
        assert spec.height is None

    def test_bad_coats(self, standard_room_params):
        with pytest.raises(InputValidationError):
            validate_room_params({**standard_room_params, "coats": 3})

    def test_bad_profile(self, standard_room_params):
        with pytest.raises(InputValidationError):
            validate_room_params({**standard_room_params, "baseboard_profile": "medium"})

    def test_profile_parsed(self, standard_room_params):
        spec = validate_room_params({**standard_room_params, "baseboard_profile": "HIGH"})
        assert spec.baseboard_profile == BaseboardProfile.HIGH

    def test_room_list_reports_index(self, standard_room_params):
        with pytest.raises(InputValidationError) as exc:
            room_specs({"rooms": [standard_room_params, {**standard_room_params, "height": "5"}]})
        assert exc.value.field == "rooms[1].height"

    def test_rooms_must_be_list(self):
        with pytest.raises(InputValidationError):
            room_specs({"rooms": "two"})

    @pytest.mark.parametrize("room", ["oops", 5, None, ["length", 12]])
    def test_room_entries_must_be_objects(self, room):
        with pytest.raises(InputValidationError) as exc:
            room_specs({"rooms": [room]})
        assert exc.value.field == "rooms[0]"


class TestOtherBuilders:
    def test_linear_run(self):
        spec = linear_run_spec({"linear_feet": "80", "profile": "high", "coats": "1"})
        assert spec.linear_feet == Decimal("80")
        assert spec.profile == BaseboardProfile.HIGH
        assert spec.coats == 1

    def test_staircase_falls_back_to_linear_feet(self):
        spec = staircase_spec({"linear_feet": "30"})
        assert spec.include_railings
        assert spec.railing_feet == Decimal("30")
        assert spec.wall_area == Decimal("0")

    def test_fence_sides(self):
        with pytest.raises(InputValidationError):
            fence_spec({"linear_feet": 50, "height": 6, "sides": 3})

    def test_cabinet_single_section(self):
        sections = cabinet_sections({"doors": 4, "height": 30, "width": 15})
        assert len(sections) == 1
        assert sections[0].doors == 4

    def test_cabinet_section_error_index(self):
        with pytest.raises(InputValidationError) as exc:
            cabinet_sections({"sections": [{"doors": 2}, {"drawers": -1}]})
        assert exc.value.field == "sections[1].drawers"

    def test_door_defaults(self):
        spec = door_spec(DoorFamily.INTERIOR, {})
        assert spec.count == 1
        assert not spec.include_weatherproofing

    def test_front_door_weatherproofing_defaults_on(self):
        assert door_spec(DoorFamily.FRONT, {"door_count": 2}).include_weatherproofing

    def test_cabinet_sections_must_be_objects(self):
        with pytest.raises(InputValidationError) as exc:
            cabinet_sections({"sections": [{"doors": 2}, 5]})
        assert exc.value.field == "sections[1]"

    def test_door_count_must_be_whole(self):
        with pytest.raises(InputValidationError):
            door_spec(DoorFamily.INTERIOR, {"door_count": "2.5"})

    @pytest.mark.parametrize("raw", ["", "  ", "abc"])
    def test_unreadable_door_count_is_zero(self, raw):
        assert door_spec(DoorFamily.INTERIOR, {"door_count": raw}).count == 0

    def test_null_door_count_defaults_to_one(self):
        assert door_spec(DoorFamily.FRONT, {"door_count": None}).count == 1
