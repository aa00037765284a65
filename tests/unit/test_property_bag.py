# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for PropertyBag: typed round-trips, accessor guards, and lazy storage."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import BaseModel

from baseliner.core.exceptions import (
    BaselinerError,
    PropertyNotFoundError,
    PropertyTypeError,
)
from baseliner.models.property_bag import PropertyBag, SerializedProperty


class _Region(BaseModel):
    start_line: int
    end_line: int


# ---------------------------------------------------------------------------
# Round-trips
# ---------------------------------------------------------------------------


class TestRoundTrip:
    def test_string_round_trips_exactly(self):
        bag = PropertyBag()
        bag.set_property("message", 'Use of "eval" detected')
        assert bag.get_property("message") == 'Use of "eval" detected'

    def test_empty_string(self):
        bag = PropertyBag()
        bag.set_property("message", "")
        assert bag.get_property("message") == ""

    @pytest.mark.parametrize(
        ("value", "value_type"),
        [
            (42, int),
            (0.75, float),
            (True, bool),
            ([1, 2, 3], list[int]),
            ({"a": 1, "b": 2}, dict[str, int]),
            (None, type(None)),
        ],
    )
    def test_typed_values_round_trip(self, value, value_type):
        bag = PropertyBag()
        bag.set_property("v", value)
        assert bag.get_property_as("v", value_type) == value

    def test_declared_type_round_trip(self):
        bag = PropertyBag()
        bag.set_property("ranks", (1, 2), tuple[int, int])
        assert bag.get_property_as("ranks", tuple[int, int]) == (1, 2)

    def test_datetime_round_trip(self):
        when = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        bag = PropertyBag()
        bag.set_property("seen", when)
        assert bag.get_property_as("seen", datetime) == when

    def test_model_round_trip(self):
        bag = PropertyBag()
        bag.set_property("region", _Region(start_line=3, end_line=9))
        assert bag.get_property_as("region", _Region) == _Region(start_line=3, end_line=9)

    def test_string_is_tagged(self):
        bag = PropertyBag()
        bag.set_property("s", "1")
        bag.set_property("n", 1)
        assert bag.get_serialized("s") == SerializedProperty('"1"', True)
        assert bag.get_serialized("n") == SerializedProperty("1", False)

    def test_overwrite_replaces_value(self):
        bag = PropertyBag()
        bag.set_property("x", 1)
        bag.set_property("x", "one")
        assert bag.get_property("x") == "one"
        assert len(bag) == 1


# ---------------------------------------------------------------------------
# Accessor guards
# ---------------------------------------------------------------------------


class TestAccessorGuards:
    def test_generic_accessor_rejects_str_type(self):
        bag = PropertyBag()
        bag.set_property("message", "text")
        with pytest.raises(PropertyTypeError):
            bag.get_property_as("message", str)

    def test_generic_accessor_rejects_string_payload(self):
        bag = PropertyBag()
        bag.set_property("message", "123")
        with pytest.raises(PropertyTypeError):
            bag.get_property_as("message", int)

    def test_string_accessor_rejects_non_string(self):
        bag = PropertyBag()
        bag.set_property("rank", 3)
        with pytest.raises(PropertyTypeError):
            bag.get_property("rank")

    def test_try_get_type_mismatch_still_raises(self):
        bag = PropertyBag()
        bag.set_property("rank", 3)
        bag.set_property("message", "m")
        with pytest.raises(PropertyTypeError):
            bag.try_get_property("rank")
        with pytest.raises(PropertyTypeError):
            bag.try_get_property_as("message", int)
        with pytest.raises(PropertyTypeError):
            bag.try_get_property_as("rank", str)

    def test_missing_property_raises_not_found(self):
        bag = PropertyBag()
        with pytest.raises(PropertyNotFoundError):
            bag.get_property("nope")
        with pytest.raises(KeyError):
            bag.get_property_as("nope", int)

    def test_errors_share_base_class(self):
        assert issubclass(PropertyTypeError, BaselinerError)
        assert issubclass(PropertyNotFoundError, BaselinerError)


# ---------------------------------------------------------------------------
# try_get / names / lazy storage
# ---------------------------------------------------------------------------


class TestTryGet:
    def test_missing_returns_false(self):
        bag = PropertyBag()
        assert bag.try_get_property("x") == (False, None)
        assert bag.try_get_property_as("x", int) == (False, None)

    def test_present_returns_value(self):
        bag = PropertyBag({"message": "hi", "rank": 2})
        assert bag.try_get_property("message") == (True, "hi")
        assert bag.try_get_property_as("rank", int) == (True, 2)


class TestStorage:
    def test_lazily_materialized(self):
        bag = PropertyBag()
        assert bag._properties is None
        assert bag.property_names == []
        assert len(bag) == 0
        bag.set_property("x", 1)
        assert bag._properties is not None

    def test_property_names_is_snapshot(self):
        bag = PropertyBag({"a": 1, "b": "two"})
        names = bag.property_names
        bag.set_property("c", 3)
        assert sorted(names) == ["a", "b"]
        assert sorted(bag.property_names) == ["a", "b", "c"]

    def test_remove_property(self):
        bag = PropertyBag({"a": 1})
        assert bag.remove_property("a") is True
        assert bag.remove_property("a") is False
        assert "a" not in bag

    def test_copy_is_independent(self):
        bag = PropertyBag({"a": 1})
        clone = bag.copy()
        clone.set_property("b", 2)
        assert "b" not in bag
        assert clone.get_property_as("a", int) == 1

    def test_equality_ignores_lazy_state(self):
        assert PropertyBag() == PropertyBag({})
        assert PropertyBag({"a": 1}) == PropertyBag({"a": 1})
        assert PropertyBag({"a": 1}) != PropertyBag({"a": "1"})

    def test_unknown_values_pass_through_verbatim(self):
        source = PropertyBag()
        source.set_serialized("vendor", SerializedProperty('{"x":[1,2]}', False))
        target = PropertyBag()
        target.set_serialized("vendor", source.get_serialized("vendor"))
        assert target.get_serialized("vendor").payload == '{"x":[1,2]}'

    def test_to_dict_decodes_values(self):
        bag = PropertyBag({"message": "m", "rank": 2, "tags": ["a"]})
        assert bag.to_dict() == {"message": "m", "rank": 2, "tags": ["a"]}
        assert PropertyBag.from_dict(bag.to_dict()) == bag

    def test_payloads_round_trip_verbatim(self):
        bag = PropertyBag({"message": "m"})
        bag.set_serialized("vendor", SerializedProperty('{"b": 1.50, "a": 2}', False))
        restored = PropertyBag.from_payloads(bag.to_payloads())
        assert restored.get_serialized("vendor").payload == '{"b": 1.50, "a": 2}'
        assert restored == bag

    def test_to_payloads_keeps_string_tag(self):
        bag = PropertyBag({"level": "error", "rank": 1})
        assert bag.to_payloads() == {
            "level": {"payload": '"error"', "is_string": True},
            "rank": {"payload": "1", "is_string": False},
        }


class TestSameValue:
    def test_reordered_object_is_same_value(self):
        first = SerializedProperty('{"a":1,"b":2}', False)
        second = SerializedProperty('{"b": 2, "a": 1}', False)
        assert first.same_value(second)

    def test_string_and_number_differ(self):
        assert not SerializedProperty('"1"', True).same_value(SerializedProperty("1", False))

    def test_strings_compare_by_payload(self):
        assert not SerializedProperty('"a "', True).same_value(SerializedProperty('"a"', True))

    def test_unparseable_payloads_differ(self):
        assert not SerializedProperty("{", False).same_value(SerializedProperty("[", False))
