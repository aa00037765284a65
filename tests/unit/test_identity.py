# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for IdentityFacet and Fingerprint value semantics."""

from __future__ import annotations

import dataclasses

import pytest

from baseliner.core.constants import FacetKind
from baseliner.models.facet import IdentityFacet
from baseliner.models.fingerprint import Fingerprint

FIELDS = ("category", "location", "property_set", "property_name", "property_value")


# ---------------------------------------------------------------------------
# IdentityFacet
# ---------------------------------------------------------------------------


class TestIdentityFacet:
    def test_none_normalizes_to_empty_string(self):
        assert IdentityFacet(None, None, None, None, None) == IdentityFacet("", "", "", "", "")
        assert IdentityFacet("R1", None) == IdentityFacet("R1", "")
        assert IdentityFacet("R1", None).location == ""

    def test_none_and_empty_hash_alike(self):
        assert hash(IdentityFacet("R1", None, None)) == hash(IdentityFacet("R1", "", ""))

    def test_reflexive_and_symmetric(self):
        a = IdentityFacet("R1", "src/a.py", "set", "name", "value")
        b = IdentityFacet("R1", "src/a.py", "set", "name", "value")
        assert a == a
        assert a == b and b == a
        assert hash(a) == hash(b)

    @pytest.mark.parametrize("field_name", FIELDS)
    def test_each_field_participates_in_equality(self, field_name):
        base = IdentityFacet("c", "l", "s", "n", "v")
        changed = dataclasses.replace(base, **{field_name: "other"})
        assert base != changed
        assert changed != base

    def test_field_order_matters(self):
        assert IdentityFacet("a", "b") != IdentityFacet("b", "a")
        assert IdentityFacet("a", "b").stable_hash() != IdentityFacet("b", "a").stable_hash()

    def test_hash_is_stable_value(self):
        # Fixed across processes: folded from SHA-256 field digests.
        facet = IdentityFacet("R1", "a.py")
        assert facet.stable_hash() == IdentityFacet("R1", "a.py").stable_hash()
        assert 0 <= facet.stable_hash() < 2**64

    def test_immutable(self):
        facet = IdentityFacet("R1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            facet.category = "R2"  # type: ignore[misc]

    def test_usable_as_dict_key(self):
        groups = {IdentityFacet("R1", "a.py"): 1}
        assert groups[IdentityFacet("R1", "a.py", None)] == 1

    def test_str_joins_fields(self):
        assert str(IdentityFacet("R1", "a.py", "s", "n", "v")) == "R1 | a.py | s | n | v"
        assert str(IdentityFacet()) == " |  |  |  | "

    @pytest.mark.parametrize(
        ("facet", "kind"),
        [
            (IdentityFacet(), FacetKind.EMPTY),
            (IdentityFacet("R1"), FacetKind.CATEGORY),
            (IdentityFacet("R1", "a.py"), FacetKind.LOCATION),
            (IdentityFacet("", "a.py"), FacetKind.LOCATION),
            (IdentityFacet("R1", "a.py", "s"), FacetKind.PROPERTY),
            (IdentityFacet("R1", "", "", "", "v"), FacetKind.PROPERTY),
        ],
    )
    def test_kind(self, facet, kind):
        assert facet.kind is kind


# ---------------------------------------------------------------------------
# Fingerprint
# ---------------------------------------------------------------------------


class TestFingerprint:
    def test_exact_equality_is_ordered(self):
        a, b = IdentityFacet("R1"), IdentityFacet("R1", "x.py")
        assert Fingerprint.of(a, b) == Fingerprint.of(a, b)
        assert Fingerprint.of(a, b) != Fingerprint.of(b, a)
        assert hash(Fingerprint.of(a, b)) == hash(Fingerprint((a, b)))

    def test_list_input_becomes_tuple(self):
        facet = IdentityFacet("R1")
        fp = Fingerprint([facet])  # type: ignore[arg-type]
        assert fp.facets == (facet,)
        assert fp == Fingerprint.of(facet)

    def test_primary_category(self):
        assert Fingerprint.of(IdentityFacet("R1"), IdentityFacet("R2")).primary_category == "R1"
        assert Fingerprint().primary_category == ""

    def test_matching_positions(self):
        left = Fingerprint.of(IdentityFacet("R1"), IdentityFacet("R1", "a.py"), IdentityFacet("x"))
        right = Fingerprint.of(IdentityFacet("R1"), IdentityFacet("R1", "b.py"), IdentityFacet("x"), IdentityFacet("y"))
        assert left.matching_positions(right) == [0, 2]
        assert right.matching_positions(left) == [0, 2]

    def test_sequence_protocol(self):
        facets = (IdentityFacet("R1"), IdentityFacet("R1", "a.py"))
        fp = Fingerprint(facets)
        assert len(fp) == 2
        assert list(fp) == list(facets)
        assert fp[1] == facets[1]

    def test_stable_hash_depends_on_order(self):
        a, b = IdentityFacet("R1"), IdentityFacet("R2")
        assert Fingerprint.of(a, b).stable_hash() != Fingerprint.of(b, a).stable_hash()
        assert Fingerprint.of(a, b).stable_hash() == Fingerprint.of(a, b).stable_hash()
