# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Identity facets: one (category, location, property) dimension of a finding.

Field order is part of the contract.  Equality and the combined hash both walk
``category, location, property_set, property_name, property_value`` in that
order; reordering them changes how findings group across runs.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from baseliner.core.constants import FACET_SEPARATOR, FacetKind

_HASH_SEED = 17
_HASH_MULTIPLIER = 31
_HASH_MASK = (1 << 64) - 1


def _field_hash(value: str) -> int:
    digest = hashlib.sha256(value.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


@dataclass(frozen=True, slots=True)
class IdentityFacet:
    """Immutable 5-tuple describing one dimension of a finding's identity.

    ``None`` inputs are normalized to ``""`` so that equality and hashing
    only ever see concrete strings.
    """

    category: str = ""
    location: str = ""
    property_set: str = ""
    property_name: str = ""
    property_value: str = ""

    def __post_init__(self) -> None:
        for name in ("category", "location", "property_set", "property_name", "property_value"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")

    @property
    def fields(self) -> tuple[str, str, str, str, str]:
        return (
            self.category,
            self.location,
            self.property_set,
            self.property_name,
            self.property_value,
        )

    @property
    def kind(self) -> FacetKind:
        if self.property_set or self.property_name or self.property_value:
            return FacetKind.PROPERTY
        if self.location:
            return FacetKind.LOCATION
        if self.category:
            return FacetKind.CATEGORY
        return FacetKind.EMPTY

    def stable_hash(self) -> int:
        """Process-independent 64-bit hash folded over the fields in order."""
        acc = _HASH_SEED
        for value in self.fields:
            acc = (acc * _HASH_MULTIPLIER + _field_hash(value)) & _HASH_MASK
        return acc

    def __hash__(self) -> int:
        return self.stable_hash()

    def __str__(self) -> str:
        return FACET_SEPARATOR.join(self.fields)
