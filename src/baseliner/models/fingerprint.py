# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Ordered facet sequences identifying *what* a finding is."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from baseliner.models.facet import IdentityFacet

_HASH_SEED = 17
_HASH_MULTIPLIER = 31
_HASH_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class Fingerprint:
    """An ordered, immutable sequence of identity facets.

    Two fingerprints are exactly equal when their facets are equal element by
    element in order.  Volatile details (line numbers, message text) never
    belong in a fingerprint.
    """

    facets: tuple[IdentityFacet, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.facets, tuple):
            object.__setattr__(self, "facets", tuple(self.facets))

    @classmethod
    def of(cls, *facets: IdentityFacet) -> Fingerprint:
        return cls(tuple(facets))

    @classmethod
    def from_iterable(cls, facets: Iterable[IdentityFacet]) -> Fingerprint:
        return cls(tuple(facets))

    @property
    def primary_category(self) -> str:
        """Category of the leading facet, or ``""`` for an empty fingerprint."""
        return self.facets[0].category if self.facets else ""

    def matching_positions(self, other: Fingerprint) -> list[int]:
        """Positions at which both fingerprints carry an equal facet."""
        return [
            i for i, (mine, theirs) in enumerate(zip(self.facets, other.facets))
            if mine == theirs
        ]

    def stable_hash(self) -> int:
        acc = _HASH_SEED
        for facet in self.facets:
            acc = (acc * _HASH_MULTIPLIER + facet.stable_hash()) & _HASH_MASK
        return acc

    def __len__(self) -> int:
        return len(self.facets)

    def __iter__(self) -> Iterator[IdentityFacet]:
        return iter(self.facets)

    def __getitem__(self, position: int) -> IdentityFacet:
        return self.facets[position]

    def __str__(self) -> str:
        return "[" + "; ".join(str(f) for f in self.facets) + "]"
