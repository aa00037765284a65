# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scoring policy for the partial-match pass.

The default policy is fixed:

============  ======
facet kind    weight
============  ======
category      3
location      3
property      1
empty         0
============  ======

A candidate pair qualifies only when both hold:

* its score is strictly greater than ``min_partial_score`` (default 2);
* at least one category or location facet agrees (``require_anchor``,
  default on).  Property facets alone never pair two findings, however many
  of them agree, and empty facets contribute nothing.

With the default fingerprint derivation the category facet alone is enough:
a finding fixed in ``a.py`` and a new finding of the same rule in ``b.py``
pair as ``updated`` rather than ``absent`` plus ``new``.  Callers gating CI on
new findings who want location drift to count as new can raise
``min_partial_score`` above the category weight (for example to 3), which
then requires the category and location facets or property evidence to agree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from baseliner.core.config import Settings
from baseliner.core.constants import (
    DEFAULT_FACET_WEIGHTS,
    DEFAULT_MIN_PARTIAL_SCORE,
    DEFAULT_WATCHED_PROPERTIES,
    FacetKind,
    MatchScope,
)
from baseliner.core.exceptions import ConfigurationError
from baseliner.models.fingerprint import Fingerprint

_ANCHOR_KINDS = frozenset({FacetKind.CATEGORY, FacetKind.LOCATION})


@dataclass(frozen=True)
class MatchPolicy:
    category_weight: int = DEFAULT_FACET_WEIGHTS[FacetKind.CATEGORY]
    location_weight: int = DEFAULT_FACET_WEIGHTS[FacetKind.LOCATION]
    property_weight: int = DEFAULT_FACET_WEIGHTS[FacetKind.PROPERTY]
    min_partial_score: int = DEFAULT_MIN_PARTIAL_SCORE
    scope: MatchScope = MatchScope.GLOBAL
    watched_properties: tuple[str, ...] = field(default=DEFAULT_WATCHED_PROPERTIES)
    require_anchor: bool = True

    def __post_init__(self) -> None:
        for name in ("category_weight", "location_weight", "property_weight"):
            if getattr(self, name) < 0:
                msg = f"{name} must be non-negative, got {getattr(self, name)}"
                raise ConfigurationError(msg)
        if self.min_partial_score < 0:
            msg = f"min_partial_score must be non-negative, got {self.min_partial_score}"
            raise ConfigurationError(msg)
        try:
            object.__setattr__(self, "scope", MatchScope(self.scope))
        except ValueError:
            choices = ", ".join(s.value for s in MatchScope)
            msg = f"Unknown partial match scope: {self.scope!r}. Expected one of: {choices}"
            raise ConfigurationError(msg) from None
        object.__setattr__(self, "watched_properties", tuple(self.watched_properties))

    @classmethod
    def from_settings(cls, settings: Settings) -> MatchPolicy:
        return cls(
            category_weight=settings.weight_category,
            location_weight=settings.weight_location,
            property_weight=settings.weight_property,
            min_partial_score=settings.min_partial_score,
            scope=settings.partial_match_scope,
            watched_properties=tuple(settings.watched_properties),
            require_anchor=settings.require_anchor_facet,
        )

    def weight(self, kind: FacetKind) -> int:
        if kind is FacetKind.CATEGORY:
            return self.category_weight
        if kind is FacetKind.LOCATION:
            return self.location_weight
        if kind is FacetKind.PROPERTY:
            return self.property_weight
        return 0

    def score(self, previous: Fingerprint, current: Fingerprint) -> int:
        """Weighted count of positionally equal facets."""
        return sum(
            self.weight(previous[i].kind) for i in previous.matching_positions(current)
        )

    def is_anchored(self, previous: Fingerprint, current: Fingerprint) -> bool:
        """True when a category or location facet agrees, or anchoring is off."""
        if not self.require_anchor:
            return True
        return any(
            previous[i].kind in _ANCHOR_KINDS for i in previous.matching_positions(current)
        )

    def qualifies(self, score: int) -> bool:
        return score > self.min_partial_score


DEFAULT_POLICY = MatchPolicy()
