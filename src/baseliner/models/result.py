# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Baselining output models."""

from __future__ import annotations

from dataclasses import dataclass, field

from baseliner.core.constants import BaselineState
from baseliner.models.fingerprint import Fingerprint
from baseliner.models.property_bag import PropertyBag


@dataclass(frozen=True)
class MatchedPair:
    """A previous/current pairing accepted by the matcher."""

    previous_index: int
    current_index: int
    state: BaselineState
    score: int
    exact: bool


@dataclass(frozen=True)
class BaselinedRecord:
    """A merged output record tagged with its baseline state.

    ``current_index`` is ``None`` for absent records and ``previous_index``
    is ``None`` for new ones.
    """

    state: BaselineState
    fingerprint: Fingerprint
    properties: PropertyBag
    current_index: int | None = None
    previous_index: int | None = None


@dataclass
class BaselineResult:
    """Merged, state-tagged records plus partial-match diagnostics."""

    records: list[BaselinedRecord] = field(default_factory=list)
    partial_matches: list[MatchedPair] = field(default_factory=list)

    def by_state(self, state: BaselineState) -> list[BaselinedRecord]:
        return [r for r in self.records if r.state == state]

    @property
    def counts(self) -> dict[str, int]:
        counts = {state.value: 0 for state in BaselineState}
        for record in self.records:
            counts[record.state.value] += 1
        return counts

    @property
    def new_count(self) -> int:
        return self.counts[BaselineState.NEW.value]

    @property
    def has_new(self) -> bool:
        return self.new_count > 0
