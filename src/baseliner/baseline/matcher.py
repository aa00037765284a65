# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cross-run matching engine: pair previous findings with current ones.

Matching runs in three passes:

1. **Exact.**  Records are grouped by their full fingerprint.  Within each
   group, previous and current records pair off in ascending index order up
   to the smaller group size; the surplus carries into the next pass.  A pair
   is ``unchanged`` unless a watched display property differs, in which case
   it is ``updated``.
2. **Partial.**  Every remaining (previous, current) pair is scored with the
   ``MatchPolicy``.  Qualifying candidates are sorted by descending score,
   then previous index, then current index, and consumed greedily: accepting
   a pair removes both endpoints.  Accepted pairs are ``updated``.
3. **Residual.**  Unpaired current records are ``new``; unpaired previous
   records are ``absent``.

The result depends only on the inputs: groups are walked in sorted order and
every emitted list is sorted before it is returned.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from baseliner.baseline.policy import DEFAULT_POLICY, MatchPolicy
from baseliner.core.constants import BaselineState, MatchScope
from baseliner.core.exceptions import MalformedInputError
from baseliner.models.fingerprint import Fingerprint
from baseliner.models.record import Record
from baseliner.models.result import MatchedPair

logger = logging.getLogger("baseliner.baseline.matcher")


@dataclass
class MatchOutcome:
    """Pairings and leftovers produced by a single matcher run."""

    pairs: list[MatchedPair] = field(default_factory=list)
    partial_pairs: list[MatchedPair] = field(default_factory=list)
    new_indices: list[int] = field(default_factory=list)
    absent_indices: list[int] = field(default_factory=list)


def _index_records(records: Sequence[Record], side: str) -> dict[int, Record]:
    by_index: dict[int, Record] = {}
    for position, record in enumerate(records):
        if not isinstance(record, Record):
            msg = f"{side} collection item {position} is {type(record).__name__}, not Record"
            raise MalformedInputError(msg)
        if record.index in by_index:
            msg = f"Duplicate index {record.index} in {side} collection"
            raise MalformedInputError(msg)
        by_index[record.index] = record
    return by_index


def _group_by_fingerprint(
    by_index: dict[int, Record],
) -> dict[Fingerprint, list[int]]:
    groups: dict[Fingerprint, list[int]] = defaultdict(list)
    for index in sorted(by_index):
        groups[by_index[index].fingerprint].append(index)
    return groups


class BaselineMatcher:
    """Pairs records from a previous run with records from the current run."""

    def __init__(self, policy: MatchPolicy | None = None) -> None:
        self._policy = policy or DEFAULT_POLICY

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    def match(
        self,
        previous: Sequence[Record],
        current: Sequence[Record],
    ) -> MatchOutcome:
        """Classify *previous* and *current* records against each other.

        Raises:
            MalformedInputError: If either collection contains a non-Record
                item or repeats an index.
        """
        prev_by_index = _index_records(previous, "previous")
        cur_by_index = _index_records(current, "current")

        exact_pairs = self._exact_pass(prev_by_index, cur_by_index)

        prev_left = sorted(set(prev_by_index) - {p.previous_index for p in exact_pairs})
        cur_left = sorted(set(cur_by_index) - {p.current_index for p in exact_pairs})

        partial_pairs = self._partial_pass(prev_by_index, cur_by_index, prev_left, cur_left)

        paired_prev = {p.previous_index for p in partial_pairs}
        paired_cur = {p.current_index for p in partial_pairs}

        outcome = MatchOutcome(
            pairs=sorted(exact_pairs + partial_pairs, key=lambda p: p.current_index),
            partial_pairs=partial_pairs,
            new_indices=[i for i in cur_left if i not in paired_cur],
            absent_indices=[i for i in prev_left if i not in paired_prev],
        )
        logger.debug(
            "Matched %d exact and %d partial pairs; %d new, %d absent",
            len(exact_pairs),
            len(partial_pairs),
            len(outcome.new_indices),
            len(outcome.absent_indices),
        )
        return outcome

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _exact_pass(
        self,
        prev_by_index: dict[int, Record],
        cur_by_index: dict[int, Record],
    ) -> list[MatchedPair]:
        prev_groups = _group_by_fingerprint(prev_by_index)
        cur_groups = _group_by_fingerprint(cur_by_index)

        pairs: list[MatchedPair] = []
        for fingerprint, cur_indices in cur_groups.items():
            prev_indices = prev_groups.get(fingerprint)
            if not prev_indices:
                continue
            score = self._policy.score(fingerprint, fingerprint)
            for prev_index, cur_index in zip(prev_indices, cur_indices):
                changed = self._display_changed(
                    prev_by_index[prev_index], cur_by_index[cur_index]
                )
                pairs.append(
                    MatchedPair(
                        previous_index=prev_index,
                        current_index=cur_index,
                        state=BaselineState.UPDATED if changed else BaselineState.UNCHANGED,
                        score=score,
                        exact=True,
                    )
                )
        return pairs

    def _partial_pass(
        self,
        prev_by_index: dict[int, Record],
        cur_by_index: dict[int, Record],
        prev_left: list[int],
        cur_left: list[int],
    ) -> list[MatchedPair]:
        if not prev_left or not cur_left:
            return []

        if self._policy.scope is MatchScope.CATEGORY:
            prev_buckets = self._bucket(prev_by_index, prev_left)
            cur_buckets = self._bucket(cur_by_index, cur_left)
            accepted: list[MatchedPair] = []
            for key in sorted(prev_buckets.keys() & cur_buckets.keys()):
                accepted.extend(
                    self._greedy(
                        prev_by_index, cur_by_index, prev_buckets[key], cur_buckets[key]
                    )
                )
            return accepted

        return self._greedy(prev_by_index, cur_by_index, prev_left, cur_left)

    @staticmethod
    def _bucket(by_index: dict[int, Record], indices: list[int]) -> dict[str, list[int]]:
        buckets: dict[str, list[int]] = defaultdict(list)
        for index in indices:
            buckets[by_index[index].fingerprint.primary_category].append(index)
        return buckets

    def _greedy(
        self,
        prev_by_index: dict[int, Record],
        cur_by_index: dict[int, Record],
        prev_indices: list[int],
        cur_indices: list[int],
    ) -> list[MatchedPair]:
        candidates: list[tuple[int, int, int]] = []
        for prev_index in prev_indices:
            prev_fp = prev_by_index[prev_index].fingerprint
            for cur_index in cur_indices:
                cur_fp = cur_by_index[cur_index].fingerprint
                score = self._policy.score(prev_fp, cur_fp)
                if self._policy.qualifies(score) and self._policy.is_anchored(prev_fp, cur_fp):
                    candidates.append((-score, prev_index, cur_index))

        # Sorting the full candidate list once and skipping consumed endpoints
        # is equivalent to repeatedly taking the best remaining candidate.
        candidates.sort()

        taken_prev: set[int] = set()
        taken_cur: set[int] = set()
        accepted: list[MatchedPair] = []
        for neg_score, prev_index, cur_index in candidates:
            if prev_index in taken_prev or cur_index in taken_cur:
                continue
            taken_prev.add(prev_index)
            taken_cur.add(cur_index)
            accepted.append(
                MatchedPair(
                    previous_index=prev_index,
                    current_index=cur_index,
                    state=BaselineState.UPDATED,
                    score=-neg_score,
                    exact=False,
                )
            )
        return accepted

    def _display_changed(self, previous: Record, current: Record) -> bool:
        for name in self._policy.watched_properties:
            in_prev = previous.properties.has_property(name)
            in_cur = current.properties.has_property(name)
            if in_prev != in_cur:
                return True
            if in_prev and not previous.properties.get_serialized(name).same_value(
                current.properties.get_serialized(name)
            ):
                return True
        return False


def match_records(
    previous: Sequence[Record],
    current: Sequence[Record],
    policy: MatchPolicy | None = None,
) -> MatchOutcome:
    """Convenience wrapper around ``BaselineMatcher(policy).match``."""
    return BaselineMatcher(policy).match(previous, current)
