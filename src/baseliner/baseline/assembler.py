# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Merge matcher output into one state-tagged record sequence."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from baseliner.baseline.matcher import MatchOutcome
from baseliner.core.constants import PROP_FIRST_DETECTION, BaselineState
from baseliner.models.record import Record
from baseliner.models.result import BaselinedRecord, BaselineResult

logger = logging.getLogger("baseliner.baseline.assembler")


def assemble_baseline(
    previous: Sequence[Record],
    current: Sequence[Record],
    outcome: MatchOutcome,
    *,
    attach_first_seen: bool = True,
    detection_time: datetime | None = None,
) -> BaselineResult:
    """Build the merged output for one matcher run.

    Matched and new records are emitted in ascending current index, followed
    by absent records in ascending previous index.

    Parameters
    ----------
    previous, current:
        The same collections that were passed to the matcher.
    outcome:
        The matcher's pairing for those collections.
    attach_first_seen:
        Carry the previous record's ``firstDetectionTime`` property onto
        matched output records that do not already have one.
    detection_time:
        When given, stamped as ``firstDetectionTime`` on new records that
        lack it.

    Returns
    -------
    BaselineResult
        The merged records plus the accepted partial-match pairs.
    """
    prev_by_index = {r.index: r for r in previous}
    cur_by_index = {r.index: r for r in current}

    emitted: list[BaselinedRecord] = []

    for pair in outcome.pairs:
        prev_record = prev_by_index[pair.previous_index]
        cur_record = cur_by_index[pair.current_index]
        properties = cur_record.properties.copy()
        if (
            attach_first_seen
            and prev_record.properties.has_property(PROP_FIRST_DETECTION)
            and not properties.has_property(PROP_FIRST_DETECTION)
        ):
            properties.set_serialized(
                PROP_FIRST_DETECTION,
                prev_record.properties.get_serialized(PROP_FIRST_DETECTION),
            )
        emitted.append(
            BaselinedRecord(
                state=pair.state,
                fingerprint=cur_record.fingerprint,
                properties=properties,
                current_index=pair.current_index,
                previous_index=pair.previous_index,
            )
        )

    for index in outcome.new_indices:
        cur_record = cur_by_index[index]
        properties = cur_record.properties.copy()
        if detection_time is not None and not properties.has_property(PROP_FIRST_DETECTION):
            properties.set_property(PROP_FIRST_DETECTION, detection_time, datetime)
        emitted.append(
            BaselinedRecord(
                state=BaselineState.NEW,
                fingerprint=cur_record.fingerprint,
                properties=properties,
                current_index=index,
            )
        )

    emitted.sort(key=lambda r: r.current_index)

    for index in sorted(outcome.absent_indices):
        prev_record = prev_by_index[index]
        emitted.append(
            BaselinedRecord(
                state=BaselineState.ABSENT,
                fingerprint=prev_record.fingerprint,
                properties=prev_record.properties.copy(),
                previous_index=index,
            )
        )

    result = BaselineResult(records=emitted, partial_matches=list(outcome.partial_pairs))
    logger.info(
        "Baselined %d previous against %d current findings",
        len(prev_by_index),
        len(cur_by_index),
        extra={"state_counts": result.counts},
    )
    return result
