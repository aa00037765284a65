# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding baseliner in other tools.

Usage::

    from baseliner import compare_findings

    result = compare_findings(previous_findings, current_findings)
    for record in result.records:
        print(record.state, record.properties.get_property("message"))

    if result.has_new:
        raise SystemExit(1)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from baseliner.baseline.assembler import assemble_baseline
from baseliner.baseline.fingerprint import to_records
from baseliner.baseline.matcher import BaselineMatcher
from baseliner.baseline.policy import MatchPolicy
from baseliner.core.config import Settings, get_settings
from baseliner.core.logging import setup_logging
from baseliner.models.finding import Finding
from baseliner.models.record import Record
from baseliner.models.result import BaselineResult

logger = logging.getLogger("baseliner.sdk")


def _resolve_policy(policy: MatchPolicy | None, settings: Settings) -> MatchPolicy:
    if policy is not None:
        return policy
    return MatchPolicy.from_settings(settings)


def compare_records(
    previous: Sequence[Record],
    current: Sequence[Record],
    *,
    policy: MatchPolicy | None = None,
    settings: Settings | None = None,
    detection_time: datetime | None = None,
) -> BaselineResult:
    """Match *current* records against the *previous* baseline and merge them.

    Parameters
    ----------
    previous:
        Records from the baseline run.
    current:
        Records from the run being evaluated.
    policy:
        Explicit matching policy.  Falls back to one built from *settings*.
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.
    detection_time:
        Stamped as the first-detection time of new records.
    """
    settings = settings or get_settings()
    matcher = BaselineMatcher(_resolve_policy(policy, settings))
    outcome = matcher.match(previous, current)
    return assemble_baseline(
        previous,
        current,
        outcome,
        attach_first_seen=settings.attach_first_seen,
        detection_time=detection_time,
    )


def compare_findings(
    previous: Sequence[Finding],
    current: Sequence[Finding],
    *,
    policy: MatchPolicy | None = None,
    settings: Settings | None = None,
    detection_time: datetime | None = None,
) -> BaselineResult:
    """Fingerprint two finding lists with the default derivation and compare them."""
    logger.debug("Fingerprinting %d previous and %d current findings", len(previous), len(current))
    return compare_records(
        to_records(previous),
        to_records(current),
        policy=policy,
        settings=settings,
        detection_time=detection_time,
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Install the configured log handler on the ``baseliner`` logger."""
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)
