# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0 - CLEAN: no new findings relative to the baseline
    1 - NEW_FINDINGS: at least one finding is new
    2 - ERROR: baselining could not complete (internal error)
    3 - UPDATED_FINDINGS: no new findings, but some changed in place
        (only when ``fail_on_updated`` is set)
"""

from __future__ import annotations

from enum import IntEnum

from baseliner.core.config import get_settings
from baseliner.core.constants import BaselineState
from baseliner.models.result import BaselineResult


class BaselineExitCode(IntEnum):
    """Exit codes used by baseliner in CI mode."""

    CLEAN = 0
    NEW_FINDINGS = 1
    ERROR = 2
    UPDATED_FINDINGS = 3


def result_to_exit_code(
    result: BaselineResult,
    *,
    fail_on_updated: bool | None = None,
) -> BaselineExitCode:
    """Convert a baseline result to a CI exit code.

    Absent findings never fail a build.

    Args:
        result: Output of a baseline comparison.
        fail_on_updated: Also fail when findings were updated in place.
            Defaults to the ``fail_on_updated`` setting.

    Returns:
        The corresponding BaselineExitCode.
    """
    if fail_on_updated is None:
        fail_on_updated = get_settings().fail_on_updated

    counts = result.counts
    if counts[BaselineState.NEW.value]:
        return BaselineExitCode.NEW_FINDINGS
    if fail_on_updated and counts[BaselineState.UPDATED.value]:
        return BaselineExitCode.UPDATED_FINDINGS
    return BaselineExitCode.CLEAN
