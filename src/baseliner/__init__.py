# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""baseliner - Match static-analysis findings across runs."""

__version__ = "0.1.0"

from baseliner.baseline.matcher import BaselineMatcher, MatchOutcome, match_records
from baseliner.baseline.policy import DEFAULT_POLICY, MatchPolicy
from baseliner.core.constants import BaselineState
from baseliner.sdk import compare_findings, compare_records, configure_logging

__all__ = [
    "DEFAULT_POLICY",
    "BaselineMatcher",
    "BaselineState",
    "MatchOutcome",
    "MatchPolicy",
    "__version__",
    "compare_findings",
    "compare_records",
    "configure_logging",
    "match_records",
]
