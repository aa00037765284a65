# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, default matching weights, and well-known property names."""

from enum import StrEnum


class BaselineState(StrEnum):
    NEW = "new"
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    ABSENT = "absent"


class FacetKind(StrEnum):
    CATEGORY = "category"
    LOCATION = "location"
    PROPERTY = "property"
    EMPTY = "empty"


class MatchScope(StrEnum):
    GLOBAL = "global"
    CATEGORY = "category"


# Separator used when rendering a facet for diagnostics.
FACET_SEPARATOR = " | "

# Default facet weights for the partial-match pass.
DEFAULT_FACET_WEIGHTS: dict[FacetKind, int] = {
    FacetKind.CATEGORY: 3,
    FacetKind.LOCATION: 3,
    FacetKind.PROPERTY: 1,
    FacetKind.EMPTY: 0,
}

# A candidate pair must score strictly above this to be considered.
DEFAULT_MIN_PARTIAL_SCORE = 2

# Display properties compared to tell "unchanged" from "updated".
DEFAULT_WATCHED_PROPERTIES: tuple[str, ...] = ("message", "level")

# Property names written by the finding adapter and the assembler.
PROP_MESSAGE = "message"
PROP_LEVEL = "level"
PROP_URI = "uri"
PROP_START_LINE = "startLine"
PROP_END_LINE = "endLine"
PROP_FIRST_DETECTION = "firstDetectionTime"

# Property set names used by the default fingerprint derivation.
PROPERTY_SET_PARTIAL = "partialFingerprints"
PROPERTY_SET_FULL = "fingerprints"
PROPERTY_SET_CONTENT = "content"
