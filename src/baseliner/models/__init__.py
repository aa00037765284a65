# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for baseliner."""

from baseliner.models.facet import IdentityFacet
from baseliner.models.finding import Finding, Location
from baseliner.models.fingerprint import Fingerprint
from baseliner.models.property_bag import PropertyBag, SerializedProperty
from baseliner.models.record import Record
from baseliner.models.result import BaselinedRecord, BaselineResult, MatchedPair

__all__ = [
    "BaselineResult",
    "BaselinedRecord",
    "Finding",
    "Fingerprint",
    "IdentityFacet",
    "Location",
    "MatchedPair",
    "PropertyBag",
    "Record",
    "SerializedProperty",
]
