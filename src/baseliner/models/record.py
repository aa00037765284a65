# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Records handed to the matcher: an index, a fingerprint, and display fields."""

from __future__ import annotations

from dataclasses import dataclass, field

from baseliner.models.fingerprint import Fingerprint
from baseliner.models.property_bag import PropertyBag


@dataclass(frozen=True)
class Record:
    """One finding from a single analysis run.

    ``index`` is the record's stable position in its source collection and
    must be unique within that collection.  ``properties`` carries display
    fields (message, level, ...) that never participate in identity.
    """

    index: int
    fingerprint: Fingerprint
    properties: PropertyBag = field(default_factory=PropertyBag)
