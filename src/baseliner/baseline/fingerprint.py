# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Default fingerprint derivation for normalized findings.

A finding's facets, in order:

1. category facet: ``(rule_id)``
2. location facet: ``(rule_id, location)``
3. one property facet per ``partial_fingerprints`` entry, sorted by name
4. one property facet per ``fingerprints`` entry, sorted by name
5. a ``content/snippet`` facet when the location carries a snippet

Line and column numbers and the message text stay out of the fingerprint so
that edits elsewhere in a file do not change a finding's identity.
"""

from __future__ import annotations

from collections.abc import Iterable

from baseliner.core.constants import (
    PROP_END_LINE,
    PROP_FIRST_DETECTION,
    PROP_LEVEL,
    PROP_MESSAGE,
    PROP_START_LINE,
    PROP_URI,
    PROPERTY_SET_CONTENT,
    PROPERTY_SET_FULL,
    PROPERTY_SET_PARTIAL,
)
from baseliner.models.facet import IdentityFacet
from baseliner.models.finding import Finding, Location
from baseliner.models.fingerprint import Fingerprint
from baseliner.models.property_bag import PropertyBag
from baseliner.models.record import Record


def normalize_location(location: Location | None) -> str:
    """Return a region-free location string for identity purposes."""
    if location is None:
        return ""
    uri = location.uri.strip().replace("\\", "/")
    while uri.startswith("./"):
        uri = uri[2:]
    if uri:
        return uri
    return location.logical_location.strip()


def derive_fingerprint(finding: Finding) -> Fingerprint:
    category = finding.rule_id
    location = normalize_location(finding.location)

    facets = [
        IdentityFacet(category=category),
        IdentityFacet(category=category, location=location),
    ]
    for property_set, values in (
        (PROPERTY_SET_PARTIAL, finding.partial_fingerprints),
        (PROPERTY_SET_FULL, finding.fingerprints),
    ):
        for name in sorted(values):
            facets.append(
                IdentityFacet(category, location, property_set, name, values[name])
            )

    if finding.location is not None and finding.location.snippet.strip():
        facets.append(
            IdentityFacet(
                category,
                location,
                PROPERTY_SET_CONTENT,
                "snippet",
                finding.location.snippet.strip(),
            )
        )
    return Fingerprint.from_iterable(facets)


def build_properties(finding: Finding) -> PropertyBag:
    """Display fields for a finding; none of these affect identity."""
    bag = PropertyBag()
    for name, value in finding.properties.items():
        bag.set_property(name, value)
    bag.set_property(PROP_MESSAGE, finding.message)
    bag.set_property(PROP_LEVEL, finding.level)
    if finding.location is not None:
        if finding.location.uri:
            bag.set_property(PROP_URI, finding.location.uri)
        if finding.location.line_start is not None:
            bag.set_property(PROP_START_LINE, finding.location.line_start)
        if finding.location.line_end is not None:
            bag.set_property(PROP_END_LINE, finding.location.line_end)
    if finding.first_detected_at is not None:
        bag.set_property(PROP_FIRST_DETECTION, finding.first_detected_at)
    return bag


def to_record(finding: Finding, index: int) -> Record:
    return Record(
        index=index,
        fingerprint=derive_fingerprint(finding),
        properties=build_properties(finding),
    )


def to_records(findings: Iterable[Finding]) -> list[Record]:
    return [to_record(finding, index) for index, finding in enumerate(findings)]
