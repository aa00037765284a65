# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalized static-analysis finding models.

Converters for third-party tool output produce these; the fingerprint
adapter turns them into matcher ``Record`` objects.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Location(BaseModel):
    """Where the finding was reported."""

    uri: str = ""
    logical_location: str = ""
    line_start: int | None = None
    line_end: int | None = None
    column_start: int | None = None
    column_end: int | None = None
    snippet: str = ""


class Finding(BaseModel):
    """A single result emitted by an analysis tool."""

    rule_id: str = Field(description="Rule that triggered this finding, e.g. CA2100")
    message: str = ""
    level: str = "warning"
    location: Location | None = None
    partial_fingerprints: dict[str, str] = Field(default_factory=dict)
    fingerprints: dict[str, str] = Field(default_factory=dict)
    properties: dict[str, object] = Field(default_factory=dict)
    first_detected_at: datetime | None = None
