# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BASELINER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Partial-match weighting policy
    weight_category: int = 3
    weight_location: int = 3
    weight_property: int = 1
    min_partial_score: int = 2
    partial_match_scope: str = "global"  # "global" or "category"
    # Partial pairs need a category or location facet to agree
    require_anchor_facet: bool = True

    # Display properties whose change turns "unchanged" into "updated".
    # Accepts a JSON list or a comma-separated string.
    watched_properties: Annotated[list[str], NoDecode] = ["message", "level"]

    @field_validator("watched_properties", mode="before")
    @classmethod
    def _parse_watched_properties(cls, v: object) -> list[str]:
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                v = json.loads(v)
            else:
                return [p.strip() for p in v.split(",") if p.strip()]
        return v if isinstance(v, list) else []

    # Baseline assembly
    attach_first_seen: bool = True

    # CI gating
    fail_on_updated: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
