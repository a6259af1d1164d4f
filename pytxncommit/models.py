# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Pydantic models for pytxncommit.

Provides validated codec configuration and a serializable response summary
for logging and metrics.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .protocol import API_VERSIONS, MAX_MESSAGE_SIZE, ApiKey

_MIN_VERSION, _MAX_VERSION = API_VERSIONS[ApiKey.TXN_OFFSET_COMMIT]


# ============================================================================
# Configuration Models
# ============================================================================


class CodecConfig(BaseModel):
    """Configuration for ResponseCodec."""

    model_config = ConfigDict(validate_assignment=True)

    default_version: int = Field(
        default=_MAX_VERSION,
        ge=_MIN_VERSION,
        le=_MAX_VERSION,
        description="Wire version used when a call does not pass one",
    )
    max_message_size: int = Field(
        default=MAX_MESSAGE_SIZE,
        ge=1,
        description="Largest framed response accepted or produced, in bytes",
    )
    allow_trailing_bytes: bool = Field(
        default=False,
        description="Ignore bytes left over after the response body instead of failing",
    )


# ============================================================================
# Response Models
# ============================================================================


class ResponseSummary(BaseModel):
    """Condensed view of a decoded response."""

    model_config = ConfigDict(frozen=True)

    throttle_time_ms: int = Field(ge=0)
    topic_count: int = Field(ge=0)
    partition_count: int = Field(ge=0)
    error_counts: dict[str, int] = Field(default_factory=dict)
    should_throttle: bool = False
