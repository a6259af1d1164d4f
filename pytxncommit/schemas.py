# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Schema catalog for the TxnOffsetCommit response.

Each distinct wire shape is declared once. SCHEMA_ALIASES maps every
supported version to the canonical shape it uses:

    v0  throttle_time_ms, topics[topic, partitions[partition, error_code]]
    v1  same layout as v0; brokers may now send the response before
        applying a quota throttle
    v2  partitions additionally carry leader_epoch
"""

from __future__ import annotations

from .binary import INT16, INT32, STRING, Array, Field, Schema
from .protocol import ApiKey, check_version
from .types import PartitionResult, TopicResult, TxnOffsetCommitResponseData

# Common fields
THROTTLE_TIME_MS = Field(
    "throttle_time_ms", INT32,
    "Duration in milliseconds for which the request was throttled due to quota violation",
)
TOPIC_NAME = Field("topic", STRING, "Name of topic")
PARTITION_ID = Field("partition", INT32, "Topic partition id")
ERROR_CODE = Field("error_code", INT16, "Response error code")
LEADER_EPOCH = Field("leader_epoch", INT32, "The leader epoch, or -1 if unknown")

# partition level
PARTITIONS_V0 = Field(
    "partitions",
    Array(Schema(PARTITION_ID, ERROR_CODE, factory=PartitionResult)),
    "Responses by partition for committed offsets",
)
PARTITIONS_V2 = Field(
    "partitions",
    Array(Schema(PARTITION_ID, ERROR_CODE, LEADER_EPOCH, factory=PartitionResult)),
    "Responses by partition for committed offsets",
)

# topic level
TOPICS_V0 = Field(
    "topics",
    Array(Schema(TOPIC_NAME, PARTITIONS_V0, factory=TopicResult)),
    "Responses by topic for committed offsets",
)
TOPICS_V2 = Field(
    "topics",
    Array(Schema(TOPIC_NAME, PARTITIONS_V2, factory=TopicResult)),
    "Responses by topic for committed offsets",
)

TXN_OFFSET_COMMIT_RESPONSE_V0 = Schema(THROTTLE_TIME_MS, TOPICS_V0, factory=TxnOffsetCommitResponseData)
TXN_OFFSET_COMMIT_RESPONSE_V2 = Schema(THROTTLE_TIME_MS, TOPICS_V2, factory=TxnOffsetCommitResponseData)

CANONICAL_SCHEMAS: dict[int, Schema] = {
    0: TXN_OFFSET_COMMIT_RESPONSE_V0,
    2: TXN_OFFSET_COMMIT_RESPONSE_V2,
}

# version -> canonical shape
SCHEMA_ALIASES: dict[int, int] = {0: 0, 1: 0, 2: 2}

SCHEMAS: dict[int, Schema] = {
    version: CANONICAL_SCHEMAS[shape] for version, shape in SCHEMA_ALIASES.items()
}


def schema_versions() -> tuple[Schema, ...]:
    """Schemas indexed by version."""
    return tuple(SCHEMAS[v] for v in sorted(SCHEMAS))


def schema_for(version: int) -> Schema:
    """
    Get the response schema for a wire version.

    Raises:
        UnsupportedVersionError: If the version is not in the catalog.
    """
    check_version(ApiKey.TXN_OFFSET_COMMIT, version)
    return SCHEMAS[version]


def field_layout(version: int) -> dict[str, tuple[str, ...]]:
    """
    Ordered field names at each nesting level for a wire version.

    Returns:
        Mapping with keys "response", "topics" and "partitions".
    """
    response = schema_for(version)
    topics = _nested(response, "topics")
    partitions = _nested(topics, "partitions")
    return {
        "response": response.names,
        "topics": topics.names,
        "partitions": partitions.names,
    }


def _nested(schema: Schema, name: str) -> Schema:
    for f in schema.fields:
        if f.name == name:
            return f.type.schema
    raise KeyError(name)
