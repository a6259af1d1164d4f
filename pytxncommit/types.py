# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Type definitions for pytxncommit."""

from __future__ import annotations

from dataclasses import dataclass

# Wire default for a partition that carries no leader epoch.
NO_LEADER_EPOCH: int = -1


@dataclass(frozen=True, order=True)
class TopicPartition:
    """A topic name and partition index, used as a result table key."""

    topic: str
    partition: int

    def __post_init__(self) -> None:
        if self.partition < 0:
            raise ValueError(f"Partition index must be non-negative, got {self.partition}")

    def __str__(self) -> str:
        return f"{self.topic}-{self.partition}"


# =============================================================================
# Wire structures
# =============================================================================

@dataclass(frozen=True)
class PartitionResult:
    """Outcome for one partition as laid out on the wire."""

    partition: int
    error_code: int
    leader_epoch: int = NO_LEADER_EPOCH  # v2+


@dataclass(frozen=True)
class TopicResult:
    """All partition outcomes for one topic."""

    topic: str
    partitions: tuple[PartitionResult, ...]


@dataclass(frozen=True)
class TxnOffsetCommitResponseData:
    """Top-level response body."""

    throttle_time_ms: int
    topics: tuple[TopicResult, ...]
