# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
TxnOffsetCommit response encoding and decoding.

The in-memory form is a table of ErrorCode per TopicPartition plus the
throttle delay. On the wire the table is grouped by topic:

    throttle_time_ms => INT32
    topics => [topic partitions]
      topic => STRING
      partitions => [partition error_code leader_epoch]
        partition => INT32
        error_code => INT16
        leader_epoch => INT32 (v2+, always -1 when written here)
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from .binary import INT32, ReadBuffer
from .errors import ErrorCode
from .exceptions import SchemaMismatchError
from .grouping import flatten, group_by_topic
from .models import ResponseSummary
from .policy import should_client_throttle
from .schemas import schema_for
from .types import PartitionResult, TopicPartition, TopicResult, TxnOffsetCommitResponseData

log = logging.getLogger(__name__)


class TxnOffsetCommitResponse:
    """
    Broker acknowledgment of a transactional offset commit.

    Example:
        >>> response = TxnOffsetCommitResponse(50, {
        ...     TopicPartition("orders", 0): ErrorCode.NO_ERROR,
        ...     TopicPartition("orders", 1): ErrorCode.NOT_COORDINATOR,
        ... })
        >>> data = response.to_bytes(version=1)
        >>> TxnOffsetCommitResponse.parse(data, version=1) == response
        True
    """

    def __init__(self, throttle_time_ms: int, errors: Mapping[TopicPartition, ErrorCode]) -> None:
        if not 0 <= throttle_time_ms <= INT32.max_value:
            raise ValueError(f"throttle_time_ms must be between 0 and {INT32.max_value}, got {throttle_time_ms}")
        self._throttle_time_ms = throttle_time_ms
        self._errors = MappingProxyType(dict(errors))

    @property
    def throttle_time_ms(self) -> int:
        return self._throttle_time_ms

    @property
    def errors(self) -> Mapping[TopicPartition, ErrorCode]:
        """Read-only outcome per topic partition."""
        return self._errors

    def error_counts(self) -> dict[ErrorCode, int]:
        """Number of partitions reporting each error code."""
        return dict(Counter(self._errors.values()))

    def should_client_throttle(self, version: int) -> bool:
        return should_client_throttle(version)

    def summary(self, version: int) -> ResponseSummary:
        """Build a ResponseSummary for logging or metrics."""
        return ResponseSummary(
            throttle_time_ms=self._throttle_time_ms,
            topic_count=len({tp.topic for tp in self._errors}),
            partition_count=len(self._errors),
            error_counts={error.name: count for error, count in self.error_counts().items()},
            should_throttle=should_client_throttle(version),
        )

    def to_data(self) -> TxnOffsetCommitResponseData:
        """Group the table into wire structures."""
        topics = tuple(
            TopicResult(
                topic=topic,
                partitions=tuple(
                    PartitionResult(partition=partition, error_code=int(error))
                    for partition, error in partitions
                ),
            )
            for topic, partitions in group_by_topic(self._errors).items()
        )
        return TxnOffsetCommitResponseData(throttle_time_ms=self._throttle_time_ms, topics=topics)

    def to_bytes(self, version: int) -> bytes:
        """
        Encode the response body for a wire version.

        Raises:
            UnsupportedVersionError: If the version is not supported.
            SchemaMismatchError: If a value does not fit its wire type.
        """
        schema = schema_for(version)
        data = self.to_data()
        encoded = schema.to_bytes(data)
        log.debug(
            "Encoded TxnOffsetCommit v%d: %d topics, %d bytes",
            version, len(data.topics), len(encoded),
        )
        return encoded

    @classmethod
    def from_data(cls, data: TxnOffsetCommitResponseData) -> TxnOffsetCommitResponse:
        """Build a response from decoded wire structures."""
        if data.throttle_time_ms < 0:
            raise SchemaMismatchError("throttle_time_ms", f"negative delay {data.throttle_time_ms}")
        return cls(data.throttle_time_ms, flatten(data.topics))

    @classmethod
    def parse(
        cls,
        data: bytes | bytearray | memoryview,
        version: int,
        allow_trailing_bytes: bool = False,
    ) -> TxnOffsetCommitResponse:
        """
        Decode a response body.

        Args:
            data: Encoded response body, without size prefix or header.
            version: Wire version the body was written with.
            allow_trailing_bytes: Ignore unconsumed bytes after the body.

        Raises:
            UnsupportedVersionError: If the version is not supported.
            TruncatedBufferError: If the body ends early.
            SchemaMismatchError: If a value violates the layout.
        """
        schema = schema_for(version)
        buf = ReadBuffer(data)
        body = schema.decode(buf)
        if buf.remaining and not allow_trailing_bytes:
            raise SchemaMismatchError("response", f"{buf.remaining} unexpected bytes after body")
        response = cls.from_data(body)
        log.debug(
            "Decoded TxnOffsetCommit v%d: %d topics, %d partitions",
            version, len(body.topics), len(response.errors),
        )
        return response

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TxnOffsetCommitResponse):
            return NotImplemented
        return (
            self._throttle_time_ms == other._throttle_time_ms
            and dict(self._errors) == dict(other._errors)
        )

    def __repr__(self) -> str:
        entries = ", ".join(f"{tp}: {error.name}" for tp, error in sorted(self._errors.items()))
        return f"TxnOffsetCommitResponse(errors={{{entries}}}, throttle_time_ms={self._throttle_time_ms})"

    __str__ = __repr__


def encode_response(
    errors: Mapping[TopicPartition, ErrorCode],
    throttle_time_ms: int,
    version: int,
) -> bytes:
    """Encode a result table and throttle delay for a wire version."""
    return TxnOffsetCommitResponse(throttle_time_ms, errors).to_bytes(version)


def decode_response(
    data: bytes | bytearray | memoryview,
    version: int,
) -> tuple[dict[TopicPartition, ErrorCode], int]:
    """Decode bytes into a result table and throttle delay."""
    response = TxnOffsetCommitResponse.parse(data, version)
    return dict(response.errors), response.throttle_time_ms
