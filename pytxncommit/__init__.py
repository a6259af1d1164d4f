# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
pytxncommit - Codec for the transactional offset-commit acknowledgment.

Encodes and decodes the TxnOffsetCommit response (api key 28), versions 0-2:
- Per-partition error codes grouped by topic on the wire
- Shared throttle delay
- Version-gated client throttling (v1+)
- Framed stream reading/writing
- Reactive operators for response streams

Quick Start:
    >>> from pytxncommit import ErrorCode, TopicPartition, TxnOffsetCommitResponse
    >>>
    >>> response = TxnOffsetCommitResponse(50, {
    ...     TopicPartition("orders", 0): ErrorCode.NO_ERROR,
    ...     TopicPartition("orders", 1): ErrorCode.NOT_COORDINATOR,
    ...     TopicPartition("payments", 0): ErrorCode.GROUP_AUTHORIZATION_FAILED,
    ... })
    >>> data = response.to_bytes(version=0)
    >>> TxnOffsetCommitResponse.parse(data, version=0) == response
    True

Plain functions:
    >>> from pytxncommit import decode_response, encode_response
    >>>
    >>> data = encode_response(response.errors, 50, version=2)
    >>> errors, throttle_time_ms = decode_response(data, version=2)

Configured codec with framing:
    >>> from pytxncommit import CodecConfig, ResponseCodec
    >>>
    >>> codec = ResponseCodec(CodecConfig(default_version=1))
    >>> codec.write(stream, response, correlation_id=7)
"""

from .codec import ResponseCodec
from .errors import ErrorCode
from .exceptions import (
    MalformedWireError,
    MessageTooLargeError,
    ProtocolError,
    SchemaMismatchError,
    TruncatedBufferError,
    TxnCommitError,
    UnsupportedVersionError,
)
from .grouping import flatten, group_by_topic
from .models import CodecConfig, ResponseSummary
from .policy import should_client_throttle
from .protocol import ApiKey, ResponseFrame, check_version, read_response, write_response
from .reactive import decode_responses, tally_errors, throttle_delays
from .response import TxnOffsetCommitResponse, decode_response, encode_response
from .schemas import field_layout, schema_for, schema_versions
from .types import TopicPartition

__version__ = "0.3.0"
__author__ = "Firefly Software Solutions Inc."
__license__ = "Apache-2.0"

__all__ = [
    # Response
    "TxnOffsetCommitResponse",
    "encode_response",
    "decode_response",
    "TopicPartition",
    "ErrorCode",
    # Codec
    "ResponseCodec",
    "CodecConfig",
    "ResponseSummary",
    # Schemas
    "schema_for",
    "schema_versions",
    "field_layout",
    "group_by_topic",
    "flatten",
    # Protocol
    "ApiKey",
    "ResponseFrame",
    "check_version",
    "read_response",
    "write_response",
    "should_client_throttle",
    # Reactive
    "decode_responses",
    "tally_errors",
    "throttle_delays",
    # Exceptions
    "TxnCommitError",
    "UnsupportedVersionError",
    "ProtocolError",
    "MalformedWireError",
    "TruncatedBufferError",
    "SchemaMismatchError",
    "MessageTooLargeError",
]
