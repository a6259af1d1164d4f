# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Api key registry and response framing.

Response Frame Format:
    +-------+-------+-------+-------+-------+-------+-------+-------+
    | Size (4 bytes, big-endian)    | Correlation ID (4 bytes)      |
    +-------+-------+-------+-------+-------+-------+-------+-------+
    |                    Body (Size - 4 bytes)                      |
    +---------------------------------------------------------------+

Header Fields:
    - Size (4 bytes): Length of everything after the size field
    - Correlation ID (4 bytes): Echoes the id of the request being answered
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from .exceptions import MessageTooLargeError, SchemaMismatchError, TruncatedBufferError, UnsupportedVersionError

if TYPE_CHECKING:
    from typing import BinaryIO

# Protocol constants
SIZE_PREFIX: int = 4
HEADER_SIZE: int = 4
MAX_MESSAGE_SIZE: int = 100 * 1024 * 1024  # 100MB


class ApiKey(IntEnum):
    """Api keys understood by this package."""

    TXN_OFFSET_COMMIT = 28


# Inclusive (min, max) wire versions per api key.
API_VERSIONS: dict[ApiKey, tuple[int, int]] = {
    ApiKey.TXN_OFFSET_COMMIT: (0, 2),
}


def check_version(api_key: ApiKey, version: int) -> int:
    """
    Validate a wire version against the registry.

    Returns:
        The version, unchanged.

    Raises:
        UnsupportedVersionError: If the version is outside the supported range.
    """
    low, high = API_VERSIONS[api_key]
    if not low <= version <= high:
        raise UnsupportedVersionError(int(api_key), version, (low, high))
    return version


@dataclass(frozen=True)
class ResponseHeader:
    """Response header preceding the body."""

    correlation_id: int

    def to_bytes(self) -> bytes:
        """Serialize header to bytes."""
        return struct.pack(">i", self.correlation_id)

    @classmethod
    def from_bytes(cls, data: bytes) -> ResponseHeader:
        """Deserialize header from bytes."""
        if len(data) != HEADER_SIZE:
            raise ValueError(f"Invalid header size: {len(data)}, expected {HEADER_SIZE}")
        (correlation_id,) = struct.unpack(">i", data)
        return cls(correlation_id=correlation_id)


@dataclass(frozen=True)
class ResponseFrame:
    """Complete response frame with header and body."""

    header: ResponseHeader
    body: bytes

    @property
    def correlation_id(self) -> int:
        """Get the correlation id."""
        return self.header.correlation_id


def read_response(reader: BinaryIO, max_size: int = MAX_MESSAGE_SIZE) -> ResponseFrame:
    """
    Read a complete response frame from a binary stream.

    Args:
        reader: Binary stream to read from.
        max_size: Largest accepted frame, excluding the size prefix.

    Returns:
        Parsed ResponseFrame.

    Raises:
        EOFError: If the stream is already exhausted.
        TruncatedBufferError: If the stream ends inside a frame.
        SchemaMismatchError: If the size prefix is smaller than the header.
        MessageTooLargeError: If the frame exceeds max_size.
    """
    prefix = reader.read(SIZE_PREFIX)
    if len(prefix) == 0:
        raise EOFError("Connection closed")
    if len(prefix) < SIZE_PREFIX:
        raise TruncatedBufferError("size", SIZE_PREFIX, len(prefix))

    (size,) = struct.unpack(">i", prefix)
    if size < HEADER_SIZE:
        raise SchemaMismatchError("size", f"frame size {size} is smaller than the {HEADER_SIZE} byte header")
    if size > max_size:
        raise MessageTooLargeError(size, max_size)

    data = reader.read(size)
    if len(data) < size:
        raise TruncatedBufferError("frame", size, len(data))

    header = ResponseHeader.from_bytes(data[:HEADER_SIZE])
    return ResponseFrame(header=header, body=data[HEADER_SIZE:])


def write_response(
    writer: BinaryIO,
    correlation_id: int,
    body: bytes,
    max_size: int = MAX_MESSAGE_SIZE,
) -> None:
    """
    Write a complete response frame (size + header + body) to a binary stream.

    Args:
        writer: Binary stream to write to.
        correlation_id: Id of the request being answered.
        body: Encoded response body.
        max_size: Largest allowed frame, excluding the size prefix.
    """
    size = HEADER_SIZE + len(body)
    if size > max_size:
        raise MessageTooLargeError(size, max_size)
    writer.write(struct.pack(">i", size))
    writer.write(ResponseHeader(correlation_id).to_bytes())
    if body:
        writer.write(body)
