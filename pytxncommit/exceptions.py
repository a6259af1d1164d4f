# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Custom exceptions for the pytxncommit codec.

All exceptions inherit from TxnCommitError, making it easy to catch every
codec failure with a single except clause:

    try:
        response = TxnOffsetCommitResponse.parse(data, version)
    except TxnCommitError as e:
        print(f"Codec error: {e}")

Decode failures are split by cause so callers can tell a short buffer from
a payload that does not match the declared layout:

    try:
        response = TxnOffsetCommitResponse.parse(data, version)
    except TruncatedBufferError as e:
        print(f"Need {e.needed} bytes for {e.field}, only {e.available} left")
    except SchemaMismatchError as e:
        print(f"Bad value for {e.field}")

Unknown error codes inside a payload are NOT an exception: they decode to
ErrorCode.UNKNOWN_SERVER_ERROR.
"""

from __future__ import annotations


class TxnCommitError(Exception):
    """
    Base exception for all pytxncommit errors.

    All exceptions inherit from this class, allowing you to catch
    all codec-related errors with a single except clause.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        self.hint = hint
        if hint:
            message = f"{message}\n\n  Hint: {hint}"
        super().__init__(message)


class UnsupportedVersionError(TxnCommitError):
    """
    Raised when a wire version is not in the schema catalog.

    Raised before any byte is read or written.
    """

    def __init__(self, api_key: int, version: int, supported: tuple[int, int] | None = None) -> None:
        self.api_key = api_key
        self.version = version
        self.supported = supported
        hint = None
        if supported is not None:
            hint = f"Negotiate a version between {supported[0]} and {supported[1]}"
        super().__init__(
            f"Unsupported version {version} for api key {api_key}",
            hint=hint,
        )


class ProtocolError(TxnCommitError):
    """Base exception for wire-level errors."""


class MalformedWireError(ProtocolError):
    """
    Raised when bytes cannot be decoded into a response.

    Subclasses distinguish a short buffer (TruncatedBufferError) from
    content that violates the layout (SchemaMismatchError).
    """

    def __init__(self, message: str, field: str | None = None, *, hint: str | None = None) -> None:
        self.field = field
        super().__init__(message, hint=hint)


class TruncatedBufferError(MalformedWireError):
    """
    Raised when the buffer ends before a field is complete.

    This typically happens when:
    - The frame was cut short in transit
    - The payload was decoded with a newer version than it was written with
    """

    def __init__(self, field: str, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(
            f"Buffer underrun reading {field}: need {needed} bytes, {available} available",
            field,
            hint="Check that the payload was decoded with the version it was encoded with",
        )


class SchemaMismatchError(MalformedWireError):
    """
    Raised when a field value is outside its declared bounds.

    Covers negative array lengths, invalid UTF-8 strings, integers that do
    not fit their wire width, and unconsumed trailing bytes.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}", field)


class MessageTooLargeError(ProtocolError):
    """Raised when a framed response exceeds the configured maximum size."""

    def __init__(self, size: int, max_size: int) -> None:
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"Message too large: {size} bytes, maximum is {max_size} bytes",
            hint="Raise CodecConfig.max_message_size if the peer is trusted",
        )
