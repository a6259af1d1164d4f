# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for api key registry and response framing."""

import io

import pytest

from pytxncommit.exceptions import (
    MessageTooLargeError,
    SchemaMismatchError,
    TruncatedBufferError,
    UnsupportedVersionError,
)
from pytxncommit.protocol import (
    API_VERSIONS,
    HEADER_SIZE,
    MAX_MESSAGE_SIZE,
    SIZE_PREFIX,
    ApiKey,
    ResponseFrame,
    ResponseHeader,
    check_version,
    read_response,
    write_response,
)


class TestResponseHeader:
    """Tests for ResponseHeader class."""

    def test_header_to_bytes(self) -> None:
        """Test header serialization."""
        data = ResponseHeader(correlation_id=258).to_bytes()
        assert len(data) == HEADER_SIZE
        assert data == b"\x00\x00\x01\x02"

    def test_header_from_bytes(self) -> None:
        """Test header deserialization."""
        restored = ResponseHeader.from_bytes(b"\xff\xff\xff\xff")
        assert restored.correlation_id == -1

    def test_header_from_bytes_invalid_size(self) -> None:
        """Test header deserialization with invalid size."""
        with pytest.raises(ValueError, match="Invalid header size"):
            ResponseHeader.from_bytes(b"\x00" * 2)


class TestReadWriteResponse:
    """Tests for read_response and write_response functions."""

    def test_write_response_empty_body(self) -> None:
        """Test writing a frame with an empty body."""
        writer = io.BytesIO()
        write_response(writer, 7, b"")

        data = writer.getvalue()
        assert len(data) == SIZE_PREFIX + HEADER_SIZE
        assert int.from_bytes(data[:4], "big") == HEADER_SIZE
        assert int.from_bytes(data[4:8], "big") == 7

    def test_write_response_with_body(self) -> None:
        """Test writing a frame with a body."""
        body = b"\x00\x00\x00\x32\x00\x00\x00\x00"
        writer = io.BytesIO()
        write_response(writer, 1, body)

        data = writer.getvalue()
        assert int.from_bytes(data[:4], "big") == HEADER_SIZE + len(body)
        assert data[SIZE_PREFIX + HEADER_SIZE:] == body

    def test_read_write_roundtrip(self) -> None:
        """Test that a written frame reads back unchanged."""
        writer = io.BytesIO()
        write_response(writer, 42, b"payload")
        writer.seek(0)

        frame = read_response(writer)

        assert isinstance(frame, ResponseFrame)
        assert frame.correlation_id == 42
        assert frame.body == b"payload"

    def test_read_consecutive_frames(self) -> None:
        """Test reading two frames back to back from one stream."""
        stream = io.BytesIO()
        write_response(stream, 1, b"first")
        write_response(stream, 2, b"second")
        stream.seek(0)

        assert read_response(stream).body == b"first"
        assert read_response(stream).body == b"second"
        with pytest.raises(EOFError, match="Connection closed"):
            read_response(stream)

    def test_read_response_eof(self) -> None:
        """Test reading from an empty stream."""
        with pytest.raises(EOFError, match="Connection closed"):
            read_response(io.BytesIO(b""))

    def test_read_response_incomplete_prefix(self) -> None:
        """Test reading a stream that ends inside the size prefix."""
        with pytest.raises(TruncatedBufferError) as exc_info:
            read_response(io.BytesIO(b"\x00\x00"))
        assert exc_info.value.field == "size"
        assert exc_info.value.available == 2

    def test_read_response_size_below_header(self) -> None:
        """Test a size prefix too small to hold the header."""
        with pytest.raises(SchemaMismatchError):
            read_response(io.BytesIO(b"\x00\x00\x00\x02\x00\x00"))

    def test_read_response_too_large(self) -> None:
        """Test a size prefix above the limit."""
        reader = io.BytesIO((MAX_MESSAGE_SIZE + 1).to_bytes(4, "big"))
        with pytest.raises(MessageTooLargeError) as exc_info:
            read_response(reader)
        assert exc_info.value.size == MAX_MESSAGE_SIZE + 1

    def test_read_response_custom_limit(self) -> None:
        """Test that a caller-supplied limit is enforced."""
        writer = io.BytesIO()
        write_response(writer, 1, b"x" * 100)
        writer.seek(0)
        with pytest.raises(MessageTooLargeError):
            read_response(writer, max_size=50)

    def test_write_response_too_large(self) -> None:
        """Test that oversized frames are refused before writing."""
        writer = io.BytesIO()
        with pytest.raises(MessageTooLargeError):
            write_response(writer, 1, b"x" * 100, max_size=50)
        assert writer.getvalue() == b""

    def test_read_response_incomplete_body(self) -> None:
        """Test reading a frame whose body is cut short."""
        reader = io.BytesIO(b"\x00\x00\x00\x64" + b"\x00" * 10)
        with pytest.raises(TruncatedBufferError) as exc_info:
            read_response(reader)
        assert exc_info.value.needed == 100
        assert exc_info.value.available == 10


class TestApiKey:
    """Tests for ApiKey enum and version registry."""

    def test_api_key_values(self) -> None:
        """Test api key values match the protocol."""
        assert ApiKey.TXN_OFFSET_COMMIT == 28

    def test_supported_range(self) -> None:
        """Test the registered version range."""
        assert API_VERSIONS[ApiKey.TXN_OFFSET_COMMIT] == (0, 2)

    def test_check_version_accepts_supported(self) -> None:
        """Test that supported versions pass through."""
        for version in (0, 1, 2):
            assert check_version(ApiKey.TXN_OFFSET_COMMIT, version) == version

    @pytest.mark.parametrize("version", [-1, 3, 100])
    def test_check_version_rejects_unsupported(self, version: int) -> None:
        """Test that versions outside the range are rejected."""
        with pytest.raises(UnsupportedVersionError) as exc_info:
            check_version(ApiKey.TXN_OFFSET_COMMIT, version)
        assert exc_info.value.version == version
        assert exc_info.value.api_key == 28
        assert exc_info.value.supported == (0, 2)
        assert "Hint:" in str(exc_info.value)
