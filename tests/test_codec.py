# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for CodecConfig and ResponseCodec."""

import io

import pytest
from pydantic import ValidationError

from pytxncommit.codec import ResponseCodec
from pytxncommit.errors import ErrorCode
from pytxncommit.exceptions import MessageTooLargeError, SchemaMismatchError
from pytxncommit.models import CodecConfig
from pytxncommit.protocol import MAX_MESSAGE_SIZE
from pytxncommit.response import TxnOffsetCommitResponse
from pytxncommit.types import TopicPartition


@pytest.fixture
def response() -> TxnOffsetCommitResponse:
    return TxnOffsetCommitResponse(25, {
        TopicPartition("orders", 0): ErrorCode.NO_ERROR,
        TopicPartition("orders", 1): ErrorCode.COORDINATOR_LOAD_IN_PROGRESS,
        TopicPartition("payments", 2): ErrorCode.TRANSACTIONAL_ID_AUTHORIZATION_FAILED,
    })


class TestCodecConfig:
    """Tests for CodecConfig validation."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = CodecConfig()
        assert config.default_version == 2
        assert config.max_message_size == MAX_MESSAGE_SIZE
        assert config.allow_trailing_bytes is False

    @pytest.mark.parametrize("version", [-1, 3])
    def test_invalid_default_version(self, version: int) -> None:
        """Test that unsupported default versions are rejected."""
        with pytest.raises(ValidationError):
            CodecConfig(default_version=version)

    def test_validate_assignment(self) -> None:
        """Test that assignments are validated."""
        config = CodecConfig()
        with pytest.raises(ValidationError):
            config.max_message_size = 0
        config.default_version = 0
        assert config.default_version == 0


class TestResponseCodec:
    """Tests for ResponseCodec."""

    def test_default_version_used(self, response: TxnOffsetCommitResponse) -> None:
        """Test that calls without a version use the configured default."""
        codec = ResponseCodec(CodecConfig(default_version=0))
        assert codec.encode(response) == response.to_bytes(0)
        assert ResponseCodec().encode(response) == response.to_bytes(2)

    def test_explicit_version_overrides(self, response: TxnOffsetCommitResponse) -> None:
        """Test that an explicit version wins over the default."""
        codec = ResponseCodec(CodecConfig(default_version=0))
        assert codec.encode(response, version=2) == response.to_bytes(2)
        assert codec.decode(response.to_bytes(2), version=2) == response

    def test_encode_decode(self, response: TxnOffsetCommitResponse) -> None:
        """Test encode/decode through the codec."""
        codec = ResponseCodec()
        assert codec.decode(codec.encode(response)) == response

    def test_trailing_bytes_config(self, response: TxnOffsetCommitResponse) -> None:
        """Test that allow_trailing_bytes is honoured."""
        data = response.to_bytes(2) + b"\x00"
        with pytest.raises(SchemaMismatchError):
            ResponseCodec().decode(data)
        lenient = ResponseCodec(CodecConfig(allow_trailing_bytes=True))
        assert lenient.decode(data) == response

    def test_write_read_framed(self, response: TxnOffsetCommitResponse) -> None:
        """Test a framed roundtrip through a stream."""
        codec = ResponseCodec(CodecConfig(default_version=1))
        stream = io.BytesIO()
        codec.write(stream, response, correlation_id=99)
        codec.write(stream, TxnOffsetCommitResponse(0, {}), correlation_id=100)
        stream.seek(0)

        assert codec.read(stream) == (99, response)
        assert codec.read(stream) == (100, TxnOffsetCommitResponse(0, {}))

    def test_frame_size_limit(self, response: TxnOffsetCommitResponse) -> None:
        """Test that max_message_size bounds written frames."""
        codec = ResponseCodec(CodecConfig(max_message_size=16))
        with pytest.raises(MessageTooLargeError):
            codec.write(io.BytesIO(), response, correlation_id=1)

    def test_frame_size_limit_on_read(self, response: TxnOffsetCommitResponse) -> None:
        """Test that max_message_size bounds read frames."""
        stream = io.BytesIO()
        ResponseCodec().write(stream, response, correlation_id=1)
        stream.seek(0)
        with pytest.raises(MessageTooLargeError):
            ResponseCodec(CodecConfig(max_message_size=16)).read(stream)
