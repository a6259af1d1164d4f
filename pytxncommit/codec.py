# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Configured entry point for encoding and decoding responses.

Example:
    >>> codec = ResponseCodec(CodecConfig(default_version=1))
    >>> body = codec.encode(response)
    >>> codec.decode(body) == response
    True

Framed streams:
    >>> buf = io.BytesIO()
    >>> codec.write(buf, response, correlation_id=7)
    >>> buf.seek(0)
    >>> correlation_id, decoded = codec.read(buf)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import CodecConfig
from .protocol import read_response, write_response
from .response import TxnOffsetCommitResponse

if TYPE_CHECKING:
    from typing import BinaryIO

log = logging.getLogger(__name__)


class ResponseCodec:
    """Encodes and decodes TxnOffsetCommit responses under a CodecConfig."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()

    def _version(self, version: int | None) -> int:
        return self.config.default_version if version is None else version

    def encode(self, response: TxnOffsetCommitResponse, version: int | None = None) -> bytes:
        """Encode a response body."""
        return response.to_bytes(self._version(version))

    def decode(self, data: bytes, version: int | None = None) -> TxnOffsetCommitResponse:
        """Decode a response body."""
        return TxnOffsetCommitResponse.parse(
            data,
            self._version(version),
            allow_trailing_bytes=self.config.allow_trailing_bytes,
        )

    def write(
        self,
        writer: BinaryIO,
        response: TxnOffsetCommitResponse,
        correlation_id: int,
        version: int | None = None,
    ) -> None:
        """Encode a response and write it as a framed message."""
        body = self.encode(response, version)
        write_response(writer, correlation_id, body, max_size=self.config.max_message_size)

    def read(self, reader: BinaryIO, version: int | None = None) -> tuple[int, TxnOffsetCommitResponse]:
        """
        Read one framed response from a stream.

        Returns:
            Tuple of (correlation_id, response).
        """
        frame = read_response(reader, max_size=self.config.max_message_size)
        log.debug("Read response frame for correlation id %d (%d bytes)", frame.correlation_id, len(frame.body))
        return frame.correlation_id, self.decode(frame.body, version)
