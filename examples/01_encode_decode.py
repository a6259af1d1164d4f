#!/usr/bin/env python3
"""
01_encode_decode.py - Encoding and Decoding TxnOffsetCommit Responses

This example demonstrates:
- Building a response from a per-partition result table
- Encoding it at each wire version
- Decoding it back and checking version-gated throttling
- Writing and reading a framed response on a stream

Prerequisites:
    - pytxncommit installed

Run with:
    python 01_encode_decode.py
"""

import io

from pytxncommit import (
    CodecConfig,
    ErrorCode,
    ResponseCodec,
    TopicPartition,
    TxnOffsetCommitResponse,
    TruncatedBufferError,
)


def encode_all_versions():
    """Encode one response at every version"""
    print("Encoding")
    print("-" * 50)

    response = TxnOffsetCommitResponse(50, {
        TopicPartition("orders", 0): ErrorCode.NO_ERROR,
        TopicPartition("orders", 1): ErrorCode.NOT_COORDINATOR,
        TopicPartition("payments", 0): ErrorCode.GROUP_AUTHORIZATION_FAILED,
    })
    print(response)

    for version in (0, 1, 2):
        data = response.to_bytes(version)
        decoded = TxnOffsetCommitResponse.parse(data, version)
        print(f"v{version}: {len(data)} bytes, roundtrip ok={decoded == response}, "
              f"client throttles={decoded.should_client_throttle(version)}")

    print(f"Error counts: {response.summary(2).error_counts}")
    return response


def framed_stream(response):
    """Write and read a framed response"""
    print("\nFramed Stream")
    print("-" * 50)

    codec = ResponseCodec(CodecConfig(default_version=1))
    stream = io.BytesIO()
    codec.write(stream, response, correlation_id=7)
    stream.seek(0)

    correlation_id, decoded = codec.read(stream)
    print(f"Correlation id {correlation_id}: {decoded}")


def malformed_input():
    """Decoding a truncated body"""
    print("\nMalformed Input")
    print("-" * 50)

    try:
        TxnOffsetCommitResponse.parse(b"\x00\x00\x00\x32\x00\x00", version=0)
    except TruncatedBufferError as e:
        print(f"✓ Caught truncated buffer on {e.field}: {e}")


if __name__ == "__main__":
    response = encode_all_versions()
    framed_stream(response)
    malformed_input()
