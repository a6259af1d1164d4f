# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Reactive Streams support for pytxncommit.

Provides RxPY operators that turn a stream of encoded response bodies into
decoded responses, per-error tallies and throttle delays.

Example:
    >>> bodies.pipe(
    ...     decode_responses(version=2),
    ...     throttle_delays(version=2),
    ... ).subscribe(on_next=lambda ms: pause(ms / 1000))
"""

from __future__ import annotations

from collections import Counter
from typing import Callable

from reactivex import Observable, operators as ops

from .codec import ResponseCodec
from .errors import ErrorCode
from .policy import should_client_throttle
from .response import TxnOffsetCommitResponse


def decode_responses(
    version: int | None = None,
    codec: ResponseCodec | None = None,
) -> Callable[[Observable[bytes]], Observable[TxnOffsetCommitResponse]]:
    """
    Create an operator that decodes response bodies.

    Decode failures terminate the stream through on_error.

    Args:
        version: Wire version of every body; defaults to the codec's.
        codec: Codec to decode with; a default ResponseCodec if omitted.

    Returns:
        Operator function for use with pipe().
    """
    codec = codec or ResponseCodec()
    return ops.map(lambda data: codec.decode(data, version))


def tally_errors() -> Callable[[Observable[TxnOffsetCommitResponse]], Observable[dict[ErrorCode, int]]]:
    """
    Create an operator that counts partitions per error code.

    Emits a single merged count when the source completes.
    """
    def _tally(source: Observable[TxnOffsetCommitResponse]) -> Observable[dict[ErrorCode, int]]:
        return source.pipe(
            ops.reduce(lambda acc, response: acc + Counter(response.error_counts()), Counter()),
            ops.map(dict),
        )

    return _tally


def throttle_delays(version: int) -> Callable[[Observable[TxnOffsetCommitResponse]], Observable[int]]:
    """
    Create an operator that emits the delays a client has to honour.

    Nothing is emitted for versions where the broker throttles before
    responding, or for responses without a delay.

    Raises:
        UnsupportedVersionError: If the version is not supported.
    """
    throttle = should_client_throttle(version)

    def _delays(source: Observable[TxnOffsetCommitResponse]) -> Observable[int]:
        return source.pipe(
            ops.filter(lambda response: throttle and response.throttle_time_ms > 0),
            ops.map(lambda response: response.throttle_time_ms),
        )

    return _delays
