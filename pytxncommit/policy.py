# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Version-gated client behaviour."""

from __future__ import annotations

from .protocol import ApiKey, check_version

# From this version on, brokers send the response before throttling and
# expect the client to honour throttle_time_ms itself.
CLIENT_THROTTLE_MIN_VERSION: int = 1


def should_client_throttle(version: int) -> bool:
    """
    Whether a client must back off for throttle_time_ms after this response.

    Args:
        version: Negotiated wire version.

    Raises:
        UnsupportedVersionError: If the version is not supported.
    """
    check_version(ApiKey.TXN_OFFSET_COMMIT, version)
    return version >= CLIENT_THROTTLE_MIN_VERSION
