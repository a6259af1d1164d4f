# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for the TxnOffsetCommit response schema catalog."""

import pytest

from pytxncommit.exceptions import UnsupportedVersionError
from pytxncommit.protocol import API_VERSIONS, ApiKey
from pytxncommit.schemas import (
    SCHEMA_ALIASES,
    SCHEMAS,
    TXN_OFFSET_COMMIT_RESPONSE_V0,
    TXN_OFFSET_COMMIT_RESPONSE_V2,
    field_layout,
    schema_for,
    schema_versions,
)


class TestSchemaCatalog:
    """Tests for per-version schema lookup."""

    def test_v1_aliases_v0(self) -> None:
        """Test that v1 reuses the v0 layout object."""
        assert schema_for(1) is schema_for(0)
        assert schema_for(0) is TXN_OFFSET_COMMIT_RESPONSE_V0
        assert SCHEMA_ALIASES[1] == 0

    def test_v2_is_distinct(self) -> None:
        """Test that v2 has its own layout."""
        assert schema_for(2) is TXN_OFFSET_COMMIT_RESPONSE_V2
        assert schema_for(2) is not schema_for(1)

    def test_schema_versions(self) -> None:
        """Test schemas indexed by version."""
        versions = schema_versions()
        assert len(versions) == 3
        assert versions[0] is versions[1]
        assert versions[2] is TXN_OFFSET_COMMIT_RESPONSE_V2

    def test_catalog_covers_supported_versions(self) -> None:
        """Test that every supported version has a schema and no other does."""
        low, high = API_VERSIONS[ApiKey.TXN_OFFSET_COMMIT]
        assert set(SCHEMAS) == set(range(low, high + 1))
        assert set(SCHEMA_ALIASES) == set(SCHEMAS)

    @pytest.mark.parametrize("version", [-1, 3])
    def test_unsupported_version(self, version: int) -> None:
        """Test lookup of an unknown version."""
        with pytest.raises(UnsupportedVersionError):
            schema_for(version)
        with pytest.raises(UnsupportedVersionError):
            field_layout(version)


class TestFieldLayout:
    """Tests for field_layout."""

    @pytest.mark.parametrize("version", [0, 1])
    def test_v0_v1_layout(self, version: int) -> None:
        """Test the layout shared by v0 and v1."""
        assert field_layout(version) == {
            "response": ("throttle_time_ms", "topics"),
            "topics": ("topic", "partitions"),
            "partitions": ("partition", "error_code"),
        }

    def test_v2_layout(self) -> None:
        """Test that v2 adds leader_epoch at the partition level only."""
        assert field_layout(2) == {
            "response": ("throttle_time_ms", "topics"),
            "topics": ("topic", "partitions"),
            "partitions": ("partition", "error_code", "leader_epoch"),
        }
