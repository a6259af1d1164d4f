# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Conversion between the flat result table and topic-major groups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .errors import ErrorCode
from .exceptions import SchemaMismatchError
from .types import TopicPartition, TopicResult

log = logging.getLogger(__name__)


def group_by_topic(
    errors: Mapping[TopicPartition, ErrorCode],
) -> dict[str, list[tuple[int, ErrorCode]]]:
    """
    Group a result table by topic.

    Topics and the partitions inside each topic come out sorted, so equal
    tables always produce the same groups. Only topics that own at least one
    entry appear.

    Args:
        errors: Outcome per topic partition.

    Returns:
        Ordered mapping of topic to (partition, error) pairs.
    """
    grouped: dict[str, list[tuple[int, ErrorCode]]] = {}
    for tp in sorted(errors):
        grouped.setdefault(tp.topic, []).append((tp.partition, errors[tp]))
    return grouped


def flatten(topics: Iterable[TopicResult]) -> dict[TopicPartition, ErrorCode]:
    """
    Flatten decoded topic groups back into a result table.

    A (topic, partition) pair listed more than once keeps its last outcome.

    Raises:
        SchemaMismatchError: If a partition index is negative.
    """
    errors: dict[TopicPartition, ErrorCode] = {}
    for topic in topics:
        for p in topic.partitions:
            if p.partition < 0:
                raise SchemaMismatchError("partition", f"negative partition index {p.partition} for topic {topic.topic!r}")
            tp = TopicPartition(topic.topic, p.partition)
            if tp in errors:
                log.debug("Duplicate entry for %s, keeping the last outcome", tp)
            errors[tp] = ErrorCode.for_code(p.error_code)
    return errors
