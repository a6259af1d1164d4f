# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Error code registry.

Maps the numeric error codes carried on the wire to named ErrorCode members
and back. Codes the registry does not know decode to
ErrorCode.UNKNOWN_SERVER_ERROR instead of raising.

Error codes a transactional offset commit may report:
    INVALID_PRODUCER_EPOCH
    NOT_COORDINATOR
    COORDINATOR_NOT_AVAILABLE
    COORDINATOR_LOAD_IN_PROGRESS
    OFFSET_METADATA_TOO_LARGE
    GROUP_AUTHORIZATION_FAILED
    INVALID_COMMIT_OFFSET_SIZE
    TRANSACTIONAL_ID_AUTHORIZATION_FAILED
    REQUEST_TIMED_OUT
"""

from __future__ import annotations

import logging
from enum import IntEnum

log = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    """Named error kinds with their stable numeric codes."""

    def __new__(cls, code: int, description: str) -> ErrorCode:
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.description = description
        return obj

    UNKNOWN_SERVER_ERROR = (-1, "The server experienced an unexpected error when processing the request.")
    NO_ERROR = (0, "")
    OFFSET_OUT_OF_RANGE = (1, "The requested offset is not within the range of offsets maintained by the server.")
    CORRUPT_MESSAGE = (2, "This message has failed its CRC checksum, exceeds the valid size, or is otherwise corrupt.")
    UNKNOWN_TOPIC_OR_PARTITION = (3, "This server does not host this topic-partition.")
    INVALID_FETCH_SIZE = (4, "The requested fetch size is invalid.")
    LEADER_NOT_AVAILABLE = (5, "There is no leader for this topic-partition as we are in the middle of a leadership election.")
    NOT_LEADER_FOR_PARTITION = (6, "This server is not the leader for that topic-partition.")
    REQUEST_TIMED_OUT = (7, "The request timed out.")
    BROKER_NOT_AVAILABLE = (8, "The broker is not available.")
    REPLICA_NOT_AVAILABLE = (9, "The replica is not available for the requested topic-partition.")
    MESSAGE_TOO_LARGE = (10, "The request included a message larger than the max message size the server will accept.")
    STALE_CONTROLLER_EPOCH = (11, "The controller moved to another broker.")
    OFFSET_METADATA_TOO_LARGE = (12, "The metadata field of the offset request was too large.")
    NETWORK_EXCEPTION = (13, "The server disconnected before a response was received.")
    COORDINATOR_LOAD_IN_PROGRESS = (14, "The coordinator is loading and hence can't process requests.")
    COORDINATOR_NOT_AVAILABLE = (15, "The coordinator is not available.")
    NOT_COORDINATOR = (16, "This is not the correct coordinator.")
    INVALID_TOPIC_EXCEPTION = (17, "The request attempted to perform an operation on an invalid topic.")
    RECORD_LIST_TOO_LARGE = (18, "The request included message batch larger than the configured segment size on the server.")
    NOT_ENOUGH_REPLICAS = (19, "Messages are rejected since there are fewer in-sync replicas than required.")
    NOT_ENOUGH_REPLICAS_AFTER_APPEND = (20, "Messages are written to the log, but to fewer in-sync replicas than required.")
    INVALID_REQUIRED_ACKS = (21, "Produce request specified an invalid value for required acks.")
    ILLEGAL_GENERATION = (22, "Specified group generation id is not valid.")
    INCONSISTENT_GROUP_PROTOCOL = (23, "The group member's supported protocols are incompatible with those of existing members.")
    INVALID_GROUP_ID = (24, "The configured groupId is invalid.")
    UNKNOWN_MEMBER_ID = (25, "The coordinator is not aware of this member.")
    INVALID_SESSION_TIMEOUT = (26, "The session timeout is not within the range allowed by the broker.")
    REBALANCE_IN_PROGRESS = (27, "The group is rebalancing, so a rejoin is needed.")
    INVALID_COMMIT_OFFSET_SIZE = (28, "The committing offset data size is not valid.")
    TOPIC_AUTHORIZATION_FAILED = (29, "Not authorized to access topics: [Topic authorization failed.]")
    GROUP_AUTHORIZATION_FAILED = (30, "Not authorized to access group: Group authorization failed.")
    CLUSTER_AUTHORIZATION_FAILED = (31, "Cluster authorization failed.")
    INVALID_TIMESTAMP = (32, "The timestamp of the message is out of acceptable range.")
    UNSUPPORTED_SASL_MECHANISM = (33, "The broker does not support the requested SASL mechanism.")
    ILLEGAL_SASL_STATE = (34, "Request is not valid given the current SASL state.")
    UNSUPPORTED_VERSION = (35, "The version of API is not supported.")
    TOPIC_ALREADY_EXISTS = (36, "Topic with this name already exists.")
    INVALID_PARTITIONS = (37, "Number of partitions is below 1.")
    INVALID_REPLICATION_FACTOR = (38, "Replication factor is below 1 or larger than the number of available brokers.")
    INVALID_REPLICA_ASSIGNMENT = (39, "Replica assignment is invalid.")
    INVALID_CONFIG = (40, "Configuration is invalid.")
    NOT_CONTROLLER = (41, "This is not the correct controller for this cluster.")
    INVALID_REQUEST = (42, "This most likely occurs because of a request being malformed by the client library.")
    UNSUPPORTED_FOR_MESSAGE_FORMAT = (43, "The message format version on the broker does not support the request.")
    POLICY_VIOLATION = (44, "Request parameters do not satisfy the configured policy.")
    OUT_OF_ORDER_SEQUENCE_NUMBER = (45, "The broker received an out of order sequence number.")
    DUPLICATE_SEQUENCE_NUMBER = (46, "The broker received a duplicate sequence number.")
    INVALID_PRODUCER_EPOCH = (47, "Producer attempted an operation with an old epoch.")
    INVALID_TXN_STATE = (48, "The producer attempted a transactional operation in an invalid state.")
    INVALID_PRODUCER_ID_MAPPING = (49, "The producer attempted to use a producer id which is not currently assigned to its transactional id.")
    INVALID_TRANSACTION_TIMEOUT = (50, "The transaction timeout is larger than the maximum value allowed by the broker.")
    CONCURRENT_TRANSACTIONS = (51, "The producer attempted to update a transaction while another concurrent operation on the same transaction was ongoing.")
    TRANSACTION_COORDINATOR_FENCED = (52, "Indicates that the transaction coordinator sending a WriteTxnMarker is no longer the current coordinator for a given producer.")
    TRANSACTIONAL_ID_AUTHORIZATION_FAILED = (53, "Transactional Id authorization failed.")
    SECURITY_DISABLED = (54, "Security features are disabled.")
    OPERATION_NOT_ATTEMPTED = (55, "The broker did not attempt to execute this operation.")
    KAFKA_STORAGE_ERROR = (56, "Disk error when trying to access log file on the disk.")
    LOG_DIR_NOT_FOUND = (57, "The user-specified log directory is not found in the broker config.")
    SASL_AUTHENTICATION_FAILED = (58, "SASL Authentication failed.")
    UNKNOWN_PRODUCER_ID = (59, "This exception is raised by the broker if it could not locate the producer metadata associated with the producerId in question.")
    REASSIGNMENT_IN_PROGRESS = (60, "A partition reassignment is in progress.")
    DELEGATION_TOKEN_AUTH_DISABLED = (61, "Delegation Token feature is not enabled.")
    DELEGATION_TOKEN_NOT_FOUND = (62, "Delegation Token is not found on server.")
    DELEGATION_TOKEN_OWNER_MISMATCH = (63, "Specified Principal is not valid Owner/Renewer.")
    DELEGATION_TOKEN_REQUEST_NOT_ALLOWED = (64, "Delegation Token requests are not allowed on PLAINTEXT/1-way SSL channels and on delegation token authenticated channels.")
    DELEGATION_TOKEN_AUTHORIZATION_FAILED = (65, "Delegation Token authorization failed.")
    DELEGATION_TOKEN_EXPIRED = (66, "Delegation Token is expired.")
    INVALID_PRINCIPAL_TYPE = (67, "Supplied principalType is not supported.")
    NON_EMPTY_GROUP = (68, "The group is not empty.")
    GROUP_ID_NOT_FOUND = (69, "The group id does not exist.")
    FETCH_SESSION_ID_NOT_FOUND = (70, "The fetch session ID was not found.")
    INVALID_FETCH_SESSION_EPOCH = (71, "The fetch session epoch is invalid.")
    LISTENER_NOT_FOUND = (72, "There is no listener on the leader broker that matches the listener on which metadata request was processed.")
    TOPIC_DELETION_DISABLED = (73, "Topic deletion is disabled.")
    FENCED_LEADER_EPOCH = (74, "The leader epoch in the request is older than the epoch on the broker.")
    UNKNOWN_LEADER_EPOCH = (75, "The leader epoch in the request is newer than the epoch on the broker.")
    UNSUPPORTED_COMPRESSION_TYPE = (76, "The requesting client does not support the compression type of given partition.")
    STALE_BROKER_EPOCH = (77, "Broker epoch has changed.")
    OFFSET_NOT_AVAILABLE = (78, "The leader high watermark has not caught up from a recent leader election so the offsets cannot be guaranteed to be monotonically increasing.")
    MEMBER_ID_REQUIRED = (79, "The group member needs to have a valid member id before actually entering a consumer group.")
    PREFERRED_LEADER_NOT_AVAILABLE = (80, "The preferred leader was not available.")
    GROUP_MAX_SIZE_REACHED = (81, "The consumer group has reached its max size.")
    FENCED_INSTANCE_ID = (82, "The broker rejected this static consumer since another consumer with the same group.instance.id has registered with a different member.id.")

    @property
    def code(self) -> int:
        """Numeric code written on the wire."""
        return self._value_

    @classmethod
    def for_code(cls, code: int) -> ErrorCode:
        """
        Look up the member for a numeric code.

        Args:
            code: Numeric error code read from the wire.

        Returns:
            The matching member, or UNKNOWN_SERVER_ERROR when the code
            is not registered.
        """
        try:
            return cls(code)
        except ValueError:
            log.warning("Unexpected error code: %d.", code)
            return cls.UNKNOWN_SERVER_ERROR

    def __str__(self) -> str:
        return self.name
