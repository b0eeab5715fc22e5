"""Tag keys, log field names and value types shared by the helpers."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Union


class Tag(str, Enum):
    """
    Standard span tag keys.

    See https://github.com/opentracing/specification/blob/master/semantic_conventions.md#span-tags-table.
    """

    SPAN_KIND = "span.kind"
    ERROR = "error"

    # Peer
    PEER_ADDRESS = "peer.address"
    PEER_HOSTNAME = "peer.hostname"
    PEER_IPV4 = "peer.ipv4"
    PEER_IPV6 = "peer.ipv6"
    PEER_PORT = "peer.port"
    PEER_SERVICE = "peer.service"

    # Database
    DB_TYPE = "db.type"
    DB_INSTANCE = "db.instance"
    DB_USER = "db.user"
    DB_STATEMENT = "db.statement"

    # HTTP
    HTTP_METHOD = "http.method"
    HTTP_URL = "http.url"
    HTTP_STATUS_CODE = "http.status_code"


class SpanKindTag(str, Enum):
    """Values of the span.kind tag recognized for RPC spans."""

    CLIENT = "client"
    SERVER = "server"


# Standard log field names.
# See https://github.com/opentracing/specification/blob/master/semantic_conventions.md#log-fields-table.
LOG_FIELD_ERROR_KIND = "error.kind"
LOG_FIELD_ERROR_OBJECT = "error.object"
LOG_FIELD_EVENT = "event"
LOG_FIELD_MESSAGE = "message"
LOG_FIELD_STACK = "stack"

LOG_EVENT_ERROR = "error"

RESERVED_LOG_FIELDS = frozenset({LOG_FIELD_EVENT, LOG_FIELD_ERROR_KIND, LOG_FIELD_MESSAGE})

AttributeValue = Union[str, bool, int, float]


class LogFields(Dict[str, Any]):
    """Extra span log fields keyed by field name."""

    def encode(self) -> dict[str, Any]:
        """
        Return a new dict with every value JSON encoded.

        Values that cannot be encoded are kept unchanged.
        """
        encoded: dict[str, Any] = {}
        for key, value in self.items():
            try:
                encoded[key] = json.dumps(value)
            except (TypeError, ValueError):
                encoded[key] = value
        return encoded
