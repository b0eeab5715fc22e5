"""Core module for tracetags."""

from .config import TraceTagsConfig, init, load_config
from .error_log import error_kind, log_error, log_error_with_fields, log_errorf, root_cause
from .logger import LogLevel, configure_logger, get_log_level, set_log_level
from .tags import (
    AttributesSink,
    DBTags,
    HTTPTags,
    PeerTags,
    RPCTags,
    SpanSink,
    StartSpanOptions,
    TagSet,
    TagSink,
    apply_peer_tags,
    build_start_span_options,
    set_db_tags,
    set_http_tags,
    set_rpc_tags,
    start_as_current_span,
    start_span,
)
from .types import (
    LOG_EVENT_ERROR,
    LOG_FIELD_ERROR_KIND,
    LOG_FIELD_ERROR_OBJECT,
    LOG_FIELD_EVENT,
    LOG_FIELD_MESSAGE,
    LOG_FIELD_STACK,
    RESERVED_LOG_FIELDS,
    AttributeValue,
    LogFields,
    SpanKindTag,
    Tag,
)

__all__ = [
    # Config
    "TraceTagsConfig",
    "init",
    "load_config",
    # Logger
    "LogLevel",
    "configure_logger",
    "get_log_level",
    "set_log_level",
    # Tags
    "TagSink",
    "AttributesSink",
    "SpanSink",
    "StartSpanOptions",
    "TagSet",
    "PeerTags",
    "RPCTags",
    "DBTags",
    "HTTPTags",
    "apply_peer_tags",
    "set_rpc_tags",
    "set_db_tags",
    "set_http_tags",
    "build_start_span_options",
    "start_span",
    "start_as_current_span",
    # Error logging
    "log_error",
    "log_errorf",
    "log_error_with_fields",
    "root_cause",
    "error_kind",
    # Types
    "Tag",
    "SpanKindTag",
    "AttributeValue",
    "LogFields",
    "LOG_EVENT_ERROR",
    "LOG_FIELD_ERROR_KIND",
    "LOG_FIELD_ERROR_OBJECT",
    "LOG_FIELD_EVENT",
    "LOG_FIELD_MESSAGE",
    "LOG_FIELD_STACK",
    "RESERVED_LOG_FIELDS",
]
