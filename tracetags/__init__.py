"""Standard semantic tags and error logging for OpenTelemetry spans."""

from .core import (
    LOG_EVENT_ERROR,
    LOG_FIELD_ERROR_KIND,
    LOG_FIELD_ERROR_OBJECT,
    LOG_FIELD_EVENT,
    LOG_FIELD_MESSAGE,
    LOG_FIELD_STACK,
    RESERVED_LOG_FIELDS,
    DBTags,
    HTTPTags,
    LogFields,
    PeerTags,
    RPCTags,
    SpanKindTag,
    StartSpanOptions,
    Tag,
    TraceTagsConfig,
    build_start_span_options,
    error_kind,
    init,
    load_config,
    log_error,
    log_error_with_fields,
    log_errorf,
    root_cause,
    set_db_tags,
    set_http_tags,
    set_rpc_tags,
    start_as_current_span,
    start_span,
)
from .core.logger import LogLevel, get_log_level, set_log_level

__version__ = "0.1.0"

__all__ = [
    # Config
    "init",
    "load_config",
    "TraceTagsConfig",
    # Logger
    "LogLevel",
    "set_log_level",
    "get_log_level",
    # Tags
    "PeerTags",
    "RPCTags",
    "DBTags",
    "HTTPTags",
    "StartSpanOptions",
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
    # Vocabulary
    "Tag",
    "SpanKindTag",
    "LogFields",
    "LOG_EVENT_ERROR",
    "LOG_FIELD_ERROR_KIND",
    "LOG_FIELD_ERROR_OBJECT",
    "LOG_FIELD_EVENT",
    "LOG_FIELD_MESSAGE",
    "LOG_FIELD_STACK",
    "RESERVED_LOG_FIELDS",
]
