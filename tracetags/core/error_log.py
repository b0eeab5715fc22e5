"""Recording errors on spans with the standard error tag and log fields."""

from __future__ import annotations

import builtins
import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from opentelemetry.trace import Status, StatusCode

from .types import (
    LOG_EVENT_ERROR,
    LOG_FIELD_ERROR_KIND,
    LOG_FIELD_EVENT,
    LOG_FIELD_MESSAGE,
    RESERVED_LOG_FIELDS,
    Tag,
)

if TYPE_CHECKING:
    from opentelemetry.trace import Span

logger = logging.getLogger(__name__)

_PRIMITIVE_TYPES = (str, bool, int, float)


def root_cause(err: BaseException) -> BaseException:
    """
    Follow the ``raise ... from`` chain to the innermost exception.

    An exception without an explicit cause is its own root cause.
    """
    seen = {id(err)}
    while err.__cause__ is not None and id(err.__cause__) not in seen:
        err = err.__cause__
        seen.add(id(err))
    return err


def error_kind(err: BaseException) -> str:
    """Return the type name of the error's root cause."""
    cls = type(root_cause(err))
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def log_error(span: Optional[Span], err: Optional[BaseException]) -> None:
    """Log an error on a span, setting the standard error tag and log fields."""
    if span is None or err is None:
        return
    _record(span, err, str(err))


def log_errorf(
    span: Optional[Span], err: Optional[BaseException], format: str, *args: Any
) -> None:
    """
    Log an error on a span with a formatted annotation.

    The message field is ``"<format % args>: <err>"``. The error.kind field is
    still derived from ``err`` itself. A format that does not match ``args``
    does not raise: the format is kept as written and the args are appended
    as reprs.
    """
    if span is None or err is None:
        return
    _record(span, err, f"{_format_annotation(format, args)}: {err}")


def _format_annotation(format: str, args: tuple[Any, ...]) -> str:
    try:
        return format % args
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not format {format!r} with {len(args)} args: {e}")
    if not args:
        return format
    return f"{format} {' '.join(repr(arg) for arg in args)}"


def log_error_with_fields(
    span: Optional[Span],
    err: Optional[BaseException],
    fields: Optional[Mapping[str, Any]],
) -> None:
    """
    Log an error on a span with extra log fields.

    The field names "event", "error.kind" and "message" are reserved and are
    ignored if present in ``fields``.
    """
    if span is None or err is None:
        return
    extra: dict[str, Any] = {}
    for key, value in (fields or {}).items():
        if key in RESERVED_LOG_FIELDS:
            logger.debug(f"Dropping reserved log field {key!r}")
            continue
        extra[key] = _to_attribute_value(key, value)
    _record(span, err, str(err), extra)


def _record(
    span: Span,
    err: BaseException,
    message: str,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    span.set_attribute(Tag.ERROR.value, True)
    span.set_status(Status(StatusCode.ERROR, message))

    attributes: dict[str, Any] = {
        LOG_FIELD_EVENT: LOG_EVENT_ERROR,
        LOG_FIELD_ERROR_KIND: error_kind(err),
        LOG_FIELD_MESSAGE: message,
    }
    if extra:
        attributes.update(extra)
    span.add_event(LOG_EVENT_ERROR, attributes=attributes)


def _to_attribute_value(key: str, value: Any) -> Any:
    """Make an extra field value representable as a span event attribute."""
    if isinstance(value, _PRIMITIVE_TYPES):
        return value
    if isinstance(value, (list, tuple)) and value:
        first = type(value[0])
        if first in _PRIMITIVE_TYPES and all(type(item) is first for item in value):
            return list(value)
    try:
        encoded = json.dumps(value)
    except (TypeError, ValueError):
        encoded = str(value)
    logger.debug(f"Encoded log field {key!r} of type {type(value).__name__}")
    return encoded
