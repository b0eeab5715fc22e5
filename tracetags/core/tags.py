"""Standard RPC, database and HTTP span tags.

Each tag set can be applied in two ways that always produce the same tags:

- at span creation, through ``StartSpanOptions`` (see ``start_span``)
- on a live span, through ``set_rpc_tags`` / ``set_db_tags`` / ``set_http_tags``

See https://github.com/opentracing/specification/blob/master/semantic_conventions.md.
"""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Protocol, Union

from opentelemetry.trace import SpanKind

from .types import AttributeValue, SpanKindTag, Tag

if TYPE_CHECKING:
    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

MAX_PORT = 65535
MAX_STATUS_CODE = 65535

IPv4Input = Union[ipaddress.IPv4Address, str]
IPv6Input = Union[ipaddress.IPv6Address, str]

_OTEL_SPAN_KINDS = {
    SpanKindTag.CLIENT.value: SpanKind.CLIENT,
    SpanKindTag.SERVER.value: SpanKind.SERVER,
}
_SPAN_KIND_TAGS = {otel_kind: tag for tag, otel_kind in _OTEL_SPAN_KINDS.items()}


class TagSink(Protocol):
    """Destination for span tags."""

    def set_tag(self, key: str, value: AttributeValue) -> None: ...


class AttributesSink:
    """Writes tags into an attributes dict consumed at span creation."""

    def __init__(self, attributes: dict[str, AttributeValue]) -> None:
        self.attributes = attributes

    def set_tag(self, key: str, value: AttributeValue) -> None:
        self.attributes[key] = value


class SpanSink:
    """Writes tags onto an already started span."""

    def __init__(self, span: Span) -> None:
        self.span = span

    def set_tag(self, key: str, value: AttributeValue) -> None:
        self.span.set_attribute(key, value)


@dataclass
class StartSpanOptions:
    """Span creation options collected from one or more tag sets."""

    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    kind: SpanKind = SpanKind.INTERNAL

    def set_tag(self, key: str, value: AttributeValue) -> None:
        self.attributes[key] = value
        # Keep the OpenTelemetry span kind in step with the span.kind tag
        if key == Tag.SPAN_KIND.value and value in _OTEL_SPAN_KINDS:
            self.kind = _OTEL_SPAN_KINDS[value]


def apply_peer_tags(
    sink: Optional[TagSink],
    addr: str,
    hostname: str,
    service: str,
    ipv4: Optional[IPv4Input],
    ipv6: Optional[IPv6Input],
    port: int,
) -> None:
    """Write the peer tags whose values are set."""
    if sink is None:
        return
    if addr:
        sink.set_tag(Tag.PEER_ADDRESS.value, addr)
    if hostname:
        sink.set_tag(Tag.PEER_HOSTNAME.value, hostname)
    if ipv4 is not None and ipv4 != "":
        sink.set_tag(Tag.PEER_IPV4.value, str(ipaddress.ip_address(ipv4)))
    if ipv6 is not None and ipv6 != "":
        sink.set_tag(Tag.PEER_IPV6.value, str(ipaddress.ip_address(ipv6)))
    if port > 0:
        sink.set_tag(Tag.PEER_PORT.value, port)
    if service:
        sink.set_tag(Tag.PEER_SERVICE.value, service)


class TagSet:
    """Shared creation-time / live-span plumbing for the tag sets."""

    def write(self, sink: TagSink) -> None:
        raise NotImplementedError

    def apply(self, options: Optional[StartSpanOptions]) -> None:
        """Apply the tags to span creation options."""
        if options is None:
            return
        self.write(options)

    def set_on(self, span: Optional[Span]) -> None:
        """Set the tags on a live span."""
        if span is None:
            logger.debug(f"No span given, skipping {type(self).__name__}")
            return
        self.write(SpanSink(span))

    def attributes(self) -> dict[str, AttributeValue]:
        """Return the tags this set writes, keyed by tag name."""
        sink = AttributesSink({})
        self.write(sink)
        return sink.attributes


@dataclass(frozen=True)
class PeerTags(TagSet):
    """Optional tags that describe the remote peer of a call."""

    peer_addr: str = ""
    peer_hostname: str = ""
    peer_ipv4: Optional[IPv4Input] = None
    peer_ipv6: Optional[IPv6Input] = None
    peer_port: int = 0
    peer_service: str = ""

    def __post_init__(self) -> None:
        # An empty string means unset, like every other peer field
        ipv4 = None if self.peer_ipv4 in (None, "") else ipaddress.IPv4Address(self.peer_ipv4)
        ipv6 = None if self.peer_ipv6 in (None, "") else ipaddress.IPv6Address(self.peer_ipv6)
        object.__setattr__(self, "peer_ipv4", ipv4)
        object.__setattr__(self, "peer_ipv6", ipv6)
        if not 0 <= self.peer_port <= MAX_PORT:
            raise ValueError(f"peer_port must be between 0 and {MAX_PORT}, got {self.peer_port}")

    def write(self, sink: TagSink) -> None:
        apply_peer_tags(
            sink,
            self.peer_addr,
            self.peer_hostname,
            self.peer_service,
            self.peer_ipv4,
            self.peer_ipv6,
            self.peer_port,
        )


@dataclass(frozen=True)
class RPCTags(PeerTags):
    """
    Standard RPC tags.

    ``kind`` is "client" or "server", or the matching OpenTelemetry
    ``SpanKind.CLIENT`` / ``SpanKind.SERVER``. Any other value sets no
    span.kind tag.

    See https://github.com/opentracing/specification/blob/master/semantic_conventions.md#rpcs.
    """

    kind: Union[SpanKindTag, SpanKind, str] = ""

    def write(self, sink: TagSink) -> None:
        kind = _rpc_kind_value(self.kind)
        if kind is not None:
            sink.set_tag(Tag.SPAN_KIND.value, kind)
        elif self.kind:
            logger.debug(f"Ignoring unrecognized RPC span kind {self.kind!r}")
        super().write(sink)


def _rpc_kind_value(kind: Union[SpanKindTag, SpanKind, str]) -> Optional[str]:
    if isinstance(kind, SpanKind):
        return _SPAN_KIND_TAGS.get(kind)
    if kind in (SpanKindTag.CLIENT, SpanKindTag.SERVER):
        return SpanKindTag(kind).value
    return None


@dataclass(frozen=True)
class DBTags(PeerTags):
    """
    Standard tags for a database client call.

    The span kind is always "client".

    See https://github.com/opentracing/specification/blob/master/semantic_conventions.md#database-client-calls.
    """

    type: str = ""
    instance: str = ""
    user: str = ""
    statement: str = ""

    def write(self, sink: TagSink) -> None:
        sink.set_tag(Tag.SPAN_KIND.value, SpanKindTag.CLIENT.value)
        if self.type:
            sink.set_tag(Tag.DB_TYPE.value, self.type.lower())
        if self.instance:
            sink.set_tag(Tag.DB_INSTANCE.value, self.instance)
        if self.user:
            sink.set_tag(Tag.DB_USER.value, self.user)
        if self.statement:
            sink.set_tag(Tag.DB_STATEMENT.value, self.statement)
        super().write(sink)


@dataclass(frozen=True)
class HTTPTags(TagSet):
    """Standard HTTP request tags."""

    method: str = ""
    url: str = ""
    status_code: int = 0

    def __post_init__(self) -> None:
        # 0 means unset; anything outside the 16-bit unsigned range is not a status
        if not 0 <= self.status_code <= MAX_STATUS_CODE:
            raise ValueError(
                f"status_code must be between 0 and {MAX_STATUS_CODE}, got {self.status_code}"
            )

    def write(self, sink: TagSink) -> None:
        if self.method:
            sink.set_tag(Tag.HTTP_METHOD.value, self.method)
        if self.url:
            sink.set_tag(Tag.HTTP_URL.value, self.url)
        if self.status_code > 0:
            sink.set_tag(Tag.HTTP_STATUS_CODE.value, self.status_code)


def set_rpc_tags(span: Optional[Span], tags: RPCTags) -> None:
    """Set the standard RPC tags on the specified span."""
    tags.set_on(span)


def set_db_tags(span: Optional[Span], tags: DBTags) -> None:
    """Set the standard database tags on the specified span."""
    tags.set_on(span)


def set_http_tags(span: Optional[Span], tags: HTTPTags) -> None:
    """Set the standard HTTP tags on the specified span."""
    tags.set_on(span)


def build_start_span_options(*tag_sets: TagSet) -> StartSpanOptions:
    """Collect the tags of every tag set into one StartSpanOptions, in order."""
    options = StartSpanOptions()
    for tag_set in tag_sets:
        tag_set.apply(options)
    return options


def start_span(tracer: Tracer, name: str, *tag_sets: TagSet, **kwargs: Any) -> Span:
    """
    Start a span with the given tag sets applied at creation.

    Extra keyword arguments are passed to ``Tracer.start_span``. Attributes
    passed there are merged under the tag set attributes. An explicit
    ``kind`` wins over the kind derived from the tag sets, unless it is None.
    """
    return tracer.start_span(name, **_span_arguments(tag_sets, kwargs))


def start_as_current_span(tracer: Tracer, name: str, *tag_sets: TagSet, **kwargs: Any):
    """Like ``start_span`` but returns ``Tracer.start_as_current_span``'s context manager."""
    return tracer.start_as_current_span(name, **_span_arguments(tag_sets, kwargs))


def _span_arguments(tag_sets: tuple[TagSet, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    options = build_start_span_options(*tag_sets)
    attributes = {**(kwargs.pop("attributes", None) or {}), **options.attributes}
    kind = kwargs.pop("kind", None)
    return {
        "kind": options.kind if kind is None else kind,
        "attributes": attributes,
        **kwargs,
    }
