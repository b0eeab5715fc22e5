"""Pytest configuration and fixtures for tracetags tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """Create a fresh InMemorySpanExporter for testing."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> Generator[TracerProvider, None, None]:
    """TracerProvider exporting finished spans synchronously to span_exporter."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider
    provider.shutdown()


@pytest.fixture
def tracer(tracer_provider: TracerProvider) -> Tracer:
    """Tracer from the test provider. Never registered globally."""
    return tracer_provider.get_tracer("tracetags-tests")
