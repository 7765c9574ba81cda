"""Tests for sink loading module."""

import pytest
from pydantic import ValidationError

from teamcity_listener.sinks.loading import (
    SinkNotFoundError,
    available_sinks,
    build_sink,
    load_sink_manifest,
)
from teamcity_listener.sinks.logger import LoggerSink, logger_manifest
from teamcity_listener.sinks.stream import stream_manifest


def test_load_sink_manifest_returns_manifest() -> None:
    """Loads sink manifests by key."""
    assert load_sink_manifest("stdout") is stream_manifest
    assert load_sink_manifest("logger") is logger_manifest


def test_load_sink_manifest_raises_for_unknown_sink() -> None:
    """Raises SinkNotFoundError listing the installed sinks."""
    with pytest.raises(SinkNotFoundError) as exc_info:
        load_sink_manifest("unknown-sink")

    assert exc_info.value.key == "unknown-sink"
    assert "unknown-sink" in str(exc_info.value)
    assert "Available sinks" in str(exc_info.value)
    assert {"logger", "stdout"} <= set(exc_info.value.available)


def test_available_sinks_is_sorted() -> None:
    """Installed sink keys are listed in sorted order."""
    sinks = available_sinks()

    assert sinks == sorted(sinks)
    assert {"logger", "stdout"} <= set(sinks)


def test_build_sink_validates_config() -> None:
    """Builds the sink from a validated config mapping."""
    sink = build_sink("logger", {"logger_name": "replayed"})

    assert isinstance(sink, LoggerSink)
    assert sink.logger.name == "replayed"


def test_build_sink_rejects_invalid_config() -> None:
    """Config that does not match the sink's model fails validation."""
    with pytest.raises(ValidationError):
        build_sink("stdout", {"target": "printer"})
