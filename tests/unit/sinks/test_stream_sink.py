"""Tests for stream and logger sinks."""

import io
import logging
import sys

import pytest

from teamcity_listener.sinks.logger import LoggerSink, LoggerSinkConfig
from teamcity_listener.sinks.stream import StreamSink, StreamSinkConfig


def test_stream_sink_writes_one_line_per_message() -> None:
    """Each line is terminated by a newline."""
    stream = io.StringIO()
    sink = StreamSink(stream=stream)

    sink.write("##teamcity[testStarted name='a']")
    sink.write("##teamcity[testFinished name='a' duration='1']")

    assert stream.getvalue() == (
        "##teamcity[testStarted name='a']\n"
        "##teamcity[testFinished name='a' duration='1']\n"
    )


def test_stream_sink_from_config_selects_stream() -> None:
    """Configured target chooses stdout or stderr."""
    assert StreamSink.from_config(StreamSinkConfig()).stream is sys.stdout
    assert StreamSink.from_config(StreamSinkConfig(target="stderr")).stream is sys.stderr


def test_logger_sink_logs_at_info(caplog: pytest.LogCaptureFixture) -> None:
    """Lines are logged unchanged at INFO level."""
    sink = LoggerSink.from_config(LoggerSinkConfig(logger_name="tc"))

    with caplog.at_level(logging.INFO, logger="tc"):
        sink.write("##teamcity[testStarted name='a']")

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("tc", logging.INFO, "##teamcity[testStarted name='a']")
    ]
