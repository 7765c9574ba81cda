"""Service message sinks."""

from teamcity_listener.sinks.base import MessageSink
from teamcity_listener.sinks.loading import (
    SinkNotFoundError,
    available_sinks,
    build_sink,
    load_sink_manifest,
)
from teamcity_listener.sinks.logger import LoggerSink, LoggerSinkConfig
from teamcity_listener.sinks.stream import StreamSink, StreamSinkConfig

__all__ = [
    "LoggerSink",
    "LoggerSinkConfig",
    "MessageSink",
    "SinkNotFoundError",
    "StreamSink",
    "StreamSinkConfig",
    "available_sinks",
    "build_sink",
    "load_sink_manifest",
]
