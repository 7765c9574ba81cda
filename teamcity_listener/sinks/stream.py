"""Sink writing service messages to a text stream."""

import sys
from dataclasses import dataclass, field
from typing import Literal, TextIO

from pydantic import BaseModel

from teamcity_listener.sinks.base import MessageSink
from teamcity_listener.sinks.manifest import SinkManifest


class StreamSinkConfig(BaseModel):
    """Configuration for the stream sink."""

    target: Literal["stdout", "stderr"] = "stdout"


@dataclass(frozen=True, kw_only=True)
class StreamSink(MessageSink):
    """Writes each line to a stream and flushes it immediately."""

    stream: TextIO = field(repr=False)

    @classmethod
    def from_config(cls, config: StreamSinkConfig) -> "StreamSink":
        return cls(stream=sys.stdout if config.target == "stdout" else sys.stderr)

    def write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()


stream_manifest = SinkManifest(
    config_cls=StreamSinkConfig,
    sink_factory=StreamSink.from_config,
)
