"""Sink writing service messages through the logging module."""

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel

from teamcity_listener.sinks.base import MessageSink
from teamcity_listener.sinks.manifest import SinkManifest


class LoggerSinkConfig(BaseModel):
    """Configuration for the logger sink."""

    logger_name: str = "teamcity_listener.messages"


@dataclass(frozen=True, kw_only=True)
class LoggerSink(MessageSink):
    """Logs each line at INFO level.

    The logging configuration must not decorate the record, otherwise
    TeamCity will not recognise the line as a service message.
    """

    logger: logging.Logger = field(repr=False)

    @classmethod
    def from_config(cls, config: LoggerSinkConfig) -> "LoggerSink":
        return cls(logger=logging.getLogger(config.logger_name))

    def write(self, line: str) -> None:
        self.logger.info(line)


logger_manifest = SinkManifest(
    config_cls=LoggerSinkConfig,
    sink_factory=LoggerSink.from_config,
)
