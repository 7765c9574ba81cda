"""Encoding of TeamCity service messages."""

from collections.abc import Mapping
from dataclasses import dataclass

from teamcity_listener.escaping import escape_value
from teamcity_listener.sinks.base import MessageSink

MESSAGE_TEMPLATE = "##teamcity[{name}{properties}]"
PROPERTY_TEMPLATE = " {key}='{value}'"

TEST_SUITE_STARTED = "testSuiteStarted"
TEST_SUITE_FINISHED = "testSuiteFinished"
TEST_STARTED = "testStarted"
TEST_FINISHED = "testFinished"
TEST_FAILED = "testFailed"
TEST_IGNORED = "testIgnored"


def format_message(
    name: str, properties: Mapping[str, str], flow_id: str | None = None
) -> str:
    """Build one service message line.

    Properties keep the caller's order; only values are escaped. When a flow
    id is given it is appended as the last ``flowId`` property.
    """
    fragments = [
        PROPERTY_TEMPLATE.format(key=key, value=escape_value(value))
        for key, value in properties.items()
    ]
    if flow_id is not None:
        fragments.append(PROPERTY_TEMPLATE.format(key="flowId", value=escape_value(flow_id)))
    return MESSAGE_TEMPLATE.format(name=name, properties="".join(fragments))


@dataclass(frozen=True, kw_only=True)
class MessageEncoder:
    """Writes service messages to a sink, one write per message."""

    sink: MessageSink
    flow_id: str | None = None

    def emit(self, name: str, properties: Mapping[str, str]) -> None:
        self.sink.write(format_message(name, properties, self.flow_id))

    def emit_named(
        self, name: str, description: str, duration: int | None = None
    ) -> None:
        """Emit a message carrying ``name`` and, optionally, ``duration``."""
        properties = {"name": description}
        if duration is not None:
            properties["duration"] = str(duration)
        self.emit(name, properties)
