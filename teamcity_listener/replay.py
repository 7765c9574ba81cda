"""Replay of recorded event logs through a step listener."""

import logging
from collections.abc import Iterable, Iterator

from pydantic import TypeAdapter, ValidationError

from teamcity_listener.listener import TeamCityStepListener
from teamcity_listener.models.events import (
    Event,
    ExampleFinishedEvent,
    ExampleStartedEvent,
    IgnoredEvent,
    SuiteFinishedEvent,
    SuiteStartedClassEvent,
    SuiteStartedStoryEvent,
    TestFinishedEvent,
    TestStartedEvent,
)

log = logging.getLogger(__name__)

_event_adapter: TypeAdapter[Event] = TypeAdapter(Event)


class EventLogError(Exception):
    """Raised when a line of an event log cannot be parsed."""

    def __init__(self, line_number: int, reason: str) -> None:
        super().__init__(f"Invalid event on line {line_number}: {reason}")
        self.line_number = line_number


def read_events(lines: Iterable[str]) -> Iterator[Event]:
    """Parse JSON Lines into events, skipping blank lines.

    Raises:
        EventLogError: If a line is not valid JSON or not a known event

    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield _event_adapter.validate_json(line)
        except ValidationError as e:
            raise EventLogError(line_number, str(e)) from e


def replay(events: Iterable[Event], listener: TeamCityStepListener) -> int:
    """Deliver events to the listener in order and return how many were sent."""
    count = 0
    for event in events:
        dispatch_event(event, listener)
        count += 1
    log.debug("Replayed %d event(s)", count)
    return count


def dispatch_event(event: Event, listener: TeamCityStepListener) -> None:
    """Call the listener method matching one event."""
    match event:
        case SuiteStartedClassEvent():
            listener.class_suite_started(event.class_name)
        case SuiteStartedStoryEvent():
            listener.test_suite_started(event.story)
        case SuiteFinishedEvent():
            listener.test_suite_finished()
        case TestStartedEvent():
            listener.test_started(event.description)
        case TestFinishedEvent():
            listener.test_finished(event.result)
        case ExampleStartedEvent():
            listener.example_started(event.data)
        case ExampleFinishedEvent():
            listener.example_finished()
        case IgnoredEvent():
            pass
