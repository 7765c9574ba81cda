"""Models for recorded test execution events read from JSON Lines logs."""

from collections.abc import Mapping
from typing import Annotated, Literal

from pydantic import ConfigDict, Field

from teamcity_listener.models.base import Model
from teamcity_listener.models.result import Story, TestResult


class SuiteStartedClassEvent(Model):
    """A suite backed by a test class was entered."""

    event: Literal["suite_started_class"] = "suite_started_class"
    class_name: str = Field(..., description="Fully qualified class name")


class SuiteStartedStoryEvent(Model):
    """A suite backed by a story was entered."""

    event: Literal["suite_started_story"] = "suite_started_story"
    story: Story


class SuiteFinishedEvent(Model):
    """The innermost open suite was exited."""

    event: Literal["suite_finished"] = "suite_finished"


class TestStartedEvent(Model):
    """A test started running."""

    __test__ = False

    event: Literal["test_started"] = "test_started"
    description: str = ""


class TestFinishedEvent(Model):
    """A test finished, carrying its full result."""

    __test__ = False

    event: Literal["test_finished"] = "test_finished"
    result: TestResult


class ExampleStartedEvent(Model):
    """One row of a data-driven test started."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    event: Literal["example_started"] = "example_started"
    data: Mapping[str, str] = Field(
        default_factory=dict, description="Example row, in column order"
    )


class ExampleFinishedEvent(Model):
    """One row of a data-driven test finished."""

    event: Literal["example_finished"] = "example_finished"


IgnoredEventName = Literal[
    "step_started",
    "step_finished",
    "step_failed",
    "step_ignored",
    "step_pending",
    "test_ignored",
    "test_skipped",
    "test_pending",
    "test_failed",
    "test_retried",
    "screen_changed",
    "assumption_violated",
]


class IgnoredEvent(Model):
    """Signal that is recorded in the log but produces no service message."""

    event: IgnoredEventName
    message: str | None = None


Event = Annotated[
    SuiteStartedClassEvent
    | SuiteStartedStoryEvent
    | SuiteFinishedEvent
    | TestStartedEvent
    | TestFinishedEvent
    | ExampleStartedEvent
    | ExampleFinishedEvent
    | IgnoredEvent,
    Field(discriminator="event"),
]
