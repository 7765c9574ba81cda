"""Step listener translating test execution events into service messages."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeGuard

from teamcity_listener.config import ListenerConfig
from teamcity_listener.examples import ExampleCorrelator
from teamcity_listener.messages import (
    TEST_FAILED,
    TEST_FINISHED,
    TEST_IGNORED,
    TEST_STARTED,
    TEST_SUITE_FINISHED,
    TEST_SUITE_STARTED,
    MessageEncoder,
)
from teamcity_listener.models.result import Story, TestResult
from teamcity_listener.models.step import GroupStep, StepOutcome
from teamcity_listener.naming import derive_test_id
from teamcity_listener.sinks.base import MessageSink
from teamcity_listener.steps import flatten_steps
from teamcity_listener.suites import SuiteScopeTracker

log = logging.getLogger(__name__)

EXAMPLE_PREFIX = "["


def class_suite_name(suite_class: type) -> str:
    """Fully qualified name used for class-backed suites."""
    return f"{suite_class.__module__}.{suite_class.__qualname__}"


def is_example(step: StepOutcome) -> TypeGuard[GroupStep]:
    """Whether a top-level step of a data-driven test is one example row."""
    return isinstance(step, GroupStep) and step.description.startswith(EXAMPLE_PREFIX)


@dataclass(kw_only=True)
class TeamCityStepListener:
    """Receives test execution events and writes TeamCity service messages.

    Events must be delivered from a single thread, in execution order. All
    example-started events of a data-driven test arrive before its
    test-finished event, in the same order as its example groups.
    """

    sink: MessageSink
    flow_id: str | None = None
    _encoder: MessageEncoder = field(init=False, repr=False)
    _suites: SuiteScopeTracker = field(default_factory=SuiteScopeTracker, repr=False)
    _examples: ExampleCorrelator = field(default_factory=ExampleCorrelator, repr=False)

    def __post_init__(self) -> None:
        self._encoder = MessageEncoder(sink=self.sink, flow_id=self.flow_id)

    @classmethod
    def from_config(
        cls, sink: MessageSink, config: ListenerConfig
    ) -> "TeamCityStepListener":
        return cls(sink=sink, flow_id=config.flow_id)

    def test_suite_started(self, suite: type | Story) -> None:
        """Open a suite backed by a test class or by a story."""
        if isinstance(suite, Story):
            self._suites.enter_story(suite.name)
            self._encoder.emit_named(TEST_SUITE_STARTED, suite.name)
            return
        self.class_suite_started(class_suite_name(suite))

    def class_suite_started(self, name: str) -> None:
        """Open a class-backed suite known only by its qualified name."""
        if self._suites.enter_class(name):
            self._encoder.emit_named(TEST_SUITE_STARTED, name)

    def test_suite_finished(self) -> None:
        if (name := self._suites.exit()) is not None:
            self._encoder.emit_named(TEST_SUITE_FINISHED, name)

    def test_started(self, description: str) -> None:
        pass

    def test_finished(self, result: TestResult) -> None:
        if result.data_driven:
            self._report_examples(result)
        else:
            self._report_test(result)

    def _report_test(self, result: TestResult) -> None:
        name = derive_test_id(result.path, result.method_name)
        self._encoder.emit_named(TEST_STARTED, name)
        if result.is_failure or result.is_error:
            self._encoder.emit(
                TEST_FAILED,
                {
                    "name": name,
                    "message": result.failure_message,
                    "details": flatten_steps(result.steps).report,
                },
            )
        elif result.is_skipped or result.is_pending:
            self._encoder.emit_named(TEST_IGNORED, name)
        self._encoder.emit_named(TEST_FINISHED, name, result.duration)

    def _report_examples(self, result: TestResult) -> None:
        number = 0
        try:
            for step in result.steps:
                if not is_example(step):
                    continue
                self._report_example(result, step, number)
                number += 1
            if number != len(self._examples):
                log.warning(
                    "Data-driven test %s had %d example(s) but %d example row(s)",
                    result.method_name,
                    number,
                    len(self._examples),
                )
        finally:
            self._examples.reset()

    def _report_example(self, result: TestResult, step: GroupStep, index: int) -> None:
        label = self._examples.resolve_name(index)
        if label is None:
            log.warning(
                "No example row recorded for example %d of %s, using %r",
                index,
                result.method_name,
                step.description,
            )
            label = step.description
        name = derive_test_id(result.path, result.method_name, label)
        duration = sum(child.duration for child in step.children)

        self._encoder.emit_named(TEST_STARTED, name)
        report = flatten_steps(step.children)
        if report.has_failure:
            self._encoder.emit(TEST_FAILED, {"name": name, "details": report.report})
        elif report.has_pending:
            self._encoder.emit_named(TEST_IGNORED, name)
        self._encoder.emit_named(TEST_FINISHED, name, duration)

    def test_retried(self) -> None:
        pass

    def test_failed(self, result: TestResult, cause: BaseException) -> None:
        pass

    def test_ignored(self) -> None:
        pass

    def test_skipped(self) -> None:
        pass

    def test_pending(self) -> None:
        pass

    def step_started(self, description: str) -> None:
        pass

    def skipped_step_started(self, description: str) -> None:
        pass

    def step_failed(self, failure: object) -> None:
        pass

    def last_step_failed(self, failure: object) -> None:
        pass

    def step_ignored(self) -> None:
        pass

    def step_pending(self, message: str | None = None) -> None:
        pass

    def step_finished(self) -> None:
        pass

    def notify_screen_change(self) -> None:
        pass

    def use_examples_from(self, table: object) -> None:
        pass

    def example_started(self, data: Mapping[str, str]) -> None:
        self._examples.record_example(data)

    def example_finished(self) -> None:
        pass

    def assumption_violated(self, message: str) -> None:
        pass
