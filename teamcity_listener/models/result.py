"""Models for finished test outcomes."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from pydantic import Field

from teamcity_listener.models.base import Model
from teamcity_listener.models.step import StepOutcome, StepStatus


class FailureCause(Model):
    """Summary of why a test failed."""

    message: str | None = Field(default=None, description="Failure message")
    exception_type: str | None = Field(
        default=None, description="Qualified name of the raised exception"
    )


class Story(Model):
    """Story file backing a suite of scenarios."""

    id: str = Field(..., description="Story identifier")
    name: str = Field(..., description="Display name of the story")
    path: str = Field(default="", description="Story file path")


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of one finished test or scenario.

    Handed to the listener exactly once, when the test finishes.
    """

    __test__ = False

    path: str
    method_name: str
    status: StepStatus
    duration: int = 0
    failure_cause: FailureCause | None = None
    steps: Sequence[StepOutcome] = field(default_factory=tuple)
    data_driven: bool = False
    scenario: bool = False

    @property
    def is_failure(self) -> bool:
        return self.status == "failed"

    @property
    def is_error(self) -> bool:
        return self.status == "errored"

    @property
    def is_skipped(self) -> bool:
        return self.status in {"skipped", "ignored"}

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def failure_message(self) -> str:
        """Failure cause message, or an empty string when there is none."""
        if self.failure_cause is not None and self.failure_cause.message is not None:
            return self.failure_cause.message
        return ""


def render_example(data: Mapping[str, str]) -> str:
    """Render one example row as ``{key=value, key=value}`` in key order."""
    return "{" + ", ".join(f"{key}={value}" for key, value in data.items()) + "}"
