"""Models for recorded test steps."""

import traceback
from collections.abc import Mapping, Sequence
from typing import Annotated, Literal

from pydantic import Field

from teamcity_listener.models.base import Model

StepStatus = Literal["passed", "failed", "errored", "skipped", "ignored", "pending"]

STATUS_LABELS: Mapping[StepStatus, str] = {
    "passed": "SUCCESS",
    "failed": "FAILURE",
    "errored": "ERROR",
    "skipped": "SKIPPED",
    "ignored": "IGNORED",
    "pending": "PENDING",
}


class FailureDetail(Model):
    """Failure captured while a step was running."""

    message: str | None = Field(default=None, description="Exception message")
    stack_trace: str | None = Field(
        default=None, description="Formatted traceback of the failure"
    )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureDetail":
        """Capture the message and formatted traceback of an exception."""
        return cls(
            message=str(exc) or None,
            stack_trace="".join(traceback.format_exception(exc)).strip(),
        )


class _Step(Model):
    """Fields and status predicates shared by leaf and group steps."""

    description: str = Field(..., description="Human-readable step title")
    status: StepStatus = Field(..., description="Step outcome")
    duration: int = Field(default=0, ge=0, description="Duration in milliseconds")

    @property
    def is_failure(self) -> bool:
        return self.status == "failed"

    @property
    def is_error(self) -> bool:
        return self.status == "errored"

    @property
    def is_skipped(self) -> bool:
        return self.status == "skipped"

    @property
    def is_ignored(self) -> bool:
        return self.status == "ignored"

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self.status]

    @property
    def duration_in_seconds(self) -> float:
        return self.duration / 1000.0


class LeafStep(_Step):
    """Single step with no children."""

    kind: Literal["leaf"] = "leaf"
    failure: FailureDetail | None = Field(
        default=None, description="Captured failure, if the step failed"
    )

    @property
    def is_group(self) -> bool:
        return False


class GroupStep(_Step):
    """Step grouping nested child steps."""

    kind: Literal["group"] = "group"
    children: Sequence["StepOutcome"] = Field(
        default_factory=list, description="Nested steps in execution order"
    )

    @property
    def is_group(self) -> bool:
        return True


StepOutcome = Annotated[LeafStep | GroupStep, Field(discriminator="kind")]

GroupStep.model_rebuild()
