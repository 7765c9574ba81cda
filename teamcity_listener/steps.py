"""Flattening of nested step trees into a single failure report."""

from collections.abc import Sequence
from dataclasses import dataclass

from teamcity_listener.models.step import StepOutcome

REPORT_HEADER = "Steps:\r\n"
CHILDREN_PREFIX = "Children "
LINE_BREAK = "\r\n"


@dataclass(frozen=True, kw_only=True)
class StepReport:
    """Flattened view of a list of steps."""

    report: str
    has_failure: bool
    has_pending: bool


def flatten_steps(steps: Sequence[StepOutcome]) -> StepReport:
    """Flatten steps depth-first into one human-readable report.

    Failed group steps embed the report of their children; failed leaf steps
    embed their captured stack trace.
    """
    return StepReport(
        report=render_steps(steps),
        has_failure=has_failure_step(steps),
        has_pending=has_pending_step(steps),
    )


def render_steps(steps: Sequence[StepOutcome]) -> str:
    lines = [REPORT_HEADER]
    for step in steps:
        lines.append(
            f"{step.description} ({step.duration_in_seconds}) -> "
            f"{_render_result(step)}{LINE_BREAK}"
        )
    return "".join(lines)


def has_failure_step(steps: Sequence[StepOutcome]) -> bool:
    return any(step.is_failure or step.is_error for step in steps)


def has_pending_step(steps: Sequence[StepOutcome]) -> bool:
    return any(step.is_skipped or step.is_ignored or step.is_pending for step in steps)


def _render_result(step: StepOutcome) -> str:
    # A step can be labelled failed without reporting either signal; it then
    # gets no detail line at all.
    if not (step.is_failure or step.is_error):
        return step.label
    if step.is_group:
        detail = CHILDREN_PREFIX + render_steps(step.children)
    elif step.failure is not None and step.failure.stack_trace is not None:
        detail = step.failure.stack_trace
    else:
        detail = ""
    return f"{step.label}{LINE_BREAK}{detail}"
