"""Positional correlation of example metadata with example results."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from teamcity_listener.models.result import render_example


@dataclass(kw_only=True)
class ExampleCorrelator:
    """Remembers example rows in arrival order until the test finishes.

    Example-started events carry the row data but the finished test only
    carries the example groups, so the two are matched by position.
    """

    _names: dict[int, str] = field(default_factory=dict)
    _count: int = 0

    def record_example(self, data: Mapping[str, str]) -> None:
        self._names[self._count] = render_example(data)
        self._count += 1

    def resolve_name(self, index: int) -> str | None:
        return self._names.get(index)

    def reset(self) -> None:
        self._names.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count
