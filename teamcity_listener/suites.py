"""Tracking of open test suites."""

import logging
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class SuiteScopeTracker:
    """Stack of open suite names.

    Class-backed suites are only pushed when they differ from the last
    class-backed suite entered, since the same test class is re-announced
    before each of its tests. Story suites are always pushed.
    """

    _stack: list[str] = field(default_factory=list)
    _last_class_suite: str = ""

    def enter_class(self, name: str) -> bool:
        """Push a class-backed suite; return False when suppressed."""
        if name == self._last_class_suite:
            log.debug("Suite %s already open, not entering again", name)
            return False
        self._stack.append(name)
        self._last_class_suite = name
        return True

    def enter_story(self, name: str) -> None:
        self._stack.append(name)

    def exit(self) -> str | None:
        """Pop the innermost open suite, or return None if none is open."""
        if not self._stack:
            log.warning("Suite finished without an open suite, ignoring")
            return None
        return self._stack.pop()

    @property
    def depth(self) -> int:
        return len(self._stack)
