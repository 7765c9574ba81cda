"""Abstract base class for service message sinks."""

from abc import ABC, abstractmethod


class MessageSink(ABC):
    """Destination for finished service message lines.

    Sinks receive one complete line per call and must preserve call order.
    Write failures are the sink's concern and propagate to the caller.
    """

    @abstractmethod
    def write(self, line: str) -> None:
        """Append one service message line (without trailing newline)."""
