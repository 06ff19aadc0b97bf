"""Event log for a hosts table.

A table reads permissively: bad addresses, bad aliases and junk lines
are dropped without an exception.  Handing the table a ``Logger`` keeps
a record of each drop, tied to the input line it came from, so a caller
can answer "why is ``router.lan`` missing?" after the fact.

What a table records:

    ======  ================================================
    DEBUG   an address or alias that was rejected (with line)
    INFO    a summary after each ``read`` and ``write``
    ERROR   the stream failure behind a ReadFailure/WriteFailure
    ======  ================================================

Entries for ``add`` calls carry line 0, since they have no input line.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """How serious an event is; higher values are more serious."""

    DEBUG = 0
    INFO = 1
    ERROR = 2


@dataclass(frozen=True)
class LogEntry:
    """One recorded event.

    Attributes:
        level: How serious the event is.
        message: What happened, e.g. ``rejected alias '1bad.org' for 10.0.0.1``.
        line: The 1-based input line, or 0 when not tied to one.

    """

    level: LogLevel
    message: str
    line: int = 0

    def __str__(self) -> str:
        """Format as ``line N: LEVEL message`` (``-`` without a line)."""
        where = f"line {self.line}" if self.line else "-"
        return f"{where}: {self.level.name} {self.message}"


class Logger:
    """Collects table events in the order they happen."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, line: int = 0) -> None:
        """Record one event, optionally tied to an input line."""
        self._entries.append(LogEntry(level=level, message=message, line=line))

    def rejections(self) -> list[LogEntry]:
        """Return the entries for input the table dropped."""
        return [e for e in self._entries if e.level is LogLevel.DEBUG]

    def failures(self) -> list[LogEntry]:
        """Return the entries for stream failures."""
        return [e for e in self._entries if e.level is LogLevel.ERROR]

    def for_line(self, line: int) -> list[LogEntry]:
        """Return every entry about input line *line*."""
        return [e for e in self._entries if e.line == line]

    def rejected_lines(self) -> list[int]:
        """Return the input lines that had something rejected, ascending."""
        return sorted({e.line for e in self.rejections() if e.line})

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
