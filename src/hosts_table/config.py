"""Formatting and parsing limits for hosts files.

The classic hosts-file readers (glibc, the BSD resolvers, Windows) put
hard limits on a single line, so a writer that wants its output to be
read back everywhere keeps each line short:

    - at most **9 aliases** per line;
    - at most **255 characters** per line, newline excluded.

Comments start at ``#`` — and, in some dialects, at ``;`` — and run to
the end of the line.  The defaults below reproduce that convention; a
``HostsConfig`` only needs to be built by callers targeting a stricter
or looser reader.
"""

from dataclasses import dataclass

DEFAULT_MAX_ALIASES_PER_LINE = 9
DEFAULT_MAX_LINE_LENGTH = 255
DEFAULT_COMMENT_CHARS = "#;"


@dataclass(frozen=True)
class HostsConfig:
    """Limits applied when reading and writing hosts files.

    Attributes:
        max_aliases_per_line: Aliases written on one line before wrapping.
        max_line_length: Characters allowed on one line (newline excluded).
        comment_chars: Characters that start a comment anywhere on a line.

    """

    max_aliases_per_line: int = DEFAULT_MAX_ALIASES_PER_LINE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    comment_chars: str = DEFAULT_COMMENT_CHARS

    def __post_init__(self) -> None:
        """Reject limits that could never produce a line."""
        if self.max_aliases_per_line < 1:
            msg = f"max_aliases_per_line must be positive, got {self.max_aliases_per_line}"
            raise ValueError(msg)
        if self.max_line_length < 1:
            msg = f"max_line_length must be positive, got {self.max_line_length}"
            raise ValueError(msg)
        if not self.comment_chars:
            msg = "comment_chars must name at least one character"
            raise ValueError(msg)
