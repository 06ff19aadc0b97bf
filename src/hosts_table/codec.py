r"""Hosts-file line codec — pure functions between text and entries.

A hosts file is a list of lines, each binding one address to one or
more aliases::

    127.0.0.1   localhost
    192.168.1.1 router router.lan   # the box under the desk

Reading a line:
    1. Cut it at the first comment character (``#`` or ``;``), wherever
       it appears — even in the middle of a token.
    2. Split the rest on runs of ASCII whitespace (spaces and tabs alike,
       plus CR and form feed).  Other characters, NBSP included, are
       part of a token.
    3. Fewer than two tokens means there is nothing to bind, so the line
       is skipped.  Otherwise token 0 is the address, the rest aliases.

Writing an entry is the reverse, with one twist: long alias lists are
**wrapped** onto continuation lines that repeat the address, so no line
exceeds the alias-count or character limits of ``HostsConfig``.

The table owns the streams; this module never touches I/O, it only
defines the errors the table raises when a stream fails.
"""

import re
from collections.abc import Iterable

from hosts_table.config import (
    DEFAULT_COMMENT_CHARS,
    DEFAULT_MAX_ALIASES_PER_LINE,
    DEFAULT_MAX_LINE_LENGTH,
)

_MIN_TOKENS = 2

# ASCII space, tab, CR, LF and form feed only; NBSP and other Unicode
# spaces stay inside the token.
_TOKEN = re.compile(r"[^ \t\r\n\f]+")


class HostsError(Exception):
    """Base class for hosts-table errors."""


class ReadFailure(HostsError):
    """Raise when the input stream fails while reading a hosts file."""


class WriteFailure(HostsError):
    """Raise when the output stream fails while writing a hosts file."""


def strip_comment(line: str, comment_chars: str = DEFAULT_COMMENT_CHARS) -> str:
    """Return *line* cut at its first comment character."""
    for index, char in enumerate(line):
        if char in comment_chars:
            return line[:index]
    return line


def parse_line(
    line: str,
    comment_chars: str = DEFAULT_COMMENT_CHARS,
) -> tuple[str, list[str]] | None:
    """Split one hosts-file line into its address and alias tokens.

    No validation happens here — the tokens are *candidates*, checked
    later by the table.

    Returns:
        ``(address, aliases)``, or ``None`` for blank, comment-only
        and address-only lines.

    """
    tokens = _TOKEN.findall(strip_comment(line, comment_chars))
    if len(tokens) < _MIN_TOKENS:
        return None
    return tokens[0], tokens[1:]


def format_entry(
    address: str,
    aliases: Iterable[str],
    *,
    max_aliases: int = DEFAULT_MAX_ALIASES_PER_LINE,
    max_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> list[str]:
    """Render one address and its aliases as wrapped hosts-file lines.

    A new line (repeating *address*) starts when the current one already
    holds *max_aliases* aliases, or when the next alias plus its
    separating space would push it past *max_length* characters.  An
    alias too long to fit even on a fresh line still gets a line of its
    own; a line is never just the bare address.

    Returns:
        The physical lines, without trailing newlines.  Empty when
        there are no aliases.

    """
    lines: list[str] = []
    parts = [address]
    length = len(address)
    count = 0

    for alias in aliases:
        if count and (count >= max_aliases or length + 1 + len(alias) > max_length):
            lines.append(" ".join(parts))
            parts = [address]
            length = len(address)
            count = 0
        parts.append(alias)
        length += 1 + len(alias)
        count += 1

    if count:
        lines.append(" ".join(parts))
    return lines
