"""The hosts table — a bidirectional index between addresses and aliases.

A hosts file answers two questions:

    - "What names does 192.168.1.1 go by?"   (address → aliases)
    - "Where does ``router.lan`` live?"      (alias → addresses)

``HostsTable`` keeps one index for each question and guarantees they
are always exact inverses of each other: an alias appears under an
address if and only if that address appears under the alias.  Every
mutation goes through ``_link`` / ``_drop_address`` so the two indices
can never drift apart, and neither index is handed out for callers to
mutate.  Neither index ever holds an empty set.

Key behaviours:
    - **Permissive input** — ``add`` and ``read`` silently skip invalid
      addresses and aliases instead of raising.  Real hosts files are
      full of junk, and one bad line should not sink the rest.
    - **Address-granular deletes** — ``delete_by_alias`` removes *every*
      alias of each address that carried the alias, not just the one
      alias.  An alias on its own is not trusted to identify an entry;
      its address group is.
    - **Wrapped output** — ``write`` splits long alias lists across
      lines that repeat the address (see ``hosts_table.codec``).
"""

from __future__ import annotations

import io
from typing import IO, TYPE_CHECKING

from hosts_table.codec import ReadFailure, WriteFailure, format_entry, parse_line
from hosts_table.config import HostsConfig
from hosts_table.logging import Logger, LogLevel
from hosts_table.validation import IPAddress, is_valid_alias, parse_address

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class HostsTable:
    """In-memory mapping between IP addresses and hostname aliases.

    Not thread-safe: callers sharing a table across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        config: HostsConfig | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create an empty table.

        Args:
            config: Parsing and wrapping limits (hosts-file defaults if omitted).
            logger: Optional event log for skipped input and I/O summaries.

        """
        self._config = config if config is not None else HostsConfig()
        self._logger = logger
        # Dicts with None values serve as insertion-ordered sets.
        self._aliases_by_address: dict[IPAddress, dict[str, None]] = {}
        self._addresses_by_alias: dict[str, dict[IPAddress, None]] = {}

    @classmethod
    def from_text(
        cls,
        text: str,
        config: HostsConfig | None = None,
        logger: Logger | None = None,
    ) -> HostsTable:
        """Build a table from hosts-file text."""
        table = cls(config=config, logger=logger)
        table.read(io.StringIO(text))
        return table

    @property
    def config(self) -> HostsConfig:
        """Return the limits this table reads and writes with."""
        return self._config

    @property
    def logger(self) -> Logger | None:
        """Return the attached event log, if any."""
        return self._logger

    # -- Queries ------------------------------------------------------------

    def get_aliases(self, address: IPAddress | str) -> set[str]:
        """Return every alias bound to *address* (empty if unknown)."""
        ip = parse_address(address)
        if ip is None:
            return set()
        return set(self._aliases_by_address.get(ip, ()))

    def get_addresses(self, alias: str) -> set[IPAddress]:
        """Return every address bound to *alias* (empty if unknown)."""
        return set(self._addresses_by_alias.get(alias, ()))

    def size(self) -> int:
        """Return the number of addresses that carry at least one alias."""
        return len(self._aliases_by_address)

    def addresses(self) -> list[IPAddress]:
        """Return all addresses in the order they were first added."""
        return list(self._aliases_by_address)

    def aliases(self) -> list[str]:
        """Return all aliases in the order they were first added."""
        return list(self._addresses_by_alias)

    def items(self) -> Iterator[tuple[IPAddress, frozenset[str]]]:
        """Yield ``(address, aliases)`` pairs."""
        for ip, aliases in self._aliases_by_address.items():
            yield ip, frozenset(aliases)

    def __len__(self) -> int:
        """Return the number of addresses (same as ``size()``)."""
        return self.size()

    def __contains__(self, item: object) -> bool:
        """Return True if *item* is a known alias or address."""
        if isinstance(item, str) and item in self._addresses_by_alias:
            return True
        ip = parse_address(item)
        return ip is not None and ip in self._aliases_by_address

    # -- Mutation -----------------------------------------------------------

    def add(self, address: IPAddress | str | None, *aliases: str) -> None:
        """Bind each valid alias in *aliases* to *address*.

        Invalid input is skipped, never raised: an unparsable address
        makes the whole call a no-op, and aliases failing
        ``is_valid_alias`` are dropped one by one.  Re-adding an existing
        binding changes nothing.
        """
        self._add(address, aliases, line=0)

    def delete_by_address(self, address: IPAddress | str) -> None:
        """Remove *address* and unbind it from each of its aliases.

        Aliases also bound to other addresses keep those bindings;
        aliases left with no address disappear.
        """
        ip = parse_address(address)
        if ip is not None:
            self._drop_address(ip)

    def delete_by_alias(self, alias: str) -> None:
        """Remove every address bound to *alias*, with ALL their aliases.

        Given ``10.0.0.1 x y``, deleting ``x`` also removes ``y``: the
        delete works on whole address entries, never on a single alias.
        """
        for ip in list(self._addresses_by_alias.get(alias, ())):
            self._drop_address(ip)

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            The number of addresses removed.

        """
        count = len(self._aliases_by_address)
        self._aliases_by_address.clear()
        self._addresses_by_alias.clear()
        return count

    # -- Reading and writing ------------------------------------------------

    def read(self, stream: Iterable[str] | Iterable[bytes]) -> None:
        r"""Add every entry found in a hosts-file stream.

        *stream* is anything yielding lines — an open file, a
        ``BytesIO``/``StringIO``, or a plain list.  Binary mode is the
        safe choice: byte lines split on ``\n`` only and are decoded as
        UTF-8 with undecodable bytes replaced, so junk bytes only spoil
        their own alias.  Text-mode streams decode before the table sees
        a line, so a decode error there is a stream failure, and the
        default universal newlines turn a lone ``\r`` into a line break
        (open with ``newline="\n"`` to keep it a separator).  Entries
        from lines read before a failure stay in the table.

        Raises:
            ReadFailure: If the stream itself fails, including text-mode
                decode errors.  Malformed hosts content never raises.

        """
        line_number = 0
        try:
            for raw in stream:
                line_number += 1
                line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
                parsed = parse_line(line, self._config.comment_chars)
                if parsed is None:
                    continue
                address, aliases = parsed
                self._add(address, aliases, line=line_number)
        except (OSError, ValueError) as e:
            self._log(LogLevel.ERROR, f"read failed: {e}", line=line_number + 1)
            msg = f"Failed to read hosts data after line {line_number}: {e}"
            raise ReadFailure(msg) from e

        self._log(
            LogLevel.INFO,
            f"read {line_number} lines, table holds {self.size()} addresses",
        )

    def write(self, stream: IO[str] | IO[bytes]) -> None:
        """Write every entry to *stream* in hosts-file format.

        Output is UTF-8 bytes, except that ``io.TextIOBase`` streams
        (``open(path, "w")``, ``StringIO``, ``sys.stdout``) receive
        ``str``.  The stream is neither flushed nor closed.

        Raises:
            WriteFailure: If the stream fails or rejects the data type.

        """
        text = isinstance(stream, io.TextIOBase)
        written = 0
        try:
            for lines in self._render():
                chunk = "".join(f"{line}\n" for line in lines)
                stream.write(chunk if text else chunk.encode())  # type: ignore[arg-type]
                written += len(lines)
        except (OSError, ValueError, TypeError) as e:
            self._log(LogLevel.ERROR, f"write failed: {e}")
            msg = f"Failed to write hosts data after {written} lines: {e}"
            raise WriteFailure(msg) from e

        self._log(LogLevel.INFO, f"wrote {written} lines for {self.size()} addresses")

    def to_text(self) -> str:
        """Return the table rendered as hosts-file text."""
        return "".join(f"{line}\n" for lines in self._render() for line in lines)

    def __str__(self) -> str:
        """Render as hosts-file text."""
        return self.to_text()

    def __repr__(self) -> str:
        """Summarize the table size."""
        return f"HostsTable(addresses={self.size()}, aliases={len(self._addresses_by_alias)})"

    # -- Internal helpers ---------------------------------------------------

    def _add(self, address: object, aliases: Iterable[str], *, line: int) -> None:
        ip = parse_address(address)
        if ip is None:
            self._log(LogLevel.DEBUG, f"rejected address {address!r}", line=line)
            return
        for alias in aliases:
            if not is_valid_alias(alias):
                self._log(LogLevel.DEBUG, f"rejected alias {alias!r} for {ip}", line=line)
                continue
            self._link(ip, alias)

    def _link(self, ip: IPAddress, alias: str) -> None:
        """Bind one pair in both indices."""
        self._aliases_by_address.setdefault(ip, {})[alias] = None
        self._addresses_by_alias.setdefault(alias, {})[ip] = None

    def _drop_address(self, ip: IPAddress) -> None:
        """Remove *ip* from both indices, pruning emptied aliases."""
        aliases = self._aliases_by_address.pop(ip, None)
        if aliases is None:
            return
        for alias in aliases:
            addresses = self._addresses_by_alias[alias]
            del addresses[ip]
            if not addresses:
                del self._addresses_by_alias[alias]

    def _render(self) -> Iterator[list[str]]:
        """Yield the wrapped lines of each address in turn."""
        for ip, aliases in self._aliases_by_address.items():
            yield format_entry(
                str(ip),
                aliases,
                max_aliases=self._config.max_aliases_per_line,
                max_length=self._config.max_line_length,
            )

    def _log(self, level: LogLevel, message: str, *, line: int = 0) -> None:
        if self._logger is not None:
            self._logger.log(level, message, line=line)
