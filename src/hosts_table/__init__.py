"""hosts-table — an in-memory hosts file.

Re-exports public symbols so callers can write::

    from hosts_table import HostsTable

    table = HostsTable()
    with open("/etc/hosts", "rb") as f:
        table.read(f)
    table.get_addresses("localhost")
"""

from hosts_table.codec import (
    HostsError,
    ReadFailure,
    WriteFailure,
    format_entry,
    parse_line,
    strip_comment,
)
from hosts_table.config import HostsConfig
from hosts_table.logging import LogEntry, Logger, LogLevel
from hosts_table.table import HostsTable
from hosts_table.validation import ALIAS_PATTERN, IPAddress, is_valid_alias, parse_address

__all__ = [
    "ALIAS_PATTERN",
    "HostsConfig",
    "HostsError",
    "HostsTable",
    "IPAddress",
    "LogEntry",
    "LogLevel",
    "Logger",
    "ReadFailure",
    "WriteFailure",
    "format_entry",
    "is_valid_alias",
    "parse_address",
    "parse_line",
    "strip_comment",
]
