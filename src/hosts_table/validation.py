"""Address parsing and alias validation.

Both checks are *predicates*, never raising: the hosts table treats
anything that fails them as junk to be skipped.

An alias must:
    - start with an ASCII letter;
    - end with an ASCII letter or digit;
    - contain only letters, digits, hyphens and periods in between.

So ``good321`` and ``the-same`` pass, while ``1bad.org``, ``.looked.ok``,
``this.is.bad.too.`` and every single-character name are rejected.
"""

import re
from ipaddress import IPv4Address, IPv6Address, ip_address

IPAddress = IPv4Address | IPv6Address

ALIAS_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9.-]*[a-zA-Z0-9]")


def parse_address(value: object) -> IPAddress | None:
    """Return *value* as an IP address, or ``None`` if it is not one.

    Address objects pass through unchanged.  Strings are parsed with
    :func:`ipaddress.ip_address`, which rejects IPv4 octets with leading
    zeros (``010.0.10.1``) rather than guessing at octal.
    """
    if isinstance(value, IPv4Address | IPv6Address):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ip_address(value)
    except ValueError:
        return None


def is_valid_alias(alias: object) -> bool:
    """Return True if *alias* is an acceptable hostname alias."""
    return isinstance(alias, str) and ALIAS_PATTERN.fullmatch(alias) is not None
