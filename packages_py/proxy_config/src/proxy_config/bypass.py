"""
no_proxy list parsing and host matching.
"""
from typing import Iterable, Optional, Tuple


def parse_bypass_list(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated no_proxy value into trimmed, non-empty patterns."""
    if not value or not value.strip():
        return ()
    return tuple(entry.strip() for entry in value.split(",") if entry.strip())


def is_match_in_bypass_list(host: str, patterns: Iterable[str]) -> bool:
    """Check a host against no_proxy patterns, ignoring case.

    A pattern with a leading dot matches the domain itself and any of its
    subdomains: ``.foo.com`` matches ``foo.com`` and ``a.foo.com`` but not
    ``xfoo.com``, because the suffix comparison keeps the dot. A pattern
    without a leading dot only matches the exact host.
    """
    host = host.casefold()
    for pattern in patterns:
        pattern = pattern.casefold()
        if pattern.startswith("."):
            if pattern[1:] == host or host.endswith(pattern):
                return True
        elif pattern == host:
            return True
    return False
