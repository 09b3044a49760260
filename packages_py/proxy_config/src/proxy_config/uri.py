"""
Normalization of raw proxy environment values into endpoint URLs.
"""
import logging
from typing import Optional

import httpx

from .schemes import is_supported_scheme

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def host_of(uri: httpx.URL) -> str:
    """Return the URL host, falling back to the raw ASCII form when it is not valid IDNA."""
    try:
        return uri.host
    except UnicodeError:
        return uri.raw_host.decode("ascii")


def _has_valid_host(host: str) -> bool:
    # httpx percent-encodes characters a host may not contain; only an
    # IPv6 zone id may carry a '%'.
    return bool(host) and ("%" not in host or ":" in host)


def normalize_proxy_uri(value: Optional[str]) -> Optional[httpx.URL]:
    """Convert an environment value into an http(s) proxy URL.

    The value may be a full URL, a ``host:port`` pair, or a bare host or IP
    address; values without a scheme are treated as ``http://``. Anything
    that fails to parse, has no valid host or port, or uses a scheme other
    than http or https is treated as not configured and yields None.
    """
    if not value:
        return None

    if "://" not in value:
        value = "http://" + value

    try:
        uri = httpx.URL(value)
        host = uri.host
    except (httpx.InvalidURL, UnicodeError) as e:
        # The raw value may carry credentials, so only the reason is logged.
        logger.debug(f"Discarding unparseable proxy value: {e}")
        return None

    if not _has_valid_host(host):
        logger.debug("Discarding proxy value without a valid host")
        return None

    if uri.port is not None and not 0 <= uri.port <= MAX_PORT:
        logger.debug(f"Discarding proxy value with out-of-range port {uri.port}")
        return None

    if not is_supported_scheme(uri.scheme):
        logger.debug(f"Discarding proxy value with unsupported scheme '{uri.scheme}'")
        return None

    return uri


def redact_proxy_uri(uri: httpx.URL) -> str:
    """Render a proxy URL for logs, without user-info."""
    return str(uri.copy_with(username=None, password=None))
