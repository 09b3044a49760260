"""
Host name selection for TLS certificate validation.
"""
from typing import Optional, Union

import httpx

from .schemes import is_supported_secure_scheme
from .uri import host_of


def get_ssl_host_name(uri: Union[str, httpx.URL], host_header: Optional[str] = None) -> Optional[str]:
    """Return the host name to validate the server certificate against.

    Only https destinations need one; None is returned otherwise. A Host
    header overrides the URL's host after any port is trimmed off. In an
    IPv6 literal such as ``[::1]:443`` only a colon after the closing
    bracket starts the port.
    """
    uri = httpx.URL(uri)
    if not is_supported_secure_scheme(uri.scheme):
        return None

    if host_header is None:
        return host_of(uri)

    colon = host_header.find(":")
    if colon < 0:
        return host_header

    bracket = host_header.find("]")
    if bracket < 0:
        return host_header[:colon]

    colon = host_header.rfind(":")
    if colon > bracket:
        return host_header[:colon]
    return host_header


def get_request_ssl_host_name(request: httpx.Request) -> Optional[str]:
    """Return the validation host for a request, honoring its Host header."""
    return get_ssl_host_name(request.url, request.headers.get("host"))
