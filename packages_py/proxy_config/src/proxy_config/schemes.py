"""
Scheme helpers shared by the resolver and transports.
"""
from typing import Union

import httpx

HTTP_SCHEME = "http"
HTTPS_SCHEME = "https"


def is_supported_non_secure_scheme(scheme: str) -> bool:
    return scheme.lower() == HTTP_SCHEME


def is_supported_secure_scheme(scheme: str) -> bool:
    return scheme.lower() == HTTPS_SCHEME


def is_supported_scheme(scheme: str) -> bool:
    """Check whether the scheme is http or https, ignoring case."""
    return is_supported_non_secure_scheme(scheme) or is_supported_secure_scheme(scheme)


def is_http_uri(uri: Union[str, httpx.URL]) -> bool:
    """Check whether the URI uses a supported http(s) scheme."""
    return is_supported_scheme(httpx.URL(uri).scheme)
