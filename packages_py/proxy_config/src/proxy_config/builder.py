"""
Build a ProxyConfiguration from proxy environment variables.
"""
import os
import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence

import httpx

from .bypass import parse_bypass_list
from .credentials import resolve_credentials
from .types import ProxyConfiguration
from .uri import normalize_proxy_uri, redact_proxy_uri

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]

# Lower-case names win over upper-case ones. Like curl, HTTP_PROXY is not
# honored; only http_proxy and the all_proxy fallbacks apply to http.
ENV_HTTP_PROXY = "http_proxy"
ENV_HTTPS_PROXY = "https_proxy"
ENV_HTTPS_PROXY_UPPER = "HTTPS_PROXY"
ENV_ALL_PROXY = "all_proxy"
ENV_ALL_PROXY_UPPER = "ALL_PROXY"
ENV_NO_PROXY = "no_proxy"

PROXY_URL_ENV_VARS = (
    ENV_HTTP_PROXY,
    ENV_HTTPS_PROXY,
    ENV_HTTPS_PROXY_UPPER,
    ENV_ALL_PROXY,
    ENV_ALL_PROXY_UPPER,
)
PROXY_ENV_VARS = PROXY_URL_ENV_VARS + (ENV_NO_PROXY,)


def snapshot_environment(
    environ: Optional[Mapping[str, str]] = None,
    names: Sequence[str] = PROXY_ENV_VARS,
) -> EnvLookup:
    """Copy the named variables once and return a lookup over the copy.

    Later changes to ``environ`` are not visible through the lookup.
    """
    source = os.environ if environ is None else environ
    snapshot = MappingProxyType({name: source[name] for name in names if name in source})
    return snapshot.get


def _first_proxy_uri(lookup: EnvLookup, names: Sequence[str]) -> Optional[httpx.URL]:
    for name in names:
        uri = normalize_proxy_uri(lookup(name))
        if uri is not None:
            logger.debug(f"Using {name} env var: {redact_proxy_uri(uri)}")
            return uri
    return None


def build_proxy_configuration(lookup: Optional[EnvLookup] = None) -> Optional[ProxyConfiguration]:
    """Resolve proxy settings from environment variables.

    Precedence:
    1. http_proxy for http destinations
    2. https_proxy, then HTTPS_PROXY for https destinations
    3. all_proxy, then ALL_PROXY for whichever of the above is still unset
    4. no_proxy supplies the bypass list

    Returns None when neither an http nor an https proxy is configured, so
    the caller can fall back to another proxy source.
    """
    if lookup is None:
        lookup = snapshot_environment()

    http_proxy = _first_proxy_uri(lookup, [ENV_HTTP_PROXY])
    https_proxy = _first_proxy_uri(lookup, [ENV_HTTPS_PROXY, ENV_HTTPS_PROXY_UPPER])

    if http_proxy is None or https_proxy is None:
        all_proxy = _first_proxy_uri(lookup, [ENV_ALL_PROXY, ENV_ALL_PROXY_UPPER])
        if http_proxy is None:
            http_proxy = all_proxy
        if https_proxy is None:
            https_proxy = all_proxy

    if http_proxy is None and https_proxy is None:
        logger.debug("No proxy configured in environment")
        return None

    bypass_patterns = parse_bypass_list(lookup(ENV_NO_PROXY))
    if bypass_patterns:
        logger.debug(f"Bypass list from {ENV_NO_PROXY}: {list(bypass_patterns)}")

    return ProxyConfiguration(
        http_proxy=http_proxy,
        https_proxy=https_proxy,
        bypass_patterns=bypass_patterns,
        credentials=resolve_credentials(http_proxy, https_proxy),
    )
