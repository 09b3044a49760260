"""
Per-request proxy resolution on top of an environment ProxyConfiguration.
"""
import logging
from typing import Optional, Union

import httpx

from .builder import PROXY_URL_ENV_VARS, EnvLookup, build_proxy_configuration
from .bypass import is_match_in_bypass_list
from .credentials import select_credential
from .errors import ProxyNotConfiguredError
from .schemes import HTTP_SCHEME
from .types import ProxyConfiguration, ProxyCredential, ProxyCredentials
from .uri import host_of

logger = logging.getLogger(__name__)

URLTypes = Union[str, httpx.URL]


def _bypass_host(uri: httpx.URL) -> str:
    # no_proxy entries name IPv6 literals in their bracketed form.
    host = host_of(uri)
    if ":" in host:
        return f"[{host}]"
    return host


class EnvironmentProxyResolver:
    """Answer proxy questions for outgoing requests.

    Holds an immutable ProxyConfiguration and no other state, so a single
    instance can be shared by any number of threads.
    """

    __slots__ = ("_configuration",)

    def __init__(self, configuration: ProxyConfiguration):
        self._configuration = configuration

    @classmethod
    def try_create(cls, lookup: Optional[EnvLookup] = None) -> Optional["EnvironmentProxyResolver"]:
        """Create a resolver, or return None when no proxy is configured."""
        configuration = build_proxy_configuration(lookup)
        if configuration is None:
            return None
        return cls(configuration)

    @classmethod
    def from_environment(cls, lookup: Optional[EnvLookup] = None) -> "EnvironmentProxyResolver":
        """Create a resolver, raising ProxyNotConfiguredError when no proxy is configured."""
        resolver = cls.try_create(lookup)
        if resolver is None:
            raise ProxyNotConfiguredError(list(PROXY_URL_ENV_VARS))
        return resolver

    @property
    def configuration(self) -> ProxyConfiguration:
        return self._configuration

    @property
    def credentials(self) -> Optional[ProxyCredentials]:
        """Credentials for the proxies: None, shared, or per scheme."""
        return self._configuration.credentials

    def get_proxy_for_scheme(self, scheme: str) -> Optional[httpx.URL]:
        if scheme == HTTP_SCHEME:
            return self._configuration.http_proxy
        return self._configuration.https_proxy

    def get_credential_for_scheme(self, scheme: str) -> Optional[ProxyCredential]:
        return select_credential(self._configuration.credentials, scheme)

    def get_proxy(self, uri: URLTypes) -> Optional[httpx.URL]:
        """Return the proxy URL for a destination; http uses http_proxy, anything else https_proxy."""
        return self.get_proxy_for_scheme(httpx.URL(uri).scheme)

    def get_credential(self, uri: URLTypes) -> Optional[ProxyCredential]:
        """Return the proxy credential to present for a destination."""
        return self.get_credential_for_scheme(httpx.URL(uri).scheme)

    def is_bypassed(self, uri: URLTypes) -> bool:
        """Check whether a destination should be reached directly.

        True when no proxy is configured for the destination's scheme, or
        when its host matches the no_proxy list.
        """
        uri = httpx.URL(uri)
        if self.get_proxy_for_scheme(uri.scheme) is None:
            logger.debug(f"No proxy configured for scheme '{uri.scheme}', going direct")
            return True

        bypassed = is_match_in_bypass_list(_bypass_host(uri), self._configuration.bypass_patterns)
        if bypassed:
            logger.debug(f"Host '{host_of(uri)}' matched no_proxy, going direct")
        return bypassed
