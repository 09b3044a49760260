"""
Environment proxy configuration and resolution package.
"""
from .types import (
    ProxyConfiguration,
    ProxyCredential,
    ProxyCredentials,
    SharedCredential,
    PerSchemeCredential,
)
from .errors import ProxyConfigError, ProxyNotConfiguredError
from .schemes import (
    HTTP_SCHEME,
    HTTPS_SCHEME,
    is_http_uri,
    is_supported_scheme,
    is_supported_secure_scheme,
    is_supported_non_secure_scheme,
)
from .uri import host_of, normalize_proxy_uri, redact_proxy_uri
from .credentials import parse_credential, resolve_credentials, select_credential
from .bypass import parse_bypass_list, is_match_in_bypass_list
from .builder import EnvLookup, PROXY_ENV_VARS, build_proxy_configuration, snapshot_environment
from .resolver import EnvironmentProxyResolver
from .ssl_host import get_ssl_host_name, get_request_ssl_host_name

__all__ = [
    "ProxyConfiguration",
    "ProxyCredential",
    "ProxyCredentials",
    "SharedCredential",
    "PerSchemeCredential",
    "ProxyConfigError",
    "ProxyNotConfiguredError",
    "HTTP_SCHEME",
    "HTTPS_SCHEME",
    "is_http_uri",
    "is_supported_scheme",
    "is_supported_secure_scheme",
    "is_supported_non_secure_scheme",
    "host_of",
    "normalize_proxy_uri",
    "redact_proxy_uri",
    "parse_credential",
    "resolve_credentials",
    "select_credential",
    "parse_bypass_list",
    "is_match_in_bypass_list",
    "EnvLookup",
    "PROXY_ENV_VARS",
    "build_proxy_configuration",
    "snapshot_environment",
    "EnvironmentProxyResolver",
    "get_ssl_host_name",
    "get_request_ssl_host_name",
]
