"""
Proxy dispatcher package.
"""
from .models import ProxyConfig, FactoryConfig, DispatcherResult
from .config import is_ssl_verify_disabled_by_env
from .transport import EnvironmentProxyTransport, AsyncEnvironmentProxyTransport, build_httpx_proxy
from .factory import ProxyDispatcherFactory
from .dispatcher import (
    get_proxy_dispatcher,
    get_async_client,
    get_sync_client,
    get_request_kwargs,
    create_proxy_dispatcher_factory
)
from .adapters import register_adapter, get_adapter, BaseAdapter

__all__ = [
    "ProxyConfig",
    "FactoryConfig",
    "DispatcherResult",
    "ProxyDispatcherFactory",
    "EnvironmentProxyTransport",
    "AsyncEnvironmentProxyTransport",
    "build_httpx_proxy",
    "get_proxy_dispatcher",
    "get_async_client",
    "get_sync_client",
    "get_request_kwargs",
    "create_proxy_dispatcher_factory",
    "is_ssl_verify_disabled_by_env",
    "register_adapter",
    "get_adapter",
    "BaseAdapter"
]
