"""
Convenience functions for proxy dispatcher.
"""
from typing import Optional, Dict, Any
import httpx
from .factory import ProxyDispatcherFactory
from .models import FactoryConfig, DispatcherResult

# Global default factory, created on first use
_default_factory: Optional[ProxyDispatcherFactory] = None

def _get_default_factory() -> ProxyDispatcherFactory:
    global _default_factory
    if _default_factory is None:
        _default_factory = ProxyDispatcherFactory()
    return _default_factory

def get_proxy_dispatcher(
    disable_tls: Optional[bool] = None,
    timeout: float = 30.0,
    async_client: bool = True
) -> DispatcherResult:
    """Get a configured HTTP client using the default factory."""
    return _get_default_factory().get_proxy_dispatcher(
        disable_tls=disable_tls,
        timeout=timeout,
        async_client=async_client
    )

def get_async_client(
    disable_tls: Optional[bool] = None,
    timeout: float = 30.0
) -> httpx.AsyncClient:
    """Get a configured async httpx client."""
    result = get_proxy_dispatcher(disable_tls=disable_tls, timeout=timeout, async_client=True)
    return result.client

def get_sync_client(
    disable_tls: Optional[bool] = None,
    timeout: float = 30.0
) -> httpx.Client:
    """Get a configured sync httpx client."""
    result = get_proxy_dispatcher(disable_tls=disable_tls, timeout=timeout, async_client=False)
    return result.client

def get_request_kwargs(
    url: Any,
    timeout: float = 30.0
) -> Dict[str, Any]:
    """Get kwargs for a direct request call to url."""
    return _get_default_factory().get_request_kwargs(url, timeout=timeout)

def create_proxy_dispatcher_factory(
    config: Optional[FactoryConfig] = None,
    adapter: str = "httpx"
) -> ProxyDispatcherFactory:
    """Create a new ProxyDispatcherFactory instance."""
    return ProxyDispatcherFactory(config=config, adapter=adapter)
