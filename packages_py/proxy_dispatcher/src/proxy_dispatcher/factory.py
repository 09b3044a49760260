"""
Factory for creating proxy-configured HTTP clients.
"""
import logging
from typing import Optional, Dict, Any
from proxy_config import EnvironmentProxyResolver, PROXY_ENV_VARS, snapshot_environment
from .models import FactoryConfig, ProxyConfig, DispatcherResult
from .config import SSL_ENV_VARS, is_ssl_verify_disabled_by_env
from .adapters import get_adapter, BaseAdapter

logger = logging.getLogger(__name__)

class ProxyDispatcherFactory:
    """Factory for creating proxy-configured HTTP clients.

    The environment is read once, when the factory is created. Every client
    it hands out shares the same immutable resolver.
    """

    def __init__(
        self,
        config: Optional[FactoryConfig] = None,
        adapter: str = "httpx"
    ):
        self.config = config or FactoryConfig()
        self.adapter: BaseAdapter = get_adapter(adapter)

        self._lookup = snapshot_environment(
            self.config.environ,
            names=PROXY_ENV_VARS + SSL_ENV_VARS,
        )
        self.resolver: Optional[EnvironmentProxyResolver] = EnvironmentProxyResolver.try_create(self._lookup)

        if self.resolver is None:
            logger.debug("No environment proxy configured; clients will connect directly")

        logger.debug(f"ProxyDispatcherFactory initialized with adapter '{adapter}'")

    def _build_proxy_config(self, disable_tls: Optional[bool], timeout: float) -> ProxyConfig:
        # Precedence: disable_tls param > config.cert_verify > environment default
        verify_ssl = True

        if disable_tls is True:
            verify_ssl = False
        elif self.config.cert_verify is not None:
            verify_ssl = self.config.cert_verify
        elif is_ssl_verify_disabled_by_env(self._lookup):
            verify_ssl = False

        return ProxyConfig(
            verify_ssl=verify_ssl,
            timeout=timeout,
            trust_env=False, # We explicitly configure everything
            cert=self.config.cert,
            ca_bundle=self.config.ca_bundle
        )

    def get_proxy_dispatcher(
        self,
        disable_tls: Optional[bool] = None,
        timeout: float = 30.0,
        async_client: bool = True
    ) -> DispatcherResult:
        """Get a configured HTTP client."""
        proxy_config = self._build_proxy_config(disable_tls, timeout)

        if async_client:
            if not self.adapter.supports_async():
                raise NotImplementedError(f"Adapter '{self.adapter.name}' does not support async")
            return self.adapter.create_async_client(proxy_config, self.resolver)
        else:
            if not self.adapter.supports_sync():
                raise NotImplementedError(f"Adapter '{self.adapter.name}' does not support sync")
            return self.adapter.create_sync_client(proxy_config, self.resolver)

    def get_request_kwargs(
        self,
        url: Any,
        timeout: float = 30.0,
        disable_tls: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Get kwargs for a direct request call (e.g. httpx.get) to url."""
        proxy_config = self._build_proxy_config(disable_tls, timeout)
        return self.adapter.get_request_kwargs(proxy_config, self.resolver, url)
