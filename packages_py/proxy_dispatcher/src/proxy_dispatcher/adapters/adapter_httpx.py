"""
Adapter for httpx library.
"""
import logging
import ssl
import httpx
from typing import Any, Dict, Optional, Union
from proxy_config import EnvironmentProxyResolver, host_of, redact_proxy_uri
from .base import BaseAdapter
from ..models import DispatcherResult, ProxyConfig
from ..transport import AsyncEnvironmentProxyTransport, EnvironmentProxyTransport, build_httpx_proxy

logger = logging.getLogger(__name__)

class HttpxAdapter(BaseAdapter):
    """Adapter for httpx library."""

    name = "httpx"

    def supports_sync(self) -> bool:
        return True

    def supports_async(self) -> bool:
        return True

    def _verify(self, config: ProxyConfig) -> Union[bool, ssl.SSLContext]:
        if config.verify_ssl and config.ca_bundle:
            return ssl.create_default_context(cafile=config.ca_bundle)
        return config.verify_ssl

    def _transport_kwargs(self, config: ProxyConfig) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "verify": self._verify(config),
            # Proxies come from the resolver, never from httpx's own env lookup.
            "trust_env": config.trust_env,
        }
        if config.cert:
            kwargs["cert"] = config.cert
        return kwargs

    def get_request_kwargs(
        self,
        config: ProxyConfig,
        resolver: Optional[EnvironmentProxyResolver],
        url: Any,
    ) -> Dict[str, Any]:
        """Build kwargs for httpx.request() to a single destination."""
        url = httpx.URL(url)
        kwargs = self._transport_kwargs(config)
        kwargs["timeout"] = config.timeout

        if resolver is not None and not resolver.is_bypassed(url):
            proxy = build_httpx_proxy(resolver, url.scheme)
            if proxy is not None:
                logger.debug(f"Request to '{host_of(url)}' via proxy {redact_proxy_uri(proxy.url)}")
                kwargs["proxy"] = proxy

        return kwargs

    def _client_kwargs(self, config: ProxyConfig, transport: Any) -> Dict[str, Any]:
        return {
            "timeout": config.timeout,
            "trust_env": config.trust_env,
            "transport": transport,
        }

    def create_sync_client(
        self, config: ProxyConfig, resolver: Optional[EnvironmentProxyResolver]
    ) -> DispatcherResult:
        """Create httpx.Client."""
        transport_kwargs = self._transport_kwargs(config)
        transport = EnvironmentProxyTransport(
            resolver,
            lambda proxy: httpx.HTTPTransport(proxy=proxy, **transport_kwargs),
        )
        kwargs = self._client_kwargs(config, transport)
        logger.debug(f"Creating httpx.Client with config: {config}")

        client = httpx.Client(**kwargs)

        return DispatcherResult(
            client=client,
            config=config,
            resolver=resolver,
            proxy_dict=kwargs
        )

    def create_async_client(
        self, config: ProxyConfig, resolver: Optional[EnvironmentProxyResolver]
    ) -> DispatcherResult:
        """Create httpx.AsyncClient."""
        transport_kwargs = self._transport_kwargs(config)
        transport = AsyncEnvironmentProxyTransport(
            resolver,
            lambda proxy: httpx.AsyncHTTPTransport(proxy=proxy, **transport_kwargs),
        )
        kwargs = self._client_kwargs(config, transport)
        logger.debug(f"Creating httpx.AsyncClient with config: {config}")

        client = httpx.AsyncClient(**kwargs)

        return DispatcherResult(
            client=client,
            config=config,
            resolver=resolver,
            proxy_dict=kwargs
        )
