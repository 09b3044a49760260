"""
httpx transports that route each request through the environment proxy.
"""
import logging
from typing import Callable, Dict, Generic, List, Optional, TypeVar

import httpx
from proxy_config import HTTP_SCHEME, HTTPS_SCHEME, EnvironmentProxyResolver, redact_proxy_uri

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_httpx_proxy(resolver: EnvironmentProxyResolver, scheme: str) -> Optional[httpx.Proxy]:
    """Build the httpx.Proxy for destinations of the given scheme.

    User-info is stripped from the proxy URL; the credential selected for
    the scheme is passed as proxy auth instead, so a single credential set
    on one proxy applies to both.
    """
    proxy_url = resolver.get_proxy_for_scheme(scheme)
    if proxy_url is None:
        return None

    credential = resolver.get_credential_for_scheme(scheme)
    return httpx.Proxy(
        url=proxy_url.copy_with(username=None, password=None),
        auth=credential.as_auth() if credential else None,
    )


class _ProxyRouter(Generic[T]):
    """Picks the direct or proxied transport for a request URL."""

    def __init__(
        self,
        resolver: Optional[EnvironmentProxyResolver],
        transport_factory: Callable[[Optional[httpx.Proxy]], T],
    ):
        self.resolver = resolver
        self.direct = transport_factory(None)
        self.proxied: Dict[str, T] = {}

        if resolver is not None:
            for scheme in (HTTP_SCHEME, HTTPS_SCHEME):
                proxy = build_httpx_proxy(resolver, scheme)
                if proxy is not None:
                    logger.debug(f"Proxy for {scheme} destinations: {redact_proxy_uri(proxy.url)}")
                    self.proxied[scheme] = transport_factory(proxy)

    def select(self, url: httpx.URL) -> T:
        if self.resolver is None or self.resolver.is_bypassed(url):
            return self.direct
        scheme = HTTP_SCHEME if url.scheme == HTTP_SCHEME else HTTPS_SCHEME
        return self.proxied[scheme]

    def transports(self) -> List[T]:
        return [self.direct, *self.proxied.values()]


class EnvironmentProxyTransport(httpx.BaseTransport):
    """Sync transport honoring http_proxy/https_proxy/all_proxy/no_proxy."""

    def __init__(
        self,
        resolver: Optional[EnvironmentProxyResolver],
        transport_factory: Callable[[Optional[httpx.Proxy]], httpx.BaseTransport],
    ):
        self._router = _ProxyRouter(resolver, transport_factory)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._router.select(request.url).handle_request(request)

    def close(self) -> None:
        for transport in self._router.transports():
            transport.close()


class AsyncEnvironmentProxyTransport(httpx.AsyncBaseTransport):
    """Async transport honoring http_proxy/https_proxy/all_proxy/no_proxy."""

    def __init__(
        self,
        resolver: Optional[EnvironmentProxyResolver],
        transport_factory: Callable[[Optional[httpx.Proxy]], httpx.AsyncBaseTransport],
    ):
        self._router = _ProxyRouter(resolver, transport_factory)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._router.select(request.url).handle_async_request(request)

    async def aclose(self) -> None:
        for transport in self._router.transports():
            await transport.aclose()
