"""
Abstract base adapter for HTTP libraries.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from proxy_config import EnvironmentProxyResolver
from ..models import DispatcherResult, ProxyConfig

class BaseAdapter(ABC):
    """Abstract interface for HTTP library adapters."""

    name: str = ""

    @abstractmethod
    def supports_sync(self) -> bool:
        """Whether the adapter supports synchronous clients."""
        pass

    @abstractmethod
    def supports_async(self) -> bool:
        """Whether the adapter supports asynchronous clients."""
        pass

    @abstractmethod
    def create_sync_client(
        self, config: ProxyConfig, resolver: Optional[EnvironmentProxyResolver]
    ) -> DispatcherResult:
        """Create a configured synchronous client."""
        pass

    @abstractmethod
    def create_async_client(
        self, config: ProxyConfig, resolver: Optional[EnvironmentProxyResolver]
    ) -> DispatcherResult:
        """Create a configured asynchronous client."""
        pass

    @abstractmethod
    def get_request_kwargs(
        self, config: ProxyConfig, resolver: Optional[EnvironmentProxyResolver], url: Any
    ) -> Dict[str, Any]:
        """Get kwargs for a single request to the given URL."""
        pass
