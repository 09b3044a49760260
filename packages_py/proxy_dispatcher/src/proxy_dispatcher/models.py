"""
Data models for proxy dispatcher.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union
from proxy_config import EnvironmentProxyResolver

@dataclass
class ProxyConfig:
    """Transport settings applied to every connection the client opens."""
    verify_ssl: bool = True
    timeout: float = 30.0
    trust_env: bool = False
    cert: Optional[Union[str, tuple]] = None
    ca_bundle: Optional[str] = None

@dataclass
class FactoryConfig:
    """Configuration for ProxyDispatcherFactory."""
    cert: Optional[Union[str, tuple]] = None
    ca_bundle: Optional[str] = None
    cert_verify: Optional[bool] = None
    environ: Optional[Mapping[str, str]] = None  # defaults to os.environ

@dataclass
class DispatcherResult:
    """Result wrapper with client, config, resolver, and kwargs."""
    client: Any  # Union[httpx.Client, httpx.AsyncClient]
    config: ProxyConfig
    resolver: Optional[EnvironmentProxyResolver]
    proxy_dict: Dict[str, Any]
