"""
Data models for proxy configuration.
"""
from typing import Annotated, Literal, Optional, Tuple, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator


class ProxyCredential(BaseModel):
    """User/password pair taken from a proxy URL's user-info."""
    model_config = ConfigDict(frozen=True)

    user: str = Field(description="Proxy user name")
    password: SecretStr = Field(default=SecretStr(""), description="Proxy password, empty when omitted")

    def as_auth(self) -> Tuple[str, str]:
        return (self.user, self.password.get_secret_value())


class SharedCredential(BaseModel):
    """One identity used for both http and https proxies."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["shared"] = "shared"
    credential: ProxyCredential


class PerSchemeCredential(BaseModel):
    """Distinct identities for the http and https proxies.

    The credential is picked from the destination's scheme at request time.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["per_scheme"] = "per_scheme"
    http: ProxyCredential
    https: ProxyCredential


ProxyCredentials = Annotated[
    Union[SharedCredential, PerSchemeCredential],
    Field(discriminator="kind"),
]


class ProxyConfiguration(BaseModel):
    """Proxy settings captured from the environment.

    Built once and never mutated. At least one of ``http_proxy`` or
    ``https_proxy`` is always present; an environment without either
    produces no configuration at all.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    http_proxy: Optional[httpx.URL] = Field(default=None, description="Proxy for http destinations")
    https_proxy: Optional[httpx.URL] = Field(default=None, description="Proxy for https destinations")
    bypass_patterns: Tuple[str, ...] = Field(default=(), description="Hosts that skip the proxy, from no_proxy")
    credentials: Optional[ProxyCredentials] = Field(default=None, description="Proxy credentials, if any")

    @model_validator(mode="after")
    def _require_endpoint(self) -> "ProxyConfiguration":
        if self.http_proxy is None and self.https_proxy is None:
            raise ValueError("ProxyConfiguration requires an http or https proxy endpoint")
        return self
