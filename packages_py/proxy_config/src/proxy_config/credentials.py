"""
Proxy credential extraction and per-scheme selection.
"""
import logging
from typing import Optional
from urllib.parse import unquote

import httpx

from .schemes import HTTP_SCHEME
from .types import PerSchemeCredential, ProxyCredential, ProxyCredentials, SharedCredential

logger = logging.getLogger(__name__)


def parse_credential(userinfo: Optional[str]) -> Optional[ProxyCredential]:
    """Convert a ``user:password`` user-info string into a credential.

    Only the first colon separates user from password, so passwords may
    contain colons. A user-info without a colon is a user with an empty
    password. Both halves are percent-decoded after splitting.
    """
    if not userinfo or not unquote(userinfo).strip():
        return None

    user, sep, password = userinfo.partition(":")
    if not sep:
        return ProxyCredential(user=unquote(userinfo), password="")
    return ProxyCredential(user=unquote(user), password=unquote(password))


def _userinfo(uri: Optional[httpx.URL]) -> Optional[str]:
    if uri is None:
        return None
    return uri.userinfo.decode("ascii")


def resolve_credentials(
    http_proxy: Optional[httpx.URL],
    https_proxy: Optional[httpx.URL],
) -> Optional[ProxyCredentials]:
    """Combine the credentials embedded in both proxy URLs.

    Identical user-info on both proxies, or credentials on only one side,
    produce a single shared credential. Different user-info on each side
    keeps both and defers the choice to the destination scheme.
    """
    http_userinfo = _userinfo(http_proxy)
    https_userinfo = _userinfo(https_proxy)
    http_cred = parse_credential(http_userinfo)
    https_cred = parse_credential(https_userinfo)

    if http_cred is None and https_cred is None:
        return None

    if http_cred is None or https_cred is None or http_userinfo == https_userinfo:
        logger.debug("Using shared proxy credential")
        return SharedCredential(credential=http_cred or https_cred)

    logger.debug("Using per-scheme proxy credentials")
    return PerSchemeCredential(http=http_cred, https=https_cred)


def select_credential(credentials: Optional[ProxyCredentials], scheme: str) -> Optional[ProxyCredential]:
    """Pick the credential for a destination scheme."""
    if credentials is None:
        return None
    if isinstance(credentials, SharedCredential):
        return credentials.credential
    return credentials.http if scheme == HTTP_SCHEME else credentials.https
