"""
TLS settings derived from the environment.
"""
import logging
from proxy_config import EnvLookup

logger = logging.getLogger(__name__)

SSL_ENV_VARS = ("NODE_TLS_REJECT_UNAUTHORIZED", "SSL_CERT_VERIFY")

def is_ssl_verify_disabled_by_env(lookup: EnvLookup) -> bool:
    """Check if SSL verification is disabled by environment variables."""
    # Node.js compatibility
    if lookup("NODE_TLS_REJECT_UNAUTHORIZED") == "0":
        logger.debug("SSL verification disabled by NODE_TLS_REJECT_UNAUTHORIZED")
        return True

    # Python convention
    if lookup("SSL_CERT_VERIFY") == "0":
        logger.debug("SSL verification disabled by SSL_CERT_VERIFY")
        return True

    return False
