"""
Exceptions raised by proxy configuration.
"""
from typing import List


class ProxyConfigError(Exception):
    """Base exception for proxy configuration errors."""


class ProxyNotConfiguredError(ProxyConfigError):
    def __init__(self, variables_tried: List[str]):
        msg = f"No usable proxy configured. Tried env vars: {', '.join(variables_tried)}"
        super().__init__(msg)
        self.variables_tried = variables_tried
