"""
Exceptions raised while loading the deploy configuration or connecting a profile.
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base exception for deploy configuration errors."""

    pass


class MissingConfigError(ConfigError):
    """Raised when a required configuration value is absent."""

    pass


class MissingSecretError(MissingConfigError):
    """Raised when a required environment secret is absent or empty."""

    def __init__(self, variable: str, source: str = ".env", network: Optional[str] = None):
        super().__init__(f"{variable} not found in {source}. Please set it.")
        self.variable = variable
        self.source = source
        self.network = network


class UnknownNetworkError(MissingConfigError):
    """Raised when no network profile exists under the requested name."""

    def __init__(self, name: str, available: tuple = ()):
        message = f"Unknown network '{name}'"
        if available:
            message += f"; configured networks: {', '.join(available)}"
        super().__init__(message)
        self.name = name
        self.available = available


class ChainIdMismatchError(ConfigError):
    """Raised when a node reports a different chain id than the profile declares."""

    def __init__(self, endpoint: str, expected: int, actual: int):
        super().__init__(f"RPC {endpoint} returned wrong chain_id={actual}, expected {expected}")
        self.endpoint = endpoint
        self.expected = expected
        self.actual = actual
