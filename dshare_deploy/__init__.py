"""
Deploy configuration for the Dshare contracts.

This package provides:
- Network profiles (Sepolia via a wallet provider, local development node)
- Compiler selection and optimizer settings
- Contract source/build paths and test runner options
- Secret loading from the environment or a .env file
"""

from .compiler import CompilerSettings, CompilerSpec, OptimizerSettings
from .config import (
    Config,
    PathLayout,
    ProfileDescriptor,
    TestRunnerOptions,
    connect,
    describe,
    load_config,
)
from .errors import (
    ChainIdMismatchError,
    ConfigError,
    MissingConfigError,
    MissingSecretError,
    UnknownNetworkError,
)
from .networks import HostConnection, NetworkProfile, WalletProviderFactory
from .providers import NodeConnection, WalletProvider
from .settings import DeploySecrets

__all__ = [
    "CompilerSettings",
    "CompilerSpec",
    "OptimizerSettings",
    "Config",
    "PathLayout",
    "ProfileDescriptor",
    "TestRunnerOptions",
    "connect",
    "describe",
    "load_config",
    "ChainIdMismatchError",
    "ConfigError",
    "MissingConfigError",
    "MissingSecretError",
    "UnknownNetworkError",
    "HostConnection",
    "NetworkProfile",
    "WalletProviderFactory",
    "NodeConnection",
    "WalletProvider",
    "DeploySecrets",
]
