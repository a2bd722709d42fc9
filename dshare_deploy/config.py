"""
Deploy configuration for the Dshare contracts.

``load_config`` builds the whole configuration from static values. It reads no
secrets: provider-backed networks resolve ``PRIVATE_KEY`` and their RPC URL only
when their connection is requested, through ``describe`` + ``connect`` or
``NetworkProfile.provider``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from .compiler import SOLC, CompilerSpec
from .errors import UnknownNetworkError
from .networks import NetworkProfile, build_networks
from .providers import NetworkId, NodeConnection
from .settings import DeploySecrets

logger = logging.getLogger(__name__)

CONTRACTS_DIRECTORY = "./contracts"
CONTRACTS_BUILD_DIRECTORY = "./build/contracts"


@dataclass(frozen=True)
class PathLayout:
    """Contract source and build artifact directories, relative to the working directory."""

    contracts_directory: str = CONTRACTS_DIRECTORY
    contracts_build_directory: str = CONTRACTS_BUILD_DIRECTORY

    def resolve(self, base: Optional[Union[str, Path]] = None) -> Tuple[Path, Path]:
        root = Path(base) if base is not None else Path.cwd()
        return (
            (root / self.contracts_directory).resolve(),
            (root / self.contracts_build_directory).resolve(),
        )


@dataclass(frozen=True)
class TestRunnerOptions:
    """Overrides for the external mocha test runner."""

    timeout: Optional[int] = None  # milliseconds

    def to_dict(self) -> Dict[str, object]:
        if self.timeout is None:
            return {}
        return {"timeout": self.timeout}


@dataclass(frozen=True)
class Config:
    networks: Mapping[str, NetworkProfile]
    paths: PathLayout = field(default_factory=PathLayout)
    compilers: Mapping[str, CompilerSpec] = field(default_factory=lambda: {"solc": SOLC})
    mocha: TestRunnerOptions = field(default_factory=TestRunnerOptions)

    # networks and compilers are mapping views, so Config cannot be hashed
    __hash__ = None

    def __post_init__(self) -> None:
        # Read-only views so the loaded configuration cannot drift
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(self, "compilers", MappingProxyType(dict(self.compilers)))

    @property
    def contracts_directory(self) -> str:
        return self.paths.contracts_directory

    @property
    def contracts_build_directory(self) -> str:
        return self.paths.contracts_build_directory

    @property
    def solc(self) -> CompilerSpec:
        return self.compilers["solc"]

    def network(self, name: str) -> NetworkProfile:
        """
        Look up a network profile by name.

        Raises:
            UnknownNetworkError: If no profile is configured under ``name``
        """
        try:
            return self.networks[name]
        except KeyError:
            raise UnknownNetworkError(name, tuple(self.networks)) from None

    def to_dict(self) -> Dict[str, object]:
        """The configuration as a plain dict, in the layout the deployer expects."""
        return {
            "networks": {name: profile.to_dict() for name, profile in self.networks.items()},
            "contracts_directory": self.paths.contracts_directory,
            "contracts_build_directory": self.paths.contracts_build_directory,
            "compilers": {name: spec.to_dict() for name, spec in self.compilers.items()},
            "mocha": self.mocha.to_dict(),
        }


@dataclass(frozen=True)
class ProfileDescriptor:
    """What connecting to a profile would need, without touching secrets or the network."""

    name: str
    network_id: NetworkId
    uses_provider: bool
    required_secrets: Tuple[str, ...]
    profile: NetworkProfile

    def missing_secrets(self, secrets: DeploySecrets) -> Tuple[str, ...]:
        return secrets.missing(*self.required_secrets)


def load_config(secrets: Optional[DeploySecrets] = None) -> Config:
    """
    Build the deploy configuration.

    Args:
        secrets: Optional secrets bound to every provider factory. When omitted,
            factories read the environment at the moment they are invoked.

    Returns:
        An immutable Config; equal inputs give equal configs
    """
    config = Config(networks=build_networks(secrets))
    logger.debug(f"Loaded deploy configuration with networks: {', '.join(config.networks)}")
    return config


def describe(config: Config, name: str) -> ProfileDescriptor:
    """
    Describe the named profile.

    Raises:
        UnknownNetworkError: If no profile is configured under ``name``
    """
    profile = config.network(name)
    return ProfileDescriptor(
        name=profile.name,
        network_id=profile.network_id,
        uses_provider=profile.uses_provider,
        required_secrets=profile.required_secrets,
        profile=profile,
    )


def connect(descriptor: ProfileDescriptor, secrets: Optional[DeploySecrets] = None) -> NodeConnection:
    """
    Build the connection for a described profile.

    Raises:
        MissingSecretError: If a required secret is unset or empty
    """
    connection = descriptor.profile.provider(secrets)
    logger.info(f"Prepared {type(connection).__name__} for network '{descriptor.name}'")
    return connection
