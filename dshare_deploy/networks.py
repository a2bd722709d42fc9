"""
Network profiles: where to deploy, how to connect and what each transaction may cost.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple, Union

from web3 import Web3

from .errors import MissingConfigError
from .providers import (
    ANY_NETWORK_ID,
    DEFAULT_NUMBER_OF_ADDRESSES,
    DEFAULT_POLLING_INTERVAL,
    NetworkId,
    NodeConnection,
    WalletProvider,
)
from .settings import ENV_PRIVATE_KEY, ENV_SEPOLIA_URL, DeploySecrets

logger = logging.getLogger(__name__)

# Transaction policy defaults applied by the deployer when a profile sets nothing
DEFAULT_CONFIRMATIONS = 0
DEFAULT_TIMEOUT_BLOCKS = 50

SEPOLIA_CHAIN_ID = 11155111
SEPOLIA_GAS_LIMIT = 5_000_000
SEPOLIA_GAS_PRICE = Web3.to_wei(10, "gwei")

DEVELOPMENT_HOST = "127.0.0.1"
DEVELOPMENT_PORT = 7545


@dataclass(frozen=True)
class HostConnection:
    """A plain host/port RPC endpoint, e.g. a local Ganache node."""

    host: str
    port: int

    required_secrets: ClassVar[Tuple[str, ...]] = ()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def connect(self) -> NodeConnection:
        return NodeConnection(self.url)


@dataclass(frozen=True)
class WalletProviderFactory:
    """
    Deferred constructor for a ``WalletProvider``.

    Secrets are resolved when the factory is called, in this order: the
    ``secrets`` argument, the secrets bound at load time, then a fresh
    ``DeploySecrets`` read from the environment.
    """

    url_variable: str
    key_variable: str = ENV_PRIVATE_KEY
    network: Optional[str] = None
    secrets: Optional[DeploySecrets] = None
    number_of_addresses: int = DEFAULT_NUMBER_OF_ADDRESSES
    share_nonce: bool = True
    polling_interval: int = DEFAULT_POLLING_INTERVAL

    def __post_init__(self) -> None:
        for variable in (self.key_variable, self.url_variable):
            if not DeploySecrets.declares(variable):
                raise MissingConfigError(
                    f"{variable} is not a known deploy secret; add a '{variable.lower()}' field to DeploySecrets"
                )

    @property
    def required_secrets(self) -> Tuple[str, ...]:
        return (self.key_variable, self.url_variable)

    def resolve_secrets(self, secrets: Optional[DeploySecrets] = None) -> DeploySecrets:
        if secrets is not None:
            return secrets
        if self.secrets is not None:
            return self.secrets
        return DeploySecrets()

    def __call__(self, secrets: Optional[DeploySecrets] = None) -> WalletProvider:
        """
        Build the wallet provider.

        Raises:
            MissingSecretError: If the key or endpoint variable is unset or empty
        """
        resolved = self.resolve_secrets(secrets)
        private_key = resolved.require(self.key_variable, network=self.network)
        endpoint = resolved.require(self.url_variable, network=self.network)

        logger.debug(f"Creating wallet provider for network={self.network} from {self.url_variable}")
        return WalletProvider(
            private_keys=[private_key],
            endpoint=endpoint,
            number_of_addresses=self.number_of_addresses,
            share_nonce=self.share_nonce,
            polling_interval=self.polling_interval,
        )

    def describe(self) -> Dict[str, object]:
        return {
            "type": "wallet",
            "key_variable": self.key_variable,
            "url_variable": self.url_variable,
            "number_of_addresses": self.number_of_addresses,
            "share_nonce": self.share_nonce,
            "polling_interval": self.polling_interval,
        }


Connection = Union[HostConnection, WalletProviderFactory]


@dataclass(frozen=True)
class NetworkProfile:
    """Connection, chain identity and transaction policy for one deployment target."""

    name: str
    connection: Connection
    network_id: NetworkId
    confirmations: int = DEFAULT_CONFIRMATIONS
    timeout_blocks: int = DEFAULT_TIMEOUT_BLOCKS
    skip_dry_run: bool = False
    gas: Optional[int] = None
    gas_price: Optional[int] = None

    @property
    def uses_provider(self) -> bool:
        return isinstance(self.connection, WalletProviderFactory)

    @property
    def required_secrets(self) -> Tuple[str, ...]:
        return self.connection.required_secrets

    def provider(self, secrets: Optional[DeploySecrets] = None) -> NodeConnection:
        """Invoke the profile's connection; host profiles ignore ``secrets``."""
        if isinstance(self.connection, WalletProviderFactory):
            return self.connection(secrets)
        return self.connection.connect()

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {}
        if isinstance(self.connection, HostConnection):
            data["host"] = self.connection.host
            data["port"] = self.connection.port
        else:
            data["provider"] = self.connection.describe()
        data["network_id"] = self.network_id
        if self.confirmations != DEFAULT_CONFIRMATIONS:
            data["confirmations"] = self.confirmations
        if self.timeout_blocks != DEFAULT_TIMEOUT_BLOCKS:
            data["timeoutBlocks"] = self.timeout_blocks
        if self.skip_dry_run:
            data["skipDryRun"] = True
        if self.gas is not None:
            data["gas"] = self.gas
        if self.gas_price is not None:
            data["gasPrice"] = self.gas_price
        return data


def build_networks(secrets: Optional[DeploySecrets] = None) -> Dict[str, NetworkProfile]:
    """Return the configured network profiles keyed by name."""
    sepolia = NetworkProfile(
        name="sepolia",
        connection=WalletProviderFactory(
            url_variable=ENV_SEPOLIA_URL,
            network="sepolia",
            secrets=secrets,
        ),
        network_id=SEPOLIA_CHAIN_ID,
        confirmations=2,
        timeout_blocks=200,
        skip_dry_run=True,
        gas=SEPOLIA_GAS_LIMIT,
        gas_price=SEPOLIA_GAS_PRICE,
    )
    development = NetworkProfile(
        name="development",
        connection=HostConnection(host=DEVELOPMENT_HOST, port=DEVELOPMENT_PORT),
        network_id=ANY_NETWORK_ID,
    )
    return {profile.name: profile for profile in (sepolia, development)}
