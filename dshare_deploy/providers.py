"""
Connection objects handed to the external deployer.

A ``NodeConnection`` points at an RPC endpoint; a ``WalletProvider`` additionally
carries the signing key for that endpoint. Neither performs network I/O when it
is built: the ``Web3`` instance and the derived account are created on first use.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from .errors import ChainIdMismatchError, ConfigError

logger = logging.getLogger(__name__)

# Matches any chain id reported by the node
ANY_NETWORK_ID = "*"

# Default timeout for RPC calls
DEFAULT_RPC_TIMEOUT = 10  # seconds

# Wallet defaults
DEFAULT_NUMBER_OF_ADDRESSES = 1
DEFAULT_POLLING_INTERVAL = 8000  # milliseconds

NetworkId = Union[int, str]


class NodeConnection:
    """A connection to a single RPC endpoint with no signing key."""

    def __init__(self, endpoint: str, timeout: int = DEFAULT_RPC_TIMEOUT) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._web3: Optional[Web3] = None

    @property
    def web3(self) -> Web3:
        """Web3 instance for ``endpoint``; built on first access."""
        if self._web3 is None:
            self._web3 = Web3(Web3.HTTPProvider(self.endpoint, request_kwargs={"timeout": self.timeout}))
        return self._web3

    def verify_chain_id(self, expected: NetworkId) -> Optional[int]:
        """
        Check that the node reports the expected chain id.

        Args:
            expected: Chain id declared by the network profile, or ``"*"``

        Returns:
            The chain id reported by the node, or None when ``expected`` is the wildcard

        Raises:
            ConfigError: If the node is unreachable
            ChainIdMismatchError: If the node reports a different chain id
        """
        if expected == ANY_NETWORK_ID:
            logger.debug(f"Skipping chain id check for {self.endpoint} (network_id='*')")
            return None

        w3 = self.web3
        try:
            connected = w3.is_connected()
            chain_id = w3.eth.chain_id if connected else None
        except Exception as e:
            raise ConfigError(f"Failed to query chain id from RPC {self.endpoint}: {e}") from e

        if not connected:
            raise ConfigError(f"Failed to connect to RPC: {self.endpoint}")

        if chain_id != int(expected):
            raise ChainIdMismatchError(self.endpoint, int(expected), chain_id)

        logger.info(f"Connected to RPC: {self.endpoint} (chain_id={chain_id})")
        return chain_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"


class WalletProvider(NodeConnection):
    """
    An RPC endpoint paired with the private key(s) that sign for it.

    The key strings are kept exactly as supplied; only the derived account uses
    a ``0x``-prefixed form.
    """

    def __init__(
        self,
        private_keys: Sequence[str],
        endpoint: str,
        number_of_addresses: int = DEFAULT_NUMBER_OF_ADDRESSES,
        share_nonce: bool = True,
        polling_interval: int = DEFAULT_POLLING_INTERVAL,
        timeout: int = DEFAULT_RPC_TIMEOUT,
    ) -> None:
        if not private_keys:
            raise ConfigError("WalletProvider requires at least one private key.")
        if number_of_addresses < 1:
            raise ConfigError(f"number_of_addresses must be at least 1, got {number_of_addresses}")

        super().__init__(endpoint, timeout=timeout)
        self.private_keys = tuple(private_keys)
        self.number_of_addresses = number_of_addresses
        self.share_nonce = share_nonce
        self.polling_interval = polling_interval
        self._accounts: Optional[List[LocalAccount]] = None

    @property
    def accounts(self) -> List[LocalAccount]:
        """Accounts for the managed keys; derived on first access."""
        if self._accounts is None:
            managed = self.private_keys[: self.number_of_addresses]
            self._accounts = [Account.from_key(_normalize_key(key)) for key in managed]
        return list(self._accounts)

    @property
    def account(self) -> LocalAccount:
        return self.accounts[0]

    @property
    def address(self) -> str:
        return self.account.address

    @property
    def addresses(self) -> List[str]:
        return [account.address for account in self.accounts]

    def __repr__(self) -> str:
        return (
            f"WalletProvider(endpoint={self.endpoint!r}, keys={len(self.private_keys)}, "
            f"number_of_addresses={self.number_of_addresses})"
        )


def _normalize_key(private_key: str) -> str:
    if not private_key.startswith("0x"):
        return "0x" + private_key
    return private_key
