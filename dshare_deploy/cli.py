#!/usr/bin/env python3
"""
Inspect the Dshare deploy configuration and check network profiles.

Usage:
    dshare-deploy show [--json]
    dshare-deploy check <network> [--verify-chain]

Examples:
    # Print the configuration the deployer will receive
    dshare-deploy show --json

    # Make sure PRIVATE_KEY and SEPOLIA_URL are set before deploying
    dshare-deploy check sepolia

    # Also ask the node for its chain id
    dshare-deploy check sepolia --verify-chain
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import Config, connect, describe, load_config
from .errors import ConfigError
from .providers import WalletProvider
from .settings import DEFAULT_ENV_FILE, DeploySecrets

logger = logging.getLogger(__name__)


def print_config(config: Config) -> None:
    """Print a readable summary of the configuration."""
    print("Networks:")
    for name, profile in config.networks.items():
        print(f"  {name} (network_id={profile.network_id})")
        if profile.uses_provider:
            print(f"    provider: wallet ({', '.join(profile.required_secrets)})")
        else:
            print(f"    host: {profile.connection.host}:{profile.connection.port}")
        print(f"    confirmations: {profile.confirmations}")
        print(f"    timeoutBlocks: {profile.timeout_blocks}")
        print(f"    skipDryRun: {profile.skip_dry_run}")
        if profile.gas is not None:
            print(f"    gas: {profile.gas}")
        if profile.gas_price is not None:
            print(f"    gasPrice: {profile.gas_price}")
    print()
    print(f"Contracts directory: {config.contracts_directory}")
    print(f"Build directory: {config.contracts_build_directory}")
    print()
    for name, spec in config.compilers.items():
        optimizer = spec.optimizer
        print(f"Compiler {name} {spec.version}")
        print(f"  optimizer: enabled={optimizer.enabled} runs={optimizer.runs}")
        print(f"  viaIR: {spec.via_ir}")
    mocha = config.mocha.to_dict()
    print()
    print(f"Mocha: {json.dumps(mocha) if mocha else 'defaults'}")


def check_network(config: Config, name: str, secrets: DeploySecrets, verify_chain: bool = False) -> int:
    """Invoke a profile's connection and report the result. Returns an exit code."""
    try:
        descriptor = describe(config, name)
        connection = connect(descriptor, secrets)
        if verify_chain:
            connection.verify_chain_id(descriptor.network_id)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    print(f"✓ Network '{name}' is ready (network_id={descriptor.network_id})")
    print(f"   Endpoint: {connection.endpoint}")
    if isinstance(connection, WalletProvider):
        print(f"   Managed addresses: {connection.number_of_addresses}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dshare-deploy",
        description="Inspect the Dshare deploy configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=DEFAULT_ENV_FILE,
        help=f"dotenv file holding PRIVATE_KEY and RPC URLs (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the configuration")
    show.add_argument("--json", action="store_true", help="Print as JSON")

    check = subparsers.add_parser("check", help="Check that a network profile can connect")
    check.add_argument("network", type=str, help="Network profile name, e.g. sepolia")
    check.add_argument(
        "--verify-chain",
        action="store_true",
        help="Query the node and compare its chain id with the profile",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the dshare-deploy command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load environment variables from the dotenv file
    if load_dotenv(args.env_file):
        logger.debug(f"Loaded environment from {args.env_file}")

    config = load_config()

    if args.command == "show":
        if args.json:
            print(json.dumps(config.to_dict(), indent=2))
        else:
            print_config(config)
        return 0

    secrets = DeploySecrets(_env_file=args.env_file)
    return check_network(config, args.network, secrets, verify_chain=args.verify_chain)


if __name__ == "__main__":
    sys.exit(main())
