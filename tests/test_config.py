import dataclasses
import json

import pytest

from dshare_deploy import (
    Config,
    DeploySecrets,
    MissingConfigError,
    UnknownNetworkError,
    describe,
    load_config,
)
from dshare_deploy.config import PathLayout
from dshare_deploy.config import TestRunnerOptions as RunnerOptions


def test_compiler_settings_match_declared_values():
    solc = load_config().compilers["solc"]
    assert solc.version == "0.8.20"
    assert solc.settings.optimizer.enabled is True
    assert solc.settings.optimizer.runs == 200
    assert solc.settings.via_ir is True


def test_paths_and_mocha_defaults():
    config = load_config()
    assert config.contracts_directory == "./contracts"
    assert config.contracts_build_directory == "./build/contracts"
    assert config.mocha == RunnerOptions()
    assert config.mocha.to_dict() == {}


def test_path_layout_resolves_against_working_directory(clean_env):
    contracts, build = PathLayout().resolve()
    assert contracts == (clean_env / "contracts").resolve()
    assert build == (clean_env / "build" / "contracts").resolve()


def test_path_layout_resolves_against_explicit_base(tmp_path):
    base = tmp_path / "project"
    contracts, build = PathLayout().resolve(base)
    assert contracts == (base / "contracts").resolve()
    assert build == (base / "build" / "contracts").resolve()


def test_load_config_needs_no_secrets():
    # Loading must not read PRIVATE_KEY / SEPOLIA_URL
    config = load_config()
    assert set(config.networks) == {"sepolia", "development"}


def test_load_config_is_idempotent():
    assert load_config() == load_config()


def test_load_config_with_same_injected_secrets_is_idempotent():
    first = DeploySecrets(_env_file=None, private_key="0xabc123", sepolia_url="https://rpc.example/abc")
    second = DeploySecrets(_env_file=None, private_key="0xabc123", sepolia_url="https://rpc.example/abc")
    assert load_config(first) == load_config(second)


def test_config_is_read_only():
    config = load_config()
    with pytest.raises(TypeError):
        config.networks["mainnet"] = config.networks["sepolia"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.mocha = RunnerOptions(timeout=100000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.networks["sepolia"].confirmations = 0


def test_config_is_not_hashable():
    with pytest.raises(TypeError, match="Config"):
        hash(load_config())


def test_config_copies_input_mapping():
    networks = dict(load_config().networks)
    config = Config(networks=networks)
    networks.pop("sepolia")
    assert "sepolia" in config.networks


def test_unknown_network_lists_configured_names():
    with pytest.raises(UnknownNetworkError) as exc:
        describe(load_config(), "mainnet")
    assert isinstance(exc.value, MissingConfigError)
    assert "mainnet" in str(exc.value)
    assert "sepolia" in str(exc.value)


def test_to_dict_layout():
    data = load_config().to_dict()
    assert data["contracts_directory"] == "./contracts"
    assert data["contracts_build_directory"] == "./build/contracts"
    assert data["compilers"]["solc"] == {
        "version": "0.8.20",
        "settings": {"optimizer": {"enabled": True, "runs": 200}, "viaIR": True},
    }
    assert data["mocha"] == {}
    assert data["networks"]["development"] == {"host": "127.0.0.1", "port": 7545, "network_id": "*"}

    sepolia = data["networks"]["sepolia"]
    assert sepolia["network_id"] == 11155111
    assert sepolia["confirmations"] == 2
    assert sepolia["timeoutBlocks"] == 200
    assert sepolia["skipDryRun"] is True
    assert sepolia["gas"] == 5000000
    assert sepolia["gasPrice"] == 10000000000
    assert sepolia["provider"]["url_variable"] == "SEPOLIA_URL"


def test_to_dict_never_contains_secret_material():
    secrets = DeploySecrets(_env_file=None, private_key="0xabc123", sepolia_url="https://rpc.example/abc")
    rendered = json.dumps(load_config(secrets).to_dict())
    assert "0xabc123" not in rendered
    assert "rpc.example" not in rendered


def test_mocha_timeout_override():
    assert RunnerOptions(timeout=100000).to_dict() == {"timeout": 100000}


# Run with: pytest -q tests/test_config.py
