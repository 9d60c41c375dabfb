"""Unit tests for configuration module."""

from kyber_reserve.config import (
    ChainSettings,
    ContractSettings,
    Environment,
    MonitoringSettings,
    Settings,
)


def test_settings_defaults():
    """Test default settings initialization."""
    settings = Settings()

    assert settings.environment == Environment.DEVELOPMENT
    assert settings.service_name == "kyber-reserve"
    assert isinstance(settings.chain, ChainSettings)
    assert isinstance(settings.contracts, ContractSettings)
    assert isinstance(settings.monitoring, MonitoringSettings)


def test_chain_settings_defaults():
    chain = ChainSettings()

    assert chain.rpc_url == "http://localhost:8545"
    assert chain.request_timeout == 30


def test_contract_settings_from_env(monkeypatch):
    monkeypatch.setenv("CONTRACTS_RESERVE", "0x" + "1" * 40)
    monkeypatch.setenv("CONTRACTS_CONVERSION_RATES", "0x" + "2" * 40)
    monkeypatch.delenv("CONTRACTS_SANITY_RATES", raising=False)

    contracts = ContractSettings()

    assert contracts.reserve == "0x" + "1" * 40
    assert contracts.conversion_rates == "0x" + "2" * 40
    assert contracts.sanity_rates is None


def test_nested_env_override(monkeypatch):
    monkeypatch.setenv("CHAIN__RPC_URL", "http://node:8545")
    monkeypatch.setenv("ENVIRONMENT", "testnet")

    settings = Settings()

    assert settings.chain.rpc_url == "http://node:8545"
    assert settings.environment == Environment.TESTNET


def test_monitoring_settings():
    monitoring = MonitoringSettings(log_format="text", log_level="DEBUG")

    assert monitoring.log_format == "text"
    assert monitoring.log_level == "DEBUG"
    assert monitoring.log_file is None
