"""
Centralized configuration management using pydantic-settings.
Provider and contract addresses for a reserve deployment are read from here.
"""

from typing import Optional
from enum import Enum
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTNET = "testnet"


class ChainSettings(BaseSettings):
    """Node connection settings."""
    rpc_url: str = Field(default="http://localhost:8545", description="JSON-RPC endpoint of the node")
    request_timeout: int = Field(default=30, description="HTTP request timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="CHAIN_")


class ContractSettings(BaseSettings):
    """Deployed contract addresses of the reserve."""
    reserve: Optional[str] = Field(default=None, description="Reserve contract address")
    conversion_rates: Optional[str] = Field(default=None, description="Conversion rates contract address")
    sanity_rates: Optional[str] = Field(default=None, description="Sanity rates contract address (optional)")

    model_config = SettingsConfigDict(env_prefix="CONTRACTS_")


class MonitoringSettings(BaseSettings):
    """Logging settings."""
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Log format (json or text)")
    log_file: Optional[str] = Field(default=None, description="Log file path")

    model_config = SettingsConfigDict(env_prefix="MONITORING_")


class Settings(BaseSettings):
    """Main settings class combining all settings."""
    # Environment
    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Environment")
    service_name: str = Field(default="kyber-reserve", description="Service name")

    # Sub-settings
    chain: ChainSettings = Field(default_factory=ChainSettings)
    contracts: ContractSettings = Field(default_factory=ContractSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
