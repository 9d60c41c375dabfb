"""
Value objects exchanged with the reserve contracts.
"""

from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ReserveAddresses(BaseModel):
    """Addresses of the contracts that make up one reserve deployment."""
    model_config = ConfigDict(frozen=True)

    reserve: Optional[str] = Field(default=None, description="Reserve contract")
    conversion_rates: Optional[str] = Field(default=None, description="Conversion rates contract")
    sanity_rates: Optional[str] = Field(default=None, description="Sanity rates contract, if deployed")


class TxOptions(BaseModel):
    """Per-call transaction options forwarded untouched to the node."""
    model_config = ConfigDict(frozen=True)

    gas_price: Optional[int] = Field(default=None, ge=0, description="Gas price in wei")


class TokenControlInfo(BaseModel):
    """Imbalance limits recorded by the conversion rates contract for a token.

    Accepts the contract's camelCase names as well.
    """
    minimal_record_resolution: int = Field(
        ge=0,
        validation_alias=AliasChoices("minimal_record_resolution", "minimalRecordResolution"),
        description="Smallest recorded imbalance unit, in token wei",
    )
    max_per_block_imbalance: int = Field(
        ge=0,
        validation_alias=AliasChoices("max_per_block_imbalance", "maxPerBlockImbalance"),
        description="Max imbalance within one block",
    )
    max_total_imbalance: int = Field(
        ge=0,
        validation_alias=AliasChoices("max_total_imbalance", "maxTotalImbalance"),
        description="Max imbalance between rate updates",
    )


class StepFunctionDataPoint(BaseModel):
    """One step of a quantity or imbalance step function."""
    x: int = Field(description="Quantity / imbalance threshold in token wei")
    y: int = Field(description="Rate adjustment in basis points")


class RateSetting(BaseModel):
    """Base buy and sell rate for a token."""
    address: str = Field(validation_alias=AliasChoices("address", "token"), description="Token address")
    buy: int = Field(ge=0, description="Base buy rate")
    sell: int = Field(ge=0, description="Base sell rate")


class SanityBound(BaseModel):
    """Reasonable deviation of a token's rate from its sanity rate."""
    address: str = Field(description="Token address")
    diff_bps: int = Field(ge=0, lt=10000, description="Reasonable difference in basis points")
