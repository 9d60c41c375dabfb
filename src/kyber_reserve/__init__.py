"""
kyber-reserve - manage a Kyber-style liquidity reserve through one facade.

The facade routes calls to the reserve, conversion rates and (optional)
sanity rates contracts over an async web3 provider.
"""

from kyber_reserve.contracts import LATEST_BLOCK
from kyber_reserve.errors import (
    NOT_CONFIGURED,
    ConfigurationError,
    ContractArgumentError,
    ReserveError,
    TokenRegistrationError,
)
from kyber_reserve.facade import ReserveFacade
from kyber_reserve.models import (
    RateSetting,
    ReserveAddresses,
    SanityBound,
    StepFunctionDataPoint,
    TokenControlInfo,
    TxOptions,
)

__all__ = [
    "ReserveFacade",
    "ReserveAddresses",
    "TokenControlInfo",
    "StepFunctionDataPoint",
    "RateSetting",
    "SanityBound",
    "TxOptions",
    "LATEST_BLOCK",
    "NOT_CONFIGURED",
    "ReserveError",
    "ConfigurationError",
    "ContractArgumentError",
    "TokenRegistrationError",
]
