"""
Async web3 proxies for the reserve, conversion rates and sanity rates contracts.
"""

from kyber_reserve.contracts.base import BaseContract
from kyber_reserve.contracts.conversion_rates import LATEST_BLOCK, ConversionRatesContract
from kyber_reserve.contracts.reserve import ReserveContract
from kyber_reserve.contracts.sanity_rates import SanityRatesContract

__all__ = [
    "BaseContract",
    "ReserveContract",
    "ConversionRatesContract",
    "SanityRatesContract",
    "LATEST_BLOCK",
]
