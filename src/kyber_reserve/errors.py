"""
Reserve-related error handling and exception classes.

Failures raised by web3 or by the node (reverts, connection errors,
authorization rejections) are not wrapped here; they reach the caller as-is.
The one exception is a token registration that stops after some of its
transactions were already submitted.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional


class ReserveError(Exception):
    """Base exception for reserve management errors."""

    def __init__(self, message: str, address: Optional[str] = None):
        self.address = address
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(message)


class ConfigurationError(ReserveError):
    """Raised when a mandatory contract address is missing or malformed."""

    def __init__(self, contract: str, address: Optional[str] = None):
        self.contract = contract
        if address:
            message = f"Invalid {contract} contract address: {address!r}"
        else:
            message = f"Missing {contract} contract address"
        super().__init__(message, address)


class ContractArgumentError(ReserveError):
    """Raised by a contract proxy when call arguments have the wrong shape."""

    pass


class TokenRegistrationError(ReserveError):
    """Raised when token registration stops after some transactions went out.

    `submitted` maps each already submitted contract function to its
    transaction hash, so the caller can wait for them and call again.
    """

    def __init__(self, token: str, step: str, submitted: Dict[str, str]):
        self.step = step
        self.submitted = dict(submitted)
        super().__init__(
            f"Registration of {token} failed at {step} "
            f"(already submitted: {', '.join(self.submitted) or 'none'})",
            token,
        )


class Unconfigured(Enum):
    """Marker returned by sanity-rate operations on a reserve without sanity rates."""

    SANITY_RATES = "sanity_rates"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_CONFIGURED"


NOT_CONFIGURED = Unconfigured.SANITY_RATES
