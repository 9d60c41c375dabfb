"""
Single entry point for managing a reserve.

A reserve is made of three contracts: the reserve itself, its conversion rates
and, optionally, its sanity rates. `ReserveFacade` routes each operation to the
contract that owns it. When no sanity rates contract was given, sanity rate
operations return `NOT_CONFIGURED` without touching the network.
"""

from typing import Any, Mapping, Optional, Sequence, Union

import aiohttp
from eth_account.signers.local import LocalAccount
from eth_utils import is_address
from pydantic import ValidationError
from web3 import AsyncHTTPProvider, AsyncWeb3

from kyber_reserve.config import Settings
from kyber_reserve.contracts import (
    LATEST_BLOCK,
    ConversionRatesContract,
    ReserveContract,
    SanityRatesContract,
)
from kyber_reserve.contracts.conversion_rates import BlockNumber
from kyber_reserve.errors import NOT_CONFIGURED, ConfigurationError, Unconfigured
from kyber_reserve.logging import get_logger, trace_context
from kyber_reserve.models import (
    RateSetting,
    ReserveAddresses,
    StepFunctionDataPoint,
    TokenControlInfo,
    TxOptions,
)

logger = get_logger(__name__)


def _require_address(contract: str, address: Optional[str]) -> str:
    if not address:
        raise ConfigurationError(contract)
    if not is_address(address):
        raise ConfigurationError(contract, address)
    return address


class ReserveFacade:
    """Routes reserve management calls to the reserve, conversion rates and sanity rates contracts."""

    def __init__(
        self,
        provider: AsyncWeb3,
        addresses: Union[ReserveAddresses, Mapping[str, Optional[str]]],
    ):
        """
        Args:
            provider: connected AsyncWeb3 instance used by every proxy
            addresses: reserve and conversion_rates are mandatory,
                sanity_rates is optional

        Raises:
            ConfigurationError: reserve or conversion_rates address missing or malformed
        """
        if not isinstance(addresses, ReserveAddresses):
            try:
                addresses = ReserveAddresses.model_validate(dict(addresses))
            except ValidationError as exc:
                error = exc.errors()[0]
                raise ConfigurationError(str(error["loc"][0]), str(error.get("input"))) from exc

        reserve_address = _require_address("reserve", addresses.reserve)
        conversion_rates_address = _require_address("conversion_rates", addresses.conversion_rates)

        self.addresses = addresses
        self.reserve = ReserveContract(provider, reserve_address)
        self.conversion_rates = ConversionRatesContract(provider, conversion_rates_address)

        # Decided once; a reserve without sanity rates stays without them.
        self.sanity_rates: Optional[SanityRatesContract] = None
        if addresses.sanity_rates:
            sanity_rates_address = _require_address("sanity_rates", addresses.sanity_rates)
            self.sanity_rates = SanityRatesContract(provider, sanity_rates_address)

        logger.info(
            "Reserve facade ready",
            reserve=self.reserve.address,
            conversion_rates=self.conversion_rates.address,
            sanity_rates=self.sanity_rates.address if self.sanity_rates else None,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReserveFacade":
        """Build a facade from the configured RPC endpoint and contract addresses."""
        provider = AsyncWeb3(
            AsyncHTTPProvider(
                settings.chain.rpc_url,
                request_kwargs={"timeout": aiohttp.ClientTimeout(total=settings.chain.request_timeout)},
            )
        )
        addresses = ReserveAddresses(
            reserve=settings.contracts.reserve,
            conversion_rates=settings.contracts.conversion_rates,
            sanity_rates=settings.contracts.sanity_rates,
        )
        return cls(provider, addresses)

    @property
    def has_sanity_rates(self) -> bool:
        return self.sanity_rates is not None

    async def _forward(self, target: Any, method: str, *args: Any) -> Any:
        """Await `method` on the owning proxy with the caller's arguments untouched.

        Logs emitted while the call runs share one trace_id, reusing the
        caller's when it already opened a trace_context.
        """
        with trace_context():
            logger.debug(f"Routing {method} to {target!r}")
            return await getattr(target, method)(*args)

    # Trade switch

    async def enable_trade(self, account: LocalAccount, tx: Optional[TxOptions] = None) -> str:
        return await self._forward(self.reserve, "enable_trade", account, tx)

    async def disable_trade(self, account: LocalAccount, tx: Optional[TxOptions] = None) -> str:
        return await self._forward(self.reserve, "disable_trade", account, tx)

    async def trade_enabled(self) -> bool:
        return await self._forward(self.reserve, "trade_enabled")

    # Contracts trusted by the reserve. These are whatever the reserve
    # reports and may differ from the addresses this facade was built with.

    async def set_contracts(
        self,
        account: LocalAccount,
        network: str,
        conversion: str,
        sanity: Optional[str] = None,
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._forward(self.reserve, "set_contracts", account, network, conversion, sanity, tx)

    async def conversion_rates_contract(self) -> str:
        return await self._forward(self.reserve, "conversion_rates_contract")

    async def sanity_rates_contract(self) -> str:
        return await self._forward(self.reserve, "sanity_rates_contract")

    async def kyber_network(self) -> str:
        return await self._forward(self.reserve, "kyber_network")

    # Withdrawals

    async def approve_withdraw_address(
        self,
        account: LocalAccount,
        token: str,
        withdraw_address: str,
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._forward(self.reserve, "approve_withdraw_address", account, token, withdraw_address, tx)

    async def disapprove_withdraw_address(
        self,
        account: LocalAccount,
        token: str,
        withdraw_address: str,
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._forward(self.reserve, "disapprove_withdraw_address", account, token, withdraw_address, tx)

    async def approved_withdraw_addresses(self, address: str, token: str) -> bool:
        return await self._forward(self.reserve, "approved_withdraw_addresses", address, token)

    async def withdraw(
        self,
        account: LocalAccount,
        token: str,
        amount: int,
        to_address: str,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Withdraw `amount` token wei. Approval of `to_address` is checked on-chain, not here."""
        return await self._forward(self.reserve, "withdraw", account, token, amount, to_address, tx)

    async def get_balance(self, token: str) -> int:
        return await self._forward(self.reserve, "get_balance", token)

    # Sanity rates

    def _sanity_unconfigured(self, method: str) -> bool:
        if self.sanity_rates is None:
            logger.debug(f"{method} skipped: reserve has no sanity rates contract")
            return True
        return False

    async def set_sanity_rates(
        self,
        account: LocalAccount,
        srcs: Sequence[str],
        rates: Sequence[int],
        tx: Optional[TxOptions] = None,
    ) -> Union[str, Unconfigured]:
        if self._sanity_unconfigured("set_sanity_rates"):
            return NOT_CONFIGURED
        return await self._forward(self.sanity_rates, "set_sanity_rates", account, srcs, rates, tx)

    async def get_sanity_rate(self, src: str, dest: str) -> Union[int, Unconfigured]:
        if self._sanity_unconfigured("get_sanity_rate"):
            return NOT_CONFIGURED
        return await self._forward(self.sanity_rates, "get_sanity_rate", src, dest)

    async def reasonable_diff_in_bps(self, address: str) -> Union[int, Unconfigured]:
        if self._sanity_unconfigured("reasonable_diff_in_bps"):
            return NOT_CONFIGURED
        return await self._forward(self.sanity_rates, "reasonable_diff_in_bps", address)

    async def set_reasonable_diff(
        self,
        account: LocalAccount,
        addresses: Sequence[str],
        diffs: Sequence[int],
        tx: Optional[TxOptions] = None,
    ) -> Union[str, Unconfigured]:
        if self._sanity_unconfigured("set_reasonable_diff"):
            return NOT_CONFIGURED
        return await self._forward(self.sanity_rates, "set_reasonable_diff", account, addresses, diffs, tx)

    # Pricing

    async def add_token(
        self,
        account: LocalAccount,
        token: str,
        token_control_info: TokenControlInfo,
        tx: Optional[TxOptions] = None,
    ) -> Any:
        """Register `token` with its control info and enable it for trading."""
        return await self._forward(self.conversion_rates, "add_token", account, token, token_control_info, tx)

    async def set_imbalance_step_function(
        self,
        account: LocalAccount,
        token: str,
        buy: Sequence[StepFunctionDataPoint],
        sell: Sequence[StepFunctionDataPoint],
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._forward(
            self.conversion_rates, "set_imbalance_step_function", account, token, buy, sell, tx
        )

    async def set_qty_step_function(
        self,
        account: LocalAccount,
        token: str,
        buy: Sequence[StepFunctionDataPoint],
        sell: Sequence[StepFunctionDataPoint],
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._forward(
            self.conversion_rates, "set_qty_step_function", account, token, buy, sell, tx
        )

    async def get_buy_rates(self, token: str, qty: int, block_number: BlockNumber = LATEST_BLOCK) -> int:
        """Buy rate for `qty` of `token` at `block_number` (latest block by default)."""
        return await self._forward(self.conversion_rates, "get_buy_rates", token, qty, block_number)

    async def get_sell_rates(self, token: str, qty: int, block_number: BlockNumber = LATEST_BLOCK) -> int:
        """Sell rate for `qty` of `token` at `block_number` (latest block by default)."""
        return await self._forward(self.conversion_rates, "get_sell_rates", token, qty, block_number)

    async def set_rate(
        self,
        account: LocalAccount,
        rates: Sequence[RateSetting],
        block_number: BlockNumber = LATEST_BLOCK,
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._forward(self.conversion_rates, "set_rate", account, rates, block_number, tx)
