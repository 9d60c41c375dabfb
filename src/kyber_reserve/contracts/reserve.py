"""
Proxy for the reserve contract.
"""

from typing import Optional

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3

from kyber_reserve.contracts.abi import RESERVE_ABI
from kyber_reserve.contracts.base import BaseContract, ZERO_ADDRESS, checksum
from kyber_reserve.models import TxOptions


class ReserveContract(BaseContract):
    """Trade switch, withdrawals, balances and trusted contract addresses."""

    def __init__(self, provider: AsyncWeb3, address: str):
        super().__init__(provider, address, RESERVE_ABI)

    async def enable_trade(self, account: LocalAccount, tx: Optional[TxOptions] = None) -> str:
        """Allow the reserve to trade. Admin only."""
        return await self._transact(account, "enableTrade", tx=tx)

    async def disable_trade(self, account: LocalAccount, tx: Optional[TxOptions] = None) -> str:
        """Stop the reserve from trading. Alerter only."""
        return await self._transact(account, "disableTrade", tx=tx)

    async def trade_enabled(self) -> bool:
        return await self._call("tradeEnabled")

    async def set_contracts(
        self,
        account: LocalAccount,
        network: str,
        conversion: str,
        sanity: Optional[str] = None,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Set the network, conversion rates and sanity rates contracts the reserve trusts.

        An omitted sanity rates address is recorded as the zero address.
        """
        return await self._transact(
            account,
            "setContracts",
            checksum(network),
            checksum(conversion),
            checksum(sanity) if sanity else ZERO_ADDRESS,
            tx=tx,
        )

    async def conversion_rates_contract(self) -> str:
        return await self._call("conversionRatesContract")

    async def sanity_rates_contract(self) -> str:
        return await self._call("sanityRatesContract")

    async def kyber_network(self) -> str:
        return await self._call("kyberNetwork")

    async def approve_withdraw_address(
        self,
        account: LocalAccount,
        token: str,
        withdraw_address: str,
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._transact(
            account, "approveWithdrawAddress", checksum(token), checksum(withdraw_address), True, tx=tx
        )

    async def disapprove_withdraw_address(
        self,
        account: LocalAccount,
        token: str,
        withdraw_address: str,
        tx: Optional[TxOptions] = None,
    ) -> str:
        return await self._transact(
            account, "approveWithdrawAddress", checksum(token), checksum(withdraw_address), False, tx=tx
        )

    async def approved_withdraw_addresses(self, address: str, token: str) -> bool:
        """Whether `address` may receive withdrawals of `token`."""
        # approvals are keyed by keccak256(abi.encodePacked(token, address))
        key = Web3.solidity_keccak(["address", "address"], [checksum(token), checksum(address)])
        return await self._call("approvedWithdrawAddresses", key)

    async def withdraw(
        self,
        account: LocalAccount,
        token: str,
        amount: int,
        to_address: str,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Withdraw `amount` (token wei) of `token` to an approved address."""
        return await self._transact(
            account, "withdraw", checksum(token), amount, checksum(to_address), tx=tx
        )

    async def get_balance(self, token: str) -> int:
        return await self._call("getBalance", checksum(token))
