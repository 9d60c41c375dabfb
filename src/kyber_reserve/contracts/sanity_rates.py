"""
Proxy for the sanity rates contract.
"""

from typing import List, Optional, Sequence

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3

from kyber_reserve.contracts.abi import SANITY_RATES_ABI
from kyber_reserve.contracts.base import BaseContract, checksum, checksum_all
from kyber_reserve.errors import ContractArgumentError
from kyber_reserve.models import SanityBound, TxOptions


def _check_lengths(name: str, addresses: Sequence[str], values: Sequence[int]) -> None:
    if len(addresses) != len(values):
        raise ContractArgumentError(
            f"{name}: got {len(addresses)} addresses but {len(values)} values"
        )


class SanityRatesContract(BaseContract):
    """Reference rates used to reject anomalous conversion rates."""

    def __init__(self, provider: AsyncWeb3, address: str):
        super().__init__(provider, address, SANITY_RATES_ABI)

    async def set_sanity_rates(
        self,
        account: LocalAccount,
        srcs: Sequence[str],
        rates: Sequence[int],
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Set ETH-based sanity rates for source tokens. Operator only."""
        _check_lengths("setSanityRates", srcs, rates)
        return await self._transact(account, "setSanityRates", checksum_all(srcs), list(rates), tx=tx)

    async def get_sanity_rate(self, src: str, dest: str) -> int:
        return await self._call("getSanityRate", checksum(src), checksum(dest))

    async def reasonable_diff_in_bps(self, address: str) -> int:
        return await self._call("reasonableDiffInBps", checksum(address))

    async def set_reasonable_diff(
        self,
        account: LocalAccount,
        addresses: Sequence[str],
        diffs: Sequence[int],
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Set how far, in bps, a rate may drift from its sanity rate. Admin only."""
        _check_lengths("setReasonableDiff", addresses, diffs)
        bounds: List[SanityBound] = [
            SanityBound(address=checksum(address), diff_bps=diff)
            for address, diff in zip(addresses, diffs)
        ]
        return await self._transact(
            account,
            "setReasonableDiff",
            [bound.address for bound in bounds],
            [bound.diff_bps for bound in bounds],
            tx=tx,
        )
