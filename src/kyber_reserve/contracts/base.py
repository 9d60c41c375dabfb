"""
Shared plumbing for the contract proxies: read calls and signed transactions.
"""

from typing import Any, List, Optional

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3

from kyber_reserve.logging import get_logger
from kyber_reserve.models import TxOptions

logger = get_logger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def checksum(address: str) -> str:
    """Normalise an address to its EIP-55 checksum form."""
    return Web3.to_checksum_address(address)


def checksum_all(addresses: List[str]) -> List[str]:
    return [checksum(address) for address in addresses]


class BaseContract:
    """Thin async wrapper around one deployed contract."""

    def __init__(self, provider: AsyncWeb3, address: str, abi: List[dict]):
        self.provider = provider
        self.address = checksum(address)
        self.contract = provider.eth.contract(address=self.address, abi=abi)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.address})"

    async def _call(self, fn_name: str, *args: Any) -> Any:
        """Run a view function against the latest state."""
        fn = getattr(self.contract.functions, fn_name)(*args)
        return await fn.call()

    async def _transact(
        self,
        account: LocalAccount,
        fn_name: str,
        *args: Any,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Sign and submit a state-changing call.

        Returns the transaction hash as soon as the node accepts the raw
        transaction; waiting for the receipt is left to the caller.
        """
        fn = getattr(self.contract.functions, fn_name)(*args)

        params = {
            "from": account.address,
            "nonce": await self.provider.eth.get_transaction_count(account.address, "pending"),
        }
        if tx is not None and tx.gas_price is not None:
            params["gasPrice"] = tx.gas_price

        transaction = await fn.build_transaction(params)
        signed = account.sign_transaction(transaction)
        tx_hash = Web3.to_hex(await self.provider.eth.send_raw_transaction(signed.raw_transaction))

        logger.info(
            f"Submitted {fn_name} to {self.address}",
            tx_hash=tx_hash,
            sender=account.address,
        )
        return tx_hash
