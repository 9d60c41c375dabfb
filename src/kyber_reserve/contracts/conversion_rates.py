"""
Proxy for the conversion rates contract.

Rates are quoted per token, per direction, for a given quantity and block:
the base rate set by `set_rate` is shifted by the quantity step function and
by the imbalance step function before the contract returns it.

Value arguments may be given as models or as plain mappings
(`{"token": ..., "buy": ..., "sell": ...}`); mappings are validated into
the matching model before anything is sent.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3

from kyber_reserve.contracts.abi import CONVERSION_RATES_ABI
from kyber_reserve.contracts.base import BaseContract, checksum
from kyber_reserve.errors import TokenRegistrationError
from kyber_reserve.logging import get_logger
from kyber_reserve.models import (
    RateSetting,
    StepFunctionDataPoint,
    TokenControlInfo,
    TxOptions,
)

logger = get_logger(__name__)

# Block identifier meaning "whatever block the node has last seen"
LATEST_BLOCK = "latest"

BlockNumber = Union[int, str]

# Each compact data slot packs adjustments for this many tokens in a bytes14 word
COMPACT_WORD_TOKENS = 14

StepPoints = Sequence[Union[StepFunctionDataPoint, Mapping[str, Any]]]
RateSettings = Sequence[Union[RateSetting, Mapping[str, Any]]]


def _split_steps(points: StepPoints) -> Tuple[List[int], List[int]]:
    steps = [StepFunctionDataPoint.model_validate(point) for point in points]
    return [step.x for step in steps], [step.y for step in steps]


class ConversionRatesContract(BaseContract):
    """Token pricing configuration and rate queries."""

    def __init__(self, provider: AsyncWeb3, address: str):
        super().__init__(provider, address, CONVERSION_RATES_ABI)

    async def _resolve_block(self, block_number: Optional[BlockNumber]) -> int:
        if block_number is None or block_number == LATEST_BLOCK:
            return await self.provider.eth.block_number
        return block_number

    async def add_token(
        self,
        account: LocalAccount,
        token: str,
        token_control_info: Union[TokenControlInfo, Mapping[str, Any]],
        tx: Optional[TxOptions] = None,
    ) -> Dict[str, str]:
        """Register a token with its control info and enable it for trading.

        Steps the contract already reflects are skipped, so a registration
        that stopped halfway can be resumed by calling again.

        Returns:
            contract function name -> transaction hash, for the steps submitted

        Raises:
            TokenRegistrationError: a step failed after earlier steps were submitted
        """
        token = checksum(token)
        info = TokenControlInfo.model_validate(token_control_info)
        limits = (
            info.minimal_record_resolution,
            info.max_per_block_imbalance,
            info.max_total_imbalance,
        )
        submitted: Dict[str, str] = {}
        step = "getTokenBasicData"

        try:
            listed, enabled = await self._call("getTokenBasicData", token)
            if not listed:
                step = "addToken"
                submitted[step] = await self._transact(account, step, token, tx=tx)

            step = "getTokenControlInfo"
            if tuple(await self._call(step, token)) != limits:
                step = "setTokenControlInfo"
                submitted[step] = await self._transact(account, step, token, *limits, tx=tx)

            if not enabled:
                step = "enableTokenTrade"
                submitted[step] = await self._transact(account, step, token, tx=tx)
        except Exception as exc:
            if not submitted:
                raise
            logger.error(
                f"Token registration stopped at {step}", token=token, submitted=submitted, error=str(exc)
            )
            raise TokenRegistrationError(token, step, submitted) from exc

        if not submitted:
            logger.info("Token already registered, nothing submitted", token=token)
        return submitted

    async def _set_step_function(
        self,
        fn_name: str,
        account: LocalAccount,
        token: str,
        buy: StepPoints,
        sell: StepPoints,
        tx: Optional[TxOptions],
    ) -> str:
        x_buy, y_buy = _split_steps(buy)
        x_sell, y_sell = _split_steps(sell)
        return await self._transact(
            account, fn_name, checksum(token), x_buy, y_buy, x_sell, y_sell, tx=tx
        )

    async def set_imbalance_step_function(
        self,
        account: LocalAccount,
        token: str,
        buy: StepPoints,
        sell: StepPoints,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Adjust rates by the net traded amount since the last rate update. Operator only."""
        return await self._set_step_function("setImbalanceStepFunction", account, token, buy, sell, tx)

    async def set_qty_step_function(
        self,
        account: LocalAccount,
        token: str,
        buy: StepPoints,
        sell: StepPoints,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Adjust rates by the size of a single order. Operator only."""
        return await self._set_step_function("setQtyStepFunction", account, token, buy, sell, tx)

    async def get_buy_rates(self, token: str, qty: int, block_number: BlockNumber = LATEST_BLOCK) -> int:
        block = await self._resolve_block(block_number)
        return await self._call("getRate", checksum(token), block, True, qty)

    async def get_sell_rates(self, token: str, qty: int, block_number: BlockNumber = LATEST_BLOCK) -> int:
        block = await self._resolve_block(block_number)
        return await self._call("getRate", checksum(token), block, False, qty)

    async def compact_data_index(self, token: str) -> int:
        """Index of the compact data slot holding `token`'s adjustments."""
        array_index, _, _, _ = await self._call("getCompactData", checksum(token))
        return array_index

    async def set_rate(
        self,
        account: LocalAccount,
        rates: RateSettings,
        block_number: BlockNumber = LATEST_BLOCK,
        tx: Optional[TxOptions] = None,
    ) -> str:
        """Set base buy/sell rates for a batch of tokens.

        Every compact data slot holding one of the tokens is rewritten with
        zero adjustments and stamped with the block, so its tokens' rates are
        fresh again. Other tokens sharing those slots lose their adjustments too.
        """
        settings = [RateSetting.model_validate(rate) for rate in rates]
        tokens = [checksum(setting.address) for setting in settings]
        block = await self._resolve_block(block_number)

        indices: List[int] = []
        for token in tokens:
            index = await self.compact_data_index(token)
            if index not in indices:
                indices.append(index)
        compact = [bytes(COMPACT_WORD_TOKENS)] * len(indices)

        return await self._transact(
            account,
            "setBaseRate",
            tokens,
            [setting.buy for setting in settings],
            [setting.sell for setting in settings],
            compact,
            compact,
            block,
            indices,
            tx=tx,
        )
