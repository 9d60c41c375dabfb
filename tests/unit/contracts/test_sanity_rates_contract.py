"""
Unit tests for the sanity rates contract proxy.
"""

import pytest
from pydantic import ValidationError

from conftest import OTHER_TOKEN, SANITY_RATES, TOKEN, TX_HASH
from kyber_reserve.contracts.sanity_rates import SanityRatesContract
from kyber_reserve.errors import ContractArgumentError


@pytest.fixture
def sanity_rates(provider):
    return SanityRatesContract(provider, SANITY_RATES)


@pytest.fixture
def functions(provider):
    return provider.eth.contract.return_value.functions


@pytest.mark.asyncio
async def test_set_sanity_rates(sanity_rates, functions, account, contract_function):
    contract_function("setSanityRates")

    result = await sanity_rates.set_sanity_rates(account, [TOKEN, OTHER_TOKEN], [10**18, 2 * 10**18])

    assert result == TX_HASH
    functions.setSanityRates.assert_called_once_with([TOKEN, OTHER_TOKEN], [10**18, 2 * 10**18])


@pytest.mark.asyncio
async def test_set_sanity_rates_length_mismatch(sanity_rates, provider, account):
    with pytest.raises(ContractArgumentError):
        await sanity_rates.set_sanity_rates(account, [TOKEN, OTHER_TOKEN], [10**18])

    provider.eth.send_raw_transaction.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_sanity_rate(sanity_rates, functions, contract_function):
    contract_function("getSanityRate", call_result=33 * 10**16)

    assert await sanity_rates.get_sanity_rate(TOKEN, OTHER_TOKEN) == 33 * 10**16
    functions.getSanityRate.assert_called_once_with(TOKEN, OTHER_TOKEN)


@pytest.mark.asyncio
async def test_reasonable_diff_in_bps(sanity_rates, functions, contract_function):
    contract_function("reasonableDiffInBps", call_result=500)

    assert await sanity_rates.reasonable_diff_in_bps(TOKEN) == 500
    functions.reasonableDiffInBps.assert_called_once_with(TOKEN)


@pytest.mark.asyncio
async def test_set_reasonable_diff(sanity_rates, functions, account, contract_function):
    contract_function("setReasonableDiff")

    await sanity_rates.set_reasonable_diff(account, [TOKEN, OTHER_TOKEN], [250, 9999])

    functions.setReasonableDiff.assert_called_once_with([TOKEN, OTHER_TOKEN], [250, 9999])


@pytest.mark.asyncio
async def test_set_reasonable_diff_rejects_full_percentage(sanity_rates, provider, account):
    with pytest.raises(ValidationError):
        await sanity_rates.set_reasonable_diff(account, [TOKEN], [10000])

    provider.eth.send_raw_transaction.assert_not_awaited()


@pytest.mark.asyncio
async def test_set_reasonable_diff_length_mismatch(sanity_rates, account):
    with pytest.raises(ContractArgumentError, match="setReasonableDiff"):
        await sanity_rates.set_reasonable_diff(account, [TOKEN], [])
