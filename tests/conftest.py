"""Shared pytest fixtures and configuration."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

RESERVE = "0x" + "1" * 40
CONVERSION_RATES = "0x" + "2" * 40
SANITY_RATES = "0x" + "3" * 40
NETWORK = "0x" + "7" * 40
TOKEN = "0x" + "4" * 40
OTHER_TOKEN = "0x" + "5" * 40
WALLET = "0x" + "6" * 40
OPERATOR = "0x" + "9" * 40

TX_HASH_BYTES = b"\xab" * 32
TX_HASH = "0x" + "ab" * 32


class Awaitable:
    """Value that can be awaited any number of times, like `eth.block_number`."""

    def __init__(self, value):
        self.value = value

    def __await__(self):
        if False:
            yield
        return self.value


@pytest.fixture
def account():
    """Signing account stub with a fixed address."""
    account = MagicMock()
    account.address = OPERATOR
    account.sign_transaction.return_value = SimpleNamespace(raw_transaction=b"signed")
    return account


@pytest.fixture
def provider():
    """AsyncWeb3 stand-in whose contracts are MagicMocks."""
    provider = MagicMock()
    provider.eth.contract.return_value = MagicMock()
    provider.eth.get_transaction_count = AsyncMock(return_value=7)
    provider.eth.send_raw_transaction = AsyncMock(return_value=TX_HASH_BYTES)
    provider.eth.block_number = Awaitable(20_000_000)
    return provider


@pytest.fixture
def contract_function(provider):
    """Install a stub for `contract.functions.<name>(...)` and return it."""

    def install(name, call_result=None):
        fn = MagicMock()
        fn.build_transaction = AsyncMock(side_effect=lambda params: dict(params, data="0x"))
        fn.call = AsyncMock(return_value=call_result)
        getattr(provider.eth.contract.return_value.functions, name).return_value = fn
        return fn

    return install


@pytest.fixture
def proxies():
    """Patch the three proxy classes used by the facade."""
    with patch("kyber_reserve.facade.ReserveContract") as reserve_cls, \
            patch("kyber_reserve.facade.ConversionRatesContract") as conversion_rates_cls, \
            patch("kyber_reserve.facade.SanityRatesContract") as sanity_rates_cls:
        reserve_cls.return_value = AsyncMock(address=RESERVE)
        conversion_rates_cls.return_value = AsyncMock(address=CONVERSION_RATES)
        sanity_rates_cls.return_value = AsyncMock(address=SANITY_RATES)
        yield SimpleNamespace(
            reserve_cls=reserve_cls,
            conversion_rates_cls=conversion_rates_cls,
            sanity_rates_cls=sanity_rates_cls,
            reserve=reserve_cls.return_value,
            conversion_rates=conversion_rates_cls.return_value,
            sanity_rates=sanity_rates_cls.return_value,
        )


@pytest.fixture
def compact_slots(provider):
    """Answer `getCompactData(token)` with the slot index given per token."""

    def install(slots):
        def get_compact_data(token):
            fn = MagicMock()
            fn.call = AsyncMock(return_value=(slots[token], 0, b"\x00", b"\x00"))
            return fn

        provider.eth.contract.return_value.functions.getCompactData.side_effect = get_compact_data

    return install
