from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest
from web3 import Web3
from web3.exceptions import TimeExhausted

from modules.config import get_chain_target
from modules.wallet import TransactionError
from modules.wrapper import Wrapper

PRIVATE_KEY = "0x" + "11" * 32
TX_HASH = bytes.fromhex("ab" * 32)


def make_wrapper(**kwargs):
    wrapper = Wrapper(PRIVATE_KEY, get_chain_target("lisk"), **kwargs)
    wrapper._decimals = 18
    return wrapper


def test_label_includes_counter_and_address():
    wrapper = make_wrapper(counter="[1/3]")

    assert wrapper.label == f"[1/3] {wrapper.address} |"
    assert wrapper.contract.address == "0x4200000000000000000000000000000000000006"


def test_to_token_units_keeps_all_decimals():
    wrapper = make_wrapper()

    assert wrapper.to_token_units(Decimal("0.5")) == 5 * 10**17
    assert wrapper.to_token_units(Decimal("0.00000001")) == 10**10



def fake_web3(receipt=None, error=None):
    def wait_for_transaction_receipt(tx_hash, timeout):
        if error:
            raise error
        return receipt

    eth = SimpleNamespace(
        account=SimpleNamespace(
            sign_transaction=lambda tx, key: SimpleNamespace(raw_transaction=b"\x01")
        ),
        send_raw_transaction=lambda raw: TX_HASH,
        wait_for_transaction_receipt=wait_for_transaction_receipt,
    )
    return SimpleNamespace(eth=eth, to_hex=Web3.to_hex)


def test_send_tx_returns_hash_on_success():
    wrapper = make_wrapper()
    wrapper.web3 = fake_web3(receipt=SimpleNamespace(status=1))

    assert wrapper.send_tx({}, tx_label="wrap") == "0x" + "ab" * 32


def test_receipt_timeout_error_carries_tx_hash():
    wrapper = make_wrapper()
    wrapper.web3 = fake_web3(error=TimeExhausted("not in chain after 400 seconds"))

    with pytest.raises(TransactionError) as excinfo:
        wrapper.send_tx({}, tx_label="wrap")

    assert "0x" + "ab" * 32 in str(excinfo.value)
    assert "not confirmed in time" in str(excinfo.value)


def test_reverted_tx_raises_with_tx_hash():
    wrapper = make_wrapper()
    wrapper.web3 = fake_web3(receipt=SimpleNamespace(status=0))

    with pytest.raises(TransactionError, match="reverted"):
        wrapper.send_tx({}, tx_label="wrap")
