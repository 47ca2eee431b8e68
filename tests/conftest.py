"""
Pytest fixtures for the wrap/unwrap scheduler. Nothing here touches the network:
wallets, clocks, random draws and pacing are all fakes.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from itertools import count

import pytest

from models.operation import Action, OperationRecord
from modules.config import Bounds, RunConfig, logger
from modules.history import HistoryStore

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
ADDRESS = "0x1111111111111111111111111111111111111111"
OTHER_ADDRESS = "0x2222222222222222222222222222222222222222"


class FakeClock:
    """Monotonic clock whose sleep just moves time forward."""

    def __init__(self, start=0.0, overshoot=0.0):
        self.now = start
        self.overshoot = overshoot
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        # Negative overshoot means sleep wakes up early, but time still moves
        self.now += max(seconds + self.overshoot, 0.1)


class ScriptedRandom:
    """Always picks the lower bound unless told otherwise."""

    def __init__(self, tx_count=None):
        self.tx_count = tx_count

    def randint(self, low, high):
        return self.tx_count if self.tx_count is not None else low

    def uniform(self, low, high):
        return low


class FakePacer:
    def __init__(self, on_wait=None):
        self.waits = []
        self.on_wait = on_wait

    def wait(self, seconds, label=""):
        self.waits.append((seconds, label))
        if self.on_wait:
            self.on_wait(seconds, label)


class FakeWallet:
    def __init__(
        self, native="1.0", token="0.0", address=ADDRESS, fail_with=None, fail_unwrap=None
    ):
        self.address = address
        self.label = f"{address} |"
        self.native = Decimal(native)
        self.token = Decimal(token)
        self.fail_with = fail_with
        self.fail_unwrap = fail_unwrap
        self.deposits = []
        self.withdrawals = []
        self.balance_calls = []
        self._tx = 0

    def get_native_balance(self):
        self.balance_calls.append("native")
        return self.native

    def get_token_balance(self):
        self.balance_calls.append("token")
        return self.token

    def _next_hash(self):
        self._tx += 1
        return f"0x{self._tx:064x}"

    def deposit(self, amount):
        if self.fail_with:
            raise self.fail_with
        self.deposits.append(amount)
        return self._next_hash()

    def withdraw(self, amount):
        failure = self.fail_unwrap or self.fail_with
        if failure:
            raise failure
        self.withdrawals.append(amount)
        return self._next_hash()


_hashes = count(1)


def make_record(age: timedelta, account=ADDRESS, action=Action.WRAP, amount="0.1"):
    return OperationRecord(
        action=action,
        amount=Decimal(amount),
        account=account,
        tx_hash=f"0x{next(_hashes):064x}",
        timestamp=NOW - age,
    )


def make_config(**overrides) -> RunConfig:
    values = dict(
        chain="lisk",
        private_keys=("0xaaa", "0xbbb", "0xccc"),
        tx_count=Bounds(2, 2),
        tx_amount=Bounds(Decimal("0.1"), Decimal("0.5")),
        tx_delay_ms=Bounds(5000, 10000),
        cycle_sleep_seconds=23 * 60 * 60,
    )
    values.update(overrides)
    return RunConfig(**values)


@pytest.fixture
def log_messages():
    """Collects loguru output as "LEVEL | message" lines."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def history():
    return HistoryStore(now=lambda: NOW)


@pytest.fixture
def pacer():
    return FakePacer()


@pytest.fixture
def config():
    return make_config()
