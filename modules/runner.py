import random

from models.cycle_state import CycleState
from models.operation import Action, OperationRecord
from modules.config import logger
from modules.history import HistoryWriteError
from modules.policy import can_afford, select_action
from modules.stats import show_statistics
from modules.utils import get_rand_amount, get_rand_delay, get_rand_tx_count


class WalletCycleRunner:
    """
    Runs one daily cycle for one wallet.

    `wallet` is anything with `address`, `label`, `get_native_balance()`,
    `get_token_balance()`, `deposit(amount)` and `withdraw(amount)`, the
    last two returning the transaction hash.
    """

    def __init__(self, config, history, pacer, rng=None, chain=None):
        self.config = config
        self.history = history
        self.pacer = pacer
        self.rng = rng or random.Random()
        self.token = chain.token if chain else "ETH"
        self.wrapped_token = chain.wrapped_token if chain else "WETH"

    def run(self, wallet) -> CycleState:
        state = CycleState(turns_remaining=get_rand_tx_count(self.config.tx_count, self.rng))

        show_statistics(self.history, wallet.address)
        logger.info(f"{wallet.label} {state.turns_remaining} transaction(s) planned")

        while state.turns_remaining > 0:
            state.consume_turn()
            self.run_turn(wallet, state)

        logger.info(
            f"{wallet.label} Cycle done: {state.submitted} sent, "
            f"{state.skipped} skipped, {state.failed} failed\n"
        )
        return state

    def run_turn(self, wallet, state):
        action = select_action(state)
        if action is Action.UNWRAP:
            state.mark_unwrap_selected()

        amount = get_rand_amount(self.config.tx_amount, self.rng)

        if action is Action.WRAP:
            balance, symbol = wallet.get_native_balance(), self.token
        else:
            balance, symbol = wallet.get_token_balance(), self.wrapped_token

        if not can_afford(balance, amount):
            logger.warning(
                f"{wallet.label} Not enough {symbol} to {action.value.lower()} {amount} "
                f"(balance {balance}), skipping"
            )
            state.skipped += 1
            return

        logger.info(f"{wallet.label} {action.value}ping {amount} {symbol}")
        tx_hash = self.submit(wallet, action, amount, state)

        if tx_hash:
            self.save_record(wallet, action, amount, tx_hash)

        self.pace()

    def submit(self, wallet, action, amount, state):
        try:
            if action is Action.WRAP:
                tx_hash = wallet.deposit(amount)
            else:
                tx_hash = wallet.withdraw(amount)
        except Exception as error:
            logger.error(f"{wallet.label} {action.value} of {amount} failed: {error}")
            state.failed += 1
            return None

        state.submitted += 1
        if action is Action.WRAP:
            state.mark_wrap_succeeded()
        return tx_hash

    def save_record(self, wallet, action, amount, tx_hash):
        record = OperationRecord(
            action=action,
            amount=amount,
            account=wallet.address,
            tx_hash=tx_hash,
            timestamp=self.history.now(),
        )

        try:
            self.history.append(record)
        except HistoryWriteError as error:
            logger.critical(
                f"{wallet.label} {action.value} {amount} went through as {tx_hash} "
                f"but was NOT saved to history: {error}"
            )

    def pace(self):
        delay = get_rand_delay(self.config.tx_delay_ms, self.rng)
        logger.info(f"Waiting {delay} seconds before the next transaction")
        self.pacer.wait(delay, label="Sleep until next transaction")
