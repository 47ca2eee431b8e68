from enum import Enum

from modules.config import logger


class SchedulerState(Enum):
    IDLE = "idle"
    RUNNING_CYCLE = "running_cycle"
    WAITING = "waiting"


class CycleScheduler:
    """
    Runs every wallet one after another, then sleeps until the next cycle.

    `wallet_factory(private_key, index, total)` builds the wallet handed to
    the runner. With `max_cycles=None` the loop never ends on its own.
    """

    def __init__(self, config, runner, wallet_factory, pacer):
        self.config = config
        self.runner = runner
        self.wallet_factory = wallet_factory
        self.pacer = pacer
        self.state = SchedulerState.IDLE
        self.cycles_done = 0

    def run(self, max_cycles=None):
        while max_cycles is None or self.cycles_done < max_cycles:
            self.run_cycle()
            self.cycles_done += 1
            self.wait_for_next_cycle()

        self.state = SchedulerState.IDLE

    def run_cycle(self):
        self.state = SchedulerState.RUNNING_CYCLE
        keys = self.config.private_keys
        total = len(keys)

        logger.info(f"Starting cycle #{self.cycles_done + 1} for {total} wallet(s)\n")

        for index, key in enumerate(keys, start=1):
            try:
                wallet = self.wallet_factory(key, index, total)
                self.runner.run(wallet)
            except Exception as error:
                logger.error(f"[{index}/{total}] Error processing wallet: {error} \n")

    def wait_for_next_cycle(self):
        self.state = SchedulerState.WAITING
        hours = self.config.cycle_sleep_seconds / 3600

        logger.success(f"All done! Waiting {hours:g} hours before the next cycle")
        self.pacer.wait(self.config.cycle_sleep_seconds, label="Sleep until next cycle")
