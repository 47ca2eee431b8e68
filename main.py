import os
import sys
from datetime import timedelta
from itertools import cycle
from random import shuffle

import settings
from modules.config import ConfigError, get_chain_target, load_run_config, logger
from modules.history import HistoryReadError, JsonHistoryStore
from modules.pacing import Pacer
from modules.runner import WalletCycleRunner
from modules.scheduler import CycleScheduler
from modules.wrapper import Wrapper


def load_keys(file_path):
    if not os.path.exists(file_path):
        raise ConfigError(f"{file_path} not found")

    with open(file_path) as f:
        keys = [row.strip() for row in f if row.strip()]
    return keys


def load_proxies(file_path):
    if not os.path.exists(file_path):
        return []

    with open(file_path) as file:
        proxies = [f"http://{row.strip()}" for row in file if row.strip()]
    return proxies


def prepare_wallets(keys, proxies, shuffle_wallets):
    # Cycle proxies if there are fewer proxies than keys
    if proxies and len(keys) > len(proxies):
        proxies = [proxy for proxy, _ in zip(cycle(proxies), range(len(keys)))]

    # Shuffle together if needed
    if shuffle_wallets and proxies:
        combined = list(zip(keys, proxies))
        shuffle(combined)
        keys, proxies = zip(*combined)
        keys, proxies = list(keys), list(proxies)

    elif shuffle_wallets:
        keys = list(keys)
        shuffle(keys)

    return keys, proxies


def main():
    keys = load_keys("keys.txt")
    proxies = load_proxies("proxies.txt") if settings.USE_PROXY else []

    if settings.USE_PROXY and not proxies:
        logger.warning("Proxies are enabled but proxies.txt is empty")

    keys, proxies = prepare_wallets(keys, proxies, settings.SHUFFLE_WALLETS)

    config = load_run_config(settings, keys, proxies)
    chain = get_chain_target(config.chain)

    history = JsonHistoryStore(
        config.history_file,
        retention=timedelta(days=config.history_retention_days),
    )
    pacer = Pacer()
    runner = WalletCycleRunner(config, history, pacer, chain=chain)

    def wallet_factory(key, index, total):
        return Wrapper(key, chain, f"[{index}/{total}]", config.get_proxy(index))

    logger.info(f"Running on {chain.name} with {len(config.private_keys)} wallet(s)")
    CycleScheduler(config, runner, wallet_factory, pacer).run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.warning("Cancelled by the user")
    except (ConfigError, HistoryReadError) as e:
        logger.error(e)
        sys.exit(1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        sys.exit(1)
