from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from sys import stderr

from loguru import logger

logger.remove()
logger.add(stderr, format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>")
logger.add(
    f"reports/debug-{datetime.today().strftime('%Y-%m-%d')}.log",
    format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>",
)

# Network data
CHAIN_DATA = {
    "ethereum": {
        "rpc": "https://rpc.ankr.com/eth",
        "explorer": "https://etherscan.io",
        "token": "ETH",
        "wrapped_token": "WETH",
        "wrapped_token_address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "chain_id": 1,
    },
    "lisk": {
        "rpc": "https://rpc.api.lisk.com",
        "explorer": "https://blockscout.lisk.com",
        "token": "ETH",
        "wrapped_token": "WETH",
        "wrapped_token_address": "0x4200000000000000000000000000000000000006",
        "chain_id": 1135,
    },
    "linea": {
        "rpc": "https://rpc.linea.build",
        "explorer": "https://lineascan.build",
        "token": "ETH",
        "wrapped_token": "WETH",
        "wrapped_token_address": "0xe5D7C2a44FfDDf6b295A15c148167daaAf5Cf34f",
        "chain_id": 59144,
    },
    "arbitrum": {
        "rpc": "https://rpc.ankr.com/arbitrum",
        "explorer": "https://arbiscan.io",
        "token": "ETH",
        "wrapped_token": "WETH",
        "wrapped_token_address": "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
        "chain_id": 42161,
    },
    "optimism": {
        "rpc": "https://rpc.ankr.com/optimism",
        "explorer": "https://optimistic.etherscan.io",
        "token": "ETH",
        "wrapped_token": "WETH",
        "wrapped_token_address": "0x4200000000000000000000000000000000000006",
        "chain_id": 10,
    },
    "base": {
        "rpc": "https://mainnet.base.org",
        "explorer": "https://basescan.org",
        "token": "ETH",
        "wrapped_token": "WETH",
        "wrapped_token_address": "0x4200000000000000000000000000000000000006",
        "chain_id": 8453,
    },
    "bitlayer": {
        "rpc": "https://rpc.ankr.com/bitlayer",
        "explorer": "https://www.btrscan.com",
        "token": "BTC",
        "wrapped_token": "WBTC",
        "wrapped_token_address": "0xfF204e2681A6fA0e2C3FaDe68a1B28fb90E4Fc5F",
        "chain_id": 200901,
    },
}

SECONDS_IN_HOUR = 60 * 60


class ConfigError(Exception):
    """Raised when settings, keys or proxies can't be turned into a RunConfig."""


class ChainNotFoundError(ConfigError):
    def __init__(self, chain):
        super().__init__(f"Chain config not found for '{chain}'")
        self.chain = chain


@dataclass(frozen=True)
class Bounds:
    min: object
    max: object


@dataclass(frozen=True)
class ChainTarget:
    name: str
    rpc: str
    explorer: str
    token: str
    wrapped_token: str
    wrapped_token_address: str
    chain_id: int


@dataclass(frozen=True)
class RunConfig:
    chain: str
    private_keys: tuple
    tx_count: Bounds
    tx_amount: Bounds
    tx_delay_ms: Bounds
    proxies: tuple = ()
    cycle_sleep_seconds: int = 23 * SECONDS_IN_HOUR
    history_file: str = "reports/transaction_log.json"
    history_retention_days: int = 30

    def get_proxy(self, index):
        """Assigns a proxy to a wallet based on its 1-based index"""
        if not self.proxies:
            return None
        return self.proxies[(index - 1) % len(self.proxies)]


def get_chain_target(chain) -> ChainTarget:
    data = CHAIN_DATA.get(chain)
    if data is None:
        raise ChainNotFoundError(chain)

    return ChainTarget(name=chain, **data)


def _bounds(name, values, cast):
    try:
        low, high = values
        bounds = Bounds(cast(low), cast(high))
    except (TypeError, ValueError, InvalidOperation) as error:
        raise ConfigError(f"{name} must be a [min, max] pair: {error}") from error

    if bounds.min < 0 or bounds.min > bounds.max:
        raise ConfigError(f"{name} has invalid bounds {list(values)}")

    return bounds


def _to_decimal(value):
    return Decimal(str(value))


def load_run_config(settings, keys, proxies=()) -> RunConfig:
    """Builds an immutable RunConfig out of the settings module and loaded files."""
    keys = tuple(keys)
    if not keys:
        raise ConfigError("No private keys found in keys.txt")

    return RunConfig(
        chain=settings.CHAIN,
        private_keys=keys,
        proxies=tuple(proxies),
        tx_count=_bounds("DAILY_TX_COUNT", settings.DAILY_TX_COUNT, int),
        tx_amount=_bounds("TX_AMOUNT", settings.TX_AMOUNT, _to_decimal),
        tx_delay_ms=_bounds("TX_DELAY_MS", settings.TX_DELAY_MS, int),
        cycle_sleep_seconds=int(settings.CYCLE_SLEEP_HOURS * SECONDS_IN_HOUR),
        history_file=settings.HISTORY_FILE,
        history_retention_days=settings.HISTORY_RETENTION_DAYS,
    )
