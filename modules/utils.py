import math
import random
from decimal import ROUND_DOWN, ROUND_UP, Decimal

from models.operation import AMOUNT_PRECISION


def get_rand_tx_count(bounds, rng=random):
    return rng.randint(bounds.min, bounds.max)


def get_rand_amount(bounds, rng=random) -> Decimal:
    """Random amount in [min, max), cut down to 8 decimals."""
    low, high = float(bounds.min), float(bounds.max)
    rand_amount = Decimal(repr(rng.uniform(low, high)))
    amount = rand_amount.quantize(AMOUNT_PRECISION, rounding=ROUND_DOWN)

    # Truncation can drop a tiny draw below min
    low_amount = Decimal(bounds.min).quantize(AMOUNT_PRECISION, rounding=ROUND_UP)
    return max(amount, low_amount)


def get_rand_delay(bounds_ms, rng=random) -> int:
    """Random delay in whole seconds out of millisecond bounds."""
    delay_ms = rng.uniform(bounds_ms.min, bounds_ms.max)
    return math.floor(delay_ms / 1000)
