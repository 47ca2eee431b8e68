from decimal import Decimal

from models.cycle_state import CycleState
from models.operation import Action


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats like 0.1 keep their printed digits
    return Decimal(str(value))


def select_action(state: CycleState) -> Action:
    """Wrap first, then force an unwrap once a wrap has gone through."""
    if state.wrap_streak < 1:
        return Action.WRAP
    return Action.UNWRAP


def can_afford(balance, amount) -> bool:
    return to_decimal(balance) >= to_decimal(amount)
