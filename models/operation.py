from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

AMOUNT_PRECISION = Decimal("0.00000001")


class Action(str, Enum):
    WRAP = "Wrap"
    UNWRAP = "Unwrap"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T10:00:00.000Z"""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class OperationRecord:
    action: Action
    amount: Decimal
    account: str
    tx_hash: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "amount": f"{self.amount.quantize(AMOUNT_PRECISION)}",
            "wallet": self.account,
            "txHash": self.tx_hash,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OperationRecord":
        return cls(
            action=Action(data["action"]),
            amount=Decimal(str(data["amount"])),
            account=data["wallet"],
            tx_hash=data["txHash"],
            timestamp=parse_timestamp(data["timestamp"]),
        )
