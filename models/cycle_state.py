from dataclasses import dataclass


@dataclass
class CycleState:
    """Per-wallet bookkeeping for a single cycle, thrown away once the cycle ends."""

    turns_remaining: int
    wrap_streak: int = 0
    unwrap_count: int = 0

    # Reporting only
    submitted: int = 0
    skipped: int = 0
    failed: int = 0

    def mark_wrap_succeeded(self):
        self.wrap_streak += 1

    def mark_unwrap_selected(self):
        # Counted once per unwrap turn, whether it gets submitted or not
        self.wrap_streak = 0
        self.unwrap_count += 1

    def consume_turn(self):
        self.turns_remaining -= 1
