from datetime import timedelta

from rich import print as rich_print
from rich.text import Text

STATS_WINDOWS = {
    "Today": timedelta(days=1),
    "Last 7 days": timedelta(days=7),
    "Last 30 days": timedelta(days=30),
}

WINDOW_STYLES = {
    "Today": "green",
    "Last 7 days": "yellow",
    "Last 30 days": "magenta",
}


def show_statistics(history, address) -> dict:
    """Prints tx counts for the wallet and returns them keyed by window name."""
    counts = {
        name: history.count_within(window, account=address)
        for name, window in STATS_WINDOWS.items()
    }

    rich_print(Text(f"Wallet: {address}", style="cyan"))
    rich_print(Text(f"{' Transaction stats ':-^72}", style="bold"))
    for name, count in counts.items():
        rich_print(Text(f"{name}: {count} transaction(s)", style=WINDOW_STYLES[name]))
    rich_print(Text("-" * 72, style="bold"))

    return counts
