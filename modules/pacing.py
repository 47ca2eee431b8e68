import time
from datetime import datetime

from tqdm import tqdm


class Pacer:
    """
    Blocking countdown with a tqdm progress bar.

    Every tick waits for `start + tick` on the monotonic clock rather than a
    flat second, so slow terminal redraws don't add up over a 23h wait.
    """

    def __init__(self, sleep=time.sleep, clock=time.monotonic, progress=tqdm):
        self.sleep = sleep
        self.clock = clock
        self.progress = progress

    def wait(self, seconds, label="Sleep until next transaction"):
        seconds = int(seconds)
        if seconds <= 0:
            return

        desc = datetime.now().strftime("%H:%M:%S")
        start = self.clock()

        with self.progress(
            total=seconds,
            desc=desc,
            bar_format=f"{{desc}} | {label} {{n_fmt}}/{{total_fmt}}",
        ) as bar:
            for tick in range(1, seconds + 1):
                deadline = start + tick
                remaining = deadline - self.clock()

                while remaining > 0:
                    self.sleep(remaining)
                    remaining = deadline - self.clock()

                bar.update(1)
