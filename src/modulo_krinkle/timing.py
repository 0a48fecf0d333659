import logging
import time
from typing import Optional


class Timing():
    """
    Times a block. With a step name, the duration is logged on exit:

        with Timing("build", logger) as t:
            ...
        # logs "build: 4.2 ms"
    """
    def __init__(self, step: Optional[str] = None, logger: Optional[logging.Logger] = None):
        self.step = step
        self.logger = logger
        self.time = 0.0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.time = time.perf_counter() - self.start_time
        if self.step is not None and self.logger is not None and type is None:
            self.logger.info("%s: %s", self.step, self)

    def __str__(self):
        if self.time >= 1:
            return "%.3g s" % self.time
        elif self.time >= 1e-3:
            return "%.3g ms" % (self.time * 1e3)
        else:
            return "%d µs" % int(self.time * 1e6)
