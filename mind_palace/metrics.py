from __future__ import annotations

import time
from contextlib import contextmanager


class Counter:
    def __init__(self) -> None:
        self.value = 0

    def inc(self, n: int = 1) -> None:
        self.value += n


class Timer:
    def __init__(self) -> None:
        self.last_ms: float | None = None
        self._start: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> float | None:
        if self._start is None:
            return None
        end = time.perf_counter()
        self.last_ms = (end - self._start) * 1000
        self._start = None
        return self.last_ms

    @contextmanager
    def time(self):  # noqa: ANN201 (to keep it lightweight)
        self.start()
        try:
            yield self
        finally:
            self.stop()


turns_total = Counter()
memories_added_total = Counter()
searches_total = Counter()
chat_latency_ms = Timer()
