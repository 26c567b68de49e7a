import time
import numbers
import threading
import numpy as np
from typing import Optional

from evtrack.config import Config
from evtrack.common.logger import LoggerFactory
from evtrack.core.exceptions import InvalidArgument

WINDOW_SECONDS = 5 * 60
WINDOW_MS = WINDOW_SECONDS * 1000


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class EventsTracker:
    """
        Approximate sliding-window event counter.

        Events are accumulated into one bucket per tick (one second by default), held in a fixed-size
        array of `window_seconds * 1000 // tick_interval_ms` buckets.
        `buckets[0]` is the open bucket that `track()` increments, `buckets[i]` holds the events
        recorded `i` ticks ago. A background thread shifts the whole array right once per tick,
        dropping the oldest bucket, so `count(secs)` is just the sum of the newest `secs` seconds of buckets.

        Counts are exact relative to bucket contents but approximate relative to true event times:
        an event is attributed to the tick boundary it falls behind, not to its own timestamp.

        One lock guards the array. Increment, shift and range sum never interleave,
        hence no lost increments and no torn reads.
    """

    def __init__(
        self,
        window_seconds: int = Config.WINDOW_SECONDS,
        tick_interval_ms: int = Config.TICK_INTERVAL_MS,
        logger_name: Optional[str] = None,
        log_file: Optional[str] = None,
    ):
        if not _is_int(window_seconds) or window_seconds < 1:
            raise InvalidArgument(f"window_seconds must be a positive integer, got {window_seconds!r}")
        if not _is_int(tick_interval_ms) or tick_interval_ms <= 0 or 1000 % tick_interval_ms != 0:
            raise InvalidArgument(f"tick_interval_ms must be a positive divisor of 1000, got {tick_interval_ms!r}")

        self.logger = LoggerFactory().get_logger(logger_name=logger_name or self.__class__.__name__, log_file=log_file)

        self._window_seconds = int(window_seconds)
        self._tick_interval_ms = int(tick_interval_ms)
        self._ticks_per_second = 1000 // self._tick_interval_ms
        self._buckets = np.zeros(self._window_seconds * self._ticks_per_second, dtype=np.int64)
        self._lock = threading.Lock()
        self._stop_event = threading.Event()

        # zero initial delay: first tick runs before any caller can track
        self.tick()
        self._ticker = threading.Thread(target=self._run_ticker, name=f"{self.__class__.__name__}-ticker", daemon=True)
        self._ticker.start()
        self.logger.info(f"Ticker started (window={self._window_seconds}s, interval={self._tick_interval_ms}ms)")

    @property
    def window_seconds(self) -> int:
        return self._window_seconds

    @property
    def window_ms(self) -> int:
        return self._window_seconds * 1000

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_interval_ms

    @property
    def num_buckets(self) -> int:
        return len(self._buckets)

    @property
    def running(self) -> bool:
        return self._ticker.is_alive()

    def track(self) -> None:
        """ Record one event in the open bucket. """
        with self._lock:
            self._buckets[0] += 1

    def count(self, secs: int) -> int:
        """
            Number of events recorded in the last `secs` seconds, i.e. the newest `secs * 1000 // tick_interval_ms` buckets.
            Raises InvalidArgument unless 1 <= secs <= window_seconds.
        """
        if not _is_int(secs) or secs < 1 or secs > self._window_seconds:
            raise InvalidArgument(f"secs must be within [1, {self._window_seconds}], got {secs!r}")
        with self._lock:
            return int(self._buckets[:secs * self._ticks_per_second].sum())

    def total(self) -> int:
        return self.count(self._window_seconds)

    def snapshot(self) -> np.ndarray:
        with self._lock:
            return self._buckets.copy()

    def is_expired(self, timestamp_millis: int) -> bool:
        """ True if `timestamp_millis` (epoch ms) lies strictly beyond the window horizon. """
        now_millis = time.time_ns() // 1_000_000
        return now_millis - timestamp_millis > self.window_ms

    def tick(self) -> None:
        """ Shift every bucket one step toward the tail and open a fresh bucket at index 0. """
        with self._lock:
            # numpy copies overlapping slices before assignment
            self._buckets[1:] = self._buckets[:-1]
            self._buckets[0] = 0

    def _run_ticker(self):
        interval = self._tick_interval_ms / 1000
        next_run = time.monotonic() + interval
        try:
            while not self._stop_event.wait(max(0.0, next_run - time.monotonic())):
                self.tick()
                next_run += interval
                lag = time.monotonic() - next_run
                if lag > interval:
                    self.logger.warning(f"Ticker is behind schedule by {lag:.3f}s, catching up")
        except Exception:
            self.logger.exception("Ticker stopped unexpectedly")
            raise

    def stop(self, timeout: Optional[float] = None) -> None:
        """ Stop aging the window. Safe to call more than once. """
        if self._stop_event.is_set():
            return
        self._stop_event.set()
        if self._ticker is not threading.current_thread():
            self._ticker.join(timeout)
        self.logger.info("Ticker stopped")

    close = stop

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.stop()

    def __repr__(self):
        return f"{self.__class__.__name__}(window_seconds={self._window_seconds}, tick_interval_ms={self._tick_interval_ms}, running={self.running})"
