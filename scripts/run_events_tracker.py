import time
import argparse
import numpy as np
from concurrent.futures import ThreadPoolExecutor

from evtrack.common.logger import LoggerFactory
from evtrack.core.events_tracker import EventsTracker


def produce(tracker: EventsTracker, rate: float, duration: int, seed: int) -> int:
    """ Emit a Poisson number of events every 100ms. """
    rng = np.random.default_rng(seed)
    n_events = 0
    deadline = time.monotonic() + duration
    while time.monotonic() < deadline:
        for _ in range(rng.poisson(rate / 10)):
            tracker.track()
            n_events += 1
        time.sleep(0.1)
    return n_events


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--duration", type=int, default=10, help="seconds to run")
    parser.add_argument("--producers", type=int, default=4)
    parser.add_argument("--rate", type=float, default=50.0, help="events/sec per producer")
    args = parser.parse_args()

    logger = LoggerFactory().get_logger(logger_name="run_events_tracker")

    with EventsTracker(log_file="events_tracker.log") as tracker:
        with ThreadPoolExecutor(max_workers=args.producers) as executor:
            futures = [executor.submit(produce, tracker, args.rate, args.duration, seed) for seed in range(args.producers)]
            for _ in range(args.duration):
                time.sleep(1)
                logger.info(f"last 1s={tracker.count(1)}, last 10s={tracker.count(10)}, window={tracker.total()}")
            n_tracked = sum(f.result() for f in futures)
        logger.info(f"tracked={n_tracked}, counted={tracker.total()}")
