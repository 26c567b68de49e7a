import pytest

from evtrack.core.events_tracker import EventsTracker, WINDOW_SECONDS


@pytest.fixture
def tracker():
    """ One-second buckets with the background ticker already stopped; age it with `tick()`. """
    tracker = EventsTracker(window_seconds=WINDOW_SECONDS, tick_interval_ms=1000)
    tracker.stop()
    yield tracker
