import pytest


class FakeClock:
    """Manually advanced stand-in for `time.monotonic`."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """Serves canned bodies by URL; unknown URLs yield an empty body."""

    def __init__(self, pages: dict, clock: FakeClock = None, latency: float = 0.0):
        self.pages = pages
        self.clock = clock
        self.latency = latency
        self.calls = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        if self.clock is not None:
            self.clock.advance(self.latency)
        return self.pages.get(url, "")


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_fetcher():
    def _make(pages, clock=None, latency=0.0):
        return FakeFetcher(pages, clock=clock, latency=latency)
    return _make
