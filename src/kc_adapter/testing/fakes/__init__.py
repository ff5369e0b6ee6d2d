"""Testing fakes – deterministic clock and scripted HTTP transport."""
from kc_adapter.testing.fakes.clock import FAKE_NOW, FakeClock
from kc_adapter.testing.fakes.transport import FakeTransport, RecordedRequest

__all__ = ["FAKE_NOW", "FakeClock", "FakeTransport", "RecordedRequest"]
