"""Testing utilities – fakes for code built on kc-adapter."""
from kc_adapter.testing.fakes import FakeClock, FakeTransport, RecordedRequest

__all__ = ["FakeClock", "FakeTransport", "RecordedRequest"]
