"""Testing – doubles for unit tests of code that logs through mp_logship."""
from mp_logship.testing.fakes import FakeClock, FrozenClock, InMemoryLocalSink, ScriptedRemoteSink

__all__ = ["FakeClock", "FrozenClock", "InMemoryLocalSink", "ScriptedRemoteSink"]
