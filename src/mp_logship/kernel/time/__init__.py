"""Kernel time – Clock port + implementations."""
from mp_logship.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
