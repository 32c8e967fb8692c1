"""Resilience – retry."""
from mp_logship.resilience.retry import BackoffStrategy, ExponentialBackoff, NoBackoff, TenacityRetrier

__all__ = ["BackoffStrategy", "ExponentialBackoff", "NoBackoff", "TenacityRetrier"]
