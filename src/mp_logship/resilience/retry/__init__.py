"""Resilience – bounded retry with configurable backoff."""
from mp_logship.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff, NoBackoff
from mp_logship.resilience.retry.tenacity_adapter import TenacityRetrier

__all__ = ["BackoffStrategy", "ExponentialBackoff", "NoBackoff", "TenacityRetrier"]
