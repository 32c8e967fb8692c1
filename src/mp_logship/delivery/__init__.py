"""Delivery – remote sink, local fallback sink, and the orchestrator joining them."""
from mp_logship.delivery.policy import RetryPolicy
from mp_logship.delivery.ports import LocalSink, RemoteSink
from mp_logship.delivery.remote import HttpRemoteSink
from mp_logship.delivery.local import DEFAULT_FALLBACK_FILENAME, FileFallbackSink
from mp_logship.delivery.orchestrator import DeliveryOrchestrator, DeliveryOutcome, DeliveryReceipt

__all__ = [
    "DEFAULT_FALLBACK_FILENAME",
    "DeliveryOrchestrator",
    "DeliveryOutcome",
    "DeliveryReceipt",
    "FileFallbackSink",
    "HttpRemoteSink",
    "LocalSink",
    "RemoteSink",
    "RetryPolicy",
]
