"""HTTP adapter – async HTTP client wrapper."""
from mp_logship.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
