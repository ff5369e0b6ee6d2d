"""HTTP adapter – blocking transport port and httpx implementation."""
from kc_adapter.adapters.http.client import HttpResponse, HttpTransport, HttpxTransport, RequestBody

__all__ = ["HttpResponse", "HttpTransport", "HttpxTransport", "RequestBody"]
