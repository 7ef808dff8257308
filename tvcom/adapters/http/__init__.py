"""
Adaptateurs HTTP implementant ITransport.

- HttpxTransport : GET bloquant via httpx.Client
"""

from tvcom.adapters.http.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
