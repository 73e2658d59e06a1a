"""HTTP transports used by the client."""

from .base import HttpxTransport, Transport, TransportResponse

__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
