"""Asynchronous JSON:API client built on httpx."""

from .client import JSONAPIClient
from .config import ClientSettings, NamingStrategy
from .core.document import JSONAPIDocumentBuilder, serialise
from .core.errors import (
    JSONAPIClientError,
    JSONAPIDocumentError,
    JSONAPIResponseError,
    JSONAPITransportError,
    normalize_error,
)
from .pagination import LinkPagination, PaginationBase, StandardPagination
from .serializers import deserialise
from .transport import HttpxTransport, Transport, TransportResponse
from .utils import build_query, camel, kebab, pluralize, snake, split_model

__all__ = [
    "ClientSettings",
    "HttpxTransport",
    "JSONAPIClient",
    "JSONAPIClientError",
    "JSONAPIDocumentBuilder",
    "JSONAPIDocumentError",
    "JSONAPIResponseError",
    "JSONAPITransportError",
    "LinkPagination",
    "NamingStrategy",
    "PaginationBase",
    "StandardPagination",
    "Transport",
    "TransportResponse",
    "build_query",
    "camel",
    "deserialise",
    "kebab",
    "normalize_error",
    "pluralize",
    "serialise",
    "snake",
    "split_model",
]
