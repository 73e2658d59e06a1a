"""Core JSON:API document and error helpers."""

from .document import JSONAPIDocumentBuilder, serialise
from .errors import (
    JSONAPIClientError,
    JSONAPIDocumentError,
    JSONAPIResponseError,
    JSONAPITransportError,
    normalize_error,
)

__all__ = [
    "JSONAPIClientError",
    "JSONAPIDocumentBuilder",
    "JSONAPIDocumentError",
    "JSONAPIResponseError",
    "JSONAPITransportError",
    "normalize_error",
    "serialise",
]
