"""Naming, query string and content negotiation helpers."""

from .case import RESOURCE_CASES, camel, identity, kebab, pluralize, snake
from .content_negotiation import JSONAPI_HEADERS, JSONAPI_MEDIA_TYPE, parse_jsonapi_media_type
from .query_params import build_query, parse_query_string
from .split_model import split_model

__all__ = [
    "JSONAPI_HEADERS",
    "JSONAPI_MEDIA_TYPE",
    "RESOURCE_CASES",
    "build_query",
    "camel",
    "identity",
    "kebab",
    "parse_jsonapi_media_type",
    "parse_query_string",
    "pluralize",
    "snake",
    "split_model",
]
