"""JSON:API client."""

from .base import JSONAPIClient

__all__ = ["JSONAPIClient"]
