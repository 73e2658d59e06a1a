"""Pagination strategies for JSON:API collections."""

from .base import PaginationBase
from .standard import LinkPagination, StandardPagination

__all__ = ["LinkPagination", "PaginationBase", "StandardPagination"]
