"""Pagination base class for walking JSON:API collections."""

from typing import Any


class PaginationBase:
    """Decide which query parameters fetch the page after a response."""

    def next_params(
        self, document: dict[str, Any], params: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Return parameters for the next page, or None on the last page."""
        raise NotImplementedError
