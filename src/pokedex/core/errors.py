# pokedex/core/errors.py
"""
Error taxonomy for the catalog layer.

Absence ("does not exist upstream") is not an error here: clients and
services return ``None`` for it. Everything below is raised.
"""
from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    pass


class UpstreamFailure(CatalogError):
    """The upstream catalog could not serve a request.

    ``operation`` names the logical operation that failed (``listing``,
    ``single-entity fetch``, ``metadata fetch``, ``search``, ``group fetch``,
    ``group listing``).
    """

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        self.operation = operation
        self.message = message
        self.status_code = status_code
        self.url = url
        super().__init__(f"{operation} failed: {message}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "upstream_failure",
            "operation": self.operation,
            "message": self.message,
            "status_code": self.status_code,
        }


class InvalidPagination(CatalogError, ValueError):
    """Raised when page or limit fall outside accepted bounds."""

    def to_dict(self) -> dict[str, Any]:
        return {"error": "invalid_pagination", "message": str(self)}
