"""Helpers that wrap service results in the success envelope."""

from typing import Any

from app.services.pagination import Page


def page_response(result: Page) -> dict[str, Any]:
    """Listing envelope: rows in ``data``, totals in ``meta``."""
    return {
        "status": True,
        "content": {
            "data": result.items,
            "meta": {
                "total": result.total,
                "pages": result.pages,
                "page": result.page,
            },
        },
    }


def data_response(data: Any) -> dict[str, Any]:
    return {"status": True, "content": {"data": data}}
