"""Shared helpers for the route modules."""

from __future__ import annotations

from fastapi import Request, Response

from backoffice.application.dto import PageDTO
from backoffice.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def lenient_int(value: str | None) -> int | None:
    """Parse a pagination query value; anything unparsable means "use the default"."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_include(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def set_page_headers(response: Response, page: PageDTO) -> None:
    response.headers["X-Total-Count"] = str(page.total)
    response.headers["X-Page"] = str(page.page)
    response.headers["X-Limit"] = str(page.limit)
