"""
Shared request parameter helpers for the v1 routers.
"""

from typing import Annotated, Any, Dict

from fastapi import Depends, Query

from sitecms.server.core.constant import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class PageQuery:
    """``?page=&pageSize=`` query parameters (1-based page)."""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="1-based page number"),
        page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Rows per page"),
    ) -> None:
        self.page = page
        self.page_size = page_size


PageDep = Annotated[PageQuery, Depends()]


def form_values(**values: Any) -> Dict[str, Any]:
    """Keep only the form fields the client actually sent."""
    return {key: value for key, value in values.items() if value is not None}
