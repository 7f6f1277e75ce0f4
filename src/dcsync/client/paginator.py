"""Collect every page of a paginated listing."""

from __future__ import annotations

from typing import Callable, List

from ..schemas.models import ContentTypeSchema
from .hub import Page

DEFAULT_PAGE_SIZE = 100


def paginate(
    list_fn: Callable[..., Page], size: int = DEFAULT_PAGE_SIZE
) -> List[ContentTypeSchema]:
    """Call ``list_fn(page=n, size=size)`` until the last page and flatten."""
    items: List[ContentTypeSchema] = []
    page_number = 0
    while True:
        page = list_fn(page=page_number, size=size)
        items.extend(page.items)
        if page.is_last or not page.items:
            return items
        page_number += 1
