# app/utils/pagination.py
"""Slices an already ordered report into a 0-based page."""

import math
from typing import Sequence
from app.schemas.common import Page


def paginate(items: Sequence, page: int, size: int) -> Page:
    total = len(items)
    start = page * size
    return Page(
        content=list(items[start:start + size]),
        page=page,
        size=size,
        total_elements=total,
        total_pages=math.ceil(total / size) if size else 0,
    )
