"""Filtering, search and pagination over a snapshot of the store."""

import math
import re
from typing import List, Mapping, Optional, Sequence, Tuple

from .models import PageInfo, Product


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _positive_int(value: Optional[str], default: int) -> int:
    """Read a leading integer ("2abc" -> 2, "1.5" -> 1); else ``default``."""
    match = _LEADING_INT.match(value) if isinstance(value, str) else None
    if match is None:
        return default
    number = int(match.group(1))
    return number if number > 0 else default


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.lower()


def filter_by_category(products: Sequence[Product], category: str) -> List[Product]:
    category = category.lower()
    return [p for p in products if p.category.lower() == category]


def filter_by_stock(products: Sequence[Product], in_stock: str) -> List[Product]:
    wanted = in_stock == "true"
    return [p for p in products if p.in_stock is wanted]


def filter_by_text(products: Sequence[Product], text: str) -> List[Product]:
    text = text.lower()
    return [
        p for p in products
        if _contains(p.name, text) or _contains(p.description, text)
    ]


def paginate(products: Sequence[Product], page: int, limit: int) -> Tuple[List[Product], PageInfo]:
    total = len(products)
    start = (page - 1) * limit
    end = start + limit
    info = PageInfo(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit),
        has_next=end < total,
        has_prev=page > 1,
    )
    return list(products[start:end]), info


def query(products: Sequence[Product], params: Mapping[str, str]) -> Tuple[List[Product], PageInfo]:
    """Apply category, stock and text filters, then paginate.

    ``params`` is any mapping of query-string values (Flask's
    ``request.args`` works as is). Empty ``category`` and ``search`` values
    are ignored; ``inStock`` filters whenever it is present.
    """
    selected = list(products)

    category = params.get("category")
    if category:
        selected = filter_by_category(selected, category)

    in_stock = params.get("inStock")
    if in_stock is not None:
        selected = filter_by_stock(selected, in_stock)

    search = params.get("search")
    if search:
        selected = filter_by_text(selected, search)

    page = _positive_int(params.get("page"), DEFAULT_PAGE)
    limit = _positive_int(params.get("limit"), DEFAULT_LIMIT)
    return paginate(selected, page, limit)


def search(products: Sequence[Product], text: str) -> List[Product]:
    """Unpaginated lookup over name, description and category."""
    text = text.lower()
    return [
        p for p in products
        if _contains(p.name, text)
        or _contains(p.description, text)
        or _contains(p.category, text)
    ]
