import math
from typing import Any, Dict, List, Mapping

from .errors import ApiError, ErrorKind


NAME_ERROR = "Name is required and must be a non-empty string"
DESCRIPTION_ERROR = "Description is required and must be a non-empty string"
PRICE_ERROR = "Price is required and must be a positive number"
CATEGORY_ERROR = "Category is required and must be a non-empty string"
IN_STOCK_ERROR = "InStock is required and must be a boolean"


def _non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _as_price(value: Any) -> float:
    """Return the price as a float, or NaN when it isn't a number."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)) or (isinstance(value, str) and value.strip()):
        try:
            return float(value)
        except (ValueError, OverflowError):
            return math.nan
    return math.nan


def _valid_price(value: Any) -> bool:
    price = _as_price(value)
    return math.isfinite(price) and price >= 0


def validate_product(payload: Any) -> List[str]:
    """Check a product payload, reporting every violated rule in order."""
    if not isinstance(payload, Mapping):
        payload = {}
    errors = []
    if not _non_empty_text(payload.get("name")):
        errors.append(NAME_ERROR)
    if not _non_empty_text(payload.get("description")):
        errors.append(DESCRIPTION_ERROR)
    if not _valid_price(payload.get("price")):
        errors.append(PRICE_ERROR)
    if not _non_empty_text(payload.get("category")):
        errors.append(CATEGORY_ERROR)
    if not isinstance(payload.get("inStock"), bool):
        errors.append(IN_STOCK_ERROR)
    return errors


def parse_product(payload: Any) -> Dict[str, Any]:
    """Validate ``payload`` and return the normalized product fields.

    Raises :class:`ApiError` (``VALIDATION``) carrying all messages when any
    rule fails; nothing is normalized in that case.
    """
    errors = validate_product(payload)
    if errors:
        raise ApiError(ErrorKind.VALIDATION, errors=errors)
    return {
        "name": payload["name"].strip(),
        "description": payload["description"].strip(),
        "price": _as_price(payload["price"]),
        "category": payload["category"].strip().lower(),
        "in_stock": bool(payload["inStock"]),
    }
