from typing import Optional

from .errors import ApiError, ErrorKind


API_KEY_HEADER = "x-api-key"
READ_ONLY_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def authorize(method: str, supplied_key: Optional[str], secret: str) -> Optional[ErrorKind]:
    """Return None when the request may proceed, else the failing kind."""
    if method.upper() in READ_ONLY_METHODS:
        return None
    if not supplied_key:
        return ErrorKind.MISSING_KEY
    if supplied_key != secret:
        return ErrorKind.INVALID_KEY
    return None


def require_key(method: str, supplied_key: Optional[str], secret: str) -> None:
    kind = authorize(method, supplied_key, secret)
    if kind is not None:
        raise ApiError(kind)
