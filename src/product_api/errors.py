"""Error kinds and the terminal error responder.

Every failure raised while handling a request ends up in
:func:`error_response`, which picks the status code and message from the
error kind. Diagnostic detail (kind and traceback) is only attached when the
caller asks for it.
"""

import traceback
from enum import Enum
from typing import List, Optional, Tuple


class ErrorKind(Enum):
    NOT_FOUND = (404, "Product not found")
    VALIDATION = (400, "Validation errors")
    MISSING_KEY = (401, "API key is required for this operation")
    INVALID_KEY = (403, "Invalid API key")
    MALFORMED_BODY = (400, "Invalid JSON in request body")
    ROUTE_NOT_FOUND = (404, "Route not found")
    UNEXPECTED = (500, "Internal Server Error")

    def __init__(self, status: int, default_message: str):
        self.status = status
        self.default_message = default_message


class ApiError(Exception):
    """A request failure tagged with its :class:`ErrorKind`."""

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ):
        self.kind = kind
        self.message = message or kind.default_message
        self.errors = list(errors) if errors else []
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return self.kind.status


def _format_stack(error: BaseException) -> str:
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    )


def error_response(error: BaseException, expose_diagnostics: bool = False) -> Tuple[dict, int]:
    if isinstance(error, ApiError):
        kind = error.kind
        body = {"success": False, "message": error.message}
        if error.errors:
            body["errors"] = error.errors
        name = kind.name
    else:
        kind = ErrorKind.UNEXPECTED
        body = {"success": False, "message": kind.default_message}
        name = type(error).__name__

    if expose_diagnostics:
        body["error"] = name
        body["stack"] = _format_stack(error)
    return body, kind.status
