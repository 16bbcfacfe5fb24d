"""Error types for the short-link engine.

Each error carries the HTTP status and a user-readable message so the web
boundary can translate it without inspecting the error kind twice.
"""

import traceback
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ViolationKind(str, Enum):
    """Kinds of validation failure on a creation request."""

    INVALID_URL = "InvalidUrl"
    INVALID_CODE = "InvalidCode"


@dataclass(frozen=True)
class Violation:
    """A single violated field in a creation request."""

    field: str
    kind: ViolationKind
    message: str


class LinkError(Exception):
    """
    Base error for short-link operations.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
        stack: Call stack where the error was created; errors returned
            as values are never raised and so carry no traceback
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        self.stack = "".join(traceback.format_stack()[:-1])
        super().__init__(self.message)


class ValidationFailedError(LinkError):
    """400 - the creation request has one or more invalid fields."""
    status_code = 400
    message = "Invalid request"

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations) or None)

    @property
    def fields(self) -> List[str]:
        return [v.field for v in self.violations]


class DuplicateCodeError(LinkError):
    """409 - the code is already mapped to a destination."""
    status_code = 409
    message = "code already in use"


class StoreUnavailableError(LinkError):
    """503 - the mapping store is unreachable or timed out."""
    status_code = 503
    message = "storage unavailable"
