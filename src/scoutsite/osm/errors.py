from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .rate_limit import RateLimitInfo


class ErrorKind(str, Enum):
    """Failure categories surfaced by the OSM client."""

    CONFIGURATION = "configuration"
    RATE_LIMITED = "rate_limited"
    HTTP = "http"
    TRANSPORT = "transport"
    DECODE = "decode"


class OSMApiError(RuntimeError):
    """
    Single error type for every OSM client failure.

    Call sites catch this one class and branch on ``kind`` only when they
    care about the cause (e.g. backing off on ``RATE_LIMITED``).

    Attributes:
        kind: Failure category.
        message: Human-readable description.
        status: HTTP status code, when a response was received.
        rate_limit: Rate-limit snapshot attached to 429 failures.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.HTTP,
        status: Optional[int] = None,
        rate_limit: Optional["RateLimitInfo"] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status = status
        self.rate_limit = rate_limit

    def __repr__(self) -> str:
        return (
            f"OSMApiError(kind={self.kind.value!r}, message={self.message!r}, "
            f"status={self.status!r})"
        )
