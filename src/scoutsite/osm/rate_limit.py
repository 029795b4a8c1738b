from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

LIMIT_HEADER = "X-RateLimit-Limit"
REMAINING_HEADER = "X-RateLimit-Remaining"
RESET_HEADER = "X-RateLimit-Reset"


@dataclass(frozen=True)
class RateLimitInfo:
    """
    Rate-limit headers from the most recent OSM response.

    Values are kept as the raw header strings; OSM does not promise a
    numeric format. A missing header is stored as "".
    """

    limit: str = ""
    remaining: str = ""
    reset: str = ""

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo":
        # requests' CaseInsensitiveDict and plain dicts both work here
        return cls(
            limit=headers.get(LIMIT_HEADER) or "",
            remaining=headers.get(REMAINING_HEADER) or "",
            reset=headers.get(RESET_HEADER) or "",
        )

    def as_headers(self) -> Dict[str, str]:
        return {
            LIMIT_HEADER: self.limit,
            REMAINING_HEADER: self.remaining,
            RESET_HEADER: self.reset,
        }
