"""
Helpers pages use to present OSM results.

The client returns reports in upstream order; ordering and filtering
for display happen here.
"""

from __future__ import annotations

from datetime import date
from numbers import Real
from typing import List, Optional, Sequence, Tuple

from .schema import BadgeTagCloud, ProgrammeSummaryItem


def _meeting_date(item: ProgrammeSummaryItem) -> Optional[date]:
    try:
        return date.fromisoformat(item.meetingdate[:10])
    except ValueError:
        return None


def sort_by_meeting_date(
    items: Sequence[ProgrammeSummaryItem], descending: bool = False
) -> List[ProgrammeSummaryItem]:
    """
    Order meetings by date. Items without a parsable date always come
    last, whichever direction is asked for.
    """
    dated = [i for i in items if _meeting_date(i) is not None]
    undated = [i for i in items if _meeting_date(i) is None]
    return sorted(dated, key=_meeting_date, reverse=descending) + undated


def split_upcoming_past(
    items: Sequence[ProgrammeSummaryItem], today: date
) -> Tuple[List[ProgrammeSummaryItem], List[ProgrammeSummaryItem]]:
    """
    Split meetings into (upcoming, past) relative to ``today``.

    Both lists are ascending by date and upcoming includes today's
    meeting. Undated items are in neither list.
    """
    upcoming: List[ProgrammeSummaryItem] = []
    past: List[ProgrammeSummaryItem] = []
    for item in sort_by_meeting_date(items):
        day = _meeting_date(item)
        if day is None:
            continue
        (upcoming if day >= today else past).append(item)
    return upcoming, past


def top_badges(cloud: BadgeTagCloud, limit: int = 5) -> List[Tuple[str, float]]:
    """
    Most covered badges first; ties keep upstream order.

    Weights OSM sends as something other than a number are skipped.
    """
    weighted = [
        (label, weight)
        for label, weight in cloud.tags.items()
        if isinstance(weight, Real) and not isinstance(weight, bool)
    ]
    ranked = sorted(weighted, key=lambda kv: kv[1], reverse=True)
    return ranked[:limit]
