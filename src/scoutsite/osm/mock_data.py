"""
Canned OSM responses for the offline client.

Shapes match what the live API returns so the same record models parse
them. Meeting dates are relative to the day the process started, so the
site always has upcoming events to show; within one process every call
sees identical data.
"""

from datetime import date, timedelta
from typing import Any, Dict

_PROCESS_START = date.today()


def _upcoming_date(days_from_now: int) -> str:
    return (_PROCESS_START + timedelta(days=days_from_now)).isoformat()


MOCK_STARTUP_DATA: Dict[str, Any] = {
    "globals": {
        "email": "leader@walkhamvalleyscouts.org.uk",
        "firstname": "John",
        "lastname": "Smith",
        "member_access": {},
        "notepads": {},
        "sectionConfig": {},
        "terms": [
            {
                "termid": "1",
                "sectionid": "1",
                "name": "Autumn 2024",
                "startdate": "2024-09-01",
                "enddate": "2024-12-20",
                "past": False,
            },
            {
                "termid": "2",
                "sectionid": "1",
                "name": "Spring 2025",
                "startdate": "2025-01-06",
                "enddate": "2025-04-04",
                "past": False,
            },
            {
                "termid": "3",
                "sectionid": "1",
                "name": "Summer 2025",
                "startdate": "2025-04-21",
                "enddate": "2025-07-18",
                "past": False,
            },
        ],
    },
}

MOCK_MEMBER_LIST: Dict[str, Any] = {
    "identifier": "members",
    "photos": {},
    "items": [
        {
            "firstname": "Alice",
            "lastname": "Johnson",
            "photo_guid": "photo1",
            "patrolid": "1",
            "patrol": "Red Patrol",
            "sectionid": "1",
            "enddate": "",
            "age": 10,
            "active": True,
            "scoutid": "101",
            "full_name": "Alice Johnson",
        },
        {
            "firstname": "Bob",
            "lastname": "Williams",
            "photo_guid": "photo2",
            "patrolid": "1",
            "patrol": "Red Patrol",
            "sectionid": "1",
            "enddate": "",
            "age": 11,
            "active": True,
            "scoutid": "102",
            "full_name": "Bob Williams",
        },
        {
            "firstname": "Charlie",
            "lastname": "Brown",
            "photo_guid": "photo3",
            "patrolid": "2",
            "patrol": "Blue Patrol",
            "sectionid": "1",
            "enddate": "",
            "age": 10,
            "active": True,
            "scoutid": "103",
            "full_name": "Charlie Brown",
        },
    ],
}

MOCK_INDIVIDUAL_MEMBER: Dict[str, Any] = {
    "ok": True,
    "read_only": [],
    "data": {
        "scoutid": "101",
        "firstname": "Alice",
        "lastname": "Johnson",
        "dob": "2014-05-15",
        "started": "2023-09-01",
        "patrolid": "1",
        "sectionid": "1",
        "active": True,
        "age": 10,
        "meetings": 28,
    },
    "meta": {},
}


def _patrol_member(first: str, last: str, scoutid: str, patrolid: str) -> Dict[str, Any]:
    return {
        "firstname": first,
        "lastname": last,
        "scout_id": scoutid,
        "patrolid": patrolid,
        "active": True,
        "scoutid": scoutid,
    }


MOCK_PATROLS: Dict[str, Any] = {
    "patrols": [
        {
            "patrolid": "1",
            "sectionid": "1",
            "name": "Red Patrol",
            "active": True,
            "points": 150,
            "census_costs": {},
            "members": [
                _patrol_member("Alice", "Johnson", "101", "1"),
                _patrol_member("Bob", "Williams", "102", "1"),
            ],
        },
        {
            "patrolid": "2",
            "sectionid": "1",
            "name": "Blue Patrol",
            "active": True,
            "points": 135,
            "census_costs": {},
            "members": [
                _patrol_member("Charlie", "Brown", "103", "2"),
            ],
        },
        {
            # -2 is OSM's fixed id for the leaders' patrol
            "patrolid": "-2",
            "sectionid": "1",
            "name": "Leaders",
            "active": True,
            "points": 0,
            "census_costs": {},
            "members": [
                _patrol_member("John", "Smith", "201", "-2"),
            ],
        },
    ],
}

MOCK_CENSUS: Dict[str, Any] = {"identifier": "census", "items": []}

MOCK_FLEXI_RECORDS: Dict[str, Any] = {
    "identifier": "flexirecords",
    "label": "Flexi Records",
    "items": [],
}

MOCK_MEMBER_TRANSFERS: Dict[str, Any] = {"status": True, "error": None, "data": [], "meta": {}}

MOCK_DELETABLE_MEMBERS: Dict[str, Any] = {"status": True, "error": None, "data": [], "meta": {}}

MOCK_PROGRAMME_SUMMARY: Dict[str, Any] = {
    "items": [
        {
            "eveningid": "1",
            "sectionid": "1",
            "title": "Camping Skills",
            "notesforparents": "Please bring warm clothing and outdoor gear",
            "parentsrequired": False,
            "meetingdate": _upcoming_date(5),
            "starttime": "19:00",
            "endtime": "20:30",
            "parentsattendingcount": 0,
        },
        {
            "eveningid": "2",
            "sectionid": "1",
            "title": "Fire Safety Badge",
            "notesforparents": "We will be learning about fire safety and prevention",
            "parentsrequired": False,
            "meetingdate": _upcoming_date(12),
            "starttime": "19:00",
            "endtime": "20:30",
            "parentsattendingcount": 0,
        },
        {
            "eveningid": "3",
            "sectionid": "1",
            "title": "Navigation Skills",
            "notesforparents": "Bring a compass if you have one",
            "parentsrequired": False,
            "meetingdate": _upcoming_date(19),
            "starttime": "19:00",
            "endtime": "20:30",
            "parentsattendingcount": 0,
        },
        {
            "eveningid": "4",
            "sectionid": "1",
            "title": "Weekend Camp",
            "notesforparents": (
                "Special event - full kit list will be sent via email. Parent helpers needed!"
            ),
            "parentsrequired": True,
            "meetingdate": _upcoming_date(28),
            "starttime": "18:00",
            "endtime": "16:00",
            "parentsattendingcount": 5,
        },
        {
            "eveningid": "5",
            "sectionid": "1",
            "title": "End of Term Party",
            "notesforparents": (
                "Celebration evening with games and activities. "
                "Please bring a small contribution for the party food."
            ),
            "parentsrequired": True,
            "meetingdate": _upcoming_date(42),
            "starttime": "19:00",
            "endtime": "21:00",
            "parentsattendingcount": 12,
        },
    ],
}

MOCK_BADGE_TAG_CLOUD: Dict[str, Any] = {
    "tags": {
        "Camping": 15,
        "Fire Safety": 12,
        "Navigation": 10,
        "First Aid": 8,
        "Cooking": 7,
    },
    "tag_count": 5,
    "badges": {
        "camp_permit": "Camping",
        "fire_safety": "Fire Safety",
        "navigator": "Navigation",
        "first_aid": "First Aid",
        "chef": "Cooking",
    },
}

MOCK_RISK_ASSESSMENT: Dict[str, Any] = {
    "status": True,
    "error": None,
    "data": [
        {"name": "Low Risk"},
        {"name": "Medium Risk"},
        {"name": "High Risk"},
    ],
    "meta": {},
}

MOCK_PROGRAMME_DETAIL: Dict[str, Any] = {
    "items": [
        {
            "eveningid": "1",
            "sectionid": "1",
            "title": "Camping Skills",
            "meetingdate": _upcoming_date(5),
            "starttime": "19:00",
            "endtime": "20:30",
            "help": [],
            "unavailableleaders": [],
        },
    ],
    "badgelinks": {
        "camp_permit": ["Tent pitching", "Camp safety", "Outdoor cooking basics"],
        "outdoors_challenge": ["Setting up camp", "Leave no trace principles"],
    },
}

MOCK_PROGRAMME_ATTACHMENTS: Dict[str, Any] = {}
