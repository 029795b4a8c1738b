import time

import pytest
import requests
from unittest.mock import patch

from scoutsite.osm.mock_client import MockOSMClient
from scoutsite.osm.programme import sort_by_meeting_date
from scoutsite.osm.rate_limit import RateLimitInfo
from scoutsite.osm.schema import ProgrammeSummaryParams


ALL_CALLS = [
    ("get_startup_data", {}),
    ("get_member_list", {"sectionid": "1", "termid": "1"}),
    ("get_individual_member", {"sectionid": "1", "scoutid": "101", "termid": "1"}),
    ("get_patrols", {"sectionid": "1", "termid": "1"}),
    ("get_census_details", {"sectionid": "1", "termid": "1"}),
    ("get_flexi_records", {"sectionid": "1"}),
    ("get_member_transfers", {"mode": "in", "section_id": "1"}),
    ("get_deletable_members", {"section_id": "1"}),
    ("get_programme_summary", {"sectionid": "1", "termid": "1"}),
    ("get_badge_tag_cloud", {"sectionid": "1", "termid": "1", "section": "scouts"}),
    ("get_risk_assessment_categories", {"section_id": "1"}),
    ("get_programme_detail", {"sectionid": "1", "termid": "1", "eveningid": "1"}),
    ("get_programme_attachments", {"section_id": "1", "id": "1", "evening_id": "1"}),
]


@pytest.fixture
def mock_client():
    return MockOSMClient(delay=0)


@pytest.mark.unit
@pytest.mark.parametrize("method,kwargs", ALL_CALLS)
def test_mock_never_touches_network_and_is_stable(mock_client, method, kwargs):
    with patch.object(requests.Session, "request", side_effect=AssertionError("network used")):
        first = getattr(mock_client, method)(**kwargs)
        second = getattr(mock_client, method)(**kwargs)

    assert first == second


@pytest.mark.unit
def test_mock_ignores_parameter_values(mock_client):
    a = mock_client.get_programme_summary(sectionid="1", termid="1")
    b = mock_client.get_programme_summary(ProgrammeSummaryParams(sectionid="99", termid="7"))

    assert a == b


@pytest.mark.unit
def test_mock_accepts_integer_ids(mock_client):
    summary = mock_client.get_programme_summary(sectionid=1, termid=1)
    detail = mock_client.get_programme_detail(sectionid=1, termid=1, eveningid=3)

    assert len(summary.items) == 5
    assert detail.items


@pytest.mark.unit
def test_mock_returns_fresh_objects(mock_client):
    first = mock_client.get_programme_summary(sectionid="1", termid="1")
    first.items.clear()

    assert len(mock_client.get_programme_summary(sectionid="1", termid="1").items) == 5


@pytest.mark.unit
def test_mock_sleeps_to_simulate_latency():
    client = MockOSMClient(delay=0.1)
    with patch("scoutsite.osm.mock_client.time.sleep") as mock_sleep:
        client.get_startup_data()

    mock_sleep.assert_called_once_with(0.1)


@pytest.mark.unit
def test_mock_rate_limit_is_always_healthy(mock_client):
    info = mock_client.get_rate_limit_info()

    assert isinstance(info, RateLimitInfo)
    assert info.limit == "1000"
    assert info.remaining == "999"
    assert int(info.reset) > time.time() * 1000

    mock_client.get_programme_summary(sectionid="1", termid="1")
    assert mock_client.get_rate_limit_info() == info


@pytest.mark.unit
def test_programme_summary_has_five_items_sorted_by_caller(mock_client):
    summary = mock_client.get_programme_summary(sectionid="1", termid="1")

    assert len(summary.items) == 5
    ordered = sort_by_meeting_date(summary.items)
    dates = [i.meetingdate for i in ordered]
    assert dates == sorted(dates)
    assert [i.title for i in ordered][0] == "Camping Skills"


@pytest.mark.unit
def test_badge_cloud_has_five_positive_counts(mock_client):
    cloud = mock_client.get_badge_tag_cloud(sectionid="1", termid="1", section="scouts")

    assert len(cloud.tags) == 5
    assert all(isinstance(v, int) and v > 0 for v in cloud.tags.values())
    assert cloud.tag_count == 5


@pytest.mark.unit
def test_mock_patrols_include_leaders(mock_client):
    patrols = mock_client.get_patrols(sectionid="1", termid="1")

    leaders = [p for p in patrols.patrols if p.patrolid == "-2"]
    assert leaders and leaders[0].name == "Leaders"


@pytest.mark.unit
def test_mock_attachments_manifest_is_empty(mock_client):
    assert mock_client.get_programme_attachments(section_id="1", id="1", evening_id="1") == {}
