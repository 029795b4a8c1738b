import json

import pytest
from unittest.mock import patch

from scoutsite.osm.cli import REPORTS, main
from scoutsite.osm.errors import ErrorKind, OSMApiError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("OSM_API_ID", "OSM_API_TOKEN", "OSM_BASE_URL", "USE_MOCK_DATA", "OSM_TIMEOUT_SEC"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
def test_every_report_is_registered():
    assert len(REPORTS) == 13


@pytest.mark.unit
def test_programme_summary_with_mock(capsys):
    code = main(["programme-summary", "--section", "1", "--term", "1", "--mock"])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out["items"]) == 5


@pytest.mark.unit
def test_badge_cloud_with_mock(capsys):
    code = main(["badge-cloud", "--section", "1", "--term", "1", "--section-type", "scouts", "--mock"])

    assert code == 0
    assert len(json.loads(capsys.readouterr().out)["tags"]) == 5


@pytest.mark.unit
def test_missing_report_argument_exits():
    with pytest.raises(SystemExit):
        main(["members", "--section", "1", "--mock"])


@pytest.mark.unit
def test_missing_credentials_returns_error_code(capsys):
    assert main(["startup"]) == 1


@pytest.mark.unit
def test_api_error_returns_error_code(monkeypatch):
    monkeypatch.setenv("OSM_API_ID", "id")
    monkeypatch.setenv("OSM_API_TOKEN", "tok")

    with patch(
        "scoutsite.osm.client.OSMClient.get_startup_data",
        side_effect=OSMApiError("Rate limit exceeded", kind=ErrorKind.RATE_LIMITED, status=429),
    ):
        assert main(["startup"]) == 1
