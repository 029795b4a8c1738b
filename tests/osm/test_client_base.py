import pytest
import requests
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

from scoutsite.osm.client_base import BaseOSMClient, RATE_LIMIT_MESSAGE
from scoutsite.osm.errors import ErrorKind, OSMApiError
from scoutsite.osm.rate_limit import RateLimitInfo
from scoutsite.osm.schema import ProgrammeSummaryResponse

from .fakes import FakeResponse, RATE_HEADERS


def _query(url):
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


@pytest.mark.unit
def test_base_client_sets_default_headers(client):
    assert client.session.headers["Accept"] == "application/json"
    assert "ScoutSite" in client.session.headers["User-Agent"]


@pytest.mark.unit
@pytest.mark.parametrize("api_id,api_token", [("", "tok"), ("id", ""), ("", "")])
def test_missing_credentials_raise_configuration_error(api_id, api_token):
    with pytest.raises(OSMApiError) as e:
        BaseOSMClient(api_id=api_id, api_token=api_token)

    assert e.value.kind is ErrorKind.CONFIGURATION
    assert e.value.status is None


@pytest.mark.unit
def test_build_url_puts_auth_first_then_params_in_order(client):
    url = client.build_url("/ext/programme/?action=getProgramme", {"sectionid": "1", "termid": 2, "eveningid": "9"})

    assert url.startswith("https://osm.example.com/ext/programme/?")
    assert _query(url) == [
        ("action", "getProgramme"),
        ("apiid", "my-id"),
        ("token", "s3cret"),
        ("sectionid", "1"),
        ("termid", "2"),
        ("eveningid", "9"),
    ]


@pytest.mark.unit
def test_build_url_without_existing_query(client):
    url = client.build_url("/v3/members/review/deletion/7")

    assert url == "https://osm.example.com/v3/members/review/deletion/7?apiid=my-id&token=s3cret"


@pytest.mark.unit
def test_build_url_renders_booleans_lowercase(client):
    url = client.build_url("/x", [("temp", False), ("flag", True)])

    assert _query(url)[2:] == [("temp", "false"), ("flag", "true")]


@pytest.mark.unit
@pytest.mark.parametrize("n_params", [0, 1, 5])
def test_every_request_carries_auth(client, n_params):
    params = {f"p{i}": i for i in range(n_params)}
    client.request("/ext/thing/?action=x", params)

    url = client.session.get.call_args[0][0]
    query = dict(_query(url))
    assert query["apiid"] == "my-id"
    assert query["token"] == "s3cret"
    assert len(_query(url)) == 3 + n_params


@pytest.mark.unit
def test_request_success_returns_decoded_json(respond):
    client = respond(200, {"ok": True})

    assert client.request("/x") == {"ok": True}
    client.session.get.assert_called_once()
    assert client.session.get.call_args.kwargs["timeout"] == client.timeout


@pytest.mark.unit
def test_request_validates_into_response_model(respond):
    client = respond(200, {"items": [{"eveningid": 3, "title": "Hike"}]})

    summary = client.request("/x", response_model=ProgrammeSummaryResponse)

    assert isinstance(summary, ProgrammeSummaryResponse)
    assert summary.items[0].eveningid == "3"


@pytest.mark.unit
def test_rate_limit_info_absent_before_first_request(client):
    assert client.get_rate_limit_info() is None


@pytest.mark.unit
def test_rate_limit_info_captured_on_success(respond):
    client = respond(200, {}, RATE_HEADERS)
    client.request("/x")

    assert client.get_rate_limit_info() == RateLimitInfo("1000", "998", "1700000000")


@pytest.mark.unit
def test_rate_limit_info_overwritten_not_merged(client):
    client.session.get = MagicMock(
        side_effect=[
            FakeResponse(200, {}, RATE_HEADERS),
            FakeResponse(200, {}, {"X-RateLimit-Remaining": "5"}),
        ]
    )
    client.request("/x")
    client.request("/x")

    assert client.get_rate_limit_info() == RateLimitInfo(limit="", remaining="5", reset="")


@pytest.mark.unit
def test_429_raises_rate_limited_with_snapshot(respond):
    headers = {
        "X-RateLimit-Limit": "100",
        "X-RateLimit-Remaining": "0",
        "X-RateLimit-Reset": "60",
    }
    client = respond(429, {"error": "slow down"}, headers, reason="Too Many Requests")

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert e.value.kind is ErrorKind.RATE_LIMITED
    assert e.value.message == RATE_LIMIT_MESSAGE == "Rate limit exceeded"
    assert e.value.status == 429
    assert e.value.rate_limit == RateLimitInfo("100", "0", "60")
    assert client.get_rate_limit_info() == e.value.rate_limit


@pytest.mark.unit
def test_http_error_raises_with_status_and_reason(respond):
    client = respond(404, "not here", RATE_HEADERS, reason="Not Found")

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert e.value.kind is ErrorKind.HTTP
    assert e.value.status == 404
    assert e.value.message == "API request failed: Not Found"
    assert e.value.rate_limit is None
    # Headers are still recorded on failure
    assert client.get_rate_limit_info().remaining == "998"


@pytest.mark.unit
def test_http_error_without_reason_uses_status(respond):
    client = respond(503, "", reason="")

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert e.value.message == "API request failed: 503"


@pytest.mark.unit
def test_transport_error_is_message_only(client):
    client.session.get = MagicMock(side_effect=requests.ConnectionError("DNS lookup failed"))

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert e.value.kind is ErrorKind.TRANSPORT
    assert e.value.message == "DNS lookup failed"
    assert e.value.status is None
    assert e.value.rate_limit is None


@pytest.mark.unit
def test_timeout_is_transport_error(client):
    client.session.get = MagicMock(side_effect=requests.Timeout("read timed out"))

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert e.value.kind is ErrorKind.TRANSPORT
    assert "timed out" in e.value.message


@pytest.mark.unit
def test_invalid_json_raises_decode_error(respond):
    client = respond(200, "<html>oops</html>")

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert e.value.kind is ErrorKind.DECODE
    assert e.value.status is None
    assert "Invalid JSON" in e.value.message


@pytest.mark.unit
def test_wrong_shape_raises_decode_error(respond):
    client = respond(200, {"items": "not a list"})

    with pytest.raises(OSMApiError) as e:
        client.request("/x", response_model=ProgrammeSummaryResponse)

    assert e.value.kind is ErrorKind.DECODE
    assert "Unexpected response shape" in e.value.message


@pytest.mark.unit
def test_one_attempt_per_call(respond):
    client = respond(500, "", reason="Internal Server Error")

    with pytest.raises(OSMApiError):
        client.request("/x")

    assert client.session.get.call_count == 1


@pytest.mark.unit
def test_context_manager_closes_session():
    with BaseOSMClient(api_id="a", api_token="b") as c:
        c.session.close = MagicMock()
    c.session.close.assert_called_once()


@pytest.mark.unit
def test_transport_error_message_hides_token(client):
    client.session.get = MagicMock(
        side_effect=requests.ConnectionError("Max retries exceeded with url: /x?apiid=my-id&token=s3cret")
    )

    with pytest.raises(OSMApiError) as e:
        client.request("/x")

    assert "s3cret" not in e.value.message
    assert "token=***" in e.value.message


@pytest.mark.unit
def test_transport_error_message_hides_encoded_token():
    c = BaseOSMClient(api_id="my-id", api_token="ab+c/d=")
    c.session.get = MagicMock(
        side_effect=requests.ConnectionError(
            "Max retries exceeded with url: /x?apiid=my-id&token=ab%2Bc%2Fd%3D"
        )
    )

    with pytest.raises(OSMApiError) as e:
        c.request("/x")

    assert "ab%2Bc%2Fd%3D" not in e.value.message
    assert "token=***" in e.value.message
