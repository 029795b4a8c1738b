import json

import pytest

from scoutsite.osm.decoder import decode_body, is_wrapped_endpoint, strip_js_wrapper
from scoutsite.osm.errors import ErrorKind, OSMApiError

STARTUP = "/ext/generic/startup/?action=getData"
PAYLOAD = {"globals": {"firstname": "John", "terms": []}}

# The wrapper OSM puts around the startup payload (18 characters)
PREFIX = "var data_holder = "


@pytest.mark.unit
def test_prefix_is_eighteen_characters():
    assert len(PREFIX) == 18


@pytest.mark.unit
def test_only_startup_endpoint_is_wrapped():
    assert is_wrapped_endpoint(STARTUP)
    assert not is_wrapped_endpoint("/ext/programme/?action=getProgrammeSummary")
    assert not is_wrapped_endpoint("/v3/risk_assessments/1/categories")


@pytest.mark.unit
def test_startup_body_matches_fixed_prefix_strip():
    body = PREFIX + json.dumps(PAYLOAD)

    assert decode_body(STARTUP, body) == json.loads(body[18:]) == PAYLOAD


@pytest.mark.unit
def test_startup_body_with_trailing_semicolon():
    body = PREFIX + json.dumps(PAYLOAD) + ";\n"

    assert decode_body(STARTUP, body) == PAYLOAD


@pytest.mark.unit
def test_startup_wrapper_of_different_length_still_decodes():
    body = "var data = " + json.dumps(PAYLOAD)

    assert decode_body(STARTUP, body) == PAYLOAD


@pytest.mark.unit
def test_startup_body_without_json_is_decode_error():
    with pytest.raises(OSMApiError) as e:
        decode_body(STARTUP, "var data_holder = null")

    assert e.value.kind is ErrorKind.DECODE


@pytest.mark.unit
def test_strip_js_wrapper_handles_arrays():
    assert strip_js_wrapper('x = [1, {"a": 2}];') == '[1, {"a": 2}]'


@pytest.mark.unit
def test_other_endpoints_parse_verbatim():
    body = json.dumps({"items": [{"eveningid": "1"}]})

    assert decode_body("/ext/programme/?action=getProgrammeSummary", body) == json.loads(body)


@pytest.mark.unit
def test_prefixed_body_on_other_endpoint_fails():
    body = PREFIX + json.dumps(PAYLOAD)

    with pytest.raises(OSMApiError) as e:
        decode_body("/ext/programme/?action=getProgrammeSummary", body)

    assert e.value.kind is ErrorKind.DECODE
    assert "Invalid JSON" in e.value.message
