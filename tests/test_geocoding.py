# tests/test_geocoding.py
from unittest import mock

import requests

from locations.geocoding import geocode_address


def _response(payload):
    resp = mock.Mock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


def test_geocode_ok():
    payload = {"status": "OK", "results": [{"geometry": {"location": {"lat": -33.4, "lng": -70.6}}}]}
    with mock.patch("locations.geocoding.requests.get", return_value=_response(payload)) as get:
        assert geocode_address("Alameda 123", "key") == ("-33.4", "-70.6")
    assert get.call_args.kwargs["params"] == {"address": "Alameda 123", "key": "key"}
    assert get.call_args.kwargs["timeout"] == 10


def test_geocode_zero_results():
    with mock.patch("locations.geocoding.requests.get", return_value=_response({"status": "ZERO_RESULTS"})):
        assert geocode_address("nowhere", "key") is None


def test_geocode_connection_error():
    with mock.patch("locations.geocoding.requests.get", side_effect=requests.exceptions.ConnectionError("down")):
        assert geocode_address("Alameda 123", "key") is None


def test_geocode_skipped_without_key_or_address():
    with mock.patch("locations.geocoding.requests.get") as get:
        assert geocode_address("Alameda 123", None) is None
        assert geocode_address("", "key") is None
    get.assert_not_called()
