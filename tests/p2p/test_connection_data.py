import json
import time

import pytest

from p2p_handshake import P2PConnectionData, P2PParseError, accept_connection_offer
from p2p_handshake.connection_data import FRESHNESS_WINDOW_MS


def _now_ms():
    return int(time.time() * 1000)


def _descriptor(**overrides):
    fields = dict(
        connection_id="conn-123",
        sender_phone_number="+15551234567",
        signal_server_url="wss://signal.example/ws",
        ice_servers='[{"urls":"stun:stun.example:3478"}]',
        device_id="device-abc",
        timestamp=1_700_000_000_123,
    )
    fields.update(overrides)
    return P2PConnectionData(**fields)


def test_to_json_uses_wire_keys():
    data = json.loads(_descriptor().to_json())

    assert data == {
        "connectionId": "conn-123",
        "senderPhoneNumber": "+15551234567",
        "signalServerUrl": "wss://signal.example/ws",
        "iceServers": '[{"urls":"stun:stun.example:3478"}]',
        "deviceId": "device-abc",
        "timestamp": 1_700_000_000_123,
    }


def test_json_round_trip_preserves_every_field():
    """Serialization round trips reproduce the descriptor, also after a second pass."""
    original = _descriptor()

    once = P2PConnectionData.from_json(original.to_json())
    twice = P2PConnectionData.from_json(once.to_json())

    assert once == original
    assert twice == original


def test_empty_object_parses_to_invalid_descriptor():
    data = P2PConnectionData.from_json("{}")

    assert data == P2PConnectionData()
    assert data.timestamp == 0
    assert data.is_valid() is False


@pytest.mark.parametrize("text", ["invalid json", "", "[1, 2]", '"string"', None])
def test_invalid_json_raises_parse_error(text):
    with pytest.raises(P2PParseError):
        P2PConnectionData.from_json(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        P2PConnectionData.from_json("{not json")


def test_non_string_fields_are_coerced():
    text = json.dumps({"connectionId": 42, "iceServers": [{"urls": "stun:x"}], "timestamp": "nope", "deviceId": None})

    data = P2PConnectionData.from_json(text)

    assert data.connection_id == "42"
    assert data.ice_servers == '[{"urls":"stun:x"}]'
    assert data.device_id == ""
    assert data.timestamp == 0


@pytest.mark.parametrize(
    "field", ["connection_id", "sender_phone_number", "signal_server_url", "ice_servers", "device_id"]
)
def test_blank_string_field_is_invalid(field):
    assert _descriptor().is_valid() is True
    assert _descriptor(**{field: "   "}).is_valid() is False


def test_freshness_window():
    """Descriptors older than five minutes are stale."""
    now = _now_ms()

    assert _descriptor(timestamp=now).is_fresh() is True
    assert _descriptor(timestamp=now - 10 * 60 * 1000).is_fresh() is False
    assert _descriptor(timestamp=1000).is_fresh(now_ms=1000 + FRESHNESS_WINDOW_MS) is True
    assert _descriptor(timestamp=1000).is_fresh(now_ms=1001 + FRESHNESS_WINDOW_MS) is False


def test_str_includes_id_and_phone_number():
    text = str(_descriptor())

    assert "conn-123" in text
    assert "+15551234567" in text


def test_accept_connection_offer():
    now = _now_ms()
    fresh = _descriptor(timestamp=now).to_json()
    stale = _descriptor(timestamp=now - 10 * 60 * 1000).to_json()

    accepted = accept_connection_offer(fresh)
    assert accepted is not None
    assert accepted.connection_id == "conn-123"
    assert accept_connection_offer(stale) is None
    assert accept_connection_offer("{}") is None
    assert accept_connection_offer("invalid json") is None


@pytest.mark.parametrize("raw", ["1e999", "-1e999", "NaN"])
def test_non_finite_timestamp_defaults_to_zero(raw):
    """Out-of-range numbers in valid JSON fall back to 0 instead of raising."""
    text = '{"connectionId": "conn-1", "timestamp": %s}' % raw

    data = P2PConnectionData.from_json(text)

    assert data.connection_id == "conn-1"
    assert data.timestamp == 0
    assert accept_connection_offer(text) is None


@pytest.mark.parametrize(
    "field", ["connection_id", "sender_phone_number", "signal_server_url", "ice_servers", "device_id"]
)
def test_none_string_field_is_invalid(field):
    assert _descriptor(**{field: None}).is_valid() is False
