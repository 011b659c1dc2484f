"""JSON connection descriptor exchanged during the P2P handshake."""

from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from mms_shared.logging_config import log

# Descriptors older than this are stale.
FRESHNESS_WINDOW_MS = 5 * 60 * 1000

_JSON_KEYS = {
    "connection_id": "connectionId",
    "sender_phone_number": "senderPhoneNumber",
    "signal_server_url": "signalServerUrl",
    "ice_servers": "iceServers",
    "device_id": "deviceId",
    "timestamp": "timestamp",
}


class P2PParseError(ValueError):
    """Raised when a connection descriptor is not a JSON object."""


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class P2PConnectionData:
    """Connection descriptor; ``ice_servers`` is an opaque JSON string passed through as is."""

    connection_id: str = ""
    sender_phone_number: str = ""
    signal_server_url: str = ""
    ice_servers: str = ""
    device_id: str = ""
    timestamp: int = 0

    def is_valid(self) -> bool:
        """Return True when every string field is a non-blank string."""
        return all(
            isinstance(value, str) and value.strip()
            for value in (
                self.connection_id,
                self.sender_phone_number,
                self.signal_server_url,
                self.ice_servers,
                self.device_id,
            )
        )

    def is_fresh(self, now_ms: Optional[int] = None) -> bool:
        now = _now_ms() if now_ms is None else now_ms
        return now - self.timestamp <= FRESHNESS_WINDOW_MS

    def to_dict(self) -> Dict[str, Any]:
        return {_JSON_KEYS[field]: value for field, value in asdict(self).items()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> "P2PConnectionData":
        """Parse a descriptor from JSON text.

        Absent keys default to ``""`` and ``0``, so ``{}`` yields a descriptor
        that parses but is not valid.

        Args:
            text: JSON object text.

        Returns:
            P2PConnectionData: The parsed descriptor.

        Raises:
            P2PParseError: If ``text`` is not valid JSON or not a JSON object.
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise P2PParseError(f"Invalid connection descriptor JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise P2PParseError(f"Connection descriptor must be a JSON object, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        for field, key in _JSON_KEYS.items():
            if field == "timestamp":
                kwargs[field] = _coerce_timestamp(data.get(key))
            else:
                kwargs[field] = _coerce_text(data.get(key))
        return cls(**kwargs)

    def __str__(self) -> str:
        return (
            f"P2PConnectionData(connectionId={self.connection_id}, "
            f"senderPhoneNumber={self.sender_phone_number}, timestamp={self.timestamp})"
        )


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        # iceServers sometimes arrives as a nested array instead of a string
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _coerce_timestamp(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        log.warning("Ignoring boolean connection descriptor timestamp")
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        log.warning("Ignoring non-numeric connection descriptor timestamp %r", value)
        return 0


def accept_connection_offer(json_text: str, now_ms: Optional[int] = None) -> Optional[P2PConnectionData]:
    """Parse an incoming descriptor and return it only if valid and fresh.

    Returns:
        Optional[P2PConnectionData]: The descriptor, or None when rejected.
    """
    try:
        data = P2PConnectionData.from_json(json_text)
    except P2PParseError as exc:
        log.warning("Rejecting connection offer: %s", exc)
        return None
    if not data.is_valid():
        log.warning("Rejecting connection offer %s: missing fields", data)
        return None
    if not data.is_fresh(now_ms):
        log.warning("Rejecting connection offer %s: stale", data)
        return None
    log.info("Accepted connection offer %s", data)
    return data
