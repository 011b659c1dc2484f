"""In-band P2P handshake trigger embedded in ordinary text messages.

Format::

    P2P_CONNECT#USER:<base64-payload>[trailing text]

The prefix is case-sensitive and must start the whitespace-trimmed message.
The payload is the longest run of Base64 characters after the prefix. A run
that ends at ``#`` invalidates the trigger, since ``#`` is not part of the
Base64 alphabet and would otherwise split the payload silently.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Optional

from mms_shared.logging_config import log

TRIGGER_PREFIX = "P2P_CONNECT#USER:"

_PAYLOAD_RUN = re.compile(r"[A-Za-z0-9+/=]+")
_CANONICAL_BASE64 = re.compile(r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$")


def _match_payload(message: Optional[str]) -> Optional[str]:
    if not message or not isinstance(message, str):
        return None
    text = message.strip()
    if not text.startswith(TRIGGER_PREFIX):
        return None

    start = len(TRIGGER_PREFIX)
    run = _PAYLOAD_RUN.match(text, start)
    if run is None:
        return None
    if text[run.end():run.end() + 1] == "#":
        log.debug("Rejecting P2P trigger: payload is followed by '#'")
        return None
    payload = run.group(0)
    if not _is_base64(payload):
        log.debug("Rejecting P2P trigger: payload is not valid Base64")
        return None
    return payload


def _is_base64(payload: str) -> bool:
    if not _CANONICAL_BASE64.match(payload):
        return False
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def is_valid_p2p_trigger(message: Optional[str]) -> bool:
    """Return True if ``message`` carries a well-formed P2P handshake trigger."""
    return _match_payload(message) is not None


def extract_encrypted_payload(message: Optional[str]) -> Optional[str]:
    """Return the Base64 payload of a valid trigger, or None.

    Args:
        message: Raw text message body.

    Returns:
        Optional[str]: The payload exactly as it appears in the message.
    """
    return _match_payload(message)


def build_p2p_trigger(payload: str) -> str:
    """Compose a trigger message around an already-encrypted Base64 payload.

    Raises:
        ValueError: If ``payload`` is not canonical Base64.
    """
    if not isinstance(payload, str) or not payload or not _is_base64(payload):
        raise ValueError("P2P trigger payload must be non-empty Base64")
    return f"{TRIGGER_PREFIX}{payload}"
