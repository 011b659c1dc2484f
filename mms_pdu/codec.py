"""Binary encoding and decoding of MMS PDUs.

Wire layout (``uintvar`` is the WSP variable-length unsigned integer)::

    pdu    := uintvar(headers_len) header* body?
    header := code:1 uintvar(value_len) value
    body   := uintvar(part_count) part*
    part   := uintvar(headers_len) uintvar(data_len) content_type NUL part_header* data

Unknown header codes are skipped using their declared length, and a value
that cannot be interpreted is dropped with a warning, so one bad field never
costs the rest of the message. Only framing that makes the header block
unreadable raises :class:`PduFormatError`.
"""

from __future__ import annotations

import struct
from typing import List, Optional, Tuple

from mms_shared import constants as c
from mms_shared.logging_config import log

from .encoded_string import EncodedStringValue
from .headers import (
    KIND_ENCODED_STRING,
    KIND_ENCODED_STRING_LIST,
    KIND_LONG,
    KIND_OCTET,
    KIND_TEXT,
    header_name,
    header_value_kind,
    message_type_name,
)
from .parts import PduBody, PduPart
from .pdu import GenericPdu, PduHeaderValues, pdu_class_for

MAX_UINTVAR_OCTETS = 5
MAX_LONG_OCTETS = 8

# Headers written straight after Message-Type, in this order.
LEADING_HEADERS = (c.TRANSACTION_ID, c.MMS_VERSION)


class PduFormatError(ValueError):
    """Raised when PDU bytes are structurally unreadable."""


def encode_uintvar(value: int) -> bytes:
    """Encode a non-negative integer as a WSP uintvar (7 bits per octet, MSB continues)."""
    if value < 0:
        raise ValueError(f"uintvar cannot encode negative value {value}")
    octets = [value & 0x7F]
    value >>= 7
    while value:
        octets.append(0x80 | (value & 0x7F))
        value >>= 7
    return bytes(reversed(octets))


def decode_uintvar(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode a uintvar starting at ``offset``.

    Args:
        data: Buffer holding the encoded value.
        offset: Position of the first octet.

    Returns:
        Tuple of (value, offset just past the uintvar).

    Raises:
        PduFormatError: If the value is truncated or longer than five octets.
    """
    value = 0
    for index in range(MAX_UINTVAR_OCTETS):
        pos = offset + index
        if pos >= len(data):
            raise PduFormatError("Truncated uintvar")
        octet = data[pos]
        value = (value << 7) | (octet & 0x7F)
        if not octet & 0x80:
            return value, pos + 1
    raise PduFormatError("uintvar longer than 5 octets")


def encode_pdu(pdu: GenericPdu) -> bytes:
    """Serialize a PDU into its wire representation.

    Args:
        pdu: Any concrete PDU variant.

    Returns:
        bytes: Header block prefixed by its length, followed by the body for
        variants that carry one and have it set.
    """
    header_block = _encode_headers(pdu)
    chunks = [encode_uintvar(len(header_block)), header_block]
    body = getattr(pdu, "body", None) if pdu.HAS_BODY else None
    if body is not None:
        chunks.append(_encode_body(body))
    wire = b"".join(chunks)
    log.debug("Encoded %s into %d bytes", type(pdu).__name__, len(wire))
    return wire


def decode_pdu(data: bytes) -> GenericPdu:
    """Parse wire bytes into the matching PDU variant.

    Args:
        data: Complete PDU bytes as produced by :func:`encode_pdu`.

    Returns:
        GenericPdu: SendReq, SendConf, NotificationInd, ... instance.

    Raises:
        PduFormatError: If the input is empty, the header block is truncated,
            or the message type is missing or unsupported.
    """
    if not data:
        raise PduFormatError("Empty PDU")
    data = bytes(data)
    headers_len, offset = decode_uintvar(data, 0)
    end = offset + headers_len
    if end > len(data):
        raise PduFormatError(f"Header block declares {headers_len} bytes, only {len(data) - offset} present")

    message_type, values = _decode_headers(data[offset:end])
    if message_type is None:
        raise PduFormatError("PDU has no Message-Type header")
    pdu_cls = pdu_class_for(message_type)
    if pdu_cls is None:
        raise PduFormatError(f"Unsupported message type {message_type_name(message_type)}")

    pdu = pdu_cls(values)
    if end < len(data):
        if pdu_cls.HAS_BODY:
            pdu.body = _decode_body(data[end:])
        else:
            log.debug("Ignoring %d trailing bytes after %s headers", len(data) - end, pdu_cls.__name__)
    log.debug("Decoded %s with %d headers", pdu_cls.__name__, len(values))
    return pdu


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------

def _encode_entry(code: int, value: bytes) -> bytes:
    return struct.pack(">B", code) + encode_uintvar(len(value)) + value


def _encode_long(value: int) -> bytes:
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


def _encode_encoded_string(value: EncodedStringValue) -> bytes:
    return encode_uintvar(value.character_set) + value.text_bytes


def _encode_header_value(code: int, value) -> List[bytes]:
    if isinstance(value, list):
        return [_encode_entry(code, _encode_encoded_string(item)) for item in value]
    if isinstance(value, EncodedStringValue):
        return [_encode_entry(code, _encode_encoded_string(value))]
    if isinstance(value, bytes):
        return [_encode_entry(code, value)]
    kind = header_value_kind(code)
    if kind == KIND_OCTET or (kind is None and value <= 0xFF):
        return [_encode_entry(code, struct.pack(">B", value))]
    return [_encode_entry(code, _encode_long(value))]


def _encode_headers(pdu: GenericPdu) -> bytes:
    chunks = [_encode_entry(c.MESSAGE_TYPE, struct.pack(">B", pdu.message_type))]
    items = dict(pdu.headers.items())
    items.pop(c.MESSAGE_TYPE, None)
    for code in LEADING_HEADERS:
        if code in items:
            chunks.extend(_encode_header_value(code, items.pop(code)))
    for code, value in items.items():
        chunks.extend(_encode_header_value(code, value))
    return b"".join(chunks)


def _decode_headers(block: bytes) -> Tuple[Optional[int], PduHeaderValues]:
    values = PduHeaderValues()
    message_type: Optional[int] = None
    offset = 0
    while offset < len(block):
        code = block[offset]
        value_len, offset = decode_uintvar(block, offset + 1)
        end = offset + value_len
        if end > len(block):
            raise PduFormatError(f"Truncated value for header {header_name(code)}")
        raw = block[offset:end]
        offset = end

        if code == c.MESSAGE_TYPE:
            if len(raw) == 1:
                message_type = raw[0]
            else:
                log.warning("Ignoring Message-Type header of %d bytes", len(raw))
            continue

        kind = header_value_kind(code)
        if kind is None:
            log.debug("Skipping unknown header 0x%02X (%d bytes)", code, len(raw))
            continue
        try:
            _store_header(values, code, kind, raw)
        except ValueError as exc:
            log.warning("Dropping malformed %s header: %s", header_name(code), exc)
    return message_type, values


def _store_header(values: PduHeaderValues, code: int, kind: str, raw: bytes) -> None:
    if kind == KIND_OCTET:
        if len(raw) != 1:
            raise ValueError(f"expected 1 octet, got {len(raw)}")
        values.set_octet(code, raw[0])
    elif kind == KIND_LONG:
        if not 1 <= len(raw) <= MAX_LONG_OCTETS:
            raise ValueError(f"expected 1-{MAX_LONG_OCTETS} octets, got {len(raw)}")
        values.set_long(code, int.from_bytes(raw, "big"))
    elif kind == KIND_TEXT:
        values.set_text(code, raw)
    elif kind == KIND_ENCODED_STRING:
        values.set_encoded_string(code, _decode_encoded_string(raw))
    elif kind == KIND_ENCODED_STRING_LIST:
        values.append_encoded_string(code, _decode_encoded_string(raw))


def _decode_encoded_string(raw: bytes) -> EncodedStringValue:
    charset, pos = decode_uintvar(raw, 0)
    return EncodedStringValue(raw[pos:], charset)


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------

def _encode_body(body: PduBody) -> bytes:
    chunks = [encode_uintvar(body.parts_num)]
    for part in body:
        chunks.append(_encode_part(part))
    return b"".join(chunks)


def _encode_part(part: PduPart) -> bytes:
    header_chunks = [part.content_type_bytes or b"", b"\x00"]
    if part.charset is not None:
        header_chunks.append(_encode_entry(c.PART_CHARSET, _encode_long(part.charset)))
    if part.name is not None:
        header_chunks.append(_encode_entry(c.PART_NAME, part.name.encode("utf-8")))
    if part.filename is not None:
        header_chunks.append(_encode_entry(c.PART_FILENAME, part.filename.encode("utf-8")))
    if part.content_id is not None:
        header_chunks.append(_encode_entry(c.PART_CONTENT_ID, part.content_id))
    if part.content_location is not None:
        header_chunks.append(_encode_entry(c.PART_CONTENT_LOCATION, part.content_location))
    part_headers = b"".join(header_chunks)
    data = part.data or b""
    return b"".join([encode_uintvar(len(part_headers)), encode_uintvar(len(data)), part_headers, data])


def _decode_body(data: bytes) -> PduBody:
    body = PduBody()
    try:
        part_count, offset = decode_uintvar(data, 0)
    except PduFormatError as exc:
        log.warning("Unreadable body part count: %s", exc)
        return body
    for index in range(part_count):
        try:
            part, offset = _decode_part(data, offset)
        except PduFormatError as exc:
            log.warning("Stopping body parse at part %d of %d: %s", index, part_count, exc)
            break
        body.add_part(part)
    return body


def _decode_part(data: bytes, offset: int) -> Tuple[PduPart, int]:
    headers_len, offset = decode_uintvar(data, offset)
    data_len, offset = decode_uintvar(data, offset)
    headers_end = offset + headers_len
    data_end = headers_end + data_len
    if data_end > len(data):
        raise PduFormatError("Truncated body part")

    header_block = data[offset:headers_end]
    content_type, _, part_headers = header_block.partition(b"\x00")
    part = PduPart(content_type=content_type or None, data=data[headers_end:data_end])
    _decode_part_headers(part, part_headers)
    return part, data_end


def _decode_part_headers(part: PduPart, block: bytes) -> None:
    offset = 0
    while offset < len(block):
        code = block[offset]
        try:
            value_len, offset = decode_uintvar(block, offset + 1)
        except PduFormatError as exc:
            log.warning("Dropping remaining part headers: %s", exc)
            return
        end = offset + value_len
        if end > len(block):
            log.warning("Dropping truncated part header 0x%02X", code)
            return
        raw = block[offset:end]
        offset = end

        if code == c.PART_CHARSET and 1 <= len(raw) <= MAX_LONG_OCTETS:
            part.charset = int.from_bytes(raw, "big")
        elif code == c.PART_NAME:
            part.name = raw.decode("utf-8", errors="replace")
        elif code == c.PART_FILENAME:
            part.filename = raw.decode("utf-8", errors="replace")
        elif code == c.PART_CONTENT_ID:
            part.content_id = raw
        elif code == c.PART_CONTENT_LOCATION:
            part.content_location = raw
        else:
            log.debug("Skipping unknown part header 0x%02X (%d bytes)", code, len(raw))
