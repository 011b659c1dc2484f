"""Charset-tagged header values (From, Subject, Response-Text ...)."""

from __future__ import annotations

import codecs
from typing import Union

from mms_shared.constants import CHARSET_UTF8
from mms_shared.logging_config import log

# IANA MIBenum -> Python codec name
CHARSET_CODECS = {
    3: "ascii",
    4: "iso-8859-1",
    5: "iso-8859-2",
    6: "iso-8859-3",
    7: "iso-8859-4",
    8: "iso-8859-5",
    9: "iso-8859-6",
    10: "iso-8859-7",
    11: "iso-8859-8",
    12: "iso-8859-9",
    17: "shift_jis",
    106: "utf-8",
    1000: "utf-16-be",
    1015: "utf-16",
    2025: "gb2312",
    2026: "big5",
}


def charset_name(charset: int) -> str | None:
    """Return the Python codec name for a MIBenum charset, or None if unsupported."""
    return CHARSET_CODECS.get(charset)


class EncodedStringValue:
    """Immutable text value tagged with the charset its bytes are encoded in.

    Equality and hashing are defined over ``(charset, bytes)`` so two values
    built from the same text compare equal.
    """

    __slots__ = ("_charset", "_data")

    def __init__(self, value: Union[str, bytes], charset: int = CHARSET_UTF8):
        """Create a value from text or from already encoded bytes.

        Args:
            value: Text to encode, or raw bytes already in ``charset``.
            charset: MIBenum charset id; UTF-8 (106) by default.

        Raises:
            TypeError: If value is neither ``str`` nor bytes-like.
        """
        if isinstance(value, str):
            codec = charset_name(charset)
            if codec is None:
                log.debug("Unsupported charset %s for text value; encoding as utf-8", charset)
                codec, charset = "utf-8", CHARSET_UTF8
            data = value.encode(codec, errors="replace")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            data = bytes(value)
        else:
            raise TypeError(f"EncodedStringValue expects str or bytes, got {type(value).__name__}")
        self._charset = int(charset)
        self._data = data

    @property
    def character_set(self) -> int:
        return self._charset

    @property
    def text_bytes(self) -> bytes:
        return self._data

    @property
    def string(self) -> str:
        """Decode the bytes per charset, falling back to Latin-1 instead of raising."""
        codec = charset_name(self._charset)
        if codec is not None:
            try:
                return codecs.decode(self._data, codec)
            except UnicodeDecodeError:
                log.warning(
                    "Undecodable %s header value (%d bytes); rendering as latin-1",
                    codec,
                    len(self._data),
                )
        else:
            log.debug("Unsupported charset %s; rendering as latin-1", self._charset)
        return self._data.decode("latin-1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedStringValue):
            return NotImplemented
        return self._charset == other._charset and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._charset, self._data))

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"EncodedStringValue(charset={self._charset}, text={self.string!r})"
