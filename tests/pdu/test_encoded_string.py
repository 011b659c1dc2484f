import pytest

from mms_pdu import EncodedStringValue
from mms_shared import constants as c


@pytest.mark.parametrize("text", ["", "hello", "Grüße aus Köln", "日本語テキスト", "emoji 🎉"])
def test_text_round_trip_is_utf8(text):
    """A value built from text returns the same text and stores UTF-8 bytes."""
    value = EncodedStringValue(text)

    assert value.string == text
    assert value.text_bytes == text.encode("utf-8")
    assert value.character_set == c.CHARSET_UTF8


def test_bytes_are_stored_verbatim_with_charset():
    value = EncodedStringValue("café".encode("iso-8859-1"), c.CHARSET_ISO_8859_1)

    assert value.text_bytes == b"caf\xe9"
    assert value.string == "café"


def test_ucs2_text_encodes_big_endian():
    value = EncodedStringValue("Hi", c.CHARSET_UCS2)

    assert value.text_bytes == b"\x00H\x00i"
    assert value.string == "Hi"


def test_unknown_charset_for_text_falls_back_to_utf8():
    value = EncodedStringValue("abc", 9999)

    assert value.character_set == c.CHARSET_UTF8
    assert value.text_bytes == b"abc"


def test_undecodable_bytes_render_as_latin1():
    """Invalid UTF-8 never raises; the value degrades to Latin-1 text."""
    value = EncodedStringValue(b"\xff\xfe", c.CHARSET_UTF8)

    assert value.string == "\xff\xfe"


def test_unknown_charset_bytes_render_as_latin1():
    value = EncodedStringValue(b"abc", 4242)

    assert value.character_set == 4242
    assert value.string == "abc"


def test_rejects_other_types():
    with pytest.raises(TypeError):
        EncodedStringValue(42)


def test_equality_and_hash():
    a = EncodedStringValue("+15551234567")
    b = EncodedStringValue(b"+15551234567", c.CHARSET_UTF8)

    assert a == b
    assert hash(a) == hash(b)
    assert a != EncodedStringValue("+15551234567", c.CHARSET_US_ASCII)
    assert str(a) == "+15551234567"
