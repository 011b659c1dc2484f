"""MMS PDU variants built on a shared header map.

Each variant is a thin typed view over :class:`PduHeaderValues`; accessors
read and write the map directly, so a value set through one accessor is
visible immediately through every other path (including the codec).
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, Union

from mms_shared import constants as c

from .encoded_string import EncodedStringValue
from .headers import header_name, message_type_name, response_status_name
from .parts import PduBody

TextValue = Union[str, bytes]
EncodedValue = Union[str, EncodedStringValue]


class PduHeaderValues:
    """Typed storage for PDU header values keyed by header field code.

    Values are octets (``int`` 0-255), long integers (non-negative ``int``),
    text (``bytes``), :class:`EncodedStringValue` or lists of those. Setting
    a header to ``None`` removes it. Insertion order is preserved and drives
    the order in which the codec writes headers.
    """

    def __init__(self):
        self._values: Dict[int, Any] = {}

    def get_octet(self, code: int, default: Optional[int] = None) -> Optional[int]:
        value = self._values.get(code)
        return value if isinstance(value, int) else default

    def set_octet(self, code: int, value: Optional[int]) -> None:
        if value is None:
            self.remove(code)
            return
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"{header_name(code)} expects an octet, got {value!r}")
        self._values[code] = value

    def get_long(self, code: int, default: Optional[int] = None) -> Optional[int]:
        value = self._values.get(code)
        return value if isinstance(value, int) else default

    def set_long(self, code: int, value: Optional[int]) -> None:
        if value is None:
            self.remove(code)
            return
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"{header_name(code)} expects a non-negative integer, got {value!r}")
        self._values[code] = value

    def get_text(self, code: int) -> Optional[bytes]:
        value = self._values.get(code)
        return value if isinstance(value, bytes) else None

    def set_text(self, code: int, value: Optional[TextValue]) -> None:
        if value is None:
            self.remove(code)
            return
        if isinstance(value, str):
            value = value.encode("utf-8")
        self._values[code] = bytes(value)

    def get_encoded_string(self, code: int) -> Optional[EncodedStringValue]:
        value = self._values.get(code)
        return value if isinstance(value, EncodedStringValue) else None

    def set_encoded_string(self, code: int, value: Optional[EncodedValue]) -> None:
        if value is None:
            self.remove(code)
            return
        self._values[code] = _as_encoded(value)

    def get_encoded_string_list(self, code: int) -> List[EncodedStringValue]:
        value = self._values.get(code)
        return list(value) if isinstance(value, list) else []

    def set_encoded_string_list(self, code: int, values: Optional[List[EncodedValue]]) -> None:
        if not values:
            self.remove(code)
            return
        self._values[code] = [_as_encoded(v) for v in values]

    def append_encoded_string(self, code: int, value: EncodedValue) -> None:
        self._values.setdefault(code, []).append(_as_encoded(value))

    def remove(self, code: int) -> None:
        self._values.pop(code, None)

    def items(self) -> Iterator[Tuple[int, Any]]:
        return iter(list(self._values.items()))

    def __contains__(self, code: object) -> bool:
        return code in self._values

    def __len__(self) -> int:
        return len(self._values)


def _as_encoded(value: EncodedValue) -> EncodedStringValue:
    if isinstance(value, EncodedStringValue):
        return value
    return EncodedStringValue(value)


def _octet_header(code: int, default: Optional[int] = None, doc: Optional[str] = None) -> property:
    def fget(self):
        return self.headers.get_octet(code, default)

    def fset(self, value):
        self.headers.set_octet(code, value)

    return property(fget, fset, doc=doc or header_name(code))


def _long_header(code: int, doc: Optional[str] = None) -> property:
    def fget(self):
        return self.headers.get_long(code)

    def fset(self, value):
        self.headers.set_long(code, value)

    return property(fget, fset, doc=doc or header_name(code))


def _text_header(code: int, doc: Optional[str] = None) -> property:
    def fget(self):
        return self.headers.get_text(code)

    def fset(self, value):
        self.headers.set_text(code, value)

    return property(fget, fset, doc=doc or header_name(code))


def _encoded_header(code: int, doc: Optional[str] = None) -> property:
    def fget(self):
        return self.headers.get_encoded_string(code)

    def fset(self, value):
        self.headers.set_encoded_string(code, value)

    return property(fget, fset, doc=doc or header_name(code))


def _address_list_header(code: int, doc: Optional[str] = None) -> property:
    def fget(self):
        return self.headers.get_encoded_string_list(code)

    def fset(self, values):
        self.headers.set_encoded_string_list(code, values)

    return property(fget, fset, doc=doc or header_name(code))


class GenericPdu:
    """Base for all PDU variants; never instantiated directly."""

    MESSAGE_TYPE: Optional[int] = None
    HAS_BODY = False

    def __init__(self, headers: Optional[PduHeaderValues] = None):
        if self.MESSAGE_TYPE is None:
            raise TypeError("GenericPdu is abstract; instantiate a concrete PDU variant")
        self.headers = headers if headers is not None else PduHeaderValues()
        if c.MMS_VERSION not in self.headers:
            self.headers.set_octet(c.MMS_VERSION, c.CURRENT_MMS_VERSION)

    @property
    def message_type(self) -> int:
        return self.MESSAGE_TYPE

    mms_version = _octet_header(c.MMS_VERSION, c.CURRENT_MMS_VERSION)

    def __str__(self) -> str:
        names = ", ".join(header_name(code) for code, _ in self.headers.items())
        return f"{type(self).__name__}[{message_type_name(self.message_type)}]({names})"

    def __repr__(self) -> str:
        return f"<{self}>"


class SendReq(GenericPdu):
    """M-Send.req: an outgoing message handed to the MMSC."""

    MESSAGE_TYPE = c.MESSAGE_TYPE_SEND_REQ
    HAS_BODY = True

    def __init__(self, headers: Optional[PduHeaderValues] = None, body: Optional[PduBody] = None):
        super().__init__(headers)
        self.body = body

    transaction_id = _text_header(c.TRANSACTION_ID)
    from_address = _encoded_header(c.FROM)
    to = _address_list_header(c.TO)
    cc = _address_list_header(c.CC)
    bcc = _address_list_header(c.BCC)
    subject = _encoded_header(c.SUBJECT)
    date = _long_header(c.DATE, "Send date in epoch seconds")
    priority = _octet_header(c.PRIORITY, c.PRIORITY_NORMAL)
    delivery_report = _octet_header(c.DELIVERY_REPORT, c.VALUE_NO)
    read_report = _octet_header(c.READ_REPORT, c.VALUE_NO)
    expiry = _long_header(c.EXPIRY)
    delivery_time = _long_header(c.DELIVERY_TIME)
    message_class = _octet_header(c.MESSAGE_CLASS)
    sender_visibility = _octet_header(c.SENDER_VISIBILITY)
    content_type = _text_header(c.CONTENT_TYPE)

    def add_to(self, address: EncodedValue) -> None:
        self.headers.append_encoded_string(c.TO, address)


class SendConf(GenericPdu):
    """M-Send.conf: the MMSC's answer to a SendReq."""

    MESSAGE_TYPE = c.MESSAGE_TYPE_SEND_CONF

    transaction_id = _text_header(c.TRANSACTION_ID)
    message_id = _text_header(c.MESSAGE_ID)
    response_status = _octet_header(c.RESPONSE_STATUS)
    response_text = _encoded_header(c.RESPONSE_TEXT)

    def is_successful(self) -> bool:
        return self.response_status == c.RESPONSE_STATUS_OK

    def __str__(self) -> str:
        status = self.response_status
        status_name = response_status_name(status) if status is not None else "none"
        return f"{super().__str__()} status={status_name}"


class NotificationInd(GenericPdu):
    """M-Notification.ind: announces a message waiting at ``content_location``.

    ``expiry`` is an absolute epoch-seconds value; past values are stored as is.
    """

    MESSAGE_TYPE = c.MESSAGE_TYPE_NOTIFICATION_IND

    transaction_id = _text_header(c.TRANSACTION_ID)
    content_location = _text_header(c.CONTENT_LOCATION)
    from_address = _encoded_header(c.FROM)
    subject = _encoded_header(c.SUBJECT)
    expiry = _long_header(c.EXPIRY)
    message_size = _long_header(c.MESSAGE_SIZE)
    message_class = _octet_header(c.MESSAGE_CLASS)
    delivery_report = _octet_header(c.DELIVERY_REPORT)


class RetrieveConf(GenericPdu):
    """M-Retrieve.conf: the downloaded message, headers plus body."""

    MESSAGE_TYPE = c.MESSAGE_TYPE_RETRIEVE_CONF
    HAS_BODY = True

    def __init__(self, headers: Optional[PduHeaderValues] = None, body: Optional[PduBody] = None):
        super().__init__(headers)
        self.body = body

    transaction_id = _text_header(c.TRANSACTION_ID)
    message_id = _text_header(c.MESSAGE_ID)
    content_type = _text_header(c.CONTENT_TYPE)
    date = _long_header(c.DATE)
    from_address = _encoded_header(c.FROM)
    to = _address_list_header(c.TO)
    cc = _address_list_header(c.CC)
    subject = _encoded_header(c.SUBJECT)
    priority = _octet_header(c.PRIORITY, c.PRIORITY_NORMAL)
    delivery_report = _octet_header(c.DELIVERY_REPORT, c.VALUE_NO)
    read_report = _octet_header(c.READ_REPORT, c.VALUE_NO)
    message_class = _octet_header(c.MESSAGE_CLASS)


class NotifyRespInd(GenericPdu):
    """M-NotifyResp.ind: receiver's acknowledgement of a NotificationInd."""

    MESSAGE_TYPE = c.MESSAGE_TYPE_NOTIFYRESP_IND

    transaction_id = _text_header(c.TRANSACTION_ID)
    status = _octet_header(c.STATUS)
    report_allowed = _octet_header(c.REPORT_ALLOWED)


class AcknowledgeInd(GenericPdu):
    MESSAGE_TYPE = c.MESSAGE_TYPE_ACKNOWLEDGE_IND

    transaction_id = _text_header(c.TRANSACTION_ID)
    report_allowed = _octet_header(c.REPORT_ALLOWED)


_PDU_CLASSES: Dict[int, Type[GenericPdu]] = {
    cls.MESSAGE_TYPE: cls
    for cls in (SendReq, SendConf, NotificationInd, RetrieveConf, NotifyRespInd, AcknowledgeInd)
}


def pdu_class_for(message_type: int) -> Optional[Type[GenericPdu]]:
    """Return the PDU variant registered for a message type code, if any."""
    return _PDU_CLASSES.get(message_type)
