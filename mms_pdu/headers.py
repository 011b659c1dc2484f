"""Read-only registry of MMS header codes, enumerated values and their display names.

Every lookup is total: codes missing from the tables render as
``Unknown(<code>)`` so that a single unrecognised value never blocks the
display of an otherwise valid message.
"""

from __future__ import annotations

from types import MappingProxyType

from mms_shared import constants as c

# Value kinds used by the codec to interpret header value bytes.
KIND_OCTET = "octet"
KIND_LONG = "long"
KIND_TEXT = "text"
KIND_ENCODED_STRING = "encoded-string"
KIND_ENCODED_STRING_LIST = "encoded-string-list"

HEADER_NAMES = MappingProxyType(
    {
        c.BCC: "BCC",
        c.CC: "CC",
        c.CONTENT_LOCATION: "Content-Location",
        c.CONTENT_TYPE: "Content-Type",
        c.DATE: "Date",
        c.DELIVERY_REPORT: "Delivery-Report",
        c.DELIVERY_TIME: "Delivery-Time",
        c.EXPIRY: "Expiry",
        c.FROM: "From",
        c.MESSAGE_CLASS: "Message-Class",
        c.MESSAGE_ID: "Message-ID",
        c.MESSAGE_TYPE: "Message-Type",
        c.MMS_VERSION: "MMS-Version",
        c.MESSAGE_SIZE: "Message-Size",
        c.PRIORITY: "Priority",
        c.READ_REPORT: "Read-Report",
        c.REPORT_ALLOWED: "Report-Allowed",
        c.RESPONSE_STATUS: "Response-Status",
        c.RESPONSE_TEXT: "Response-Text",
        c.SENDER_VISIBILITY: "Sender-Visibility",
        c.STATUS: "Status",
        c.SUBJECT: "Subject",
        c.TO: "To",
        c.TRANSACTION_ID: "Transaction-ID",
    }
)

HEADER_VALUE_KINDS = MappingProxyType(
    {
        c.BCC: KIND_ENCODED_STRING_LIST,
        c.CC: KIND_ENCODED_STRING_LIST,
        c.TO: KIND_ENCODED_STRING_LIST,
        c.FROM: KIND_ENCODED_STRING,
        c.SUBJECT: KIND_ENCODED_STRING,
        c.RESPONSE_TEXT: KIND_ENCODED_STRING,
        c.CONTENT_LOCATION: KIND_TEXT,
        c.CONTENT_TYPE: KIND_TEXT,
        c.MESSAGE_ID: KIND_TEXT,
        c.TRANSACTION_ID: KIND_TEXT,
        c.DATE: KIND_LONG,
        c.DELIVERY_TIME: KIND_LONG,
        c.EXPIRY: KIND_LONG,
        c.MESSAGE_SIZE: KIND_LONG,
        c.DELIVERY_REPORT: KIND_OCTET,
        c.MESSAGE_CLASS: KIND_OCTET,
        c.MESSAGE_TYPE: KIND_OCTET,
        c.MMS_VERSION: KIND_OCTET,
        c.PRIORITY: KIND_OCTET,
        c.READ_REPORT: KIND_OCTET,
        c.REPORT_ALLOWED: KIND_OCTET,
        c.RESPONSE_STATUS: KIND_OCTET,
        c.SENDER_VISIBILITY: KIND_OCTET,
        c.STATUS: KIND_OCTET,
    }
)

MESSAGE_TYPE_NAMES = MappingProxyType(
    {
        c.MESSAGE_TYPE_SEND_REQ: "Send-Request",
        c.MESSAGE_TYPE_SEND_CONF: "Send-Confirmation",
        c.MESSAGE_TYPE_NOTIFICATION_IND: "Notification-Indication",
        c.MESSAGE_TYPE_NOTIFYRESP_IND: "Notify-Response-Indication",
        c.MESSAGE_TYPE_RETRIEVE_CONF: "Retrieve-Confirmation",
        c.MESSAGE_TYPE_ACKNOWLEDGE_IND: "Acknowledge-Indication",
        c.MESSAGE_TYPE_DELIVERY_IND: "Delivery-Indication",
    }
)

RESPONSE_STATUS_NAMES = MappingProxyType(
    {
        c.RESPONSE_STATUS_OK: "OK",
        c.RESPONSE_STATUS_ERROR_UNSPECIFIED: "Error-Unspecified",
        c.RESPONSE_STATUS_ERROR_SERVICE_DENIED: "Error-Service-Denied",
        c.RESPONSE_STATUS_ERROR_MESSAGE_FORMAT_CORRUPT: "Error-Message-Format-Corrupt",
        c.RESPONSE_STATUS_ERROR_SENDING_ADDRESS_UNRESOLVED: "Error-Sending-Address-Unresolved",
        c.RESPONSE_STATUS_ERROR_MESSAGE_NOT_FOUND: "Error-Message-Not-Found",
        c.RESPONSE_STATUS_ERROR_NETWORK_PROBLEM: "Error-Network-Problem",
        c.RESPONSE_STATUS_ERROR_CONTENT_NOT_ACCEPTED: "Error-Content-Not-Accepted",
        c.RESPONSE_STATUS_ERROR_UNSUPPORTED_MESSAGE: "Error-Unsupported-Message",
    }
)

PRIORITY_NAMES = MappingProxyType(
    {
        c.PRIORITY_LOW: "Low",
        c.PRIORITY_NORMAL: "Normal",
        c.PRIORITY_HIGH: "High",
    }
)

MESSAGE_CLASS_NAMES = MappingProxyType(
    {
        c.MESSAGE_CLASS_PERSONAL: "Personal",
        c.MESSAGE_CLASS_ADVERTISEMENT: "Advertisement",
        c.MESSAGE_CLASS_INFORMATIONAL: "Informational",
        c.MESSAGE_CLASS_AUTO: "Auto",
    }
)


def unknown_name(code: int) -> str:
    """Placeholder display name for a code missing from the registry."""
    return f"Unknown({code})"


def header_name(code: int) -> str:
    """Return the canonical header name for a header field code.

    Args:
        code: Header field code, e.g. ``FROM`` (0x89).

    Returns:
        str: Canonical name such as ``"From"``, or ``Unknown(<code>)``.
    """
    return HEADER_NAMES.get(code, unknown_name(code))


def message_type_name(code: int) -> str:
    """Return the display name of a message type (``Send-Request`` ...)."""
    return MESSAGE_TYPE_NAMES.get(code, unknown_name(code))


def response_status_name(code: int) -> str:
    """Return the display name of a response status (``OK``, ``Error-...``)."""
    return RESPONSE_STATUS_NAMES.get(code, unknown_name(code))


def priority_name(code: int) -> str:
    return PRIORITY_NAMES.get(code, unknown_name(code))


def message_class_name(code: int) -> str:
    return MESSAGE_CLASS_NAMES.get(code, unknown_name(code))


def header_value_kind(code: int) -> str | None:
    """Return how a header's value bytes are encoded, or None for unknown codes."""
    return HEADER_VALUE_KINDS.get(code)


__all__ = [
    "KIND_OCTET",
    "KIND_LONG",
    "KIND_TEXT",
    "KIND_ENCODED_STRING",
    "KIND_ENCODED_STRING_LIST",
    "header_name",
    "message_type_name",
    "response_status_name",
    "priority_name",
    "message_class_name",
    "header_value_kind",
    "unknown_name",
]
