"""Shared exports for the MMS PDU, compat and P2P packages."""

from .constants import (  # noqa: F401
    CHARSET_UTF8,
    CURRENT_MMS_VERSION,
    MESSAGE_TYPE_ACKNOWLEDGE_IND,
    MESSAGE_TYPE_NOTIFICATION_IND,
    MESSAGE_TYPE_NOTIFYRESP_IND,
    MESSAGE_TYPE_RETRIEVE_CONF,
    MESSAGE_TYPE_SEND_CONF,
    MESSAGE_TYPE_SEND_REQ,
    PRIORITY_NORMAL,
    RESPONSE_STATUS_OK,
    VALUE_NO,
    VALUE_YES,
)
from .logging_config import configure_logging, log  # noqa: F401

__all__ = [
    "CHARSET_UTF8",
    "CURRENT_MMS_VERSION",
    "MESSAGE_TYPE_ACKNOWLEDGE_IND",
    "MESSAGE_TYPE_NOTIFICATION_IND",
    "MESSAGE_TYPE_NOTIFYRESP_IND",
    "MESSAGE_TYPE_RETRIEVE_CONF",
    "MESSAGE_TYPE_SEND_CONF",
    "MESSAGE_TYPE_SEND_REQ",
    "PRIORITY_NORMAL",
    "RESPONSE_STATUS_OK",
    "VALUE_NO",
    "VALUE_YES",
    "configure_logging",
    "log",
]
