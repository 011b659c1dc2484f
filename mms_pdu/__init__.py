"""MMS PDU model and binary codec."""

from .codec import PduFormatError, decode_pdu, decode_uintvar, encode_pdu, encode_uintvar  # noqa: F401
from .encoded_string import EncodedStringValue  # noqa: F401
from .headers import (  # noqa: F401
    header_name,
    message_class_name,
    message_type_name,
    priority_name,
    response_status_name,
)
from .parts import PduBody, PduPart  # noqa: F401
from .pdu import (  # noqa: F401
    AcknowledgeInd,
    GenericPdu,
    NotificationInd,
    NotifyRespInd,
    PduHeaderValues,
    RetrieveConf,
    SendConf,
    SendReq,
    pdu_class_for,
)

__all__ = [
    "AcknowledgeInd",
    "EncodedStringValue",
    "GenericPdu",
    "NotificationInd",
    "NotifyRespInd",
    "PduBody",
    "PduFormatError",
    "PduHeaderValues",
    "PduPart",
    "RetrieveConf",
    "SendConf",
    "SendReq",
    "decode_pdu",
    "decode_uintvar",
    "encode_pdu",
    "encode_uintvar",
    "header_name",
    "message_class_name",
    "message_type_name",
    "pdu_class_for",
    "priority_name",
    "response_status_name",
]
