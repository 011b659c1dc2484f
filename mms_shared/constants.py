"""Shared MMS encapsulation constants used by the PDU, compat and CLI packages."""

MMS_VERSION_1_2 = 0x12
CURRENT_MMS_VERSION = MMS_VERSION_1_2

# Message types
MESSAGE_TYPE_SEND_REQ = 0x80
MESSAGE_TYPE_SEND_CONF = 0x81
MESSAGE_TYPE_NOTIFICATION_IND = 0x82
MESSAGE_TYPE_NOTIFYRESP_IND = 0x83
MESSAGE_TYPE_RETRIEVE_CONF = 0x84
MESSAGE_TYPE_ACKNOWLEDGE_IND = 0x85
MESSAGE_TYPE_DELIVERY_IND = 0x86

# Header field codes
BCC = 0x81
CC = 0x82
CONTENT_LOCATION = 0x83
CONTENT_TYPE = 0x84
DATE = 0x85
DELIVERY_REPORT = 0x86
DELIVERY_TIME = 0x87
EXPIRY = 0x88
FROM = 0x89
MESSAGE_CLASS = 0x8A
MESSAGE_ID = 0x8B
MESSAGE_TYPE = 0x8C
MMS_VERSION = 0x8D
MESSAGE_SIZE = 0x8E
PRIORITY = 0x8F
READ_REPORT = 0x90
REPORT_ALLOWED = 0x91
RESPONSE_STATUS = 0x92
RESPONSE_TEXT = 0x93
SENDER_VISIBILITY = 0x94
STATUS = 0x95
SUBJECT = 0x96
TO = 0x97
TRANSACTION_ID = 0x98

# Response status values
RESPONSE_STATUS_OK = 0x80
RESPONSE_STATUS_ERROR_UNSPECIFIED = 0x81
RESPONSE_STATUS_ERROR_SERVICE_DENIED = 0x82
RESPONSE_STATUS_ERROR_MESSAGE_FORMAT_CORRUPT = 0x83
RESPONSE_STATUS_ERROR_SENDING_ADDRESS_UNRESOLVED = 0x84
RESPONSE_STATUS_ERROR_MESSAGE_NOT_FOUND = 0x85
RESPONSE_STATUS_ERROR_NETWORK_PROBLEM = 0x86
RESPONSE_STATUS_ERROR_CONTENT_NOT_ACCEPTED = 0x87
RESPONSE_STATUS_ERROR_UNSUPPORTED_MESSAGE = 0x88

# Priority values
PRIORITY_LOW = 0x80
PRIORITY_NORMAL = 0x81
PRIORITY_HIGH = 0x82

# Yes/No values (delivery report, read report, report allowed)
VALUE_YES = 0x80
VALUE_NO = 0x81

# Message class values
MESSAGE_CLASS_PERSONAL = 0x80
MESSAGE_CLASS_ADVERTISEMENT = 0x81
MESSAGE_CLASS_INFORMATIONAL = 0x82
MESSAGE_CLASS_AUTO = 0x83

# Sender visibility values
SENDER_VISIBILITY_HIDE = 0x80
SENDER_VISIBILITY_SHOW = 0x81

# X-Mms-Status values (NotifyResp-Ind)
STATUS_EXPIRED = 0x80
STATUS_RETRIEVED = 0x81
STATUS_REJECTED = 0x82
STATUS_DEFERRED = 0x83
STATUS_UNRECOGNIZED = 0x84

# Part header codes (WSP well-known parameters / headers)
PART_CHARSET = 0x81
PART_NAME = 0x85
PART_FILENAME = 0x86
PART_CONTENT_LOCATION = 0x8E
PART_CONTENT_ID = 0xC0

# Charset MIBenum values
CHARSET_US_ASCII = 3
CHARSET_ISO_8859_1 = 4
CHARSET_UTF8 = 106
CHARSET_UCS2 = 1000
CHARSET_UTF16 = 1015
